import random

from sortedgraph.classes.utils import natural_order, reverse_order
from sortedgraph.core.vertex_store import VertexStore


def _payloads(store: VertexStore) -> list:
    return [vertex.data for vertex in store]


# --- Ordering and uniqueness ---


def test_insert_keeps_sorted_order() -> None:
    store = VertexStore(natural_order)
    values = list(range(20))
    random.Random(7).shuffle(values)

    for value in values:
        assert store.insert(value)

    assert _payloads(store) == sorted(values)
    assert len(store) == 20


def test_insert_head_middle_tail() -> None:
    store = VertexStore(natural_order)
    assert store.insert(5)
    assert store.insert(1)
    assert store.insert(9)
    assert store.insert(7)

    assert _payloads(store) == [1, 5, 7, 9]
    assert store.records[store.head].data == 1


def test_duplicate_insert_rejected() -> None:
    store = VertexStore(natural_order)
    assert store.insert("x")
    assert not store.insert("x")
    assert store.size == 1


def test_uniqueness_uses_comparator_not_identity() -> None:
    store = VertexStore(lambda a, b: natural_order(a.lower(), b.lower()))
    assert store.insert("Apple")
    assert not store.insert("apple")
    assert store.retrieve("APPLE").data == "Apple"


def test_custom_comparator_order() -> None:
    store = VertexStore(reverse_order())
    for value in (2, 3, 1):
        store.insert(value)

    assert _payloads(store) == [3, 2, 1]


# --- Lookup ---


def test_contains_on_empty_store() -> None:
    store = VertexStore(natural_order)
    assert not store.contains(1)
    assert store.retrieve(1) is None


def test_retrieve_stops_at_would_be_position() -> None:
    calls = []

    def compare(a, b):
        calls.append(b)
        return natural_order(a, b)

    store = VertexStore(compare)
    for value in (10, 20, 30, 40):
        store.insert(value)
    calls.clear()

    assert store.retrieve(25) is None
    assert 40 not in calls


def test_retrieve_returns_record() -> None:
    store = VertexStore(natural_order)
    store.insert(3)
    vertex = store.retrieve(3)

    assert vertex.data == 3
    assert vertex.in_degree == 0
    assert vertex.out_degree == 0
    assert not vertex.accessed
    assert not vertex.processed
    assert vertex.first_edge is None


# --- Removal ---


def test_detach_unlinks_and_release_recycles_slot() -> None:
    store = VertexStore(natural_order)
    for value in (1, 2, 3):
        store.insert(value)

    vertex = store.detach(2)
    assert vertex.data == 2
    assert _payloads(store) == [1, 3]
    assert store.size == 2

    store.release(vertex)
    store.insert(4)
    assert store.retrieve(4).index == vertex.index


def test_detach_head_and_missing() -> None:
    store = VertexStore(natural_order)
    store.insert(1)
    store.insert(2)

    assert store.detach(0) is None
    head = store.detach(1)
    assert head.data == 1
    assert store.records[store.head].data == 2


def test_clear() -> None:
    store = VertexStore(natural_order)
    store.insert(1)
    store.clear()

    assert store.head is None
    assert len(store) == 0
    assert not store.contains(1)
