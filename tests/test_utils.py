import numpy as np

from sortedgraph import pysortedgraph, to_adjacency_matrix
from sortedgraph.classes.utils import comparator_from_key, natural_order, reverse_order


def test_natural_order() -> None:
    assert natural_order(1, 2) < 0
    assert natural_order(2, 2) == 0
    assert natural_order("b", "a") > 0


def test_comparator_from_key_and_reverse() -> None:
    by_length = comparator_from_key(len)
    assert by_length("aaa", "b") > 0
    assert reverse_order(by_length)("aaa", "b") < 0


def test_adjacency_matrix_directed(chain_abc: pysortedgraph) -> None:
    chain_abc.insert_edge("a", "b", 2.0)

    labels, matrix = to_adjacency_matrix(chain_abc)

    assert labels == ["a", "b", "c"]
    expected = np.array([
        [0.0, 3.0, 0.0],
        [0.0, 0.0, 1.0],
        [0.0, 0.0, 0.0],
    ])
    np.testing.assert_array_equal(matrix, expected)

    _, counts = to_adjacency_matrix(chain_abc, weighted=False)
    assert counts[0, 1] == 2.0


def test_adjacency_matrix_undirected_is_symmetric(undirected: pysortedgraph) -> None:
    for vertex in (3, 1, 2):
        undirected.insert_vertex(vertex)
    undirected.insert_edge(1, 3, 0.5)
    undirected.insert_edge(2, 3, 1.5)

    labels, matrix = to_adjacency_matrix(undirected)

    assert labels == [1, 2, 3]
    np.testing.assert_array_equal(matrix, matrix.T)
    assert matrix[0, 2] == 0.5


def test_adjacency_matrix_empty(directed: pysortedgraph) -> None:
    labels, matrix = to_adjacency_matrix(directed)

    assert labels == []
    assert matrix.shape == (0, 0)
