import pytest

from sortedgraph import pysortedgraph


@pytest.fixture
def directed() -> pysortedgraph:
    return pysortedgraph(directed=True)


@pytest.fixture
def undirected() -> pysortedgraph:
    return pysortedgraph(directed=False)


@pytest.fixture
def chain_abc(directed: pysortedgraph) -> pysortedgraph:
    """Directed graph a -> b -> c."""
    for vertex in ("a", "b", "c"):
        directed.insert_vertex(vertex)
    directed.insert_edge("a", "b", 1.0)
    directed.insert_edge("b", "c", 1.0)
    return directed
