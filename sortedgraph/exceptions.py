"""
Exceptions raised by the graph facade for caller usage errors.

Expected negative outcomes (duplicate inserts, deleting something absent) are
reported through boolean return values instead.
"""


class GraphError(Exception):
    """Base exception for graph usage errors."""

    pass


class GraphKindError(GraphError):
    """Raised when a query is not defined for the graph kind (directed or undirected)."""

    pass


class VertexNotFoundError(GraphError, KeyError):
    """Raised when a query names a vertex that is not in the graph."""

    def __init__(self, data):
        super().__init__(data)
        self.data = data

    def __str__(self) -> str:
        return f"Vertex: {self.data} does not exist."
