"""
Vertex record for the sorted graph.

A vertex lives in the vertex arena of a VertexStore and is linked to its
successor in comparator order through an arena index.
"""

from typing import Any, Optional


class pyvertex:
    """
    A single vertex of the graph.

    Attributes:
        data: The payload identifying this vertex
        index: Stable arena slot of this record
        in_degree: Number of edge records ending at this vertex
        out_degree: Number of edge records starting at this vertex
        accessed: Traversal flag, reset to False on creation
        processed: Traversal flag, reset to False on creation
        first_edge: Arena index of the first outgoing edge, or None
        next_vertex: Arena index of the next vertex in sorted order, or None
    """

    def __init__(self, data: Any, index: int):
        self.data = data
        self.index = index
        self.in_degree = 0
        self.out_degree = 0
        self.accessed = False
        self.processed = False
        self.first_edge: Optional[int] = None
        self.next_vertex: Optional[int] = None

    def reset_marks(self):
        """Clear the traversal flags."""
        self.accessed = False
        self.processed = False

    def __repr__(self) -> str:
        return (f"pyvertex(data={self.data!r}, in_degree={self.in_degree}, "
                f"out_degree={self.out_degree})")
