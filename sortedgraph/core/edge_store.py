"""
Per-vertex edge storage for the graph.

Each vertex owns an unordered singly-linked list of outgoing edge records.
Edge records live in their own arena and are linked by arena index. Every
forward record goes through the degree tracker so the in/out-degree counters
of both endpoints stay consistent with the stored edges. The reverse record
of an undirected edge is flagged as a mirror and left out of the counts.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from ..classes.edge import pyedge
from ..classes.vertex import pyvertex
from . import degrees
from .vertex_store import VertexStore

logger = logging.getLogger(__name__)


class EdgeStore:
    """
    Edge lists keyed by their owning (source) vertex.

    This class provides methods for:
    - Adding edge records without deduplication
    - Exact (target, weight) lookup and removal
    - Cascading removal of the edges incident to a vertex
    """

    def __init__(self, vertices: VertexStore):
        """
        Initialize an empty edge store.

        Args:
            vertices: VertexStore resolving the endpoint indexes of edges
        """
        self.vertices = vertices
        self.records: List[Optional[pyedge]] = []
        self.free_slots: List[int] = []
        self.count = 0

    def iter_edges(self, vertex: pyvertex) -> Iterator[pyedge]:
        """Iterate over the outgoing edges of a vertex in list order."""
        current = vertex.first_edge
        while current is not None:
            edge = self.records[current]
            yield edge
            current = edge.next_edge

    def add_edge(self, source: pyvertex, target: pyvertex, weight: float, mirror: bool = False) -> pyedge:
        """
        Prepend a new edge record source -> target to the list of source.

        Deduplication is the caller's responsibility.

        Args:
            source: Vertex owning the new edge
            target: Destination vertex
            weight: Edge weight
            mirror: Mark the record as the reverse half of an undirected
                edge; its degrees are already counted by the forward half

        Returns:
            The new edge record
        """
        edge = self._allocate(source.index, target.index, weight, mirror)
        edge.next_edge = source.first_edge
        source.first_edge = edge.index
        if not mirror:
            degrees.record_added(source, target)
        self.count += 1
        logger.debug(f"Added edge {source.data!r} -> {target.data!r} (weight={edge.weight})")
        return edge

    def _find(self, source: pyvertex, target: pyvertex, weight: float) -> Tuple[Optional[pyedge], Optional[pyedge]]:
        previous = None
        for edge in self.iter_edges(source):
            if edge.matches(target.index, weight):
                return previous, edge
            previous = edge
        return None, None

    def find_edge(self, source: pyvertex, target: pyvertex, weight: float) -> bool:
        """Check whether the record source -> target with exactly this weight exists."""
        _, edge = self._find(source, target, weight)
        return edge is not None

    def remove_edge(self, source: pyvertex, target: pyvertex, weight: float) -> bool:
        """
        Remove one record source -> target with exactly this weight.

        Returns:
            True if a record was removed, False if none matched
        """
        previous, edge = self._find(source, target, weight)
        if edge is None:
            return False
        self._unlink(source, previous, edge)
        logger.debug(f"Removed edge {source.data!r} -> {target.data!r} (weight={edge.weight})")
        return True

    def remove_outgoing(self, vertex: pyvertex) -> int:
        """
        Remove every edge owned by a vertex.

        Returns:
            Number of records removed
        """
        removed = 0
        while vertex.first_edge is not None:
            self._unlink(vertex, None, self.records[vertex.first_edge])
            removed += 1
        return removed

    def remove_incoming(self, vertex: pyvertex, owners: Iterable[pyvertex]) -> int:
        """
        Remove every edge ending at a vertex by scanning the lists of owners.

        Args:
            vertex: Destination vertex whose incoming edges are dropped
            owners: Vertices whose edge lists are scanned

        Returns:
            Number of records removed
        """
        removed = 0
        for owner in owners:
            previous = None
            current = owner.first_edge
            while current is not None:
                edge = self.records[current]
                current = edge.next_edge
                if edge.target == vertex.index:
                    self._unlink(owner, previous, edge)
                    removed += 1
                else:
                    previous = edge
        return removed

    def clear(self):
        self.records.clear()
        self.free_slots.clear()
        self.count = 0

    def _unlink(self, source: pyvertex, previous: Optional[pyedge], edge: pyedge):
        if previous is None:
            source.first_edge = edge.next_edge
        else:
            previous.next_edge = edge.next_edge
        if not edge.mirror:
            degrees.record_removed(source, self.vertices.get(edge.target))
        self.records[edge.index] = None
        self.free_slots.append(edge.index)
        self.count -= 1

    def _allocate(self, source: int, target: int, weight: float, mirror: bool) -> pyedge:
        if self.free_slots:
            index = self.free_slots.pop()
            edge = pyedge(source, target, weight, index, mirror)
            self.records[index] = edge
        else:
            edge = pyedge(source, target, weight, len(self.records), mirror)
            self.records.append(edge)
        return edge
