"""
Sorted vertex storage for the graph.

Vertices are kept in an arena and chained in strictly increasing comparator
order through arena indexes. Lookups are ordered linear scans; there is no
hash index over the payloads.
"""

import logging
from typing import Any, Iterator, List, Optional, Tuple

from ..classes.vertex import pyvertex
from ..classes.utils import Comparator

logger = logging.getLogger(__name__)


class VertexStore:
    """
    Ordered singly-linked sequence of vertices.

    This class provides:
    - Ordered search that stops at the would-be position of a payload
    - Sorted insertion without duplicates
    - Unlinking of vertices and recycling of their arena slots
    """

    def __init__(self, compare: Comparator):
        """
        Initialize an empty vertex store.

        Args:
            compare: Comparator ordering the vertex payloads
        """
        self.compare = compare
        self.records: List[Optional[pyvertex]] = []
        self.free_slots: List[int] = []
        self.head: Optional[int] = None
        self.size = 0

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[pyvertex]:
        current = self.head
        while current is not None:
            vertex = self.records[current]
            yield vertex
            current = vertex.next_vertex

    def get(self, index: int) -> pyvertex:
        """
        Get a live vertex by its arena index.

        Raises:
            IndexError: If the slot is empty
        """
        vertex = self.records[index]
        if vertex is None:
            raise IndexError(f"Vertex slot {index} is empty")
        return vertex

    def _locate(self, data: Any) -> Tuple[Optional[pyvertex], Optional[pyvertex]]:
        """
        Find the position of a payload in the chain.

        Returns:
            Tuple of (predecessor, candidate) where candidate is the first
            vertex not less than data, either of which may be None
        """
        previous = None
        current = self.head
        while current is not None:
            vertex = self.records[current]
            if self.compare(data, vertex.data) <= 0:
                return previous, vertex
            previous = vertex
            current = vertex.next_vertex
        return previous, None

    def retrieve(self, data: Any) -> Optional[pyvertex]:
        """
        Retrieve the vertex holding data, if it exists.

        Args:
            data: The payload to look up

        Returns:
            The vertex, or None if not found
        """
        _, candidate = self._locate(data)
        if candidate is None or self.compare(data, candidate.data) != 0:
            return None
        return candidate

    def contains(self, data: Any) -> bool:
        """Check if a vertex with the given payload is stored."""
        if self.head is None:
            return False
        return self.retrieve(data) is not None

    def insert(self, data: Any) -> bool:
        """
        Insert a new vertex in sorted position.

        Args:
            data: The payload of the new vertex

        Returns:
            True if the vertex was added, False if an equal payload exists
        """
        previous, candidate = self._locate(data)
        if candidate is not None and self.compare(data, candidate.data) == 0:
            logger.debug(f"Vertex {data!r} already present")
            return False

        vertex = self._allocate(data)
        vertex.next_vertex = candidate.index if candidate is not None else None
        if previous is None:
            self.head = vertex.index
        else:
            previous.next_vertex = vertex.index

        self.size += 1
        logger.debug(f"Inserted vertex {data!r} at slot {vertex.index}")
        return True

    def detach(self, data: Any) -> Optional[pyvertex]:
        """
        Unlink the vertex holding data from the chain.

        The arena slot stays reserved until release() is called, so edge
        records pointing at the vertex can still be resolved while they are
        being removed.

        Returns:
            The unlinked vertex, or None if not found
        """
        previous, candidate = self._locate(data)
        if candidate is None or self.compare(data, candidate.data) != 0:
            return None

        if previous is None:
            self.head = candidate.next_vertex
        else:
            previous.next_vertex = candidate.next_vertex
        candidate.next_vertex = None

        self.size -= 1
        logger.debug(f"Detached vertex {data!r} from slot {candidate.index}")
        return candidate

    def release(self, vertex: pyvertex):
        """Return the arena slot of a detached vertex to the free list."""
        assert vertex.first_edge is None, "released vertex still owns edges"
        self.records[vertex.index] = None
        self.free_slots.append(vertex.index)

    def clear(self):
        self.records.clear()
        self.free_slots.clear()
        self.head = None
        self.size = 0

    def _allocate(self, data: Any) -> pyvertex:
        if self.free_slots:
            index = self.free_slots.pop()
            vertex = pyvertex(data, index)
            self.records[index] = vertex
        else:
            vertex = pyvertex(data, len(self.records))
            self.records.append(vertex)
        return vertex
