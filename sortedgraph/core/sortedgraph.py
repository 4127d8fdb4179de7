"""
Main facade class for the sorted graph.

This module provides the pysortedgraph class, the public operation set of the
package. It locates vertices through the VertexStore and mutates the
EdgeStore and the degree counters together, one logical transaction per
call. Directed and undirected semantics are enforced here and nowhere else.
"""

import logging
from collections import Counter
from functools import cmp_to_key
from typing import Any, Iterator, List, Optional, Tuple

from ..classes.vertex import pyvertex
from ..classes.utils import Comparator, natural_order
from ..exceptions import GraphKindError, VertexNotFoundError
from .vertex_store import VertexStore
from .edge_store import EdgeStore

logger = logging.getLogger(__name__)


class pysortedgraph:
    """
    Comparator-ordered graph, directed or undirected.

    Vertices are unique under the comparator and kept in sorted order.
    Edges are weighted directed records identified by (from, to, weight).
    An undirected edge is stored as a forward record plus a mirror record,
    so every undirected insertion or deletion changes the edge count by two
    while the degree counters move once.

    Example:
        >>> graph = pysortedgraph(directed=True)
        >>> graph.insert_vertex(1)
        True
        >>> graph.insert_vertex(2)
        True
        >>> graph.insert_edge(1, 2, 1.0)
        True
        >>> graph.get_out_degree(1)
        1
    """

    def __init__(self, directed: bool, compare: Optional[Comparator] = None):
        """
        Initialize an empty graph.

        Args:
            directed: True for a directed graph, False for an undirected one.
                Fixed for the lifetime of the graph.
            compare: Comparator ordering the vertex payloads. Defaults to
                the natural order of the payload type.
        """
        self._directed = bool(directed)
        self.compare = compare if compare is not None else natural_order
        self.vertex_store = VertexStore(self.compare)
        self.edge_store = EdgeStore(self.vertex_store)
        self._edges = 0

    @property
    def is_directed(self) -> bool:
        return self._directed

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"pysortedgraph({kind}, size={self.size()}, edges={self._edges})"

    # ========================================================================
    # COUNTERS
    # ========================================================================

    def size(self) -> int:
        """Get the number of vertices in the graph."""
        return self.vertex_store.size

    def edge_count(self) -> int:
        """Get the number of edge records in the graph."""
        return self._edges

    def is_empty(self) -> bool:
        """Check if the graph has no vertices."""
        return self.vertex_store.head is None

    def __len__(self) -> int:
        return self.size()

    # ========================================================================
    # DEGREE QUERIES
    # ========================================================================

    def _require_vertex(self, data: Any) -> pyvertex:
        vertex = self.vertex_store.retrieve(data)
        if vertex is None:
            raise VertexNotFoundError(data)
        return vertex

    def get_in_degree(self, data: Any) -> int:
        """
        Get the in-degree of a vertex.

        Args:
            data: The payload of the vertex

        Returns:
            The in-degree of the vertex

        Raises:
            GraphKindError: If the graph is undirected
            VertexNotFoundError: If the vertex does not exist
        """
        if not self._directed:
            raise GraphKindError("Undirected graphs don't have in-degrees. Please use 'get_degree(data)'.")
        return self._require_vertex(data).in_degree

    def get_out_degree(self, data: Any) -> int:
        """
        Get the out-degree of a vertex.

        Args:
            data: The payload of the vertex

        Returns:
            The out-degree of the vertex

        Raises:
            GraphKindError: If the graph is undirected
            VertexNotFoundError: If the vertex does not exist
        """
        if not self._directed:
            raise GraphKindError("Undirected graphs don't have out-degrees. Please use 'get_degree(data)'.")
        return self._require_vertex(data).out_degree

    def get_degree(self, data: Any) -> int:
        """
        Get the degree of a vertex of an undirected graph.

        The value is 2 * out_degree + 2 * in_degree. Counters only track the
        forward record of each undirected edge, so every edge adds 2 to both
        of its endpoints.

        Raises:
            GraphKindError: If the graph is directed
            VertexNotFoundError: If the vertex does not exist
        """
        if self._directed:
            raise GraphKindError("Directed graphs have specific degrees. "
                                 "Please use 'get_in_degree(data)' or 'get_out_degree(data)'.")
        vertex = self._require_vertex(data)
        return (vertex.out_degree * 2) + (vertex.in_degree * 2)

    # ========================================================================
    # VERTEX OPERATIONS
    # ========================================================================

    def contains(self, data: Any) -> bool:
        """Check if the graph contains a vertex with the given payload."""
        return self.vertex_store.contains(data)

    def __contains__(self, data: Any) -> bool:
        return self.contains(data)

    def insert_vertex(self, data: Any) -> bool:
        """
        Insert a new vertex in sorted order.

        Returns:
            True if the vertex was added, False if it already exists
        """
        return self.vertex_store.insert(data)

    def delete_vertex(self, data: Any) -> bool:
        """
        Remove a vertex and every edge incident to it.

        Outgoing edges are dropped from the vertex's own list; incoming
        edges are found by scanning the lists of all remaining vertices.

        Returns:
            True if the vertex was removed, False if it does not exist
        """
        vertex = self.vertex_store.detach(data)
        if vertex is None:
            logger.debug(f"Cannot delete vertex {data!r}: not found")
            return False

        removed = self.edge_store.remove_outgoing(vertex)
        removed += self.edge_store.remove_incoming(vertex, self.vertex_store)
        self._edges -= removed
        self.vertex_store.release(vertex)

        logger.debug(f"Deleted vertex {data!r} with {removed} incident edge records")
        return True

    def vertices(self) -> List[Any]:
        """Get the vertex payloads in sorted order."""
        return [vertex.data for vertex in self.vertex_store]

    def __iter__(self) -> Iterator[Any]:
        for vertex in self.vertex_store:
            yield vertex.data

    def reset_marks(self):
        """Clear the accessed and processed flags of every vertex."""
        for vertex in self.vertex_store:
            vertex.reset_marks()

    # ========================================================================
    # EDGE OPERATIONS
    # ========================================================================

    def insert_edge(self, source: Any, target: Any, weight: float) -> bool:
        """
        Insert an edge between two existing vertices.

        For undirected graphs the mirrored record target -> source is added
        as well.

        Args:
            source: Payload of the from vertex
            target: Payload of the to vertex
            weight: The weight of the edge

        Returns:
            True if the edge was added, False if either vertex is missing or
            the edge (or, when undirected, its mirror) already exists
        """
        from_vertex = self.vertex_store.retrieve(source)
        to_vertex = self.vertex_store.retrieve(target)
        if from_vertex is None or to_vertex is None:
            logger.debug(f"Cannot insert edge {source!r} -> {target!r}: vertex not found")
            return False

        if self.edge_store.find_edge(from_vertex, to_vertex, weight):
            return False
        if not self._directed and self.edge_store.find_edge(to_vertex, from_vertex, weight):
            return False

        self.edge_store.add_edge(from_vertex, to_vertex, weight)
        self._edges += 1
        if not self._directed:
            self.edge_store.add_edge(to_vertex, from_vertex, weight, mirror=True)
            self._edges += 1
        return True

    def delete_edge(self, source: Any, target: Any, weight: float) -> bool:
        """
        Delete an edge, and its mirror for undirected graphs.

        Returns:
            True if the edge was deleted, False if either vertex or the edge
            does not exist
        """
        from_vertex = self.vertex_store.retrieve(source)
        to_vertex = self.vertex_store.retrieve(target)
        if from_vertex is None or to_vertex is None:
            return False

        if not self.edge_store.find_edge(from_vertex, to_vertex, weight):
            return False

        self.edge_store.remove_edge(from_vertex, to_vertex, weight)
        self._edges -= 1
        if not self._directed:
            mirrored = self.edge_store.remove_edge(to_vertex, from_vertex, weight)
            assert mirrored, f"missing mirror of undirected edge {source!r} - {target!r}"
            self._edges -= 1
        return True

    def has_edge(self, source: Any, target: Any, weight: float) -> bool:
        """Check whether the record source -> target with exactly this weight exists."""
        from_vertex = self.vertex_store.retrieve(source)
        to_vertex = self.vertex_store.retrieve(target)
        if from_vertex is None or to_vertex is None:
            return False
        return self.edge_store.find_edge(from_vertex, to_vertex, weight)

    def edges_from(self, data: Any) -> List[Tuple[Any, Any, float]]:
        """
        Get the outgoing edge records of a vertex in list order.

        Raises:
            VertexNotFoundError: If the vertex does not exist
        """
        vertex = self._require_vertex(data)
        return [(vertex.data, self.vertex_store.get(edge.target).data, edge.weight)
                for edge in self.edge_store.iter_edges(vertex)]

    def neighbors(self, data: Any) -> List[Any]:
        """
        Get the distinct targets of the outgoing edges of a vertex, sorted.

        Raises:
            VertexNotFoundError: If the vertex does not exist
        """
        vertex = self._require_vertex(data)
        targets = {edge.target for edge in self.edge_store.iter_edges(vertex)}
        payloads = [self.vertex_store.get(index).data for index in targets]
        return sorted(payloads, key=cmp_to_key(self.compare))

    def edge_list(self) -> List[Tuple[Any, Any, float]]:
        """
        Get every edge record ordered by from vertex, to vertex, then weight.
        """
        records = []
        for vertex in self.vertex_store:
            records.extend(
                (vertex.data, self.vertex_store.get(edge.target).data, edge.weight)
                for edge in self.edge_store.iter_edges(vertex))

        def compare_records(a, b):
            order = self.compare(a[0], b[0])
            if order != 0:
                return order
            order = self.compare(a[1], b[1])
            if order != 0:
                return order
            return natural_order(a[2], b[2])

        return sorted(records, key=cmp_to_key(compare_records))

    def clear(self):
        """Remove every vertex and edge."""
        self.vertex_store.clear()
        self.edge_store.clear()
        self._edges = 0
        logger.debug("Cleared graph")

    # ========================================================================
    # CONSISTENCY
    # ========================================================================

    def check_invariants(self):
        """
        Assert the structural invariants of the graph.

        Raises:
            AssertionError: If the vertex chain is unsorted or holds
                duplicates, a counter disagrees with the stored records, or
                an edge references a vertex that is no longer in the graph
        """
        chain = list(self.vertex_store)
        assert len(chain) == self.vertex_store.size, "size does not match the vertex chain"
        for previous, current in zip(chain, chain[1:]):
            assert self.compare(previous.data, current.data) < 0, \
                f"vertex chain not strictly increasing at {previous.data!r}, {current.data!r}"

        live = {vertex.index for vertex in chain}
        in_degree: Counter = Counter()
        out_degree: Counter = Counter()
        forward: Counter = Counter()
        mirrors: Counter = Counter()
        for vertex in chain:
            for edge in self.edge_store.iter_edges(vertex):
                assert edge.source == vertex.index, "edge stored in the list of another vertex"
                assert edge.target in live, "edge references a deleted vertex"
                if edge.mirror:
                    mirrors[(edge.target, edge.source, edge.weight_key)] += 1
                    continue
                out_degree[edge.source] += 1
                in_degree[edge.target] += 1
                forward[(edge.source, edge.target, edge.weight_key)] += 1

        total = sum(forward.values()) + sum(mirrors.values())
        assert total == self._edges == self.edge_store.count, "edge counter does not match stored records"
        for vertex in chain:
            assert vertex.in_degree == in_degree[vertex.index], f"in-degree mismatch on {vertex.data!r}"
            assert vertex.out_degree == out_degree[vertex.index], f"out-degree mismatch on {vertex.data!r}"

        if self._directed:
            assert not mirrors, "mirror record in a directed graph"
        else:
            assert forward == mirrors, "undirected edge without mirror"
