"""
Utility functions for sortedgraph.

This module provides the comparator helpers used to order vertices and a dense
adjacency matrix export of a graph.
"""

import logging
from typing import Any, Callable, List, Tuple, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from ..core.sortedgraph import pysortedgraph

logger = logging.getLogger(__name__)

Comparator = Callable[[Any, Any], int]


def natural_order(a: Any, b: Any) -> int:
    """
    Compare two payloads by their natural ordering.

    Returns:
        A negative number, zero or a positive number when a is less than,
        equal to or greater than b
    """
    return (a > b) - (a < b)


def comparator_from_key(key: Callable[[Any], Any]) -> Comparator:
    """
    Build a comparator that orders payloads by key(payload).

    Args:
        key: Function extracting a naturally ordered value from a payload

    Returns:
        Comparator suitable for the graph constructor
    """
    def compare(a: Any, b: Any) -> int:
        return natural_order(key(a), key(b))

    return compare


def reverse_order(compare: Comparator = natural_order) -> Comparator:
    """Invert a comparator."""
    def compare_reversed(a: Any, b: Any) -> int:
        return compare(b, a)

    return compare_reversed


def to_adjacency_matrix(graph: "pysortedgraph", weighted: bool = True) -> Tuple[List[Any], np.ndarray]:
    """
    Export the stored edge records of a graph as a dense matrix.

    Rows and columns follow the sorted vertex order. Undirected graphs store
    both directions of every edge, so their matrix comes out symmetric.

    Args:
        graph: Graph to export
        weighted: If True, a cell holds the sum of the weights of the records
            between the two vertices, otherwise the number of records

    Returns:
        Tuple of (sorted vertex payloads, matrix of shape (size, size))
    """
    vertices = graph.vertex_store
    positions = {}
    labels = []
    for position, vertex in enumerate(vertices):
        positions[vertex.index] = position
        labels.append(vertex.data)

    matrix = np.zeros((len(labels), len(labels)), dtype=np.float64)
    for vertex in vertices:
        row = positions[vertex.index]
        for edge in graph.edge_store.iter_edges(vertex):
            column = positions[edge.target]
            matrix[row, column] += edge.weight if weighted else 1.0

    logger.debug(f"Exported {len(labels)}x{len(labels)} adjacency matrix (weighted={weighted})")
    return labels, matrix
