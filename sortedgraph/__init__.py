"""
SortedGraph - Comparator-Ordered Graph Library

A Python library providing a generic graph container for directed and
undirected graphs. Vertices are kept in a sorted singly-linked chain under a
user-supplied comparator and every vertex owns a singly-linked list of its
outgoing weighted edges. In-degree and out-degree counters are maintained on
every edge mutation.

Main Classes:
    pysortedgraph: Main graph class (facade)
    pyvertex: Vertex record
    pyedge: Edge record

Example:
    >>> from sortedgraph import pysortedgraph
    >>> graph = pysortedgraph(directed=False)
    >>> graph.insert_vertex("a")
    True
    >>> graph.insert_vertex("b")
    True
    >>> graph.insert_edge("a", "b", 2.5)
    True
    >>> graph.get_degree("a")
    2
"""

__version__ = "0.1.0"

from sortedgraph.classes.vertex import pyvertex
from sortedgraph.classes.edge import pyedge
from sortedgraph.classes.utils import natural_order, comparator_from_key, reverse_order, to_adjacency_matrix
from sortedgraph.core.sortedgraph import pysortedgraph
from sortedgraph.exceptions import GraphError, GraphKindError, VertexNotFoundError

__all__ = [
    'pysortedgraph',
    'pyvertex',
    'pyedge',
    'natural_order',
    'comparator_from_key',
    'reverse_order',
    'to_adjacency_matrix',
    'GraphError',
    'GraphKindError',
    'VertexNotFoundError',
]
