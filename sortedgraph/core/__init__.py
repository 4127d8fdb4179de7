"""
Core graph data structures and management.

This module contains the vertex and edge stores, the degree bookkeeping and
the pysortedgraph facade that ties them together.
"""

from .vertex_store import VertexStore
from .edge_store import EdgeStore
from .sortedgraph import pysortedgraph

__all__ = [
    'VertexStore',
    'EdgeStore',
    'pysortedgraph',
]
