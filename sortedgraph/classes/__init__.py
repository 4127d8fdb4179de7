"""
Core data classes for the sorted graph.

This module contains the vertex and edge records stored in the graph arenas
and the comparator helpers.
"""

from .vertex import pyvertex
from .edge import pyedge
from .utils import natural_order, comparator_from_key, reverse_order, to_adjacency_matrix

__all__ = [
    'pyvertex',
    'pyedge',
    'natural_order',
    'comparator_from_key',
    'reverse_order',
    'to_adjacency_matrix',
]
