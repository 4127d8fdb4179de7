"""
Degree bookkeeping for edge records.

In-degree and out-degree are tracked for every record regardless of the graph
kind; only the query surface of the facade differs between directed and
undirected graphs.
"""

from ..classes.vertex import pyvertex


def record_added(source: pyvertex, target: pyvertex):
    """Account for a new edge record source -> target."""
    source.out_degree += 1
    target.in_degree += 1


def record_removed(source: pyvertex, target: pyvertex):
    """
    Account for the removal of an edge record source -> target.

    Callers must have verified that the record existed.
    """
    assert source.out_degree > 0, f"out-degree of {source.data!r} would go negative"
    assert target.in_degree > 0, f"in-degree of {target.data!r} would go negative"
    source.out_degree -= 1
    target.in_degree -= 1
