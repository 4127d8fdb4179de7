"""
Edge record for the sorted graph.
"""

import math
from typing import Optional, Union


class pyedge:
    """
    A weighted directed arc owned by the edge list of its source vertex.

    Attributes:
        source: Arena index of the from vertex
        target: Arena index of the to vertex
        weight: Edge weight, part of the edge identity
        mirror: True for the reverse record of an undirected edge. Mirror
            records are not counted by the degree tracker.
        next_edge: Arena index of the next edge of the source, or None
    """

    def __init__(self, source: int, target: int, weight: float, index: int, mirror: bool = False):
        self.source = source
        self.target = target
        self.weight = float(weight)
        self.index = index
        self.mirror = mirror
        self.next_edge: Optional[int] = None

    def matches(self, target: int, weight: float) -> bool:
        # weights compare exactly, no tolerance; NaN matches NaN
        if self.target != target:
            return False
        return self.weight == weight or (math.isnan(self.weight) and math.isnan(weight))

    @property
    def weight_key(self) -> Union[float, str]:
        """Hashable form of the weight under which all NaNs are equal."""
        return "nan" if math.isnan(self.weight) else self.weight

    def __repr__(self) -> str:
        return (f"pyedge(source={self.source}, target={self.target}, "
                f"weight={self.weight}, mirror={self.mirror})")
