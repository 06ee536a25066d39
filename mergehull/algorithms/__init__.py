"""
Algorithms Layer
================

Bounded Context: Convex hull construction.

Responsibilities:
- Tangent predicates and circulator positioning (tangents.py)
- Divide-and-conquer driver and hull merge (merge_hull.py)
"""

from mergehull.algorithms.tangents import (
    is_tangent,
    is_tangent_point,
    find_tangent,
    set_leftmost,
    set_rightmost,
)
from mergehull.algorithms.merge_hull import (
    InsufficientPointsError,
    merge_hull,
    merge,
    is_on_one_line,
    build_oneline_contour,
)

__all__ = [
    "is_tangent",
    "is_tangent_point",
    "find_tangent",
    "set_leftmost",
    "set_rightmost",
    "InsufficientPointsError",
    "merge_hull",
    "merge",
    "is_on_one_line",
    "build_oneline_contour",
]
