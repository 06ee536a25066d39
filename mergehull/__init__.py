"""
MergeHull v1.0
==============

Bounded Context: Planar convex hulls by divide and conquer.

Architecture:

    mergehull/
    ├── geometry/          # Pure primitives (immutable, stateless)
    │   ├── point.py       # Point, Turn, turn()
    │   └── contour.py     # Contour, ContourBuilder, ContourCirculator
    │
    ├── algorithms/        # Hull construction
    │   ├── tangents.py    # Tangent tests, find_tangent, extremal walks
    │   └── merge_hull.py  # merge_hull driver, merge, collinear fallback
    │
    ├── logging/           # Structured JSON logs
    ├── rendering/         # HullVisualizer (stateless drawing)
    └── config.py          # HullConfig, RenderConfig (YAML)

Usage:

    from mergehull import merge_hull, Point

    hull = merge_hull([(0, 0), (1, 1), (2, 0), (1, -1)])
    hull.points
    # (Point(x=0, y=0), Point(x=1, y=-1), Point(x=2, y=0), Point(x=1, y=1))

    # numpy input works too
    hull = merge_hull(np.array([[0, 0], [4, 0], [2, 3], [2, 1]]))
    hull.to_array()
"""

# Geometry Layer (immutable, stateless)
from mergehull.geometry.point import Point, Turn, turn
from mergehull.geometry.contour import Contour, ContourBuilder, ContourCirculator

# Algorithms
from mergehull.algorithms.merge_hull import InsufficientPointsError, merge_hull

__all__ = [
    # Geometry
    "Point",
    "Turn",
    "turn",
    "Contour",
    "ContourBuilder",
    "ContourCirculator",
    # Algorithms
    "InsufficientPointsError",
    "merge_hull",
]

__version__ = "1.0.0"
