"""
Geometry Layer
==============

Bounded Context: Planar primitives the hull algorithm is built from.

Responsibilities:
- Point representation and ordering (immutable)
- Orientation predicate (turn)
- Contour storage, building and cyclic traversal
- NO hull logic, NO logging, NO drawing
"""

from mergehull.geometry.point import Point, Turn, turn
from mergehull.geometry.contour import Contour, ContourBuilder, ContourCirculator

__all__ = [
    "Point",
    "Turn",
    "turn",
    "Contour",
    "ContourBuilder",
    "ContourCirculator",
]
