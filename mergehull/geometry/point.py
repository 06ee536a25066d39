"""
Point & Orientation Module
==========================

Pure planar primitives - NO state, NO side effects.

Design:
- Immutable point (frozen dataclass pattern)
- Lexicographic order (x, then y) for sorting and extremal tests
- Cross product sign for turn classification
- Exact for integer coordinates
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np


@dataclass(frozen=True, order=True)
class Point:
    """
    Immutable 2D point, also used as a displacement vector.

    Ordering compares x first, then y (dataclass field order).

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate

    Example:
        >>> a, b = Point(0, 0), Point(2, 1)
        >>> b - a
        Point(x=2, y=1)
        >>> (b - a) ^ Point(0, 1)
        2
    """

    x: float
    y: float

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __xor__(self, other: "Point") -> float:
        """2D cross product of two displacements."""
        return self.x * other.y - self.y * other.x

    def dot(self, other: "Point") -> float:
        return self.x * other.x + self.y * other.y

    def to_tuple(self):
        return (self.x, self.y)

    @classmethod
    def of(cls, value: Any) -> "Point":
        """
        Coerce a point-like value to Point.

        Args:
            value: Point, or any 2-sequence (tuple, list, numpy row)

        Returns:
            Point instance

        Raises:
            TypeError: If value is not a sequence
            ValueError: If value does not hold exactly two coordinates
        """
        if isinstance(value, Point):
            return value
        if isinstance(value, np.ndarray):
            value = value.tolist()
        if isinstance(value, (str, bytes)) or not hasattr(value, "__len__"):
            raise TypeError(f"point must be a 2-sequence, got {type(value).__name__}")
        if len(value) != 2:
            raise ValueError(f"point must have exactly 2 coordinates, got {len(value)}")
        return cls(value[0], value[1])


class Turn(Enum):
    """Rotational direction of three ordered points."""

    COLLINEAR = 0
    LEFT = 1
    RIGHT = 2


def _sgn(value: float) -> int:
    if value == 0:
        return 0
    return -1 if value < 0 else 1


def turn(a: Point, b: Point, c: Point) -> Turn:
    """
    Classify where c lies relative to the directed line a -> b.

    Uses cross product: (b - a) x (c - a)

    Returns:
        Turn.LEFT: c strictly left of a -> b
        Turn.RIGHT: c strictly right of a -> b
        Turn.COLLINEAR: a, b, c on one line
    """
    sign = _sgn((b - a) ^ (c - a))

    if sign < 0:
        return Turn.RIGHT
    elif sign > 0:
        return Turn.LEFT
    else:
        return Turn.COLLINEAR
