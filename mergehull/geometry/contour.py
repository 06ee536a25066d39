"""
Contour Module
==============

Convex polygon boundaries and cyclic traversal over them.

Design:
- Contour is immutable (tuple of points, frozen after construction)
- ContourBuilder accumulates points, then freezes them once
- ContourCirculator is a mutable cursor (contour reference + index)
  that wraps at both ends
"""

from typing import Dict, Iterable, Iterator, List, Tuple

import numpy as np

from mergehull.geometry.point import Point, Turn, turn


class Contour:
    """
    Immutable boundary of a convex polygon, traversed counter-clockwise.

    The last point is adjacent to the first; there is no closing duplicate.
    One- and two-point contours, and runs of collinear points, are valid
    degenerate hulls.

    Attributes:
        points: Tuple of vertices in traversal order
    """

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Point]):
        pts = tuple(points)
        if not pts:
            raise ValueError("Contour must have at least 1 point")
        for pt in pts:
            if not isinstance(pt, Point):
                raise TypeError(f"Contour points must be Point, got {type(pt).__name__}")
        object.__setattr__(self, "_points", pts)

    def __setattr__(self, name, value):
        raise AttributeError("Contour is immutable")

    @property
    def points(self) -> Tuple[Point, ...]:
        return self._points

    def vertices_num(self) -> int:
        return len(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index):
        return self._points[index]

    def __eq__(self, other):
        if not isinstance(other, Contour):
            return NotImplemented
        return self._points == other._points

    def __hash__(self):
        return hash(self._points)

    def __repr__(self):
        return f"Contour({list(self._points)!r})"

    def is_degenerate(self) -> bool:
        """True for 1-2 points or any collinear run (no polygon interior)."""
        pts = self._points
        if len(pts) <= 2:
            return True
        return all(
            turn(pts[i], pts[i + 1], pts[i + 2]) == Turn.COLLINEAR
            for i in range(len(pts) - 2)
        )

    def to_array(self) -> np.ndarray:
        """
        Vertices as a read-only Nx2 array.

        Integer coordinates give an int64 array, anything else float64.
        """
        coords = [pt.to_tuple() for pt in self._points]
        integral = all(
            isinstance(c, (int, np.integer)) and not isinstance(c, bool)
            for xy in coords for c in xy
        )
        array = np.array(coords, dtype=np.int64 if integral else np.float64)
        array.flags.writeable = False
        return array

    @classmethod
    def from_array(cls, vertices: np.ndarray) -> "Contour":
        """
        Build a contour from an already-ordered Nx2 array.

        Raises:
            ValueError: If vertices is not an Nx2 array with N >= 1
        """
        vertices = np.asarray(vertices)
        if vertices.ndim != 2 or vertices.shape[1] != 2:
            raise ValueError(f"vertices must be Nx2 array, got shape {vertices.shape}")
        return cls(Point(x, y) for x, y in vertices.tolist())

    def to_dict(self) -> Dict[str, List[List[float]]]:
        """Serialize to JSON-compatible dict."""
        return {"vertices": [[pt.x, pt.y] for pt in self._points]}


class ContourBuilder:
    """
    Single-use accumulator that freezes collected points into a Contour.

    Example:
        >>> builder = ContourBuilder()
        >>> builder.add_point(Point(0, 0))
        >>> builder.add_point(Point(1, 0))
        >>> builder.get_result()
        Contour([Point(x=0, y=0), Point(x=1, y=0)])
    """

    def __init__(self):
        self._points: List[Point] = []
        self._finished = False

    def add_point(self, pt: Point) -> None:
        if self._finished:
            raise RuntimeError("ContourBuilder already produced its contour")
        self._points.append(pt)

    def get_result(self) -> Contour:
        """
        Freeze collected points into a Contour.

        Raises:
            RuntimeError: If called twice
            ValueError: If no points were added
        """
        if self._finished:
            raise RuntimeError("ContourBuilder already produced its contour")
        self._finished = True
        points, self._points = self._points, []
        return Contour(points)


class ContourCirculator:
    """
    Cyclic cursor over a contour's points.

    Stepping past either end wraps around, so a walk can start anywhere and
    continue indefinitely in both directions. Two circulators are equal only
    when they borrow the same Contour object and sit at the same index;
    equal point values at different positions are different positions.

    Example:
        >>> circ = ContourCirculator(contour)
        >>> circ.backward().point == contour[-1]
        True
    """

    __slots__ = ("_contour", "_index")
    __hash__ = None

    def __init__(self, contour: Contour, index: int = 0):
        self._contour = contour
        self._index = index % len(contour)

    @property
    def contour(self) -> Contour:
        return self._contour

    @property
    def index(self) -> int:
        return self._index

    @property
    def point(self) -> Point:
        return self._contour[self._index]

    @property
    def next_point(self) -> Point:
        return self._contour[(self._index + 1) % len(self._contour)]

    @property
    def prev_point(self) -> Point:
        return self._contour[(self._index - 1) % len(self._contour)]

    def forward(self) -> "ContourCirculator":
        self._index = (self._index + 1) % len(self._contour)
        return self

    def backward(self) -> "ContourCirculator":
        self._index = (self._index - 1) % len(self._contour)
        return self

    def copy(self) -> "ContourCirculator":
        return ContourCirculator(self._contour, self._index)

    def __eq__(self, other):
        if not isinstance(other, ContourCirculator):
            return NotImplemented
        return self._contour is other._contour and self._index == other._index

    def __repr__(self):
        return f"ContourCirculator(index={self._index}, point={self.point!r})"
