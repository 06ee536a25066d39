"""
Tangent Search Module
=====================

Supporting-line tests and circulator positioning used by the hull merge.

Design:
- Predicates are pure functions over points/contours
- find_tangent, set_leftmost and set_rightmost move the circulators they
  receive (cursor style) and return nothing
"""

from mergehull.geometry.contour import Contour, ContourCirculator
from mergehull.geometry.point import Point, Turn, turn


def is_tangent(p1: Point, p2: Point, contour: Contour) -> bool:
    """
    Check that no contour point lies strictly right of p1 -> p2.

    Args:
        p1: Line start
        p2: Line end
        contour: Hull to test against

    Returns:
        True if p1 -> p2 supports the whole contour from its right side
    """
    for pt in contour:
        if turn(p1, p2, pt) == Turn.RIGHT:
            return False

    return True


def is_tangent_point(p1: Point, p2: Point, p3: Point) -> bool:
    """Single-candidate form of is_tangent: p3 is not right of p1 -> p2."""
    return turn(p1, p2, p3) != Turn.RIGHT


def _holds_at_start(start: Point, end: Point, neighbour: Point) -> bool:
    # A collinear neighbour behind start means start is not a hull vertex.
    if not is_tangent_point(start, end, neighbour):
        return False
    if turn(start, end, neighbour) == Turn.COLLINEAR:
        return (neighbour - start).dot(end - start) >= 0
    return True


def _holds_at_end(start: Point, end: Point, neighbour: Point) -> bool:
    if not is_tangent_point(start, end, neighbour):
        return False
    if turn(start, end, neighbour) == Turn.COLLINEAR:
        return (neighbour - end).dot(start - end) >= 0
    return True


def find_tangent(start: ContourCirculator, end: ContourCirculator) -> None:
    """
    Walk two circulators until start -> end is a common tangent.

    start steps backward while its predecessor breaks tangency, end steps
    forward while its successor does. Moving one side can invalidate the
    other, so both conditions are re-checked until they hold together.

    On disjoint convex hulls with exact coordinates each circulator moves
    less than once around its contour. The walk stops after
    len(start contour) + len(end contour) steps, so round-off or
    non-convex input gives an imprecise tangent rather than a hang.

    For the lower tangent pass (hull A rightmost, hull B leftmost); for the
    upper tangent pass them swapped.
    """
    steps_left = len(start.contour) + len(end.contour)
    while (not _holds_at_start(start.point, end.point, start.prev_point)
           or not _holds_at_end(start.point, end.point, end.next_point)):
        while not _holds_at_start(start.point, end.point, start.prev_point):
            if steps_left == 0:
                return
            start.backward()
            steps_left -= 1
        while not _holds_at_end(start.point, end.point, end.next_point):
            if steps_left == 0:
                return
            end.forward()
            steps_left -= 1


def _is_single_point(current: ContourCirculator) -> bool:
    prev, nxt = current.copy().backward(), current.copy().forward()
    return prev == current and current == nxt


def set_leftmost(current: ContourCirculator) -> None:
    """Rotate current to the lexicographically smallest point."""
    if _is_single_point(current):
        return

    while not (current.point < current.prev_point
               and current.point < current.next_point):
        current.forward()


def set_rightmost(current: ContourCirculator) -> None:
    """Rotate current to the lexicographically largest point."""
    if _is_single_point(current):
        return

    while not (current.point > current.prev_point
               and current.point > current.next_point):
        current.forward()
