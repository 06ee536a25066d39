"""
Merge Hull Module
=================

Divide-and-conquer convex hull.

Algorithm:
    1. Sort points lexicographically, drop exact duplicates
    2. Split the sorted run in half until at most 2 points remain
    3. Leaves are trivial contours (a point or a segment)
    4. Merge sibling hulls bottom-up through their lower and upper
       common tangents

Complexity: O(n log n)

Design:
- Pure functions, no shared state (every merge builds a new Contour)
- Degenerate (collinear) hulls take a dedicated path
- Optional StructuredLogger for observability
"""

import logging
from typing import Any, Iterable, List, Optional, Sequence

import numpy as np

from mergehull.algorithms.tangents import find_tangent, set_leftmost, set_rightmost
from mergehull.geometry.contour import Contour, ContourBuilder, ContourCirculator
from mergehull.geometry.point import Point
from mergehull.logging import LogEvent, StructuredLogger


class InsufficientPointsError(ValueError):
    """Raised when fewer than 2 points are given to merge_hull"""
    pass


def _as_points(points: Any) -> List[Point]:
    if isinstance(points, np.ndarray):
        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(f"points must be Nx2 array, got shape {points.shape}")
        return [Point(x, y) for x, y in points.tolist()]
    return [Point.of(pt) for pt in points]


def merge_hull(points: Iterable[Any], logger: Optional[StructuredLogger] = None) -> Contour:
    """
    Compute the convex hull of a planar point set.

    Args:
        points: Points, 2-sequences, or an Nx2 numpy array
        logger: Optional structured logger

    Returns:
        Counter-clockwise Contour of hull vertices. Collinear input yields
        the full sorted run of distinct points on that line.

    Orientation tests are exact only for integer coordinates. Float input
    is accepted, but round-off in near-collinear triples can yield a hull
    that is slightly off; scale to integers when exactness matters.

    Raises:
        InsufficientPointsError: If fewer than 2 points are supplied
        TypeError, ValueError: If a point is malformed

    Example:
        >>> merge_hull([(0, 0), (2, 0), (1, 1), (1, 0)])
        Contour([Point(x=0, y=0), Point(x=2, y=0), Point(x=1, y=1)])
    """
    pts = _as_points(points)
    if len(pts) < 2:
        if logger is not None:
            logger.error(
                event=LogEvent.HULL_INPUT_REJECTED,
                message="Not enough points to build convex hull",
                metadata={'input_count': len(pts)},
            )
        raise InsufficientPointsError(
            f"not enough points to build convex hull, got {len(pts)}"
        )

    pts.sort()
    distinct = [pt for i, pt in enumerate(pts) if i == 0 or pt != pts[i - 1]]

    if logger is not None and len(distinct) < len(pts):
        logger.warning(
            event=LogEvent.HULL_DUPLICATES_DROPPED,
            message=f"Dropped {len(pts) - len(distinct)} duplicate points",
            metadata={'input_count': len(pts), 'distinct_count': len(distinct)},
        )

    if logger is not None:
        logger.info(
            event=LogEvent.HULL_STARTED,
            message=f"Building convex hull of {len(pts)} points",
            metadata={'input_count': len(pts), 'distinct_count': len(distinct)},
        )

    hull = _merge_hull_impl(distinct, 0, len(distinct), logger)

    if logger is not None:
        logger.info(
            event=LogEvent.HULL_COMPLETED,
            message=f"Convex hull has {hull.vertices_num()} vertices",
            metadata={
                'input_count': len(pts),
                'vertex_count': hull.vertices_num(),
                'degenerate': hull.is_degenerate(),
            },
        )

    return hull


def _merge_hull_impl(
    pts: Sequence[Point],
    begin: int,
    end: int,
    logger: Optional[StructuredLogger],
) -> Contour:
    if end - begin <= 2:
        builder = ContourBuilder()
        for pt in pts[begin:end]:
            builder.add_point(pt)
        return builder.get_result()

    middle = begin + (end - begin) // 2
    left_contour = _merge_hull_impl(pts, begin, middle, logger)
    right_contour = _merge_hull_impl(pts, middle, end, logger)

    return merge(left_contour, right_contour, logger)


def is_on_one_line(*contours: Contour) -> bool:
    """True if the concatenated points of all contours lie on a single line."""
    return Contour([pt for contour in contours for pt in contour]).is_degenerate()


def build_oneline_contour(a: Contour, b: Contour) -> Contour:
    """
    Join two collinear hulls into one run.

    Each hull is walked once around from its leftmost point, a first.
    """
    builder = ContourBuilder()
    for contour in (a, b):
        current = ContourCirculator(contour)
        set_leftmost(current)
        stop = current.copy().backward()

        while current != stop:
            builder.add_point(current.point)
            current.forward()
        builder.add_point(stop.point)

    return builder.get_result()


def _add_oneline_arc(builder: ContourBuilder, begin: ContourCirculator,
                     end: ContourCirculator) -> None:
    # Walk backward when end directly follows begin, otherwise forward.
    step = ContourCirculator.backward if begin.copy().forward() == end else ContourCirculator.forward

    arc = [begin.point]
    current = begin.copy()
    while current != end:
        step(current)
        arc.append(current.point)

    # Interior points of a straight arc lie between its ends.
    builder.add_point(arc[0])
    if len(arc) > 1:
        builder.add_point(arc[-1])


def _add_convex_arc(builder: ContourBuilder, begin: ContourCirculator,
                    end: ContourCirculator) -> None:
    current = begin.copy()
    while current != end:
        builder.add_point(current.point)
        current.forward()
    builder.add_point(end.point)


def _add_arc(builder: ContourBuilder, contour: Contour,
             begin: ContourCirculator, end: ContourCirculator) -> None:
    if is_on_one_line(contour):
        _add_oneline_arc(builder, begin, end)
    else:
        _add_convex_arc(builder, begin, end)


def merge(a: Contour, b: Contour, logger: Optional[StructuredLogger] = None) -> Contour:
    """
    Merge two hulls where every point of a sorts before every point of b.

    Args:
        a: Left hull
        b: Right hull
        logger: Optional structured logger (debug events only)

    Returns:
        New counter-clockwise Contour; a and b are left untouched
    """
    if is_on_one_line(a, b):
        merged = build_oneline_contour(a, b)
        if logger is not None and logger.is_enabled_for(logging.DEBUG):
            logger.debug(
                event=LogEvent.HULL_COLLINEAR_MERGE,
                message="Merged collinear hulls",
                metadata={'left_count': len(a), 'right_count': len(b),
                          'merged_count': len(merged)},
            )
        return merged

    circ_a = ContourCirculator(a)
    circ_b = ContourCirculator(b)

    # lower tangent
    set_rightmost(circ_a)
    set_leftmost(circ_b)
    find_tangent(circ_a, circ_b)
    a_down, b_down = circ_a.copy(), circ_b.copy()

    # upper tangent
    set_rightmost(circ_a)
    set_leftmost(circ_b)
    find_tangent(circ_b, circ_a)
    a_up, b_up = circ_a.copy(), circ_b.copy()

    builder = ContourBuilder()
    _add_arc(builder, a, a_up, a_down)
    _add_arc(builder, b, b_down, b_up)
    merged = builder.get_result()

    if logger is not None and logger.is_enabled_for(logging.DEBUG):
        logger.debug(
            event=LogEvent.HULL_MERGED,
            message="Merged hulls through common tangents",
            metadata={
                'left_count': len(a),
                'right_count': len(b),
                'merged_count': len(merged),
                'lower_tangent': [list(a_down.point.to_tuple()), list(b_down.point.to_tuple())],
                'upper_tangent': [list(b_up.point.to_tuple()), list(a_up.point.to_tuple())],
            },
        )

    return merged
