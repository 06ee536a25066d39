"""
Test Geometry Primitives
========================

Point ordering, orientation predicate, Contour, ContourBuilder and
ContourCirculator.

Usage:
    pytest test_geometry.py
"""

import numpy as np
import pytest

from mergehull import Contour, ContourBuilder, ContourCirculator, Point, Turn, turn
from mergehull.algorithms import is_tangent, is_tangent_point, set_leftmost, set_rightmost


def square():
    return Contour([Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)])


# ========== Point ==========

def test_point_order_is_lexicographic():
    assert Point(0, 5) < Point(1, -5)
    assert Point(1, 0) < Point(1, 1)
    assert not Point(1, 1) < Point(1, 1)
    assert sorted([Point(2, 0), Point(1, 1), Point(1, -1)]) == [
        Point(1, -1), Point(1, 1), Point(2, 0)
    ]


def test_point_vector_operations():
    a, b = Point(1, 2), Point(4, 6)
    assert b - a == Point(3, 4)
    assert Point(1, 0) ^ Point(0, 1) == 1
    assert Point(0, 1) ^ Point(1, 0) == -1
    assert Point(3, 4).dot(Point(2, -1)) == 2


def test_point_is_immutable():
    p = Point(1, 2)
    with pytest.raises(AttributeError):
        p.x = 5


def test_point_of_coerces_sequences():
    assert Point.of((1, 2)) == Point(1, 2)
    assert Point.of([3, 4]) == Point(3, 4)
    assert Point.of(np.array([5, 6])) == Point(5, 6)
    p = Point(7, 8)
    assert Point.of(p) is p


def test_point_of_rejects_malformed_values():
    with pytest.raises(ValueError):
        Point.of((1, 2, 3))
    with pytest.raises(TypeError):
        Point.of(5)
    with pytest.raises(TypeError):
        Point.of("xy")


# ========== Orientation ==========

def test_turn_classification():
    a, b = Point(0, 0), Point(2, 0)
    assert turn(a, b, Point(1, 1)) == Turn.LEFT
    assert turn(a, b, Point(1, -1)) == Turn.RIGHT
    assert turn(a, b, Point(5, 0)) == Turn.COLLINEAR
    assert turn(a, b, Point(-3, 0)) == Turn.COLLINEAR


def test_turn_reverses_with_direction():
    a, b, c = Point(0, 0), Point(3, 1), Point(1, 4)
    assert turn(a, b, c) == Turn.LEFT
    assert turn(b, a, c) == Turn.RIGHT


def test_turn_is_exact_for_large_integers():
    big = 10 ** 18
    assert turn(Point(0, 0), Point(big, big + 1), Point(big - 1, big)) == Turn.LEFT


# ========== Contour ==========

def test_contour_basic_access():
    contour = square()
    assert contour.vertices_num() == 4
    assert len(contour) == 4
    assert list(contour)[0] == Point(0, 0)
    assert contour[-1] == Point(0, 2)
    assert contour == square()
    assert hash(contour) == hash(square())


def test_contour_is_immutable():
    contour = square()
    with pytest.raises(AttributeError):
        contour.extra = 1
    with pytest.raises(TypeError):
        contour.points[0] = Point(9, 9)


def test_contour_rejects_empty_and_non_points():
    with pytest.raises(ValueError):
        Contour([])
    with pytest.raises(TypeError):
        Contour([(0, 0), (1, 1)])


def test_contour_degenerate_detection():
    assert Contour([Point(0, 0)]).is_degenerate()
    assert Contour([Point(0, 0), Point(1, 1)]).is_degenerate()
    assert Contour([Point(0, 0), Point(1, 1), Point(2, 2)]).is_degenerate()
    assert not square().is_degenerate()


def test_contour_array_conversion():
    array = square().to_array()
    assert array.shape == (4, 2)
    assert array.dtype == np.int64
    assert not array.flags.writeable
    assert Contour.from_array(array) == square()

    floats = Contour([Point(0.5, 0), Point(1, 1)]).to_array()
    assert floats.dtype == np.float64

    with pytest.raises(ValueError):
        Contour.from_array(np.zeros((3, 3)))


def test_contour_to_dict():
    assert Contour([Point(0, 0), Point(1, 2)]).to_dict() == {
        "vertices": [[0, 0], [1, 2]]
    }


# ========== ContourBuilder ==========

def test_builder_preserves_order():
    builder = ContourBuilder()
    for pt in [Point(0, 0), Point(3, 0), Point(1, 2)]:
        builder.add_point(pt)
    contour = builder.get_result()
    assert contour.points == (Point(0, 0), Point(3, 0), Point(1, 2))


def test_builder_is_single_use():
    builder = ContourBuilder()
    builder.add_point(Point(0, 0))
    builder.get_result()
    with pytest.raises(RuntimeError):
        builder.add_point(Point(1, 1))
    with pytest.raises(RuntimeError):
        builder.get_result()


def test_empty_builder_fails():
    with pytest.raises(ValueError):
        ContourBuilder().get_result()


# ========== ContourCirculator ==========

def test_circulator_wraps_both_ways():
    contour = square()
    circ = ContourCirculator(contour)
    assert circ.point == Point(0, 0)
    assert circ.prev_point == Point(0, 2)
    assert circ.next_point == Point(2, 0)

    circ.backward()
    assert circ.point == Point(0, 2)
    for _ in range(4):
        circ.forward()
    assert circ.point == Point(0, 2)


def test_circulator_copy_is_independent():
    circ = ContourCirculator(square())
    other = circ.copy()
    other.forward()
    assert circ.index == 0
    assert other.index == 1
    assert circ != other


def test_circulator_equality_needs_same_contour_object():
    a, b = square(), square()
    assert ContourCirculator(a) == ContourCirculator(a)
    assert ContourCirculator(a) != ContourCirculator(b)
    assert ContourCirculator(a, 1) == ContourCirculator(a, 5)


def test_circulator_distinguishes_positions_with_equal_values():
    contour = Contour([Point(1, 1), Point(1, 1)])
    first = ContourCirculator(contour, 0)
    second = ContourCirculator(contour, 1)
    assert first.point == second.point
    assert first != second


def test_circulator_is_unhashable():
    with pytest.raises(TypeError):
        hash(ContourCirculator(square()))


# ========== Tangent tests & extremal walks ==========

def test_is_tangent_against_contour():
    contour = square()
    assert is_tangent(Point(0, 0), Point(2, 0), contour)
    assert is_tangent(Point(-1, -1), Point(3, -1), contour)
    assert not is_tangent(Point(2, 0), Point(0, 0), contour)
    assert not is_tangent(Point(0, 1), Point(2, 1), contour)


def test_is_tangent_point():
    assert is_tangent_point(Point(0, 0), Point(2, 0), Point(1, 1))
    assert is_tangent_point(Point(0, 0), Point(2, 0), Point(3, 0))
    assert not is_tangent_point(Point(0, 0), Point(2, 0), Point(1, -1))


def test_set_leftmost_and_rightmost():
    contour = Contour([Point(2, 0), Point(3, 1), Point(2, 2), Point(0, 1)])
    circ = ContourCirculator(contour)
    set_leftmost(circ)
    assert circ.point == Point(0, 1)
    set_rightmost(circ)
    assert circ.point == Point(3, 1)


def test_extremal_walks_on_degenerate_contours():
    single = ContourCirculator(Contour([Point(4, 4)]))
    set_leftmost(single)
    set_rightmost(single)
    assert single.point == Point(4, 4)

    segment = ContourCirculator(Contour([Point(0, 0), Point(1, 5)]))
    set_rightmost(segment)
    assert segment.point == Point(1, 5)
    set_leftmost(segment)
    assert segment.point == Point(0, 0)
