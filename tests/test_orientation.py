from fractions import Fraction

import pytest

from geokernel.geometry import (
    Direction,
    clockwise,
    clockwise_or_collinear,
    counterclockwise,
    counterclockwise_or_collinear,
    cross,
    get_turn_predicate,
    sort_by_angle,
)


def test_cross_sign():
    assert cross((0, 0), (1, 0), (0, 1)) == 1
    assert cross((0, 0), (0, 1), (1, 0)) == -1
    assert cross((0, 0), (1, 1), (2, 2)) == 0


def test_cross_is_exact_for_large_ints():
    big = 10**18
    assert cross((0, 0), (big, big + 1), (big + 1, big + 2)) == -1


def test_cross_with_fractions():
    o, a, b = (Fraction(0), Fraction(0)), (Fraction(1, 3), Fraction(1, 3)), (Fraction(2, 3), Fraction(2, 3))
    assert cross(o, a, b) == 0


def test_turn_predicates_strict_and_inclusive():
    o, a = (0, 0), (1, 0)
    left, right, on = (1, 1), (1, -1), (2, 0)
    assert counterclockwise(o, a, left) and not counterclockwise(o, a, on)
    assert counterclockwise_or_collinear(o, a, on) and not counterclockwise_or_collinear(o, a, right)
    assert clockwise(o, a, right) and not clockwise(o, a, on)
    assert clockwise_or_collinear(o, a, on) and not clockwise_or_collinear(o, a, left)


def test_get_turn_predicate():
    assert get_turn_predicate("clockwise") is clockwise
    with pytest.raises(KeyError):
        get_turn_predicate("widdershins")


def test_direction_order():
    assert Direction(2, 1) < Direction(1, 2)
    assert Direction(2, 1) < Direction(-1, 2)
    assert Direction(2, 1) < Direction(-1, -2)
    assert Direction(2, 1) < Direction(1, -2)
    assert Direction(-3, 1) < Direction(-1, 0)
    assert Direction(-1, 0) > Direction(3, 0)
    assert Direction(-3, 3) < Direction(1, -1)


def test_direction_zero_first_and_same_ray_equal():
    assert Direction(0, 0) < Direction(1, 0)
    assert Direction(0, 0) == Direction(0, 0)
    assert Direction(1, 1) == Direction(3, 3)
    assert Direction(1, 1) != Direction(-1, -1)


def test_sort_by_angle():
    pts = [(0, -1), (-1, 0), (0, 1), (1, 0), (1, 1)]
    assert sort_by_angle(pts) == [(1, 0), (1, 1), (0, 1), (-1, 0), (0, -1)]
    assert sort_by_angle([(3, 2), (1, 2)], origin=(2, 1)) == [(3, 2), (1, 2)]
