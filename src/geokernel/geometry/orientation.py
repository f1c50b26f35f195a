"""Orientation kernel: signed area and turn predicates.

No tolerance is applied. Integer and Fraction coordinates are exact; float
callers accept the usual rounding behaviour of the cross product.
"""

from __future__ import annotations

from typing import Callable, Dict

from ._points import Point

TurnPredicate = Callable[[Point, Point, Point], bool]


def cross(o: Point, a: Point, b: Point):
    """Twice the signed area of triangle (o, a, b).

    Positive for a counter-clockwise turn, negative for clockwise, zero when
    the three points are collinear.
    """
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def clockwise(o: Point, a: Point, b: Point) -> bool:
    return cross(o, a, b) < 0


def clockwise_or_collinear(o: Point, a: Point, b: Point) -> bool:
    return cross(o, a, b) <= 0


def counterclockwise(o: Point, a: Point, b: Point) -> bool:
    return cross(o, a, b) > 0


def counterclockwise_or_collinear(o: Point, a: Point, b: Point) -> bool:
    return cross(o, a, b) >= 0


TURN_PREDICATES: Dict[str, TurnPredicate] = {
    "clockwise": clockwise,
    "clockwise_or_collinear": clockwise_or_collinear,
    "counterclockwise": counterclockwise,
    "counterclockwise_or_collinear": counterclockwise_or_collinear,
}


def get_turn_predicate(name: str) -> TurnPredicate:
    """Look up a turn predicate by name (used by config-driven scripts)."""
    try:
        return TURN_PREDICATES[name]
    except KeyError as e:
        raise KeyError(f"Unknown turn predicate: {name!r}. Expected one of {sorted(TURN_PREDICATES)}") from e
