from __future__ import annotations

from functools import total_ordering
from typing import Any, Iterable, List

from ._points import Point, as_points


@total_ordering
class Direction:
    """A 2D vector ordered by polar angle.

    The zero vector sorts first. All other vectors are ordered
    counter-clockwise starting from the positive x axis, i.e. by angle in
    [0, 2*pi). Two vectors on the same ray compare equal regardless of length.
    """

    __slots__ = ("x", "y")

    def __init__(self, x: Any, y: Any) -> None:
        self.x = x
        self.y = y

    def _half(self) -> int:
        if self.x == 0 and self.y == 0:
            return 0
        if self.y > 0 or (self.y == 0 and self.x > 0):
            return 1
        return 2

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Direction):
            return NotImplemented
        return self._half() == other._half() and self.x * other.y - self.y * other.x == 0

    def __lt__(self, other: "Direction") -> bool:
        if not isinstance(other, Direction):
            return NotImplemented
        ha, hb = self._half(), other._half()
        if ha != hb:
            return ha < hb
        return self.x * other.y - self.y * other.x > 0

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Direction({self.x!r}, {self.y!r})"


def sort_by_angle(points: Iterable[Point], origin: Point = (0, 0)) -> List[Point]:
    """Sort points counter-clockwise around ``origin`` (stable for equal rays)."""
    pts = as_points(points)
    ox, oy = origin
    return sorted(pts, key=lambda p: Direction(p[0] - ox, p[1] - oy))
