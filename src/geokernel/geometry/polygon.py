from __future__ import annotations

from typing import Any, Tuple

from ._points import Point, as_points
from .orientation import cross


def polygon_area(poly: Any):
    """Area of a simple polygon (shoelace formula). Fewer than 3 vertices -> 0."""
    pts = as_points(poly)
    n = len(pts)
    if n < 3:
        return 0
    twice = 0
    for i in range(n):
        x0, y0 = pts[i]
        x1, y1 = pts[(i + 1) % n]
        twice += x0 * y1 - y0 * x1
    return abs(twice) / 2


def polygon_bounds(poly: Any) -> Tuple[Any, Any, Any, Any]:
    """Return (minX, maxX, minY, maxY); NaNs for an empty polygon."""
    pts = as_points(poly)
    if not pts:
        return (float("nan"),) * 4
    xs = [p[0] for p in pts]
    ys = [p[1] for p in pts]
    return min(xs), max(xs), min(ys), max(ys)


def point_in_convex_polygon(p: Point, poly: Any, eps: float = 0.0) -> bool:
    """Check if point is inside/on a convex polygon given in CCW order.

    ``eps`` defaults to 0 so integer input is decided exactly. Degenerate
    polygons (a point or a segment, as returned by ``convex_hull`` for
    degenerate input) are handled as such.
    """
    pts = as_points(poly)
    p = (p[0], p[1])
    if not pts:
        return False
    if len(pts) == 1:
        return p == pts[0]
    if len(pts) == 2:
        a, b = pts
        return (
            cross(a, b, p) == 0
            and min(a[0], b[0]) <= p[0] <= max(a[0], b[0])
            and min(a[1], b[1]) <= p[1] <= max(a[1], b[1])
        )

    n = len(pts)
    for i in range(n):
        if cross(pts[i], pts[(i + 1) % n], p) < -eps:
            return False
    return True
