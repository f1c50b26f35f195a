from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from ._points import Point, as_points
from .orientation import (
    TurnPredicate,
    counterclockwise,
    counterclockwise_or_collinear,
    cross,
)


def half_hull(points: Iterable[Point], turn: TurnPredicate) -> List[Point]:
    """Stack scan producing one monotone chain of the hull.

    ``points`` must already be sorted. Before pushing a point ``b`` the stack
    top is popped while the last two stack points ``o, a`` fail
    ``turn(o, a, b)``. Scanning left-to-right with ``counterclockwise`` gives
    the lower hull; scanning right-to-left with the same predicate gives the
    upper hull.
    """
    hull: List[Point] = []
    for b in points:
        while len(hull) >= 2 and not turn(hull[-2], hull[-1], b):
            hull.pop()
        hull.append(b)
    return hull


def _all_collinear(pts: Sequence[Point]) -> bool:
    o, a = pts[0], pts[1]
    return all(cross(o, a, p) == 0 for p in pts[2:])


def convex_hull(
    points: Any,
    key: Optional[Callable[[Point], Any]] = None,
    turn: TurnPredicate = counterclockwise,
) -> List[Point]:
    """Compute a 2D convex hull (Monotone chain).

    Parameters
    ----------
    points : sequence of (x, y) pairs or (N,2) array
    key : optional sort key; defaults to lexicographic (x, then y)
    turn : turn predicate kept by the stack scan. ``counterclockwise`` drops
        collinear boundary points, ``counterclockwise_or_collinear`` keeps them.

    Returns
    -------
    hull : list of points in CCW order, without the repeated first point.
        Duplicate input points appear once. Fewer than three distinct points,
        or all-collinear input, yield the single chain through them.
    """
    pts = list(dict.fromkeys(as_points(points)))
    pts.sort(key=key)
    if len(pts) <= 2:
        return pts
    if _all_collinear(pts):
        return half_hull(pts, turn)

    lower = half_hull(pts, turn)
    upper = half_hull(reversed(pts), turn)
    return lower[:-1] + upper[:-1]


def _half_hull_indices(pts: Sequence[Point], order: Iterable[int], turn: TurnPredicate) -> List[int]:
    stack: List[int] = []
    for k in order:
        while len(stack) >= 2 and not turn(pts[stack[-2]], pts[stack[-1]], pts[k]):
            stack.pop()
        stack.append(k)
    return stack


def convex_hull_indices(points: Any, include_collinear: bool = False) -> Tuple[List[Point], List[int]]:
    """Convex hull as indices into the lexicographically sorted input.

    Use this form when hull membership has to be mapped back to per-point
    data: sort your auxiliary arrays the same way (or keep the returned
    ``sorted_points``) and index them with the hull indices.

    Parameters
    ----------
    points : sequence of (x, y) pairs or (N,2) array
    include_collinear : keep points lying on hull edges

    Returns
    -------
    sorted_points : list of all input points, sorted, duplicates kept
    indices : hull vertices as indices into ``sorted_points``, CCW. Only the
        first occurrence of a repeated point is ever referenced.
    """
    pts = sorted(as_points(points))
    if not pts:
        return pts, []

    turn = counterclockwise_or_collinear if include_collinear else counterclockwise
    order = [i for i in range(len(pts)) if i == 0 or pts[i] != pts[i - 1]]
    if len(order) <= 2:
        return pts, order
    if _all_collinear([pts[i] for i in order]):
        return pts, _half_hull_indices(pts, order, turn)

    lower = _half_hull_indices(pts, order, turn)
    upper = _half_hull_indices(pts, reversed(order), turn)
    return pts, lower[:-1] + upper[:-1]


def antipodal_pairs(hull: Any) -> List[Tuple[int, int]]:
    """Rotating calipers over a CCW convex polygon.

    For each edge ``(i, i+1)`` the second pointer ``j`` moves forward while
    the next vertex is at least as far from the edge line as the current one.
    One ``(i, j)`` pair is emitted per edge; a two-point hull yields
    ``[(0, 1)]``.
    """
    h = as_points(hull)
    m = len(h)
    if m < 2:
        return []
    if m == 2:
        return [(0, 1)]

    pairs: List[Tuple[int, int]] = []
    j = 1
    for i in range(m):
        a, b = h[i], h[(i + 1) % m]
        while True:
            nj = (j + 1) % m
            if nj == i or cross(a, b, h[nj]) < cross(a, b, h[j]):
                break
            j = nj
        pairs.append((i, j))
    return pairs


def _dist2(p: Point, q: Point):
    dx = p[0] - q[0]
    dy = p[1] - q[1]
    return dx * dx + dy * dy


def hull_diameter_squared(hull: Any):
    """Largest squared distance between two vertices of a convex polygon."""
    h = as_points(hull)
    m = len(h)
    if m < 2:
        return 0
    best = 0
    for i, j in antipodal_pairs(h):
        a, b = h[i], h[(i + 1) % m]
        far = cross(a, b, h[j])
        k = j
        # an edge parallel to (a, b) makes every vertex on it antipodal
        while True:
            best = max(best, _dist2(a, h[k]), _dist2(b, h[k]))
            prev = (k - 1) % m
            if prev == (i + 1) % m or cross(a, b, h[prev]) != far:
                break
            k = prev
    return best
