"""Closest pair of points (divide and conquer, O(n log n))."""

from __future__ import annotations

import heapq
import math
from operator import itemgetter
from typing import Any, List

from ._points import Point, as_points

_by_y = itemgetter(1)


def _dist2(p: Point, q: Point):
    dx = p[0] - q[0]
    dy = p[1] - q[1]
    return dx * dx + dy * dy


def _solve(pts: List[Point], lo: int, hi: int):
    """Minimal squared distance within ``pts[lo:hi]``.

    On entry the slice is sorted by x (ties by y); on return it is sorted by y.
    """
    if hi - lo <= 3:
        best = math.inf
        for i in range(lo, hi):
            for k in range(i + 1, hi):
                best = min(best, _dist2(pts[i], pts[k]))
        pts[lo:hi] = sorted(pts[lo:hi], key=_by_y)
        return best

    mid = (lo + hi) // 2
    x_mid = pts[mid][0]
    best = min(_solve(pts, lo, mid), _solve(pts, mid, hi))
    pts[lo:hi] = list(heapq.merge(pts[lo:mid], pts[mid:hi], key=_by_y))

    strip: List[Point] = []
    for p in pts[lo:hi]:
        dx = p[0] - x_mid
        if dx * dx >= best:
            continue
        for q in reversed(strip):
            dy = p[1] - q[1]
            if dy * dy >= best:
                break
            best = min(best, _dist2(p, q))
        strip.append(p)
    return best


def min_distance_squared(points: Any):
    """Smallest squared Euclidean distance between two of ``points``.

    Parameters
    ----------
    points : sequence of (x, y) pairs or (N,2) array

    Returns
    -------
    d2 : squared distance, exact for integer coordinates. ``0`` when the input
        contains a repeated point, ``math.inf`` for fewer than two points.

    Notes
    -----
    The input is copied; the recursion depth is about log2(N).
    """
    pts = sorted(as_points(points))
    return _solve(pts, 0, len(pts))
