"""Input coercion shared by the geometry kernel.

Every public operation accepts either a plain sequence of ``(x, y)`` pairs or
a numpy array. Arrays are converted with ``tolist()`` so integer coordinates
become Python ints and cross products cannot overflow int64.
"""

from __future__ import annotations

from typing import Any, List, Tuple

import numpy as np

Point = Tuple[Any, Any]


def as_points(points: Any) -> List[Point]:
    """Return ``points`` as a new list of ``(x, y)`` tuples.

    Parameters
    ----------
    points : sequence of pairs or (N,2) array

    Raises
    ------
    ValueError
        If an array has the wrong shape or holds non-finite floats.
    """
    if isinstance(points, np.ndarray):
        arr = points
        if arr.size == 0:
            return []
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"points must be an (N,2) array. Got shape={arr.shape!r}")
        if np.issubdtype(arr.dtype, np.floating) and not np.isfinite(arr).all():
            raise ValueError("points must be finite (found NaN or inf).")
        return [(x, y) for x, y in arr.tolist()]
    return [(p[0], p[1]) for p in points]


def as_segment_pairs(segments: Any) -> List[Tuple[Point, Point]]:
    """Return ``segments`` as a list of ``((x1, y1), (x2, y2))`` tuples.

    Arrays may be shaped (N,2,2) or (N,4).
    """
    if isinstance(segments, np.ndarray):
        arr = segments
        if arr.size == 0:
            return []
        if arr.ndim == 2 and arr.shape[1] == 4:
            arr = arr.reshape(-1, 2, 2)
        if arr.ndim != 3 or arr.shape[1:] != (2, 2):
            raise ValueError(f"segments must be an (N,2,2) or (N,4) array. Got shape={segments.shape!r}")
        if np.issubdtype(arr.dtype, np.floating) and not np.isfinite(arr).all():
            raise ValueError("segment endpoints must be finite (found NaN or inf).")
        return [((a[0], a[1]), (b[0], b[1])) for a, b in arr.tolist()]
    return [((s[0][0], s[0][1]), (s[1][0], s[1][1])) for s in segments]
