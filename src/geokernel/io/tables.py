"""CSV readers/writers for point and segment sets.

Point files have one row per point (columns ``x``, ``y`` by default).
Segment files have one row per segment (``x1, y1, x2, y2``). Integer columns
stay integers so the kernel computes exactly.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

import numpy as np
import polars as pl

from ..geometry._points import Point, as_points, as_segment_pairs
from ..geometry.segments import Segment

SEGMENT_COLUMNS = ("x1", "y1", "x2", "y2")


def _read_csv(path: str | Path) -> pl.DataFrame:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"CSV not found: {path}")
    return pl.read_csv(path)


def _require_columns(df: pl.DataFrame, columns: Sequence[str], path: str | Path) -> None:
    for col in columns:
        if col not in df.columns:
            raise KeyError(f"Column not found in {Path(path).name}: {col!r} (have {df.columns})")


def read_points_array(path: str | Path, x_col: str = "x", y_col: str = "y") -> np.ndarray:
    """Read a point CSV into an (N,2) array. Rows with nulls are dropped."""
    df = _read_csv(path)
    _require_columns(df, (x_col, y_col), path)
    df = df.select([x_col, y_col]).drop_nulls()
    return df.to_numpy()


def read_points_csv(path: str | Path, x_col: str = "x", y_col: str = "y") -> List[Point]:
    return as_points(read_points_array(path, x_col=x_col, y_col=y_col))


def read_segments_csv(path: str | Path) -> List[Segment]:
    df = _read_csv(path)
    _require_columns(df, SEGMENT_COLUMNS, path)
    arr = df.select(list(SEGMENT_COLUMNS)).drop_nulls().to_numpy()
    return [Segment(p, q) for p, q in as_segment_pairs(arr)]


def write_points_csv(path: str | Path, points: Sequence[Point], x_col: str = "x", y_col: str = "y") -> Path:
    """Write points (e.g. a hull) in visiting order, with an ``order`` column."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df = pl.DataFrame(
        {
            "order": list(range(len(points))),
            x_col: [p[0] for p in points],
            y_col: [p[1] for p in points],
        }
    )
    df.write_csv(path)
    return path
