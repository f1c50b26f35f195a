"""CLI helper utilities used by `scripts/*.py` entrypoints.

These helpers are not part of the geometry kernel; they keep the runnable
scripts thin while preserving stable CLI behavior and output schemas.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Optional

import pandas as pd

from ..geometry import IntersectionType, relationship

_IGNORED_IF_NO_ENDPOINTS = (IntersectionType.NONE, IntersectionType.MUTUAL_ENDPOINT)


def iter_csv_files(csv_dir: Path, *, recursive: bool = True) -> list[Path]:
    csv_dir = Path(csv_dir)
    pattern = csv_dir.rglob if recursive else csv_dir.glob
    return sorted(path for path in pattern("*.csv") if path.is_file())


def append_rows_to_csv(
    out_csv: Path,
    df: pd.DataFrame,
    *,
    header_written: bool,
    encoding: str,
) -> bool:
    out_csv = Path(out_csv)
    out_csv.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out_csv, mode="a", index=False, header=not header_written, encoding=encoding)
    return True


def touches_beyond_endpoints(seg1, seg2) -> bool:
    """Sweep predicate that treats segments meeting only at a shared endpoint as disjoint."""
    return relationship(seg1, seg2) not in _IGNORED_IF_NO_ENDPOINTS


def format_distance(d2) -> Optional[str]:
    if math.isinf(d2):
        return None
    return f"{math.sqrt(d2):.10g}"
