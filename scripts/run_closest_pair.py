"""Closest pair of points in a point CSV.

Usage
-----
python scripts/run_closest_pair.py --csv data/points.csv
"""

from __future__ import annotations

import argparse
from pathlib import Path

import _bootstrap

_bootstrap.ensure_src_on_path()

from geokernel.cli.batch_utils import format_distance
from geokernel.config import load_config
from geokernel.geometry import min_distance_squared
from geokernel.io import read_points_csv


def main() -> None:
    ap = argparse.ArgumentParser(description="Minimal pairwise distance of a point CSV")
    ap.add_argument("--csv", required=True, help="Input CSV with x/y columns")
    ap.add_argument("--config", type=Path, default=None, help="YAML config path (reads geokernel.*)")
    args = ap.parse_args()

    cfg = load_config(args.config)
    points = read_points_csv(Path(args.csv), x_col=cfg.x_col, y_col=cfg.y_col)
    d2 = min_distance_squared(points)

    dist = format_distance(d2)
    if dist is None:
        print(f"[WARN] fewer than two points in {args.csv}")
        return
    print(f"[CLOSEST] points={len(points)} distance^2={d2} distance={dist}")


if __name__ == "__main__":
    main()
