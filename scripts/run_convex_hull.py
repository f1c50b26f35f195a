"""Convex hull of a point CSV.

Usage
-----
python scripts/run_convex_hull.py --csv data/points.csv
python scripts/run_convex_hull.py --csv data/points.csv --include_collinear --out_dir output
"""

from __future__ import annotations

import argparse
from pathlib import Path

import _bootstrap

_bootstrap.ensure_src_on_path()

from geokernel.config import load_config
from geokernel.geometry import (
    antipodal_pairs,
    convex_hull,
    counterclockwise_or_collinear,
    get_turn_predicate,
    hull_diameter_squared,
    polygon_area,
    polygon_bounds,
)
from geokernel.io import read_points_csv, write_points_csv


def main() -> None:
    ap = argparse.ArgumentParser(description="Convex hull (monotone chain) of a point CSV")
    ap.add_argument("--csv", required=True, help="Input CSV with x/y columns")
    ap.add_argument("--config", type=Path, default=None, help="YAML config path (reads geokernel.*)")
    ap.add_argument(
        "--include_collinear",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Keep points on hull edges (overrides config.yaml if provided)",
    )
    ap.add_argument("--out_dir", default="output", help="Output directory")
    args = ap.parse_args()

    cfg = load_config(args.config)
    include_collinear = cfg.include_collinear if args.include_collinear is None else args.include_collinear
    turn = counterclockwise_or_collinear if include_collinear else get_turn_predicate(cfg.turn)

    csv_path = Path(args.csv)
    points = read_points_csv(csv_path, x_col=cfg.x_col, y_col=cfg.y_col)
    hull = convex_hull(points, turn=turn)

    out_dir = _bootstrap.resolve_repo_path(Path(args.out_dir))
    out_csv = write_points_csv(out_dir / f"{csv_path.stem}_hull.csv", hull, x_col=cfg.x_col, y_col=cfg.y_col)

    min_x, max_x, min_y, max_y = polygon_bounds(hull)
    print(f"[HULL] points={len(points)} vertices={len(hull)}")
    print(f"[HULL] area={polygon_area(hull)} diameter^2={hull_diameter_squared(hull)}")
    print(f"[HULL] bounds x=[{min_x}, {max_x}] y=[{min_y}, {max_y}]")
    print(f"[HULL] antipodal_pairs={len(antipodal_pairs(hull))}")
    print(f"[OK] Saved: {out_csv}")


if __name__ == "__main__":
    main()
