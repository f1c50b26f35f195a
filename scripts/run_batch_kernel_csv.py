"""One summary row per point CSV: hull size/area/diameter and closest pair.

Usage
-----
python scripts/run_batch_kernel_csv.py --csv_dir data/points --out_csv output/kernel_summary.csv
"""

from __future__ import annotations

import argparse
from pathlib import Path

import pandas as pd

import _bootstrap

_bootstrap.ensure_src_on_path()
_REPO_ROOT = _bootstrap.REPO_ROOT

from geokernel.cli.batch_utils import append_rows_to_csv, iter_csv_files
from geokernel.config import load_config
from geokernel.geometry import (
    convex_hull_indices,
    hull_diameter_squared,
    min_distance_squared,
    polygon_area,
)
from geokernel.io import read_points_array


def _make_summary_dataframe(*, csv_file: Path, points, include_collinear: bool) -> pd.DataFrame:
    sorted_pts, idx = convex_hull_indices(points, include_collinear=include_collinear)
    hull = [sorted_pts[i] for i in idx]
    d2 = min_distance_squared(sorted_pts)
    return pd.DataFrame(
        [
            {
                "csv_file": csv_file.name,
                "n_points": len(sorted_pts),
                "hull_vertices": len(hull),
                "hull_area": polygon_area(hull),
                "hull_diameter2": hull_diameter_squared(hull),
                "closest_distance2": None if d2 == float("inf") else d2,
            }
        ]
    )


def main() -> None:
    ap = argparse.ArgumentParser(description="Batch geometry summary over a directory of point CSVs")
    ap.add_argument("--csv_dir", default=str(_REPO_ROOT / "data" / "points"))
    ap.add_argument("--out_csv", default=str(_REPO_ROOT / "output" / "kernel_summary.csv"))
    ap.add_argument("--config", type=Path, default=None, help="YAML config path (reads geokernel.*)")
    ap.add_argument("--overwrite", action="store_true", help="Overwrite the summary CSV.")
    ap.add_argument("--skip_invalid", action="store_true", help="Skip files that cannot be read.")
    ap.add_argument("--recursive", action="store_true", default=True)
    ap.add_argument("--no-recursive", dest="recursive", action="store_false")
    args = ap.parse_args()

    cfg = load_config(args.config)
    csv_dir = Path(args.csv_dir)
    out_csv = Path(args.out_csv)
    if not csv_dir.exists():
        raise FileNotFoundError(f"CSV directory not found: {csv_dir}")

    if out_csv.exists():
        if args.overwrite:
            out_csv.unlink()
        else:
            raise FileExistsError(f"Output already exists: {out_csv}. Use --overwrite to replace it.")

    csv_files = [p for p in iter_csv_files(csv_dir, recursive=args.recursive) if p.resolve() != out_csv.resolve()]
    if not csv_files:
        raise FileNotFoundError(f"No .csv files found under {csv_dir}")

    header_written = False
    processed = 0
    skipped = 0

    for csv_file in csv_files:
        try:
            points = read_points_array(csv_file, x_col=cfg.x_col, y_col=cfg.y_col)
            df = _make_summary_dataframe(
                csv_file=csv_file,
                points=points,
                include_collinear=cfg.include_collinear,
            )
            header_written = append_rows_to_csv(
                out_csv,
                df,
                header_written=header_written,
                encoding=cfg.encoding,
            )
            processed += 1
        except (KeyError, ValueError) as exc:
            if args.skip_invalid:
                skipped += 1
                print(f"[SKIP] {csv_file.name}: {exc}")
                continue
            raise RuntimeError(f"Failed on file '{csv_file}': {exc}") from exc

    print(f"[OK] Saved: {out_csv}")
    print(f"Processed files: {processed}")
    print(f"Skipped files: {skipped}")


if __name__ == "__main__":
    main()
