"""Report an intersecting pair from a segment CSV (x1, y1, x2, y2).

Usage
-----
python scripts/run_segment_sweep.py --csv data/segments.csv
python scripts/run_segment_sweep.py --csv data/segments.csv --ignore_endpoints
"""

from __future__ import annotations

import argparse
from pathlib import Path

import _bootstrap

_bootstrap.ensure_src_on_path()

from geokernel.cli.batch_utils import touches_beyond_endpoints
from geokernel.config import load_config
from geokernel.geometry import find_intersecting_pair, find_intersecting_pair_by, relationship
from geokernel.io import read_segments_csv


def main() -> None:
    ap = argparse.ArgumentParser(description="Sweep-line intersection test over a segment CSV")
    ap.add_argument("--csv", required=True, help="Input CSV with x1,y1,x2,y2 columns")
    ap.add_argument("--config", type=Path, default=None, help="YAML config path (reads geokernel.*)")
    ap.add_argument(
        "--ignore_endpoints",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Do not report segments that only share an endpoint (overrides config.yaml if provided)",
    )
    args = ap.parse_args()

    cfg = load_config(args.config)
    ignore = cfg.ignore_mutual_endpoints if args.ignore_endpoints is None else args.ignore_endpoints

    segments = read_segments_csv(Path(args.csv))
    if ignore:
        pair = find_intersecting_pair_by(segments, touches_beyond_endpoints)
    else:
        pair = find_intersecting_pair(segments)

    if pair is None:
        print(f"[SWEEP] segments={len(segments)} no intersecting pair")
        return
    i, j = pair
    kind = relationship(segments[i], segments[j])
    print(f"[SWEEP] segments={len(segments)} pair=({i}, {j}) relationship={kind.value}")
    print(f"        {i}: {tuple(segments[i])}")
    print(f"        {j}: {tuple(segments[j])}")


if __name__ == "__main__":
    main()
