from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path
from typing import Optional

# Allow running package imports without installation.
_REPO_ROOT = Path(__file__).resolve().parent
_SRC_ROOT = _REPO_ROOT / "src"
if str(_SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(_SRC_ROOT))

from geokernel.cli.batch_utils import iter_csv_files


def _run_command(cmd: list[str], *, step_name: str, on_error: str) -> bool:
    try:
        result = subprocess.run(cmd, check=True, text=True, capture_output=True)
        if result.stdout:
            print(f"[{step_name}] stdout:\n{result.stdout.strip()}")
        if result.stderr:
            print(f"[{step_name}] stderr:\n{result.stderr.strip()}")
        return True
    except subprocess.CalledProcessError as exc:
        print(f"[{step_name}] failed (code={exc.returncode})")
        if exc.stdout:
            print(f"[{step_name}] stdout:\n{exc.stdout.strip()}")
        if exc.stderr:
            print(f"[{step_name}] stderr:\n{exc.stderr.strip()}")
        if on_error == "abort":
            raise RuntimeError(f"{step_name} failed") from exc
        return False


def _make_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Run scripts in batch: kernel summary CSV, per-file convex hull / closest pair / segment sweep."
    )
    p.add_argument("--points_dir", default=str(_REPO_ROOT / "data" / "points"))
    p.add_argument(
        "--segments_dir",
        default=None,
        help="Optional directory of segment CSVs (x1,y1,x2,y2) for scripts/run_segment_sweep.py.",
    )
    p.add_argument("--out_dir", default=str(_REPO_ROOT / "output"))
    p.add_argument("--batch_out_csv", default=str(_REPO_ROOT / "output" / "kernel_summary.csv"))
    p.add_argument("--config", default=None, help="YAML config path passed to every script.")
    p.add_argument("--overwrite", action="store_true", help="Overwrite batch summary CSV.")
    p.add_argument("--skip_invalid", action="store_true", help="Pass unreadable files in batch export.")
    p.add_argument("--on_error", choices=["continue", "abort"], default="continue")
    p.add_argument("--recursive", action="store_true", default=True)
    p.add_argument("--no-recursive", dest="recursive", action="store_false")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--run_batch_only", action="store_true")
    mode.add_argument("--run_file_only", action="store_true")
    p.add_argument(
        "--max_files",
        type=int,
        default=None,
        help="Limit number of CSV files for file-wise pipelines (for quick checks).",
    )
    return p


def main() -> None:
    args = _make_parser().parse_args()

    points_dir = Path(args.points_dir)
    segments_dir: Optional[Path] = Path(args.segments_dir) if args.segments_dir else None
    out_dir = Path(args.out_dir)
    batch_out_csv = Path(args.batch_out_csv)

    if not points_dir.exists():
        raise FileNotFoundError(f"Points directory not found: {points_dir}")
    if segments_dir is not None and not segments_dir.exists():
        raise FileNotFoundError(f"Segments directory not found: {segments_dir}")

    out_dir.mkdir(parents=True, exist_ok=True)
    scripts_root = _REPO_ROOT / "scripts"
    config_args = ["--config", str(args.config)] if args.config else []
    produced: list[Path] = []
    processed_files = 0
    failed_files = 0

    # 1) Batch summary CSV
    if not args.run_file_only:
        batch_cmd = [
            sys.executable,
            str(scripts_root / "run_batch_kernel_csv.py"),
            "--csv_dir",
            str(points_dir),
            "--out_csv",
            str(batch_out_csv),
            *config_args,
        ]
        if args.skip_invalid:
            batch_cmd.append("--skip_invalid")
        if args.overwrite:
            batch_cmd.append("--overwrite")
        if not args.recursive:
            batch_cmd.append("--no-recursive")
        print("[RUN] scripts/run_batch_kernel_csv.py")
        if _run_command(batch_cmd, step_name="batch_kernel_summary", on_error=args.on_error):
            if batch_out_csv.exists():
                produced.append(batch_out_csv)
        else:
            failed_files += 1

    if args.run_batch_only:
        print(f"[SUMMARY] processed={processed_files}, failed={failed_files}")
        return

    # 2) Per-file pipelines
    point_files = [p for p in iter_csv_files(points_dir, recursive=args.recursive) if p != batch_out_csv]
    if args.max_files is not None:
        point_files = point_files[: args.max_files]
    if not point_files:
        print(f"[WARN] no point CSV files found in {points_dir}")

    for csv_path in point_files:
        stem = csv_path.stem

        cmd_hull = [
            sys.executable,
            str(scripts_root / "run_convex_hull.py"),
            "--csv",
            str(csv_path),
            "--out_dir",
            str(out_dir),
            *config_args,
        ]
        print(f"[RUN] {csv_path.name} => run_convex_hull.py")
        if not _run_command(cmd_hull, step_name=f"hull:{stem}", on_error=args.on_error):
            failed_files += 1
            continue
        hull_csv = out_dir / f"{stem}_hull.csv"
        if hull_csv.exists():
            produced.append(hull_csv)

        cmd_closest = [
            sys.executable,
            str(scripts_root / "run_closest_pair.py"),
            "--csv",
            str(csv_path),
            *config_args,
        ]
        print(f"[RUN] {csv_path.name} => run_closest_pair.py")
        if not _run_command(cmd_closest, step_name=f"closest:{stem}", on_error=args.on_error):
            failed_files += 1
            continue
        processed_files += 1

    if segments_dir is not None:
        segment_files = iter_csv_files(segments_dir, recursive=args.recursive)
        if args.max_files is not None:
            segment_files = segment_files[: args.max_files]
        for csv_path in segment_files:
            cmd_sweep = [
                sys.executable,
                str(scripts_root / "run_segment_sweep.py"),
                "--csv",
                str(csv_path),
                *config_args,
            ]
            print(f"[RUN] {csv_path.name} => run_segment_sweep.py")
            if _run_command(cmd_sweep, step_name=f"sweep:{csv_path.stem}", on_error=args.on_error):
                processed_files += 1
            else:
                failed_files += 1

    produced_unique = sorted(set(produced), key=lambda p: str(p))
    print(f"[SUMMARY] processed={processed_files}, failed={failed_files}")
    if produced_unique:
        print("[OUTPUT] generated files:")
        for p in produced_unique:
            print(f" - {p}")
    else:
        print("[OUTPUT] no outputs captured.")


if __name__ == "__main__":
    main()
