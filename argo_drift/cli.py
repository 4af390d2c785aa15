"""Command-line interface for argo_drift.

Run:
    python -m argo_drift inspect --csv trajectory.csv
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path

from argo_drift.csv_io import load_trajectory_points, write_trajectory_csv
from argo_drift.drift import DriftParams, build_drift_series, summarize_drift, write_drift_csv
from argo_drift.inspect import inspect_points
from argo_drift.models import DEFAULT_MAX_SPEED_KMH, DEFAULT_TZ, DEFAULT_WINDOW_SIZE
from argo_drift.profiles import group_profiles, group_profiles_by_cycle, write_profiles_csv
from argo_drift.sample import REGIONS, generate_trajectory, region_by_name
from argo_drift.timeutils import format_timestamp, parse_timestamp

logger = logging.getLogger(__name__)


def _cmd_inspect(args: argparse.Namespace) -> int:
    points, summary = load_trajectory_points(args.csv, args.tz)
    res = inspect_points(points)

    print("### CSV columns")
    print(", ".join(summary.fieldnames))
    print()

    print("### Rows")
    print(f"total_rows={summary.rows_total}, parsed={summary.rows_parsed}, skipped={summary.rows_skipped}")
    print()

    if res.first_time is not None and res.last_time is not None:
        print("### Time range")
        print(
            f"start={format_timestamp(res.first_time, args.tz)}, end={format_timestamp(res.last_time, args.tz)}, "
            f"mission_days={res.mission_days:.1f}"
        )
        print()

    if res.delta is not None:
        print("### Sampling interval (hours)")
        print(
            f"count={res.delta.count}, min={res.delta.min_h:.2f}, median={res.delta.median_h:.2f}, "
            f"p95={res.delta.p95_h:.2f}, max={res.delta.max_h:.2f}"
        )
        print()

    print("### Bounding box")
    print(f"lat=[{res.min_lat}, {res.max_lat}], lon=[{res.min_lon}, {res.max_lon}]")
    print()

    print("### Path length")
    print(f"{res.path_length_km:.1f} km")
    print()

    print("### Timestamp anomalies")
    print(f"duplicates={res.duplicate_timestamps}, backwards={res.backwards_timestamps}")
    print()

    print("### Missing readings")
    print(", ".join(f"{k}={v}" for k, v in res.missing_counts.items()))
    print()

    if args.json:
        payload = asdict(res) | {
            "rows_total": summary.rows_total,
            "rows_skipped": summary.rows_skipped,
            "fieldnames": list(summary.fieldnames),
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2, default=str))
    return 0


def _cmd_drift(args: argparse.Namespace) -> int:
    points, _ = load_trajectory_points(args.csv, args.tz)
    records = build_drift_series(points, DriftParams(max_speed_kmh=args.max_speed_kmh))
    write_drift_csv(records, args.out, args.tz)
    s = summarize_drift(records)
    print(
        f"records={s.records}, avg_speed={s.avg_speed_kmh:.2f} km/h, max_speed={s.max_speed_kmh:.2f} km/h, "
        f"distance={s.total_distance_km:.1f} km, displacement={s.total_displacement_km:.1f} km, "
        f"efficiency={s.efficiency_pct:.1f}%"
    )
    if args.json:
        print(json.dumps(asdict(s) | {"efficiency_pct": s.efficiency_pct}, indent=2))
    print(f"Wrote: {args.out}")
    return 0


def _cmd_profiles(args: argparse.Namespace) -> int:
    points, _ = load_trajectory_points(args.csv, args.tz)
    if args.by_cycle:
        groups = group_profiles_by_cycle(points)
    else:
        groups = group_profiles(points, window_size=args.window_size)
    write_profiles_csv(groups, args.out, args.tz)
    for g in groups:
        d_lo, d_hi = g.depth_range
        t_lo, t_hi = g.temperature_range
        print(
            f"profile {g.profile_index + 1}: n={len(g)}, start={format_timestamp(g.start_time, args.tz)}, "
            f"depth={d_lo:.1f}-{d_hi:.1f} m, temp={t_lo:.2f}-{t_hi:.2f} C"
        )
    print(f"profiles={len(groups)}")
    print(f"Wrote: {args.out}")
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    region = region_by_name(args.region) if args.region else None
    points = generate_trajectory(
        seed=args.seed,
        start=parse_timestamp(args.start),
        count=args.points,
        region=region,
        float_id=args.float_id,
    )
    write_trajectory_csv(points, args.out)
    print(f"Generated: {args.out} (points={len(points)}, seed={args.seed}, float_id={args.float_id or '-'})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""

    p = argparse.ArgumentParser(prog="argo_drift")
    p.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    p_ins = sub.add_parser("inspect", help="Summarize a trajectory CSV: time range, sampling, bounds, gaps")
    p_ins.add_argument("--csv", type=str, default="trajectory.csv", help="Input CSV path")
    p_ins.add_argument("--tz", type=str, default=DEFAULT_TZ, help="Timezone (IANA) for display and naive timestamps")
    p_ins.add_argument("--json", action="store_true", help="Also print JSON")
    p_ins.set_defaults(func=_cmd_inspect)

    p_dr = sub.add_parser("drift", help="Derive speed/direction/distance/displacement and export drift.csv")
    p_dr.add_argument("--csv", type=str, default="trajectory.csv", help="Input CSV path")
    p_dr.add_argument("--out", type=str, default="drift.csv", help="Output CSV path")
    p_dr.add_argument("--tz", type=str, default=DEFAULT_TZ, help="Timezone (IANA)")
    p_dr.add_argument(
        "--max-speed-kmh",
        type=float,
        default=DEFAULT_MAX_SPEED_KMH,
        help="Cap for derived speed; faster values are treated as positioning noise",
    )
    p_dr.add_argument("--json", action="store_true", help="Also print the summary as JSON")
    p_dr.set_defaults(func=_cmd_drift)

    p_pr = sub.add_parser("profiles", help="Group fixes into depth-sorted profiles and export profiles.csv")
    p_pr.add_argument("--csv", type=str, default="trajectory.csv", help="Input CSV path")
    p_pr.add_argument("--out", type=str, default="profiles.csv", help="Output CSV path")
    p_pr.add_argument("--tz", type=str, default=DEFAULT_TZ, help="Timezone (IANA)")
    p_pr.add_argument("--window-size", type=int, default=DEFAULT_WINDOW_SIZE, help="Fixes per profile")
    p_pr.add_argument(
        "--by-cycle",
        action="store_true",
        help="Group by the cycle_number column instead of fixed-size windows",
    )
    p_pr.set_defaults(func=_cmd_profiles)

    p_gen = sub.add_parser("generate", help="Write a reproducible sample trajectory CSV")
    p_gen.add_argument("--out", type=str, default="sample_data/trajectory.csv", help="Output CSV path")
    p_gen.add_argument("--seed", type=int, default=42, help="Random seed (reproducible)")
    p_gen.add_argument("--float-id", type=str, default=None, help="Platform identifier written to every row")
    p_gen.add_argument("--points", type=int, default=None, help="Number of fixes (default random 20-69)")
    p_gen.add_argument(
        "--region",
        type=str,
        default=None,
        help=f"Region name, one of: {', '.join(r.name for r in REGIONS)}",
    )
    p_gen.add_argument("--start", type=str, default="2024-01-01T00:00:00Z", help="Time of the first fix")
    p_gen.set_defaults(func=_cmd_generate)

    return p


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""

    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    try:
        return int(args.func(args))
    except (KeyError, ValueError) as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
