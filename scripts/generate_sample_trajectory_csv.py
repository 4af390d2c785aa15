from __future__ import annotations

import argparse
from pathlib import Path

from argo_drift.csv_io import write_trajectory_csv
from argo_drift.sample import generate_trajectory, region_by_name
from argo_drift.timeutils import parse_timestamp


def main() -> int:
    p = argparse.ArgumentParser(description="Generate a fake float trajectory CSV for demo/testing.")
    p.add_argument("--out", type=str, default="sample_data/trajectory.csv", help="Output CSV path")
    p.add_argument("--points", type=int, default=40, help="Number of fixes")
    p.add_argument("--seed", type=int, default=42, help="Random seed (reproducible)")
    p.add_argument("--float-id", type=str, default="2902746", help="Platform identifier written to every row")
    p.add_argument("--region", type=str, default="Bay of Bengal", help="Region name")
    p.add_argument("--start", type=str, default="2024-01-01T00:00:00Z", help="Time of the first fix")
    args = p.parse_args()

    points = generate_trajectory(
        seed=args.seed,
        start=parse_timestamp(args.start),
        count=args.points,
        region=region_by_name(args.region),
        float_id=args.float_id,
    )
    out_path = Path(args.out)
    write_trajectory_csv(points, out_path)

    print(f"Generated: {out_path} (points={len(points)}, seed={args.seed}, float_id={args.float_id})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
