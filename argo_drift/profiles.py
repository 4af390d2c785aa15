"""Group trajectory fixes into depth-ordered profiles for overlay plots."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, Sequence

from argo_drift.models import DEFAULT_WINDOW_SIZE, ProfileGroup, TrajectoryPoint
from argo_drift.timeutils import format_timestamp


def _has_profile_readings(p: TrajectoryPoint) -> bool:
    return p.depth_m is not None and p.temperature_c is not None


def _build_groups(windows: Iterable[Sequence[TrajectoryPoint]]) -> list[ProfileGroup]:
    groups: list[ProfileGroup] = []
    for window in windows:
        if len(window) < 2:
            continue
        groups.append(
            ProfileGroup(
                profile_index=len(groups),
                points=tuple(sorted(window, key=lambda p: p.depth_m)),
            )
        )
    return groups


def group_profiles(
    points: Sequence[TrajectoryPoint],
    window_size: int = DEFAULT_WINDOW_SIZE,
) -> list[ProfileGroup]:
    """Split a trajectory into fixed-size profiles.

    Points missing depth or temperature are dropped first. The remainder is cut
    into consecutive windows of window_size (the last may be shorter), windows
    with fewer than 2 points are discarded, and each window is sorted by depth.

    Note:
        Membership is positional, not a real dive/ascent cycle. Use
        group_profiles_by_cycle when the data carries cycle numbers.

    Raises:
        ValueError: If window_size < 1.
    """

    if window_size < 1:
        raise ValueError(f"window_size must be >= 1, got {window_size}")

    valid = [p for p in points if _has_profile_readings(p)]
    windows = (valid[i : i + window_size] for i in range(0, len(valid), window_size))
    return _build_groups(windows)


def group_profiles_by_cycle(points: Sequence[TrajectoryPoint]) -> list[ProfileGroup]:
    """Group fixes by their cycle_number.

    Groups come out in order of each cycle's first appearance. Fixes without a
    cycle number, depth or temperature are skipped.
    """

    by_cycle: dict[int, list[TrajectoryPoint]] = {}
    for p in points:
        if p.cycle_number is None or not _has_profile_readings(p):
            continue
        by_cycle.setdefault(p.cycle_number, []).append(p)
    return _build_groups(by_cycle.values())


def write_profiles_csv(groups: Sequence[ProfileGroup], out_path: str | Path, tz_name: str = "UTC") -> None:
    """Write profiles in long format, one row per point."""

    p = Path(out_path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8", newline="") as f:
        w = csv.DictWriter(
            f,
            fieldnames=[
                "profile_index",
                "point_id",
                "timestamp",
                "cycle_number",
                "depth",
                "temperature",
                "salinity",
            ],
        )
        w.writeheader()
        for g in groups:
            for pt in g.points:
                w.writerow(
                    {
                        "profile_index": g.profile_index,
                        "point_id": pt.id,
                        "timestamp": format_timestamp(pt.timestamp, tz_name),
                        "cycle_number": "" if pt.cycle_number is None else pt.cycle_number,
                        "depth": pt.depth_m,
                        "temperature": pt.temperature_c,
                        "salinity": "" if pt.salinity_psu is None else pt.salinity_psu,
                    }
                )
