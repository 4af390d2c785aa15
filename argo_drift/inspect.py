"""Inspect a loaded trajectory."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from typing import Sequence

from argo_drift.geo import haversine_km
from argo_drift.models import TrajectoryPoint
from argo_drift.timeutils import DeltaStats, delta_stats, hours_between


@dataclass(frozen=True, slots=True)
class InspectResult:
    """High-level trajectory inspection result."""

    points: int
    first_time: datetime | None
    last_time: datetime | None
    mission_days: float
    delta: DeltaStats | None
    min_lat: float | None
    max_lat: float | None
    min_lon: float | None
    max_lon: float | None
    path_length_km: float
    duplicate_timestamps: int
    backwards_timestamps: int
    status_counts: dict[str, int] = field(default_factory=dict)
    missing_counts: dict[str, int] = field(default_factory=dict)


def inspect_points(points: Sequence[TrajectoryPoint]) -> InspectResult:
    """Inspect already-loaded points, in their given order."""

    if not points:
        return InspectResult(
            points=0,
            first_time=None,
            last_time=None,
            mission_days=0.0,
            delta=None,
            min_lat=None,
            max_lat=None,
            min_lon=None,
            max_lon=None,
            path_length_km=0.0,
            duplicate_timestamps=0,
            backwards_timestamps=0,
        )

    dupe = 0
    backwards = 0
    path_km = 0.0
    for prev, cur in zip(points, points[1:]):
        if cur.timestamp == prev.timestamp:
            dupe += 1
        elif cur.timestamp < prev.timestamp:
            backwards += 1
        path_km += haversine_km(prev.latitude, prev.longitude, cur.latitude, cur.longitude)

    first_time = min(p.timestamp for p in points)
    last_time = max(p.timestamp for p in points)
    lats = [p.latitude for p in points]
    lons = [p.longitude for p in points]
    return InspectResult(
        points=len(points),
        first_time=first_time,
        last_time=last_time,
        mission_days=hours_between(first_time, last_time) / 24.0,
        delta=delta_stats(p.timestamp for p in points),
        min_lat=min(lats),
        max_lat=max(lats),
        min_lon=min(lons),
        max_lon=max(lons),
        path_length_km=path_km,
        duplicate_timestamps=dupe,
        backwards_timestamps=backwards,
        status_counts=dict(Counter(p.status.value for p in points)),
        missing_counts={
            "depth": sum(1 for p in points if p.depth_m is None),
            "temperature": sum(1 for p in points if p.temperature_c is None),
            "salinity": sum(1 for p in points if p.salinity_psu is None),
        },
    )
