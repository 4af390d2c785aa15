"""Reproducible sample trajectories for demos and tests."""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Final

from argo_drift.models import PointStatus, TrajectoryPoint


@dataclass(frozen=True, slots=True)
class Region:
    name: str
    center_lat: float
    center_lon: float
    bounds_deg: float


REGIONS: Final[tuple[Region, ...]] = (
    Region("Bay of Bengal", 15.0, 90.0, 8.0),
    Region("Arabian Sea", 18.0, 65.0, 10.0),
    Region("Central Indian Ocean", -10.0, 80.0, 15.0),
    Region("Southwest Indian Ocean", -25.0, 70.0, 12.0),
    Region("Andaman Sea", 12.0, 95.0, 6.0),
)

CYCLE_DAYS: Final[int] = 10
FIXES_PER_CYCLE: Final[int] = 10


def region_by_name(name: str) -> Region:
    """Look up a region case-insensitively.

    Raises:
        ValueError: If no region has that name.
    """

    for r in REGIONS:
        if r.name.lower() == name.strip().lower():
            return r
    raise ValueError(f"Unknown region {name!r}. Choose from: {', '.join(r.name for r in REGIONS)}")


def _status_for(i: int, count: int) -> PointStatus:
    if i == count - 1:
        return PointStatus.CURRENT
    if i < count - 5:
        return PointStatus.COMPLETED
    return PointStatus.ACTIVE


def generate_trajectory(
    *,
    seed: int,
    start: datetime,
    count: int | None = None,
    region: Region | None = None,
    float_id: str | None = None,
) -> list[TrajectoryPoint]:
    """Generate a fake float trajectory with a random-walk drift.

    One fix every CYCLE_DAYS days, drifting up to +-1 deg latitude and
    +-1.5 deg longitude per cycle, kept inside the region box.

    Args:
        seed: Random seed; the same seed yields the same trajectory.
        start: Time of the first fix (timezone-aware).
        count: Number of fixes, default random in [20, 70).
        region: Region to drift in, default random.
        float_id: Platform identifier stamped on every fix.
    """

    rng = random.Random(seed)
    if region is None:
        region = rng.choice(REGIONS)
    if count is None:
        count = rng.randrange(20, 70)

    lo_lat = region.center_lat - region.bounds_deg
    hi_lat = region.center_lat + region.bounds_deg
    lo_lon = region.center_lon - region.bounds_deg
    hi_lon = region.center_lon + region.bounds_deg

    lat = region.center_lat + (rng.random() - 0.5) * region.bounds_deg
    lon = region.center_lon + (rng.random() - 0.5) * region.bounds_deg

    points: list[TrajectoryPoint] = []
    for i in range(count):
        lat = max(lo_lat, min(hi_lat, lat + (rng.random() - 0.5) * 2.0))
        lon = max(lo_lon, min(hi_lon, lon + (rng.random() - 0.5) * 3.0))
        points.append(
            TrajectoryPoint(
                id=i + 1,
                latitude=round(lat, 6),
                longitude=round(lon, 6),
                timestamp=start + timedelta(days=i * CYCLE_DAYS),
                depth_m=round(rng.uniform(500.0, 2500.0), 1),
                temperature_c=round(rng.uniform(2.0, 17.0), 3),
                salinity_psu=round(rng.uniform(34.0, 36.0), 3),
                status=_status_for(i, count),
                cycle_number=i // FIXES_PER_CYCLE + 1,
                float_id=float_id,
            )
        )
    return points
