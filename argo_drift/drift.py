"""Drift series derived from a float trajectory."""

from __future__ import annotations

import csv
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from argo_drift.geo import haversine_km, initial_bearing_deg
from argo_drift.models import DEFAULT_MAX_SPEED_KMH, DriftRecord, TrajectoryPoint
from argo_drift.timeutils import format_timestamp, hours_between

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DriftParams:
    """Parameters controlling drift derivation."""

    # Floats drift at a few km/h at most; anything faster is positioning noise
    # and gets capped rather than plotted raw.
    max_speed_kmh: float = DEFAULT_MAX_SPEED_KMH

    def __post_init__(self) -> None:
        if not math.isfinite(self.max_speed_kmh) or self.max_speed_kmh < 0:
            raise ValueError(f"max_speed_kmh must be a non-negative number, got {self.max_speed_kmh!r}")


def build_drift_series(
    points: Sequence[TrajectoryPoint],
    params: DriftParams | None = None,
) -> list[DriftRecord]:
    """Derive one drift record per fix after the first.

    Args:
        points: Trajectory fixes in observation order. Not re-sorted.
        params: Drift parameters, defaults to DriftParams().

    Returns:
        len(points) - 1 records (empty for fewer than two points).

    Notes:
        - speed_kmh is 0 when the interval is zero or negative (duplicate or
          out-of-order timestamps), then clamped to [0, max_speed_kmh].
        - Coordinates are not validated.
    """

    if params is None:
        params = DriftParams()
    if len(points) < 2:
        return []

    first = points[0]
    records: list[DriftRecord] = []
    cumulative_km = 0.0

    for prev, cur in zip(points, points[1:]):
        step_km = haversine_km(prev.latitude, prev.longitude, cur.latitude, cur.longitude)
        cumulative_km += step_km

        hours = hours_between(prev.timestamp, cur.timestamp)
        if hours > 0:
            speed = step_km / hours
        else:
            logger.debug("point %s: non-increasing timestamp, speed set to 0", cur.id)
            speed = 0.0
        if speed > params.max_speed_kmh:
            logger.debug("point %s: speed %.2f km/h capped at %.2f", cur.id, speed, params.max_speed_kmh)
        speed = max(0.0, min(speed, params.max_speed_kmh))

        displacement_km = haversine_km(first.latitude, first.longitude, cur.latitude, cur.longitude)
        records.append(
            DriftRecord(
                timestamp=cur.timestamp,
                latitude=cur.latitude,
                longitude=cur.longitude,
                speed_kmh=speed,
                direction_deg=initial_bearing_deg(prev.latitude, prev.longitude, cur.latitude, cur.longitude),
                distance_km=cumulative_km,
                # summation rounding on straight tracks can leave the chord an ulp longer
                displacement_km=min(displacement_km, cumulative_km),
            )
        )

    return records


@dataclass(frozen=True, slots=True)
class DriftSummary:
    """Headline numbers for a drift series."""

    records: int
    avg_speed_kmh: float
    max_speed_kmh: float
    total_distance_km: float
    total_displacement_km: float

    @property
    def efficiency_pct(self) -> float:
        """Displacement as a share of the path length travelled."""

        if self.total_distance_km <= 0:
            return 0.0
        return 100.0 * self.total_displacement_km / self.total_distance_km


def summarize_drift(records: Sequence[DriftRecord]) -> DriftSummary:
    """Summarize a drift series. An empty series summarizes to zeros."""

    if not records:
        return DriftSummary(
            records=0,
            avg_speed_kmh=0.0,
            max_speed_kmh=0.0,
            total_distance_km=0.0,
            total_displacement_km=0.0,
        )
    speeds = [r.speed_kmh for r in records]
    last = records[-1]
    return DriftSummary(
        records=len(records),
        avg_speed_kmh=sum(speeds) / len(speeds),
        max_speed_kmh=max(speeds),
        total_distance_km=last.distance_km,
        total_displacement_km=last.displacement_km,
    )


def write_drift_csv(records: Sequence[DriftRecord], out_path: str | Path, tz_name: str = "UTC") -> None:
    """Write a drift series to CSV for charting elsewhere."""

    p = Path(out_path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8", newline="") as f:
        w = csv.DictWriter(
            f,
            fieldnames=[
                "timestamp",
                "latitude",
                "longitude",
                "speed_kmh",
                "direction_deg",
                "compass",
                "distance_km",
                "displacement_km",
            ],
        )
        w.writeheader()
        for r in records:
            w.writerow(
                {
                    "timestamp": format_timestamp(r.timestamp, tz_name),
                    "latitude": r.latitude,
                    "longitude": r.longitude,
                    "speed_kmh": f"{r.speed_kmh:.4f}",
                    "direction_deg": f"{r.direction_deg:.2f}",
                    "compass": r.compass,
                    "distance_km": f"{r.distance_km:.3f}",
                    "displacement_km": f"{r.displacement_km:.3f}",
                }
            )
