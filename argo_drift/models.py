"""Data models for float trajectory points and derived series."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Final

from argo_drift.geo import compass_point


class PointStatus(str, Enum):
    """Display label of a fix. Carried through, never used in the math."""

    ACTIVE = "active"
    COMPLETED = "completed"
    CURRENT = "current"


@dataclass(frozen=True, slots=True)
class TrajectoryPoint:
    """A single float position fix.

    Attributes:
        id: Sequence position assigned by the data source.
        latitude: Latitude in decimal degrees.
        longitude: Longitude in decimal degrees.
        timestamp: Timezone-aware observation time.
        depth_m: Profile depth in meters, None if not measured.
        temperature_c: Temperature in degrees Celsius, None if not measured.
        salinity_psu: Practical salinity, None if not measured.
        status: Display label.
        cycle_number: Profiling cycle, when the source provides one.
        float_id: Platform identifier of the float, when the source provides one.
    """

    id: int
    latitude: float
    longitude: float
    timestamp: datetime
    depth_m: float | None = None
    temperature_c: float | None = None
    salinity_psu: float | None = None
    status: PointStatus = PointStatus.ACTIVE
    cycle_number: int | None = None
    float_id: str | None = None

    @property
    def epoch_ms(self) -> int:
        """Unix epoch milliseconds."""

        return int(self.timestamp.timestamp() * 1000)


@dataclass(frozen=True, slots=True)
class DriftRecord:
    """Drift between a fix and the one before it.

    Note:
        distance_km is the path length travelled so far, displacement_km the
        straight line from the first fix. displacement_km <= distance_km.
    """

    timestamp: datetime
    latitude: float
    longitude: float
    speed_kmh: float
    direction_deg: float
    distance_km: float
    displacement_km: float

    @property
    def compass(self) -> str:
        """16-point compass label of the drift direction."""

        return compass_point(self.direction_deg)


@dataclass(frozen=True, slots=True)
class ProfileGroup:
    """A run of fixes plotted as one temperature/depth curve.

    Points are sorted by depth and all carry depth_m and temperature_c.
    """

    profile_index: int
    points: tuple[TrajectoryPoint, ...]

    def __len__(self) -> int:
        return len(self.points)

    @property
    def start_time(self) -> datetime:
        """Earliest observation time in the group."""

        return min(p.timestamp for p in self.points)

    @property
    def depth_range(self) -> tuple[float, float]:
        depths = [p.depth_m for p in self.points if p.depth_m is not None]
        return min(depths), max(depths)

    @property
    def temperature_range(self) -> tuple[float, float]:
        temps = [p.temperature_c for p in self.points if p.temperature_c is not None]
        return min(temps), max(temps)

    @property
    def salinity_range(self) -> tuple[float, float] | None:
        sal = [p.salinity_psu for p in self.points if p.salinity_psu is not None]
        if not sal:
            return None
        return min(sal), max(sal)


DEFAULT_TZ: Final[str] = "UTC"
DEFAULT_WINDOW_SIZE: Final[int] = 5
DEFAULT_MAX_SPEED_KMH: Final[float] = 10.0
