"""Time parsing and formatting utilities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, tzinfo
from typing import Iterable

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def tzinfo_from_name(tz_name: str) -> tzinfo:
    """Create tzinfo from an IANA timezone name.

    Args:
        tz_name: Timezone name like "UTC" or "Asia/Kolkata".

    Returns:
        tzinfo instance.

    Raises:
        ValueError: If timezone name is invalid on this system.
    """

    if tz_name.upper() == "UTC":
        return UTC
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown timezone: {tz_name!r}. Try e.g. UTC or Asia/Kolkata") from exc


def parse_timestamp(text: str, tz_name: str = "UTC") -> datetime:
    """Parse an ISO 8601 timestamp to a timezone-aware datetime.

    Accepts "2024-03-01T06:00:00Z", "2024-03-01 06:00:00+05:30" and naive
    strings. Naive values are interpreted in tz_name.

    Raises:
        ValueError: If the text cannot be parsed.
    """

    s = text.strip()
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(s)
    except ValueError as exc:
        raise ValueError(f"Cannot parse timestamp: {text!r}. Expected e.g. 2024-03-01T06:00:00Z") from exc

    if dt.tzinfo is None:
        return dt.replace(tzinfo=tzinfo_from_name(tz_name))
    return dt


def format_timestamp(dt: datetime, tz_name: str = "UTC") -> str:
    """Render a datetime as ISO text in the given timezone."""

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(tzinfo_from_name(tz_name)).isoformat()


def hours_between(t1: datetime, t2: datetime) -> float:
    """Signed interval t2 - t1 in hours. Negative when t2 precedes t1."""

    return (t2 - t1).total_seconds() / 3600.0


@dataclass(frozen=True, slots=True)
class DeltaStats:
    """Sampling interval stats (hours)."""

    count: int
    min_h: float
    median_h: float
    p95_h: float
    max_h: float


def delta_stats(timestamps: Iterable[datetime]) -> DeltaStats | None:
    """Compute basic sampling-interval statistics.

    Intervals that go backwards in time are ignored.

    Args:
        timestamps: Observation times in trajectory order.

    Returns:
        DeltaStats or None if fewer than 2 points.
    """

    ts = list(timestamps)
    if len(ts) < 2:
        return None
    deltas = [hours_between(ts[i - 1], ts[i]) for i in range(1, len(ts)) if ts[i] >= ts[i - 1]]
    if not deltas:
        return None
    deltas.sort()
    n = len(deltas)
    median = deltas[n // 2] if n % 2 == 1 else 0.5 * (deltas[n // 2 - 1] + deltas[n // 2])
    p95 = deltas[int(0.95 * (n - 1))]
    return DeltaStats(
        count=n,
        min_h=deltas[0],
        median_h=median,
        p95_h=p95,
        max_h=deltas[-1],
    )
