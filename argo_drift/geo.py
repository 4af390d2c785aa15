"""Spherical-Earth geometry (no external dependencies)."""

from __future__ import annotations

import math
from typing import Final

EARTH_RADIUS_KM: Final[float] = 6371.0

_COMPASS_POINTS: Final[tuple[str, ...]] = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute Haversine distance in kilometers between two lat/lon points.

    Args:
        lat1: Latitude 1 in degrees.
        lon1: Longitude 1 in degrees.
        lat2: Latitude 2 in degrees.
        lon2: Longitude 2 in degrees.

    Returns:
        Great-circle distance in kilometers.
    """

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2.0) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2.0) ** 2
    # clamp: rounding can push a outside [0, 1] for antipodal or out-of-range points
    a = min(1.0, max(0.0, a))
    c = 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))
    return EARTH_RADIUS_KM * c


def initial_bearing_deg(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Initial bearing from point 1 toward point 2.

    Returns:
        Degrees clockwise from true north in [0, 360). 0.0 when both points coincide.
    """

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_lambda = math.radians(lon2 - lon1)

    y = math.sin(d_lambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(d_lambda)
    return (math.degrees(math.atan2(y, x)) + 360.0) % 360.0


def compass_point(bearing_deg: float) -> str:
    """Map a bearing to a 16-point compass label, e.g. 95.0 -> "E"."""

    return _COMPASS_POINTS[math.floor(bearing_deg / 22.5 + 0.5) % 16]
