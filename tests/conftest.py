"""Shared fixtures for argo_drift tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from argo_drift.models import TrajectoryPoint
from argo_drift.sample import generate_trajectory

T0 = datetime(2024, 1, 1, tzinfo=UTC)


@pytest.fixture
def make_point():
    """Factory for points placed `hours` after T0."""

    def _make(
        id: int,
        lat: float,
        lon: float,
        hours: float = 0.0,
        depth: float | None = 1000.0,
        temp: float | None = 10.0,
        salinity: float | None = 35.0,
        cycle: int | None = None,
    ) -> TrajectoryPoint:
        return TrajectoryPoint(
            id=id,
            latitude=lat,
            longitude=lon,
            timestamp=T0 + timedelta(hours=hours),
            depth_m=depth,
            temperature_c=temp,
            salinity_psu=salinity,
            cycle_number=cycle,
        )

    return _make


@pytest.fixture
def sample_points() -> list[TrajectoryPoint]:
    return generate_trajectory(seed=7, start=T0, count=40)
