from datetime import UTC, datetime, timedelta

import pytest

from argo_drift.timeutils import delta_stats, format_timestamp, hours_between, parse_timestamp, tzinfo_from_name


def test_parse_z_suffix():
    dt = parse_timestamp("2024-03-01T06:00:00Z")
    assert dt == datetime(2024, 3, 1, 6, tzinfo=UTC)
    assert dt.utcoffset() == timedelta(0)


def test_parse_explicit_offset():
    dt = parse_timestamp("2024-03-01 11:30:00+05:30")
    assert dt == datetime(2024, 3, 1, 6, tzinfo=UTC)


def test_parse_naive_uses_default_zone():
    assert parse_timestamp("2024-03-01T06:00:00").tzinfo is UTC


@pytest.mark.parametrize("text", ["", "yesterday", "2024-13-01T00:00:00Z"])
def test_parse_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_timestamp(text)


def test_unknown_timezone():
    with pytest.raises(ValueError):
        tzinfo_from_name("Not/AZone")


def test_format_timestamp_utc():
    assert format_timestamp(datetime(2024, 1, 1, tzinfo=UTC)) == "2024-01-01T00:00:00+00:00"


def test_hours_between_is_signed():
    t1 = datetime(2024, 1, 1, tzinfo=UTC)
    t2 = t1 + timedelta(days=10)
    assert hours_between(t1, t2) == 240.0
    assert hours_between(t2, t1) == -240.0
    assert hours_between(t1, t1) == 0.0


def test_delta_stats():
    t0 = datetime(2024, 1, 1, tzinfo=UTC)
    ts = [t0, t0 + timedelta(hours=240), t0 + timedelta(hours=480), t0 + timedelta(hours=500)]

    stats = delta_stats(ts)

    assert stats is not None
    assert stats.count == 3
    assert stats.min_h == 20.0
    assert stats.median_h == 240.0
    assert stats.max_h == 240.0


def test_delta_stats_ignores_backwards_steps():
    t0 = datetime(2024, 1, 1, tzinfo=UTC)
    stats = delta_stats([t0, t0 - timedelta(hours=5), t0 + timedelta(hours=1)])
    assert stats is not None
    assert stats.count == 1
    assert stats.max_h == 6.0


def test_delta_stats_needs_two_points():
    assert delta_stats([]) is None
    assert delta_stats([datetime(2024, 1, 1, tzinfo=UTC)]) is None
