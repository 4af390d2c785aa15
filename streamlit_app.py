from __future__ import annotations

from datetime import datetime
from pathlib import Path

import streamlit as st

from argo_drift.csv_io import load_trajectory_points
from argo_drift.drift import DriftParams, build_drift_series, summarize_drift
from argo_drift.inspect import inspect_points
from argo_drift.models import DEFAULT_MAX_SPEED_KMH, DEFAULT_TZ, DEFAULT_WINDOW_SIZE, TrajectoryPoint
from argo_drift.profiles import group_profiles, group_profiles_by_cycle
from argo_drift.sample import REGIONS, generate_trajectory, region_by_name
from argo_drift.timeutils import format_timestamp, tzinfo_from_name


@st.cache_data(show_spinner=False)
def _load_points(csv_path: str, tz_name: str, mtime: float) -> list[TrajectoryPoint]:
    _ = mtime  # part of cache key so updated files reload automatically
    points, _summary = load_trajectory_points(csv_path, tz_name)
    return points


@st.cache_data(show_spinner=False)
def _sample_points(seed: int, region_name: str) -> list[TrajectoryPoint]:
    start = datetime(2024, 1, 1, tzinfo=tzinfo_from_name("UTC"))
    return generate_trajectory(seed=seed, start=start, region=region_by_name(region_name))


def _local_date(dt: datetime, tz_name: str) -> str:
    return format_timestamp(dt, tz_name)[:10]


def main() -> None:
    st.set_page_config(page_title="Argo float drift", layout="wide")
    st.title("Argo float trajectory: drift and profiles")

    with st.sidebar:
        st.subheader("Data")
        tz_name = st.text_input("Timezone (IANA)", value=DEFAULT_TZ)
        source = st.radio("Source", ["Sample trajectory", "CSV file"], index=0)
        if source == "CSV file":
            csv_path = st.text_input("Trajectory CSV path", value="trajectory.csv")
        else:
            seed = int(st.number_input("Seed", value=42, step=1))
            region_name = st.selectbox("Region", [r.name for r in REGIONS])

        st.subheader("Analysis")
        max_speed = st.number_input("Speed cap (km/h)", value=DEFAULT_MAX_SPEED_KMH, min_value=0.0, step=1.0)
        window_size = int(st.number_input("Fixes per profile", value=DEFAULT_WINDOW_SIZE, min_value=1, step=1))
        by_cycle = st.checkbox("Group profiles by cycle number", value=False)

    try:
        tzinfo_from_name(tz_name)
    except ValueError as exc:
        st.error(str(exc))
        return

    if source == "CSV file":
        p = Path(csv_path)
        if not p.exists():
            st.error(f"File not found: {csv_path!r}")
            return
        try:
            points = _load_points(csv_path, tz_name, p.stat().st_mtime)
        except (KeyError, ValueError) as exc:
            st.exception(exc)
            return
    else:
        points = _sample_points(seed, region_name)

    if not points:
        st.warning("The trajectory has no points.")
        return

    records = build_drift_series(points, DriftParams(max_speed_kmh=float(max_speed)))
    summary = summarize_drift(records)

    st.subheader("Summary")
    c1, c2, c3, c4, c5 = st.columns(5)
    c1.metric("Fixes", str(len(points)))
    c2.metric("Mission days", f"{inspect_points(points).mission_days:.0f}")
    c3.metric("Distance", f"{summary.total_distance_km:.1f} km")
    c4.metric("Avg / max speed", f"{summary.avg_speed_kmh:.2f} / {summary.max_speed_kmh:.2f} km/h")
    c5.metric("Efficiency", f"{summary.efficiency_pct:.1f}%")

    st.subheader("Track")
    st.map([{"lat": pt.latitude, "lon": pt.longitude} for pt in points])

    if records:
        drift_rows = [
            {
                "date": _local_date(r.timestamp, tz_name),
                "speed_kmh": round(r.speed_kmh, 3),
                "direction_deg": round(r.direction_deg, 1),
                "compass": r.compass,
                "distance_km": round(r.distance_km, 2),
                "displacement_km": round(r.displacement_km, 2),
            }
            for r in records
        ]
        st.subheader("Drift")
        left, right = st.columns(2)
        with left:
            st.caption("Speed (km/h)")
            st.line_chart(drift_rows, x="date", y="speed_kmh")
        with right:
            st.caption("Distance travelled vs displacement from start (km)")
            st.line_chart(drift_rows, x="date", y=["distance_km", "displacement_km"])
        with st.expander("Drift table", expanded=False):
            st.dataframe(drift_rows, use_container_width=True, height=360)

    groups = group_profiles_by_cycle(points) if by_cycle else group_profiles(points, window_size=window_size)
    st.subheader(f"Profile overlay ({len(groups)} profiles)")
    if not groups:
        st.info("Not enough fixes with depth and temperature to draw a profile.")
        return

    overlay_rows = [
        {
            "profile": f"{g.profile_index + 1:02d} ({_local_date(g.start_time, tz_name)})",
            "temperature_c": pt.temperature_c,
            "depth_m": pt.depth_m,
        }
        for g in groups
        for pt in g.points
    ]
    st.scatter_chart(overlay_rows, x="temperature_c", y="depth_m", color="profile")
    st.caption(
        "Profiles are consecutive fixed-size runs of fixes, not real dive cycles, unless grouping by cycle number."
    )


if __name__ == "__main__":
    main()
