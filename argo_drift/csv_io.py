"""CSV input/output for float trajectory files."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Mapping, Sequence

from argo_drift.models import PointStatus, TrajectoryPoint
from argo_drift.timeutils import format_timestamp, parse_timestamp

logger = logging.getLogger(__name__)

FIELDNAMES: tuple[str, ...] = (
    "id",
    "latitude",
    "longitude",
    "timestamp",
    "depth",
    "temperature",
    "salinity",
    "status",
    "cycle_number",
    "float_id",
)


@dataclass(frozen=True, slots=True)
class CsvSummary:
    """Quick summary of CSV parsing."""

    rows_total: int
    rows_parsed: int
    rows_skipped: int
    fieldnames: Sequence[str]


def _optional_float(value: str | None) -> float | None:
    if value is None or not value.strip():
        return None
    return float(value.strip())


def _optional_int(value: str | None) -> int | None:
    if value is None or not value.strip():
        return None
    return int(value.strip())


def _optional_str(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


def _parse_status(value: str | None) -> PointStatus:
    try:
        return PointStatus((value or "").strip().lower())
    except ValueError:
        return PointStatus.ACTIVE


def _point_from_row(row: Mapping[str, str], tz_name: str) -> TrajectoryPoint:
    return TrajectoryPoint(
        id=int(row["id"].strip()),
        latitude=float(row["latitude"].strip()),
        longitude=float(row["longitude"].strip()),
        timestamp=parse_timestamp(row["timestamp"], tz_name),
        depth_m=_optional_float(row.get("depth")),
        temperature_c=_optional_float(row.get("temperature")),
        salinity_psu=_optional_float(row.get("salinity")),
        status=_parse_status(row.get("status")),
        cycle_number=_optional_int(row.get("cycle_number")),
        float_id=_optional_str(row.get("float_id")),
    )


def iter_trajectory_points(csv_path: str | Path, tz_name: str = "UTC") -> Iterator[TrajectoryPoint]:
    """Yield TrajectoryPoint objects from a trajectory CSV.

    Args:
        csv_path: Path to the CSV.
        tz_name: Timezone for timestamps without an offset.

    Yields:
        Points parsed successfully, in file order.

    Raises:
        KeyError: If a required column (id, latitude, longitude, timestamp) is missing.
    """

    p = Path(csv_path)
    with p.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None:
            return

        for row in reader:
            try:
                yield _point_from_row(row, tz_name)
            except KeyError as exc:
                raise KeyError(f"CSV is missing required column {exc}. Found: {reader.fieldnames}") from exc
            except (ValueError, TypeError, AttributeError):
                # damaged or blank rows
                continue


def load_trajectory_points(csv_path: str | Path, tz_name: str = "UTC") -> tuple[list[TrajectoryPoint], CsvSummary]:
    """Load all points into memory.

    Returns:
        (points, summary)

    Raises:
        KeyError: If a required column is missing.
    """

    p = Path(csv_path)
    rows_total = 0
    parsed: list[TrajectoryPoint] = []
    fieldnames: Sequence[str] = ()

    with p.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        fieldnames = reader.fieldnames or ()
        missing = [c for c in ("id", "latitude", "longitude", "timestamp") if c not in fieldnames]
        if fieldnames and missing:
            raise KeyError(f"CSV is missing required columns {missing}. Found: {list(fieldnames)}")
        for row in reader:
            rows_total += 1
            try:
                parsed.append(_point_from_row(row, tz_name))
            except (ValueError, TypeError, AttributeError):
                continue

    summary = CsvSummary(
        rows_total=rows_total,
        rows_parsed=len(parsed),
        rows_skipped=rows_total - len(parsed),
        fieldnames=fieldnames,
    )
    if summary.rows_skipped > 0:
        logger.warning("Skipped %s unparseable rows in %s", summary.rows_skipped, p)
    return parsed, summary


def _cell(value: object | None) -> object:
    return "" if value is None else value


def write_trajectory_csv(points: Iterable[TrajectoryPoint], out_path: str | Path) -> None:
    """Write points in the same layout load_trajectory_points reads."""

    p = Path(out_path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8", newline="") as f:
        w = csv.DictWriter(f, fieldnames=list(FIELDNAMES))
        w.writeheader()
        for pt in points:
            w.writerow(
                {
                    "id": pt.id,
                    "latitude": pt.latitude,
                    "longitude": pt.longitude,
                    "timestamp": format_timestamp(pt.timestamp, "UTC"),
                    "depth": _cell(pt.depth_m),
                    "temperature": _cell(pt.temperature_c),
                    "salinity": _cell(pt.salinity_psu),
                    "status": pt.status.value,
                    "cycle_number": _cell(pt.cycle_number),
                    "float_id": _cell(pt.float_id),
                }
            )
