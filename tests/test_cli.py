import csv
import json

import pytest

from argo_drift.cli import main


@pytest.fixture
def trajectory_csv(tmp_path):
    path = tmp_path / "trajectory.csv"
    assert main(["generate", "--out", str(path), "--seed", "4", "--points", "12", "--region", "Andaman Sea"]) == 0
    return path


def test_generate_writes_requested_points(trajectory_csv):
    with trajectory_csv.open(encoding="utf-8", newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 12
    assert rows[-1]["status"] == "current"


def test_inspect(trajectory_csv, capsys):
    assert main(["inspect", "--csv", str(trajectory_csv), "--json"]) == 0

    out = capsys.readouterr().out
    assert "total_rows=12, parsed=12, skipped=0" in out
    payload = json.loads(out[out.index("{") :])
    assert payload["points"] == 12
    assert payload["duplicate_timestamps"] == 0


def test_drift(trajectory_csv, tmp_path, capsys):
    out_csv = tmp_path / "drift.csv"

    assert main(["drift", "--csv", str(trajectory_csv), "--out", str(out_csv)]) == 0

    assert "records=11" in capsys.readouterr().out
    with out_csv.open(encoding="utf-8", newline="") as f:
        assert len(list(csv.DictReader(f))) == 11


def test_profiles_positional_and_by_cycle(trajectory_csv, tmp_path, capsys):
    out_csv = tmp_path / "profiles.csv"

    assert main(["profiles", "--csv", str(trajectory_csv), "--out", str(out_csv), "--window-size", "5"]) == 0
    assert "profiles=3" in capsys.readouterr().out

    # 12 fixes, ten per cycle -> cycles of 10 and 2
    assert main(["profiles", "--csv", str(trajectory_csv), "--out", str(out_csv), "--by-cycle"]) == 0
    assert "profiles=2" in capsys.readouterr().out


def test_bad_input_returns_error_code(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("id,latitude\n1,2\n", encoding="utf-8")

    assert main(["drift", "--csv", str(path), "--out", str(tmp_path / "d.csv")]) == 2


def test_generate_with_float_id(tmp_path, capsys):
    path = tmp_path / "float.csv"

    assert main(["generate", "--out", str(path), "--seed", "1", "--points", "5", "--float-id", "5906468"]) == 0

    assert "float_id=5906468" in capsys.readouterr().out
    with path.open(encoding="utf-8", newline="") as f:
        rows = list(csv.DictReader(f))
    assert {r["float_id"] for r in rows} == {"5906468"}


def test_outputs_go_into_missing_directories(trajectory_csv, tmp_path):
    drift_out = tmp_path / "out" / "drift.csv"
    profiles_out = tmp_path / "out" / "deeper" / "profiles.csv"

    assert main(["drift", "--csv", str(trajectory_csv), "--out", str(drift_out)]) == 0
    assert main(["profiles", "--csv", str(trajectory_csv), "--out", str(profiles_out)]) == 0

    assert drift_out.exists()
    assert profiles_out.exists()
