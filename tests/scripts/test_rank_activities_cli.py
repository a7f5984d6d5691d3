"""Tests for the rank_activities command-line script."""

import importlib.util
import json
from pathlib import Path

import pandas as pd
import pytest

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "rank_activities.py"


@pytest.fixture(scope="module")
def cli():
    """Load the script as a module."""
    spec = importlib.util.spec_from_file_location("rank_activities_cli", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def forecast_csv(tmp_path):
    path = tmp_path / "forecast.csv"
    pd.DataFrame({
        "time": ["2026-01-12", "2026-01-13"],
        "temperature_2m_min": [-9.0, 15.0],
        "temperature_2m_max": [-1.0, 25.0],
        "snowfall_sum": [12.0, 0.0],
        "precipitation_sum": [8.0, 0.0],
        "wind_speed_10m_max": [10.0, 5.0],
        "wind_gusts_10m_max": [20.0, 10.0],
        "cloud_cover_mean": [60.0, 10.0],
        "sunshine_duration": [10800.0, 28800.0],
    }).to_csv(path, index=False)
    return path


class TestRankActivitiesCli:
    def test_table_output(self, cli, forecast_csv, capsys):
        assert cli.main([str(forecast_csv)]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Period: 2026-01-12 to 2026-01-13")
        assert "Skiing" in out
        assert "Indoor Sightseeing" in out

    def test_json_output(self, cli, forecast_csv, capsys):
        argv = [str(forecast_csv), "--format", "json", "--activities", "SKIING", "--top-reasons", "2",
                "--lat", "39.6", "--lon", "-106.4"]
        assert cli.main(argv) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["location"] == {"latitude": 39.6, "longitude": -106.4}
        skiing = data["activities"][0]
        assert skiing["activity"] == "SKIING"
        assert [d["date"] for d in skiing["daily"]] == ["2026-01-12", "2026-01-13"]
        assert all(len(d["reasons"]) <= 2 for d in skiing["daily"])

    def test_unknown_activity_exit_code(self, cli, forecast_csv):
        assert cli.main([str(forecast_csv), "--activities", "KITESURFING"]) == 1
