"""Tests for the command line interface."""

import json

import pytest

from fitness_analytics.cli import main


@pytest.fixture
def snapshot_file(tmp_path, snapshot_data):
    path = tmp_path / "records.json"
    path.write_text(json.dumps(snapshot_data))
    return path


class TestCLI:
    """Tests for subcommands and error handling."""

    def test_records_json(self, snapshot_file, capsys):
        assert main(["-s", str(snapshot_file), "records", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["best_sets"][0]["exercise_name"] == "Bench Press"
        assert data["best_sets"][0]["estimated_1rm"] == 117

    def test_loads_json(self, snapshot_file, capsys):
        assert main(["-s", str(snapshot_file), "loads", "--weeks", "1", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [w["week_start"] for w in data["weeks"]] == ["2024-03-11"]

    def test_dashboard_json(self, snapshot_file, capsys):
        assert main(["-s", str(snapshot_file), "dashboard", "--today", "2024-03-15", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["metabolism"]["bmr"] == 1780

    def test_dashboard_table(self, snapshot_file, capsys):
        assert main(["-s", str(snapshot_file), "dashboard", "--today", "2024-03-15"]) == 0
        assert "Overview" in capsys.readouterr().out

    def test_metabolism_table(self, snapshot_file, capsys):
        assert main(["-s", str(snapshot_file), "metabolism"]) == 0
        assert "TDEE" in capsys.readouterr().out

    def test_composition_json(self, snapshot_file, capsys):
        assert main(["-s", str(snapshot_file), "composition", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["period_days"] == 13

    def test_invalid_date(self, snapshot_file, capsys):
        assert main(["-s", str(snapshot_file), "dashboard", "--today", "15/03/2024"]) == 1
        assert "Invalid date" in capsys.readouterr().out

    def test_missing_snapshot_file(self, tmp_path, capsys):
        assert main(["-s", str(tmp_path / "nope.json"), "records"]) == 1
        assert "not found" in capsys.readouterr().out

    def test_no_snapshot(self, monkeypatch, capsys):
        monkeypatch.delenv("FITNESS_SNAPSHOT_PATH", raising=False)
        assert main(["records"]) == 1

    def test_snapshot_from_environment(self, snapshot_file, monkeypatch, capsys):
        monkeypatch.setenv("FITNESS_SNAPSHOT_PATH", str(snapshot_file))
        assert main(["records", "--json"]) == 0

    def test_no_command(self, capsys):
        assert main([]) == 1
