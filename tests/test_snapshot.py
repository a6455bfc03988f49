"""Tests for snapshot loading."""

import json

import pytest

from fitness_analytics.exceptions import ErrorCode, SnapshotError
from fitness_analytics.snapshot import load_snapshot


class TestLoadSnapshot:
    """Tests for reading JSON exports."""

    def test_loads_records(self, tmp_path, snapshot_data):
        path = tmp_path / "records.json"
        path.write_text(json.dumps(snapshot_data))

        snapshot = load_snapshot(path)
        assert len(snapshot.sets) == 4
        assert len(snapshot.activities) == 3
        assert snapshot.exercise_map() == {"bench": "Bench Press"}

    def test_timestamps_are_truncated_to_dates(self, tmp_path):
        path = tmp_path / "records.json"
        path.write_text(json.dumps({
            "activities": [{"id": "a", "date": "2024-01-01T07:30:00Z", "type": "cardio"}],
        }))
        assert load_snapshot(path).activities[0].date == "2024-01-01"

    def test_missing_file(self, tmp_path):
        with pytest.raises(SnapshotError) as exc_info:
            load_snapshot(tmp_path / "missing.json")
        assert exc_info.value.code == ErrorCode.SNAPSHOT_NOT_FOUND
        assert exc_info.value.status_code == 404

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "records.json"
        path.write_text("{not json")
        with pytest.raises(SnapshotError) as exc_info:
            load_snapshot(path)
        assert exc_info.value.code == ErrorCode.SNAPSHOT_INVALID
        assert exc_info.value.status_code == 422

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "records.json"
        path.write_text("[]")
        with pytest.raises(SnapshotError):
            load_snapshot(path)

    def test_invalid_records(self, tmp_path):
        path = tmp_path / "records.json"
        path.write_text(json.dumps({"sets": [{"weight": 100, "reps": 5}]}))
        with pytest.raises(SnapshotError) as exc_info:
            load_snapshot(path)
        errors = exc_info.value.to_dict()["error"]["details"]["errors"]
        assert errors[0]["field"] == "sets.0.exercise_id"
