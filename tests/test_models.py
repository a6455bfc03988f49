"""Tests for record models."""

import pytest
from pydantic import ValidationError

from fitness_analytics.models.records import (
    Activity,
    ActivityType,
    RecordSnapshot,
    StrengthSet,
)


class TestRecordModels:
    """Tests for parsing and derived properties."""

    def test_volume(self):
        assert StrengthSet(exercise_id="x", weight=100, reps=5).volume == 500
        assert StrengthSet(exercise_id="x", reps=5).volume == 0

    def test_activity_defaults(self):
        activity = Activity(id="a", date="2024-01-01")
        assert activity.type == ActivityType.CUSTOM
        assert activity.duration is None

    def test_unknown_activity_type_rejected(self):
        with pytest.raises(ValidationError):
            Activity(id="a", date="2024-01-01", type="yoga")

    def test_records_are_read_only(self):
        activity = Activity(id="a", date="2024-01-01")
        with pytest.raises(ValidationError):
            activity.duration = 10

    def test_exercise_map_prefers_catalogue(self):
        snapshot = RecordSnapshot.model_validate({
            "sets": [
                {"exercise_id": "a", "exercise_name": "Old name"},
                {"exercise_id": "b", "exercise_name": "Row"},
            ],
            "exercises": [{"id": "a", "name": "Bench Press"}],
        })
        assert snapshot.exercise_map() == {"a": "Bench Press", "b": "Row"}
