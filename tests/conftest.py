"""Shared fixtures."""

import pytest

from fitness_analytics.config import get_settings
from fitness_analytics.models.records import RecordSnapshot


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def snapshot_data():
    """A small but complete record export."""
    return {
        "exercises": [{"id": "bench", "name": "Bench Press", "category": "push"}],
        "activities": [
            {"id": "a0", "date": "2024-03-01", "type": "strength", "duration": 45},
            {"id": "a1", "date": "2024-03-11", "type": "strength", "duration": 60},
            {"id": "a2", "date": "2024-03-13", "type": "cardio", "duration": 30, "distance": 5},
        ],
        "sets": [
            {"activity_id": "a0", "exercise_id": "bench", "set_number": 1,
             "weight": 95, "reps": 5, "activity_date": "2024-03-01"},
            {"activity_id": "a1", "exercise_id": "bench", "set_number": 1,
             "weight": 100, "reps": 5, "activity_date": "2024-03-11"},
            {"activity_id": "a1", "exercise_id": "bench", "set_number": 2,
             "weight": 100, "reps": 5, "activity_date": "2024-03-11"},
            {"activity_id": "a1", "exercise_id": "bench", "set_number": 3,
             "weight": 100, "reps": 5, "activity_date": "2024-03-11"},
        ],
        "body_metrics": [
            {"date": "2024-03-14", "weight": 80, "steps": 10000},
            {"date": "2024-03-01", "weight": 81, "height": 180, "age": 30,
             "gender": "male", "steps": 8000, "body_fat": 18},
        ],
        "goals": [{"id": "g1", "type": "lift", "target_value": 120, "exercise_id": "bench"}],
        "goal_logs": [{"goal_id": "g1", "value": 100, "date": "2024-03-11"}],
    }


@pytest.fixture
def snapshot(snapshot_data):
    return RecordSnapshot.model_validate(snapshot_data)
