"""Tests for exercise summaries, best sets and plateau detection."""

import pytest

from fitness_analytics.analysis.strength import (
    ExercisePreferences,
    calc_exercise_summaries,
    detect_plateau,
    find_personal_records,
    order_exercises,
    weekly_volume_for_exercise,
)
from fitness_analytics.metrics.strength import estimate_1rm
from fitness_analytics.models.records import Exercise, StrengthSet


def make_set(exercise_id, weight, reps, day=None, name=None):
    return StrengthSet(
        exercise_id=exercise_id,
        weight=weight,
        reps=reps,
        activity_date=day,
        exercise_name=name,
    )


@pytest.fixture
def bench_scenario():
    """Three bench sets: 5 x 100, 5 x 105, 3 x 110."""
    return [
        make_set("bench", 100, 5, "2024-01-01"),
        make_set("bench", 105, 5, "2024-01-03"),
        make_set("bench", 110, 3, "2024-01-05"),
    ]


class TestExerciseSummaries:
    """Tests for per-exercise aggregation."""

    @pytest.mark.parametrize("n", [1, 3, 10])
    def test_uniform_sets(self, n):
        sets = [make_set("squat", 100, 5, "2024-01-01") for _ in range(n)]
        [summary] = calc_exercise_summaries(sets, {"squat": "Squat"})
        assert summary.total_volume == n * 500
        assert summary.max_weight == 100
        assert summary.estimated_1rm == 117
        assert summary.set_count == n
        assert summary.exercise_name == "Squat"

    def test_sorted_by_volume(self):
        sets = [
            make_set("curl", 20, 10),
            make_set("squat", 140, 5),
            make_set("bench", 100, 5),
        ]
        summaries = calc_exercise_summaries(sets)
        assert [s.exercise_id for s in summaries] == ["squat", "bench", "curl"]

    def test_ties_keep_input_grouping_order(self):
        sets = [make_set("b", 100, 5), make_set("a", 100, 5)]
        assert [s.exercise_id for s in calc_exercise_summaries(sets)] == ["b", "a"]

    def test_last_performed_is_latest_date(self):
        sets = [
            make_set("bench", 100, 5, "2024-02-01"),
            make_set("bench", 100, 5, "2024-03-10"),
            make_set("bench", 100, 5, "2024-01-15"),
        ]
        [summary] = calc_exercise_summaries(sets)
        assert summary.last_performed == "2024-03-10"

    def test_missing_fields_contribute_zero(self):
        sets = [make_set("pullup", None, 10), make_set("pullup", 20, 5)]
        [summary] = calc_exercise_summaries(sets)
        assert summary.total_volume == 100
        assert summary.max_weight == 20
        assert summary.estimated_1rm == 23

    def test_name_resolution(self):
        sets = [make_set("x", 10, 10), make_set("y", 10, 5, name="Row")]
        names = {s.exercise_id: s.exercise_name for s in calc_exercise_summaries(sets)}
        assert names == {"x": "Unknown", "y": "Row"}

    def test_empty(self):
        assert calc_exercise_summaries([]) == []


class TestFindPersonalRecords:
    """Tests for best-set selection by estimated 1RM."""

    def test_reps_beat_raw_weight(self, bench_scenario):
        """5 x 105 (122.5) beats 3 x 110 (121)."""
        [record] = find_personal_records(bench_scenario, {"bench": "Bench Press"})
        assert (record.weight, record.reps) == (105, 5)
        assert estimate_1rm(record.weight, record.reps) == pytest.approx(122.5)
        assert record.estimated_1rm == 123
        assert record.achieved_on == "2024-01-03"
        assert record.exercise_name == "Bench Press"

    def test_input_order_does_not_matter(self, bench_scenario):
        forward = find_personal_records(bench_scenario)
        backward = find_personal_records(list(reversed(bench_scenario)))
        assert [r.to_dict() for r in forward] == [r.to_dict() for r in backward]

    def test_exact_tie_goes_to_earlier_session(self):
        later = make_set("bench", 100, 5, "2024-01-10")
        earlier = make_set("bench", 100, 5, "2024-01-05")
        for sets in ([later, earlier], [earlier, later]):
            [record] = find_personal_records(sets)
            assert record.achieved_on == "2024-01-05"

    def test_invalid_sets_are_ignored(self):
        sets = [make_set("bench", 0, 5), make_set("bench", 100, 0)]
        assert find_personal_records(sets) == []

    def test_sorted_by_estimated_1rm(self):
        sets = [make_set("curl", 20, 10), make_set("deadlift", 180, 3)]
        assert [r.exercise_id for r in find_personal_records(sets)] == ["deadlift", "curl"]


class TestDetectPlateau:
    """Tests for plateau detection."""

    def _sessions(self, top_weights):
        sets = []
        for i, top in enumerate(top_weights):
            day = f"2024-01-{i + 1:02d}"
            sets.append(make_set("bench", top, 5, day))
            sets.append(make_set("bench", 80, 5, day))
        return sets

    def test_flat_sessions_plateau(self):
        """117, 117, 118 spread is under 3%."""
        assert detect_plateau(self._sessions([100, 100, 101]), "bench") is True

    def test_progressing_sessions_do_not_plateau(self):
        assert detect_plateau(self._sessions([100, 100, 110]), "bench") is False

    def test_only_last_three_sessions_count(self):
        sets = self._sessions([60, 100, 100, 101])
        assert detect_plateau(sets, "bench") is True

    def test_fewer_than_six_sets(self):
        sets = self._sessions([100, 100, 100])[:5]
        assert detect_plateau(sets, "bench") is False

    def test_fewer_than_three_sessions(self):
        sets = [make_set("bench", 100, 5, "2024-01-01") for _ in range(3)]
        sets += [make_set("bench", 100, 5, "2024-01-02") for _ in range(3)]
        assert detect_plateau(sets, "bench") is False

    def test_undated_sets_do_not_count(self):
        sets = self._sessions([100, 100, 100])
        sets = sets[:4] + [make_set("bench", 100, 5) for _ in range(4)]
        assert detect_plateau(sets, "bench") is False

    def test_other_exercise(self):
        assert detect_plateau(self._sessions([100, 100, 100]), "squat") is False


class TestWeeklyVolume:
    """Tests for per-week volume of one exercise."""

    def test_monday_buckets(self):
        sets = [
            make_set("bench", 100, 5, "2024-01-08"),
            make_set("bench", 100, 5, "2024-01-01"),
            make_set("bench", 100, 5, "2024-01-07"),
            make_set("squat", 100, 5, "2024-01-01"),
        ]
        weeks = weekly_volume_for_exercise(sets, "bench")
        assert [(w.week, w.volume) for w in weeks] == [
            ("2024-01-01", 1000),
            ("2024-01-08", 500),
        ]


class TestOrderExercises:
    """Tests for picker ordering with injected preferences."""

    @pytest.fixture
    def exercises(self):
        return [
            Exercise(id="sq", name="Squat"),
            Exercise(id="bp", name="bench press"),
            Exercise(id="dl", name="Deadlift"),
        ]

    def test_tracked_first_then_alphabetical(self, exercises):
        prefs = ExercisePreferences(frozenset({"dl"}))
        assert [e.id for e in order_exercises(exercises, prefs)] == ["dl", "bp", "sq"]

    def test_no_preferences(self, exercises):
        ordered = order_exercises(exercises, ExercisePreferences())
        assert [e.id for e in ordered] == ["bp", "dl", "sq"]

    def test_search_and_limit(self, exercises):
        prefs = ExercisePreferences()
        assert [e.id for e in order_exercises(exercises, prefs, search="SQU")] == ["sq"]
        assert len(order_exercises(exercises, prefs, limit=2)) == 2

    def test_toggle_returns_new_preferences(self):
        prefs = ExercisePreferences()
        tracked = prefs.toggle("bp")
        assert tracked.is_tracked("bp")
        assert not prefs.is_tracked("bp")
        assert not tracked.toggle("bp").is_tracked("bp")
