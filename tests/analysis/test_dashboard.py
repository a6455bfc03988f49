"""Tests for dashboard composition."""

from datetime import date

from fitness_analytics.analysis.dashboard import build_dashboard
from fitness_analytics.analysis.training_load import TrainingStatus
from fitness_analytics.models.records import RecordSnapshot

TODAY = date(2024, 3, 15)


class TestBuildDashboard:
    """Tests for the combined view over one snapshot."""

    def test_summary_text(self, snapshot):
        dashboard = build_dashboard(snapshot, today=TODAY)
        assert dashboard.summary == (
            "This week: 2 workouts, ~1,020 kcal burned. "
            "Weight trend: \u22120.54 kg/week \u2014 estimated 592 kcal/day deficit. "
            "New PRs: Bench Press max weight, Bench Press 1RM."
        )

    def test_workout_calories(self, snapshot):
        dashboard = build_dashboard(snapshot, today=TODAY)
        by_id = {w.activity_id: w.calories for w in dashboard.workout_calories}
        assert by_id == {"a1": 640, "a2": 380}

    def test_metabolism(self, snapshot):
        dashboard = build_dashboard(snapshot, today=TODAY)
        assert dashboard.body_weight_kg == 80
        assert dashboard.metabolism.bmr == 1780
        assert dashboard.metabolism.workout_calories == 146
        assert dashboard.metabolism.steps_calories == 400
        assert dashboard.metabolism.tdee == 2326

    def test_loads_and_records(self, snapshot):
        dashboard = build_dashboard(snapshot, today=TODAY)
        assert [w.week_start for w in dashboard.weekly_loads] == ["2024-02-26", "2024-03-11"]
        assert dashboard.weekly_loads[-1].total_load == 84
        assert dashboard.weekly_loads[-1].status == TrainingStatus.OPTIMAL
        assert dashboard.personal_records[0].estimated_1rm == 117
        assert dashboard.exercise_summaries[0].exercise_name == "Bench Press"

    def test_freshness(self, snapshot):
        dashboard = build_dashboard(snapshot, today=TODAY)
        assert dashboard.freshness_warning is None
        assert dashboard.weight_stale is False
        assert dashboard.days_since_weight == 1

    def test_goals(self, snapshot):
        [goal] = build_dashboard(snapshot, today=TODAY).goals
        assert goal.name == "Bench Press PR"
        assert goal.progress_pct == 83

    def test_to_dict_is_plain_data(self, snapshot):
        data = build_dashboard(snapshot, today=TODAY).to_dict()
        assert data["as_of"] == "2024-03-15"
        assert data["weekly_loads"][-1]["status"] == "optimal"
        assert data["strength_prs"][0]["type"] == "max_weight"
        assert data["composition"]["trend"] in {
            "bulking", "cutting", "recomping", "maintaining", "insufficient_data",
        }

    def test_empty_snapshot(self):
        dashboard = build_dashboard(RecordSnapshot(), today=TODAY)
        assert dashboard.summary == "No workouts logged this week."
        assert dashboard.metabolism is None
        assert dashboard.weight_trend is None
        assert dashboard.freshness_warning == "Log your weight to enable calorie estimates."
        assert dashboard.avg_4week_load == 0

    def test_default_body_weight(self):
        snapshot = RecordSnapshot.model_validate({
            "activities": [{"id": "a", "date": "2024-03-14", "type": "cardio",
                            "duration": 60, "notes": "run"}],
        })
        dashboard = build_dashboard(snapshot, today=TODAY, default_body_weight_kg=70)
        assert dashboard.workout_calories[0].calories == 630

    def test_undated_sets_are_never_new_prs(self):
        """A set without a session date cannot be placed in this week."""
        snapshot = RecordSnapshot.model_validate({
            "sets": [{"exercise_id": "b", "weight": 100, "reps": 5}],
        })
        dashboard = build_dashboard(snapshot, today=date(2025, 6, 1))
        assert dashboard.new_prs == []
        assert dashboard.summary == "No workouts logged this week."
        # Still an all-time record
        assert len(dashboard.strength_prs) == 3

    def test_undated_heavier_set_does_not_hide_this_weeks_pr(self, snapshot_data):
        snapshot_data["sets"].append({"exercise_id": "bench", "weight": 200, "reps": 5})
        dashboard = build_dashboard(RecordSnapshot.model_validate(snapshot_data), today=TODAY)
        assert dashboard.new_prs == ["Bench Press max weight", "Bench Press 1RM"]

    def test_sets_after_today_are_not_new(self, snapshot_data):
        snapshot_data["sets"].append({"activity_id": "a9", "exercise_id": "bench",
                                      "weight": 150, "reps": 5, "activity_date": "2024-03-20"})
        dashboard = build_dashboard(RecordSnapshot.model_validate(snapshot_data), today=TODAY)
        assert dashboard.new_prs == ["Bench Press max weight", "Bench Press 1RM"]
