"""Tests for the weekly narrative and freshness warnings."""

from datetime import date

import pytest

from fitness_analytics.analysis.summary import (
    WeeklySummaryInput,
    data_freshness_warning,
    deficit_label,
    generate_weekly_summary,
    weight_trend_label,
)
from fitness_analytics.metrics.metabolism import WeightTrend

LOSING = WeightTrend(direction="losing", rate_kg_per_week=-0.5, estimated_deficit_kcal=-550)
GAINING = WeightTrend(direction="gaining", rate_kg_per_week=0.25, estimated_deficit_kcal=275)
STABLE = WeightTrend(direction="stable", rate_kg_per_week=0.05, estimated_deficit_kcal=55)


class TestGenerateWeeklySummary:
    """Tests for template selection."""

    def test_no_workouts(self):
        text = generate_weekly_summary(WeeklySummaryInput(0, 0))
        assert text == "No workouts logged this week."

    def test_single_workout(self):
        text = generate_weekly_summary(WeeklySummaryInput(1, 250))
        assert text == "This week: 1 workout, ~250 kcal burned."

    def test_thousands_separator(self):
        text = generate_weekly_summary(WeeklySummaryInput(3, 1234))
        assert text == "This week: 3 workouts, ~1,234 kcal burned."

    def test_losing(self):
        text = generate_weekly_summary(WeeklySummaryInput(0, 0, LOSING))
        assert text.endswith("Weight trend: \u22120.5 kg/week \u2014 estimated 550 kcal/day deficit.")

    def test_gaining(self):
        text = generate_weekly_summary(WeeklySummaryInput(0, 0, GAINING))
        assert text.endswith("Weight trend: +0.25 kg/week \u2014 estimated 275 kcal/day surplus.")

    def test_stable(self):
        text = generate_weekly_summary(WeeklySummaryInput(0, 0, STABLE))
        assert text.endswith("Weight is stable \u2014 energy balance is near maintenance.")

    def test_single_pr(self):
        text = generate_weekly_summary(WeeklySummaryInput(1, 100, new_prs=["Bench Press 1RM"]))
        assert text.endswith("New PR: Bench Press 1RM.")

    def test_many_prs_are_capped_at_three(self):
        prs = ["A", "B", "C", "D"]
        text = generate_weekly_summary(WeeklySummaryInput(1, 100, new_prs=prs))
        assert text.endswith("New PRs: A, B, C….")

    def test_three_prs_have_no_ellipsis(self):
        text = generate_weekly_summary(WeeklySummaryInput(1, 100, new_prs=["A", "B", "C"]))
        assert text.endswith("New PRs: A, B, C.")

    def test_all_parts(self):
        summary = WeeklySummaryInput(2, 900, LOSING, ["Squat max weight"])
        assert generate_weekly_summary(summary) == (
            "This week: 2 workouts, ~900 kcal burned. "
            "Weight trend: \u22120.5 kg/week \u2014 estimated 550 kcal/day deficit. "
            "New PR: Squat max weight."
        )

    def test_deterministic(self):
        summary = WeeklySummaryInput(4, 2000, GAINING, ["A", "B"])
        assert generate_weekly_summary(summary) == generate_weekly_summary(summary)


class TestFreshnessWarning:
    """Tests for weight staleness messages."""

    TODAY = date(2024, 3, 31)

    def test_never_logged(self):
        assert data_freshness_warning(None, self.TODAY) == "Log your weight to enable calorie estimates."

    def test_stale(self):
        warning = data_freshness_warning("2024-03-11", self.TODAY)
        assert warning == "Weight last updated 20 days ago \u2014 calorie estimates may be inaccurate."

    def test_aging(self):
        warning = data_freshness_warning("2024-03-21", self.TODAY)
        assert warning == "Weight updated 10 days ago \u2014 consider logging an update."

    @pytest.mark.parametrize("day", ["2024-03-24", "2024-03-31"])
    def test_fresh(self, day):
        assert data_freshness_warning(day, self.TODAY) is None


class TestLabels:
    """Tests for short trend labels."""

    def test_weight_trend_label(self):
        assert weight_trend_label(None) == "\u2014"
        assert weight_trend_label(STABLE) == "Stable"
        assert weight_trend_label(LOSING) == "\u22120.5 kg/wk"
        assert weight_trend_label(GAINING) == "+0.25 kg/wk"

    def test_whole_number_rate(self):
        trend = WeightTrend(direction="losing", rate_kg_per_week=-1.0, estimated_deficit_kcal=-1100)
        assert weight_trend_label(trend) == "\u22121 kg/wk"

    def test_deficit_label(self):
        assert deficit_label(None) == "Maintenance"
        assert deficit_label(STABLE) == "Maintenance"
        assert deficit_label(LOSING) == "\u2212550 kcal/day deficit"
        assert deficit_label(GAINING) == "+275 kcal/day surplus"
