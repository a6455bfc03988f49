"""
Dashboard Composition

Runs every engine over one record snapshot and collects the outputs in a
single serializable result. No calculation lives here.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, List, Optional

from ..metrics.calories import (
    PeriodCalories,
    WorkoutCalories,
    calc_monthly_calories,
    estimate_workout_calories,
)
from ..metrics.metabolism import (
    MetabolismResult,
    WeightPoint,
    WeightTrend,
    bmi_category,
    calc_bmi,
    calc_bmr,
    calc_tdee,
    calc_weight_trend,
    days_since_metric,
    is_weight_stale,
    resolve_profile,
)
from ..models.personal_records import BodyPR, StrengthPR
from ..models.records import RecordSnapshot, StrengthSet
from ..utils.dates import to_iso
from ..utils.numbers import round_half_up
from .composition import CompositionAnalysis, analyze_composition, composition_label
from .goals import GoalStatus, evaluate_goals
from .records import compute_body_prs, compute_strength_prs, new_pr_labels
from .strength import (
    ExerciseSummary,
    PRRecord,
    calc_exercise_summaries,
    detect_plateau,
    find_personal_records,
)
from .summary import (
    WeeklySummaryInput,
    data_freshness_warning,
    deficit_label,
    generate_weekly_summary,
    weight_trend_label,
)
from .training_load import WeeklyLoad, calc_weekly_loads, get_4week_avg_load

logger = logging.getLogger(__name__)

TREND_POINTS = 30  # most recent weight logs used for the weight trend


@dataclass
class Dashboard:
    """Everything derived from one snapshot."""

    as_of: str
    period_days: int
    body_weight_kg: Optional[float]
    weekly_loads: List[WeeklyLoad]
    avg_4week_load: int
    exercise_summaries: List[ExerciseSummary]
    personal_records: List[PRRecord]
    strength_prs: List[StrengthPR]
    body_prs: List[BodyPR]
    plateaued_exercises: List[str]
    composition: CompositionAnalysis
    composition_label: str
    workout_calories: List[WorkoutCalories]
    monthly_calories: List[PeriodCalories]
    metabolism: Optional[MetabolismResult]
    bmi: Optional[float]
    bmi_category: Optional[str]
    weight_trend: Optional[WeightTrend]
    weight_trend_label: str
    deficit_label: str
    weight_stale: bool
    days_since_weight: Optional[int]
    freshness_warning: Optional[str]
    new_prs: List[str]
    goals: List[GoalStatus] = field(default_factory=list)
    summary: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "as_of": self.as_of,
            "period_days": self.period_days,
            "body_weight_kg": self.body_weight_kg,
            "weekly_loads": [w.to_dict() for w in self.weekly_loads],
            "avg_4week_load": self.avg_4week_load,
            "exercise_summaries": [s.to_dict() for s in self.exercise_summaries],
            "personal_records": [r.to_dict() for r in self.personal_records],
            "strength_prs": [pr.model_dump(mode="json") for pr in self.strength_prs],
            "body_prs": [pr.model_dump(mode="json") for pr in self.body_prs],
            "plateaued_exercises": self.plateaued_exercises,
            "composition": self.composition.to_dict(),
            "composition_label": self.composition_label,
            "workout_calories": [w.to_dict() for w in self.workout_calories],
            "monthly_calories": [m.to_dict() for m in self.monthly_calories],
            "metabolism": self.metabolism.to_dict() if self.metabolism else None,
            "bmi": self.bmi,
            "bmi_category": self.bmi_category,
            "weight_trend": self.weight_trend.to_dict() if self.weight_trend else None,
            "weight_trend_label": self.weight_trend_label,
            "deficit_label": self.deficit_label,
            "weight_stale": self.weight_stale,
            "days_since_weight": self.days_since_weight,
            "freshness_warning": self.freshness_warning,
            "new_prs": self.new_prs,
            "goals": [g.to_dict() for g in self.goals],
            "summary": self.summary,
        }


def _sets_by_activity(sets: List[StrengthSet]) -> Dict[str, List[StrengthSet]]:
    grouped: Dict[str, List[StrengthSet]] = {}
    for s in sets:
        if s.activity_id:
            grouped.setdefault(s.activity_id, []).append(s)
    return grouped


def build_dashboard(
    snapshot: RecordSnapshot,
    today: Optional[date] = None,
    days: int = 7,
    default_body_weight_kg: Optional[float] = None,
) -> Dashboard:
    """
    Build the dashboard for a snapshot.

    Args:
        snapshot: All records for one user
        today: Reference day (defaults to the current date)
        days: Length of the summary window ending today
        default_body_weight_kg: Body weight used when none has been logged

    Returns:
        Dashboard
    """
    today = today or date.today()
    days = max(days, 1)
    window_start = to_iso(today - timedelta(days=days))
    as_of = to_iso(today)

    exercise_map = snapshot.exercise_map()
    metrics = snapshot.body_metrics
    newest_first = sorted(metrics, key=lambda m: m.date, reverse=True)

    profile = resolve_profile(metrics)
    last_weight = next((m for m in newest_first if m.weight), None)
    weight_kg = last_weight.weight if last_weight else default_body_weight_kg
    last_weight_date = last_weight.date if last_weight else None

    # Loads and strength
    weekly_loads = calc_weekly_loads(snapshot.activities)
    summaries = calc_exercise_summaries(snapshot.sets, exercise_map)
    strength_prs = compute_strength_prs(snapshot.sets, exercise_map)
    plateaued = [
        s.exercise_name for s in summaries
        if detect_plateau(snapshot.sets, s.exercise_id)
    ]

    # Only dated sets can be placed relative to the window
    dated_sets = [s for s in snapshot.sets if s.activity_date]
    earlier_sets = [s for s in dated_sets if s.activity_date < window_start]
    through_today = [s for s in dated_sets if s.activity_date <= as_of]
    new_prs = new_pr_labels(
        compute_strength_prs(earlier_sets, exercise_map),
        compute_strength_prs(through_today, exercise_map),
    )

    # Calories and metabolism
    recent = [a for a in snapshot.activities if window_start <= a.date <= as_of]
    grouped_sets = _sets_by_activity(snapshot.sets)
    workout_calories = [
        estimate_workout_calories(a, weight_kg or 0, grouped_sets.get(a.id))
        for a in recent
    ]
    total_calories = sum(w.calories for w in workout_calories)
    monthly = calc_monthly_calories(snapshot.activities, weight_kg) if weight_kg else []

    metabolism = None
    bmi = None
    if profile is not None:
        steps = newest_first[0].steps if newest_first else None
        metabolism = calc_tdee(calc_bmr(profile), round_half_up(total_calories / days), steps)
        bmi = calc_bmi(profile.weight, profile.height)
    else:
        logger.debug("Incomplete profile, skipping BMR/TDEE")

    weight_points = [
        WeightPoint(date=m.date, weight=m.weight)
        for m in reversed(newest_first) if m.weight
    ][-TREND_POINTS:]
    trend = calc_weight_trend(weight_points)

    composition = analyze_composition(metrics)

    summary = generate_weekly_summary(WeeklySummaryInput(
        workout_count=len(recent),
        total_workout_calories=total_calories,
        weight_trend=trend,
        new_prs=new_prs,
    ))

    return Dashboard(
        as_of=as_of,
        period_days=days,
        body_weight_kg=weight_kg,
        weekly_loads=weekly_loads,
        avg_4week_load=get_4week_avg_load(weekly_loads),
        exercise_summaries=summaries,
        personal_records=find_personal_records(snapshot.sets, exercise_map),
        strength_prs=strength_prs,
        body_prs=compute_body_prs(metrics),
        plateaued_exercises=plateaued,
        composition=composition,
        composition_label=composition_label(composition.trend),
        workout_calories=workout_calories,
        monthly_calories=monthly,
        metabolism=metabolism,
        bmi=bmi,
        bmi_category=bmi_category(bmi) if bmi else None,
        weight_trend=trend,
        weight_trend_label=weight_trend_label(trend),
        deficit_label=deficit_label(trend),
        weight_stale=is_weight_stale(last_weight_date, today),
        days_since_weight=days_since_metric(last_weight_date, today),
        freshness_warning=data_freshness_warning(last_weight_date, today),
        new_prs=new_prs,
        goals=evaluate_goals(snapshot.goals, snapshot.goal_logs, exercise_map),
        summary=summary,
    )
