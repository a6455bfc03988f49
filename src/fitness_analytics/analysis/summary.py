"""
Weekly Narrative

Template-based, deterministic summary sentences built from the other
engines' outputs. The same input always produces the same text.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from ..metrics.metabolism import (
    STALE_WEIGHT_DAYS,
    WARN_WEIGHT_DAYS,
    WeightTrend,
    days_since_metric,
)

MAX_LISTED_PRS = 3

MINUS = "\u2212"
EM_DASH = "\u2014"


@dataclass
class WeeklySummaryInput:
    """Everything the weekly summary is generated from."""

    workout_count: int
    total_workout_calories: int
    weight_trend: Optional[WeightTrend] = None
    new_prs: List[str] = field(default_factory=list)  # e.g. "Bench Press 1RM"


def _fmt(value: float) -> str:
    """Format a number without a trailing ``.0``."""
    return f"{value:g}"


def generate_weekly_summary(summary: WeeklySummaryInput) -> str:
    """
    Generate a 1-3 sentence weekly summary.

    Args:
        summary: Workout count, calories, weight trend and new PR labels

    Returns:
        Summary text
    """
    parts = []

    if summary.workout_count == 0:
        parts.append("No workouts logged this week.")
    else:
        plural = "s" if summary.workout_count > 1 else ""
        parts.append(
            f"This week: {summary.workout_count} workout{plural}, "
            f"~{summary.total_workout_calories:,} kcal burned."
        )

    trend = summary.weight_trend
    if trend is not None:
        rate = _fmt(abs(trend.rate_kg_per_week))
        kcal = abs(trend.estimated_deficit_kcal)
        if trend.direction == "losing":
            parts.append(
                f"Weight trend: {MINUS}{rate} kg/week {EM_DASH} estimated {kcal} kcal/day deficit."
            )
        elif trend.direction == "gaining":
            parts.append(
                f"Weight trend: +{rate} kg/week {EM_DASH} estimated {kcal} kcal/day surplus."
            )
        else:
            parts.append(f"Weight is stable {EM_DASH} energy balance is near maintenance.")

    if len(summary.new_prs) == 1:
        parts.append(f"New PR: {summary.new_prs[0]}.")
    elif len(summary.new_prs) > 1:
        listed = ", ".join(summary.new_prs[:MAX_LISTED_PRS])
        more = "…" if len(summary.new_prs) > MAX_LISTED_PRS else ""
        parts.append(f"New PRs: {listed}{more}.")

    return " ".join(parts)


def data_freshness_warning(
    last_weight_date: Optional[str],
    today: Optional[date] = None,
) -> Optional[str]:
    """
    Warn when the latest weight log is old.

    Args:
        last_weight_date: Date of the most recent weight log
        today: Reference day (defaults to the current date)

    Returns:
        Warning text, or None when the data is fresh
    """
    days = days_since_metric(last_weight_date, today)
    if days is None:
        return "Log your weight to enable calorie estimates."
    if days > STALE_WEIGHT_DAYS:
        return f"Weight last updated {days} days ago {EM_DASH} calorie estimates may be inaccurate."
    if days > WARN_WEIGHT_DAYS:
        return f"Weight updated {days} days ago {EM_DASH} consider logging an update."
    return None


def weight_trend_label(trend: Optional[WeightTrend]) -> str:
    """Short label such as ``\u22120.5 kg/wk``; an em dash when there is no trend."""
    if trend is None:
        return EM_DASH
    if trend.direction == "stable":
        return "Stable"
    sign = MINUS if trend.direction == "losing" else "+"
    return f"{sign}{_fmt(abs(trend.rate_kg_per_week))} kg/wk"


def deficit_label(trend: Optional[WeightTrend]) -> str:
    if trend is None or trend.direction == "stable":
        return "Maintenance"
    kcal = abs(trend.estimated_deficit_kcal)
    if trend.direction == "losing":
        return f"{MINUS}{kcal} kcal/day deficit"
    return f"+{kcal} kcal/day surplus"
