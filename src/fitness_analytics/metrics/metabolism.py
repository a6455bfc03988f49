"""Energy expenditure: BMR, TDEE and weight-trend energy balance.

BMR uses the Mifflin-St Jeor equation. TDEE deliberately applies no activity
multiplier to BMR; workout energy is passed in explicitly so that per-workout
calorie estimates are not counted twice.
"""

import logging
from dataclasses import asdict, dataclass
from datetime import date
from typing import Iterable, Optional, Sequence

from ..models.records import BodyMetric, Gender
from ..utils.dates import parse_date
from ..utils.numbers import round_half_up

logger = logging.getLogger(__name__)

# kcal burned per step
KCAL_PER_STEP = 0.04

# Rate below which weight change is considered "stable" (kg/week)
STABLE_THRESHOLD_KG = 0.1

# 1 kg of body mass ~ 7700 kcal
KCAL_PER_KG = 7700

MIN_TREND_SPAN_DAYS = 3
STALE_WEIGHT_DAYS = 14
WARN_WEIGHT_DAYS = 7


@dataclass
class MetricsProfile:
    """Inputs to the BMR equation."""

    weight: float   # kg
    height: float   # cm
    age: int        # years
    gender: Gender

    def to_dict(self) -> dict:
        result = asdict(self)
        result["gender"] = self.gender.value
        return result


@dataclass
class MetabolismResult:
    """Daily energy expenditure breakdown (kcal/day)."""

    bmr: int
    tdee: int
    workout_calories: int
    steps_calories: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class WeightPoint:
    """A dated weight measurement."""

    date: str      # YYYY-MM-DD
    weight: float  # kg

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class WeightTrend:
    """Weight change rate and the energy balance it implies."""

    direction: str                 # 'losing', 'gaining', 'stable'
    rate_kg_per_week: float        # positive = gaining
    estimated_deficit_kcal: int    # kcal/day, negative = deficit

    def to_dict(self) -> dict:
        return asdict(self)


def resolve_profile(metrics: Iterable[BodyMetric]) -> Optional[MetricsProfile]:
    """
    Build a BMR profile from the most recent non-null value of each field.

    Profile fields change rarely and are often logged on different days, so
    each one is sourced independently.

    Args:
        metrics: Body metric rows in any order

    Returns:
        MetricsProfile, or None if any field has never been logged
    """
    newest_first = sorted(metrics, key=lambda m: m.date, reverse=True)

    weight = next((m.weight for m in newest_first if m.weight), None)
    height = next((m.height for m in newest_first if m.height), None)
    age = next((m.age for m in newest_first if m.age), None)
    gender = next((m.gender for m in newest_first if m.gender), None)

    if weight and height and age and gender:
        return MetricsProfile(weight=weight, height=height, age=age, gender=gender)
    return None


def calc_bmr(profile: MetricsProfile) -> int:
    """
    Mifflin-St Jeor BMR.

    Men:   10w + 6.25h - 5a + 5
    Women: 10w + 6.25h - 5a - 161

    Args:
        profile: Weight, height, age and gender

    Returns:
        BMR in kcal/day
    """
    base = 10 * profile.weight + 6.25 * profile.height - 5 * profile.age
    if profile.gender == Gender.MALE:
        return round_half_up(base + 5)
    return round_half_up(base - 161)


def calc_tdee(
    bmr: int,
    workout_calories: float,
    steps: Optional[int] = None,
) -> MetabolismResult:
    """
    Total Daily Energy Expenditure = BMR + workout calories + step calories.

    Args:
        bmr: Basal metabolic rate (kcal/day)
        workout_calories: Daily workout energy (kcal)
        steps: Daily step count

    Returns:
        MetabolismResult
    """
    steps_calories = round_half_up((steps or 0) * KCAL_PER_STEP)
    workout = round_half_up(workout_calories)
    return MetabolismResult(
        bmr=bmr,
        tdee=bmr + workout + steps_calories,
        workout_calories=workout,
        steps_calories=steps_calories,
    )


def calc_weight_trend(points: Sequence[WeightPoint]) -> Optional[WeightTrend]:
    """
    Two-point weight rate over the observed span.

    Args:
        points: Dated weights in any order

    Returns:
        WeightTrend, or None with fewer than 2 points or a span under 3 days
    """
    if len(points) < 2:
        return None

    ordered = sorted(points, key=lambda p: p.date)
    first, last = ordered[0], ordered[-1]

    first_date = parse_date(first.date)
    last_date = parse_date(last.date)
    if first_date is None or last_date is None:
        return None

    span_days = max((last_date - first_date).days, 1)
    if span_days < MIN_TREND_SPAN_DAYS:
        return None

    rate_per_day = (last.weight - first.weight) / span_days
    rate_per_week = rate_per_day * 7

    if abs(rate_per_week) < STABLE_THRESHOLD_KG:
        direction = "stable"
    elif rate_per_week < 0:
        direction = "losing"
    else:
        direction = "gaining"

    return WeightTrend(
        direction=direction,
        rate_kg_per_week=round_half_up(rate_per_week, 2),
        estimated_deficit_kcal=round_half_up(rate_per_day * KCAL_PER_KG),
    )


def days_since_metric(last_date: Optional[str], today: Optional[date] = None) -> Optional[int]:
    """Days since the last metric log, or None if never logged."""
    last = parse_date(last_date)
    if last is None:
        return None
    today = today or date.today()
    return (today - last).days


def is_weight_stale(last_weight_date: Optional[str], today: Optional[date] = None) -> bool:
    """True if the most recent weight log is older than 14 days (or missing)."""
    days = days_since_metric(last_weight_date, today)
    if days is None:
        return True
    return days > STALE_WEIGHT_DAYS


def calc_bmi(weight_kg: float, height_cm: float) -> float:
    """Body mass index rounded to one decimal (informational only)."""
    if height_cm <= 0:
        return 0.0
    height_m = height_cm / 100
    return round_half_up(weight_kg / (height_m * height_m), 1)


def bmi_category(bmi: float) -> str:
    """WHO category for a BMI value."""
    if bmi < 18.5:
        return "Underweight"
    elif bmi < 25:
        return "Normal"
    elif bmi < 30:
        return "Overweight"
    return "Obese"
