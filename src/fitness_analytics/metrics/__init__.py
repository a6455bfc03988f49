"""Estimation primitives: 1RM, calories, training load, metabolism."""

from .strength import epley_1rm, estimate_1rm, set_volume
from .load import (
    DEFAULT_DURATION_MIN,
    LOAD_PER_MIN,
    calc_activity_load,
)
from .calories import (
    CalorieMethod,
    CalorieResult,
    PeriodCalories,
    WorkoutCalories,
    calc_activity_calories,
    calc_cardio_calories,
    calc_monthly_calories,
    calc_strength_calories,
    detect_cardio_met,
    estimate_strength_duration,
    estimate_workout_calories,
    intensity_to_met,
    speed_to_met,
)
from .metabolism import (
    MetabolismResult,
    MetricsProfile,
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

__all__ = [
    # 1RM
    "epley_1rm",
    "estimate_1rm",
    "set_volume",
    # Load
    "DEFAULT_DURATION_MIN",
    "LOAD_PER_MIN",
    "calc_activity_load",
    # Calories
    "CalorieMethod",
    "CalorieResult",
    "PeriodCalories",
    "WorkoutCalories",
    "calc_activity_calories",
    "calc_cardio_calories",
    "calc_monthly_calories",
    "calc_strength_calories",
    "detect_cardio_met",
    "estimate_strength_duration",
    "estimate_workout_calories",
    "intensity_to_met",
    "speed_to_met",
    # Metabolism
    "MetabolismResult",
    "MetricsProfile",
    "WeightPoint",
    "WeightTrend",
    "bmi_category",
    "calc_bmi",
    "calc_bmr",
    "calc_tdee",
    "calc_weight_trend",
    "days_since_metric",
    "is_weight_stale",
    "resolve_profile",
]
