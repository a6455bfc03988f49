"""MET-based calorie estimation for cardio and strength sessions.

Calories = MET x body weight (kg) x duration (hours)

The MET value is picked by whichever inputs are available:
- cardio with distance: speed bracket table
- cardio without distance: keyword scan of the notes
- strength with sets: average relative intensity (weight / 1RM)
- anything else: per-activity-type fallback
"""

import logging
from collections import OrderedDict
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..models.records import Activity, ActivityType, StrengthSet
from ..utils.numbers import round_half_up
from .load import DEFAULT_DURATION_MIN
from .strength import estimate_1rm

logger = logging.getLogger(__name__)


class CalorieMethod(str, Enum):
    """How a calorie estimate was derived."""
    CARDIO_SPEED_MET = "cardio_speed_met"
    CARDIO_TYPE_FALLBACK = "cardio_type_fallback"
    STRENGTH_INTENSITY = "strength_intensity"
    STRENGTH_DURATION = "strength_duration"


# Speed (km/h) -> MET. First bracket whose upper bound is >= the speed wins.
CARDIO_SPEED_MET: List[Tuple[float, float]] = [
    (5.0, 3.5),             # walking
    (7.0, 5.0),             # brisk walk / easy jog
    (9.0, 7.0),             # moderate run
    (11.0, 9.5),            # tempo run
    (14.0, 11.5),           # fast run
    (float("inf"), 14.0),   # sprint
]

# Keyword -> MET when no distance is available. Checked in this order.
CARDIO_KEYWORD_MET: Dict[str, float] = OrderedDict([
    ("run", 9.0),
    ("jog", 7.0),
    ("cycl", 8.0),
    ("bike", 8.0),
    ("swim", 7.0),
    ("row", 7.0),
    ("walk", 3.5),
    ("hiit", 10.0),
    ("sport", 7.0),
])
CARDIO_DEFAULT_MET = 6.0

# Relative intensity (weight / 1RM) -> MET for strength work.
STRENGTH_INTENSITY_MET: List[Tuple[float, float]] = [
    (0.60, 3.0),   # easy
    (0.75, 4.5),   # moderate
    (0.85, 6.0),   # hard
    (1.00, 8.0),   # very hard
]
STRENGTH_DEFAULT_MET = 4.5

# Fallback MET when no set or distance data is available.
ACTIVITY_TYPE_MET: Dict[ActivityType, float] = {
    ActivityType.STRENGTH: 4.5,
    ActivityType.CARDIO: 7.0,
    ActivityType.SPORT: 7.0,
    ActivityType.MOBILITY: 2.5,
    ActivityType.CUSTOM: 5.0,
}

# Work time per set plus average rest, for estimating session length.
SET_DURATION_SECS = 45
REST_DURATION_SECS = 90


@dataclass
class CalorieResult:
    """Calorie estimate for one session."""

    calories: int
    met: float
    method: CalorieMethod
    duration_hrs: float

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        result = asdict(self)
        result["method"] = self.method.value
        return result


@dataclass
class WorkoutCalories:
    """Calorie estimate attached to the activity it was computed for."""

    activity_id: str
    date: str
    activity_type: str
    calories: int
    met: float
    method: CalorieMethod

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        result = asdict(self)
        result["method"] = self.method.value
        return result


@dataclass
class PeriodCalories:
    """Calories summed over a calendar period."""

    period: str
    calories: int

    def to_dict(self) -> dict:
        return asdict(self)


def _calories(met: float, weight_kg: float, duration_hrs: float) -> int:
    if duration_hrs <= 0 or weight_kg <= 0:
        return 0
    return round_half_up(met * weight_kg * duration_hrs)


def speed_to_met(speed_kmh: float) -> float:
    """Map speed to MET using the bracket table (ties go to the lower bracket)."""
    for max_speed, met in CARDIO_SPEED_MET:
        if speed_kmh <= max_speed:
            return met
    return CARDIO_SPEED_MET[-1][1]


def intensity_to_met(intensity: float) -> float:
    """Map relative intensity (weight / 1RM) to MET."""
    for max_intensity, met in STRENGTH_INTENSITY_MET:
        if intensity <= max_intensity:
            return met
    return STRENGTH_INTENSITY_MET[-1][1]


def detect_cardio_met(notes: Optional[str]) -> float:
    """Detect the activity from free-text notes; first matching keyword wins."""
    lower = (notes or "").lower()
    for keyword, met in CARDIO_KEYWORD_MET.items():
        if keyword in lower:
            return met
    return CARDIO_DEFAULT_MET


def calc_cardio_calories(
    duration_min: float,
    weight_kg: float,
    distance_km: Optional[float] = None,
    notes: Optional[str] = None,
) -> CalorieResult:
    """
    Calculate calories for a cardio session.

    Uses speed-based MET if distance is available, keyword fallback otherwise.

    Args:
        duration_min: Session duration in minutes
        weight_kg: Body weight in kg
        distance_km: Distance covered, if recorded
        notes: Free-text notes used for keyword detection

    Returns:
        CalorieResult (zero calories when duration or body weight is not positive)
    """
    duration_hrs = duration_min / 60 if duration_min > 0 else 0.0

    if distance_km and distance_km > 0 and duration_hrs > 0:
        met = speed_to_met(distance_km / duration_hrs)
        method = CalorieMethod.CARDIO_SPEED_MET
    else:
        met = detect_cardio_met(notes)
        method = CalorieMethod.CARDIO_TYPE_FALLBACK

    return CalorieResult(
        calories=_calories(met, weight_kg, duration_hrs),
        met=met,
        method=method,
        duration_hrs=duration_hrs,
    )


def estimate_strength_duration(set_count: int) -> int:
    """Estimated session length in minutes from the number of sets (min. one)."""
    total_sets = max(set_count, 1)
    return round_half_up(total_sets * (SET_DURATION_SECS + REST_DURATION_SECS) / 60)


def calc_strength_calories(
    sets: Sequence[StrengthSet],
    weight_kg: float,
    duration_min: Optional[float] = None,
) -> CalorieResult:
    """
    Calculate calories for a strength session.

    Averages relative intensity (weight / estimated 1RM) over sets that have
    both weight and reps, and maps it to a MET band. Without a recorded
    duration the session length is estimated from the set count.

    Args:
        sets: Sets performed in the session
        weight_kg: Body weight in kg
        duration_min: Recorded duration in minutes, if any

    Returns:
        CalorieResult
    """
    if duration_min is None:
        duration = estimate_strength_duration(len(sets))
        method = CalorieMethod.STRENGTH_DURATION
    else:
        duration = duration_min
        method = CalorieMethod.STRENGTH_INTENSITY
    duration_hrs = duration / 60 if duration > 0 else 0.0

    valid_sets = [s for s in sets if (s.weight or 0) > 0 and (s.reps or 0) > 0]
    if valid_sets:
        avg_intensity = sum(
            s.weight / estimate_1rm(s.weight, s.reps) for s in valid_sets
        ) / len(valid_sets)
        met = intensity_to_met(avg_intensity)
    else:
        met = STRENGTH_DEFAULT_MET

    return CalorieResult(
        calories=_calories(met, weight_kg, duration_hrs),
        met=met,
        method=method,
        duration_hrs=duration_hrs,
    )


def calc_activity_calories(
    activity_type: ActivityType,
    duration_min: float,
    weight_kg: float,
) -> CalorieResult:
    """Per-activity estimate from the activity type alone."""
    met = ACTIVITY_TYPE_MET.get(activity_type, ACTIVITY_TYPE_MET[ActivityType.CUSTOM])
    duration_hrs = duration_min / 60 if duration_min > 0 else 0.0
    return CalorieResult(
        calories=_calories(met, weight_kg, duration_hrs),
        met=met,
        method=CalorieMethod.CARDIO_TYPE_FALLBACK,
        duration_hrs=duration_hrs,
    )


def estimate_workout_calories(
    activity: Activity,
    weight_kg: float,
    sets: Optional[Sequence[StrengthSet]] = None,
) -> WorkoutCalories:
    """
    Estimate calories for a logged activity using the richest data available.

    Args:
        activity: The logged session
        weight_kg: Body weight in kg
        sets: Sets belonging to this activity (strength sessions)

    Returns:
        WorkoutCalories for the activity
    """
    if activity.type == ActivityType.STRENGTH and sets:
        result = calc_strength_calories(sets, weight_kg, activity.duration)
    elif activity.type == ActivityType.CARDIO:
        result = calc_cardio_calories(
            activity.duration if activity.duration is not None else DEFAULT_DURATION_MIN,
            weight_kg,
            distance_km=activity.distance,
            notes=activity.notes,
        )
    else:
        result = calc_activity_calories(
            activity.type,
            activity.duration if activity.duration is not None else DEFAULT_DURATION_MIN,
            weight_kg,
        )

    if result.calories == 0:
        logger.debug("Zero-calorie estimate for activity %s", activity.id)

    return WorkoutCalories(
        activity_id=activity.id,
        date=activity.date,
        activity_type=activity.type.value,
        calories=result.calories,
        met=result.met,
        method=result.method,
    )


def calc_monthly_calories(
    activities: Iterable[Activity],
    weight_kg: float,
    limit: int = 8,
) -> List[PeriodCalories]:
    """
    Type-fallback calories summed per calendar month (``YYYY-MM``).

    Args:
        activities: Logged activities, any order
        weight_kg: Body weight in kg
        limit: Number of most recent months to keep

    Returns:
        PeriodCalories sorted oldest -> newest
    """
    by_month: Dict[str, int] = {}
    for activity in activities:
        month = activity.date[:7]
        duration = activity.duration if activity.duration is not None else DEFAULT_DURATION_MIN
        calories = calc_activity_calories(activity.type, duration, weight_kg).calories
        by_month[month] = by_month.get(month, 0) + calories

    months = sorted(by_month.items())
    if limit > 0:
        months = months[-limit:]
    return [PeriodCalories(period=month, calories=kcal) for month, kcal in months]
