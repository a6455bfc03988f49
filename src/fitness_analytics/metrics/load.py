"""Per-activity training load (arbitrary units)."""

from typing import Dict

from ..models.records import Activity, ActivityType
from ..utils.numbers import round_half_up


# Arbitrary units per minute of activity by type
LOAD_PER_MIN: Dict[ActivityType, float] = {
    ActivityType.STRENGTH: 1.0,
    ActivityType.CARDIO: 0.8,
    ActivityType.SPORT: 0.7,
    ActivityType.MOBILITY: 0.3,
    ActivityType.CUSTOM: 0.6,
}
DEFAULT_LOAD_PER_MIN = 0.6

DEFAULT_DURATION_MIN = 30  # used when a session has no recorded duration


def calc_activity_load(activity: Activity) -> int:
    """
    Training load for a single activity.

    load = duration (min) x per-type multiplier, rounded

    Args:
        activity: Logged activity; a missing duration counts as 30 minutes

    Returns:
        Load in arbitrary units
    """
    duration = activity.duration if activity.duration is not None else DEFAULT_DURATION_MIN
    multiplier = LOAD_PER_MIN.get(activity.type, DEFAULT_LOAD_PER_MIN)
    return round_half_up(duration * multiplier)
