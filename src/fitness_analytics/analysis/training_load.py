"""
Training Load Engine

Buckets activities into Monday-start weeks, splits strength from other
work, and classifies each week's load.
"""

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, Iterable, List, Sequence

from ..metrics.load import calc_activity_load
from ..models.records import Activity, ActivityType
from ..utils.dates import parse_date, to_iso, week_start
from ..utils.numbers import round_half_up

logger = logging.getLogger(__name__)

MIN_SESSIONS = 2
MIN_LOAD = 60
MAX_LOAD = 300
MAX_SESSIONS = 7


class TrainingStatus(str, Enum):
    """Weekly load classification."""
    UNDERTRAINING = "undertraining"
    OPTIMAL = "optimal"
    OVERTRAINING = "overtraining"


@dataclass
class WeeklyLoad:
    """Training load for one Monday-start week."""

    week_start: str
    strength_load: int
    cardio_load: int     # everything that is not strength
    total_load: int
    session_count: int
    status: TrainingStatus

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        result = asdict(self)
        result["status"] = self.status.value
        return result


@dataclass
class DailyLoad:
    """Summed training load for one calendar day."""

    date: str
    load: int

    def to_dict(self) -> dict:
        return asdict(self)


def classify_week_load(total_load: float, sessions: int) -> TrainingStatus:
    """
    Classify a week.

    Undertraining is checked first, so a single huge session is still
    undertraining.

    Args:
        total_load: Total weekly load (AU)
        sessions: Number of sessions in the week

    Returns:
        TrainingStatus
    """
    if sessions < MIN_SESSIONS or total_load < MIN_LOAD:
        return TrainingStatus.UNDERTRAINING
    if total_load > MAX_LOAD or sessions > MAX_SESSIONS:
        return TrainingStatus.OVERTRAINING
    return TrainingStatus.OPTIMAL


def calc_weekly_loads(activities: Iterable[Activity]) -> List[WeeklyLoad]:
    """
    Aggregate activity load per week.

    Args:
        activities: Logged activities in any order

    Returns:
        WeeklyLoad entries sorted oldest -> newest
    """
    weeks: Dict[str, Dict[str, int]] = {}

    for activity in activities:
        activity_date = parse_date(activity.date)
        if activity_date is None:
            logger.debug("Skipping activity %s with unparseable date", activity.id)
            continue

        key = to_iso(week_start(activity_date))
        bucket = weeks.setdefault(key, {"strength": 0, "cardio": 0, "sessions": 0})

        load = calc_activity_load(activity)
        if activity.type == ActivityType.STRENGTH:
            bucket["strength"] += load
        else:
            bucket["cardio"] += load
        bucket["sessions"] += 1

    results = []
    for key in sorted(weeks):
        bucket = weeks[key]
        total = bucket["strength"] + bucket["cardio"]
        results.append(WeeklyLoad(
            week_start=key,
            strength_load=bucket["strength"],
            cardio_load=bucket["cardio"],
            total_load=total,
            session_count=bucket["sessions"],
            status=classify_week_load(total, bucket["sessions"]),
        ))
    return results


def get_4week_avg_load(weekly_loads: Sequence[WeeklyLoad]) -> int:
    """Mean total load of the last four weeks (fewer if not available, 0 if none)."""
    recent = list(weekly_loads)[-4:]
    if not recent:
        return 0
    return round_half_up(sum(w.total_load for w in recent) / len(recent))


def daily_loads(activities: Iterable[Activity]) -> List[DailyLoad]:
    """Summed load per calendar day, oldest first."""
    days: Dict[str, int] = {}
    for activity in activities:
        days[activity.date] = days.get(activity.date, 0) + calc_activity_load(activity)
    return [DailyLoad(date=d, load=load) for d, load in sorted(days.items())]
