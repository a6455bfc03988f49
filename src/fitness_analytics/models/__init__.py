"""Record and result models."""

from .records import (
    Activity,
    ActivityType,
    BodyMetric,
    Exercise,
    Gender,
    Goal,
    GoalLog,
    GoalType,
    RecordSnapshot,
    StrengthSet,
)
from .personal_records import (
    BodyPR,
    BodyPRType,
    StrengthPR,
    StrengthPRType,
)

__all__ = [
    "Activity",
    "ActivityType",
    "BodyMetric",
    "Exercise",
    "Gender",
    "Goal",
    "GoalLog",
    "GoalType",
    "RecordSnapshot",
    "StrengthSet",
    "BodyPR",
    "BodyPRType",
    "StrengthPR",
    "StrengthPRType",
]
