"""Logged-record models consumed by the analytics engines.

These mirror the rows the record store returns. The engines only read them;
nothing here is persisted or mutated.
"""

from datetime import date, datetime
from enum import Enum
from typing import Annotated, Dict, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


class ActivityType(str, Enum):
    """Kinds of logged sessions."""
    STRENGTH = "strength"
    CARDIO = "cardio"
    SPORT = "sport"
    MOBILITY = "mobility"
    CUSTOM = "custom"


class Gender(str, Enum):
    """Profile gender, used by the BMR equation."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class GoalType(str, Enum):
    """Types of user goals."""
    WEIGHT = "weight"
    WAIST = "waist"
    LIFT = "lift"
    CARDIO_DISTANCE = "cardio_distance"
    CARDIO_TIME = "cardio_time"
    BODY_FAT = "body_fat"


def _normalize_iso_date(value):
    """Accept date/datetime objects and timestamps, keep ``YYYY-MM-DD``."""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str) and len(value) > 10:
        return value[:10]
    return value


IsoDate = Annotated[str, BeforeValidator(_normalize_iso_date)]


class RecordModel(BaseModel):
    """Base for read-only record models."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )


class StrengthSet(RecordModel):
    """A single logged set, with its parent session date attached."""

    id: Optional[str] = Field(None, description="Set identifier")
    activity_id: Optional[str] = Field(None, description="Parent session identifier")
    exercise_id: str = Field(..., description="Exercise identifier")
    set_number: int = Field(default=1, description="Position within the session")
    weight: Optional[float] = Field(None, description="Load in kg")
    reps: Optional[int] = Field(None, description="Repetitions")
    activity_date: Optional[IsoDate] = Field(None, description="Session date (YYYY-MM-DD)")
    exercise_name: Optional[str] = Field(None, description="Exercise display name")

    @property
    def volume(self) -> float:
        """weight x reps, with missing fields contributing zero."""
        return (self.weight or 0) * (self.reps or 0)


class Activity(RecordModel):
    """A logged session."""

    id: str = Field(..., description="Activity identifier")
    date: IsoDate = Field(..., description="Calendar day (YYYY-MM-DD)")
    type: ActivityType = Field(default=ActivityType.CUSTOM, description="Activity kind")
    duration: Optional[float] = Field(None, description="Duration in minutes")
    distance: Optional[float] = Field(None, description="Distance in km (cardio)")
    notes: Optional[str] = Field(None, description="Free-text notes")


class BodyMetric(RecordModel):
    """One day's body measurements plus rarely-changing profile fields."""

    id: Optional[str] = Field(None, description="Metric row identifier")
    date: IsoDate = Field(..., description="Measurement day (YYYY-MM-DD)")
    weight: Optional[float] = Field(None, description="Body weight in kg")
    waist: Optional[float] = Field(None, description="Waist in cm")
    body_fat: Optional[float] = Field(None, description="Body fat percentage")
    height: Optional[float] = Field(None, description="Height in cm")
    age: Optional[int] = Field(None, description="Age in years")
    gender: Optional[Gender] = Field(None, description="Gender")
    steps: Optional[int] = Field(None, description="Daily step count")


class Exercise(RecordModel):
    """Exercise catalogue entry."""

    id: str
    name: str
    category: Optional[str] = None


class Goal(RecordModel):
    """A user goal with a numeric target."""

    id: str
    type: GoalType
    target_value: float
    exercise_id: Optional[str] = None
    target_date: Optional[str] = None
    notes: Optional[str] = None
    is_active: bool = True


class GoalLog(RecordModel):
    """A progress entry logged against a goal."""

    goal_id: str
    value: float
    date: IsoDate


class RecordSnapshot(BaseModel):
    """All records for one user, as returned by the record store."""

    sets: List[StrengthSet] = Field(default_factory=list)
    activities: List[Activity] = Field(default_factory=list)
    body_metrics: List[BodyMetric] = Field(default_factory=list)
    exercises: List[Exercise] = Field(default_factory=list)
    goals: List[Goal] = Field(default_factory=list)
    goal_logs: List[GoalLog] = Field(default_factory=list)

    def exercise_map(self) -> Dict[str, str]:
        """Exercise id -> name, falling back to names carried on the sets."""
        names = {
            s.exercise_id: s.exercise_name
            for s in self.sets
            if s.exercise_name
        }
        names.update({e.id: e.name for e in self.exercises})
        return names
