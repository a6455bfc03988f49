"""Request bodies for the analytics API."""

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..models.records import Activity, BodyMetric, RecordSnapshot, StrengthSet


class DashboardRequest(BaseModel):
    """Full snapshot plus the summary window."""

    snapshot: RecordSnapshot
    today: Optional[date] = Field(None, description="Reference day, defaults to today")
    days: Optional[int] = Field(None, ge=1, le=365, description="Summary window length")
    default_body_weight_kg: Optional[float] = Field(None, gt=0)


class ActivitiesRequest(BaseModel):
    activities: List[Activity] = Field(default_factory=list)


class SetsRequest(BaseModel):
    sets: List[StrengthSet] = Field(default_factory=list)
    exercise_map: Dict[str, str] = Field(default_factory=dict, description="exercise_id -> name")


class BodyMetricsRequest(BaseModel):
    body_metrics: List[BodyMetric] = Field(default_factory=list)


class MetabolismRequest(BaseModel):
    """Body metrics for the profile plus daily workout energy."""

    body_metrics: List[BodyMetric] = Field(default_factory=list)
    workout_calories: float = Field(0, ge=0, description="Daily workout kcal")
    steps: Optional[int] = Field(None, ge=0, description="Daily steps, defaults to the latest logged")


class CardioCaloriesRequest(BaseModel):
    duration_min: float = Field(..., description="Session duration in minutes")
    weight_kg: float = Field(..., description="Body weight in kg")
    distance_km: Optional[float] = Field(None, description="Distance covered")
    notes: Optional[str] = Field(None, description="Free-text notes for keyword detection")


class StrengthCaloriesRequest(BaseModel):
    sets: List[StrengthSet] = Field(default_factory=list)
    weight_kg: float = Field(..., description="Body weight in kg")
    duration_min: Optional[float] = Field(None, description="Recorded duration in minutes")
