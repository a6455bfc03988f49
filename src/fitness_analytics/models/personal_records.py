"""Personal Records (PR) data models for strength and body achievements."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class StrengthPRType(str, Enum):
    """Types of strength records tracked per exercise."""
    MAX_WEIGHT = "max_weight"          # Heaviest load lifted for any reps
    ESTIMATED_1RM = "estimated_1rm"    # Best Epley one-rep-max estimate
    MAX_REPS = "max_reps"              # Most reps in a set at any load


class BodyPRType(str, Enum):
    """Types of body records; lower is better for all of them."""
    LOWEST_WEIGHT = "lowest_weight"
    SMALLEST_WAIST = "smallest_waist"
    BEST_BODY_FAT = "best_body_fat"


STRENGTH_PR_LABELS = {
    StrengthPRType.MAX_WEIGHT: "max weight",
    StrengthPRType.ESTIMATED_1RM: "1RM",
    StrengthPRType.MAX_REPS: "max reps",
}


class StrengthPR(BaseModel):
    """All-time best for one exercise and one record type."""

    model_config = ConfigDict(frozen=True)

    type: StrengthPRType = Field(..., description="Type of personal record")
    value: float = Field(..., description="Record value (kg or reps)")
    exercise_id: str = Field(..., description="Exercise identifier")
    exercise_name: str = Field(..., description="Exercise display name")
    date: str = Field(..., description="Session date of the record set")
    weight: Optional[float] = Field(None, description="Load of the record set")
    reps: Optional[int] = Field(None, description="Reps of the record set")

    @property
    def label(self) -> str:
        """Human-readable label, e.g. ``Bench Press 1RM``."""
        return f"{self.exercise_name} {STRENGTH_PR_LABELS[self.type]}"


class BodyPR(BaseModel):
    """Lowest logged value for a body measurement."""

    model_config = ConfigDict(frozen=True)

    type: BodyPRType = Field(..., description="Type of body record")
    value: float = Field(..., description="Record value")
    date: str = Field(..., description="Day the value was logged")
    unit: str = Field(..., description="Unit of measurement")
