"""
Dashboard insight and exercise recommendation schemas.
"""

from pydantic import BaseModel, Field

from app.schemas.exercise import ExerciseResponse


class BodyPartInsight(BaseModel):
    """A single dashboard card."""

    type: str = Field(..., description="imbalance, undertrained, pr or performing")
    body_part: str
    title: str
    description: str
    value: str = Field(..., description="Display value, e.g. '42%', '9d', '120kg'")
    severity: str = Field(..., description="low, moderate, high or positive")


class ExerciseRecommendation(BaseModel):
    body_part: str
    body_part_label: str
    reason: str
    priority: str = Field(..., description="high, moderate or low")
    exercises: list[ExerciseResponse] = Field(default_factory=list)
    days_since_last_training: int = Field(..., description="999 when never trained in the window")
    volume_deficit: float = Field(..., description="Percent below the mean body-part volume (negative = above)")
