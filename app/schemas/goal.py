"""
Body-part goal API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.models.enums import BodyPart, GoalTimeframe, GoalType


class GoalCreate(BaseModel):
    """Schema for creating a body-part goal."""

    body_part: BodyPart
    goal_type: GoalType
    timeframe: GoalTimeframe = GoalTimeframe.WEEKLY
    target_value: Optional[float] = Field(None, gt=0, description="Volume (kg) or session count")
    target_exercises: Optional[list[str]] = Field(None, description="Exercise names for specific_exercises goals")


class GoalUpdate(BaseModel):
    """Schema for updating a goal. Omitted fields are left untouched."""

    timeframe: Optional[GoalTimeframe] = None
    target_value: Optional[float] = Field(None, gt=0)
    target_exercises: Optional[list[str]] = None
    is_active: Optional[bool] = None


class GoalResponse(BaseModel):
    id: int
    body_part: str
    goal_type: str
    timeframe: str
    target_value: Optional[float]
    target_exercises: Optional[list[str]]
    is_active: bool
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True


class GoalProgress(BaseModel):
    """A goal evaluated over its rolling window.

    ``progress`` is clamped to 100 even when ``current_value`` overshoots
    the target.
    """

    goal: GoalResponse
    current_value: float = 0.0
    target: float = Field(0.0, description="target_value, or the number of target exercises")
    progress: float = Field(0.0, ge=0, le=100)
    is_achieved: bool = False
