"""
Exercise catalogue API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.models.enums import BodyPart, MuscleGroup


class ExerciseCreate(BaseModel):
    """Schema for adding an exercise to the user's catalogue."""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    target_body_part: Optional[BodyPart] = None
    is_unilateral: bool = Field(False, description="Performed one side at a time")
    muscle_group: Optional[MuscleGroup] = None


class ExerciseResponse(BaseModel):
    id: int
    name: str
    description: Optional[str]
    target_body_part: Optional[str]
    is_unilateral: bool
    muscle_group: Optional[str]
    created_at: datetime.datetime

    class Config:
        from_attributes = True
