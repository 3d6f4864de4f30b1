"""
Workout logging API schemas.

A session is logged in one request with its exercise logs and their sets.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from app.models.enums import Side, WorkoutType
from app.schemas.common import to_naive_utc


class SetLogCreate(BaseModel):
    set_number: int = Field(..., ge=1)
    reps: int = Field(..., ge=0)
    weight: Optional[float] = Field(None, ge=0, description="kg")
    rir: Optional[int] = Field(None, ge=0, le=10, description="Reps in reserve")
    completed: bool = True
    side: Optional[Side] = Field(None, description="Only for unilateral exercises")


class ExerciseLogCreate(BaseModel):
    exercise_id: int
    order_index: int = Field(0, ge=0)
    notes: Optional[str] = None
    sets: list[SetLogCreate] = Field(default_factory=list)


class WorkoutSessionCreate(BaseModel):
    """Schema for logging a workout session."""

    name: str = Field(..., min_length=1, max_length=255)
    workout_type: WorkoutType
    started_at: datetime.datetime
    completed_at: Optional[datetime.datetime] = Field(None, description="Leave empty for an unfinished session")
    notes: Optional[str] = None
    exercises: list[ExerciseLogCreate] = Field(default_factory=list)

    @field_validator("started_at", "completed_at")
    @classmethod
    def normalize_timezone(cls, value: Optional[datetime.datetime]) -> Optional[datetime.datetime]:
        return to_naive_utc(value)

    @model_validator(mode="after")
    def check_completion_order(self) -> "WorkoutSessionCreate":
        if self.completed_at is not None and self.completed_at < self.started_at:
            raise ValueError("completed_at must not be before started_at")
        return self


class WorkoutComplete(BaseModel):
    completed_at: Optional[datetime.datetime] = Field(None, description="Defaults to now")

    @field_validator("completed_at")
    @classmethod
    def normalize_timezone(cls, value: Optional[datetime.datetime]) -> Optional[datetime.datetime]:
        return to_naive_utc(value)


class SetLogResponse(BaseModel):
    id: int
    set_number: int
    reps: int
    weight: Optional[float]
    rir: Optional[int]
    completed: bool
    side: Optional[str]

    class Config:
        from_attributes = True


class ExerciseLogResponse(BaseModel):
    id: int
    exercise_id: int
    order_index: int
    notes: Optional[str]
    sets: list[SetLogResponse] = Field(default_factory=list)


class WorkoutSessionResponse(BaseModel):
    id: int
    name: str
    workout_type: str
    started_at: datetime.datetime
    completed_at: Optional[datetime.datetime]
    notes: Optional[str]
    exercises: list[ExerciseLogResponse] = Field(default_factory=list)
