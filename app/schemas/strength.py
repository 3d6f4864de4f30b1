"""
Strength statistics schemas.

Volume is Σ weight×reps (kg) over completed sets.  ``estimated_one_rm`` is
the Epley estimate maximised over every set of the exercise.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class VolumeData(BaseModel):
    total_volume: float = 0.0
    weekly_volume: float = Field(0.0, description="Volume of sessions started in the last 7 days")
    avg_reps: float = Field(0.0, description="Average reps per set")
    avg_sets: float = Field(0.0, description="Average sets per exercise log")


class ExerciseRecord(BaseModel):
    """Best marks for one exercise.

    ``max_weight`` and ``max_reps`` are independent maxima and need not
    come from the same set.
    """

    exercise_id: int
    exercise_name: str
    max_weight: float
    max_reps: int
    estimated_one_rm: float
    last_performed: datetime.datetime


class MostPerformedExercise(BaseModel):
    exercise_id: int
    exercise_name: str
    count: int = Field(..., description="Number of exercise logs")
    muscle_group: Optional[str] = None


class MuscleGroupVolume(BaseModel):
    muscle_group: str
    volume: float
    percentage: float


class StrengthStats(BaseModel):
    personal_records: list[ExerciseRecord] = Field(default_factory=list)
    volume_data: VolumeData = Field(default_factory=VolumeData)
    most_performed_exercises: list[MostPerformedExercise] = Field(default_factory=list)
    muscle_group_balance: list[MuscleGroupVolume] = Field(default_factory=list)
