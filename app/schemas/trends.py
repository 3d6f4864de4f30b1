"""
Training trend schemas.
"""

import datetime

from pydantic import BaseModel, Field


class WeeklyProgress(BaseModel):
    week_start: datetime.date = Field(..., description="Monday of the week")
    workouts: int = 0
    volume: int = 0
    improvement: int = Field(0, description="Volume change vs the previous week, percent")


class WeightPoint(BaseModel):
    date: datetime.datetime
    max_weight: float


class ExerciseProgress(BaseModel):
    exercise_id: int
    exercise_name: str
    data_points: list[WeightPoint] = Field(default_factory=list, description="Oldest first")


class HeatmapDay(BaseModel):
    date: datetime.date
    count: int


class TrendsStats(BaseModel):
    weekly_progress: list[WeeklyProgress] = Field(default_factory=list)
    exercise_progress: list[ExerciseProgress] = Field(default_factory=list)
    workout_heatmap: list[HeatmapDay] = Field(default_factory=list)
    best_day: str = ""
    best_time: str = ""
