"""
General workout statistics schemas.

Durations are whole minutes.  Streaks count consecutive calendar days with
at least one completed session.
"""

from pydantic import BaseModel, Field


class WorkoutTimeTotals(BaseModel):
    """Summed session duration (minutes) per window."""

    this_week: int = Field(0, description="Sessions started in the last 7 days")
    this_month: int = Field(0, description="Sessions started in the last 30 days")
    all_time: int = 0


class DayFrequency(BaseModel):
    day: str = Field(..., description="English weekday name, e.g. 'Monday'")
    count: int


class HourFrequency(BaseModel):
    hour: str = Field(..., description="Start hour formatted as 'HH:00'")
    count: int


class GeneralStats(BaseModel):
    """Headline numbers for the dashboard."""

    total_workouts: int = 0
    total_workout_time: WorkoutTimeTotals = Field(default_factory=WorkoutTimeTotals)
    total_exercises: int = Field(0, description="Exercise logs across completed sessions")
    average_workout_duration: int = Field(0, description="Minutes")
    most_frequent_days: list[DayFrequency] = Field(default_factory=list)
    most_frequent_times: list[HourFrequency] = Field(default_factory=list)
    best_streak: int = 0
    current_streak: int = 0
