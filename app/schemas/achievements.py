"""
Achievement schemas: milestone badges, recent records and improvements.
"""

import datetime

from pydantic import BaseModel, Field


class Badge(BaseModel):
    id: str
    title: str
    description: str
    unlocked: bool = False
    progress: float = Field(0.0, description="Current value, capped at target")
    target: float


class RecentRecord(BaseModel):
    """Heaviest set of an exercise inside the recent window."""

    exercise_name: str
    weight: float
    reps: int
    date: datetime.datetime


class TopImprovement(BaseModel):
    exercise_name: str
    improvement: float = Field(..., description="Percent increase of the max weight")
    from_weight: float
    to_weight: float


class Achievements(BaseModel):
    badges: list[Badge] = Field(default_factory=list)
    recent_prs: list[RecentRecord] = Field(default_factory=list)
    top_improvements: list[TopImprovement] = Field(default_factory=list)
