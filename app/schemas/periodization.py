"""
Periodization schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class WeekMetrics(BaseModel):
    week_start: datetime.date = Field(..., description="Monday of the week")
    total_volume: float = 0.0
    average_intensity: float = Field(0.0, description="Mean set load as a percentage of its Epley 1RM")
    total_sets: int = 0
    workout_count: int = 0


class TrainingPhase(BaseModel):
    type: str = Field(..., description="accumulation, intensification, deload or transition")
    week_start: datetime.date
    week_end: datetime.date = Field(..., description="Monday of the phase's last week")
    weeks: int = Field(..., ge=1)
    volume: float
    intensity: float
    characteristics: list[str] = Field(default_factory=list)
    recommendation: str = ""


class PeriodizationSummary(BaseModel):
    weekly_metrics: list[WeekMetrics] = Field(default_factory=list, description="Trained weeks, oldest first")
    current_phase: Optional[TrainingPhase] = None
    phase_history: list[TrainingPhase] = Field(default_factory=list, description="Oldest first")
    weeks_since_phase_change: int = 0
    recommended_next_phase: str = "accumulation"
    recommendation: str = ""
