"""
Body-part analysis schemas.
"""

import datetime

from pydantic import BaseModel, Field


class VolumeDistribution(BaseModel):
    body_part: str
    volume: float
    percentage: float


class BodyPartImbalance(BaseModel):
    """Antagonist pair comparison.

    ``difference`` is ``|volume1 - volume2| / max(volume1, volume2) * 100``.
    """

    label: str = Field(..., description="e.g. 'Chest vs Back'")
    part1: str
    part2: str
    volume1: float
    volume2: float
    difference: float
    is_imbalanced: bool


class UndertrainedBodyPart(BaseModel):
    body_part: str
    days_since_last_trained: int
    severity: str = Field(..., description="warning (>14 days) or critical (>30 days)")
    times_this_month: int = Field(..., description="Sessions in the last 30 days that trained it")


class WeeklyVolume(BaseModel):
    week: datetime.date = Field(..., description="Monday of the week")
    volume: int


class BodyPartProgressHistory(BaseModel):
    body_part: str
    weekly_data: list[WeeklyVolume] = Field(default_factory=list)


class BodyPartAnalysis(BaseModel):
    imbalances: list[BodyPartImbalance] = Field(default_factory=list)
    undertrained_parts: list[UndertrainedBodyPart] = Field(default_factory=list)
    volume_distribution: list[VolumeDistribution] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    progress_history: list[BodyPartProgressHistory] = Field(default_factory=list)
