"""
Left/right symmetry schemas.

``imbalance_percentage`` is the deviation of the stronger side from the
balanced midpoint, expressed as a percentage of that midpoint:

- ``0``   - both sides moved identical volume
- ``100`` - only one side was trained
"""

from typing import Optional

from pydantic import BaseModel, Field


class SymmetryMetric(BaseModel):
    """Per-side totals for one unilateral exercise."""

    exercise_id: int
    exercise_name: str
    left_volume: float = 0.0
    right_volume: float = 0.0
    left_avg_weight: float = 0.0
    right_avg_weight: float = 0.0
    left_avg_reps: float = 0.0
    right_avg_reps: float = 0.0
    left_sets_count: int = 0
    right_sets_count: int = 0
    imbalance_percentage: float = 0.0
    stronger_side: str = Field(..., description="One of: left, right, balanced")
    risk_level: str = Field(..., description="One of: low, moderate, high")


class SymmetrySummary(BaseModel):
    total_unilateral_exercises: int = 0
    exercises_with_imbalance: int = Field(0, description="Exercises at or above the moderate threshold")
    average_imbalance: float = 0.0
    worst_imbalance: Optional[SymmetryMetric] = None
    metrics: list[SymmetryMetric] = Field(default_factory=list, description="Worst imbalance first")
