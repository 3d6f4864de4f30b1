"""
Left/right symmetry analysis for unilateral exercises.

Only completed sets of exercises flagged ``is_unilateral`` that carry a
``side`` are considered.  For each exercise::

    midpoint  = (left + right) / 2
    imbalance = (max(left, right) - midpoint) / midpoint * 100

i.e. how far the stronger side sits above the balanced midpoint, as a share
of the midpoint (left-only → 100, equal volumes → 0).

Labels
------
- ``stronger_side``: ``balanced`` below ``balanced_threshold``, otherwise
  the side with more volume.
- ``risk_level``: ``low`` below ``moderate_threshold``, ``moderate`` below
  ``high_threshold``, ``high`` above.
"""

from __future__ import annotations

import datetime
from typing import Optional

from pydantic import BaseModel, Field
from sqlmodel import Session

from app.analytics.context import UserContext, run_aggregation
from app.analytics.dataset import SetRecord, TrainingData
from app.core.config import settings
from app.db.repositories.workout import WorkoutRepository
from app.models.enums import Severity, Side
from app.schemas.common import AnalyticsResult
from app.schemas.symmetry import SymmetryMetric, SymmetrySummary


class SymmetryConfig(BaseModel):
    balanced_threshold: float = Field(10.0, description="Below this the exercise is 'balanced'")
    moderate_threshold: float = Field(15.0, description="Imbalance counted towards exercises_with_imbalance")
    high_threshold: float = 25.0


DEFAULT_CONFIG = SymmetryConfig()


# ======================================================================
# Labelling
# ======================================================================


def imbalance_percentage(left_volume: float, right_volume: float) -> float:
    midpoint = (left_volume + right_volume) / 2
    if midpoint <= 0:
        return 0.0
    return (max(left_volume, right_volume) - midpoint) / midpoint * 100


def _stronger_side(left_volume: float, right_volume: float, imbalance: float, cfg: SymmetryConfig) -> str:
    if imbalance < cfg.balanced_threshold:
        return "balanced"
    return Side.LEFT.value if left_volume > right_volume else Side.RIGHT.value


def label_risk(imbalance: float, cfg: SymmetryConfig = DEFAULT_CONFIG) -> str:
    if imbalance < cfg.moderate_threshold:
        return Severity.LOW.value
    if imbalance < cfg.high_threshold:
        return Severity.MODERATE.value
    return Severity.HIGH.value


# ======================================================================
# Per-exercise metrics
# ======================================================================


def _side_averages(records: list[SetRecord]) -> tuple[float, float, float]:
    """(volume, avg weight, avg reps) for one side."""
    if not records:
        return 0.0, 0.0, 0.0
    volume = sum(r.volume for r in records)
    avg_weight = sum(r.weight for r in records) / len(records)
    avg_reps = sum(r.set_log.reps for r in records) / len(records)
    return volume, avg_weight, avg_reps


def build_symmetry_metrics(data: TrainingData, config: Optional[SymmetryConfig] = None) -> list[SymmetryMetric]:
    """One metric per unilateral exercise with sided sets, worst first."""
    cfg = config or DEFAULT_CONFIG
    sides: dict[int, dict[str, list[SetRecord]]] = {}

    for record in data.iter_sets():
        if not record.exercise.is_unilateral or record.set_log.side not in (Side.LEFT, Side.RIGHT):
            continue
        per_side = sides.setdefault(record.exercise.id, {Side.LEFT.value: [], Side.RIGHT.value: []})
        per_side[Side(record.set_log.side).value].append(record)

    metrics: list[SymmetryMetric] = []
    for exercise_id, per_side in sides.items():
        left, right = per_side[Side.LEFT.value], per_side[Side.RIGHT.value]
        left_volume, left_weight, left_reps = _side_averages(left)
        right_volume, right_weight, right_reps = _side_averages(right)
        imbalance = imbalance_percentage(left_volume, right_volume)

        metrics.append(SymmetryMetric(
            exercise_id=exercise_id,
            exercise_name=data.exercise(exercise_id).name,
            left_volume=round(left_volume, 2),
            right_volume=round(right_volume, 2),
            left_avg_weight=round(left_weight, 2),
            right_avg_weight=round(right_weight, 2),
            left_avg_reps=round(left_reps, 2),
            right_avg_reps=round(right_reps, 2),
            left_sets_count=len(left),
            right_sets_count=len(right),
            imbalance_percentage=round(imbalance, 2),
            stronger_side=_stronger_side(left_volume, right_volume, imbalance, cfg),
            risk_level=label_risk(imbalance, cfg),
        ))

    metrics.sort(key=lambda m: m.imbalance_percentage, reverse=True)
    return metrics


def summarize_symmetry(data: TrainingData, config: Optional[SymmetryConfig] = None) -> SymmetrySummary:
    cfg = config or DEFAULT_CONFIG
    metrics = build_symmetry_metrics(data, cfg)
    if not metrics:
        return SymmetrySummary()

    return SymmetrySummary(
        total_unilateral_exercises=len(metrics),
        exercises_with_imbalance=sum(1 for m in metrics if m.imbalance_percentage >= cfg.moderate_threshold),
        average_imbalance=round(sum(m.imbalance_percentage for m in metrics) / len(metrics), 2),
        worst_imbalance=metrics[0],
        metrics=metrics,
    )


# ======================================================================
# Main entry point
# ======================================================================


def compute_symmetry(session: Session, ctx: Optional[UserContext], weeks: Optional[int] = None,
                     config: Optional[SymmetryConfig] = None, ) -> AnalyticsResult[SymmetrySummary]:
    """Symmetry over sessions completed in the trailing *weeks* (default from settings)."""
    window = weeks or settings.SYMMETRY_WEEKS
    repo = WorkoutRepository(session)
    return run_aggregation(
        "symmetry",
        ctx,
        fetch=lambda c: repo.load_training_data(c.user_id, since=c.as_of - datetime.timedelta(weeks=window),
                                                until=c.as_of, window_field="completed_at", ),
        reduce=lambda data, c: summarize_symmetry(data, config),
        empty=SymmetrySummary,
    )
