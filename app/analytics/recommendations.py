"""
Exercise recommendations per body part.

Every body part that has at least one exercise in the user's catalogue is a
candidate.  Over the trailing window (default 30 days) each candidate gets:

- ``days_since_last_training`` (999 when not trained in the window)
- ``volume_deficit`` = (mean - volume) / mean * 100, the mean taken over all
  candidates

A candidate is recommended when untrained for more than 7 days or its
deficit exceeds 20%.  Priority:

- ``high``     - more than 21 days, or deficit above 40%
- ``moderate`` - more than 14 days, or deficit above 20%
- ``low``      - otherwise

Sorted by priority, then by days since last training (longest first).
"""

from __future__ import annotations

import datetime
from typing import Optional

from pydantic import BaseModel
from sqlmodel import Session

from app.analytics.context import UserContext, run_aggregation
from app.analytics.dataset import TrainingData, days_between
from app.core.config import settings
from app.db.repositories.workout import WorkoutRepository
from app.models.enums import Severity, body_part_label
from app.schemas.common import AnalyticsResult
from app.schemas.exercise import ExerciseResponse
from app.schemas.insights import ExerciseRecommendation

NEVER_TRAINED_DAYS = 999

_PRIORITY_ORDER = {Severity.HIGH.value: 0, Severity.MODERATE.value: 1, Severity.LOW.value: 2}


class RecommendationConfig(BaseModel):
    stale_days: int = 7
    moderate_days: int = 14
    high_days: int = 21
    moderate_deficit_pct: float = 20.0
    high_deficit_pct: float = 40.0
    limit: int = 5


DEFAULT_CONFIG = RecommendationConfig()


def _priority(days: int, deficit: float, cfg: RecommendationConfig) -> tuple[str, str]:
    """(priority, reason) for one candidate."""
    if days > cfg.high_days:
        if days == NEVER_TRAINED_DAYS:
            return Severity.HIGH.value, "Not trained this month"
        return Severity.HIGH.value, f"Not trained for {days} days"
    if deficit > cfg.high_deficit_pct:
        return Severity.HIGH.value, f"Volume {deficit:.0f}% below your average"
    if days > cfg.moderate_days:
        return Severity.MODERATE.value, f"Last trained {days} days ago"
    if deficit > cfg.moderate_deficit_pct:
        return Severity.MODERATE.value, "Low training volume"
    return Severity.LOW.value, f"Last trained {days} days ago"


def build_recommendations(data: TrainingData, as_of: datetime.datetime,
                          config: Optional[RecommendationConfig] = None, ) -> list[ExerciseRecommendation]:
    cfg = config or DEFAULT_CONFIG
    data = data.until(as_of)

    catalogue: dict[str, list] = {}
    for exercise in data.exercises:
        if exercise.target_body_part:
            catalogue.setdefault(exercise.target_body_part, []).append(exercise)
    if not catalogue:
        return []

    volumes = data.volume_by_body_part()
    last_trained = data.last_trained_by_body_part()
    mean = sum(volumes.get(part, 0.0) for part in catalogue) / len(catalogue)

    recommendations = []
    for part, exercises in catalogue.items():
        last = last_trained.get(part)
        days = days_between(as_of, last) if last is not None else NEVER_TRAINED_DAYS
        deficit = (mean - volumes.get(part, 0.0)) / mean * 100 if mean > 0 else 0.0

        if days <= cfg.stale_days and deficit <= cfg.moderate_deficit_pct:
            continue

        priority, reason = _priority(days, deficit, cfg)
        recommendations.append(ExerciseRecommendation(
            body_part=part,
            body_part_label=body_part_label(part),
            reason=reason,
            priority=priority,
            exercises=[ExerciseResponse.model_validate(e) for e in exercises],
            days_since_last_training=days,
            volume_deficit=round(deficit, 2),
        ))

    recommendations.sort(key=lambda r: (_PRIORITY_ORDER[r.priority], -r.days_since_last_training))
    return recommendations[:cfg.limit]


def compute_recommendations(session: Session, ctx: Optional[UserContext], days: Optional[int] = None,
                            config: Optional[RecommendationConfig] = None,
                            ) -> AnalyticsResult[list[ExerciseRecommendation]]:
    window = days or settings.INSIGHTS_DAYS
    repo = WorkoutRepository(session)
    return run_aggregation(
        "recommendations",
        ctx,
        fetch=lambda c: repo.load_training_data(c.user_id, since=c.as_of - datetime.timedelta(days=window),
                                                until=c.as_of, ),
        reduce=lambda data, c: build_recommendations(data, c.as_of, config),
        empty=list,
    )
