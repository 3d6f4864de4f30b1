"""
Dashboard insights over the trailing window (default 30 days).

At most four cards, in this order:

1. ``imbalance``    - the antagonist pair with the largest volume ratio,
   when it exceeds 1.25.  Points at the weaker body part.
2. ``undertrained`` - the body part trained longest ago, when more than
   7 days.
3. ``pr``           - the heaviest set in the window (most recent on ties).
4. ``performing``   - the body part with the highest volume.
"""

from __future__ import annotations

import datetime
from typing import Optional

from pydantic import BaseModel
from sqlmodel import Session

from app.analytics.context import UserContext, run_aggregation
from app.analytics.dataset import SetRecord, TrainingData, days_between
from app.core.config import settings
from app.db.repositories.workout import WorkoutRepository
from app.models.enums import ANTAGONIST_PAIRS, Severity, body_part_label
from app.schemas.common import AnalyticsResult
from app.schemas.insights import BodyPartInsight

POSITIVE = "positive"


class InsightsConfig(BaseModel):
    imbalance_ratio: float = 1.25
    imbalance_moderate_ratio: float = 1.35
    imbalance_high_ratio: float = 1.5
    neglected_days: int = 7
    neglected_moderate_days: int = 14
    neglected_high_days: int = 30


DEFAULT_CONFIG = InsightsConfig()


# ======================================================================
# Cards
# ======================================================================


def _biggest_imbalance(volumes: dict[str, float], cfg: InsightsConfig) -> Optional[BodyPartInsight]:
    best: Optional[BodyPartInsight] = None
    best_ratio = cfg.imbalance_ratio

    for first, second in ANTAGONIST_PAIRS:
        vol1 = volumes.get(first.value, 0.0)
        vol2 = volumes.get(second.value, 0.0)
        if vol1 <= 0 or vol2 <= 0:
            continue

        ratio = max(vol1, vol2) / min(vol1, vol2)
        if ratio <= best_ratio:
            continue

        best_ratio = ratio
        stronger, weaker = (first.value, second.value) if vol1 > vol2 else (second.value, first.value)
        percentage = (ratio - 1) * 100
        if ratio > cfg.imbalance_high_ratio:
            severity = Severity.HIGH.value
        elif ratio > cfg.imbalance_moderate_ratio:
            severity = Severity.MODERATE.value
        else:
            severity = Severity.LOW.value

        best = BodyPartInsight(
            type="imbalance",
            body_part=weaker,
            title="Imbalance detected",
            description=f"{body_part_label(stronger)} gets {percentage:.0f}% more volume",
            value=f"{percentage:.0f}%",
            severity=severity,
        )
    return best


def _most_neglected(last_trained: dict[str, datetime.datetime], as_of: datetime.datetime,
                    cfg: InsightsConfig, ) -> Optional[BodyPartInsight]:
    best: Optional[BodyPartInsight] = None
    best_days = cfg.neglected_days

    for part, last in last_trained.items():
        days = days_between(as_of, last)
        if days <= best_days:
            continue

        best_days = days
        if days > cfg.neglected_high_days:
            severity = Severity.HIGH.value
        elif days > cfg.neglected_moderate_days:
            severity = Severity.MODERATE.value
        else:
            severity = Severity.LOW.value

        best = BodyPartInsight(
            type="undertrained",
            body_part=part,
            title="Neglected body part",
            description=f"Last trained {days} days ago",
            value=f"{days}d",
            severity=severity,
        )
    return best


def _heaviest_set(data: TrainingData) -> Optional[SetRecord]:
    heaviest: Optional[SetRecord] = None
    for record in data.iter_sets():
        if not record.exercise.target_body_part or record.weight <= 0 or record.set_log.reps <= 0:
            continue
        if heaviest is None or (record.weight, record.session.started_at) > (
                heaviest.weight, heaviest.session.started_at):
            heaviest = record
    return heaviest


def _top_lift(data: TrainingData) -> Optional[BodyPartInsight]:
    record = _heaviest_set(data)
    if record is None:
        return None
    return BodyPartInsight(
        type="pr",
        body_part=record.exercise.target_body_part,
        title="Best lift",
        description=record.exercise.name,
        value=f"{record.weight:g}kg",
        severity=POSITIVE,
    )


def _top_volume(volumes: dict[str, float]) -> Optional[BodyPartInsight]:
    trained = {part: volume for part, volume in volumes.items() if volume > 0}
    if not trained:
        return None
    part = max(trained, key=trained.get)
    return BodyPartInsight(
        type="performing",
        body_part=part,
        title="Most trained",
        description="Highest volume in the last month",
        value=f"{trained[part] / 1000:.1f}k kg",
        severity=POSITIVE,
    )


# ======================================================================
# Reducer / entry point
# ======================================================================


def summarize_insights(data: TrainingData, as_of: datetime.datetime,
                       config: Optional[InsightsConfig] = None, ) -> list[BodyPartInsight]:
    cfg = config or DEFAULT_CONFIG
    data = data.until(as_of)
    if not data.completed_logs():
        return []

    volumes = data.volume_by_body_part()
    cards = [
        _biggest_imbalance(volumes, cfg),
        _most_neglected(data.last_trained_by_body_part(), as_of, cfg),
        _top_lift(data),
        _top_volume(volumes),
    ]
    return [card for card in cards if card is not None]


def compute_insights(session: Session, ctx: Optional[UserContext], days: Optional[int] = None,
                     config: Optional[InsightsConfig] = None, ) -> AnalyticsResult[list[BodyPartInsight]]:
    """Insights over sessions started in the trailing *days* (default from settings)."""
    window = days or settings.INSIGHTS_DAYS
    repo = WorkoutRepository(session)
    return run_aggregation(
        "insights",
        ctx,
        fetch=lambda c: repo.load_training_data(c.user_id, since=c.as_of - datetime.timedelta(days=window),
                                                until=c.as_of, ),
        reduce=lambda data, c: summarize_insights(data, c.as_of, config),
        empty=list,
    )
