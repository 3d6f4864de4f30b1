"""
Full body-part analysis over the user's history.

- volume distribution across trained body parts
- every antagonist pair with its relative difference (imbalanced above 20%)
- body parts not trained for more than 14 days (``warning``) or 30 days
  (``critical``)
- plain-text recommendations derived from the above
- Monday-anchored weekly volume for the last 12 weeks per body part
"""

from __future__ import annotations

import datetime
from typing import Optional

from pydantic import BaseModel
from sqlmodel import Session

from app.analytics.context import UserContext, run_aggregation
from app.analytics.dataset import TrainingData, days_between, recent_week_starts, week_start
from app.db.repositories.workout import WorkoutRepository
from app.models.enums import ANTAGONIST_PAIRS, body_part_label
from app.schemas.body_parts import (BodyPartAnalysis, BodyPartImbalance, BodyPartProgressHistory,
                                    UndertrainedBodyPart, VolumeDistribution, WeeklyVolume, )
from app.schemas.common import AnalyticsResult


class BodyPartAnalysisConfig(BaseModel):
    imbalance_pct: float = 20.0
    critical_imbalance_pct: float = 30.0
    warning_days: int = 14
    critical_days: int = 30
    low_share_pct: float = 3.0
    month_days: int = 30
    history_weeks: int = 12


DEFAULT_CONFIG = BodyPartAnalysisConfig()


# ======================================================================
# Sections
# ======================================================================


def _distribution(volumes: dict[str, float]) -> list[VolumeDistribution]:
    total = sum(volumes.values())
    rows = [VolumeDistribution(body_part=part, volume=round(volume, 2),
                               percentage=round(volume / total * 100, 2) if total > 0 else 0.0, ) for part, volume in
            volumes.items()]
    rows.sort(key=lambda r: r.volume, reverse=True)
    return rows


def _imbalances(volumes: dict[str, float], cfg: BodyPartAnalysisConfig) -> list[BodyPartImbalance]:
    rows = []
    for first, second in ANTAGONIST_PAIRS:
        if first.value not in volumes or second.value not in volumes:
            continue
        vol1, vol2 = volumes[first.value], volumes[second.value]
        larger = max(vol1, vol2)
        difference = abs(vol1 - vol2) / larger * 100 if larger > 0 else 0.0
        rows.append(BodyPartImbalance(
            label=f"{body_part_label(first.value)} vs {body_part_label(second.value)}",
            part1=first.value,
            part2=second.value,
            volume1=round(vol1, 2),
            volume2=round(vol2, 2),
            difference=round(difference, 2),
            is_imbalanced=difference > cfg.imbalance_pct,
        ))
    return rows


def _sessions_per_part(data: TrainingData, since: datetime.datetime) -> dict[str, int]:
    seen: dict[str, set[int]] = {}
    for log in data.completed_logs():
        exercise = data.exercise(log.exercise_id)
        session = data.session(log.workout_session_id)
        if exercise is None or not exercise.target_body_part or session.started_at < since:
            continue
        seen.setdefault(exercise.target_body_part, set()).add(session.id)
    return {part: len(ids) for part, ids in seen.items()}


def _undertrained(data: TrainingData, as_of: datetime.datetime,
                  cfg: BodyPartAnalysisConfig) -> list[UndertrainedBodyPart]:
    month = _sessions_per_part(data, as_of - datetime.timedelta(days=cfg.month_days))
    rows = []
    for part, last in data.last_trained_by_body_part().items():
        days = days_between(as_of, last)
        if days <= cfg.warning_days:
            continue
        rows.append(UndertrainedBodyPart(
            body_part=part,
            days_since_last_trained=days,
            severity="critical" if days > cfg.critical_days else "warning",
            times_this_month=month.get(part, 0),
        ))
    rows.sort(key=lambda r: r.days_since_last_trained, reverse=True)
    return rows


def _recommendations(imbalances: list[BodyPartImbalance], undertrained: list[UndertrainedBodyPart],
                     distribution: list[VolumeDistribution], cfg: BodyPartAnalysisConfig, ) -> list[str]:
    notes = []

    for row in imbalances:
        if row.is_imbalanced and row.difference > cfg.critical_imbalance_pct:
            weaker = row.part1 if row.volume1 < row.volume2 else row.part2
            notes.append(f"Train {body_part_label(weaker)} more: significant imbalance detected "
                         f"({row.difference:.0f}%)")

    for row in undertrained:
        if row.severity == "critical":
            notes.append(f"{body_part_label(row.body_part)}: not trained for {row.days_since_last_trained} days")

    low = [row for row in distribution if 0 < row.percentage < cfg.low_share_pct]
    if low:
        notes.append("Consider more volume for: " + ", ".join(body_part_label(r.body_part) for r in low))

    if all(not row.is_imbalanced for row in imbalances):
        notes.append("Great work! Your training is well balanced")
    if not undertrained:
        notes.append("Excellent frequency: every body part is trained regularly")
    return notes


def _progress_history(data: TrainingData, as_of: datetime.datetime,
                      cfg: BodyPartAnalysisConfig) -> list[BodyPartProgressHistory]:
    weeks = recent_week_starts(as_of, cfg.history_weeks)
    first_week = weeks[0]

    weekly: dict[str, dict[datetime.date, float]] = {}
    for record in data.iter_sets():
        part = record.exercise.target_body_part
        week = week_start(record.session.started_at)
        if not part or week < first_week:
            continue
        per_week = weekly.setdefault(part, {})
        per_week[week] = per_week.get(week, 0.0) + record.volume

    return [BodyPartProgressHistory(body_part=part, weekly_data=[
        WeeklyVolume(week=week, volume=round(per_week.get(week, 0.0))) for week in weeks], ) for part, per_week in
            weekly.items()]


# ======================================================================
# Reducer / entry point
# ======================================================================


def summarize_body_parts(data: TrainingData, as_of: datetime.datetime,
                         config: Optional[BodyPartAnalysisConfig] = None, ) -> BodyPartAnalysis:
    cfg = config or DEFAULT_CONFIG
    data = data.until(as_of)
    if not data.completed_logs():
        return BodyPartAnalysis()

    volumes = data.volume_by_body_part()
    distribution = _distribution(volumes)
    imbalances = _imbalances(volumes, cfg)
    undertrained = _undertrained(data, as_of, cfg)

    return BodyPartAnalysis(
        imbalances=imbalances,
        undertrained_parts=undertrained,
        volume_distribution=distribution,
        recommendations=_recommendations(imbalances, undertrained, distribution, cfg),
        progress_history=_progress_history(data, as_of, cfg),
    )


def compute_body_parts(session: Session, ctx: Optional[UserContext],
                       config: Optional[BodyPartAnalysisConfig] = None, ) -> AnalyticsResult[BodyPartAnalysis]:
    repo = WorkoutRepository(session)
    return run_aggregation(
        "body part analysis",
        ctx,
        fetch=lambda c: repo.load_training_data(c.user_id, until=c.as_of),
        reduce=lambda data, c: summarize_body_parts(data, c.as_of, config),
        empty=BodyPartAnalysis,
    )
