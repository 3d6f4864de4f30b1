"""
Strength statistics: volume, personal records and muscle-group balance.

One-rep max
-----------
The estimated 1RM uses the Epley formula::

    one_rm = weight * (1 + reps / 30)

evaluated on every completed set and maximised per exercise.  It is *not*
derived from ``max_weight`` and ``max_reps``, which are tracked
independently.  Estimates are rounded to 2 decimals (e.g. 100 kg × 5 →
116.67).
"""

from __future__ import annotations

import datetime
from collections import Counter
from typing import Optional

from sqlmodel import Session

from app.analytics.context import UserContext, run_aggregation
from app.analytics.dataset import TrainingData
from app.db.repositories.workout import WorkoutRepository
from app.models.enums import MuscleGroup
from app.schemas.common import AnalyticsResult
from app.schemas.strength import (ExerciseRecord, MostPerformedExercise, MuscleGroupVolume, StrengthStats,
                                  VolumeData, )

_TOP_RECORDS = 5
_TOP_PERFORMED = 10


def epley_one_rm(weight: float, reps: int) -> float:
    """Epley one-rep-max estimate for a single set."""
    return weight * (1 + reps / 30)


# ======================================================================
# Sections
# ======================================================================


def _volume_data(data: TrainingData, as_of: datetime.datetime) -> VolumeData:
    week_ago = as_of - datetime.timedelta(days=7)
    total = weekly = 0.0
    reps = sets = 0

    for record in data.iter_sets():
        total += record.volume
        if record.session.started_at >= week_ago:
            weekly += record.volume
        reps += record.set_log.reps
        sets += 1

    log_count = len(data.completed_logs())
    return VolumeData(
        total_volume=round(total, 2),
        weekly_volume=round(weekly, 2),
        avg_reps=round(reps / sets, 1) if sets else 0.0,
        avg_sets=round(sets / log_count, 1) if log_count else 0.0,
    )


def _personal_records(data: TrainingData) -> list[ExerciseRecord]:
    best: dict[int, dict] = {}

    for record in data.iter_sets():
        weight = record.weight
        reps = record.set_log.reps
        one_rm = epley_one_rm(weight, reps)
        performed = record.session.started_at

        entry = best.get(record.exercise.id)
        if entry is None:
            best[record.exercise.id] = {
                "name": record.exercise.name,
                "max_weight": weight,
                "max_reps": reps,
                "one_rm": one_rm,
                "last": performed,
            }
            continue
        entry["max_weight"] = max(entry["max_weight"], weight)
        entry["max_reps"] = max(entry["max_reps"], reps)
        entry["one_rm"] = max(entry["one_rm"], one_rm)
        entry["last"] = max(entry["last"], performed)

    records = [ExerciseRecord(exercise_id=exercise_id, exercise_name=e["name"], max_weight=e["max_weight"],
                              max_reps=e["max_reps"], estimated_one_rm=round(e["one_rm"], 2),
                              last_performed=e["last"], ) for exercise_id, e in best.items()]
    records.sort(key=lambda r: r.estimated_one_rm, reverse=True)
    return records[:_TOP_RECORDS]


def _most_performed(data: TrainingData) -> list[MostPerformedExercise]:
    counts: Counter[int] = Counter()
    for log in data.completed_logs():
        if data.exercise(log.exercise_id) is not None:
            counts[log.exercise_id] += 1

    result = []
    for exercise_id, count in counts.most_common(_TOP_PERFORMED):
        exercise = data.exercise(exercise_id)
        result.append(MostPerformedExercise(exercise_id=exercise_id, exercise_name=exercise.name, count=count,
                                            muscle_group=exercise.muscle_group, ))
    return result


def _muscle_group_balance(data: TrainingData) -> list[MuscleGroupVolume]:
    volumes: dict[str, float] = {}
    for record in data.iter_sets():
        group = record.exercise.muscle_group or MuscleGroup.OTHER.value
        volumes[group] = volumes.get(group, 0.0) + record.volume

    total = sum(volumes.values())
    if total <= 0:
        return []

    balance = [MuscleGroupVolume(muscle_group=group, volume=round(volume, 2),
                                 percentage=round(volume / total * 100, 2), ) for group, volume in volumes.items() if
               volume > 0]
    balance.sort(key=lambda m: m.volume, reverse=True)
    return balance


# ======================================================================
# Reducer / entry point
# ======================================================================


def summarize_strength_stats(data: TrainingData, as_of: datetime.datetime) -> StrengthStats:
    """Reduce completed sets to :class:`StrengthStats`."""
    data = data.until(as_of)
    return StrengthStats(
        personal_records=_personal_records(data),
        volume_data=_volume_data(data, as_of),
        most_performed_exercises=_most_performed(data),
        muscle_group_balance=_muscle_group_balance(data),
    )


def compute_strength_stats(session: Session, ctx: Optional[UserContext]) -> AnalyticsResult[StrengthStats]:
    """Compute strength stats over the user's full history."""
    repo = WorkoutRepository(session)
    return run_aggregation(
        "strength stats",
        ctx,
        fetch=lambda c: repo.load_training_data(c.user_id, until=c.as_of),
        reduce=lambda data, c: summarize_strength_stats(data, c.as_of),
        empty=StrengthStats,
    )
