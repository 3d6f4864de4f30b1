"""
Training trends: weekly progress, per-exercise progression and habits.

- weekly progress: one row per Monday-anchored week over the trailing
  window (default 12 weeks), with the volume change against the week before
- exercise progression: max weight per logged exercise per session,
  exercises ordered by how often they were logged
- heatmap: sessions per calendar day over the last 90 days
- best day and best hour: most common session weekday and start hour
"""

from __future__ import annotations

import datetime
from collections import Counter
from typing import Optional

from sqlmodel import Session

from app.analytics.context import UserContext, run_aggregation
from app.analytics.dataset import TrainingData, recent_week_starts, week_start
from app.analytics.general import WEEKDAY_NAMES
from app.core.config import settings
from app.db.repositories.workout import WorkoutRepository
from app.schemas.common import AnalyticsResult
from app.schemas.trends import ExerciseProgress, HeatmapDay, TrendsStats, WeeklyProgress, WeightPoint

HEATMAP_DAYS = 90


def _weekly_progress(data: TrainingData, weeks: list[datetime.date]) -> list[WeeklyProgress]:
    workouts: Counter[datetime.date] = Counter(week_start(s.started_at) for s in data.completed_sessions())
    volumes: dict[datetime.date, float] = {}
    for record in data.iter_sets():
        week = week_start(record.session.started_at)
        volumes[week] = volumes.get(week, 0.0) + record.volume

    rows = []
    previous = 0.0
    for week in weeks:
        volume = volumes.get(week, 0.0)
        improvement = (volume - previous) / previous * 100 if previous > 0 else 0.0
        rows.append(WeeklyProgress(week_start=week, workouts=workouts.get(week, 0), volume=round(volume),
                                   improvement=round(improvement), ))
        previous = volume
    return rows


def _exercise_progress(data: TrainingData, since: datetime.datetime) -> list[ExerciseProgress]:
    per_log: dict[int, float] = {}
    for record in data.iter_sets():
        log_id = record.exercise_log.id
        per_log[log_id] = max(per_log.get(log_id, 0.0), record.weight)

    frequency: Counter[int] = Counter()
    points: dict[int, list[WeightPoint]] = {}
    for log in data.completed_logs():
        session = data.session(log.workout_session_id)
        if data.exercise(log.exercise_id) is None or session.started_at < since:
            continue
        frequency[log.exercise_id] += 1
        max_weight = per_log.get(log.id, 0.0)
        if max_weight > 0:
            points.setdefault(log.exercise_id, []).append(WeightPoint(date=session.started_at, max_weight=max_weight))

    return [ExerciseProgress(exercise_id=exercise_id, exercise_name=data.exercise(exercise_id).name,
                             data_points=sorted(points.get(exercise_id, []), key=lambda p: p.date), ) for
            exercise_id, _ in frequency.most_common()]


def _heatmap(data: TrainingData, as_of: datetime.datetime) -> list[HeatmapDay]:
    since = as_of - datetime.timedelta(days=HEATMAP_DAYS)
    counts = Counter(s.started_at.date() for s in data.completed_sessions() if s.started_at >= since)
    return [HeatmapDay(date=day, count=count) for day, count in sorted(counts.items())]


def summarize_trends(data: TrainingData, as_of: datetime.datetime, weeks: int) -> TrendsStats:
    data = data.until(as_of)
    week_starts = recent_week_starts(as_of, weeks)
    since = datetime.datetime.combine(week_starts[0], datetime.time.min)
    in_window = [s for s in data.completed_sessions() if s.started_at >= since]
    if not in_window:
        return TrendsStats(workout_heatmap=_heatmap(data, as_of))

    days = Counter(s.started_at.weekday() for s in in_window)
    hours = Counter(s.started_at.hour for s in in_window)
    best_day, _ = days.most_common(1)[0]
    best_hour, _ = hours.most_common(1)[0]

    return TrendsStats(
        weekly_progress=_weekly_progress(data, week_starts),
        exercise_progress=_exercise_progress(data, since),
        workout_heatmap=_heatmap(data, as_of),
        best_day=WEEKDAY_NAMES[best_day],
        best_time=f"{best_hour:02d}:00",
    )


def compute_trends(session: Session, ctx: Optional[UserContext], weeks: Optional[int] = None,
                   ) -> AnalyticsResult[TrendsStats]:
    window = weeks or settings.TRENDS_WEEKS
    lookback = max(datetime.timedelta(weeks=window), datetime.timedelta(days=HEATMAP_DAYS))
    repo = WorkoutRepository(session)
    return run_aggregation(
        "trends",
        ctx,
        fetch=lambda c: repo.load_training_data(c.user_id, since=c.as_of - lookback, until=c.as_of),
        reduce=lambda data, c: summarize_trends(data, c.as_of, window),
        empty=TrendsStats,
    )
