"""
Achievements: milestone badges, recent records and top improvements.

Badges unlock on completed workouts (1, 10, 50, 100), current streak (7, 30
days) and lifetime volume (10 000 kg, 100 000 kg).  Recent records and
improvements compare max weights inside the last 30 days against
everything before.
"""

from __future__ import annotations

import datetime
from typing import NamedTuple, Optional

from sqlmodel import Session

from app.analytics.context import UserContext, run_aggregation
from app.analytics.dataset import SetRecord, TrainingData
from app.analytics.general import compute_current_streak
from app.db.repositories.workout import WorkoutRepository
from app.schemas.achievements import Achievements, Badge, RecentRecord, TopImprovement
from app.schemas.common import AnalyticsResult

RECENT_DAYS = 30
_TOP_RECORDS = 5
_TOP_IMPROVEMENTS = 3


class Milestone(NamedTuple):
    id: str
    title: str
    description: str
    metric: str
    target: float


MILESTONES: list[Milestone] = [
    Milestone("first-workout", "First Workout", "Complete your first workout", "workouts", 1),
    Milestone("10-workouts", "Consistent", "Complete 10 workouts", "workouts", 10),
    Milestone("50-workouts", "Experienced", "Complete 50 workouts", "workouts", 50),
    Milestone("100-workouts", "Legend", "Complete 100 workouts", "workouts", 100),
    Milestone("7-day-streak", "Weekly Streak", "Train 7 days in a row", "streak", 7),
    Milestone("30-day-streak", "Month of Power", "Train 30 days in a row", "streak", 30),
    Milestone("volume-10k", "Lifter", "Lift 10,000 kg in total", "volume", 10_000),
    Milestone("volume-100k", "Atlas", "Lift 100,000 kg in total", "volume", 100_000),
]


def build_badges(workouts: int, streak: int, volume: float) -> list[Badge]:
    metrics = {"workouts": workouts, "streak": streak, "volume": volume}
    badges = []
    for milestone in MILESTONES:
        value = metrics[milestone.metric]
        badges.append(Badge(
            id=milestone.id,
            title=milestone.title,
            description=milestone.description,
            unlocked=value >= milestone.target,
            progress=min(value, milestone.target),
            target=milestone.target,
        ))
    return badges


def _recent_records(data: TrainingData, since: datetime.datetime) -> list[RecentRecord]:
    best: dict[int, SetRecord] = {}
    for record in data.iter_sets():
        if record.session.started_at < since:
            continue
        current = best.get(record.exercise.id)
        if current is None or record.weight > current.weight:
            best[record.exercise.id] = record

    rows = sorted(best.values(), key=lambda r: r.session.started_at, reverse=True)
    return [RecentRecord(exercise_name=r.exercise.name, weight=r.weight, reps=r.set_log.reps,
                         date=r.session.started_at, ) for r in rows[:_TOP_RECORDS]]


def _top_improvements(data: TrainingData, since: datetime.datetime) -> list[TopImprovement]:
    before: dict[int, float] = {}
    recent: dict[int, float] = {}
    names: dict[int, str] = {}

    for record in data.iter_sets():
        bucket = recent if record.session.started_at >= since else before
        exercise_id = record.exercise.id
        bucket[exercise_id] = max(bucket.get(exercise_id, 0.0), record.weight)
        names[exercise_id] = record.exercise.name

    rows = []
    for exercise_id, new_max in recent.items():
        old_max = before.get(exercise_id, 0.0)
        if old_max <= 0 or new_max <= old_max:
            continue
        rows.append(TopImprovement(
            exercise_name=names[exercise_id],
            improvement=round((new_max - old_max) / old_max * 100, 2),
            from_weight=old_max,
            to_weight=new_max,
        ))
    rows.sort(key=lambda r: r.improvement, reverse=True)
    return rows[:_TOP_IMPROVEMENTS]


def summarize_achievements(data: TrainingData, as_of: datetime.datetime) -> Achievements:
    data = data.until(as_of)
    completed = data.completed_sessions()
    since = as_of - datetime.timedelta(days=RECENT_DAYS)
    return Achievements(
        badges=build_badges(len(completed), compute_current_streak(completed, as_of.date()), data.total_volume()),
        recent_prs=_recent_records(data, since),
        top_improvements=_top_improvements(data, since),
    )


def compute_achievements(session: Session, ctx: Optional[UserContext]) -> AnalyticsResult[Achievements]:
    repo = WorkoutRepository(session)
    return run_aggregation(
        "achievements",
        ctx,
        fetch=lambda c: repo.load_training_data(c.user_id, until=c.as_of),
        reduce=lambda data, c: summarize_achievements(data, c.as_of),
        empty=Achievements,
    )
