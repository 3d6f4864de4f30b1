"""
Goal progress for active body-part goals.

Each goal is evaluated over a rolling window ending at ``as_of``: 7 days for
``weekly`` goals and 30 days for ``monthly`` ones, on the session start.

- ``volume``             - Σ weight×reps of sets on exercises targeting the body part
- ``frequency``          - distinct sessions that trained the body part
- ``specific_exercises`` - distinct target exercises (by name) performed at least once

``progress = min(current / target * 100, 100)``.  A goal without a positive
target has progress 0 and is never achieved.
"""

from __future__ import annotations

import datetime
from typing import Optional

from sqlmodel import Session

from app.analytics.context import UserContext, run_aggregation
from app.analytics.dataset import TrainingData
from app.db.repositories.goal import GoalRepository
from app.db.repositories.workout import WorkoutRepository
from app.models.enums import GoalTimeframe, GoalType
from app.models.goal import BodyPartGoal
from app.schemas.common import AnalyticsResult
from app.schemas.goal import GoalProgress, GoalResponse

TIMEFRAME_DAYS: dict[str, int] = {
    GoalTimeframe.WEEKLY.value: 7,
    GoalTimeframe.MONTHLY.value: 30,
}


def window_start(timeframe: str, as_of: datetime.datetime) -> datetime.datetime:
    return as_of - datetime.timedelta(days=TIMEFRAME_DAYS.get(timeframe, 7))


def goal_target(goal: BodyPartGoal) -> float:
    if goal.goal_type == GoalType.SPECIFIC_EXERCISES:
        return float(len(goal.target_exercises or []))
    return goal.target_value or 0.0


def current_value(goal: BodyPartGoal, data: TrainingData, as_of: datetime.datetime) -> float:
    """Measure *goal* over its window within *data*."""
    since = window_start(goal.timeframe, as_of)
    records = [r for r in data.iter_sets() if since <= r.session.started_at <= as_of]

    if goal.goal_type == GoalType.VOLUME:
        return sum(r.volume for r in records if r.exercise.target_body_part == goal.body_part)

    if goal.goal_type == GoalType.FREQUENCY:
        return float(len({r.session.id for r in records if r.exercise.target_body_part == goal.body_part}))

    if goal.goal_type == GoalType.SPECIFIC_EXERCISES:
        targets = set(goal.target_exercises or [])
        return float(len({r.exercise.name for r in records if r.exercise.name in targets}))

    return 0.0


def evaluate_goal(goal: BodyPartGoal, data: TrainingData, as_of: datetime.datetime) -> GoalProgress:
    target = goal_target(goal)
    current = current_value(goal, data, as_of)

    if target <= 0:
        progress, achieved = 0.0, False
    else:
        progress, achieved = min(current / target * 100, 100.0), current >= target

    return GoalProgress(
        goal=GoalResponse.model_validate(goal),
        current_value=round(current, 2),
        target=target,
        progress=round(progress, 2),
        is_achieved=achieved,
    )


def summarize_goal_progress(goals: list[BodyPartGoal], data: TrainingData,
                            as_of: datetime.datetime, ) -> list[GoalProgress]:
    data = data.until(as_of)
    return [evaluate_goal(goal, data, as_of) for goal in goals]


# ======================================================================
# Main entry point
# ======================================================================


def compute_goal_progress(session: Session, ctx: Optional[UserContext]) -> AnalyticsResult[list[GoalProgress]]:
    """Progress for every active goal of the user."""
    goals_repo = GoalRepository(session)
    workouts_repo = WorkoutRepository(session)
    longest = datetime.timedelta(days=max(TIMEFRAME_DAYS.values()))

    def fetch(c: UserContext) -> tuple[list[BodyPartGoal], TrainingData]:
        goals = goals_repo.get_active_by_user(c.user_id)
        return goals, workouts_repo.load_training_data(c.user_id, since=c.as_of - longest, until=c.as_of)

    return run_aggregation(
        "goal progress",
        ctx,
        fetch=fetch,
        reduce=lambda rows, c: summarize_goal_progress(rows[0], rows[1], c.as_of),
        empty=list,
    )
