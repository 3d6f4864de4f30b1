"""
General workout statistics: totals, durations, habits and streaks.

Streaks
-------
A streak is a run of consecutive calendar days with at least one completed
session.  Several sessions on the same day collapse into one day.

- **Current streak** walks the distinct days newest-first from today.  When
  nothing has been logged yet today the run may start yesterday, so an
  unfinished day does not zero the streak.
- **Best streak** is the longest run anywhere in the history.

``best_streak >= current_streak`` always holds.
"""

from __future__ import annotations

import datetime
from collections import Counter
from typing import Optional

from sqlmodel import Session

from app.analytics.context import UserContext, run_aggregation
from app.analytics.dataset import TrainingData
from app.db.repositories.workout import WorkoutRepository
from app.models.workout import WorkoutSession
from app.schemas.common import AnalyticsResult
from app.schemas.general_stats import (DayFrequency, GeneralStats, HourFrequency, WorkoutTimeTotals, )

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

_TOP_N = 3


# ======================================================================
# Streaks
# ======================================================================


def _distinct_days(sessions: list[WorkoutSession]) -> list[datetime.date]:
    """Distinct session start days, newest first."""
    return sorted({s.started_at.date() for s in sessions}, reverse=True)


def compute_current_streak(sessions: list[WorkoutSession], today: datetime.date) -> int:
    """Consecutive days ending today (or yesterday) with a session.

    A run anchored on yesterday counts in full: sessions on D-1, D-2 and D-3
    give 3, not 1.  Only an empty today is forgiven; the allowance does not
    cut the run short.
    """
    days = [d for d in _distinct_days(sessions) if d <= today]
    if not days:
        return 0

    anchor = (today - days[0]).days
    if anchor > 1:
        return 0

    streak = 0
    for day in days:
        if (today - day).days == anchor + streak:
            streak += 1
        else:
            break
    return streak


def compute_best_streak(sessions: list[WorkoutSession]) -> int:
    """Longest run of consecutive session days."""
    best = 0
    run = 0
    previous: Optional[datetime.date] = None

    for day in _distinct_days(sessions):
        if previous is not None and (previous - day).days == 1:
            run += 1
        else:
            run = 1
        best = max(best, run)
        previous = day
    return best


# ======================================================================
# Habits
# ======================================================================


def _most_frequent_days(sessions: list[WorkoutSession]) -> list[DayFrequency]:
    counts = Counter(WEEKDAY_NAMES[s.started_at.weekday()] for s in sessions)
    return [DayFrequency(day=day, count=count) for day, count in counts.most_common(_TOP_N)]


def _most_frequent_hours(sessions: list[WorkoutSession]) -> list[HourFrequency]:
    counts = Counter(s.started_at.hour for s in sessions)
    return [HourFrequency(hour=f"{hour:02d}:00", count=count) for hour, count in counts.most_common(_TOP_N)]


# ======================================================================
# Reducer
# ======================================================================


def summarize_general_stats(data: TrainingData, as_of: datetime.datetime) -> GeneralStats:
    """Reduce a user's sessions to :class:`GeneralStats`."""
    data = data.until(as_of)
    completed = data.completed_sessions()
    if not completed:
        return GeneralStats()

    week_ago = as_of - datetime.timedelta(days=7)
    month_ago = as_of - datetime.timedelta(days=30)

    total = week = month = 0.0
    for session in completed:
        minutes = session.duration_minutes
        total += minutes
        if session.started_at >= week_ago:
            week += minutes
        if session.started_at >= month_ago:
            month += minutes

    return GeneralStats(
        total_workouts=len(completed),
        total_workout_time=WorkoutTimeTotals(this_week=round(week), this_month=round(month), all_time=round(total)),
        total_exercises=len(data.completed_logs()),
        average_workout_duration=round(total / len(completed)),
        most_frequent_days=_most_frequent_days(completed),
        most_frequent_times=_most_frequent_hours(completed),
        best_streak=compute_best_streak(completed),
        current_streak=compute_current_streak(completed, as_of.date()),
    )


# ======================================================================
# Main entry point
# ======================================================================


def compute_general_stats(session: Session, ctx: Optional[UserContext]) -> AnalyticsResult[GeneralStats]:
    """Compute general stats over the user's full history."""
    repo = WorkoutRepository(session)
    return run_aggregation(
        "general stats",
        ctx,
        fetch=lambda c: repo.load_training_data(c.user_id, until=c.as_of),
        reduce=lambda data, c: summarize_general_stats(data, c.as_of),
        empty=GeneralStats,
    )
