"""
In-memory view of a user's training rows.

The repository fetches the four row families (sessions, exercises,
exercise logs, set logs) for a window; :class:`TrainingData` indexes them
and resolves the joins every aggregator needs.

A row whose parent cannot be resolved (a set whose exercise log was deleted,
a log pointing at a missing exercise or session) is silently skipped: absent
data contributes nothing.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import Iterator, NamedTuple, Optional

from app.models.exercise import Exercise
from app.models.workout import ExerciseLog, SetLog, WorkoutSession


class SetRecord(NamedTuple):
    """A completed set joined with its log, exercise and session."""

    set_log: SetLog
    exercise_log: ExerciseLog
    exercise: Exercise
    session: WorkoutSession

    @property
    def volume(self) -> float:
        return self.set_log.volume

    @property
    def weight(self) -> float:
        return self.set_log.weight or 0.0


@dataclass
class TrainingData:
    """Rows for one user, as returned by :class:`WorkoutRepository`."""

    sessions: list[WorkoutSession] = field(default_factory=list)
    exercises: list[Exercise] = field(default_factory=list)
    exercise_logs: list[ExerciseLog] = field(default_factory=list)
    set_logs: list[SetLog] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._sessions_by_id = {s.id: s for s in self.sessions}
        self._exercises_by_id = {e.id: e for e in self.exercises}
        self._logs_by_id = {log.id: log for log in self.exercise_logs}

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def session(self, session_id: int) -> Optional[WorkoutSession]:
        return self._sessions_by_id.get(session_id)

    def exercise(self, exercise_id: int) -> Optional[Exercise]:
        return self._exercises_by_id.get(exercise_id)

    @property
    def is_empty(self) -> bool:
        """True when no completed session is present."""
        return not any(s.is_completed for s in self.sessions)

    def until(self, as_of: datetime.datetime) -> TrainingData:
        """The same rows without the sessions started after *as_of*.

        Logs and sets of a dropped session stay in the lists but no longer
        resolve, so they contribute nothing.
        """
        sessions = [s for s in self.sessions if s.started_at <= as_of]
        if len(sessions) == len(self.sessions):
            return self
        return TrainingData(sessions=sessions, exercises=self.exercises, exercise_logs=self.exercise_logs,
                            set_logs=self.set_logs, )

    def completed_sessions(self) -> list[WorkoutSession]:
        """Completed sessions, newest first."""
        completed = [s for s in self.sessions if s.is_completed]
        return sorted(completed, key=lambda s: s.started_at, reverse=True)

    def completed_logs(self) -> list[ExerciseLog]:
        """Exercise logs of a known exercise that belong to a completed session."""
        result = []
        for log in self.exercise_logs:
            session = self.session(log.workout_session_id)
            if session is None or not session.is_completed:
                continue
            if self.exercise(log.exercise_id) is not None:
                result.append(log)
        return result

    def iter_sets(self) -> Iterator[SetRecord]:
        """Yield every completed set of a completed session, fully joined."""
        for set_log in self.set_logs:
            if not set_log.completed:
                continue
            log = self._logs_by_id.get(set_log.exercise_log_id)
            if log is None:
                continue
            session = self.session(log.workout_session_id)
            if session is None or not session.is_completed:
                continue
            exercise = self.exercise(log.exercise_id)
            if exercise is None:
                continue
            yield SetRecord(set_log, log, exercise, session)

    # ------------------------------------------------------------------
    # Shared reductions
    # ------------------------------------------------------------------

    def total_volume(self) -> float:
        return sum(r.volume for r in self.iter_sets())

    def volume_by_body_part(self) -> dict[str, float]:
        """Σ weight×reps per ``target_body_part`` (untagged exercises skipped)."""
        volumes: dict[str, float] = {}
        for record in self.iter_sets():
            part = record.exercise.target_body_part
            if not part:
                continue
            volumes[part] = volumes.get(part, 0.0) + record.volume
        return volumes

    def last_trained_by_body_part(self) -> dict[str, datetime.datetime]:
        """Most recent session start per body part, from logged exercises."""
        last: dict[str, datetime.datetime] = {}
        for log in self.completed_logs():
            exercise = self.exercise(log.exercise_id)
            if not exercise.target_body_part:
                continue
            started = self.session(log.workout_session_id).started_at
            part = exercise.target_body_part
            if part not in last or started > last[part]:
                last[part] = started
        return last


def days_between(later: datetime.datetime, earlier: datetime.datetime) -> int:
    """Whole calendar days from *earlier* to *later*."""
    return (later.date() - earlier.date()).days


def week_start(moment: datetime.datetime) -> datetime.date:
    """Monday of the week containing *moment*."""
    day = moment.date()
    return day - datetime.timedelta(days=day.weekday())


def recent_week_starts(as_of: datetime.datetime, weeks: int) -> list[datetime.date]:
    """The last *weeks* Mondays up to and including the current week, oldest first."""
    current = week_start(as_of)
    return [current - datetime.timedelta(weeks=i) for i in range(weeks - 1, -1, -1)]
