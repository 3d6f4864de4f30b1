"""
Workout logging models.

A :class:`WorkoutSession` holds one :class:`ExerciseLog` per exercise
performed, and each exercise log holds its :class:`SetLog` rows.  A session
counts as completed once ``completed_at`` is set.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class WorkoutSession(SQLModel, table=True):
    """A single workout."""

    __tablename__ = "workout_sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    name: str = Field(default="Workout", max_length=255)
    workout_type: str = Field(nullable=False, max_length=20)

    started_at: datetime.datetime = Field(nullable=False, index=True)
    completed_at: Optional[datetime.datetime] = Field(default=None, index=True)
    notes: Optional[str] = Field(default=None, max_length=1000)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None

    @property
    def duration_minutes(self) -> float:
        """Elapsed minutes, 0 while the session is still open."""
        if self.completed_at is None:
            return 0.0
        return (self.completed_at - self.started_at).total_seconds() / 60.0


class ExerciseLog(SQLModel, table=True):
    """An exercise performed within a workout session."""

    __tablename__ = "exercise_logs"

    id: Optional[int] = Field(default=None, primary_key=True)
    workout_session_id: int = Field(foreign_key="workout_sessions.id", nullable=False, index=True)
    exercise_id: int = Field(foreign_key="exercises.id", nullable=False, index=True)
    order_index: int = Field(default=0, nullable=False)
    notes: Optional[str] = Field(default=None, max_length=1000)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class SetLog(SQLModel, table=True):
    """One set of an exercise log.

    ``side`` is ``"left"`` / ``"right"`` for unilateral work and ``None``
    for bilateral sets.
    """

    __tablename__ = "set_logs"

    id: Optional[int] = Field(default=None, primary_key=True)
    exercise_log_id: int = Field(foreign_key="exercise_logs.id", nullable=False, index=True)
    set_number: int = Field(default=1, nullable=False)
    reps: int = Field(default=0, ge=0, nullable=False)
    weight: Optional[float] = Field(default=None)
    rir: Optional[int] = Field(default=None)
    completed: bool = Field(default=False, nullable=False)
    side: Optional[str] = Field(default=None, max_length=5)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)

    @property
    def volume(self) -> float:
        """``weight * reps``; sets without a weight contribute nothing."""
        return (self.weight or 0.0) * self.reps
