"""
Workout repository.

Read queries for sessions, exercise logs and set logs, plus the writes used
by workout logging.  :meth:`WorkoutRepository.load_training_data` is the
single fetch every aggregator goes through.
"""

import datetime
from typing import Optional

from sqlmodel import Session, col, select

from app.analytics.dataset import TrainingData
from app.models.exercise import Exercise
from app.models.workout import ExerciseLog, SetLog, WorkoutSession


class WorkoutRepository:
    """Repository for workout session, exercise log and set log rows."""

    def __init__(self, session: Session):
        self.session = session

    # ------------------------------------------------------------------
    # Aggregator fetch
    # ------------------------------------------------------------------

    def load_training_data(self, user_id: int, since: Optional[datetime.datetime] = None,
                           until: Optional[datetime.datetime] = None,
                           window_field: str = "started_at", ) -> TrainingData:
        """Load completed sessions (optionally windowed) with their logs and completed sets.

        Args:
            user_id: Owner of the rows.
            since: Inclusive lower bound; ``None`` loads the full history.
            until: Inclusive upper bound on ``started_at``; sessions started
                later do not exist yet at that instant.
            window_field: ``"started_at"`` or ``"completed_at"``, the column
                *since* applies to.
        """
        statement = select(WorkoutSession).where(WorkoutSession.user_id == user_id,
                                                 col(WorkoutSession.completed_at).is_not(None), )
        if since is not None:
            statement = statement.where(getattr(WorkoutSession, window_field) >= since)
        if until is not None:
            statement = statement.where(WorkoutSession.started_at <= until)
        sessions = list(self.session.exec(statement.order_by(col(WorkoutSession.started_at).desc())).all())

        exercises = list(self.session.exec(select(Exercise).where(Exercise.user_id == user_id)).all())

        session_ids = [s.id for s in sessions]
        if not session_ids:
            return TrainingData(sessions=[], exercises=exercises)

        logs = list(self.session.exec(
            select(ExerciseLog).where(col(ExerciseLog.workout_session_id).in_(session_ids)).order_by(
                ExerciseLog.workout_session_id, ExerciseLog.order_index)).all())

        log_ids = [log.id for log in logs]
        sets: list[SetLog] = []
        if log_ids:
            sets = list(self.session.exec(
                select(SetLog).where(col(SetLog.exercise_log_id).in_(log_ids), SetLog.completed == True,
                                     # noqa: E712
                                     ).order_by(SetLog.exercise_log_id, SetLog.set_number)).all())

        return TrainingData(sessions=sessions, exercises=exercises, exercise_logs=logs, set_logs=sets)

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    def get_session(self, session_id: int) -> Optional[WorkoutSession]:
        return self.session.get(WorkoutSession, session_id)

    def get_sessions_in_range(self, user_id: int, start: datetime.datetime,
                              end: datetime.datetime, ) -> list[WorkoutSession]:
        statement = (select(WorkoutSession).where(WorkoutSession.user_id == user_id,
                                                  WorkoutSession.started_at >= start,
                                                  WorkoutSession.started_at < end, ).order_by(
            col(WorkoutSession.started_at).desc()))
        return list(self.session.exec(statement).all())

    def get_logs_for_session(self, session_id: int) -> list[ExerciseLog]:
        statement = (select(ExerciseLog).where(ExerciseLog.workout_session_id == session_id).order_by(
            ExerciseLog.order_index))
        return list(self.session.exec(statement).all())

    def get_sets_for_logs(self, log_ids: list[int]) -> list[SetLog]:
        if not log_ids:
            return []
        statement = (select(SetLog).where(col(SetLog.exercise_log_id).in_(log_ids)).order_by(
            SetLog.exercise_log_id, SetLog.set_number))
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def create_session(self, workout: WorkoutSession, logs: list[tuple[ExerciseLog, list[SetLog]]], ) -> WorkoutSession:
        """Insert a session with its logs and sets in one transaction."""
        self.session.add(workout)
        self.session.flush()
        for log, sets in logs:
            log.workout_session_id = workout.id
            self.session.add(log)
            self.session.flush()
            for set_log in sets:
                set_log.exercise_log_id = log.id
                self.session.add(set_log)
        self.session.commit()
        self.session.refresh(workout)
        return workout

    def update_session(self, workout: WorkoutSession) -> WorkoutSession:
        self.session.add(workout)
        self.session.commit()
        self.session.refresh(workout)
        return workout
