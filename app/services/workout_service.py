"""
Workout logging service.

Logs a session with its nested exercise logs and sets in one transaction,
marks sessions complete and lists them by date range.  Every referenced
exercise must belong to the user; ``side`` is only accepted on unilateral
exercises.
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.exercise import ExerciseRepository
from app.db.repositories.workout import WorkoutRepository
from app.models.exercise import Exercise
from app.models.workout import ExerciseLog, SetLog, WorkoutSession
from app.schemas.workout import (ExerciseLogResponse, SetLogResponse, WorkoutComplete, WorkoutSessionCreate,
                                 WorkoutSessionResponse, )

logger = logging.getLogger(__name__)


class WorkoutService:
    """Service for workout logging business logic."""

    def __init__(self, session: Session):
        self.repository = WorkoutRepository(session)
        self.exercises = ExerciseRepository(session)

    def create(self, user_id: int, data: WorkoutSessionCreate) -> WorkoutSessionResponse:
        logs: list[tuple[ExerciseLog, list[SetLog]]] = []
        for entry in data.exercises:
            exercise = self._get_owned_exercise(user_id, entry.exercise_id)
            sets = []
            for s in entry.sets:
                if s.side is not None and not exercise.is_unilateral:
                    raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                                        detail=f"'{exercise.name}' is not unilateral; sets cannot have a side", )
                sets.append(SetLog(set_number=s.set_number, reps=s.reps, weight=s.weight, rir=s.rir,
                                   completed=s.completed, side=s.side.value if s.side else None, ))
            logs.append((ExerciseLog(exercise_id=exercise.id, order_index=entry.order_index, notes=entry.notes), sets))

        workout = WorkoutSession(user_id=user_id, name=data.name, workout_type=data.workout_type.value,
                                 started_at=data.started_at, completed_at=data.completed_at, notes=data.notes, )
        workout = self.repository.create_session(workout, logs)
        logger.info("Logged workout %s for user %s with %d exercises", workout.id, user_id, len(logs))
        return self._to_response(workout)

    def get(self, user_id: int, session_id: int) -> WorkoutSessionResponse:
        return self._to_response(self._get_owned_session(user_id, session_id))

    def get_range(self, user_id: int, start: datetime.datetime, end: datetime.datetime, ) -> list[WorkoutSessionResponse]:
        return [self._to_response(w) for w in self.repository.get_sessions_in_range(user_id, start, end)]

    def complete(self, user_id: int, session_id: int, data: Optional[WorkoutComplete] = None) -> WorkoutSessionResponse:
        workout = self._get_owned_session(user_id, session_id)
        if workout.is_completed:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Workout already completed")

        completed_at = (data.completed_at if data else None) or datetime.datetime.utcnow()
        if completed_at < workout.started_at:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                                detail="completed_at must not be before started_at", )

        workout.completed_at = completed_at
        workout = self.repository.update_session(workout)
        logger.info("Completed workout %s for user %s", session_id, user_id)
        return self._to_response(workout)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_owned_exercise(self, user_id: int, exercise_id: int) -> Exercise:
        exercise = self.exercises.get_by_id(exercise_id)
        if not exercise or exercise.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Exercise {exercise_id} not found")
        return exercise

    def _get_owned_session(self, user_id: int, session_id: int) -> WorkoutSession:
        workout = self.repository.get_session(session_id)
        if not workout or workout.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
        return workout

    def _to_response(self, workout: WorkoutSession) -> WorkoutSessionResponse:
        logs = self.repository.get_logs_for_session(workout.id)
        sets_by_log: dict[int, list[SetLogResponse]] = {}
        for set_log in self.repository.get_sets_for_logs([log.id for log in logs]):
            sets_by_log.setdefault(set_log.exercise_log_id, []).append(SetLogResponse.model_validate(set_log))

        return WorkoutSessionResponse(id=workout.id, name=workout.name, workout_type=workout.workout_type,
                                      started_at=workout.started_at, completed_at=workout.completed_at,
                                      notes=workout.notes, exercises=[
                ExerciseLogResponse(id=log.id, exercise_id=log.exercise_id, order_index=log.order_index,
                                    notes=log.notes, sets=sets_by_log.get(log.id, []), ) for log in logs], )
