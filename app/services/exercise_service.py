"""
Exercise catalogue service.
"""

import logging
from typing import Optional

from sqlmodel import Session

from app.db.repositories.exercise import ExerciseRepository
from app.models.enums import BodyPart
from app.models.exercise import Exercise
from app.schemas.exercise import ExerciseCreate, ExerciseResponse

logger = logging.getLogger(__name__)


class ExerciseService:
    """Service for the user's exercise catalogue."""

    def __init__(self, session: Session):
        self.repository = ExerciseRepository(session)

    def create(self, user_id: int, data: ExerciseCreate) -> ExerciseResponse:
        exercise = Exercise(user_id=user_id, name=data.name, description=data.description,
                            target_body_part=data.target_body_part.value if data.target_body_part else None,
                            is_unilateral=data.is_unilateral,
                            muscle_group=data.muscle_group.value if data.muscle_group else None, )
        exercise = self.repository.create(exercise)
        logger.info("Created exercise %s for user %s", exercise.id, user_id)
        return ExerciseResponse.model_validate(exercise)

    def list_for_user(self, user_id: int, body_part: Optional[BodyPart] = None) -> list[ExerciseResponse]:
        exercises = self.repository.get_all_by_user(user_id, body_part.value if body_part else None)
        return [ExerciseResponse.model_validate(e) for e in exercises]
