"""
Exercise repository.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.exercise import Exercise


class ExerciseRepository:
    """Repository for Exercise database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, exercise: Exercise) -> Exercise:
        self.session.add(exercise)
        self.session.commit()
        self.session.refresh(exercise)
        return exercise

    def get_by_id(self, exercise_id: int) -> Optional[Exercise]:
        return self.session.get(Exercise, exercise_id)

    def get_all_by_user(self, user_id: int, body_part: Optional[str] = None) -> list[Exercise]:
        statement = select(Exercise).where(Exercise.user_id == user_id)
        if body_part is not None:
            statement = statement.where(Exercise.target_body_part == body_part)
        return list(self.session.exec(statement.order_by(Exercise.name)).all())
