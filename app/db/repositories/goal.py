"""
Body-part goal repository.
"""

from typing import Optional

from sqlmodel import Session, col, select

from app.models.goal import BodyPartGoal


class GoalRepository:
    """Repository for BodyPartGoal database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, goal: BodyPartGoal) -> BodyPartGoal:
        self.session.add(goal)
        self.session.commit()
        self.session.refresh(goal)
        return goal

    def get_by_id(self, goal_id: int) -> Optional[BodyPartGoal]:
        return self.session.get(BodyPartGoal, goal_id)

    def get_active_by_user(self, user_id: int) -> list[BodyPartGoal]:
        statement = (
            select(BodyPartGoal).where(BodyPartGoal.user_id == user_id, BodyPartGoal.is_active == True,
                                       # noqa: E712
                                       ).order_by(col(BodyPartGoal.created_at).desc()))
        return list(self.session.exec(statement).all())

    def get_all_by_user(self, user_id: int) -> list[BodyPartGoal]:
        statement = (
            select(BodyPartGoal).where(BodyPartGoal.user_id == user_id).order_by(col(BodyPartGoal.created_at).desc()))
        return list(self.session.exec(statement).all())

    def update(self, goal: BodyPartGoal) -> BodyPartGoal:
        self.session.add(goal)
        self.session.commit()
        self.session.refresh(goal)
        return goal

    def delete(self, goal_id: int) -> bool:
        goal = self.get_by_id(goal_id)
        if goal:
            self.session.delete(goal)
            self.session.commit()
            return True
        return False
