"""
Body-part goal service.

Goals belong to one user; every read or write checks ownership.  A goal's
target must fit its type:

- ``volume`` and ``frequency`` need a positive ``target_value``
- ``specific_exercises`` needs a non-empty ``target_exercises`` list
"""

import datetime
import logging

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.goal import GoalRepository
from app.models.enums import GoalType
from app.models.goal import BodyPartGoal
from app.schemas.goal import GoalCreate, GoalResponse, GoalUpdate

logger = logging.getLogger(__name__)


class GoalService:
    """Service for body-part goal business logic."""

    def __init__(self, session: Session):
        self.repository = GoalRepository(session)

    def create(self, user_id: int, data: GoalCreate) -> GoalResponse:
        goal = BodyPartGoal(user_id=user_id, body_part=data.body_part.value, goal_type=data.goal_type.value,
                            timeframe=data.timeframe.value, target_value=data.target_value,
                            target_exercises=data.target_exercises, )
        self._validate_target(goal)
        goal = self.repository.create(goal)
        logger.info("Created %s goal %s for user %s", goal.goal_type, goal.id, user_id)
        return GoalResponse.model_validate(goal)

    def list_for_user(self, user_id: int, active_only: bool = False) -> list[GoalResponse]:
        if active_only:
            goals = self.repository.get_active_by_user(user_id)
        else:
            goals = self.repository.get_all_by_user(user_id)
        return [GoalResponse.model_validate(g) for g in goals]

    def get(self, user_id: int, goal_id: int) -> GoalResponse:
        return GoalResponse.model_validate(self._get_owned_goal(user_id, goal_id))

    def update(self, user_id: int, goal_id: int, data: GoalUpdate) -> GoalResponse:
        goal = self._get_owned_goal(user_id, goal_id)

        if data.timeframe is not None:
            goal.timeframe = data.timeframe.value
        if data.target_value is not None:
            goal.target_value = data.target_value
        if data.target_exercises is not None:
            goal.target_exercises = data.target_exercises
        if data.is_active is not None:
            goal.is_active = data.is_active

        self._validate_target(goal)
        goal.updated_at = datetime.datetime.utcnow()
        goal = self.repository.update(goal)
        logger.info("Updated goal %s for user %s", goal_id, user_id)
        return GoalResponse.model_validate(goal)

    def delete(self, user_id: int, goal_id: int) -> None:
        self._get_owned_goal(user_id, goal_id)
        self.repository.delete(goal_id)
        logger.info("Deleted goal %s for user %s", goal_id, user_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_owned_goal(self, user_id: int, goal_id: int) -> BodyPartGoal:
        goal = self.repository.get_by_id(goal_id)
        if not goal or goal.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Goal not found")
        return goal

    @staticmethod
    def _validate_target(goal: BodyPartGoal) -> None:
        if goal.goal_type == GoalType.SPECIFIC_EXERCISES:
            if not goal.target_exercises:
                raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                                    detail="specific_exercises goals need at least one target exercise", )
        elif not goal.target_value or goal.target_value <= 0:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                                detail=f"{goal.goal_type} goals need a positive target_value", )
