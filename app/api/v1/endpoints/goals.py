"""
Body-part goal endpoints.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.goal import GoalCreate, GoalResponse, GoalUpdate
from app.services.goal_service import GoalService

router = APIRouter()


@router.post("", summary="Create a body-part goal.", response_model=GoalResponse, status_code=status.HTTP_201_CREATED, )
def create_goal(data: GoalCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return GoalService(db).create(user.id, data)


@router.get("", summary="List goals.", response_model=list[GoalResponse], )
def list_goals(active_only: bool = Query(False, description="Only return active goals"),
               db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return GoalService(db).list_for_user(user.id, active_only)


@router.get("/{goal_id}", summary="Get a goal.", response_model=GoalResponse, )
def get_goal(goal_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return GoalService(db).get(user.id, goal_id)


@router.patch("/{goal_id}", summary="Update target, exercises, timeframe or active flag.",
              response_model=GoalResponse, )
def update_goal(goal_id: int, data: GoalUpdate, db: Session = Depends(get_db),
                user: User = Depends(get_current_user), ):
    return GoalService(db).update(user.id, goal_id, data)


@router.delete("/{goal_id}", summary="Delete a goal.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_goal(goal_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    GoalService(db).delete(user.id, goal_id)
