"""
Exercise catalogue endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.enums import BodyPart
from app.models.user import User
from app.schemas.exercise import ExerciseCreate, ExerciseResponse
from app.services.exercise_service import ExerciseService

router = APIRouter()


@router.post("", summary="Add an exercise to the catalogue.", response_model=ExerciseResponse,
             status_code=status.HTTP_201_CREATED, )
def create_exercise(data: ExerciseCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return ExerciseService(db).create(user.id, data)


@router.get("", summary="List the catalogue, optionally for one body part.", response_model=list[ExerciseResponse], )
def list_exercises(body_part: Optional[BodyPart] = Query(None), db: Session = Depends(get_db),
                   user: User = Depends(get_current_user), ):
    return ExerciseService(db).list_for_user(user.id, body_part)
