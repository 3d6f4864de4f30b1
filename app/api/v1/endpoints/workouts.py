"""
Workout logging endpoints.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.common import to_naive_utc
from app.schemas.workout import WorkoutComplete, WorkoutSessionCreate, WorkoutSessionResponse
from app.services.workout_service import WorkoutService

router = APIRouter()


@router.post("", summary="Log a workout session with its exercises and sets.",
             response_model=WorkoutSessionResponse, status_code=status.HTTP_201_CREATED, )
def create_workout(data: WorkoutSessionCreate, db: Session = Depends(get_db),
                   user: User = Depends(get_current_user), ):
    return WorkoutService(db).create(user.id, data)


@router.get("", summary="List sessions started in a range.", response_model=list[WorkoutSessionResponse], )
def list_workouts(start: datetime.datetime = Query(..., description="Range start (inclusive)"),
                  end: datetime.datetime = Query(..., description="Range end (exclusive)"),
                  db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return WorkoutService(db).get_range(user.id, to_naive_utc(start), to_naive_utc(end))


@router.get("/{session_id}", summary="Get a session.", response_model=WorkoutSessionResponse, )
def get_workout(session_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return WorkoutService(db).get(user.id, session_id)


@router.post("/{session_id}/complete", summary="Mark a session as completed.",
             response_model=WorkoutSessionResponse, )
def complete_workout(session_id: int, data: Optional[WorkoutComplete] = Body(None), db: Session = Depends(get_db),
                     user: User = Depends(get_current_user), ):
    return WorkoutService(db).complete(user.id, session_id, data)
