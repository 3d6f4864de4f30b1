"""
User endpoints.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_current_user
from app.models.user import User
from app.schemas.user import UserResponse

router = APIRouter()


@router.get("/me", summary="Get the signed-in user.", response_model=UserResponse)
def read_current_user(user: User = Depends(get_current_user)):
    return user
