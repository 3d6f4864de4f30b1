"""
User service.

Users are provisioned by the identity provider; this service only resolves
the user behind a bearer token.
"""

from typing import Optional

from sqlmodel import Session

from app.db.repositories.user import UserRepository
from app.models.user import User


class UserService:
    """Service for user-related business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.repository = UserRepository(session)

    def get_active_user(self, user_id: int) -> Optional[User]:
        """
        Get an active user by ID.

        Args:
            user_id: User ID (the token ``sub`` claim)

        Returns:
            User if found and active, None otherwise
        """
        user = self.repository.get_by_id(user_id)
        if user is None or not user.is_active:
            return None
        return user

