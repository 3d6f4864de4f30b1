"""
Shared API dependencies.

Reusable FastAPI dependencies for authentication and database access.

- :func:`get_user_context` - analytics: no token is an anonymous request
  (``None``), a bad token is a 401.
- :func:`get_current_user` - writes: a signed-in user is required.
"""

import datetime
from typing import Optional

from fastapi import Depends, HTTPException, Query, status
from sqlmodel import Session

from app.analytics.context import UserContext
from app.core.security import decode_access_token, oauth2_scheme
from app.db.session import get_db
from app.models.user import User
from app.schemas.common import to_naive_utc
from app.services.user_service import UserService


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail,
                         headers={ "WWW-Authenticate": "Bearer" }, )


def _resolve_user(token: str, db: Session) -> User:
    subject = decode_access_token(token)
    if not subject or not subject.isdigit():
        raise _unauthorized("Invalid or expired token")
    user = UserService(db).get_active_user(int(subject))
    if not user:
        raise _unauthorized("User not found")
    return user


def get_optional_user(token: Optional[str] = Depends(oauth2_scheme), db: Session = Depends(get_db), ) -> Optional[User]:
    """The signed-in user, or ``None`` when no bearer token was sent."""
    if token is None:
        return None
    return _resolve_user(token, db)


def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    """Extract and validate the current user from the JWT token."""
    if user is None:
        raise _unauthorized("Not authenticated")
    return user


def get_user_context(as_of: Optional[datetime.datetime] = Query(None, description="Evaluation time (defaults to now)"),
                     user: Optional[User] = Depends(get_optional_user), ) -> Optional[UserContext]:
    """Explicit context for one aggregation call."""
    if user is None:
        return None
    if as_of is None:
        return UserContext(user_id=user.id)
    return UserContext(user_id=user.id, as_of=to_naive_utc(as_of))
