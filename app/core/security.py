"""
Bearer-token handling.

Tokens are issued by the identity provider that fronts the app and signed
with the shared ``SECRET_KEY``.  The ``sub`` claim carries the user id.
"""

import datetime
import logging
from typing import Optional

import jwt
from fastapi.security import OAuth2PasswordBearer

from app.core.config import settings

logger = logging.getLogger(__name__)

# auto_error=False: a missing token is an anonymous request, not a 401
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/token", auto_error=False)


def create_access_token(data: dict, expires_delta: Optional[datetime.timedelta] = None) -> str:
    """Sign a JWT carrying *data* plus an ``exp`` claim."""
    to_encode = dict(data)
    expire = datetime.datetime.now(datetime.timezone.utc) + (
        expires_delta or datetime.timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode["exp"] = expire
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Optional[str]:
    """Return the ``sub`` claim of a valid token, or ``None``."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired access token")
        return None
    except jwt.InvalidTokenError as e:
        logger.warning("Rejected invalid access token: %s", e)
        return None
    subject = payload.get("sub")
    return str(subject) if subject is not None else None
