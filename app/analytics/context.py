"""
Explicit per-call context and the shared fetch → reduce runner.

Every aggregator is called as ``compute_x(session, ctx, ...)``.  The
caller owns scheduling: each call recomputes from scratch and shares no
state with any other call.
"""

from __future__ import annotations

import datetime
import logging
from typing import Callable, Optional, TypeVar

from pydantic import BaseModel, Field
from sqlalchemy.exc import SQLAlchemyError

from app.schemas.common import AnalyticsResult

logger = logging.getLogger(__name__)

R = TypeVar("R")
T = TypeVar("T")


class UserContext(BaseModel):
    """Who the aggregation runs for, and the instant it is evaluated at."""

    user_id: int
    as_of: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


def run_aggregation(
    family: str,
    ctx: Optional[UserContext],
    fetch: Callable[[UserContext], R],
    reduce: Callable[[R, UserContext], T],
    empty: Callable[[], T],
) -> AnalyticsResult[T]:
    """Fetch rows for *ctx* and reduce them into a result envelope.

    - no user → empty data, no error
    - fetch failure → logged, empty data, generic error message
    """
    if ctx is None:
        return AnalyticsResult(data=empty())

    try:
        data = fetch(ctx)
    except SQLAlchemyError:
        logger.exception("Error fetching %s data for user %s", family, ctx.user_id)
        return AnalyticsResult(data=empty(), error=f"Failed to load {family} data")

    return AnalyticsResult(data=reduce(data, ctx))
