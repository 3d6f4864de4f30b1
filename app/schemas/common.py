"""
Envelope shared by every analytics response, and timestamp normalisation.

The presentation layer renders ``data`` and uses ``loading`` / ``error`` to
decide between the chart, a spinner and the fixed failure message.  A
result with ``error`` set always carries the family's empty ``data``.

Timestamps are stored as naive UTC. :func:`to_naive_utc` converts offset-aware
request values before they are compared with stored ones.
"""

import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class AnalyticsResult(BaseModel, Generic[DataT]):
    """One aggregator run."""

    data: DataT
    loading: bool = Field(False, description="Always false once the run has returned")
    error: Optional[str] = Field(None, description="Generic failure message, None on success")


def to_naive_utc(moment: Optional[datetime.datetime]) -> Optional[datetime.datetime]:
    """Stored timestamps are naive UTC; convert offset-aware input to match."""
    if moment is None or moment.tzinfo is None:
        return moment
    return moment.astimezone(datetime.timezone.utc).replace(tzinfo=None)
