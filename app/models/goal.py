"""
Body-part goal model.

A goal is evaluated against a rolling window (7 days for weekly goals,
30 days for monthly ones) ending at the evaluation time.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class BodyPartGoal(SQLModel, table=True):
    """User-defined training target for one body part."""

    __tablename__ = "body_part_goals"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    body_part: str = Field(nullable=False, max_length=20)
    goal_type: str = Field(nullable=False, max_length=30)
    timeframe: str = Field(default="weekly", nullable=False, max_length=10)

    target_value: Optional[float] = Field(default=None)
    # Exercise names, only used by ``specific_exercises`` goals
    target_exercises: Optional[list] = Field(default=None, sa_column=Column(JSON, nullable=True))

    is_active: bool = Field(default=True, nullable=False)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
