"""
Exercise database model.

Exercises belong to a user's personal catalogue.  ``target_body_part`` and
``muscle_group`` hold the string values of :class:`~app.models.enums.BodyPart`
and :class:`~app.models.enums.MuscleGroup`.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class Exercise(SQLModel, table=True):
    """A user-defined exercise."""

    __tablename__ = "exercises"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)

    target_body_part: Optional[str] = Field(default=None, max_length=20, index=True)
    is_unilateral: bool = Field(default=False, nullable=False)
    muscle_group: Optional[str] = Field(default=None, max_length=20)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
