"""
User API schemas.

Pydantic models for user-related responses.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr


# Response schemas
class UserResponse(BaseModel):
    """Schema for user data in API responses."""
    id: int
    email: EmailStr
    full_name: Optional[str] = None
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True  # Allows creation from SQLModel objects
