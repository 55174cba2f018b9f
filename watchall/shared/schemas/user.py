"""
User Schemas

Response and request models for user profile endpoints. Responses never
expose the password hash.
"""

from typing import Optional

from pydantic import BaseModel, Field

from watchall.shared.schemas.common import BaseSchema


class UserResponse(BaseSchema):
    """Schema for user profile responses."""

    id: str
    login: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class PasswordValidationRequest(BaseModel):
    """Schema for the password validation hook."""

    password: str = Field(min_length=1)
