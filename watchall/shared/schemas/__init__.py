"""
Pydantic Schemas

Request and response models for the API that are not document models
themselves.

Schema Categories:
==================
- common: Base schema, error envelope and health responses
- user: User profile responses (password hash stripped)

Usage:
======
    from watchall.shared.schemas.user import UserResponse
    from watchall.shared.schemas.common import ErrorResponse
"""

from watchall.shared.schemas.common import (
    BaseSchema,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from watchall.shared.schemas.user import (
    UserResponse,
    PasswordValidationRequest,
)

__all__ = [
    # Common
    "BaseSchema",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # User
    "UserResponse",
    "PasswordValidationRequest",
]
