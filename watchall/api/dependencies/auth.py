"""
Authentication Dependencies

FastAPI dependencies enforcing the "Bearer" policy on protected routes.

Validation Rules:
=================
A request passes only if its Authorization header carries a bearer token
that:
- is signed with SECRET_KEY (JWT_ALGORITHM)
- has an "iss" claim equal to JWT_ISSUER
- has an "exp" claim that is not in the past (no clock skew)

Anything else is rejected with 401 before any manager or repository runs.

Usage:
======
    from watchall.api.dependencies.auth import require_bearer

    @router.post("", dependencies=[Depends(require_bearer)])
    async def create_show(show: Show):
        ...
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from watchall.config.settings import settings
from watchall.shared.core.exceptions import AuthenticationError
from watchall.shared.core.logging import log_context
from watchall.shared.utils.security import SecurityUtils


# Security scheme for Bearer tokens; declared in the OpenAPI description.
# auto_error=False so a missing header yields our 401 error body.
security = HTTPBearer(
    auto_error=False,
    scheme_name="Bearer",
    description='JWT Authorization header using the Bearer scheme. Example: "Authorization: Bearer {token}"',
)


async def require_bearer(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> dict:
    """
    Extract and validate the JWT bearer token from the Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded token payload

    Raises:
        AuthenticationError: If token is missing or invalid
    """
    if not credentials:
        raise AuthenticationError("Authorization header required")

    try:
        payload = SecurityUtils.decode_access_token(
            credentials.credentials,
            settings.SECRET_KEY,
            issuer=settings.JWT_ISSUER,
            algorithm=settings.JWT_ALGORITHM,
        )
    except ValueError as e:
        raise AuthenticationError(str(e)) from e

    if payload.get("sub"):
        log_context(subject=payload["sub"])
    return payload
