"""Test helpers shared by several test modules."""

from datetime import timedelta
from typing import Optional

from watchall.config.settings import settings
from watchall.shared.utils.security import SecurityUtils


def make_token(
    secret_key: Optional[str] = None,
    issuer: Optional[str] = None,
    expires_delta: timedelta = timedelta(minutes=5),
) -> str:
    """Issue a bearer token, valid for the test settings unless overridden."""
    return SecurityUtils.create_access_token(
        data={"sub": "tester"},
        secret_key=secret_key or settings.SECRET_KEY,
        issuer=issuer or settings.JWT_ISSUER,
        expires_delta=expires_delta,
        algorithm=settings.JWT_ALGORITHM,
    )
