"""
Security Utilities

JWT bearer token issuing and validation.

Validation Rules:
=================
Every bearer token must satisfy:
- Signature valid for the shared symmetric secret (HS256 by default)
- "iss" claim present and equal to the configured issuer
- "exp" claim present and not in the past (no clock skew tolerance)

The audience claim is not validated.

Usage:
======
    from watchall.shared.utils.security import SecurityUtils

    # Issue a token (tooling and tests; production tokens come from the
    # identity provider named by JWT_ISSUER)
    token = SecurityUtils.create_access_token(
        data={"sub": "user-1"},
        secret_key="secret",
        issuer="https://identity.watch-all.com/",
        expires_delta=timedelta(hours=1),
    )

    # Validate a token
    payload = SecurityUtils.decode_access_token(
        token, "secret", issuer="https://identity.watch-all.com/"
    )
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from watchall.config.settings import settings


class SecurityUtils:
    """JWT token creation and validation."""

    @staticmethod
    def create_access_token(
        data: dict,
        secret_key: str,
        issuer: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Create a signed JWT access token.

        Args:
            data: Payload data to encode (e.g., sub, login)
            secret_key: Secret key for signing
            issuer: Value of the "iss" claim
            expires_delta: Token lifetime (default: ACCESS_TOKEN_EXPIRE_MINUTES)
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Encoded JWT token string
        """
        to_encode = data.copy()
        now = datetime.now(timezone.utc)

        if expires_delta is None:
            expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        expire = now + expires_delta

        to_encode.update({
            "iss": issuer,
            "iat": now,
            "exp": expire,
        })

        return jwt.encode(to_encode, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        issuer: str,
        algorithm: str = "HS256",
    ) -> dict:
        """
        Decode and verify a JWT token.

        Args:
            token: JWT token string
            secret_key: Secret key used for signing
            issuer: Expected "iss" claim
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Decoded token payload

        Raises:
            ValueError: If the token is expired, badly signed, from another
                issuer or otherwise invalid
        """
        try:
            return jwt.decode(
                token,
                secret_key,
                algorithms=[algorithm],
                issuer=issuer,
                leeway=0,
                options={
                    "require": ["exp", "iss"],
                    "verify_aud": False,
                },
            )
        except jwt.ExpiredSignatureError:
            raise ValueError("Token has expired")
        except jwt.InvalidIssuerError:
            raise ValueError("Invalid token issuer")
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {str(e)}")
