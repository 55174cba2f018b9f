"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    WatchAllException (base, 500)
       │
       ├── AuthenticationError (401)     ← Missing, invalid or expired bearer token
       ├── NotFoundError (404)           ← Document not found
       │      ├── ShowNotFoundError
       │      ├── SeasonNotFoundError
       │      ├── EpisodeNotFoundError
       │      ├── ChannelNotFoundError
       │      ├── GenreNotFoundError
       │      └── UserNotFoundError
       ├── ValidationError (400)         ← Invalid input data
       ├── ConflictError (409)           ← Document already exists
       │      └── DuplicateResourceError
       └── ServiceUnavailableError (503) ← Document store unreachable

Store errors raised by the MongoDB driver are not wrapped by repositories;
the API error handler maps them (DuplicateKeyError → 409, other
PyMongoError → 503).

Usage:
======
    from watchall.shared.core.exceptions import NotFoundError, ValidationError

    raise NotFoundError("Show", show_id)
    # {"error": {"code": "NOT_FOUND", "message": "Show with id 's1' not found"}}

    raise ValidationError("Document id cannot be changed", details={"id": record_id})
"""

from typing import Any, Optional


class WatchAllException(Exception):
    """
    Base exception for all WatchAll application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION ERRORS (401)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(WatchAllException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when:
    - Authorization header missing
    - Token malformed, badly signed or expired
    - Token issued by an unexpected issuer
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(WatchAllException):
    """
    Resource not found error (404 Not Found).

    Example:
        raise NotFoundError("Show", show_id)
        # Message: "Show with id 's1' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class ShowNotFoundError(NotFoundError):
    """Show not found error."""

    def __init__(self, show_id: str) -> None:
        super().__init__(resource="Show", resource_id=show_id)


class SeasonNotFoundError(NotFoundError):
    """Season not found error."""

    def __init__(self, season_id: str) -> None:
        super().__init__(resource="Season", resource_id=season_id)


class EpisodeNotFoundError(NotFoundError):
    """Episode not found error."""

    def __init__(self, episode_id: str) -> None:
        super().__init__(resource="Episode", resource_id=episode_id)


class ChannelNotFoundError(NotFoundError):
    """Channel not found error."""

    def __init__(self, channel_id: str) -> None:
        super().__init__(resource="Channel", resource_id=channel_id)


class GenreNotFoundError(NotFoundError):
    """Genre not found error."""

    def __init__(self, genre_id: str) -> None:
        super().__init__(resource="Genre", resource_id=genre_id)


class UserNotFoundError(NotFoundError):
    """User profile not found error."""

    def __init__(self, user_id: str) -> None:
        super().__init__(resource="User", resource_id=user_id)


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & CONFLICT ERRORS (400, 409)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(WatchAllException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


class ConflictError(WatchAllException):
    """
    Resource conflict error (409 Conflict).

    Example:
        raise ConflictError("Login already taken")
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """Raised when a document with the same id already exists."""

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICE ERRORS (503)
# ═══════════════════════════════════════════════════════════════════════════════


class ServiceUnavailableError(WatchAllException):
    """
    Service temporarily unavailable error (503).

    Raised when the document store cannot be reached.
    """

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=503,
            error_code="SERVICE_UNAVAILABLE",
            details=details,
        )
