"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from watchall.shared.core.logging import logger, get_logger
    from watchall.shared.core.exceptions import WatchAllException, NotFoundError

    logger.info("Show deleted", show_id=show_id)
"""

from watchall.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from watchall.shared.core.exceptions import (
    WatchAllException,
    AuthenticationError,
    NotFoundError,
    ShowNotFoundError,
    SeasonNotFoundError,
    EpisodeNotFoundError,
    ChannelNotFoundError,
    GenreNotFoundError,
    UserNotFoundError,
    ValidationError,
    ConflictError,
    DuplicateResourceError,
    ServiceUnavailableError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "WatchAllException",
    "AuthenticationError",
    "NotFoundError",
    "ShowNotFoundError",
    "SeasonNotFoundError",
    "EpisodeNotFoundError",
    "ChannelNotFoundError",
    "GenreNotFoundError",
    "UserNotFoundError",
    "ValidationError",
    "ConflictError",
    "DuplicateResourceError",
    "ServiceUnavailableError",
]
