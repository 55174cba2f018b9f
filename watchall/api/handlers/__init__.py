"""
API Handlers

Route handlers for the WatchAll API.

Handlers follow the pattern:
- Parse HTTP requests
- Call manager or repository methods
- Format HTTP responses

Errors are raised as WatchAllException subclasses and mapped to responses
by the error handler middleware.
"""

from watchall.api.handlers import (
    channel_handler,
    episode_handler,
    genre_handler,
    health_handler,
    season_handler,
    show_handler,
    user_handler,
)

__all__ = [
    "channel_handler",
    "episode_handler",
    "genre_handler",
    "health_handler",
    "season_handler",
    "show_handler",
    "user_handler",
]
