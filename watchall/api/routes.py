"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live  → Probes
    /shows                  → Shows (+ /top, /{id}/seasons)
    /seasons                → Seasons (+ /{id}/episodes)
    /episodes               → Episodes
    /channels               → Channels
    /genres                 → Genres
    /users                  → User profiles (Bearer on every route)

Usage:
======
    from watchall.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import Depends, FastAPI

from watchall.api.dependencies.auth import require_bearer
from watchall.api.handlers import (
    channel_handler,
    episode_handler,
    genre_handler,
    health_handler,
    season_handler,
    show_handler,
    user_handler,
)
from watchall.shared.schemas.common import ErrorResponse


# Error envelopes documented on every resource router
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Validation error"},
    401: {"model": ErrorResponse, "description": "Missing or invalid bearer token"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
    409: {"model": ErrorResponse, "description": "Id already taken"},
    503: {"model": ErrorResponse, "description": "Document store unavailable"},
}


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    app.include_router(
        show_handler.router,
        prefix="/shows",
        tags=["Shows"],
        responses=ERROR_RESPONSES,
    )

    app.include_router(
        season_handler.router,
        prefix="/seasons",
        tags=["Seasons"],
        responses=ERROR_RESPONSES,
    )

    app.include_router(
        episode_handler.router,
        prefix="/episodes",
        tags=["Episodes"],
        responses=ERROR_RESPONSES,
    )

    app.include_router(
        channel_handler.router,
        prefix="/channels",
        tags=["Channels"],
        responses=ERROR_RESPONSES,
    )

    app.include_router(
        genre_handler.router,
        prefix="/genres",
        tags=["Genres"],
        responses=ERROR_RESPONSES,
    )

    # Profiles hold personal data: reads are protected too
    app.include_router(
        user_handler.router,
        prefix="/users",
        tags=["Users"],
        dependencies=[Depends(require_bearer)],
        responses=ERROR_RESPONSES,
    )
