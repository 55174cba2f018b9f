"""
WatchAll API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                           WATCHALL API                                      │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   Middleware:   CORS → Request logging → Error Handler                      │
│                              │                                              │
│                              ▼                                              │
│   Routers:      Health │ Shows │ Seasons │ Episodes │ Channels │ Genres │   │
│                 Users                                                       │
│                              │                                              │
│                              ▼                                              │
│   Dependencies: Bearer policy │ Container (managers, repositories)          │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. Application starts → lifespan startup
2. Document store client opened and pinged
3. Container built, indexes ensured
4. Application serves requests
5. Application stops → client closed

Usage:
======
    uvicorn watchall.api.main:app --host 0.0.0.0 --port 8000 --reload

    # or, with HOST / PORT / DEBUG from settings
    python -m watchall.api.main
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from watchall.api.middleware import LoggingMiddleware, setup_exception_handlers
from watchall.api.routes import register_routes
from watchall.config.settings import settings
from watchall.container import Container
from watchall.shared.core.logging import logger
from watchall.shared.db import close_db, init_db


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Open the document store client and verify it answers
    - Build the container and ensure collection indexes

    Shutdown:
    - Close the document store client
    """
    # ═══════════════════════════════════════════════════════════════════════════
    # STARTUP
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info(
        "Starting WatchAll API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )

    database = await init_db()
    container = Container.from_database(database)
    await container.ensure_indexes()
    app.state.container = container

    logger.info("WatchAll API started successfully")

    yield

    # ═══════════════════════════════════════════════════════════════════════════
    # SHUTDOWN
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info("Shutting down WatchAll API")

    app.state.container = None
    await close_db()

    logger.info("WatchAll API shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance

    This factory function:
    1. Creates the FastAPI app with settings
    2. Adds middleware (CORS, request logging)
    3. Sets up exception handlers
    4. Registers all routes
    """
    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="API for the WatchAll media-tracking service",
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DOCS_ENABLED else None,
        redoc_url="/redoc" if settings.DOCS_ENABLED else None,
        openapi_url="/openapi.json" if settings.DOCS_ENABLED else None,
        lifespan=lifespan,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials="*" not in settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


# Create the application instance
app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "watchall.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
