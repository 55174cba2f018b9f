"""
Error Handler Middleware

Global exception handling for the API.

Repositories and managers never catch store errors; this is the single
place where every failure is mapped to a response.

Error Response Format:
======================
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Show with id 's1' not found",
            "details": {}
        }
    }

Exception Handling:
===================
1. WatchAllException subclasses     → their status_code and to_dict()
2. Request / Pydantic validation    → 400 with validation details
3. pymongo DuplicateKeyError        → 409 CONFLICT
4. Other pymongo PyMongoError       → 503 SERVICE_UNAVAILABLE
5. NotImplementedError              → 501 NOT_IMPLEMENTED
6. Other exceptions                 → 500 with generic message (details hidden)

Usage:
======
    from watchall.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from pymongo.errors import DuplicateKeyError, PyMongoError

from watchall.shared.core.exceptions import (
    DuplicateResourceError,
    ServiceUnavailableError,
    WatchAllException,
)
from watchall.shared.core.logging import logger


def _validation_response(request: Request, errors: list) -> JSONResponse:
    logger.warning(
        "Validation error",
        errors=errors,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=400,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Request validation failed",
                "details": {"errors": jsonable_encoder(errors)},
            }
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(WatchAllException)
    async def watchall_exception_handler(
        request: Request,
        exc: WatchAllException,
    ) -> JSONResponse:
        """Handle WatchAll-specific exceptions."""
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle request bodies, paths or queries that do not match the schema."""
        return _validation_response(request, exc.errors())

    @app.exception_handler(PydanticValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: PydanticValidationError,
    ) -> JSONResponse:
        """Handle Pydantic validation errors raised inside handlers."""
        return _validation_response(request, exc.errors())

    @app.exception_handler(DuplicateKeyError)
    async def duplicate_key_exception_handler(
        request: Request,
        exc: DuplicateKeyError,
    ) -> JSONResponse:
        """Handle inserts rejected because the id is already taken."""
        error = DuplicateResourceError("Document with this id already exists")
        logger.warning(
            "Duplicate key",
            error=str(exc),
            path=request.url.path,
        )
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.exception_handler(PyMongoError)
    async def store_exception_handler(
        request: Request,
        exc: PyMongoError,
    ) -> JSONResponse:
        """Handle document store failures (connectivity, driver errors)."""
        error = ServiceUnavailableError("Document store unavailable")
        logger.error(
            "Document store error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.exception_handler(NotImplementedError)
    async def not_implemented_exception_handler(
        request: Request,
        exc: NotImplementedError,
    ) -> JSONResponse:
        """Handle hooks that exist but are not implemented yet."""
        logger.warning(
            "Not implemented",
            message=str(exc),
            path=request.url.path,
        )
        return JSONResponse(
            status_code=501,
            content={
                "error": {
                    "code": "NOT_IMPLEMENTED",
                    "message": str(exc) or "Not implemented",
                    "details": {},
                }
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                }
            },
        )
