"""
API Middleware

Custom middleware for the FastAPI application.

Components:
===========
- error_handler: Global exception handling
- logging_middleware: Request log context and access log

Usage:
======
    from watchall.api.middleware import setup_exception_handlers, LoggingMiddleware

    app = FastAPI()
    setup_exception_handlers(app)
    app.add_middleware(LoggingMiddleware)
"""

from watchall.api.middleware.error_handler import setup_exception_handlers
from watchall.api.middleware.logging_middleware import LoggingMiddleware

__all__ = [
    "setup_exception_handlers",
    "LoggingMiddleware",
]
