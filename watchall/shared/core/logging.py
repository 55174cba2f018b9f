"""
Logging Configuration

structlog on top of the standard logging module, so driver and server
loggers (pymongo, uvicorn) end up in the same stream as application logs.

Renderers:
==========
    development  → colored console lines
    anything else → one JSON object per line, tagged with service and version

    2024-01-15 10:30:00 [debug    ] Document inserted  collection=shows record_id=s1
    {"event": "Document inserted", "collection": "shows", "service": "watchall", ...}

Noise Control:
==============
pymongo logs every command and heartbeat at DEBUG; uvicorn logs an access
line per request that duplicates LoggingMiddleware. Both are held at WARNING
unless DEBUG is set.

Usage:
======
    from watchall.shared.core.logging import logger, get_logger, log_context

    logger.info("Show created", show_id=show.id)

    repo_logger = get_logger(__name__)
    repo_logger.debug("Document replaced", collection="seasons", record_id="se1")

    log_context(request_id=request_id)   # bound until clear_log_context()
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

from watchall.config.settings import settings


# Third-party loggers held at WARNING unless DEBUG is on
NOISY_LOGGERS = ("pymongo", "motor", "uvicorn.access")


def add_service_info(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Tag every event with the service name and version."""
    event_dict.setdefault("service", settings.APP_NAME.lower())
    event_dict.setdefault("version", settings.APP_VERSION)
    return event_dict


def _processors(json_output: bool) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if json_output:
        return processors + [
            add_service_info,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return processors + [structlog.dev.ConsoleRenderer(colors=True)]


def setup_logging() -> None:
    """
    Configure structlog and the standard logging root.

    Called once when this module is imported.
    """
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    third_party_level = logging.DEBUG if settings.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(third_party_level)

    structlog.configure(
        processors=_processors(json_output=not settings.is_development),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """Bind key-value pairs to every later log call in this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Drop everything bound with log_context()."""
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("watchall")
