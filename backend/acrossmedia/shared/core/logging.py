"""
Logging Configuration

Structured logging setup using structlog.

Log Output:
===========
Development:
    2025-03-02 10:30:00 [info     ] Account registered     account_id=550e8400-... username=alice

Production (JSON):
    {"timestamp": "2025-03-02T10:30:00", "level": "info", "event": "Account registered", ...}

Usage:
======
    from acrossmedia.shared.core.logging import logger, get_logger, log_context

    logger.info("Account approved", account_id=str(account.id))

    mail_logger = get_logger("notifications")
    mail_logger.warning("Delivery failed", recipient=address, error=str(exc))

    # Bind values to every log line of the current request
    log_context(request_id=request_id)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from acrossmedia.config.settings import settings


def setup_logging() -> None:
    """
    Configure structlog for the application.

    Development gets colored console output; every other environment
    renders JSON lines for log aggregation.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_development:
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a named structured logger.

    Args:
        name: Logger name, e.g. "notifications" or "gallery"

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Bind key-value pairs to all subsequent log calls in this context.

    Used by the request middleware to tag every line with the request id.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Drop all bound context variables at the end of a request."""
    structlog.contextvars.clear_contextvars()


# Initialize logging on module import
setup_logging()

logger = get_logger("acrossmedia")
