"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from acrossmedia.shared.core import logger, ForbiddenError

    logger.info("Role changed", account_id=account_id, role=new_role.value)
"""

from acrossmedia.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from acrossmedia.shared.core.exceptions import (
    AcrossMediaException,
    AuthenticationError,
    AuthorizationError,
    ForbiddenError,
    NotFoundError,
    AccountNotFoundError,
    ContentNotFoundError,
    ApprovalTokenNotFoundError,
    VideoNotFoundError,
    ValidationError,
    InvalidVideoUrlError,
    StorageError,
    NotificationError,
    ServiceUnavailableError,
    ExternalServiceError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "AcrossMediaException",
    "AuthenticationError",
    "AuthorizationError",
    "ForbiddenError",
    "NotFoundError",
    "AccountNotFoundError",
    "ContentNotFoundError",
    "ApprovalTokenNotFoundError",
    "VideoNotFoundError",
    "ValidationError",
    "InvalidVideoUrlError",
    "StorageError",
    "NotificationError",
    "ServiceUnavailableError",
    "ExternalServiceError",
]
