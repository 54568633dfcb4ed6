"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    AcrossMediaException (base)
       │
       ├── AuthenticationError (401)      ← Invalid credentials, token expired
       ├── AuthorizationError (403)       ← Caller lacks permission
       │      └── ForbiddenError          ← Operation not permitted on this target
       ├── NotFoundError (404)            ← Resource not found
       │      ├── AccountNotFoundError
       │      ├── ContentNotFoundError
       │      ├── ApprovalTokenNotFoundError
       │      └── VideoNotFoundError      ← Metadata provider has no such video
       ├── ValidationError (400)          ← Invalid input data
       │      └── InvalidVideoUrlError    ← No video id in the URL
       ├── StorageError (500)             ← Persistence layer failure
       ├── NotificationError (502)        ← Email delivery failure (never surfaced)
       └── ServiceUnavailableError (503)  ← External service down
              └── ExternalServiceError

Usage:
======
    from acrossmedia.shared.core.exceptions import ForbiddenError, ValidationError

    raise ForbiddenError("Superadmin accounts cannot be modified")

    raise ValidationError(
        "Registration failed",
        details={"fields": {"email": "Email already registered"}},
    )

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": {
            "code": "FORBIDDEN",
            "message": "Superadmin accounts cannot be modified",
            "details": {}
        }
    }
"""

from typing import Any, Optional


class AcrossMediaException(Exception):
    """
    Base exception for all AcrossMedia application errors.

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
# AUTHENTICATION & AUTHORIZATION ERRORS (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(AcrossMediaException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when:
    - Missing or invalid credentials
    - Token expired or malformed
    - Account still pending approval
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


class AuthorizationError(AcrossMediaException):
    """
    Authorization failed error (403 Forbidden).

    Raised when the caller is authenticated but lacks permission.
    """

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
        error_code: str = "AUTHORIZATION_ERROR",
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code=error_code,
            details=details,
        )


class ForbiddenError(AuthorizationError):
    """
    The operation is not permitted on this target.

    Raised by the approval workflow for the protected superadmin tier
    and for disallowed role/status transitions, regardless of caller.
    """

    def __init__(
        self,
        message: str = "Operation not permitted",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details, error_code="FORBIDDEN")


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(AcrossMediaException):
    """
    Resource not found error (404 Not Found).

    Example:
        raise NotFoundError("Account", account_id)
        # Message: "Account with id 'abc-123' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        message: Optional[str] = None,
    ) -> None:
        if message is None:
            message = f"{resource} not found"
            if resource_id:
                message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class AccountNotFoundError(NotFoundError):
    """Account not found error."""

    def __init__(self, account_id: str) -> None:
        super().__init__(resource="Account", resource_id=account_id)


class ContentNotFoundError(NotFoundError):
    """Project or video not found error."""

    def __init__(self, content_type: str, content_id: str) -> None:
        super().__init__(resource=content_type.capitalize(), resource_id=content_id)


class ApprovalTokenNotFoundError(NotFoundError):
    """
    Approval token is unknown, already consumed, or never existed.

    The message is deliberately generic so the approval link does not
    reveal which accounts exist.
    """

    def __init__(self) -> None:
        super().__init__(
            resource="Approval token",
            message="Approval link is invalid or has expired",
        )


class VideoNotFoundError(NotFoundError):
    """The metadata provider returned nothing usable for this video."""

    def __init__(self, video_id: str, reason: Optional[str] = None) -> None:
        details = {"reason": reason} if reason else None
        super().__init__(resource="Video", resource_id=video_id, details=details)
        self.video_id = video_id


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION ERRORS (400)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(AcrossMediaException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation. Field-level messages go
    under details["fields"].
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


class InvalidVideoUrlError(ValidationError):
    """No video id could be extracted from the source URL."""

    def __init__(self, url: str) -> None:
        super().__init__(
            message="Could not extract a video id from URL",
            details={"url": url},
        )
        self.url = url


# ═══════════════════════════════════════════════════════════════════════════════
# INFRASTRUCTURE ERRORS (500, 502, 503)
# ═══════════════════════════════════════════════════════════════════════════════


class StorageError(AcrossMediaException):
    """
    Persistence layer failure (500).

    Not locally recoverable; no retry is attempted.
    """

    def __init__(
        self,
        message: str = "Storage operation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=500,
            error_code="STORAGE_ERROR",
            details=details,
        )


class NotificationError(AcrossMediaException):
    """
    Email delivery failed (502).

    Caught and logged by the notification dispatcher; never propagated
    past the operation that triggered it.
    """

    def __init__(
        self,
        recipient: str,
        message: str = "Notification delivery failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        extra_details = details or {}
        extra_details["recipient"] = recipient
        super().__init__(
            message=message,
            status_code=502,
            error_code="NOTIFICATION_ERROR",
            details=extra_details,
        )
        self.recipient = recipient


class ServiceUnavailableError(AcrossMediaException):
    """
    Service temporarily unavailable error (503).
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


class ExternalServiceError(ServiceUnavailableError):
    """
    External service error.

    More specific error for external API failures.
    """

    def __init__(
        self,
        service_name: str,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        msg = message or f"{service_name} service error"
        extra_details = details or {}
        extra_details["service"] = service_name
        super().__init__(message=msg, details=extra_details)
