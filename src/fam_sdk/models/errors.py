"""Error models for FAM SDK."""
from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Stable discriminator carried by every SDK error."""

    FAM_ERROR = "FamError"
    API_ERROR = "ApiError"
    AUTHENTICATION_ERROR = "AuthenticationError"
    AUTHORIZATION_ERROR = "AuthorizationError"
    NOT_FOUND = "NotFoundError"
    VALIDATION_ERROR = "ValidationError"
    RATE_LIMIT_ERROR = "RateLimitError"
    NETWORK_ERROR = "NetworkError"
    TIMEOUT_ERROR = "TimeoutError"
    WEBHOOK_SIGNATURE_ERROR = "WebhookSignatureError"


class FamError(Exception):
    """Base exception for FAM SDK."""

    kind: ErrorKind = ErrorKind.FAM_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.code: Optional[str] = None
        self.status_code: Optional[int] = None
        self.details: Any = None

    @property
    def name(self) -> str:
        return self.kind.value

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "kind": self.kind.value,
                "code": self.code,
                "message": self.message,
                "status_code": self.status_code,
                "details": self.details,
            }
        }


class ApiError(FamError):
    """Error from API response."""

    kind = ErrorKind.API_ERROR

    def __init__(
        self,
        message: str,
        status_code: int,
        code: Optional[str] = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.details = details


class AuthenticationError(ApiError):
    """Authentication error (401)."""

    kind = ErrorKind.AUTHENTICATION_ERROR

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, 401, "AUTHENTICATION_ERROR")


class AuthorizationError(ApiError):
    """Authorization error (403)."""

    kind = ErrorKind.AUTHORIZATION_ERROR

    def __init__(self, message: str = "Access denied"):
        super().__init__(message, 403, "AUTHORIZATION_ERROR")


class NotFoundError(ApiError):
    """Resource not found error (404)."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, 404, "NOT_FOUND")


class ValidationError(ApiError):
    """Validation error with field-level messages.

    Raised for 422 responses and for 400 responses that carry an
    ``errors`` mapping. ``errors`` maps a field name to its violations.
    """

    kind = ErrorKind.VALIDATION_ERROR

    def __init__(
        self,
        message: str,
        errors: Optional[dict[str, list[str]]] = None,
    ):
        errors = errors if errors is not None else {}
        super().__init__(message, 422, "VALIDATION_ERROR", errors)
        self.errors = errors


class RateLimitError(ApiError):
    """Rate limit exceeded error (429)."""

    kind = ErrorKind.RATE_LIMIT_ERROR

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: Optional[int] = None,
    ):
        super().__init__(message, 429, "RATE_LIMIT_ERROR")
        self.retry_after = retry_after


class NetworkError(FamError):
    """Transport-level failure: the request never produced a response."""

    kind = ErrorKind.NETWORK_ERROR

    def __init__(self, message: str, original_error: Optional[BaseException] = None):
        super().__init__(message)
        self.original_error = original_error


class TimeoutError(NetworkError):  # noqa: A001
    """The request exceeded its timeout and was cancelled."""

    kind = ErrorKind.TIMEOUT_ERROR

    def __init__(
        self,
        message: str = "Request timeout",
        original_error: Optional[BaseException] = None,
    ):
        super().__init__(message, original_error)


class WebhookSignatureError(FamError):
    """Webhook authentication or decoding failure."""

    kind = ErrorKind.WEBHOOK_SIGNATURE_ERROR

    def __init__(self, message: str = "Invalid webhook signature"):
        super().__init__(message)


def is_retryable(error: BaseException) -> bool:
    """Retry predicate used by the HTTP client.

    Transport failures, timeouts, rate limiting and 5xx responses are
    retried; every other error is final.
    """
    if isinstance(error, (NetworkError, RateLimitError)):
        return True
    if isinstance(error, ApiError) and error.status_code >= 500:
        return True
    return False
