"""FAM SDK models."""

from .base import FamModel
from .errors import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    ErrorKind,
    FamError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    TimeoutError,
    ValidationError,
    WebhookSignatureError,
    is_retryable,
)
from .webhook import FamEventType, MangopayEventType, WebhookEvent

__all__ = [
    "FamModel",
    # Errors
    "ErrorKind",
    "FamError",
    "ApiError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ValidationError",
    "RateLimitError",
    "NetworkError",
    "TimeoutError",
    "WebhookSignatureError",
    "is_retryable",
    # Webhooks
    "MangopayEventType",
    "FamEventType",
    "WebhookEvent",
]
