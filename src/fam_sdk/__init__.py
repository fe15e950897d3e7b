"""
FAM Python SDK

An async SDK for the FAM payments API: MangoPay users, wallets and
payments, FAM subscriptions, bundles, products and promotions, and
webhook verification.

Example:
    ```python
    from fam_sdk import FamClient

    async with FamClient(base_url="https://api.fam.example", token="...") as fam:
        subscription = await fam.subscriptions.get("sub_123")
    ```
"""
import logging

from .client import HttpClient, RequestOptions
from .config import FamConfig
from .fam import FamClient
from .models.errors import (
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
from .models.webhook import FamEventType, MangopayEventType, WebhookEvent
from .utils import build_url, format_amount, parse_amount, retry, sleep
from .webhooks import Webhooks, is_fam_event, is_mangopay_event

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Clients
    "FamClient",
    "HttpClient",
    "RequestOptions",
    "FamConfig",
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
    "Webhooks",
    "WebhookEvent",
    "MangopayEventType",
    "FamEventType",
    "is_fam_event",
    "is_mangopay_event",
    # Utilities
    "build_url",
    "retry",
    "sleep",
    "format_amount",
    "parse_amount",
]
