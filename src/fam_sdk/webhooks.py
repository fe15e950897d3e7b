"""
Webhook verification for MangoPay and FAM events.

Signatures are ``hex(HMAC_SHA256(secret, raw_payload))``. Verification is
opt-in: a handler built without a signing secret accepts every payload.

Example usage:
    ```python
    from fam_sdk import Webhooks, WebhookSignatureError

    webhooks = Webhooks(signing_secret=os.environ["FAM_WEBHOOK_SECRET"])

    try:
        event = webhooks.construct_event(request.body, request.headers.get("X-Fam-Signature"))
    except WebhookSignatureError:
        return Response(status=400)

    if webhooks.is_event_type(event, FamEventType.SUBSCRIPTION_PAYMENT_FAILED):
        ...
    ```
"""
from __future__ import annotations

import hashlib
import hmac
import json
import logging
import math
import time
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from .models.errors import WebhookSignatureError
from .models.webhook import FAM_EVENT_PREFIX, FamEventType, MangopayEventType, WebhookEvent

logger = logging.getLogger(__name__)

DEFAULT_TIMESTAMP_TOLERANCE = 300  # 5 minutes

Payload = Union[str, bytes]
Decoded = Union[dict[str, Any], list[Any]]


def is_mangopay_event(event_type: str) -> bool:
    """True for events forwarded from MangoPay."""
    return not event_type.startswith(FAM_EVENT_PREFIX)


def is_fam_event(event_type: str) -> bool:
    """True for events emitted by the FAM API itself."""
    return event_type.startswith(FAM_EVENT_PREFIX)


def _to_bytes(payload: Payload) -> bytes:
    if isinstance(payload, bytes):
        return payload
    return payload.encode("utf-8")


class Webhooks:
    """Verifies, decodes and classifies inbound webhooks.

    Args:
        signing_secret: Shared secret; verification is skipped when unset
        timestamp_tolerance: Accepted clock distance in seconds (default: 300)
    """

    def __init__(
        self,
        signing_secret: Optional[str] = None,
        timestamp_tolerance: int = DEFAULT_TIMESTAMP_TOLERANCE,
    ):
        self._signing_secret = signing_secret
        self._timestamp_tolerance = timestamp_tolerance

    @property
    def timestamp_tolerance(self) -> int:
        return self._timestamp_tolerance

    @property
    def has_signing_secret(self) -> bool:
        return self._signing_secret is not None

    def compute_signature(self, payload: Payload) -> str:
        """Hex HMAC-SHA256 of ``payload`` under the configured secret."""
        if self._signing_secret is None:
            raise WebhookSignatureError("Signing secret not configured")
        return hmac.new(
            self._signing_secret.encode("utf-8"),
            _to_bytes(payload),
            hashlib.sha256,
        ).hexdigest()

    def verify(self, payload: Payload, signature: Optional[str]) -> bool:
        """
        Verify a webhook signature.

        Args:
            payload: Raw request body, exactly as received
            signature: Hex signature sent alongside the payload

        Returns:
            True if the signature matches (or no secret is configured),
            False otherwise

        Raises:
            WebhookSignatureError: If a secret is configured and the
                signature is missing, or the signature cannot be checked
        """
        if self._signing_secret is None:
            return True

        if not signature:
            logger.warning("Rejected webhook without signature")
            raise WebhookSignatureError("Missing webhook signature")

        try:
            expected = self.compute_signature(payload)
            if len(signature) != len(expected):
                return False
            # Constant-time comparison
            return hmac.compare_digest(signature.encode("utf-8"), expected.encode("utf-8"))
        except (TypeError, ValueError) as e:
            raise WebhookSignatureError("Invalid webhook signature") from e

    def verify_with_timestamp(
        self,
        payload: Payload,
        signature: Optional[str],
        timestamp: Union[int, float],
    ) -> bool:
        """
        Verify a webhook signature and reject replayed deliveries.

        Timestamps further than ``timestamp_tolerance`` seconds from now, in
        either direction, are rejected. A distance equal to the tolerance is
        accepted.

        Raises:
            WebhookSignatureError: If the timestamp is outside the window,
                or for any reason ``verify`` raises
        """
        try:
            age = abs(math.floor(time.time()) - timestamp)
        except TypeError as e:
            raise WebhookSignatureError("Invalid webhook timestamp") from e
        if not math.isfinite(age):
            raise WebhookSignatureError("Invalid webhook timestamp")
        if age > self._timestamp_tolerance:
            logger.warning("Rejected webhook with stale timestamp (%s seconds)", age)
            raise WebhookSignatureError(
                f"Webhook timestamp outside tolerance ({age} seconds)"
            )
        return self.verify(payload, signature)

    def parse(self, payload: Any) -> Decoded:
        """
        Decode a webhook payload.

        Args:
            payload: JSON text (``str`` or ``bytes``) or an already decoded
                mapping or list

        Returns:
            The decoded object or array. Scalars, including JSON text that
            decodes to one, are not events and are rejected.

        Raises:
            WebhookSignatureError: If the payload is not valid JSON or is not
                structured
        """
        if isinstance(payload, (str, bytes)):
            try:
                event = json.loads(payload)
            except ValueError as e:
                raise WebhookSignatureError("Invalid webhook payload: not valid JSON") from e
            if not isinstance(event, (dict, list)):
                raise WebhookSignatureError("Invalid webhook payload: expected a JSON object or array")
            return event

        if isinstance(payload, Mapping):
            return dict(payload)
        if isinstance(payload, (list, tuple)):
            return list(payload)

        raise WebhookSignatureError("Invalid webhook payload: expected object, array or JSON string")

    def parse_event(self, payload: Any) -> WebhookEvent:
        """Decode a payload into a typed ``WebhookEvent``."""
        event = self.parse(payload)
        try:
            return WebhookEvent.model_validate(event)
        except PydanticValidationError as e:
            raise WebhookSignatureError(f"Invalid webhook payload: {e.error_count()} invalid field(s)") from e

    def construct_event(
        self,
        payload: Payload,
        signature: Optional[str],
        timestamp: Optional[Union[int, float]] = None,
    ) -> Decoded:
        """
        Verify and decode a webhook in one step.

        This is the recommended entry point: the payload is only decoded
        once its signature (and, when given, its timestamp) checks out.

        Raises:
            WebhookSignatureError: If verification fails or the payload is
                malformed
        """
        if timestamp is None:
            valid = self.verify(payload, signature)
        else:
            valid = self.verify_with_timestamp(payload, signature, timestamp)
        if not valid:
            logger.warning("Rejected webhook with invalid signature")
            raise WebhookSignatureError("Invalid webhook signature")
        return self.parse(payload)

    @staticmethod
    def is_event_type(
        event: Mapping[str, Any],
        event_type: Union[str, MangopayEventType, FamEventType],
    ) -> bool:
        """Check the event's ``EventType`` discriminator."""
        if isinstance(event_type, (MangopayEventType, FamEventType)):
            event_type = event_type.value
        return event.get("EventType") == event_type


__all__ = [
    "DEFAULT_TIMESTAMP_TOLERANCE",
    "Webhooks",
    "is_fam_event",
    "is_mangopay_event",
]
