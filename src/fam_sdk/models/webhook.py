"""Webhook models for FAM SDK."""
from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import Field

from .base import FamModel

FAM_EVENT_PREFIX = "FAM_"


class MangopayEventType(str, Enum):
    """Event types forwarded unchanged from MangoPay."""

    # PayIn
    PAYIN_NORMAL_CREATED = "PAYIN_NORMAL_CREATED"
    PAYIN_NORMAL_SUCCEEDED = "PAYIN_NORMAL_SUCCEEDED"
    PAYIN_NORMAL_FAILED = "PAYIN_NORMAL_FAILED"
    PAYIN_REFUND_CREATED = "PAYIN_REFUND_CREATED"
    PAYIN_REFUND_SUCCEEDED = "PAYIN_REFUND_SUCCEEDED"
    PAYIN_REFUND_FAILED = "PAYIN_REFUND_FAILED"
    # PayOut
    PAYOUT_NORMAL_CREATED = "PAYOUT_NORMAL_CREATED"
    PAYOUT_NORMAL_SUCCEEDED = "PAYOUT_NORMAL_SUCCEEDED"
    PAYOUT_NORMAL_FAILED = "PAYOUT_NORMAL_FAILED"
    PAYOUT_REFUND_CREATED = "PAYOUT_REFUND_CREATED"
    PAYOUT_REFUND_SUCCEEDED = "PAYOUT_REFUND_SUCCEEDED"
    PAYOUT_REFUND_FAILED = "PAYOUT_REFUND_FAILED"
    # Transfer
    TRANSFER_NORMAL_CREATED = "TRANSFER_NORMAL_CREATED"
    TRANSFER_NORMAL_SUCCEEDED = "TRANSFER_NORMAL_SUCCEEDED"
    TRANSFER_NORMAL_FAILED = "TRANSFER_NORMAL_FAILED"
    TRANSFER_REFUND_CREATED = "TRANSFER_REFUND_CREATED"
    TRANSFER_REFUND_SUCCEEDED = "TRANSFER_REFUND_SUCCEEDED"
    TRANSFER_REFUND_FAILED = "TRANSFER_REFUND_FAILED"
    # KYC
    KYC_CREATED = "KYC_CREATED"
    KYC_VALIDATION_ASKED = "KYC_VALIDATION_ASKED"
    KYC_SUCCEEDED = "KYC_SUCCEEDED"
    KYC_FAILED = "KYC_FAILED"
    KYC_OUTDATED = "KYC_OUTDATED"
    # UBO
    UBO_DECLARATION_CREATED = "UBO_DECLARATION_CREATED"
    UBO_DECLARATION_VALIDATION_ASKED = "UBO_DECLARATION_VALIDATION_ASKED"
    UBO_DECLARATION_VALIDATED = "UBO_DECLARATION_VALIDATED"
    UBO_DECLARATION_REFUSED = "UBO_DECLARATION_REFUSED"
    UBO_DECLARATION_INCOMPLETE = "UBO_DECLARATION_INCOMPLETE"
    # Cards
    PREAUTHORIZATION_CREATED = "PREAUTHORIZATION_CREATED"
    PREAUTHORIZATION_SUCCEEDED = "PREAUTHORIZATION_SUCCEEDED"
    PREAUTHORIZATION_FAILED = "PREAUTHORIZATION_FAILED"
    CARD_VALIDATION_CREATED = "CARD_VALIDATION_CREATED"
    CARD_VALIDATION_SUCCEEDED = "CARD_VALIDATION_SUCCEEDED"
    CARD_VALIDATION_FAILED = "CARD_VALIDATION_FAILED"
    # Users
    USER_KYC_REGULAR = "USER_KYC_REGULAR"
    USER_KYC_LIGHT = "USER_KYC_LIGHT"
    USER_INFLOWS_BLOCKED = "USER_INFLOWS_BLOCKED"
    USER_INFLOWS_UNBLOCKED = "USER_INFLOWS_UNBLOCKED"
    USER_OUTFLOWS_BLOCKED = "USER_OUTFLOWS_BLOCKED"
    USER_OUTFLOWS_UNBLOCKED = "USER_OUTFLOWS_UNBLOCKED"
    # Recurring registrations
    RECURRING_REGISTRATION_CREATED = "RECURRING_REGISTRATION_CREATED"
    RECURRING_REGISTRATION_AUTH_NEEDED = "RECURRING_REGISTRATION_AUTH_NEEDED"
    RECURRING_REGISTRATION_IN_PROGRESS = "RECURRING_REGISTRATION_IN_PROGRESS"
    RECURRING_REGISTRATION_ENDED = "RECURRING_REGISTRATION_ENDED"


class FamEventType(str, Enum):
    """Event types emitted by the FAM API itself."""

    SUBSCRIPTION_CREATED = "FAM_SUBSCRIPTION_CREATED"
    SUBSCRIPTION_UPDATED = "FAM_SUBSCRIPTION_UPDATED"
    SUBSCRIPTION_CANCELLED = "FAM_SUBSCRIPTION_CANCELLED"
    SUBSCRIPTION_PAYMENT_SCHEDULED = "FAM_SUBSCRIPTION_PAYMENT_SCHEDULED"
    SUBSCRIPTION_PAYMENT_SUCCEEDED = "FAM_SUBSCRIPTION_PAYMENT_SUCCEEDED"
    SUBSCRIPTION_PAYMENT_FAILED = "FAM_SUBSCRIPTION_PAYMENT_FAILED"


class WebhookEvent(FamModel):
    """A webhook event.

    ``data`` is only sent with FAM events.
    """

    event_type: str = Field(alias="EventType")
    resource_id: str = Field(alias="RessourceId")
    date: int = Field(alias="Date")
    data: Optional[dict[str, Any]] = Field(default=None, alias="Data")

    @property
    def is_fam_event(self) -> bool:
        return self.event_type.startswith(FAM_EVENT_PREFIX)
