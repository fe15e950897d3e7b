"""SCA recipients resource for FAM SDK."""
from __future__ import annotations

from typing import Any, Optional

from .base import BaseResource, pagination_params


class ScaRecipientsResource(BaseResource):
    """Payout recipients of a single user."""

    def __init__(self, client, user_id: str) -> None:
        super().__init__(client, f"/api/v1/mangopay/users/{user_id}/recipients")
        self.user_id = user_id

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self._post("", data)

    async def get(self, recipient_id: str) -> dict[str, Any]:
        return await self._get(recipient_id)

    async def list(
        self,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> dict[str, Any]:
        return await self._get(params=pagination_params(page, per_page))

    async def get_schema(
        self,
        payout_method_type: str,
        recipient_type: str,
        currency: str,
        country: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Get the fields required to create a recipient.

        Args:
            payout_method_type: e.g. ``LocalBankTransfer`` or ``InternationalBankTransfer``
            recipient_type: ``INDIVIDUAL`` or ``BUSINESS``
            currency: Payout currency
            country: Destination country, when the schema depends on it

        Returns:
            The recipient schema
        """
        return await self._get(
            "schema",
            params={
                "PayoutMethodType": payout_method_type,
                "RecipientType": recipient_type,
                "Currency": currency,
                "Country": country,
            },
        )
