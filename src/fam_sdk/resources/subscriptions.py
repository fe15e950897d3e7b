"""Recurring subscriptions resource for FAM SDK."""
from __future__ import annotations

from typing import Any, Optional, Sequence

from .base import BaseResource


class SubscriptionsResource(BaseResource):
    """FAM recurring subscriptions, layered on MangoPay recurring pay-ins."""

    def __init__(self, client) -> None:
        super().__init__(client, "/api/v1/mangopay/recurring-subscriptions")

    async def register(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Register a subscription for an existing recurring registration.

        Args:
            data: Registration ID, user, amount and billing frequency

        Returns:
            The registered subscription
        """
        return await self._post("", data)

    async def get(self, subscription_id: str) -> dict[str, Any]:
        """Get a subscription with its payment history."""
        return await self._get(subscription_id)

    async def list(
        self,
        user_id: Optional[str] = None,
        status: Optional[str] = None,
        frequency: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> dict[str, Any]:
        return await self._get(
            params={
                "userId": user_id,
                "status": status,
                "frequency": frequency,
                "page": page,
                "per_page": per_page,
            }
        )

    async def update(self, subscription_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return await self._put(subscription_id, data)

    async def sync(self, subscription_id: str) -> dict[str, Any]:
        """Refresh the subscription from its MangoPay registration."""
        return await self._post(f"{subscription_id}/sync")

    async def cancel(self, subscription_id: str) -> dict[str, Any]:
        """Cancel at the end of the current billing period."""
        return await self._post(f"{subscription_id}/cancel")

    async def end(self, subscription_id: str) -> dict[str, Any]:
        """End immediately, ending the MangoPay registration too."""
        return await self._post(f"{subscription_id}/end")

    async def enable(self, subscription_id: str) -> dict[str, Any]:
        return await self.update(subscription_id, {"processingEnabled": True})

    async def disable(self, subscription_id: str) -> dict[str, Any]:
        return await self.update(subscription_id, {"processingEnabled": False})

    async def enable_webhooks(self, subscription_id: str) -> dict[str, Any]:
        return await self.update(subscription_id, {"webhookNotificationEnabled": True})

    async def disable_webhooks(self, subscription_id: str) -> dict[str, Any]:
        return await self.update(subscription_id, {"webhookNotificationEnabled": False})

    async def list_by_mangopay_user(
        self,
        mangopay_user_id: str,
        subscription_type: Optional[str] = None,
        active_only: Optional[bool] = None,
    ) -> dict[str, Any]:
        """
        List the subscriptions of a MangoPay user.

        Args:
            mangopay_user_id: The MangoPay user ID
            subscription_type: Only subscriptions of this type
            active_only: Only active subscriptions

        Returns:
            ``{"success": ..., "subscriptions": [...]}``
        """
        params: dict[str, Any] = {}
        if subscription_type:
            params["subscriptionType"] = subscription_type
        if active_only is not None:
            params["activeOnly"] = active_only
        return await self._get(f"user/{mangopay_user_id}", params=params)

    async def update_by_registration_id(
        self,
        registration_id: str,
        data: dict[str, Any],
    ) -> dict[str, Any]:
        """Update a subscription known only by its MangoPay registration ID."""
        return await self._put(f"by-registration/{registration_id}", data)

    async def link_products(
        self,
        subscription_id: str,
        product_ids: Optional[Sequence[str]] = None,
        product_types: Optional[Sequence[str]] = None,
    ) -> dict[str, Any]:
        """
        Link products to a subscription.

        Product IDs are preferred; product types are looked up server-side.
        """
        data: dict[str, Any] = {}
        if product_ids is not None:
            data["productIds"] = list(product_ids)
        if product_types is not None:
            data["productTypes"] = list(product_types)
        return await self._post(f"{subscription_id}/link-products", data)
