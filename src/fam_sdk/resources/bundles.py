"""Bundles resource for FAM SDK."""
from __future__ import annotations

from typing import Any, Optional, Sequence

from .base import BaseResource


class BundlesResource(BaseResource):
    """Bundles group several subscriptions into a single payment."""

    def __init__(self, client) -> None:
        super().__init__(client, "/api/v1/mangopay/bundles")

    async def list(
        self,
        mangopay_user_id: Optional[str] = None,
        is_active: Optional[bool] = None,
        code: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> dict[str, Any]:
        return await self._get(
            params={
                "mangopayUserId": mangopay_user_id,
                "isActive": is_active,
                "code": code,
                "page": page,
                "per_page": per_page,
            }
        )

    async def get(self, bundle_id: str) -> dict[str, Any]:
        """Get a bundle with its subscriptions."""
        return await self._get(bundle_id)

    async def get_by_code(self, code: str) -> dict[str, Any]:
        return await self._get(f"code/{code}")

    async def validate(
        self,
        subscription_ids: Sequence[str],
        mangopay_user_id: str,
    ) -> dict[str, Any]:
        """
        Check whether the subscriptions can be bundled for a user.

        Returns:
            Validation result, including subscriptions that would be
            disabled by the bundle
        """
        return await self._post(
            "validate",
            {"subscriptionIds": list(subscription_ids), "mangopayUserId": mangopay_user_id},
        )

    async def get_price(
        self,
        subscription_ids: Sequence[str],
        mangopay_user_id: Optional[str] = None,
        billing_period: Optional[str] = None,
    ) -> dict[str, Any]:
        """Price of a bundle, prorated for the user's current subscriptions."""
        data: dict[str, Any] = {"subscriptionIds": list(subscription_ids)}
        if mangopay_user_id is not None:
            data["mangopayUserId"] = mangopay_user_id
        if billing_period is not None:
            data["billingPeriod"] = billing_period
        return await self._post("price", data)

    async def create_from_subscriptions(self, data: dict[str, Any]) -> dict[str, Any]:
        """Group existing subscriptions into a bundle."""
        return await self._post("", data)

    async def subscribe(self, data: dict[str, Any]) -> dict[str, Any]:
        """Create new subscriptions and bundle them, for new users."""
        return await self._post("subscribe", data)

    async def update(self, bundle_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return await self._put(bundle_id, data)

    async def add_subscriptions(
        self,
        bundle_id: str,
        subscription_ids: Sequence[str],
        new_amount: Optional[int] = None,
    ) -> dict[str, Any]:
        data: dict[str, Any] = {"addSubscriptionIds": list(subscription_ids)}
        if new_amount is not None:
            data["amount"] = new_amount
        return await self.update(bundle_id, data)

    async def remove_subscriptions(
        self,
        bundle_id: str,
        subscription_ids: Sequence[str],
        new_amount: Optional[int] = None,
    ) -> dict[str, Any]:
        data: dict[str, Any] = {"removeSubscriptionIds": list(subscription_ids)}
        if new_amount is not None:
            data["amount"] = new_amount
        return await self.update(bundle_id, data)

    async def dissolve(self, bundle_id: str) -> dict[str, Any]:
        """Remove the bundle and re-enable its individual subscriptions."""
        return await self._delete(bundle_id)

    async def list_by_mangopay_user(
        self,
        mangopay_user_id: str,
        is_active: Optional[bool] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> dict[str, Any]:
        return await self.list(
            mangopay_user_id=mangopay_user_id,
            is_active=is_active,
            page=page,
            per_page=per_page,
        )

    async def activate(self, bundle_id: str) -> dict[str, Any]:
        return await self.update(bundle_id, {"isActive": True})

    async def deactivate(self, bundle_id: str) -> dict[str, Any]:
        return await self.update(bundle_id, {"isActive": False})
