"""Pay-ins resource for FAM SDK."""
from __future__ import annotations

from typing import Any

from .base import BaseResource


class PayinsResource(BaseResource):
    """Card pay-ins, refunds and recurring pay-in registrations."""

    def __init__(self, client) -> None:
        super().__init__(client, "/api/v1/mangopay/payins")

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        """Create a direct card pay-in."""
        return await self._post("", data)

    async def get(self, payin_id: str) -> dict[str, Any]:
        return await self._get(payin_id)

    async def refund(self, payin_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Refund a pay-in, fully or partially."""
        return await self._post(f"{payin_id}/refund", data)

    async def create_recurring_payment(self, data: dict[str, Any]) -> dict[str, Any]:
        """Register a recurring pay-in."""
        return await self._post("createRecurringPayment", data)

    async def view_recurring_payment(self, registration_id: str) -> dict[str, Any]:
        return await self._get(["viewRecurringPayment", registration_id])

    async def create_recurring_cit(self, data: dict[str, Any]) -> dict[str, Any]:
        """First, customer-initiated pay-in of a recurring registration."""
        return await self._post("createRecurringPayInRegistrationCIT", data)

    async def create_recurring_mit(self, data: dict[str, Any]) -> dict[str, Any]:
        """Subsequent, merchant-initiated pay-in of a recurring registration."""
        return await self._post("createRecurringPayInRegistrationMIT", data)

    async def update_recurring_payment(
        self,
        registration_id: str,
        data: dict[str, Any],
    ) -> dict[str, Any]:
        return await self._put(f"updateRecurringPayin/{registration_id}", data)

    async def end_recurring_payment(self, registration_id: str) -> dict[str, Any]:
        """End a recurring registration; no further pay-ins are taken."""
        return await self.update_recurring_payment(registration_id, {"Status": "ENDED"})
