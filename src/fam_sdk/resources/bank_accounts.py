"""Bank accounts resource for FAM SDK."""
from __future__ import annotations

from typing import Any, Optional

from .base import BaseResource, pagination_params


class BankAccountsResource(BaseResource):
    """Bank accounts of a single user.

    One ``create_*`` method per account type, since MangoPay validates a
    different set of fields for each.
    """

    def __init__(self, client, user_id: str) -> None:
        super().__init__(client, f"/api/v1/mangopay/users/{user_id}/bankaccounts")
        self.user_id = user_id

    async def create_iban(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self._post("iban", data)

    async def create_gb(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self._post("gb", data)

    async def create_us(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self._post("us", data)

    async def create_ca(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self._post("ca", data)

    async def create_other(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self._post("other", data)

    async def get(self, account_id: str) -> dict[str, Any]:
        return await self._get(account_id)

    async def list(
        self,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> dict[str, Any]:
        return await self._get(params=pagination_params(page, per_page))

    async def deactivate(self, account_id: str) -> dict[str, Any]:
        """Deactivate a bank account. MangoPay cannot reactivate it."""
        return await self._put(account_id, {"Active": False})
