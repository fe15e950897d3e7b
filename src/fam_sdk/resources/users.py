"""Users resource for FAM SDK."""
from __future__ import annotations

from typing import Any, Optional

from .base import BaseResource, pagination_params


class UsersResource(BaseResource):
    """Natural and legal MangoPay users."""

    def __init__(self, client) -> None:
        super().__init__(client, "/api/v1/mangopay/users")

    async def create_natural(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Create a natural user.

        Args:
            data: User fields (``Email``, ``FirstName``, ``LastName``, ...)

        Returns:
            The created user
        """
        return await self._post("natural", data)

    async def create_legal(self, data: dict[str, Any]) -> dict[str, Any]:
        """Create a legal user (company, organization, soletrader)."""
        return await self._post("legal", data)

    async def get(self, user_id: str) -> dict[str, Any]:
        """Get a user of either type."""
        return await self._get(user_id)

    async def get_natural(self, user_id: str) -> dict[str, Any]:
        return await self._get(["natural", user_id])

    async def get_legal(self, user_id: str) -> dict[str, Any]:
        return await self._get(["legal", user_id])

    async def update_natural(self, user_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return await self._put(f"natural/{user_id}", data)

    async def update_legal(self, user_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return await self._put(f"legal/{user_id}", data)

    async def get_wallets(
        self,
        user_id: str,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> dict[str, Any]:
        """List the user's wallets."""
        return await self._get([user_id, "wallets"], params=pagination_params(page, per_page))

    async def get_cards(
        self,
        user_id: str,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> dict[str, Any]:
        """List the user's registered cards."""
        return await self._get([user_id, "cards"], params=pagination_params(page, per_page))

    async def get_bank_accounts(
        self,
        user_id: str,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> dict[str, Any]:
        """List the user's bank accounts."""
        return await self._get([user_id, "bankaccounts"], params=pagination_params(page, per_page))

    async def get_transactions(
        self,
        user_id: str,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> dict[str, Any]:
        """List the user's transactions."""
        return await self._get([user_id, "transactions"], params=pagination_params(page, per_page))
