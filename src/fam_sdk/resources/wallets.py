"""Wallets resource for FAM SDK."""
from __future__ import annotations

from typing import Any, Optional

from .base import BaseResource, pagination_params


class WalletsResource(BaseResource):
    """Resource for wallet operations."""

    def __init__(self, client) -> None:
        super().__init__(client, "/api/v1/mangopay/wallets")

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Create a wallet.

        Args:
            data: ``Owners``, ``Description`` and ``Currency``

        Returns:
            The created wallet
        """
        return await self._post("", data)

    async def get(self, wallet_id: str) -> dict[str, Any]:
        return await self._get(wallet_id)

    async def update(self, wallet_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return await self._put(wallet_id, data)

    async def get_transactions(
        self,
        wallet_id: str,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        sort: Optional[str] = None,
        order: Optional[str] = None,
    ) -> dict[str, Any]:
        """List transactions on a wallet."""
        return await self._get(
            [wallet_id, "transactions"],
            params=pagination_params(page, per_page, sort, order),
        )
