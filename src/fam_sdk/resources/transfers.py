"""Transfers resource for FAM SDK."""
from __future__ import annotations

from typing import Any

from .base import BaseResource


class TransfersResource(BaseResource):
    """Wallet-to-wallet transfers."""

    def __init__(self, client) -> None:
        super().__init__(client, "/api/v1/mangopay/transfers")

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self._post("", data)

    async def create_sca(self, data: dict[str, Any]) -> dict[str, Any]:
        """Create a transfer that requires strong customer authentication."""
        return await self._post("sca", data)

    async def get(self, transfer_id: str) -> dict[str, Any]:
        return await self._get(transfer_id)

    async def get_sca(self, transfer_id: str) -> dict[str, Any]:
        return await self._get(["sca", transfer_id])

    async def refund(self, transfer_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return await self._post(f"{transfer_id}/refund", data)
