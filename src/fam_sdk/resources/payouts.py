"""Payouts resource for FAM SDK."""
from __future__ import annotations

from typing import Any

from .base import BaseResource


class PayoutsResource(BaseResource):
    """Bank wire payouts from a wallet."""

    def __init__(self, client) -> None:
        super().__init__(client, "/api/v1/mangopay/payouts")

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self._post("", data)

    async def get(self, payout_id: str) -> dict[str, Any]:
        return await self._get(payout_id)
