"""UBO declarations resource for FAM SDK."""
from __future__ import annotations

from typing import Any

from .base import BaseResource


class UboResource(BaseResource):
    """Ultimate beneficial owner declarations of a legal user."""

    def __init__(self, client, user_id: str) -> None:
        super().__init__(client, f"/api/v1/mangopay/users/{user_id}/kyc/ubodeclarations")
        self.user_id = user_id

    async def create_declaration(self) -> dict[str, Any]:
        return await self._post()

    async def get_declaration(self, declaration_id: str) -> dict[str, Any]:
        return await self._get(declaration_id)

    async def create_ubo(self, declaration_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Add a beneficial owner to a declaration."""
        return await self._post(f"{declaration_id}/ubos", data)

    async def update_ubo(
        self,
        declaration_id: str,
        ubo_id: str,
        data: dict[str, Any],
    ) -> dict[str, Any]:
        return await self._put(f"{declaration_id}/ubos/{ubo_id}", data)

    async def submit(self, declaration_id: str) -> dict[str, Any]:
        """Ask MangoPay to validate the declaration."""
        return await self._put(declaration_id, {"Status": "VALIDATION_ASKED"})
