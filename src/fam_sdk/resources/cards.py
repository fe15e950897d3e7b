"""Card, card registration and preauthorization resources for FAM SDK."""
from __future__ import annotations

from typing import Any, Optional

from .base import BaseResource, pagination_params


class CardRegistrationsResource(BaseResource):
    """Card registration flow (tokenization of a new card)."""

    def __init__(self, client) -> None:
        super().__init__(client, "/api/v1/mangopay/cardRegistrations")

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self._post("", data)

    async def get(self, registration_id: str) -> dict[str, Any]:
        return await self._get(registration_id)

    async def update(self, registration_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Complete a registration with the tokenizer's ``RegistrationData``."""
        return await self._put(registration_id, data)


class CardsResource(BaseResource):
    """Registered cards."""

    def __init__(self, client) -> None:
        super().__init__(client, "/api/v1/mangopay/cards")

    async def get(self, card_id: str) -> dict[str, Any]:
        return await self._get(card_id)

    async def deactivate(self, card_id: str) -> dict[str, Any]:
        """Deactivate a card. This cannot be undone."""
        # Upstream endpoint spelling
        return await self._post(f"{card_id}/desactivate", {"Active": False})

    async def get_preauthorizations(
        self,
        card_id: str,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> dict[str, Any]:
        return await self._get(
            [card_id, "preauthorizations"],
            params=pagination_params(page, per_page),
        )


class PreauthorizationsResource(BaseResource):
    """Card preauthorizations (holds)."""

    def __init__(self, client) -> None:
        super().__init__(client, "/api/v1/mangopay/preauthorizations")

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self._post("", data)

    async def get(self, preauthorization_id: str) -> dict[str, Any]:
        return await self._get(preauthorization_id)

    async def update(self, preauthorization_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return await self._put(preauthorization_id, data)

    async def cancel(self, preauthorization_id: str) -> dict[str, Any]:
        """Release the held amount."""
        return await self.update(preauthorization_id, {"PaymentStatus": "CANCELED"})
