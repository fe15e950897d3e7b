"""Products resource for FAM SDK."""
from __future__ import annotations

from typing import Any, Optional
from urllib.parse import quote

from ..models.errors import NotFoundError
from .base import BaseResource


class ProductsResource(BaseResource):
    """Product catalog. Products can be addressed by ID, external ID or name."""

    def __init__(self, client) -> None:
        super().__init__(client, "/api/v1/mangopay/products")

    async def list(
        self,
        is_active: Optional[bool] = None,
        external_id: Optional[str] = None,
        environment: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> dict[str, Any]:
        return await self._get(
            params={
                "isActive": is_active,
                "externalId": external_id,
                "environment": environment,
                "page": page,
                "per_page": per_page,
            }
        )

    async def get(self, product_id: str) -> dict[str, Any]:
        return await self._get(product_id)

    async def get_by_external_id(self, external_id: str) -> dict[str, Any]:
        return await self._get(f"external/{external_id}")

    async def get_by_name(self, name: str) -> dict[str, Any]:
        return await self._get(f"name/{quote(name, safe='')}")

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self._post("", data)

    async def update(self, product_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return await self._put(product_id, data)

    async def upsert_by_external_id(self, external_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Create or update the product with this external ID."""
        return await self._put(f"external/{external_id}", data)

    async def upsert_by_name(self, name: str, data: dict[str, Any]) -> dict[str, Any]:
        """Create or update the product with this name."""
        return await self._put(f"name/{quote(name, safe='')}", data)

    async def remove(self, product_id: str) -> dict[str, Any]:
        return await self._delete(product_id)

    async def activate(self, product_id: str) -> dict[str, Any]:
        return await self.update(product_id, {"isActive": True})

    async def deactivate(self, product_id: str) -> dict[str, Any]:
        return await self.update(product_id, {"isActive": False})

    async def find_by_external_id(self, external_id: str) -> Optional[dict[str, Any]]:
        """Like ``get_by_external_id``, but returns None for unknown products."""
        try:
            return await self.get_by_external_id(external_id)
        except NotFoundError:
            return None

    async def find_by_name(self, name: str) -> Optional[dict[str, Any]]:
        """Like ``get_by_name``, but returns None for unknown products."""
        try:
            return await self.get_by_name(name)
        except NotFoundError:
            return None
