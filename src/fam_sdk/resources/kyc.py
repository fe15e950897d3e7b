"""KYC documents resource for FAM SDK."""
from __future__ import annotations

from typing import Any, Optional

from .base import BaseResource, pagination_params


class KycResource(BaseResource):
    """KYC documents of a single user.

    A document is created empty, receives one or more pages, then is
    submitted for validation.
    """

    def __init__(self, client, user_id: str) -> None:
        super().__init__(client, f"/api/v1/mangopay/users/{user_id}/kyc/documents")
        self.user_id = user_id

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        """Create a document of the given ``Type``."""
        return await self._post("", data)

    async def get(self, document_id: str) -> dict[str, Any]:
        return await self._get(document_id)

    async def list(
        self,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> dict[str, Any]:
        return await self._get(params=pagination_params(page, per_page))

    async def create_page(self, document_id: str, file_base64: str) -> None:
        """Attach a page (base64-encoded file) to a document."""
        await self._post(f"{document_id}/pages", {"File": file_base64})

    async def submit(self, document_id: str) -> dict[str, Any]:
        """Ask MangoPay to validate the document."""
        return await self._put(document_id, {"Status": "VALIDATION_ASKED"})
