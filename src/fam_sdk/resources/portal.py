"""Customer portal resource for FAM SDK."""
from __future__ import annotations

from typing import Any

from .base import BaseResource

PORTAL_SESSION_HEADER = "X-Portal-Session"


class PortalResource(BaseResource):
    """
    Hosted payment portal sessions.

    A backend creates a session and redirects the user to its URL; the
    portal frontend then authenticates with the session token, sent in the
    ``X-Portal-Session`` header.
    """

    def __init__(self, client) -> None:
        super().__init__(client, "/api/v1/portal")

    async def create_session(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Create a portal session.

        Args:
            data: ``mangopayUserId``, ``returnUrl`` and optionally
                ``expiresInMinutes``

        Returns:
            Session details, including the portal URL
        """
        return await self._post("sessions", data)

    async def validate_session(self, token: str) -> dict[str, Any]:
        """Validate a session token and get the user and website config."""
        return await self._post("session/validate", {"token": token})

    async def get_user(self, session_token: str) -> dict[str, Any]:
        return await self._get("user", headers={PORTAL_SESSION_HEADER: session_token})

    async def refresh_session(self, session_token: str) -> dict[str, Any]:
        """Extend the session by 60 minutes."""
        return await self._post("session/refresh", headers={PORTAL_SESSION_HEADER: session_token})

    async def logout(self, session_token: str) -> dict[str, Any]:
        """Invalidate the session token."""
        return await self._post("logout", headers={PORTAL_SESSION_HEADER: session_token})
