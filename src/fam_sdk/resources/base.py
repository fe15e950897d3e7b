"""
Base resource class for FAM SDK.

Every resource is bound to one ``HttpClient`` and one base path; the
helpers below resolve endpoints relative to that path and delegate to the
client, which handles retries and error mapping.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence, Union

from ..utils import QueryParams

if TYPE_CHECKING:
    from ..client import HttpClient

Segments = Union[str, Sequence[str]]


class BaseResource:
    """Base class for API resources.

    Attributes:
        _client: The HTTP client instance
        _base_path: Path every endpoint of the resource lives under
    """

    def __init__(self, client: "HttpClient", base_path: str) -> None:
        """Initialize the resource.

        Args:
            client: The HTTP client instance
            base_path: Resource root, e.g. ``/api/v1/mangopay/users``
        """
        self._client = client
        self._base_path = base_path

    def _path(self, segments: Segments = "") -> str:
        """Build the full path for an endpoint.

        A list of segments is joined with ``/``; an empty string yields the
        base path itself.
        """
        if not isinstance(segments, str):
            return f"{self._base_path}/{'/'.join(segments)}"
        return f"{self._base_path}/{segments}" if segments else self._base_path

    async def _get(
        self,
        endpoint: Segments = "",
        params: Optional[QueryParams] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Make a GET request.

        Args:
            endpoint: Path relative to the resource root
            params: Query parameters
            headers: Header overrides

        Returns:
            Decoded response body
        """
        return await self._client.get(self._path(endpoint), params=params, headers=headers)

    async def _post(
        self,
        endpoint: Segments = "",
        data: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Make a POST request.

        Args:
            endpoint: Path relative to the resource root
            data: Request body
            headers: Header overrides

        Returns:
            Decoded response body
        """
        return await self._client.post(self._path(endpoint), data, headers=headers)

    async def _put(self, endpoint: Segments = "", data: Any = None) -> Any:
        """Make a PUT request."""
        return await self._client.put(self._path(endpoint), data)

    async def _patch(self, endpoint: Segments = "", data: Any = None) -> Any:
        """Make a PATCH request."""
        return await self._client.patch(self._path(endpoint), data)

    async def _delete(self, endpoint: Segments = "") -> Any:
        """Make a DELETE request."""
        return await self._client.delete(self._path(endpoint))


def pagination_params(
    page: Optional[int] = None,
    per_page: Optional[int] = None,
    sort: Optional[str] = None,
    order: Optional[str] = None,
) -> dict[str, Any]:
    """Query parameters shared by list endpoints."""
    return {"page": page, "per_page": per_page, "sort": sort, "order": order}


__all__ = [
    "BaseResource",
    "pagination_params",
]
