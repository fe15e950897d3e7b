"""
HTTP client for the FAM API.

``HttpClient`` owns the request lifecycle shared by every resource:
URL building, header merging, a per-attempt timeout, mapping of failed
responses onto the SDK error types, and retry with exponential backoff.

Example usage:
    ```python
    from fam_sdk.client import HttpClient

    async with HttpClient("https://api.fam.example", token="...") as http:
        user = await http.get("/api/v1/mangopay/users/42")
        await http.post("/api/v1/mangopay/wallets", {"Currency": "EUR"})
    ```
"""
from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import httpx
from pydantic import BaseModel

from . import utils
from .models.errors import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    FamError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    TimeoutError,
    ValidationError,
    is_retryable,
)
from .utils import QueryParams, build_url

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_RETRIES = 3
USER_AGENT = "fam-sdk-python/0.1.0"


@dataclass(frozen=True)
class RequestOptions:
    """Per-call request options.

    Attributes:
        params: Query parameters; ``None`` values are dropped
        headers: Header overrides, applied last
        timeout: Timeout override in seconds
        skip_retry: Run a single attempt, without the retry policy
    """

    params: Optional[QueryParams] = None
    headers: Optional[Mapping[str, str]] = None
    timeout: Optional[float] = None
    skip_retry: bool = False


@dataclass
class _ApiResponse:
    data: Any
    status: int
    headers: httpx.Headers


class HttpClient:
    """
    Async HTTP client for the FAM API.

    Args:
        base_url: API base URL
        token: Bearer token sent as ``Authorization: Bearer <token>``
        timeout: Request timeout in seconds (default: 30)
        retries: Retries for transient failures (default: 3, 0 disables)
        headers: Headers added to every request
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        retries: int = DEFAULT_RETRIES,
        headers: Optional[Mapping[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not base_url:
            raise ValueError("Base URL is required")

        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout
        self._retries = retries
        self._default_headers = httpx.Headers(
            {"Content-Type": "application/json", "Accept": "application/json"}
        )
        for name, value in (headers or {}).items():
            self._default_headers[name] = value
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def retries(self) -> int:
        return self._retries

    @property
    def token(self) -> Optional[str]:
        return self._token

    def set_token(self, token: str) -> None:
        """Set the bearer token used by subsequent requests."""
        self._token = token

    def clear_token(self) -> None:
        """Stop sending an Authorization header."""
        self._token = None

    async def get(
        self,
        path: str,
        *,
        params: Optional[QueryParams] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
        skip_retry: bool = False,
    ) -> Any:
        """Make a GET request."""
        options = RequestOptions(params, headers, timeout, skip_retry)
        return await self._request("GET", path, None, options)

    async def post(
        self,
        path: str,
        body: Any = None,
        *,
        params: Optional[QueryParams] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
        skip_retry: bool = False,
    ) -> Any:
        """Make a POST request."""
        options = RequestOptions(params, headers, timeout, skip_retry)
        return await self._request("POST", path, body, options)

    async def put(
        self,
        path: str,
        body: Any = None,
        *,
        params: Optional[QueryParams] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
        skip_retry: bool = False,
    ) -> Any:
        """Make a PUT request."""
        options = RequestOptions(params, headers, timeout, skip_retry)
        return await self._request("PUT", path, body, options)

    async def patch(
        self,
        path: str,
        body: Any = None,
        *,
        params: Optional[QueryParams] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
        skip_retry: bool = False,
    ) -> Any:
        """Make a PATCH request."""
        options = RequestOptions(params, headers, timeout, skip_retry)
        return await self._request("PATCH", path, body, options)

    async def delete(
        self,
        path: str,
        *,
        params: Optional[QueryParams] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
        skip_retry: bool = False,
    ) -> Any:
        """Make a DELETE request."""
        options = RequestOptions(params, headers, timeout, skip_retry)
        return await self._request("DELETE", path, None, options)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            # The per-attempt asyncio timeout is the only deadline.
            self._client = httpx.AsyncClient(
                headers={"User-Agent": USER_AGENT},
                timeout=None,
                transport=self._transport,
            )
        return self._client

    async def _request(
        self,
        method: str,
        path: str,
        body: Any = None,
        options: Optional[RequestOptions] = None,
    ) -> Any:
        """Make an HTTP request, with retry logic unless skipped."""
        options = options or RequestOptions()
        url = build_url(self._base_url, path, options.params)
        timeout = options.timeout if options.timeout is not None else self._timeout
        headers = self._build_headers(options.headers)
        try:
            content = self._serialize(body)
        except (TypeError, ValueError) as e:
            raise NetworkError(f"Request body is not JSON serializable: {e}", e) from e

        async def attempt() -> _ApiResponse:
            return await self._send(method, url, headers, content, timeout)

        if options.skip_retry:
            response = await attempt()
        else:
            response = await utils.retry(
                attempt,
                max_retries=self._retries,
                should_retry=is_retryable,
            )
        return response.data

    async def _send(
        self,
        method: str,
        url: str,
        headers: httpx.Headers,
        content: Optional[str],
        timeout: float,
    ) -> _ApiResponse:
        """Run a single attempt and map every failure onto a FamError."""
        client = await self._get_client()
        try:
            async with asyncio.timeout(timeout):
                logger.debug("%s %s", method, url)
                response = await client.request(method, url, headers=headers, content=content)
                logger.debug("%s %s -> %d", method, url, response.status_code)

                if not response.is_success:
                    self._raise_for_response(response)

                return _ApiResponse(
                    data=self._decode(response),
                    status=response.status_code,
                    headers=response.headers,
                )
        except FamError:
            raise
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise TimeoutError(f"Request timeout after {timeout}s", e) from e
        except Exception as e:
            raise NetworkError(str(e) or "Network request failed", e) from e

    def _build_headers(self, overrides: Optional[Mapping[str, str]] = None) -> httpx.Headers:
        """Merge default, auth and per-call headers; later entries win."""
        headers = httpx.Headers(self._default_headers)
        if self._token is not None:
            headers["Authorization"] = f"Bearer {self._token}"
        for name, value in (overrides or {}).items():
            headers[name] = value
        return headers

    @staticmethod
    def _serialize(body: Any) -> Optional[str]:
        if body is None:
            return None
        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json", by_alias=True, exclude_none=True)
        return json.dumps(body)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise NetworkError("Invalid JSON in response body", e) from e

    @staticmethod
    def _raise_for_response(response: httpx.Response) -> None:
        """Raise the SDK error matching a non-2xx response."""
        try:
            payload = response.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}

        message = _first_present(payload.get("message"), payload.get("error"), response.reason_phrase)
        code = payload.get("code")
        status = response.status_code
        logger.warning("API error %d: %s", status, message)

        if status == 400:
            if payload.get("errors") is not None:
                raise ValidationError(message, payload["errors"])
            raise ApiError(message, 400, code, payload)
        if status == 401:
            raise AuthenticationError(message)
        if status == 403:
            raise AuthorizationError(message)
        if status == 404:
            raise NotFoundError(message)
        if status == 422:
            raise ValidationError(message, payload.get("errors") or {})
        if status == 429:
            raise RateLimitError(message, _parse_retry_after(response.headers.get("Retry-After")))
        raise ApiError(message, status, code, payload)

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()


def _first_present(*values: Any) -> str:
    for value in values:
        if value is not None:
            return str(value)
    return ""


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None
