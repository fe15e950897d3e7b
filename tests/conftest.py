"""
Pytest configuration and fixtures for FAM SDK tests.
"""
from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx
import pytest

from fam_sdk import FamClient, HttpClient
from fam_sdk import utils


@dataclass
class _MockEntry:
    method: str
    url: str
    response: Optional[httpx.Response] = None
    exception: Optional[Exception] = None
    delay: float = 0.0


@dataclass
class RecordedRequest:
    method: str
    url: str
    headers: httpx.Headers
    content: Optional[str]

    def json(self) -> Any:
        return json.loads(self.content) if self.content is not None else None


class _LocalHTTPXMock:
    """Queue of canned responses, matched on method and URL in FIFO order."""

    def __init__(self) -> None:
        self._entries: list[_MockEntry] = []
        self.requests: list[RecordedRequest] = []

    def add_response(
        self,
        *,
        url: str,
        method: str = "GET",
        status_code: int = 200,
        json: Any = None,
        content: bytes | None = None,
        headers: Optional[dict[str, str]] = None,
        delay: float = 0.0,
    ) -> None:
        if content is None and json is not None:
            content = json_dumps_bytes(json)
            response_headers = {"content-type": "application/json"}
            if headers:
                response_headers.update(headers)
        else:
            response_headers = headers or {}

        request = httpx.Request(method.upper(), url)
        response = httpx.Response(
            status_code=status_code,
            headers=response_headers,
            content=content or b"",
            request=request,
        )
        self._entries.append(
            _MockEntry(method=method.upper(), url=url, response=response, delay=delay)
        )

    def add_exception(
        self,
        exception: Exception,
        *,
        url: str,
        method: str = "GET",
    ) -> None:
        self._entries.append(
            _MockEntry(method=method.upper(), url=url, exception=exception)
        )

    @property
    def last_request(self) -> RecordedRequest:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def _pop_match(self, method: str, url: str) -> _MockEntry:
        normalized_method = method.upper()
        normalized_url = _normalize_url(url)
        for idx, entry in enumerate(self._entries):
            if entry.method == normalized_method and _normalize_url(entry.url) == normalized_url:
                return self._entries.pop(idx)
        raise AssertionError(
            f"No mocked response for {normalized_method} {url}. "
            f"Available: {[f'{e.method} {e.url}' for e in self._entries]}"
        )


def json_dumps_bytes(payload: Any) -> bytes:
    return json.dumps(payload, default=str).encode("utf-8")


def _normalize_url(url: str) -> str:
    parts = urlsplit(url)
    normalized_query = urlencode(sorted(parse_qsl(parts.query, keep_blank_values=True)), doseq=True)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, normalized_query, parts.fragment))


@pytest.fixture
def httpx_mock(monkeypatch):
    """Patch ``httpx.AsyncClient.request`` to serve queued responses."""
    mock = _LocalHTTPXMock()

    async def _async_request(self, method, url, headers=None, content=None, **kwargs):
        mock.requests.append(
            RecordedRequest(
                method=method.upper(),
                url=str(url),
                headers=httpx.Headers(headers or {}),
                content=content,
            )
        )
        match = mock._pop_match(method, str(url))
        if match.delay:
            await asyncio.sleep(match.delay)
        if match.exception is not None:
            raise match.exception
        assert match.response is not None
        return match.response

    monkeypatch.setattr(httpx.AsyncClient, "request", _async_request)
    return mock


@pytest.fixture
def no_sleep(monkeypatch) -> list[float]:
    """Record backoff delays instead of sleeping through them."""
    delays: list[float] = []

    async def _sleep(seconds: float) -> None:
        delays.append(seconds)

    monkeypatch.setattr(utils, "sleep", _sleep)
    return delays


@pytest.fixture
def token() -> str:
    """Test bearer token."""
    return "test-token"


@pytest.fixture
def base_url() -> str:
    """Test base URL."""
    return "https://api.example.com"


@pytest.fixture
async def client(token: str, base_url: str) -> HttpClient:
    """HTTP client without retries."""
    # Retry behavior is tested explicitly.
    client = HttpClient(base_url, token=token, retries=0)
    yield client
    await client.close()


@pytest.fixture
async def fam(token: str, base_url: str) -> FamClient:
    """SDK facade without retries."""
    fam = FamClient(base_url=base_url, token=token, retries=0)
    yield fam
    await fam.close()
