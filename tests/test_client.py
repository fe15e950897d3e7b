"""
Tests for HttpClient
"""
from __future__ import annotations

import datetime
from typing import Optional

import httpx
import pytest
from pydantic import Field

from fam_sdk import HttpClient
from fam_sdk.models import FamModel
from fam_sdk.models.errors import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    TimeoutError,
    ValidationError,
)

URL = "https://api.example.com/api/v1/mangopay/users/42"


class _WalletBody(FamModel):
    owners: list[str] = Field(alias="Owners")
    currency: str = Field(alias="Currency")
    tag: Optional[str] = Field(default=None, alias="Tag")


class TestClientInitialization:
    """Tests for client initialization."""

    def test_raise_error_without_base_url(self):
        """Should raise ValueError when base URL is missing."""
        with pytest.raises(ValueError, match="Base URL is required"):
            HttpClient("")

    def test_strip_trailing_slash_from_base_url(self):
        client = HttpClient("https://api.example.com/")
        assert client.base_url == "https://api.example.com"

    def test_defaults(self):
        client = HttpClient("https://api.example.com")
        assert client.timeout == 30.0
        assert client.retries == 3
        assert client.token is None

    def test_set_and_clear_token(self):
        client = HttpClient("https://api.example.com")
        client.set_token("abc")
        assert client.token == "abc"
        client.clear_token()
        assert client.token is None


class TestRequestBuilding:
    """Tests for URL, header and body handling."""

    async def test_default_headers_and_bearer_token(self, client, httpx_mock):
        httpx_mock.add_response(url=URL, json={"Id": "42"})

        await client.get("/api/v1/mangopay/users/42")

        headers = httpx_mock.last_request.headers
        assert headers["Content-Type"] == "application/json"
        assert headers["Accept"] == "application/json"
        assert headers["Authorization"] == "Bearer test-token"

    async def test_no_authorization_without_token(self, base_url, httpx_mock):
        httpx_mock.add_response(url=URL, json={})

        async with HttpClient(base_url, retries=0) as client:
            await client.get("/api/v1/mangopay/users/42")

        assert "Authorization" not in httpx_mock.last_request.headers

    async def test_cleared_token_is_not_sent(self, client, httpx_mock):
        httpx_mock.add_response(url=URL, json={})

        client.clear_token()
        await client.get("/api/v1/mangopay/users/42")

        assert "authorization" not in httpx_mock.last_request.headers

    async def test_custom_and_per_call_headers(self, base_url, httpx_mock):
        httpx_mock.add_response(url=URL, json={})

        async with HttpClient(base_url, token="t", retries=0, headers={"X-App": "shop"}) as client:
            await client.get(
                "/api/v1/mangopay/users/42",
                headers={"x-app": "override", "Authorization": "Bearer other"},
            )

        headers = httpx_mock.last_request.headers
        assert headers["X-App"] == "override"
        assert headers["Authorization"] == "Bearer other"
        assert headers.get_list("X-App") == ["override"]

    async def test_custom_header_replaces_default_case_insensitively(self, base_url, httpx_mock):
        httpx_mock.add_response(url=URL, json={})

        async with HttpClient(base_url, retries=0, headers={"accept": "text/plain"}) as client:
            await client.get("/api/v1/mangopay/users/42")

        headers = httpx_mock.last_request.headers
        assert headers.get_list("Accept") == ["text/plain"]
        assert headers["Content-Type"] == "application/json"

    async def test_query_params_skip_none(self, client, httpx_mock):
        httpx_mock.add_response(url=f"{URL}?page=2&active=true", json=[])

        await client.get("/api/v1/mangopay/users/42", params={"page": 2, "sort": None, "active": True})

        assert httpx_mock.last_request.url == f"{URL}?page=2&active=true"

    async def test_json_body(self, client, httpx_mock):
        httpx_mock.add_response(url=URL, method="POST", json={"Id": "w1"})

        result = await client.post("/api/v1/mangopay/users/42", {"Currency": "EUR"})

        assert result == {"Id": "w1"}
        assert httpx_mock.last_request.json() == {"Currency": "EUR"}

    async def test_model_body_serialized_by_alias(self, client, httpx_mock):
        httpx_mock.add_response(url=URL, method="PUT", json={})

        await client.put("/api/v1/mangopay/users/42", _WalletBody(Owners=["42"], Currency="EUR"))

        assert httpx_mock.last_request.json() == {"Owners": ["42"], "Currency": "EUR"}

    async def test_no_body_sends_no_content(self, client, httpx_mock):
        httpx_mock.add_response(url=URL, method="DELETE", status_code=204)

        result = await client.delete("/api/v1/mangopay/users/42")

        assert result is None
        assert httpx_mock.last_request.content is None

    async def test_patch(self, client, httpx_mock):
        httpx_mock.add_response(url=URL, method="PATCH", json={"ok": True})

        assert await client.patch("/api/v1/mangopay/users/42", {"Tag": "x"}) == {"ok": True}


class TestErrorHandling:
    """Tests for error mapping."""

    async def test_raise_validation_error_on_400_with_errors(self, client, httpx_mock):
        httpx_mock.add_response(
            url=URL,
            status_code=400,
            json={"message": "Invalid user", "errors": {"Email": ["is required"]}},
        )

        with pytest.raises(ValidationError) as exc_info:
            await client.get("/api/v1/mangopay/users/42")

        assert exc_info.value.message == "Invalid user"
        assert exc_info.value.errors == {"Email": ["is required"]}

    async def test_raise_api_error_on_plain_400(self, client, httpx_mock):
        httpx_mock.add_response(
            url=URL,
            status_code=400,
            json={"message": "Bad request", "code": "BAD_PARAM"},
        )

        with pytest.raises(ApiError) as exc_info:
            await client.get("/api/v1/mangopay/users/42")

        err = exc_info.value
        assert not isinstance(err, ValidationError)
        assert err.status_code == 400
        assert err.code == "BAD_PARAM"
        assert err.details == {"message": "Bad request", "code": "BAD_PARAM"}

    async def test_raise_authentication_error_on_401(self, client, httpx_mock):
        httpx_mock.add_response(url=URL, status_code=401, json={"message": "Token expired"})

        with pytest.raises(AuthenticationError, match="Token expired"):
            await client.get("/api/v1/mangopay/users/42")

    async def test_raise_authorization_error_on_403(self, client, httpx_mock):
        httpx_mock.add_response(url=URL, status_code=403, json={"error": "Forbidden"})

        with pytest.raises(AuthorizationError) as exc_info:
            await client.get("/api/v1/mangopay/users/42")

        assert exc_info.value.message == "Forbidden"

    async def test_raise_not_found_error_on_404(self, client, httpx_mock):
        httpx_mock.add_response(url=URL, status_code=404, json={"message": "User not found"})

        with pytest.raises(NotFoundError, match="User not found"):
            await client.get("/api/v1/mangopay/users/42")

    async def test_raise_validation_error_on_422(self, client, httpx_mock):
        httpx_mock.add_response(url=URL, status_code=422, json={"message": "Unprocessable"})

        with pytest.raises(ValidationError) as exc_info:
            await client.get("/api/v1/mangopay/users/42")

        assert exc_info.value.errors == {}

    async def test_raise_rate_limit_error_on_429(self, client, httpx_mock):
        httpx_mock.add_response(
            url=URL,
            status_code=429,
            json={"message": "Slow down"},
            headers={"Retry-After": "30"},
        )

        with pytest.raises(RateLimitError) as exc_info:
            await client.get("/api/v1/mangopay/users/42")

        assert exc_info.value.retry_after == 30

    async def test_unparseable_retry_after_is_none(self, client, httpx_mock):
        httpx_mock.add_response(
            url=URL,
            status_code=429,
            json={},
            headers={"Retry-After": "Wed, 21 Oct 2026 07:28:00 GMT"},
        )

        with pytest.raises(RateLimitError) as exc_info:
            await client.get("/api/v1/mangopay/users/42")

        assert exc_info.value.retry_after is None

    async def test_raise_api_error_on_500(self, client, httpx_mock):
        httpx_mock.add_response(url=URL, status_code=500, json={"message": "Internal error"})

        with pytest.raises(ApiError) as exc_info:
            await client.get("/api/v1/mangopay/users/42")

        assert exc_info.value.status_code == 500

    async def test_non_json_error_body_uses_reason_phrase(self, client, httpx_mock):
        httpx_mock.add_response(url=URL, status_code=502, content=b"<html>bad gateway</html>")

        with pytest.raises(ApiError) as exc_info:
            await client.get("/api/v1/mangopay/users/42")

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "Bad Gateway"

    async def test_invalid_json_success_body(self, client, httpx_mock):
        httpx_mock.add_response(url=URL, content=b"not json")

        with pytest.raises(NetworkError, match="Invalid JSON"):
            await client.get("/api/v1/mangopay/users/42")

    async def test_connection_error_becomes_network_error(self, client, httpx_mock):
        cause = httpx.ConnectError("Connection refused")
        httpx_mock.add_exception(cause, url=URL)

        with pytest.raises(NetworkError) as exc_info:
            await client.get("/api/v1/mangopay/users/42")

        assert not isinstance(exc_info.value, TimeoutError)
        assert exc_info.value.original_error is cause

    async def test_transport_timeout_becomes_timeout_error(self, client, httpx_mock):
        httpx_mock.add_exception(httpx.ReadTimeout("read timed out"), url=URL)

        with pytest.raises(TimeoutError):
            await client.get("/api/v1/mangopay/users/42")

    async def test_unexpected_transport_failure_becomes_network_error(self, base_url):
        def handler(request: httpx.Request) -> httpx.Response:
            raise RuntimeError("boom")

        async with HttpClient(base_url, retries=0, transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(NetworkError, match="boom") as exc_info:
                await client.get("/api/v1/mangopay/users/42")

        assert isinstance(exc_info.value.original_error, RuntimeError)

    async def test_invalid_url_becomes_network_error(self, base_url):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.InvalidURL("bad url")

        async with HttpClient(base_url, retries=0, transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(NetworkError):
                await client.get("/api/v1/mangopay/users/42")

    async def test_unserializable_body_is_rejected_before_sending(self, base_url, httpx_mock, no_sleep):
        async with HttpClient(base_url, retries=2) as client:
            with pytest.raises(NetworkError, match="not JSON serializable") as exc_info:
                await client.post("/api/v1/mangopay/users/42", {"when": datetime.date(2024, 1, 1)})

        assert isinstance(exc_info.value.original_error, TypeError)
        assert httpx_mock.requests == []
        assert no_sleep == []

    async def test_slow_response_times_out(self, client, httpx_mock):
        httpx_mock.add_response(url=URL, json={}, delay=1.0)

        with pytest.raises(TimeoutError, match="Request timeout after 0.05s"):
            await client.get("/api/v1/mangopay/users/42", timeout=0.05)


class TestRetry:
    """Tests for retry behavior."""

    async def test_retry_on_server_error(self, base_url, httpx_mock, no_sleep):
        httpx_mock.add_response(url=URL, status_code=503, json={})
        httpx_mock.add_response(url=URL, json={"Id": "42"})

        async with HttpClient(base_url, retries=2) as client:
            result = await client.get("/api/v1/mangopay/users/42")

        assert result == {"Id": "42"}
        assert len(httpx_mock.requests) == 2
        assert no_sleep == [1.0]

    async def test_retry_on_network_error(self, base_url, httpx_mock, no_sleep):
        httpx_mock.add_exception(httpx.ConnectError("reset"), url=URL)
        httpx_mock.add_response(url=URL, json={"Id": "42"})

        async with HttpClient(base_url, retries=2) as client:
            assert await client.get("/api/v1/mangopay/users/42") == {"Id": "42"}

        assert len(httpx_mock.requests) == 2

    async def test_gives_up_after_retries(self, base_url, httpx_mock, no_sleep):
        for _ in range(3):
            httpx_mock.add_response(url=URL, status_code=500, json={})

        async with HttpClient(base_url, retries=2) as client:
            with pytest.raises(ApiError):
                await client.get("/api/v1/mangopay/users/42")

        assert len(httpx_mock.requests) == 3
        assert no_sleep == [1.0, 2.0]

    async def test_client_errors_are_not_retried(self, base_url, httpx_mock, no_sleep):
        httpx_mock.add_response(url=URL, status_code=404, json={})

        async with HttpClient(base_url, retries=2) as client:
            with pytest.raises(NotFoundError):
                await client.get("/api/v1/mangopay/users/42")

        assert len(httpx_mock.requests) == 1
        assert no_sleep == []

    async def test_skip_retry_runs_single_attempt(self, base_url, httpx_mock, no_sleep):
        httpx_mock.add_response(url=URL, status_code=500, json={})

        async with HttpClient(base_url, retries=2) as client:
            with pytest.raises(ApiError):
                await client.get("/api/v1/mangopay/users/42", skip_retry=True)

        assert len(httpx_mock.requests) == 1

    async def test_retried_attempts_send_identical_requests(self, base_url, httpx_mock, no_sleep):
        httpx_mock.add_response(url=URL, method="POST", status_code=500, json={})
        httpx_mock.add_response(url=URL, method="POST", json={})

        async with HttpClient(base_url, token="t", retries=1) as client:
            await client.post("/api/v1/mangopay/users/42", {"Tag": "a"})

        first, second = httpx_mock.requests
        assert first.url == second.url
        assert first.content == second.content
        assert first.headers["Authorization"] == second.headers["Authorization"]


class TestContextManager:
    """Tests for async context manager."""

    async def test_close_client_on_exit(self, base_url, httpx_mock):
        httpx_mock.add_response(url=URL, json={})

        async with HttpClient(base_url, retries=0) as client:
            await client.get("/api/v1/mangopay/users/42")
            assert client._client is not None

        assert client._client is None

    async def test_close_without_requests(self, base_url):
        client = HttpClient(base_url)
        await client.close()
        assert client._client is None
