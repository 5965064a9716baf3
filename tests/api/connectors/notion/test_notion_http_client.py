"""Testes para NotionClient com httpx.MockTransport."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from api.connectors.notion import http_base
from api.connectors.notion.errors import is_permanent_error, parse_notion_error
from api.connectors.notion.http_base import HttpClientConfig, parse_retry_after
from api.connectors.notion.http_client import NotionClient, create_notion_client
from config.settings import NotionSettings
from utils.errors import NotionApiError, NotionUnavailableError

BASE_URL = "https://api.notion.test/v1"


def _client(
    handler: Callable[[httpx.Request], httpx.Response],
    *,
    max_retries: int = 2,
) -> NotionClient:
    return NotionClient(
        api_key="secret_token",
        base_url=BASE_URL,
        api_version="2025-09-03",
        config=HttpClientConfig(max_retries=max_retries, backoff_base_seconds=0.0),
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


class TestNotionClient:
    @pytest.mark.asyncio
    async def test_retrieve_page_sends_auth_and_version(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"object": "page", "id": "p-1"})

        client = _client(handler)
        page = await client.retrieve_page("p-1")
        await client.aclose()

        assert page["id"] == "p-1"
        request = seen[0]
        assert request.method == "GET"
        assert str(request.url) == f"{BASE_URL}/pages/p-1"
        assert request.headers["Authorization"] == "Bearer secret_token"
        assert request.headers["Notion-Version"] == "2025-09-03"

    @pytest.mark.asyncio
    async def test_update_page_properties_patches_properties(self) -> None:
        bodies: list[dict[str, Any]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json={"object": "page"})

        client = _client(handler)
        await client.update_page_properties("p-1", {"Bedrooms": {"number": 3}})
        await client.aclose()

        assert bodies == [{"properties": {"Bedrooms": {"number": 3}}}]

    @pytest.mark.asyncio
    async def test_append_block_children(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "PATCH"
            assert request.url.path.endswith("/blocks/p-1/children")
            return httpx.Response(200, json={"object": "list", "results": []})

        client = _client(handler)
        result = await client.append_block_children("p-1", [{"type": "paragraph"}])
        await client.aclose()
        assert result["object"] == "list"

    @pytest.mark.asyncio
    async def test_retrieve_database_data_source_uses_first_source(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("/databases/db-1"):
                return httpx.Response(
                    200, json={"data_sources": [{"id": "ds-1"}, {"id": "ds-2"}]}
                )
            assert request.url.path.endswith("/data_sources/ds-1")
            return httpx.Response(200, json={"object": "data_source", "properties": {}})

        client = _client(handler)
        data_source = await client.retrieve_database_data_source("db-1")
        await client.aclose()
        assert data_source == {"object": "data_source", "properties": {}}

    @pytest.mark.asyncio
    async def test_retrieve_database_data_source_none_when_empty(self) -> None:
        client = _client(lambda request: httpx.Response(200, json={"data_sources": []}))
        assert await client.retrieve_database_data_source("db-1") is None
        await client.aclose()

    @pytest.mark.asyncio
    async def test_api_error_is_parsed(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                404,
                json={"object": "error", "code": "object_not_found", "message": "nope"},
            )

        client = _client(handler)
        with pytest.raises(NotionApiError) as exc_info:
            await client.retrieve_page("missing")
        await client.aclose()

        assert exc_info.value.status_code == 404
        assert exc_info.value.code == "object_not_found"
        assert exc_info.value.is_permanent is True

    @pytest.mark.asyncio
    async def test_rate_limit_is_retried(self) -> None:
        calls = {"count": 0}

        def handler(request: httpx.Request) -> httpx.Response:
            calls["count"] += 1
            if calls["count"] == 1:
                return httpx.Response(429, json={"code": "rate_limited"})
            return httpx.Response(200, json={"object": "page"})

        client = _client(handler)
        page = await client.retrieve_page("p-1")
        await client.aclose()

        assert page == {"object": "page"}
        assert calls["count"] == 2

    @pytest.mark.asyncio
    async def test_retries_exhausted_raise_unavailable(self) -> None:
        calls = {"count": 0}

        def handler(request: httpx.Request) -> httpx.Response:
            calls["count"] += 1
            return httpx.Response(503, json={"code": "service_unavailable"})

        client = _client(handler, max_retries=2)
        with pytest.raises(NotionUnavailableError):
            await client.retrieve_page("p-1")
        await client.aclose()
        assert calls["count"] == 3

    @pytest.mark.asyncio
    async def test_connection_error_raises_unavailable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client = _client(handler, max_retries=0)
        with pytest.raises(NotionUnavailableError):
            await client.retrieve_page("p-1")
        await client.aclose()

    @pytest.mark.asyncio
    async def test_invalid_json_response(self) -> None:
        client = _client(lambda request: httpx.Response(200, content=b"<html>"))
        with pytest.raises(NotionApiError) as exc_info:
            await client.retrieve_page("p-1")
        await client.aclose()
        assert exc_info.value.code == "invalid_response"

    def test_requires_api_key(self) -> None:
        with pytest.raises(ValueError, match="api_key"):
            NotionClient(api_key="", base_url=BASE_URL, api_version="2025-09-03")

    @pytest.mark.asyncio
    async def test_shared_config_is_not_mutated(self) -> None:
        shared = HttpClientConfig(default_headers={"User-Agent": "relay"})
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"object": "page", "id": "p-1"})

        client = NotionClient(
            api_key="secret_token",
            base_url=BASE_URL,
            api_version="2025-09-03",
            config=shared,
            client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )
        await client.retrieve_page("p-1")
        await client.aclose()

        assert shared.default_headers == {"User-Agent": "relay"}
        assert seen[0].headers["Authorization"] == "Bearer secret_token"
        assert seen[0].headers["User-Agent"] == "relay"


def test_create_notion_client_from_settings() -> None:
    settings = NotionSettings(api_key="secret_x", max_retries=5, request_timeout_seconds=10)
    client = create_notion_client(settings)
    assert isinstance(client, NotionClient)


class TestNotionErrors:
    def test_parse_error_body(self) -> None:
        error = parse_notion_error(
            400, {"object": "error", "code": "validation_error", "message": "bad"}
        )
        assert error.code == "validation_error"
        assert str(error) == "400 validation_error: bad"

    def test_parse_non_dict_body(self) -> None:
        error = parse_notion_error(500, None)
        assert error.code == "unknown"
        assert error.is_permanent is False

    @pytest.mark.parametrize(
        ("status_code", "code", "expected"),
        [
            (400, "validation_error", True),
            (404, "object_not_found", True),
            (409, "conflict_error", False),
            (429, "rate_limited", False),
            (502, "bad_gateway", False),
        ],
    )
    def test_is_permanent_error(self, status_code: int, code: str, expected: bool) -> None:
        assert is_permanent_error(status_code, code) is expected


class TestRetryAfter:
    @pytest.mark.parametrize(
        ("headers", "expected"),
        [
            ({"Retry-After": "2"}, 2.0),
            ({"Retry-After": "0.5"}, 0.5),
            ({"Retry-After": "-3"}, 0.0),
            ({"Retry-After": "Wed, 21 Oct 2026 07:28:00 GMT"}, None),
            ({}, None),
        ],
    )
    def test_parse_retry_after(self, headers: dict[str, str], expected: float | None) -> None:
        assert parse_retry_after(httpx.Response(429, headers=headers)) == expected

    @pytest.mark.asyncio
    async def test_retry_after_header_is_honored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        slept: list[float] = []

        async def _fake_sleep(seconds: float) -> None:
            slept.append(seconds)

        monkeypatch.setattr(http_base.asyncio, "sleep", _fake_sleep)
        responses = iter(
            [
                httpx.Response(429, headers={"Retry-After": "7"}, json={}),
                httpx.Response(200, json={"object": "page", "id": "p-1"}),
            ]
        )

        client = _client(lambda _request: next(responses))
        page = await client.retrieve_page("p-1")
        await client.aclose()

        assert page["id"] == "p-1"
        assert slept == [7.0]
