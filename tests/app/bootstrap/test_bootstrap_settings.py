"""Testes para validate_runtime_settings e factories de clientes."""

from __future__ import annotations

import httpx
import pytest

from app import bootstrap
from app.bootstrap.clients import create_http_client, create_notion_client, create_research_client
from config.settings import BaseSettings, NotionSettings, OpenAISettings


class _Settings:
    def __init__(self, errors: list[str]) -> None:
        self._errors = errors

    def validate(self) -> list[str]:
        return self._errors


def _patch_settings(
    monkeypatch: pytest.MonkeyPatch,
    notion_errors: list[str],
    environment: str = "production",
) -> None:
    base = BaseSettings(environment=environment)
    monkeypatch.setattr(bootstrap, "get_base_settings", lambda: base)
    monkeypatch.setattr(bootstrap, "get_notion_settings", lambda: _Settings(notion_errors))
    monkeypatch.setattr(bootstrap, "get_openai_settings", lambda: _Settings([]))


def test_validate_runtime_settings_strict_env_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_settings(monkeypatch, ["NOTION_WEBHOOK_SECRET não configurado"])

    with pytest.raises(RuntimeError, match="notion: NOTION_WEBHOOK_SECRET"):
        bootstrap.validate_runtime_settings()


def test_validate_runtime_settings_dev_only_warns(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    _patch_settings(monkeypatch, ["NOTION_API_KEY não configurado"], environment="development")

    with caplog.at_level("WARNING"):
        bootstrap.validate_runtime_settings()

    assert "settings_validation_failed" in caplog.text


def test_validate_runtime_settings_ok(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_settings(monkeypatch, [])
    bootstrap.validate_runtime_settings()


@pytest.mark.asyncio
async def test_create_http_client() -> None:
    client = create_http_client(5.0)
    try:
        assert isinstance(client, httpx.AsyncClient)
        assert client.timeout.read == 5.0
    finally:
        await client.aclose()


def test_notion_client_requires_api_key() -> None:
    assert create_notion_client(NotionSettings(api_key="")) is None


@pytest.mark.asyncio
async def test_notion_client_created_with_api_key() -> None:
    http_client = httpx.AsyncClient()
    try:
        client = create_notion_client(NotionSettings(api_key="secret_x"), http_client)
        assert client is not None
    finally:
        await http_client.aclose()


def test_research_client_requires_enabled_and_key() -> None:
    assert create_research_client(OpenAISettings(api_key="", enabled=True)) is None
    assert create_research_client(OpenAISettings(api_key="sk-test", enabled=False)) is None


@pytest.mark.asyncio
async def test_research_client_created() -> None:
    client = create_research_client(OpenAISettings(api_key="sk-test", enabled=True))
    assert client is not None
    await client.aclose()
