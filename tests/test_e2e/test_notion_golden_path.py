"""Teste E2E do golden path: webhook assinado até a escrita no Notion."""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any

import pytest
from conftest import build_event_payload
from starlette.requests import Request
from tests.fakes.fake_notion_client import FakeNotionClient, FakeResearchClient

from api.connectors.notion.signature import compute_signature
from api.routes.notion import webhook
from app.bootstrap.processors import create_processor_registry
from app.use_cases.notion import DispatchWebhookEventUseCase
from config.settings import NotionSettings

SECRET = "whsec_golden"
PLAYGROUND_DB = "11111111-2222-3333-4444-555555555555"
ACQUISITION_DB = "99999999-8888-7777-6666-555555555555"


def _signed_request(payload: dict[str, Any], state: SimpleNamespace) -> Request:
    body = json.dumps(payload).encode("utf-8")
    signature = f"sha256={compute_signature(body, SECRET)}"
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "path": "/webhook/integration",
        "raw_path": b"/webhook/integration",
        "query_string": b"",
        "headers": [(b"x-notion-signature", signature.encode("utf-8"))],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


@pytest.fixture
def notion_settings(monkeypatch: pytest.MonkeyPatch) -> NotionSettings:
    settings = NotionSettings(
        webhook_secret=SECRET,
        webhook_processing_mode="inline",
        glens_playground_database_id=PLAYGROUND_DB,
        small_business_acquisition_database_id=ACQUISITION_DB,
    )
    monkeypatch.setattr(webhook, "get_notion_settings", lambda: settings)
    return settings


@pytest.fixture
def app_state(notion_settings: NotionSettings) -> SimpleNamespace:
    notion_client = FakeNotionClient()
    registry = create_processor_registry(notion_settings, notion_client, FakeResearchClient())
    return SimpleNamespace(
        notion_client=notion_client,
        dispatch_use_case=DispatchWebhookEventUseCase(registry),
    )


@pytest.mark.asyncio
async def test_playground_page_gets_demo_table(app_state: SimpleNamespace) -> None:
    payload = build_event_payload(
        entity_id="page-playground",
        # ids sem hífen casam com o database configurado
        parent={"id": PLAYGROUND_DB.replace("-", ""), "type": "database"},
    )

    response = await webhook.receive_integration_webhook(_signed_request(payload, app_state))

    assert response["processed"] is True
    assert response["processorsExecuted"] == 1
    [(block_id, children)] = app_state.notion_client.appended
    assert block_id == "page-playground"
    assert children[0]["type"] == "table"


@pytest.mark.asyncio
async def test_acquisition_page_is_logged_without_writes(app_state: SimpleNamespace) -> None:
    payload = build_event_payload(parent={"id": ACQUISITION_DB, "type": "database"})

    response = await webhook.receive_integration_webhook(_signed_request(payload, app_state))

    assert response["processorsExecuted"] == 1
    assert app_state.notion_client.appended == []


@pytest.mark.asyncio
async def test_unrelated_event_is_acknowledged_unprocessed(app_state: SimpleNamespace) -> None:
    payload = build_event_payload(
        event_type="comment.created",
        entity_type="comment",
        parent={"id": PLAYGROUND_DB, "type": "database"},
    )

    response = await webhook.receive_integration_webhook(_signed_request(payload, app_state))

    assert response == {
        "success": True,
        "eventType": "comment.created",
        "objectType": "comment",
        "processed": False,
        "processorsExecuted": 0,
    }
