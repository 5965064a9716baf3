"""Testes para parse_webhook_request."""

from __future__ import annotations

import pytest

from api.connectors.notion.signature import compute_signature
from api.connectors.notion.webhook import (
    InvalidJsonError,
    InvalidSignatureError,
    MissingSignatureError,
    WebhookSecretNotConfiguredError,
    parse_webhook_request,
)

SECRET = "whsec_test"


def _headers(body: bytes) -> dict[str, str]:
    return {"x-notion-signature": f"sha256={compute_signature(body, SECRET)}"}


def test_returns_payload_and_signature_result() -> None:
    body = b'{"type": "page.created", "entity": {"id": "p", "type": "page"}}'
    payload, signature = parse_webhook_request(body, _headers(body), SECRET)
    assert payload["type"] == "page.created"
    assert signature.valid is True


def test_non_object_json_is_returned_as_is() -> None:
    body = b"[1, 2]"
    payload, _ = parse_webhook_request(body, _headers(body), SECRET)
    assert payload == [1, 2]


def test_missing_signature() -> None:
    with pytest.raises(MissingSignatureError) as exc_info:
        parse_webhook_request(b"{}", {}, SECRET)
    assert exc_info.value.status_code == 401


def test_secret_not_configured() -> None:
    with pytest.raises(WebhookSecretNotConfiguredError) as exc_info:
        parse_webhook_request(b"{}", {"x-notion-signature": "abc"}, None)
    assert exc_info.value.status_code == 500


def test_invalid_signature() -> None:
    with pytest.raises(InvalidSignatureError) as exc_info:
        parse_webhook_request(b"{}", {"x-notion-signature": "sha256=deadbeef"}, SECRET)
    assert exc_info.value.status_code == 401
    assert exc_info.value.detail == "Invalid webhook signature"


def test_non_ascii_signature_raises_invalid_signature() -> None:
    with pytest.raises(InvalidSignatureError) as exc_info:
        parse_webhook_request(b"{}", {"x-notion-signature": "sha256=éé"}, SECRET)
    assert exc_info.value.status_code == 401


def test_invalid_json() -> None:
    body = b"not json"
    with pytest.raises(InvalidJsonError) as exc_info:
        parse_webhook_request(body, _headers(body), SECRET)
    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == "Invalid JSON payload"
