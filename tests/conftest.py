"""Configuração do pytest para o projeto Notion_Relay."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


def build_event_payload(
    *,
    event_type: str = "page.created",
    entity_id: str = "page-1",
    entity_type: str = "page",
    parent: dict[str, Any] | None = None,
    authors: list[dict[str, str]] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """Monta um payload de webhook no formato enviado pelo Notion."""
    data: dict[str, Any] = {}
    if parent is not None:
        data["parent"] = parent
    payload: dict[str, Any] = {
        "id": "evt-1",
        "timestamp": "2025-10-01T12:00:00.000Z",
        "workspace_id": "ws-1",
        "workspace_name": "Workspace",
        "subscription_id": "sub-1",
        "integration_id": "int-1",
        "attempt_number": 1,
        "type": event_type,
        "authors": authors if authors is not None else [{"id": "user-1", "type": "person"}],
        "entity": {"id": entity_id, "type": entity_type},
        "data": data,
    }
    payload.update(extra)
    return payload


@pytest.fixture
def event_payload_factory():
    return build_event_payload


@pytest.fixture
def page_created_payload() -> dict[str, Any]:
    return build_event_payload(parent={"id": "db-x", "type": "database"})
