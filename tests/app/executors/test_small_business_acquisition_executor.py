"""Testes para o executor de auditoria de aquisições."""

from __future__ import annotations

import logging

import pytest
from conftest import build_event_payload

from app.domain.webhook_events import parse_webhook_event
from app.executors import log_new_acquisition


@pytest.mark.asyncio
async def test_logs_created_page(caplog: pytest.LogCaptureFixture) -> None:
    event = parse_webhook_event(build_event_payload(entity_id="acq-1"))
    with caplog.at_level(logging.INFO):
        ok = await log_new_acquisition(event)
    assert ok is True
    record = next(r for r in caplog.records if r.getMessage() == "acquisition_page_created")
    assert record.page_id == "acq-1"


@pytest.mark.asyncio
async def test_missing_page_id_returns_false() -> None:
    event = parse_webhook_event(build_event_payload(entity_id=""))
    assert await log_new_acquisition(event) is False
