"""Testes para helpers runtime do webhook Notion."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest
from conftest import build_event_payload

from api.routes.notion import webhook_runtime
from app.domain.webhook_events import parse_webhook_event
from app.use_cases.notion import DispatchResult
from utils.errors import InfrastructureError, InvalidPayloadError

_RESULT = DispatchResult(
    event_type="page.created",
    object_type="page",
    processed=True,
    processors_executed=2,
)


@pytest.fixture
def event():
    return parse_webhook_event(build_event_payload())


@pytest.mark.asyncio
async def test_inline_mode_returns_summary(monkeypatch: pytest.MonkeyPatch, event) -> None:
    captured: dict[str, Any] = {}

    async def _fake_process(*, payload: Any, correlation_id: str, use_case: Any) -> DispatchResult:
        captured.update(payload=payload, correlation_id=correlation_id, use_case=use_case)
        return _RESULT

    monkeypatch.setattr(webhook_runtime, "process_webhook_payload", _fake_process)
    use_case = object()

    response = await webhook_runtime.dispatch_webhook_processing(
        event=event,
        correlation_id="corr-inline",
        settings=SimpleNamespace(webhook_processing_mode="inline"),
        use_case=use_case,
    )

    assert response == {"success": True, **_RESULT.to_dict()}
    assert captured == {"payload": event, "correlation_id": "corr-inline", "use_case": use_case}


@pytest.mark.asyncio
async def test_inline_mode_propagates_unexpected_errors(
    monkeypatch: pytest.MonkeyPatch, event
) -> None:
    async def _boom(**_kwargs: Any) -> DispatchResult:
        raise RuntimeError("boom")

    monkeypatch.setattr(webhook_runtime, "process_webhook_payload", _boom)

    with pytest.raises(RuntimeError):
        await webhook_runtime.dispatch_webhook_processing(
            event=event,
            correlation_id="corr-inline",
            settings=SimpleNamespace(webhook_processing_mode="INLINE"),
            use_case=object(),
        )


@pytest.mark.asyncio
async def test_async_mode_schedules_task(monkeypatch: pytest.MonkeyPatch, event) -> None:
    captured: dict[str, Any] = {}

    def _fake_schedule(*, correlation_id: str, coroutine: Any, event_type: str | None = None) -> int:
        captured.update(correlation_id=correlation_id, event_type=event_type)
        coroutine.close()
        return 1

    monkeypatch.setattr(webhook_runtime, "schedule_processing_task", _fake_schedule)

    response = await webhook_runtime.dispatch_webhook_processing(
        event=event,
        correlation_id="corr-async",
        settings=SimpleNamespace(webhook_processing_mode="async"),
        use_case=object(),
    )

    assert response == {"success": True, "status": "received"}
    assert captured == {"correlation_id": "corr-async", "event_type": "page.created"}


@pytest.mark.asyncio
async def test_missing_use_case_acknowledges_without_processing(
    caplog: pytest.LogCaptureFixture, event
) -> None:
    with caplog.at_level("WARNING"):
        response = await webhook_runtime.dispatch_webhook_processing(
            event=event,
            correlation_id="corr-none",
            settings=SimpleNamespace(webhook_processing_mode="inline"),
            use_case=None,
        )

    assert response == {"success": True, "status": "received", "processed": False}
    assert "webhook_use_case_unavailable" in caplog.text


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("error", "log_event"),
    [
        (InvalidPayloadError(), "webhook_processing_validation_failed"),
        (InfrastructureError("down"), "webhook_processing_infra_failed"),
        (RuntimeError("boom"), "webhook_processing_failed"),
    ],
)
async def test_safe_processing_classifies_errors(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
    event,
    error: Exception,
    log_event: str,
) -> None:
    async def _fail(**_kwargs: Any) -> DispatchResult:
        raise error

    monkeypatch.setattr(webhook_runtime, "process_webhook_payload", _fail)

    with caplog.at_level("WARNING"):
        result = await webhook_runtime.process_webhook_payload_safe(
            event=event,
            correlation_id="corr-safe",
            use_case=object(),
        )

    assert result is None
    assert log_event in caplog.text
