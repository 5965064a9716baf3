"""Testes para o handler de webhook do Notion."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from app.coordinators.notion.handler import process_webhook_payload
from app.use_cases.notion import DispatchResult


@dataclass
class MockUseCase:
    """Mock do DispatchWebhookEventUseCase para testes."""

    result: DispatchResult
    received: list[Any] = field(default_factory=list)

    async def execute(self, payload: Any) -> DispatchResult:
        self.received.append(payload)
        return self.result


class TestProcessWebhookPayload:
    @pytest.mark.asyncio
    async def test_returns_use_case_result(self, caplog: pytest.LogCaptureFixture) -> None:
        expected = DispatchResult(
            event_type="page.created",
            object_type="page",
            processed=True,
            processors_executed=1,
        )
        use_case = MockUseCase(result=expected)
        payload = {"type": "page.created"}

        with caplog.at_level("INFO"):
            result = await process_webhook_payload(
                payload=payload,
                correlation_id="corr-1",
                use_case=use_case,  # type: ignore[arg-type]
            )

        assert result is expected
        assert use_case.received == [payload]
        record = next(r for r in caplog.records if r.getMessage() == "webhook_processed")
        assert record.correlation_id == "corr-1"
        assert record.processors_executed == 1
