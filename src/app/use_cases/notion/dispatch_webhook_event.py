"""Use case de despacho de evento de webhook para os processadores.

Pipeline de passada única: valida o envelope, filtra o registro
(habilitação e depois casamento), executa os executores casados em
paralelo e agrega os resultados. Falha de um executor nunca afeta os
demais nem o retorno do despacho.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.domain.webhook_events import parse_webhook_event
from app.observability import record_dispatch_outcome, record_latency

if TYPE_CHECKING:
    from app.domain.processor import EventPredicate, ProcessorDefinition
    from app.domain.webhook_events import WebhookEvent
    from app.services.processor_registry import ProcessorRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchResult:
    """Resumo de um despacho.

    `processors_executed` conta apenas executores que retornaram True;
    `processed` é True se ao menos um retornou True.
    """

    event_type: str
    object_type: str | None
    processed: bool
    processors_executed: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "eventType": self.event_type,
            "objectType": self.object_type,
            "processed": self.processed,
            "processorsExecuted": self.processors_executed,
        }


class DispatchWebhookEventUseCase:
    """Casa o evento contra o registro e executa os processadores."""

    def __init__(
        self,
        registry: ProcessorRegistry,
        *,
        executor_timeout_seconds: float | None = None,
    ) -> None:
        self._registry = registry
        self._executor_timeout = executor_timeout_seconds or None

    @property
    def registry(self) -> ProcessorRegistry:
        return self._registry

    async def execute(self, payload: object) -> DispatchResult:
        """Despacha um payload de webhook.

        Raises:
            InvalidPayloadError: payload não é um objeto JSON.
                Levantada antes de qualquer processador ser avaliado.
        """
        event = parse_webhook_event(payload)
        started = time.perf_counter()
        object_type = event.entity.type if event.entity is not None else None

        matched = self.select_processors(event)
        outcomes = await asyncio.gather(
            *(self._run_executor(processor, event) for processor in matched)
        )
        succeeded = sum(1 for outcome in outcomes if outcome)

        result = DispatchResult(
            event_type=event.type,
            object_type=object_type,
            processed=succeeded > 0,
            processors_executed=succeeded,
        )

        logger.info(
            "webhook_event_dispatched",
            extra={
                "event_id": event.id,
                "event_type": event.type,
                "object_type": object_type,
                "processors_matched": len(matched),
                "processors_executed": succeeded,
            },
        )
        record_dispatch_outcome(event.type, len(matched), succeeded)
        record_latency("dispatcher", "dispatch", (time.perf_counter() - started) * 1000)
        return result

    def select_processors(self, event: WebhookEvent) -> list[ProcessorDefinition]:
        """Retorna, na ordem do registro, os processadores casados.

        `should_execute` só é avaliado quando `is_enabled` passa.
        """
        matched: list[ProcessorDefinition] = []
        for processor in self._registry:
            if not _evaluate(processor, "is_enabled", processor.is_enabled, event):
                continue
            if not _evaluate(processor, "should_execute", processor.should_execute, event):
                continue
            matched.append(processor)
        return matched

    async def _run_executor(
        self,
        processor: ProcessorDefinition,
        event: WebhookEvent,
    ) -> bool:
        """Executa um processador isolando qualquer falha como False."""
        started = time.perf_counter()
        logger.info(
            "processor_execution_started",
            extra={"processor_id": processor.id, "processor_name": processor.name},
        )
        try:
            outcome = processor.executor(event)
            if inspect.isawaitable(outcome):
                if self._executor_timeout is not None:
                    outcome = await asyncio.wait_for(outcome, self._executor_timeout)
                else:
                    outcome = await outcome
        except TimeoutError:
            logger.warning(
                "processor_execution_timeout",
                extra={
                    "processor_id": processor.id,
                    "processor_name": processor.name,
                    "timeout_seconds": self._executor_timeout,
                },
            )
            return False
        except Exception as exc:
            logger.exception(
                "processor_execution_failed",
                extra={
                    "processor_id": processor.id,
                    "processor_name": processor.name,
                    "error_type": type(exc).__name__,
                },
            )
            return False

        succeeded = outcome is True
        logger.info(
            "processor_execution_completed",
            extra={
                "processor_id": processor.id,
                "processor_name": processor.name,
                "success": succeeded,
                "elapsed_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return succeeded


def _evaluate(
    processor: ProcessorDefinition,
    rule: str,
    predicate: EventPredicate,
    event: WebhookEvent,
) -> bool:
    """Avalia uma regra; exceção conta como não casado (fail-closed)."""
    try:
        return bool(predicate(event))
    except Exception as exc:
        logger.warning(
            "processor_predicate_failed",
            extra={
                "processor_id": processor.id,
                "rule": rule,
                "error_type": type(exc).__name__,
            },
        )
        return False
