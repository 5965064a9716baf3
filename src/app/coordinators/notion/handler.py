"""Processamento de evento de webhook do Notion já autenticado."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.use_cases.notion.dispatch_webhook_event import (
        DispatchResult,
        DispatchWebhookEventUseCase,
    )

logger = logging.getLogger(__name__)


async def process_webhook_payload(
    payload: Any,
    correlation_id: str,
    use_case: DispatchWebhookEventUseCase,
) -> DispatchResult:
    """Despacha o payload e registra o resumo (sem conteúdo do evento).

    Args:
        payload: JSON do webhook já validado pela assinatura
        correlation_id: ID de correlação para rastreamento
        use_case: Use case de despacho injetado

    Returns:
        DispatchResult com o resumo do processamento

    Raises:
        InvalidPayloadError: payload não é um objeto JSON.
    """
    result = await use_case.execute(payload)

    logger.info(
        "webhook_processed",
        extra={
            "correlation_id": correlation_id,
            "event_type": result.event_type,
            "object_type": result.object_type,
            "processed": result.processed,
            "processors_executed": result.processors_executed,
        },
    )

    return result
