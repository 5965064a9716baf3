"""Runtime helpers para processamento do webhook Notion."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.routes.notion.webhook_runtime_tasks import (
    drain_processing_tasks,
    schedule_processing_task,
)
from app.coordinators.notion.handler import process_webhook_payload
from utils.errors import InfrastructureError, InvalidPayloadError

if TYPE_CHECKING:
    from fastapi import Request

    from app.domain.webhook_events import WebhookEvent
    from app.use_cases.notion import DispatchResult, DispatchWebhookEventUseCase
    from config.settings import NotionSettings

logger = logging.getLogger(__name__)


def get_dispatch_use_case(request: Request) -> DispatchWebhookEventUseCase | None:
    """Use case montado no lifespan (None se o startup não o criou)."""
    return getattr(request.app.state, "dispatch_use_case", None)


async def process_webhook_payload_safe(
    *,
    event: WebhookEvent,
    correlation_id: str,
    use_case: DispatchWebhookEventUseCase,
) -> DispatchResult | None:
    """Executa o despacho com classificação explícita de erros."""
    try:
        return await process_webhook_payload(
            payload=event,
            correlation_id=correlation_id,
            use_case=use_case,
        )
    except InvalidPayloadError as exc:
        logger.warning(
            "webhook_processing_validation_failed",
            extra={
                "channel": "notion",
                "correlation_id": correlation_id,
                "error": str(exc),
            },
        )
        return None
    except InfrastructureError as exc:
        logger.error(
            "webhook_processing_infra_failed",
            extra={
                "channel": "notion",
                "correlation_id": correlation_id,
                "error_type": type(exc).__name__,
            },
        )
        return None
    except Exception:
        logger.exception(
            "webhook_processing_failed",
            extra={
                "channel": "notion",
                "correlation_id": correlation_id,
            },
        )
        return None


async def dispatch_webhook_processing(
    *,
    event: WebhookEvent,
    correlation_id: str,
    settings: NotionSettings,
    use_case: DispatchWebhookEventUseCase | None,
) -> dict[str, Any]:
    """Despacha processamento inline ou async conforme configuração.

    No modo inline, erros inesperados propagam para a rota (500).

    Returns:
        Corpo da resposta HTTP de sucesso.
    """
    if use_case is None:
        _log_use_case_unavailable(correlation_id)
        return {"success": True, "status": "received", "processed": False}

    processing_mode = (settings.webhook_processing_mode or "async").lower()
    if processing_mode == "inline":
        result = await process_webhook_payload(
            payload=event,
            correlation_id=correlation_id,
            use_case=use_case,
        )
        logger.info(
            "webhook_processing_completed",
            extra={
                "channel": "notion",
                "correlation_id": correlation_id,
                "mode": "inline",
            },
        )
        return {"success": True, **result.to_dict()}

    schedule_processing_task(
        correlation_id=correlation_id,
        event_type=event.type,
        coroutine=_run_in_background(
            event=event,
            correlation_id=correlation_id,
            use_case=use_case,
        ),
    )
    return {"success": True, "status": "received"}


async def _run_in_background(
    *,
    event: WebhookEvent,
    correlation_id: str,
    use_case: DispatchWebhookEventUseCase,
) -> None:
    await process_webhook_payload_safe(
        event=event,
        correlation_id=correlation_id,
        use_case=use_case,
    )


def _log_use_case_unavailable(correlation_id: str) -> None:
    logger.warning(
        "webhook_use_case_unavailable",
        extra={
            "channel": "notion",
            "correlation_id": correlation_id,
            "reason": "DispatchWebhookEventUseCase not initialized",
        },
    )


async def drain_background_tasks(timeout_seconds: float = 30.0) -> int:
    """Aguarda tasks async pendentes durante shutdown do processo."""
    return await drain_processing_tasks(timeout_seconds=timeout_seconds)
