"""Registro de métricas via structured logging.

As métricas são logs estruturados com `metric_type`, agregáveis
posteriormente pela plataforma de logs.

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Despacho: processadores casados e bem-sucedidos por evento
- Tokens: uso de tokens nas pesquisas de IA
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "dispatcher", "notion_client")
        operation: Nome da operação (ex: "dispatch", "retrieve_page")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação (usa o do contexto se None)
    """
    extra: dict[str, object] = {
        "metric_type": "latency",
        "component": component,
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info("metric_latency", extra=extra)


def record_dispatch_outcome(
    event_type: str,
    matched: int,
    succeeded: int,
) -> None:
    """Registra o resultado agregado de um despacho de evento."""
    logger.info(
        "metric_dispatch",
        extra={
            "metric_type": "dispatch",
            "event_type": event_type,
            "processors_matched": matched,
            "processors_succeeded": succeeded,
            "processors_failed": matched - succeeded,
        },
    )


def record_token_usage(
    component: str,
    operation: str,
    prompt_tokens: int,
    completion_tokens: int,
    total_tokens: int,
) -> None:
    """Registra uso de tokens (custo) de uma chamada de IA."""
    logger.info(
        "metric_token_usage",
        extra={
            "metric_type": "token_usage",
            "component": component,
            "operation": operation,
            "prompt_tokens": prompt_tokens,
            "completion_tokens": completion_tokens,
            "total_tokens": total_tokens,
        },
    )
