"""Fila de despachos em background do webhook Notion.

Cada evento aceito em modo async vira uma task; o semáforo limita quantos
despachos rodam ao mesmo tempo e o conjunto ativo permite drenar no shutdown.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONCURRENT_DISPATCHES = 100

_dispatch_limit = asyncio.Semaphore(DEFAULT_MAX_CONCURRENT_DISPATCHES)
_active_tasks: set[asyncio.Task[Any]] = set()


def configure_dispatch_limit(max_concurrent: int) -> None:
    """Redefine o limite de despachos simultâneos (chamado no startup)."""
    global _dispatch_limit
    if max_concurrent < 1:
        raise ValueError("max_concurrent deve ser >= 1")
    _dispatch_limit = asyncio.Semaphore(max_concurrent)


def schedule_processing_task(
    *,
    correlation_id: str,
    coroutine: Awaitable[None],
    event_type: str | None = None,
) -> int:
    """Agenda o despacho em background e retorna quantas tasks estão ativas."""
    task = asyncio.create_task(
        _run_with_limit(coroutine),
        name=f"notion-dispatch:{correlation_id}",
    )
    _active_tasks.add(task)
    task.add_done_callback(_on_processing_task_done)
    logger.info(
        "webhook_processing_scheduled",
        extra={
            "channel": "notion",
            "correlation_id": correlation_id,
            "event_type": event_type,
            "mode": "async",
            "active_tasks": len(_active_tasks),
        },
    )
    return len(_active_tasks)


def active_task_count() -> int:
    return len(_active_tasks)


async def _run_with_limit(coroutine: Awaitable[None]) -> None:
    async with _dispatch_limit:
        await coroutine


def _on_processing_task_done(task: asyncio.Task[Any]) -> None:
    _active_tasks.discard(task)
    with contextlib.suppress(asyncio.CancelledError):
        exc = task.exception()
        if exc is not None:
            logger.error(
                "webhook_processing_task_failed",
                extra={
                    "channel": "notion",
                    "task_name": task.get_name(),
                    "error_type": type(exc).__name__,
                    "active_tasks": len(_active_tasks),
                },
            )


async def drain_processing_tasks(timeout_seconds: float = 30.0) -> int:
    """Aguarda despachos pendentes no shutdown; cancela o que passar do prazo.

    Returns:
        Quantidade de tasks canceladas.
    """
    if not _active_tasks:
        return 0

    in_flight = list(_active_tasks)
    logger.info(
        "webhook_processing_shutdown_wait",
        extra={
            "channel": "notion",
            "pending_tasks": len(in_flight),
            "timeout_seconds": timeout_seconds,
        },
    )
    _, overdue = await asyncio.wait(in_flight, timeout=timeout_seconds)
    if not overdue:
        return 0

    for task in overdue:
        task.cancel()
    await asyncio.gather(*overdue, return_exceptions=True)
    logger.warning(
        "webhook_processing_shutdown_cancelled",
        extra={"channel": "notion", "cancelled_tasks": len(overdue)},
    )
    return len(overdue)
