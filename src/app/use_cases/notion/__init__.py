"""Use cases de webhooks do Notion."""

from app.use_cases.notion.dispatch_webhook_event import (
    DispatchResult,
    DispatchWebhookEventUseCase,
)

__all__ = [
    "DispatchResult",
    "DispatchWebhookEventUseCase",
]
