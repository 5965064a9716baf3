"""Executor de aquisições: registra novas páginas para auditoria."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.services.notion_predicates import extract_entity_id

if TYPE_CHECKING:
    from app.domain.webhook_events import WebhookEvent

logger = logging.getLogger(__name__)


async def log_new_acquisition(event: WebhookEvent) -> bool:
    page_id = extract_entity_id(event)
    if not page_id:
        logger.error("acquisition_missing_page_id", extra={"event_id": event.id})
        return False

    logger.info(
        "acquisition_page_created",
        extra={
            "page_id": page_id,
            "event_id": event.id,
            "workspace_id": event.workspace_id,
        },
    )
    return True
