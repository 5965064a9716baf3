"""Executor de playground: insere uma tabela de teste na página."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.payload_builders.notion import build_demo_table
from app.services.notion_predicates import extract_entity_id
from utils.errors import InfrastructureError, NotionApiError

if TYPE_CHECKING:
    from app.domain.webhook_events import WebhookEvent
    from app.protocols.notion_client import NotionClientProtocol

logger = logging.getLogger(__name__)


class InsertTestTableExecutor:
    """Acrescenta a tabela de demonstração ao corpo da página do evento."""

    __slots__ = ("_notion",)

    def __init__(self, notion_client: NotionClientProtocol) -> None:
        self._notion = notion_client

    async def __call__(self, event: WebhookEvent) -> bool:
        page_id = extract_entity_id(event)
        if not page_id:
            logger.error("insert_test_table_missing_page_id", extra={"event_id": event.id})
            return False

        try:
            await self._notion.append_block_children(page_id, build_demo_table())
        except (NotionApiError, InfrastructureError) as exc:
            logger.error(
                "insert_test_table_failed",
                extra={"page_id": page_id, "error": str(exc)},
            )
            return False

        logger.info("insert_test_table_appended", extra={"page_id": page_id})
        return True
