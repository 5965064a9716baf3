"""Processador do database Glen's Playground: tabela de teste em páginas."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.processor import ProcessorDefinition
from app.executors.insert_test_table import InsertTestTableExecutor
from app.processors._switches import enabled_when_configured
from app.services.notion_predicates import is_entity_event_from_collection

if TYPE_CHECKING:
    from app.protocols.notion_client import NotionClientProtocol
    from config.settings import NotionSettings

GLENS_PLAYGROUND_PROCESSOR_ID = "a1b2c3d4-e5f6-7890-abcd-ef1234567890"


def create_glens_playground_processor(
    settings: NotionSettings,
    notion_client: NotionClientProtocol,
) -> ProcessorDefinition:
    database_id = settings.glens_playground_database_id
    return ProcessorDefinition(
        id=GLENS_PLAYGROUND_PROCESSOR_ID,
        name="Glen's Playground Processor",
        is_enabled=enabled_when_configured(settings, GLENS_PLAYGROUND_PROCESSOR_ID, database_id),
        should_execute=lambda event: is_entity_event_from_collection(event, database_id),
        executor=InsertTestTableExecutor(notion_client),
    )
