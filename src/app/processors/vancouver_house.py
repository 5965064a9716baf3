"""Processador do database Vancouver House 2.

Em `page.created` no database, pesquisa propriedades e entorno do imóvel.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.processor import ProcessorDefinition
from app.executors.property_research import PropertyResearchExecutor
from app.processors._switches import enabled_when_configured
from app.services.notion_predicates import is_entity_event_from_collection, is_event_of_type

if TYPE_CHECKING:
    from app.domain.webhook_events import WebhookEvent
    from app.protocols.notion_client import NotionClientProtocol
    from app.protocols.research_client import ResearchClientProtocol
    from config.settings import NotionSettings

VANCOUVER_HOUSE_PROCESSOR_ID = "b2c3d4e5-f6a7-8901-bcde-f12345678901"


def create_vancouver_house_processor(
    settings: NotionSettings,
    notion_client: NotionClientProtocol,
    research_client: ResearchClientProtocol,
) -> ProcessorDefinition:
    database_id = settings.vancouver_house_database_id

    def should_execute(event: WebhookEvent) -> bool:
        return is_event_of_type(event, "page.created") and is_entity_event_from_collection(
            event, database_id
        )

    return ProcessorDefinition(
        id=VANCOUVER_HOUSE_PROCESSOR_ID,
        name="Vancouver House 2 Processor",
        is_enabled=enabled_when_configured(settings, VANCOUVER_HOUSE_PROCESSOR_ID, database_id),
        should_execute=should_execute,
        executor=PropertyResearchExecutor(notion_client, research_client),
    )
