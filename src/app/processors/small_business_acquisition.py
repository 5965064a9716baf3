"""Processador do database Small Business Acquisition (auditoria de criação)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.processor import ProcessorDefinition
from app.executors.small_business_acquisition import log_new_acquisition
from app.processors._switches import enabled_when_configured
from app.services.notion_predicates import is_entity_event_from_collection, is_event_of_type

if TYPE_CHECKING:
    from app.domain.webhook_events import WebhookEvent
    from config.settings import NotionSettings

SMALL_BUSINESS_ACQUISITION_PROCESSOR_ID = "c3d4e5f6-a7b8-9012-cdef-123456789012"


def create_small_business_acquisition_processor(settings: NotionSettings) -> ProcessorDefinition:
    database_id = settings.small_business_acquisition_database_id

    def should_execute(event: WebhookEvent) -> bool:
        return is_event_of_type(event, {"page.created"}) and is_entity_event_from_collection(
            event, database_id
        )

    return ProcessorDefinition(
        id=SMALL_BUSINESS_ACQUISITION_PROCESSOR_ID,
        name="Small Business Acquisition Processor",
        is_enabled=enabled_when_configured(
            settings, SMALL_BUSINESS_ACQUISITION_PROCESSOR_ID, database_id
        ),
        should_execute=should_execute,
        executor=log_new_acquisition,
    )
