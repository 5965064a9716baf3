"""Montagem do registro de processadores.

A ordem de registro é a ordem de iteração; processadores cujas
dependências (clientes) não estão disponíveis não são registrados.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.processors import (
    GLENS_PLAYGROUND_PROCESSOR_ID,
    VANCOUVER_HOUSE_PROCESSOR_ID,
    create_glens_playground_processor,
    create_small_business_acquisition_processor,
    create_vancouver_house_processor,
)
from app.services.processor_registry import ProcessorRegistry

if TYPE_CHECKING:
    from app.domain.processor import ProcessorDefinition
    from app.protocols.notion_client import NotionClientProtocol
    from app.protocols.research_client import ResearchClientProtocol
    from config.settings import NotionSettings

logger = logging.getLogger(__name__)


def create_processor_registry(
    settings: NotionSettings,
    notion_client: NotionClientProtocol | None,
    research_client: ResearchClientProtocol | None,
) -> ProcessorRegistry:
    """Cria o registro imutável com todos os processadores disponíveis.

    Raises:
        DuplicateProcessorIdError: dois processadores com o mesmo id.
    """
    processors: list[ProcessorDefinition] = []

    if notion_client is not None:
        processors.append(create_glens_playground_processor(settings, notion_client))
    else:
        _log_skipped(GLENS_PLAYGROUND_PROCESSOR_ID, "notion_client_unavailable")

    if notion_client is not None and research_client is not None:
        processors.append(
            create_vancouver_house_processor(settings, notion_client, research_client)
        )
    else:
        reason = "notion_client_unavailable" if notion_client is None else "research_client_unavailable"
        _log_skipped(VANCOUVER_HOUSE_PROCESSOR_ID, reason)

    processors.append(create_small_business_acquisition_processor(settings))

    registry = ProcessorRegistry(processors)
    logger.info(
        "processor_registry_created",
        extra={
            "component": "bootstrap",
            "processor_count": len(registry),
            "processor_ids": [p.id for p in registry],
            "disabled_processors": sorted(settings.disabled_processors),
        },
    )
    return registry


def _log_skipped(processor_id: str, reason: str) -> None:
    logger.warning(
        "processor_not_registered",
        extra={"component": "bootstrap", "processor_id": processor_id, "reason": reason},
    )
