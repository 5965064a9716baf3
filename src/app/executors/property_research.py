"""Executor de pesquisa de imóvel (Vancouver House 2).

Fluxo:
1. Lê a página e o schema do data source do database pai
2. Extrai o endereço das propriedades
3. Pesquisa em paralelo propriedades vazias e entorno (falhas independentes)
4. Grava propriedades preenchidas e acrescenta a seção de entorno à página
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ai.models.property_research import PropertyResearchResult, SurroundingsResearchResult
from ai.prompts.property_research_prompt import (
    PROPERTY_RESEARCH_SYSTEM,
    SURROUNDINGS_RESEARCH_SYSTEM,
    format_property_research_prompt,
    format_surroundings_research_prompt,
)
from api.connectors.notion.properties import (
    build_property_updates,
    find_missing_properties,
    simplify_data_source_schema,
    simplify_page_properties,
)
from api.payload_builders.notion import build_surroundings_blocks
from app.services.notion_predicates import extract_entity_id, extract_parent_collection_id
from config.logging import log_fallback
from utils.errors import InfrastructureError, NotionApiError

if TYPE_CHECKING:
    from app.domain.webhook_events import WebhookEvent
    from app.protocols.notion_client import NotionClientProtocol
    from app.protocols.research_client import ResearchClientProtocol

logger = logging.getLogger(__name__)

ADDRESS_PROPERTY_KEYS = ("Address", "address", "Property Address", "Location", "location")
TITLE_PROPERTY_KEYS = ("Name", "name", "Title", "title")

_NOTION_ERRORS = (NotionApiError, InfrastructureError)


def extract_address(values: Mapping[str, Any]) -> str | None:
    """Endereço a partir das propriedades; cai para o título da página."""
    for key in ADDRESS_PROPERTY_KEYS:
        value = values.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()

    title = next((values[key] for key in TITLE_PROPERTY_KEYS if values.get(key)), None)
    if isinstance(title, str) and title.strip():
        return title.strip()
    return None


def _page_parent_database_id(page: Mapping[str, Any]) -> str | None:
    parent = page.get("parent") or {}
    return parent.get("database_id") or None


class PropertyResearchExecutor:
    """Preenche propriedades e descreve o entorno de um imóvel recém-criado."""

    __slots__ = ("_notion", "_research")

    def __init__(
        self,
        notion_client: NotionClientProtocol,
        research_client: ResearchClientProtocol,
    ) -> None:
        self._notion = notion_client
        self._research = research_client

    async def __call__(self, event: WebhookEvent) -> bool:
        page_id = extract_entity_id(event)
        if not page_id:
            logger.error("property_research_missing_page_id", extra={"event_id": event.id})
            return False

        try:
            page = await self._notion.retrieve_page(page_id)
            database_id = extract_parent_collection_id(event) or _page_parent_database_id(page)
            if not database_id:
                logger.error("property_research_page_not_in_database", extra={"page_id": page_id})
                return False
            data_source = await self._notion.retrieve_database_data_source(database_id)
        except _NOTION_ERRORS as exc:
            logger.error(
                "property_research_fetch_failed",
                extra={"page_id": page_id, "error": str(exc)},
            )
            return False

        if data_source is None:
            logger.error("property_research_schema_unavailable", extra={"page_id": page_id})
            return False

        schema = simplify_data_source_schema(data_source)
        current_values = simplify_page_properties(page)
        address = extract_address(current_values)
        if not address:
            logger.warning("property_research_no_address", extra={"page_id": page_id})
            return True

        property_outcome, surroundings_outcome = await asyncio.gather(
            self._research_properties(schema, current_values, address),
            self._research_surroundings(address),
            return_exceptions=True,
        )
        properties = _settled(property_outcome, "property_research", page_id)
        surroundings = _settled(surroundings_outcome, "surroundings_research", page_id)

        writes_ok = True
        if properties is not None:
            writes_ok &= await self._write_properties(page_id, properties, schema)
        if surroundings is not None:
            writes_ok &= await self._append_surroundings(page_id, surroundings)

        logger.info(
            "property_research_completed",
            extra={
                "page_id": page_id,
                "properties_researched": properties is not None,
                "surroundings_researched": surroundings is not None,
                "writes_ok": writes_ok,
            },
        )
        return writes_ok

    # ── Pesquisas ────────────────────────────────────────────────────────────

    async def _research_properties(
        self,
        schema: dict[str, Any],
        current_values: dict[str, Any],
        address: str,
    ) -> PropertyResearchResult | None:
        missing = find_missing_properties(current_values)
        if not missing:
            logger.info("property_research_nothing_missing")
            return None

        result = await self._research.research(
            system_prompt=PROPERTY_RESEARCH_SYSTEM,
            user_prompt=format_property_research_prompt(
                address=address,
                schema=schema,
                current_values=current_values,
                missing_properties=missing,
            ),
            response_model=PropertyResearchResult,
            operation="property_research",
        )
        if result is None:
            log_fallback(logger, "property_research", reason="no_result")
        return result

    async def _research_surroundings(self, address: str) -> SurroundingsResearchResult | None:
        result = await self._research.research(
            system_prompt=SURROUNDINGS_RESEARCH_SYSTEM,
            user_prompt=format_surroundings_research_prompt(address=address),
            response_model=SurroundingsResearchResult,
            operation="surroundings_research",
        )
        if result is None:
            log_fallback(logger, "surroundings_research", reason="no_result")
        return result

    # ── Escritas ─────────────────────────────────────────────────────────────

    async def _write_properties(
        self,
        page_id: str,
        result: PropertyResearchResult,
        schema: dict[str, Any],
    ) -> bool:
        if not result.has_values():
            log_fallback(logger, "property_research", reason="no_values")
            return True
        plan = build_property_updates(result.filled_properties, schema)
        if not plan.properties:
            logger.info(
                "property_research_no_updates",
                extra={"page_id": page_id, "skipped_count": len(plan.skipped)},
            )
            return True
        try:
            await self._notion.update_page_properties(page_id, plan.properties)
        except _NOTION_ERRORS as exc:
            logger.error(
                "property_research_update_failed",
                extra={
                    "page_id": page_id,
                    "attempted_properties": sorted(plan.properties),
                    "error": str(exc),
                },
            )
            return False

        logger.info(
            "property_research_properties_updated",
            extra={
                "page_id": page_id,
                "updated_properties": sorted(plan.properties),
                "skipped_count": len(plan.skipped),
                "source_count": len(result.sources),
            },
        )
        return True

    async def _append_surroundings(
        self,
        page_id: str,
        surroundings: SurroundingsResearchResult,
    ) -> bool:
        try:
            await self._notion.append_block_children(
                page_id, build_surroundings_blocks(surroundings)
            )
        except _NOTION_ERRORS as exc:
            logger.error(
                "property_research_append_failed",
                extra={"page_id": page_id, "error": str(exc)},
            )
            return False
        logger.info("property_research_surroundings_appended", extra={"page_id": page_id})
        return True


def _settled(outcome: object, operation: str, page_id: str) -> Any:
    """Resultado de uma pesquisa paralela; exceção vira None (registrada)."""
    if isinstance(outcome, BaseException):
        if not isinstance(outcome, Exception):
            raise outcome
        logger.error(
            "property_research_branch_failed",
            extra={
                "operation": operation,
                "page_id": page_id,
                "error_type": type(outcome).__name__,
            },
        )
        return None
    return outcome
