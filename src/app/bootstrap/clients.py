"""Factories de clientes externos — HTTP, Notion e OpenAI.

Os clientes são criados explicitamente no startup (lifespan), guardados
em `app.state` e injetados nos executores. Não há singleton de módulo.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from api.connectors.notion.http_client import create_notion_client as _create_notion_client
from app.infra.ai import create_research_client as _create_research_client

if TYPE_CHECKING:
    from api.connectors.notion.http_client import NotionClient
    from app.infra.ai import ResearchClient
    from config.settings import NotionSettings, OpenAISettings

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# HTTP
# ──────────────────────────────────────────────────────────────────────────────


def create_http_client(timeout_seconds: float = 30.0) -> httpx.AsyncClient:
    """Cria o httpx.AsyncClient compartilhado (pool de conexões)."""
    client = httpx.AsyncClient(
        timeout=httpx.Timeout(timeout_seconds),
        limits=httpx.Limits(max_connections=50, max_keepalive_connections=20),
    )
    logger.info("http_client_created", extra={"timeout_seconds": timeout_seconds})
    return client


# ──────────────────────────────────────────────────────────────────────────────
# Notion
# ──────────────────────────────────────────────────────────────────────────────


def create_notion_client(
    settings: NotionSettings,
    http_client: httpx.AsyncClient | None = None,
) -> NotionClient | None:
    """Cria cliente Notion; None quando NOTION_API_KEY não está configurado."""
    if not settings.api_key:
        logger.warning(
            "notion_client_not_configured",
            extra={"component": "bootstrap", "reason": "missing_api_key"},
        )
        return None
    client = _create_notion_client(settings, client=http_client)
    logger.info("notion_client_created", extra={"api_version": settings.api_version})
    return client


# ──────────────────────────────────────────────────────────────────────────────
# OpenAI
# ──────────────────────────────────────────────────────────────────────────────


def create_research_client(settings: OpenAISettings) -> ResearchClient | None:
    """Cria cliente de pesquisa; None quando OpenAI está desabilitado ou sem chave."""
    if not settings.is_usable:
        logger.warning(
            "research_client_not_configured",
            extra={
                "component": "bootstrap",
                "enabled": settings.enabled,
                "has_api_key": bool(settings.api_key),
            },
        )
        return None
    client = _create_research_client(settings)
    logger.info("research_client_created", extra={"model": settings.research_model})
    return client
