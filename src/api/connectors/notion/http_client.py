"""Cliente HTTP especializado para a API do Notion.

Estende HttpClient com:
- Headers de autenticação e Notion-Version
- Parsing de erros `{"object": "error", "code", "message"}`
- Logging estruturado sem conteúdo de páginas nem tokens
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from api.connectors.notion.errors import NotionApiError, parse_notion_error
from api.connectors.notion.http_base import HttpClient, HttpClientConfig, HttpError
from app.observability import record_latency
from utils.errors import NotionUnavailableError

if TYPE_CHECKING:
    import httpx

    from config.settings import NotionSettings

logger: logging.Logger = logging.getLogger(__name__)


class NotionClient(HttpClient):
    """Cliente da API do Notion (pages, databases, data sources, blocks)."""

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str,
        api_version: str,
        config: HttpClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if not api_key or not api_key.strip():
            raise ValueError(
                "api_key é obrigatório para a API do Notion. "
                "Verifique se NOTION_API_KEY está configurado."
            )
        base_config = config or HttpClientConfig()
        notion_config = replace(
            base_config,
            default_headers={
                **base_config.default_headers,
                "Authorization": f"Bearer {api_key}",
                "Notion-Version": api_version,
                "Content-Type": "application/json",
            },
        )
        super().__init__(notion_config, client=client)
        self._base_url = base_url.rstrip("/")

    # ── Pages ────────────────────────────────────────────────────────────────

    async def retrieve_page(self, page_id: str) -> dict[str, Any]:
        return await self._call("GET", f"/pages/{page_id}", operation="retrieve_page")

    async def update_page_properties(
        self,
        page_id: str,
        properties: dict[str, Any],
    ) -> dict[str, Any]:
        return await self._call(
            "PATCH",
            f"/pages/{page_id}",
            json={"properties": properties},
            operation="update_page_properties",
        )

    # ── Databases / data sources ─────────────────────────────────────────────

    async def retrieve_database(self, database_id: str) -> dict[str, Any]:
        return await self._call(
            "GET", f"/databases/{database_id}", operation="retrieve_database"
        )

    async def retrieve_data_source(self, data_source_id: str) -> dict[str, Any]:
        return await self._call(
            "GET", f"/data_sources/{data_source_id}", operation="retrieve_data_source"
        )

    async def retrieve_database_data_source(self, database_id: str) -> dict[str, Any] | None:
        """Retorna o primeiro data source do database (schema das propriedades).

        Returns:
            Data source ou None se o database não tiver nenhum.
        """
        database = await self.retrieve_database(database_id)
        data_sources = database.get("data_sources") or []
        first = data_sources[0] if data_sources else None
        if not isinstance(first, dict) or not first.get("id"):
            logger.warning(
                "notion_database_without_data_source",
                extra={"database_id": database_id},
            )
            return None
        return await self.retrieve_data_source(first["id"])

    # ── Blocks ───────────────────────────────────────────────────────────────

    async def append_block_children(
        self,
        block_id: str,
        children: list[dict[str, Any]],
    ) -> dict[str, Any]:
        return await self._call(
            "PATCH",
            f"/blocks/{block_id}/children",
            json={"children": children},
            operation="append_block_children",
        )

    # ── Internos ─────────────────────────────────────────────────────────────

    async def _call(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Executa chamada e devolve o JSON de sucesso.

        Raises:
            NotionApiError: resposta de erro da API.
            NotionUnavailableError: retentativas esgotadas ou falha de conexão.
        """
        started = time.perf_counter()
        try:
            response = await self.request(method, f"{self._base_url}{path}", json=json)
        except HttpError as exc:
            logger.error(
                "notion_api_unavailable",
                extra={
                    "operation": operation,
                    "status_code": exc.status_code,
                    "error": str(exc),
                },
            )
            raise NotionUnavailableError(f"Notion API indisponível: {operation}") from exc
        finally:
            record_latency("notion_client", operation, (time.perf_counter() - started) * 1000)

        return self._process_response(response, operation)

    def _process_response(self, response: httpx.Response, operation: str) -> dict[str, Any]:
        try:
            data = response.json()
        except json.JSONDecodeError as exc:
            logger.error(
                "notion_api_invalid_json",
                extra={"operation": operation, "status_code": response.status_code},
            )
            raise NotionApiError(
                "Response JSON inválido",
                status_code=response.status_code,
                code="invalid_response",
            ) from exc

        if response.status_code >= 400:
            error = parse_notion_error(response.status_code, data)
            logger.warning(
                "notion_api_error",
                extra={
                    "operation": operation,
                    "status_code": error.status_code,
                    "code": error.code,
                    "is_permanent": error.is_permanent,
                },
            )
            raise error

        logger.debug(
            "notion_api_success",
            extra={"operation": operation, "status_code": response.status_code},
        )
        return data if isinstance(data, dict) else {}


def create_notion_client(
    settings: NotionSettings,
    *,
    client: httpx.AsyncClient | None = None,
) -> NotionClient:
    """Factory para criar cliente Notion a partir das settings."""
    config = HttpClientConfig(
        timeout_seconds=settings.request_timeout_seconds,
        max_retries=settings.max_retries,
    )
    return NotionClient(
        api_key=settings.api_key,
        base_url=settings.api_base_url,
        api_version=settings.api_version,
        config=config,
        client=client,
    )
