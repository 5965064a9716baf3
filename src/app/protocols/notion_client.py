"""Protocolo do cliente da API do Notion usado pelos executores.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import Any, Protocol


class NotionClientProtocol(Protocol):
    """Contrato mínimo de leitura e escrita no Notion."""

    async def retrieve_page(self, page_id: str) -> dict[str, Any]: ...

    async def update_page_properties(
        self,
        page_id: str,
        properties: dict[str, Any],
    ) -> dict[str, Any]: ...

    async def retrieve_database_data_source(
        self,
        database_id: str,
    ) -> dict[str, Any] | None: ...

    async def append_block_children(
        self,
        block_id: str,
        children: list[dict[str, Any]],
    ) -> dict[str, Any]: ...
