"""Protocolo do cliente de pesquisa por IA."""

from __future__ import annotations

from typing import Protocol, TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


class ResearchClientProtocol(Protocol):
    """Chamada de IA com saída validada; None em qualquer falha."""

    async def research(
        self,
        *,
        system_prompt: str,
        user_prompt: str,
        response_model: type[ModelT],
        operation: str,
    ) -> ModelT | None: ...
