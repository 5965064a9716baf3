"""Gerenciamento de correlation_id para rastreamento de webhooks.

Usa ContextVar para ser async-safe: cada requisição (e cada task de
processamento em background, que copia o contexto) enxerga o seu próprio ID.

Uso:
    token = set_correlation_id(correlation_id_from_headers(request.headers))
    try:
        ...
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

# Ordem de precedência dos headers aceitos
CORRELATION_ID_HEADERS: tuple[str, ...] = ("x-correlation-id", "x-railway-request-id")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = correlation_id or generate_correlation_id()
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())


def correlation_id_from_headers(headers: Mapping[str, str]) -> str:
    """Extrai o correlation_id dos headers ou gera um novo."""
    for name in CORRELATION_ID_HEADERS:
        value = headers.get(name)
        if value:
            return value
    return generate_correlation_id()
