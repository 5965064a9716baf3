"""Classificação e parsing de erros da API do Notion."""

from __future__ import annotations

from typing import Any

from utils.errors import NotionApiError

# Códigos de erro da API que não adianta repetir
PERMANENT_ERROR_CODES = frozenset(
    {
        "invalid_json",
        "invalid_request_url",
        "invalid_request",
        "validation_error",
        "missing_version",
        "unauthorized",
        "restricted_resource",
        "object_not_found",
    }
)


def is_permanent_error(status_code: int, code: str) -> bool:
    """Classifica erro como permanente ou transitório.

    Transitórios: 409 (conflict_error), 429 (rate_limited), 5xx.
    """
    if status_code in (409, 429) or status_code >= 500:
        return False
    return code in PERMANENT_ERROR_CODES or 400 <= status_code < 500


def parse_notion_error(status_code: int, response_data: Any) -> NotionApiError:
    """Monta NotionApiError a partir do corpo `{"object": "error", ...}`."""
    data = response_data if isinstance(response_data, dict) else {}
    code = str(data.get("code") or "unknown")
    message = str(data.get("message") or "Erro desconhecido")
    return NotionApiError(
        message,
        status_code=status_code,
        code=code,
        is_permanent=is_permanent_error(status_code, code),
    )


__all__ = [
    "PERMANENT_ERROR_CODES",
    "NotionApiError",
    "is_permanent_error",
    "parse_notion_error",
]
