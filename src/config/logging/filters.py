"""Filters de logging do serviço.

- CorrelationIdFilter: injeta correlation_id e service em todo record
- SensitiveFieldFilter: mascara segredos passados via `extra`
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Sem ela, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; nunca descarta.

        Um correlation_id passado via `extra` tem precedência.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


REDACTED = "[redacted]"

# Atributos de `extra` que nunca saem em claro
SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {
        "api_key",
        "authorization",
        "secret",
        "signature",
        "token",
        "verification_token",
        "webhook_secret",
    }
)


class SensitiveFieldFilter(logging.Filter):
    """Mascara atributos sensíveis passados via `extra`."""

    def __init__(self, fields: frozenset[str] = SENSITIVE_FIELDS) -> None:
        super().__init__()
        self._fields = fields

    def filter(self, record: logging.LogRecord) -> bool:
        for name in self._fields.intersection(record.__dict__):
            if record.__dict__[name]:
                record.__dict__[name] = REDACTED
        return True
