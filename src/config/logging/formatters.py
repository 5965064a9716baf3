"""Formatters de logging.

JSON (python-json-logger) para produção e texto para depuração local.
Ambos exibem correlation_id e service.
"""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

TEXT_LOG_FORMAT = (
    "%(asctime)s %(levelname)-8s [%(service)s] [%(correlation_id)s] "
    "%(name)s: %(message)s"
)


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-02-02 10:30:00,123",
            "level": "INFO",
            "logger": "app.use_cases.notion.dispatch_webhook_event",
            "message": "webhook_event_dispatched",
            "correlation_id": "abc-123",
            "service": "notion-relay",
            "processors_executed": 1
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )


def create_text_formatter() -> logging.Formatter:
    """Cria formatter de texto legível."""
    return logging.Formatter(TEXT_LOG_FORMAT)
