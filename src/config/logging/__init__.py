"""Logging estruturado do Notion_Relay.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="notion-relay")
    logger = get_logger(__name__)
    logger.info("processor_matched", extra={"processor_id": "abc"})

Todo registro carrega correlation_id e service. Payloads de webhook,
segredos e conteúdo de páginas nunca vão para os logs.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter, SensitiveFieldFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    TEXT_LOG_FORMAT,
    create_json_formatter,
    create_text_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "TEXT_LOG_FORMAT",
    "CorrelationIdFilter",
    "SensitiveFieldFilter",
    "configure_logging",
    "create_json_formatter",
    "create_text_formatter",
    "get_logger",
    "log_fallback",
]
