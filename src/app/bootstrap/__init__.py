"""Bootstrap da aplicação — logging e validação de settings.

Composition root do serviço: `initialize_app` configura o logging a partir
de BaseSettings; `validate_runtime_settings` roda no lifespan antes de
qualquer cliente ser criado. As factories de clientes e do registro de
processadores ficam em `clients.py` e `processors.py`.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_notion_settings, get_openai_settings

if TYPE_CHECKING:
    from collections.abc import Callable

SERVICE_NAME = "notion-relay"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado com correlation_id.

    Nível vem de LOG_LEVEL (DEBUG=true força DEBUG); formato de LOG_FORMAT.
    """
    base = get_base_settings()
    configure_logging(
        level=base.effective_log_level,
        service_name=base.service_name or SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
        json_output=base.json_logs,
    )


def _collect_settings_errors() -> list[str]:
    sections: tuple[tuple[str, Callable[[], list[str]]], ...] = (
        ("base", lambda: get_base_settings().validate()),
        ("notion", lambda: get_notion_settings().validate()),
        ("openai", lambda: get_openai_settings().validate()),
    )
    return [f"{name}: {error}" for name, validate in sections for error in validate()]


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em staging/production levanta RuntimeError (boot inválido não sobe);
    em development apenas registra os problemas.
    """
    base = get_base_settings()
    errors = _collect_settings_errors()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "environment": base.environment,
            "strict": base.strict_validation,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.strict_validation:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
