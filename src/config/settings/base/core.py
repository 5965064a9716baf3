"""Settings base do Notion_Relay.

Ambiente, identidade do serviço e saída de logs. O ambiente decide se
configuração inválida derruba o boot (staging/production) ou só alerta.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "production": "production",
    "prod": "production",
    "staging": "staging",
    "stage": "staging",
}
_STRICT_ENVIRONMENTS: frozenset[str] = frozenset({"staging", "production"})
LOG_FORMATS = ("json", "text")


@dataclass(frozen=True)
class BaseSettings:
    """Configurações comuns do serviço.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço injetado em todo log
        debug: Força nível DEBUG independente de LOG_LEVEL
        log_level: Nível mínimo de log
        log_format: json (agregação) ou text (leitura local)
    """

    environment: Environment = "development"
    service_name: str = "notion-relay"
    debug: bool = False
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def strict_validation(self) -> bool:
        """True quando settings inválidas devem impedir o boot."""
        return self.environment in _STRICT_ENVIRONMENTS

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level

    @property
    def json_logs(self) -> bool:
        return self.log_format != "text"

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if self.log_format not in LOG_FORMATS:
            errors.append("LOG_FORMAT deve ser 'json' ou 'text'")

        return errors


def parse_environment(raw: str) -> Environment:
    """Normaliza ENVIRONMENT; valores desconhecidos caem em development."""
    return _ENVIRONMENT_ALIASES.get(raw.strip().lower(), "development")


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    return BaseSettings(
        environment=parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "notion-relay"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_format=os.getenv("LOG_FORMAT", "json").lower(),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
