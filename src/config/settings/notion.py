"""Settings específicas do Notion.

Configurações de webhook, API e processadores de eventos do Notion.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

# Constantes da API do Notion
NOTION_API_VERSION: str = "2025-09-03"
NOTION_API_BASE_URL: str = "https://api.notion.com/v1"


def _parse_csv(raw: str) -> frozenset[str]:
    """Converte lista separada por vírgula em conjunto imutável."""
    return frozenset(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class NotionSettings:
    """Configurações do Notion.

    Attributes:
        webhook_secret: Secret para validação HMAC do header X-Notion-Signature
        lite_api_key: Chave aceita pelo webhook lite (Bearer ou X-API-Key)
        api_key: Token da integração para chamadas à API do Notion
        api_version: Versão da API (header Notion-Version)
        api_base_url: URL base da API
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Máximo de tentativas em caso de erro transitório
        webhook_processing_mode: Modo de processamento do webhook (async|inline)
        processor_timeout_seconds: Timeout por executor (0 = sem limite)
        max_concurrent_dispatches: Limite de despachos simultâneos em modo async
        disabled_processors: IDs de processadores desligados (kill-switch)
        glens_playground_database_id: Database do processador de playground
        vancouver_house_database_id: Database do processador Vancouver House 2
        small_business_acquisition_database_id: Database de aquisições
    """

    # Credenciais
    webhook_secret: str = ""
    lite_api_key: str = ""
    api_key: str = ""

    # API
    api_version: str = NOTION_API_VERSION
    api_base_url: str = NOTION_API_BASE_URL

    # Timeouts e retries
    request_timeout_seconds: float = 30.0
    max_retries: int = 3

    # Processamento
    webhook_processing_mode: str = "async"
    processor_timeout_seconds: float = 0.0
    max_concurrent_dispatches: int = 100
    disabled_processors: frozenset[str] = field(default_factory=frozenset)

    # Databases alvo
    glens_playground_database_id: str = ""
    vancouver_house_database_id: str = ""
    small_business_acquisition_database_id: str = ""

    def is_processor_disabled(self, processor_id: str) -> bool:
        """Retorna True se o processador foi desligado via configuração."""
        return processor_id in self.disabled_processors

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Notion.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.webhook_secret:
            errors.append("NOTION_WEBHOOK_SECRET não configurado")

        if not self.api_key:
            errors.append("NOTION_API_KEY não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("NOTION_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("NOTION_MAX_RETRIES deve ser >= 0")

        if self.processor_timeout_seconds < 0:
            errors.append("NOTION_PROCESSOR_TIMEOUT_SECONDS deve ser >= 0")

        if self.max_concurrent_dispatches < 1:
            errors.append("NOTION_MAX_CONCURRENT_DISPATCHES deve ser >= 1")

        if self.webhook_processing_mode not in ("async", "inline"):
            errors.append(
                "NOTION_WEBHOOK_PROCESSING_MODE deve ser 'async' ou 'inline'"
            )

        return errors


def _load_from_env() -> NotionSettings:
    """Carrega NotionSettings a partir de variáveis de ambiente."""
    environment = os.getenv("ENVIRONMENT", "").lower()
    default_processing_mode = (
        "inline" if environment in ("staging", "development", "dev", "test") else "async"
    )
    return NotionSettings(
        webhook_secret=os.getenv("NOTION_WEBHOOK_SECRET", ""),
        lite_api_key=os.getenv("LITE_WEBHOOK_API_KEY", ""),
        api_key=os.getenv("NOTION_API_KEY", ""),
        api_version=os.getenv("NOTION_API_VERSION", NOTION_API_VERSION),
        api_base_url=os.getenv("NOTION_API_BASE_URL", NOTION_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("NOTION_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        max_retries=int(os.getenv("NOTION_MAX_RETRIES", "3")),
        webhook_processing_mode=os.getenv(
            "NOTION_WEBHOOK_PROCESSING_MODE", default_processing_mode
        ).lower(),
        processor_timeout_seconds=float(
            os.getenv("NOTION_PROCESSOR_TIMEOUT_SECONDS", "0")
        ),
        max_concurrent_dispatches=int(
            os.getenv("NOTION_MAX_CONCURRENT_DISPATCHES", "100")
        ),
        disabled_processors=_parse_csv(os.getenv("NOTION_DISABLED_PROCESSORS", "")),
        glens_playground_database_id=os.getenv("NOTION_DATABASE_GLENS_PLAYGROUND", ""),
        vancouver_house_database_id=os.getenv("NOTION_DATABASE_VANCOUVER_HOUSE_2", ""),
        small_business_acquisition_database_id=os.getenv(
            "NOTION_DATABASE_SMALL_BUSINESS_ACQUISITION", ""
        ),
    )


@lru_cache(maxsize=1)
def get_notion_settings() -> NotionSettings:
    """Retorna instância cacheada de NotionSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
