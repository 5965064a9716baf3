"""Settings do cliente de pesquisa (OpenAI).

Usadas pelo processador Vancouver House 2: pesquisa de propriedades
vazias e do entorno de um imóvel, sempre com saída JSON.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_RESEARCH_MODEL = "gpt-4o"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class OpenAISettings:
    """Configurações da pesquisa via OpenAI.

    Attributes:
        api_key: Chave da API OpenAI
        research_model: Modelo das pesquisas de propriedades e entorno
        temperature: Temperatura das pesquisas (baixa para respostas factuais)
        max_output_tokens: Limite de tokens da resposta JSON
        timeout_seconds: Timeout por chamada
        max_retries: Retries do SDK em erro transitório
        enabled: Desliga a pesquisa sem remover a chave
    """

    api_key: str = ""
    research_model: str = DEFAULT_RESEARCH_MODEL
    temperature: float = 0.2
    max_output_tokens: int = 4096
    timeout_seconds: float = 60.0
    max_retries: int = 3
    enabled: bool = True

    @property
    def is_usable(self) -> bool:
        """True quando a pesquisa pode ser feita (habilitada e com chave)."""
        return self.enabled and bool(self.api_key)

    def validate(self) -> list[str]:
        """Valida as settings de pesquisa.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.enabled and not self.api_key:
            errors.append("OPENAI_API_KEY ausente com OPENAI_ENABLED=true")

        if not self.research_model:
            errors.append("OPENAI_RESEARCH_MODEL não pode ser vazio")

        if not 0.0 <= self.temperature <= 2.0:
            errors.append("OPENAI_TEMPERATURE deve estar entre 0 e 2")

        if self.max_output_tokens <= 0:
            errors.append("OPENAI_MAX_OUTPUT_TOKENS deve ser > 0")

        if self.timeout_seconds <= 0:
            errors.append("OPENAI_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("OPENAI_MAX_RETRIES deve ser >= 0")

        return errors


def _load_openai_from_env() -> OpenAISettings:
    """Carrega OpenAISettings de variáveis de ambiente."""
    return OpenAISettings(
        api_key=os.getenv("OPENAI_API_KEY", ""),
        research_model=os.getenv("OPENAI_RESEARCH_MODEL", DEFAULT_RESEARCH_MODEL),
        temperature=float(os.getenv("OPENAI_TEMPERATURE", "0.2")),
        max_output_tokens=int(os.getenv("OPENAI_MAX_OUTPUT_TOKENS", "4096")),
        timeout_seconds=float(os.getenv("OPENAI_TIMEOUT_SECONDS", "60")),
        max_retries=int(os.getenv("OPENAI_MAX_RETRIES", "3")),
        enabled=_env_flag("OPENAI_ENABLED", "true"),
    )


@lru_cache(maxsize=1)
def get_openai_settings() -> OpenAISettings:
    """Retorna instância cacheada de OpenAISettings."""
    return _load_openai_from_env()
