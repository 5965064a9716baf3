"""Cliente OpenAI para pesquisas estruturadas (saída JSON validada).

Implementação de IO: pertence a app/infra. Falhas de rede, resposta vazia,
JSON inválido ou schema incompatível resultam em None.
"""

from __future__ import annotations

import json
import logging
import time
from typing import TypeVar

from openai import AsyncOpenAI
from pydantic import BaseModel, ValidationError

from ai.utils._json_extractor import extract_json_from_response
from app.observability import record_latency, record_token_usage
from config.settings.ai.openai import OpenAISettings, get_openai_settings

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ResearchClient:
    """Cliente LLM que devolve respostas já validadas por um model pydantic."""

    __slots__ = ("_client", "_model", "_temperature", "_timeout_seconds", "_max_tokens")

    def __init__(
        self,
        *,
        settings: OpenAISettings | None = None,
        api_key: str | None = None,
        model: str | None = None,
        timeout_seconds: float | None = None,
        max_tokens: int | None = None,
        client: AsyncOpenAI | None = None,
    ) -> None:
        cfg = settings or get_openai_settings()
        self._model = model or cfg.research_model
        self._temperature = cfg.temperature
        self._timeout_seconds = float(timeout_seconds or cfg.timeout_seconds)
        self._max_tokens = max_tokens or cfg.max_output_tokens
        if client is not None:
            self._client = client
        else:
            self._client = AsyncOpenAI(
                api_key=api_key or cfg.api_key,
                timeout=self._timeout_seconds,
                max_retries=cfg.max_retries,
            )

    async def aclose(self) -> None:
        await self._client.close()

    async def research(
        self,
        *,
        system_prompt: str,
        user_prompt: str,
        response_model: type[ModelT],
        operation: str,
    ) -> ModelT | None:
        """Executa a chamada e valida o JSON contra `response_model`."""
        started = time.perf_counter()
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                response_format={"type": "json_object"},
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except Exception as exc:
            logger.warning(
                "research_openai_error",
                extra={"operation": operation, "error_type": type(exc).__name__},
            )
            return None
        finally:
            record_latency("research_client", operation, (time.perf_counter() - started) * 1000)

        usage = getattr(response, "usage", None)
        if usage is not None:
            record_token_usage(
                "research_client",
                operation,
                prompt_tokens=usage.prompt_tokens,
                completion_tokens=usage.completion_tokens,
                total_tokens=usage.total_tokens,
            )

        content = response.choices[0].message.content if response.choices else None
        if not content:
            logger.warning("research_empty_response", extra={"operation": operation})
            return None

        try:
            data = json.loads(content)
        except json.JSONDecodeError:
            data = extract_json_from_response(content)
        if not isinstance(data, dict):
            logger.warning("research_parse_failed", extra={"operation": operation})
            return None

        try:
            return response_model.model_validate(data)
        except ValidationError as exc:
            logger.warning(
                "research_schema_mismatch",
                extra={"operation": operation, "error_count": exc.error_count()},
            )
            return None


def create_research_client(settings: OpenAISettings) -> ResearchClient:
    """Factory do cliente de pesquisa a partir das settings."""
    return ResearchClient(settings=settings)
