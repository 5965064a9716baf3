"""Cliente HTTP base com retry para conectores da camada API."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({409, 429})


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    max_retries: int = 3
    backoff_base_seconds: float = 1.0
    backoff_max_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
        retry_after_seconds: float | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable
        self.retry_after_seconds = retry_after_seconds


def is_retryable_status(status_code: int) -> bool:
    """429 (rate limit), 409 (conflito transitório) e 5xx são retentáveis."""
    return status_code in RETRYABLE_STATUS_CODES or status_code >= 500


def parse_retry_after(response: httpx.Response) -> float | None:
    """Segundos do header Retry-After (formato numérico); None se ausente."""
    raw = response.headers.get("retry-after")
    if raw is None:
        return None
    try:
        return max(float(raw), 0.0)
    except ValueError:
        return None


class HttpClient:
    """Cliente HTTP com retry e backoff exponencial.

    Reaproveita um httpx.AsyncClient injetado (pool de conexões); sem ele,
    cria um por tentativa.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()

    async def request(
        self,
        method: str,
        url: str,
        *,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa a requisição; retorna a resposta final (2xx ou erro permanente).

        Raises:
            HttpError: status retentável ou falha de conexão após esgotar tentativas.
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        for attempt in range(self._config.max_retries + 1):
            try:
                response = await self._send(method, url, json, merged_headers)
                if is_retryable_status(response.status_code):
                    raise HttpError(
                        "http_retryable_status",
                        status_code=response.status_code,
                        is_retryable=True,
                        retry_after_seconds=parse_retry_after(response),
                    )
                return response
            except HttpError as exc:
                if not exc.is_retryable or attempt >= self._config.max_retries:
                    raise
                await _backoff_sleep(
                    attempt,
                    self._config.backoff_base_seconds,
                    self._config.backoff_max_seconds,
                    retry_after=exc.retry_after_seconds,
                )
            except (httpx.TimeoutException, httpx.ConnectError) as exc:
                if attempt >= self._config.max_retries:
                    raise HttpError("http_connection_error", is_retryable=True) from exc
                await _backoff_sleep(
                    attempt,
                    self._config.backoff_base_seconds,
                    self._config.backoff_max_seconds,
                )
        raise HttpError("http_retry_exhausted", is_retryable=True)

    async def _send(
        self,
        method: str,
        url: str,
        json: dict[str, Any] | None,
        headers: dict[str, str],
    ) -> httpx.Response:
        if self._client is not None:
            return await self._client.request(
                method,
                url,
                json=json,
                headers=headers,
                timeout=self._config.timeout_seconds,
            )
        async with httpx.AsyncClient() as client:
            return await client.request(
                method,
                url,
                json=json,
                headers=headers,
                timeout=self._config.timeout_seconds,
            )


async def _backoff_sleep(
    attempt: int,
    base: float,
    max_seconds: float,
    retry_after: float | None = None,
) -> None:
    backoff = retry_after if retry_after is not None else (2**attempt) * base
    backoff = min(backoff, max_seconds)
    logger.info("http_backoff", extra={"attempt": attempt, "backoff_seconds": backoff})
    await asyncio.sleep(backoff)
