"""Webhook lite: autenticação por chave de API em vez de HMAC."""

from __future__ import annotations

import hmac
import json
from typing import TYPE_CHECKING, Any

from .receive import InvalidJsonError, WebhookRequestError

if TYPE_CHECKING:
    from collections.abc import Mapping

BEARER_PREFIX = "Bearer "


class MissingApiKeyError(WebhookRequestError):
    status_code = 401
    detail = "Missing API key (use authorization: Bearer <key> or x-api-key header)"


class ApiKeyNotConfiguredError(WebhookRequestError):
    status_code = 500
    detail = "API key not configured"


class InvalidApiKeyError(WebhookRequestError):
    status_code = 401
    detail = "Invalid API key"


def extract_api_key(headers: Mapping[str, str]) -> str | None:
    """Lê a chave do `Authorization: Bearer` ou, em seguida, do `X-API-Key`."""
    auth_header = headers.get("authorization") or ""
    if auth_header.startswith(BEARER_PREFIX):
        return auth_header[len(BEARER_PREFIX):] or None
    return headers.get("x-api-key") or None


def parse_lite_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    api_key: str | None,
) -> Any:
    """Autentica a requisição lite e parseia o JSON.

    Raises:
        MissingApiKeyError: nenhuma chave enviada
        ApiKeyNotConfiguredError: chave não configurada no servidor
        InvalidApiKeyError: chave não confere
        InvalidJsonError: corpo não é JSON
    """
    provided = extract_api_key(headers)
    if not provided:
        raise MissingApiKeyError("missing_api_key")
    if not api_key:
        raise ApiKeyNotConfiguredError("api_key_not_configured")
    if not hmac.compare_digest(provided.encode("utf-8"), api_key.encode("utf-8")):
        raise InvalidApiKeyError("invalid_api_key")

    try:
        return json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc
