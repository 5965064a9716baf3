"""Handshake de verificação da assinatura de webhook do Notion.

Ao criar a assinatura, o Notion envia um token `secret_...` que deve ser
ecoado em texto puro. Essa checagem roda antes da validação HMAC.
"""

from __future__ import annotations

import json

VERIFICATION_TOKEN_PREFIX = "secret_"

# Ordem de procura do token no corpo JSON
VERIFICATION_TOKEN_FIELDS = ("challenge", "token", "verification_token", "secret")


class InvalidVerificationRequestError(ValueError):
    """Corpo não é JSON nem um token de verificação em texto puro."""

    status_code = 400
    detail = "Invalid request format"


def extract_verification_token(raw_body: bytes) -> str | None:
    """Retorna o token a ecoar, ou None se não for handshake.

    Raises:
        InvalidVerificationRequestError: corpo não-JSON que não é token.
    """
    text = raw_body.decode("utf-8", errors="replace")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        if text.startswith(VERIFICATION_TOKEN_PREFIX):
            return text
        raise InvalidVerificationRequestError("invalid_request_format") from exc

    if not isinstance(payload, dict):
        return None

    for field_name in VERIFICATION_TOKEN_FIELDS:
        value = payload.get(field_name)
        if value:
            if isinstance(value, str) and value.startswith(VERIFICATION_TOKEN_PREFIX):
                return value
            return None
    return None
