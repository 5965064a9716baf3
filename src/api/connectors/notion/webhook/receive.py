"""Validação de assinatura e parse do webhook de integração (sem PII)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from ..signature import SignatureResult, verify_notion_signature

if TYPE_CHECKING:
    from collections.abc import Mapping


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook.

    Attributes:
        status_code: Status HTTP a responder
        detail: Texto de resposta (sem dados sensíveis)
    """

    status_code: int = 400
    detail: str = "Invalid webhook request"

    def __init__(self, reason: str | None = None) -> None:
        super().__init__(reason or self.detail)
        self.reason = reason or self.detail


class MissingSignatureError(WebhookRequestError):
    status_code = 401
    detail = "Missing X-Notion-Signature header"


class WebhookSecretNotConfiguredError(WebhookRequestError):
    status_code = 500
    detail = "Webhook secret not configured"


class InvalidSignatureError(WebhookRequestError):
    """Assinatura inválida do webhook."""

    status_code = 401
    detail = "Invalid webhook signature"


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no payload do webhook."""

    status_code = 400
    detail = "Invalid JSON payload"


_SIGNATURE_ERRORS: dict[str, type[WebhookRequestError]] = {
    "missing_signature": MissingSignatureError,
    "secret_not_configured": WebhookSecretNotConfiguredError,
}


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> tuple[Any, SignatureResult]:
    """Valida assinatura e parseia JSON do webhook.

    O JSON pode ser de qualquer forma; a exigência de objeto fica com o
    despacho (InvalidPayloadError).

    Raises:
        MissingSignatureError: header ausente
        WebhookSecretNotConfiguredError: secret não configurado no servidor
        InvalidSignatureError: assinatura não confere
        InvalidJsonError: corpo não é JSON

    Returns:
        (payload, SignatureResult)
    """
    signature_result = verify_notion_signature(raw_body, headers, secret)
    if not signature_result.valid:
        reason = signature_result.error or "invalid_signature"
        raise _SIGNATURE_ERRORS.get(reason, InvalidSignatureError)(reason)

    try:
        payload = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    return payload, signature_result
