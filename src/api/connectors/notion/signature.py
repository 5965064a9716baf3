"""Validação da assinatura HMAC-SHA256 do header X-Notion-Signature."""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_HEADER = "x-notion-signature"
SIGNATURE_PREFIX = "sha256="


@dataclass(frozen=True)
class SignatureResult:
    """Resultado da verificação (sem expor valores de assinatura)."""

    valid: bool
    error: str | None = None


def compute_signature(payload: bytes, secret: str) -> str:
    """Calcula o HMAC-SHA256 hexadecimal do corpo bruto."""
    return hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()


def verify_notion_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> SignatureResult:
    """Compara a assinatura recebida com a calculada (tempo constante).

    O header pode vir com ou sem o prefixo `sha256=`.
    """
    received = headers.get(SIGNATURE_HEADER) or headers.get("X-Notion-Signature")
    if not received:
        return SignatureResult(valid=False, error="missing_signature")
    if not secret:
        return SignatureResult(valid=False, error="secret_not_configured")

    received = received.strip()
    if received.startswith(SIGNATURE_PREFIX):
        received = received[len(SIGNATURE_PREFIX):]

    expected = compute_signature(raw_body, secret).encode("ascii")
    if not hmac.compare_digest(expected, received.lower().encode("utf-8", "replace")):
        return SignatureResult(valid=False, error="invalid_signature")
    return SignatureResult(valid=True)
