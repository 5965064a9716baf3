"""Webhooks do Notion: verificação, assinatura, chave de API e parsing."""

from ..signature import SignatureResult, compute_signature, verify_notion_signature
from .lite import (
    ApiKeyNotConfiguredError,
    InvalidApiKeyError,
    MissingApiKeyError,
    extract_api_key,
    parse_lite_request,
)
from .receive import (
    InvalidJsonError,
    InvalidSignatureError,
    MissingSignatureError,
    WebhookRequestError,
    WebhookSecretNotConfiguredError,
    parse_webhook_request,
)
from .verify import InvalidVerificationRequestError, extract_verification_token

__all__ = [
    "ApiKeyNotConfiguredError",
    "InvalidApiKeyError",
    "InvalidJsonError",
    "InvalidSignatureError",
    "InvalidVerificationRequestError",
    "MissingApiKeyError",
    "MissingSignatureError",
    "SignatureResult",
    "WebhookRequestError",
    "WebhookSecretNotConfiguredError",
    "compute_signature",
    "extract_api_key",
    "extract_verification_token",
    "parse_lite_request",
    "verify_notion_signature",
]
