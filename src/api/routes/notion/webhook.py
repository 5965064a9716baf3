"""Endpoints de webhook do Notion.

Endpoints:
- POST /webhook/integration: eventos da integração (assinados via HMAC)
- POST /webhook/lite: webhook simplificado autenticado por chave de API

Fluxo (integração):
1. Sem header de assinatura: tenta o handshake de verificação (ecoa o token)
2. Valida a assinatura HMAC-SHA256 do corpo bruto e parseia o JSON
3. Valida o envelope do evento (400 se inválido)
4. Despacha inline (resumo na resposta) ou em background (200 imediato)

Segurança:
- Assinatura e chave de API comparadas em tempo constante
- Logs nunca incluem corpo, secrets ou tokens
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from api.connectors.notion.signature import SIGNATURE_HEADER
from api.connectors.notion.webhook import (
    InvalidVerificationRequestError,
    WebhookRequestError,
    extract_verification_token,
    parse_lite_request,
    parse_webhook_request,
)
from api.routes.notion.webhook_runtime import dispatch_webhook_processing, get_dispatch_use_case
from app.domain.webhook_events import parse_webhook_event
from app.observability import (
    correlation_id_from_headers,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.settings import get_notion_settings
from utils.errors import InvalidPayloadError

logger = logging.getLogger(__name__)

router = APIRouter()


def _plain_error(status_code: int, detail: str) -> Response:
    return Response(content=detail, media_type="text/plain", status_code=status_code)


@router.post("/integration", response_model=None)
async def receive_integration_webhook(request: Request) -> Response | dict[str, Any]:
    """Recebimento de eventos da integração Notion.

    Returns:
        Token de verificação (text/plain), resumo do despacho ou Response de erro.
    """
    token = set_correlation_id(correlation_id_from_headers(request.headers))

    try:
        raw_body = await request.body()
        headers = dict(request.headers)

        if SIGNATURE_HEADER not in headers:
            try:
                verification_token = extract_verification_token(raw_body)
            except InvalidVerificationRequestError as exc:
                logger.warning(
                    "webhook_verification_invalid",
                    extra={"channel": "notion", "correlation_id": get_correlation_id()},
                )
                return _plain_error(exc.status_code, exc.detail)
            if verification_token is not None:
                logger.info(
                    "webhook_verification_received",
                    extra={"channel": "notion", "correlation_id": get_correlation_id()},
                )
                return Response(
                    content=verification_token,
                    media_type="text/plain",
                    status_code=status.HTTP_200_OK,
                )

        settings = get_notion_settings()

        try:
            payload, signature_result = parse_webhook_request(
                raw_body=raw_body,
                headers=headers,
                secret=settings.webhook_secret or None,
            )
        except WebhookRequestError as exc:
            logger.warning(
                "webhook_request_rejected",
                extra={
                    "channel": "notion",
                    "correlation_id": get_correlation_id(),
                    "reason": exc.reason,
                    "status_code": exc.status_code,
                },
            )
            return _plain_error(exc.status_code, exc.detail)

        logger.info(
            "webhook_received",
            extra={
                "channel": "notion",
                "correlation_id": get_correlation_id(),
                "signature_valid": signature_result.valid,
                "payload_size": len(raw_body),
            },
        )

        try:
            event = parse_webhook_event(payload)
            return await dispatch_webhook_processing(
                event=event,
                correlation_id=get_correlation_id(),
                settings=settings,
                use_case=get_dispatch_use_case(request),
            )
        except InvalidPayloadError as exc:
            logger.warning(
                "webhook_payload_invalid",
                extra={
                    "channel": "notion",
                    "correlation_id": get_correlation_id(),
                    "error": str(exc),
                },
            )
            return JSONResponse(
                content={"success": False, "error": str(exc)},
                status_code=status.HTTP_400_BAD_REQUEST,
            )
        except Exception:
            logger.exception(
                "webhook_processing_failed",
                extra={"channel": "notion", "correlation_id": get_correlation_id()},
            )
            return JSONResponse(
                content={"success": False, "error": "internal_error"},
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    finally:
        reset_correlation_id(token)


@router.post("/lite", response_model=None)
async def receive_lite_webhook(request: Request) -> Response | dict[str, Any]:
    """Webhook lite: autenticação por chave de API, sem despacho de eventos."""
    token = set_correlation_id(correlation_id_from_headers(request.headers))

    try:
        settings = get_notion_settings()
        raw_body = await request.body()

        try:
            parse_lite_request(
                raw_body=raw_body,
                headers=dict(request.headers),
                api_key=settings.lite_api_key or None,
            )
        except WebhookRequestError as exc:
            logger.warning(
                "lite_webhook_rejected",
                extra={
                    "channel": "notion_lite",
                    "correlation_id": get_correlation_id(),
                    "reason": exc.reason,
                    "status_code": exc.status_code,
                },
            )
            return _plain_error(exc.status_code, exc.detail)

        logger.info(
            "lite_webhook_received",
            extra={
                "channel": "notion_lite",
                "correlation_id": get_correlation_id(),
                "payload_size": len(raw_body),
            },
        )
        return {"success": True, "received": True, "type": "lite"}

    finally:
        reset_correlation_id(token)
