"""Router principal do Notion — agrega todos os endpoints do canal."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.notion.webhook import router as webhook_router

router = APIRouter()

# Webhook endpoints (integração assinada e lite por chave de API)
router.include_router(webhook_router)
