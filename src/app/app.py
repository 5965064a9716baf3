"""Entrypoint da aplicação Notion_Relay.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from api.routes.notion.webhook_runtime import drain_background_tasks
from api.routes.notion.webhook_runtime_tasks import configure_dispatch_limit
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.clients import create_http_client, create_notion_client, create_research_client
from app.bootstrap.processors import create_processor_registry
from app.use_cases.notion import DispatchWebhookEventUseCase
from config.logging import get_logger
from config.settings import get_base_settings, get_notion_settings, get_openai_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Cria clientes (HTTP, Notion, OpenAI), registro e use case de despacho

    Shutdown:
    - Aguarda tasks de processamento pendentes
    - Fecha conexões gracefully
    """
    logger.info("app_starting", extra={"service": "notion-relay"})
    validate_runtime_settings()

    notion_settings = get_notion_settings()
    configure_dispatch_limit(notion_settings.max_concurrent_dispatches)
    app.state.http_client = create_http_client(notion_settings.request_timeout_seconds)
    app.state.notion_client = create_notion_client(notion_settings, app.state.http_client)
    app.state.research_client = create_research_client(get_openai_settings())

    registry = create_processor_registry(
        notion_settings,
        app.state.notion_client,
        app.state.research_client,
    )
    app.state.dispatch_use_case = DispatchWebhookEventUseCase(
        registry,
        executor_timeout_seconds=notion_settings.processor_timeout_seconds,
    )

    yield

    logger.info("app_shutting_down", extra={"service": "notion-relay"})
    await drain_background_tasks(timeout_seconds=30.0)
    research_client = getattr(app.state, "research_client", None)
    if research_client is not None:
        await research_client.aclose()
    # NotionClient compartilha o http_client; fechar uma vez
    await app.state.http_client.aclose()


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    # Docs OpenAPI desligadas em produção
    expose_docs = not get_base_settings().is_production
    fastapi_app = FastAPI(
        title="Notion_Relay",
        description="Receptor de webhooks do Notion com processadores condicionais",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if expose_docs else None,
        redoc_url="/redoc" if expose_docs else None,
        openapi_url="/openapi.json" if expose_docs else None,
    )

    # Registra todas as rotas
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "notion-relay"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint do script `notion-relay` (reload fora de produção)."""
    import os

    import uvicorn

    reload = not get_base_settings().is_production
    logger.info("app_serving", extra={"service": "notion-relay", "reload": reload})
    uvicorn.run(
        "app.app:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
        reload=reload,
    )


if __name__ == "__main__":
    main()
