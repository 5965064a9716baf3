"""Endpoints de health check."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from api.routes.notion.webhook_runtime_tasks import active_task_count

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "error": self.error}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service="notion-relay",
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: despacho montado é crítico; clientes externos degradam."""
    state = request.app.state
    dispatcher_check = _check_present(getattr(state, "dispatch_use_case", None), "failed")
    notion_check = _check_present(getattr(state, "notion_client", None), "degraded")
    research_check = _check_present(getattr(state, "research_client", None), "degraded")

    ready = dispatcher_check.status == "ok"
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "dispatcher": dispatcher_check.as_dict(),
            "notion": notion_check.as_dict(),
            "openai": research_check.as_dict(),
        },
        "background_tasks": active_task_count(),
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_present(
    dependency: Any | None,
    missing_status: Literal["degraded", "failed"],
) -> DependencyCheck:
    if dependency is None:
        return DependencyCheck(status=missing_status, error="not_configured")
    return DependencyCheck(status="ok")
