"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (webhooks, health)
- Validação inicial de request (headers, assinatura, chave de API)
- Delegação para connectors/use_cases
- Respostas HTTP apropriadas

Estrutura:
- routes/notion/: webhooks do Notion (integração e lite)
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
