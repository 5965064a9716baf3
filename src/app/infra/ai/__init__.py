"""Implementações concretas de IO para IA.

ai/ não faz IO direto; as chamadas ficam aqui.
"""

from app.infra.ai.research_client import ResearchClient, create_research_client

__all__ = [
    "ResearchClient",
    "create_research_client",
]
