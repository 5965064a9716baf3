"""Serviços de aplicação.

Unidades reutilizáveis de casamento e registro (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.processor_registry import ProcessorRegistry

__all__ = [
    "ProcessorRegistry",
]
