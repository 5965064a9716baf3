"""Connectors — adapters de borda para APIs externas.

- notion/: API REST do Notion e validação de webhooks
"""

__all__: list[str] = []
