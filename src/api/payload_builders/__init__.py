"""Payload builders — blocos e estruturas enviadas à API do Notion."""

__all__: list[str] = []
