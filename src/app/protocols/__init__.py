"""Protocolos e contratos do core da aplicação."""

from .notion_client import NotionClientProtocol
from .research_client import ResearchClientProtocol

__all__ = [
    "NotionClientProtocol",
    "ResearchClientProtocol",
]
