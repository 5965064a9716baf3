"""Agregador de settings do Notion_Relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# AI/LLM settings
from config.settings.ai import (
    OpenAISettings,
    get_openai_settings,
)

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Notion settings
from config.settings.notion import (
    NOTION_API_BASE_URL,
    NOTION_API_VERSION,
    NotionSettings,
    get_notion_settings,
)

__all__ = [
    # Constants
    "NOTION_API_BASE_URL",
    "NOTION_API_VERSION",
    # Base
    "BaseSettings",
    "Environment",
    # Notion
    "NotionSettings",
    # AI
    "OpenAISettings",
    "get_base_settings",
    "get_notion_settings",
    "get_openai_settings",
]
