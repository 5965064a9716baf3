"""Prompts de IA."""

from ai.prompts.property_research_prompt import (
    PROPERTY_RESEARCH_SYSTEM,
    SURROUNDINGS_RESEARCH_SYSTEM,
    format_property_research_prompt,
    format_surroundings_research_prompt,
)

__all__ = [
    "PROPERTY_RESEARCH_SYSTEM",
    "SURROUNDINGS_RESEARCH_SYSTEM",
    "format_property_research_prompt",
    "format_surroundings_research_prompt",
]
