"""Builders de blocos do Notion."""

from .blocks import (
    build_demo_table,
    build_surroundings_blocks,
    heading,
    paragraph,
    table,
    text,
)

__all__ = [
    "build_demo_table",
    "build_surroundings_blocks",
    "heading",
    "paragraph",
    "table",
    "text",
]
