"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    DuplicateProcessorIdError,
    InfrastructureError,
    InvalidPayloadError,
    NotionApiError,
    NotionUnavailableError,
)

__all__ = [
    "DuplicateProcessorIdError",
    "InfrastructureError",
    "InvalidPayloadError",
    "NotionApiError",
    "NotionUnavailableError",
]
