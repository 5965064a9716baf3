"""Testes para a montagem do registro no bootstrap."""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock

import pytest

from app.bootstrap.processors import create_processor_registry
from app.processors import (
    GLENS_PLAYGROUND_PROCESSOR_ID,
    SMALL_BUSINESS_ACQUISITION_PROCESSOR_ID,
    VANCOUVER_HOUSE_PROCESSOR_ID,
)
from config.settings import NotionSettings


def test_registers_all_processors_in_order() -> None:
    registry = create_processor_registry(NotionSettings(), AsyncMock(), AsyncMock())
    assert [p.id for p in registry] == [
        GLENS_PLAYGROUND_PROCESSOR_ID,
        VANCOUVER_HOUSE_PROCESSOR_ID,
        SMALL_BUSINESS_ACQUISITION_PROCESSOR_ID,
    ]


def test_skips_processors_without_clients(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        registry = create_processor_registry(NotionSettings(), None, None)
    assert [p.id for p in registry] == [SMALL_BUSINESS_ACQUISITION_PROCESSOR_ID]
    assert caplog.text.count("processor_not_registered") == 2


def test_skips_research_processor_without_research_client() -> None:
    registry = create_processor_registry(NotionSettings(), AsyncMock(), None)
    assert VANCOUVER_HOUSE_PROCESSOR_ID not in registry
    assert GLENS_PLAYGROUND_PROCESSOR_ID in registry
