"""Testes para ProcessorRegistry."""

from __future__ import annotations

import pytest

from app.domain.processor import ProcessorDefinition
from app.services.processor_registry import ProcessorRegistry
from utils.errors import DuplicateProcessorIdError


async def _noop(_event: object) -> bool:
    return True


def _processor(processor_id: str) -> ProcessorDefinition:
    return ProcessorDefinition(
        id=processor_id,
        name=f"Processor {processor_id}",
        is_enabled=True,
        should_execute=True,
        executor=_noop,
    )


def test_iteration_follows_insertion_order() -> None:
    registry = ProcessorRegistry([_processor("b"), _processor("a"), _processor("c")])
    assert [p.id for p in registry] == ["b", "a", "c"]
    assert len(registry) == 3


def test_empty_registry() -> None:
    registry = ProcessorRegistry()
    assert len(registry) == 0
    assert list(registry) == []


def test_lookup_by_id() -> None:
    registry = ProcessorRegistry([_processor("a")])
    assert "a" in registry
    assert "z" not in registry
    assert registry.get("a") is not None
    assert registry.get("z") is None


def test_processors_is_a_tuple_snapshot() -> None:
    source = [_processor("a")]
    registry = ProcessorRegistry(source)
    source.append(_processor("b"))
    assert isinstance(registry.processors, tuple)
    assert [p.id for p in registry] == ["a"]


def test_duplicate_ids_fail_fast() -> None:
    with pytest.raises(DuplicateProcessorIdError) as exc_info:
        ProcessorRegistry([_processor("a"), _processor("a")])
    assert exc_info.value.processor_id == "a"
    assert "Duplicate processor id: a" in str(exc_info.value)
