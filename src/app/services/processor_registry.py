"""Registro imutável e ordenado de processadores."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from utils.errors import DuplicateProcessorIdError

if TYPE_CHECKING:
    from app.domain.processor import ProcessorDefinition


class ProcessorRegistry:
    """Coleção fixa de processadores montada na inicialização.

    A ordem de iteração é a de inserção. Ids duplicados são rejeitados
    na construção.
    """

    __slots__ = ("_processors",)

    def __init__(self, processors: Iterable[ProcessorDefinition] = ()) -> None:
        items = tuple(processors)
        seen: set[str] = set()
        for processor in items:
            if processor.id in seen:
                raise DuplicateProcessorIdError(processor.id)
            seen.add(processor.id)
        self._processors: tuple[ProcessorDefinition, ...] = items

    def __iter__(self) -> Iterator[ProcessorDefinition]:
        return iter(self._processors)

    def __len__(self) -> int:
        return len(self._processors)

    def __contains__(self, processor_id: object) -> bool:
        return any(p.id == processor_id for p in self._processors)

    @property
    def processors(self) -> tuple[ProcessorDefinition, ...]:
        return self._processors

    def get(self, processor_id: str) -> ProcessorDefinition | None:
        """Busca processador por id."""
        for processor in self._processors:
            if processor.id == processor_id:
                return processor
        return None
