"""Definição de processador de webhook.

Um processador pareia duas regras (habilitação e casamento de conteúdo)
com um executor assíncrono. As regras aceitam bool constante ou função
do evento; na construção ambas viram predicado, de modo que o despacho
sempre chama a mesma forma.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from app.domain.webhook_events import WebhookEvent

EventPredicate = Callable[["WebhookEvent"], bool]
PredicateRule = Union[bool, EventPredicate]
Executor = Callable[["WebhookEvent"], Awaitable[bool]]


def as_predicate(rule: PredicateRule) -> EventPredicate:
    """Normaliza bool ou função em predicado uniforme."""
    if isinstance(rule, bool):
        constant = rule
        return lambda _event: constant
    if callable(rule):
        return rule
    raise TypeError(f"Regra de processador deve ser bool ou callable: {rule!r}")


@dataclass(frozen=True)
class ProcessorDefinition:
    """Processador registrado (imutável após a construção).

    Attributes:
        id: Identificador estável (logs e auditoria)
        name: Nome legível
        is_enabled: Kill-switch global, avaliado primeiro
        should_execute: Regra de casamento com o conteúdo do evento
        executor: Função assíncrona que executa o trabalho e retorna sucesso
    """

    id: str
    name: str
    is_enabled: EventPredicate
    should_execute: EventPredicate
    executor: Executor

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Processador precisa de id")
        if not callable(self.executor):
            raise TypeError(f"Executor do processador {self.id} não é callable")
        object.__setattr__(self, "is_enabled", as_predicate(self.is_enabled))
        object.__setattr__(self, "should_execute", as_predicate(self.should_execute))
