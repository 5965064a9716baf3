"""Predicados puros sobre eventos de webhook do Notion.

Todos são totais: campo ausente resulta em False/None, nunca exceção.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.webhook_events import EntityKind, WebhookEvent

# Tipos de pai que representam uma coleção (database/data source)
COLLECTION_PARENT_TYPES = frozenset({"database", "database_id", "data_source"})

PERSON_AUTHOR = "person"


def normalize_identifier(identifier: str) -> str:
    """Remove hífens e converte para minúsculas (idempotente)."""
    return identifier.replace("-", "").lower()


def is_event_of_type(event: WebhookEvent, types: str | Iterable[str]) -> bool:
    """Retorna True se `event.type` pertence aos tipos informados."""
    if isinstance(types, str):
        return event.type == types
    return event.type in frozenset(types)


def is_entity_event(event: WebhookEvent, kind: EntityKind) -> bool:
    """Namespace do tipo E tipo da entidade precisam concordar."""
    if event.entity is None:
        return False
    return event.type.startswith(f"{kind}.") and event.entity.type == kind


def is_authored_by_person(event: WebhookEvent) -> bool:
    """True se algum autor é pessoa; lista vazia retorna False."""
    return any(author.type == PERSON_AUTHOR for author in event.authors)


def extract_entity_id(event: WebhookEvent) -> str | None:
    if event.entity is None:
        return None
    return event.entity.id or None


def extract_parent_collection_id(event: WebhookEvent) -> str | None:
    """Retorna o id da coleção pai, ou None se o pai não for coleção."""
    parent = event.data.parent
    if parent is None:
        return None
    if parent.type not in COLLECTION_PARENT_TYPES and not parent.database_id:
        return None
    return parent.database_id or parent.id or None


def is_entity_event_from_collection(
    event: WebhookEvent,
    collection_id: str,
    kind: EntityKind = "page",
) -> bool:
    """Evento de `kind` cujo pai é a coleção `collection_id`.

    Ids são comparados normalizados (com/sem hífens, qualquer caixa).
    Um `collection_id` vazio nunca casa.
    """
    if not collection_id or not is_entity_event(event, kind):
        return False
    parent_id = extract_parent_collection_id(event)
    if parent_id is None:
        return False
    return normalize_identifier(parent_id) == normalize_identifier(collection_id)
