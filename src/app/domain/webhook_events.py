"""Eventos de webhook do Notion.

Envelope imutável com união discriminada por `type`. Os tipos conhecidos
são agrupados por namespace (page, database, data_source, comment);
qualquer `type` fora do conjunto vira UnrecognizedEvent, que nenhum
processador casa.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal, get_args

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    field_validator,
)

from utils.errors import InvalidPayloadError

PageEventType = Literal[
    "page.content_updated",
    "page.created",
    "page.deleted",
    "page.locked",
    "page.moved",
    "page.properties_updated",
    "page.undeleted",
    "page.unlocked",
]
DatabaseEventType = Literal[
    "database.content_updated",
    "database.created",
    "database.deleted",
    "database.moved",
    "database.schema_updated",
    "database.undeleted",
]
DataSourceEventType = Literal[
    "data_source.content_updated",
    "data_source.created",
    "data_source.deleted",
    "data_source.moved",
    "data_source.schema_updated",
    "data_source.undeleted",
]
CommentEventType = Literal[
    "comment.created",
    "comment.deleted",
    "comment.updated",
]

EntityKind = Literal["page", "block", "database", "data_source", "comment"]

PAGE_EVENT_TYPES: frozenset[str] = frozenset(get_args(PageEventType))
DATABASE_EVENT_TYPES: frozenset[str] = frozenset(get_args(DatabaseEventType))
DATA_SOURCE_EVENT_TYPES: frozenset[str] = frozenset(get_args(DataSourceEventType))
COMMENT_EVENT_TYPES: frozenset[str] = frozenset(get_args(CommentEventType))

KNOWN_EVENT_TYPES: frozenset[str] = (
    PAGE_EVENT_TYPES
    | DATABASE_EVENT_TYPES
    | DATA_SOURCE_EVENT_TYPES
    | COMMENT_EVENT_TYPES
)

_NAMESPACE_BY_TYPES: tuple[tuple[str, frozenset[str]], ...] = (
    ("page", PAGE_EVENT_TYPES),
    ("database", DATABASE_EVENT_TYPES),
    ("data_source", DATA_SOURCE_EVENT_TYPES),
    ("comment", COMMENT_EVENT_TYPES),
)

_MODEL_CONFIG = ConfigDict(frozen=True, extra="ignore")


def _text_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _text_fields(value: Any) -> Any:
    """Mantém só os campos string de um objeto; não-objeto vira None."""
    if isinstance(value, BaseModel):
        return value
    if not isinstance(value, Mapping):
        return None
    return {key: item for key, item in value.items() if isinstance(item, str)}


def _records(value: Any, required: tuple[str, ...]) -> tuple[Any, ...]:
    """Filtra uma lista de objetos, descartando itens sem os campos exigidos."""
    if not isinstance(value, (list, tuple)):
        return ()
    kept: list[Any] = []
    for item in value:
        fields = _text_fields(item)
        if isinstance(fields, BaseModel) or (
            isinstance(fields, dict) and all(key in fields for key in required)
        ):
            kept.append(fields)
    return tuple(kept)


# ──────────────────────────────────────────────────────────────────────────────
# Partes do envelope
# ──────────────────────────────────────────────────────────────────────────────


class Author(BaseModel):
    """Autor da alteração (pessoa, bot ou agente)."""

    model_config = _MODEL_CONFIG

    id: str
    type: str


class Entity(BaseModel):
    """Objeto ao qual o evento se refere."""

    model_config = _MODEL_CONFIG

    id: str = ""
    type: str = ""


class ParentReference(BaseModel):
    """Pai da entidade (página, database, bloco, space ou data source)."""

    model_config = _MODEL_CONFIG

    id: str | None = None
    type: str | None = None
    database_id: str | None = None


class BlockReference(BaseModel):
    model_config = _MODEL_CONFIG

    id: str
    type: str | None = None


class EventData(BaseModel):
    """Payload variável do evento; todos os campos são opcionais.

    Campos com formato inesperado são descartados em vez de rejeitar o evento.
    """

    model_config = _MODEL_CONFIG

    parent: ParentReference | None = None
    updated_properties: tuple[str, ...] = ()
    updated_blocks: tuple[BlockReference, ...] = ()
    page_id: str | None = None

    @field_validator("parent", mode="before")
    @classmethod
    def coerce_parent(cls, value: Any) -> Any:
        return _text_fields(value)

    @field_validator("updated_properties", mode="before")
    @classmethod
    def coerce_properties(cls, value: Any) -> tuple[str, ...]:
        if not isinstance(value, (list, tuple)):
            return ()
        return tuple(item for item in value if isinstance(item, str))

    @field_validator("updated_blocks", mode="before")
    @classmethod
    def coerce_blocks(cls, value: Any) -> tuple[Any, ...]:
        return _records(value, ("id",))

    @field_validator("page_id", mode="before")
    @classmethod
    def coerce_page_id(cls, value: Any) -> str | None:
        return _text_or_none(value)


class _EventEnvelope(BaseModel):
    """Campos comuns a todos os eventos.

    Qualquer objeto JSON vira envelope: campo ausente ou malformado assume o
    default, e os predicados tratam a ausência como "não casa".
    """

    model_config = _MODEL_CONFIG

    id: str = ""
    timestamp: str | None = None
    workspace_id: str | None = None
    workspace_name: str | None = None
    subscription_id: str | None = None
    integration_id: str | None = None
    attempt_number: int | None = None
    api_version: str | None = None
    authors: tuple[Author, ...] = ()
    accessible_by: tuple[Author, ...] = ()
    entity: Entity | None = None
    data: EventData = Field(default_factory=EventData)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator(
        "timestamp",
        "workspace_id",
        "workspace_name",
        "subscription_id",
        "integration_id",
        "api_version",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, value: Any) -> str | None:
        return _text_or_none(value)

    @field_validator("attempt_number", mode="before")
    @classmethod
    def coerce_attempt(cls, value: Any) -> int | None:
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value

    @field_validator("authors", "accessible_by", mode="before")
    @classmethod
    def coerce_authors(cls, value: Any) -> tuple[Any, ...]:
        return _records(value, ("id", "type"))

    @field_validator("entity", mode="before")
    @classmethod
    def coerce_entity(cls, value: Any) -> Any:
        return _text_fields(value)

    @field_validator("data", mode="before")
    @classmethod
    def coerce_data(cls, value: Any) -> Any:
        if isinstance(value, (BaseModel, Mapping)):
            return value
        return {}


# ──────────────────────────────────────────────────────────────────────────────
# Variantes
# ──────────────────────────────────────────────────────────────────────────────


class PageEvent(_EventEnvelope):
    type: PageEventType


class DatabaseEvent(_EventEnvelope):
    type: DatabaseEventType


class DataSourceEvent(_EventEnvelope):
    type: DataSourceEventType


class CommentEvent(_EventEnvelope):
    type: CommentEventType


class UnrecognizedEvent(_EventEnvelope):
    """Evento com `type` desconhecido ou ausente (ex.: tipo novo da plataforma)."""

    type: str = ""

    @field_validator("type", mode="before")
    @classmethod
    def coerce_type(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""


def _event_tag(value: Any) -> str:
    raw_type = value.get("type") if isinstance(value, Mapping) else getattr(value, "type", None)
    if not isinstance(raw_type, str):
        return "unrecognized"
    for namespace, types in _NAMESPACE_BY_TYPES:
        if raw_type in types:
            return namespace
    return "unrecognized"


WebhookEvent = Annotated[
    Annotated[PageEvent, Tag("page")]
    | Annotated[DatabaseEvent, Tag("database")]
    | Annotated[DataSourceEvent, Tag("data_source")]
    | Annotated[CommentEvent, Tag("comment")]
    | Annotated[UnrecognizedEvent, Tag("unrecognized")],
    Discriminator(_event_tag),
]

_WEBHOOK_EVENT_ADAPTER: TypeAdapter[WebhookEvent] = TypeAdapter(WebhookEvent)


def parse_webhook_event(payload: object) -> WebhookEvent:
    """Converte o JSON do webhook no envelope tipado.

    Todo objeto é aceito; campos ausentes ou malformados ficam no default.

    Raises:
        InvalidPayloadError: payload não é objeto.
    """
    if isinstance(payload, _EventEnvelope):
        return payload
    if not isinstance(payload, Mapping):
        raise InvalidPayloadError()
    return _WEBHOOK_EVENT_ADAPTER.validate_python(dict(payload))
