"""Conversão entre propriedades do Notion e valores simples.

- simplify_*: achatam respostas da API em dicts legíveis pela IA
- build_property_updates: converte valores preenchidos em payload de PATCH
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

READ_ONLY_PROPERTY_TYPES = frozenset(
    {
        "title",
        "formula",
        "rollup",
        "created_time",
        "created_by",
        "last_edited_time",
        "last_edited_by",
    }
)

_OPTION_PROPERTY_TYPES = ("select", "multi_select", "status")

SchemaEntry = dict[str, Any]


def _plain_text(rich_text: list[dict[str, Any]] | None) -> str:
    return "".join(part.get("plain_text", "") for part in rich_text or [])


def _named(value: dict[str, Any] | None) -> str | None:
    return value.get("name") if isinstance(value, dict) else None


def _file_url(item: dict[str, Any]) -> str | None:
    source = item.get(item.get("type", ""), {})
    return source.get("url") if isinstance(source, dict) else None


def simplify_property_value(prop: Mapping[str, Any]) -> Any:
    """Converte uma propriedade de página no seu valor simples."""
    prop_type = prop.get("type")
    value = prop.get(prop_type) if isinstance(prop_type, str) else None

    if prop_type in ("title", "rich_text"):
        return _plain_text(value)
    if prop_type in ("number", "checkbox", "url", "email", "phone_number", "formula", "rollup"):
        return value
    if prop_type in ("select", "status"):
        return _named(value)
    if prop_type == "multi_select":
        return [item.get("name") for item in value or []]
    if prop_type == "date":
        return {"start": value.get("start"), "end": value.get("end")} if value else None
    if prop_type == "relation":
        return [item.get("id") for item in value or []]
    if prop_type == "people":
        return [item.get("name") or item.get("id") for item in value or []]
    if prop_type == "files":
        return [_file_url(item) for item in value or []]
    if prop_type in ("created_time", "last_edited_time"):
        return value
    if prop_type in ("created_by", "last_edited_by"):
        return value.get("id") if isinstance(value, dict) else None
    return None


def simplify_page_properties(page: Mapping[str, Any]) -> dict[str, Any]:
    """Achata `page.properties` em {nome: valor}."""
    properties = page.get("properties") or {}
    return {name: simplify_property_value(prop) for name, prop in properties.items()}


def simplify_data_source_schema(data_source: Mapping[str, Any]) -> dict[str, SchemaEntry]:
    """Resume o schema do data source em {nome: {type, name, options?}}."""
    schema: dict[str, SchemaEntry] = {}
    for key, prop in (data_source.get("properties") or {}).items():
        prop_type = prop.get("type", "")
        entry: SchemaEntry = {"type": prop_type, "name": prop.get("name", key)}
        if prop_type in _OPTION_PROPERTY_TYPES:
            options = (prop.get(prop_type) or {}).get("options") or []
            entry["options"] = [option.get("name") for option in options]
        schema[key] = entry
    return schema


def find_missing_properties(values: Mapping[str, Any]) -> list[str]:
    """Propriedades vazias (None, "" ou lista vazia)."""
    return [key for key, value in values.items() if value is None or value == "" or value == []]


@dataclass
class PropertyUpdatePlan:
    """Resultado da conversão: payload do PATCH e o que ficou de fora."""

    properties: dict[str, Any] = field(default_factory=dict)
    skipped: list[tuple[str, str]] = field(default_factory=list)

    def skip(self, key: str, reason: str) -> None:
        self.skipped.append((key, reason))


def _type_name(value: Any) -> str:
    return type(value).__name__


def _place_payload(value: Any) -> dict[str, Any] | None:
    if not isinstance(value, Mapping) or "lat" not in value or "lon" not in value:
        return None
    return {
        "place": {
            "lat": value["lat"],
            "lon": value["lon"],
            "name": value.get("name"),
            "address": value.get("address"),
            "google_place_id": value.get("google_place_id"),
        }
    }


def _convert(prop_type: str, value: Any) -> tuple[dict[str, Any] | None, str]:
    """Converte valor no payload do tipo; (None, motivo) se incompatível."""
    if prop_type == "rich_text":
        return {"rich_text": [{"type": "text", "text": {"content": str(value)}}]}, ""
    if prop_type == "number":
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return {"number": value}, ""
        return None, f"expected number, got {_type_name(value)}"
    if prop_type in ("select", "url"):
        if isinstance(value, str):
            return ({"select": {"name": value}} if prop_type == "select" else {"url": value}), ""
        return None, f"expected string, got {_type_name(value)}"
    if prop_type == "multi_select":
        if isinstance(value, list):
            return {"multi_select": [{"name": str(item)} for item in value]}, ""
        return None, f"expected array, got {_type_name(value)}"
    if prop_type == "checkbox":
        if isinstance(value, bool):
            return {"checkbox": value}, ""
        return None, f"expected boolean, got {_type_name(value)}"
    if prop_type == "place":
        payload = _place_payload(value)
        if payload is None:
            return None, "invalid place object: missing lat/lon or not an object"
        return payload, ""
    if prop_type in READ_ONLY_PROPERTY_TYPES:
        return None, f"read-only type: {prop_type}"
    return None, f"unsupported type: {prop_type}"


def build_property_updates(
    filled_values: Mapping[str, Any],
    schema: Mapping[str, SchemaEntry],
) -> PropertyUpdatePlan:
    """Converte valores preenchidos em propriedades para `PATCH /pages/{id}`.

    Valores nulos, propriedades fora do schema, tipos somente-leitura e
    valores incompatíveis são pulados com o motivo registrado.
    """
    plan = PropertyUpdatePlan()
    for key, value in filled_values.items():
        if value is None:
            plan.skip(key, "null value")
            continue
        entry = schema.get(key)
        if entry is None:
            plan.skip(key, "not in schema")
            continue
        payload, reason = _convert(entry.get("type", ""), value)
        if payload is None:
            plan.skip(key, reason)
            continue
        plan.properties[key] = payload

    if plan.skipped:
        logger.debug(
            "notion_properties_skipped",
            extra={"skipped": [{"key": k, "reason": r} for k, r in plan.skipped]},
        )
    return plan
