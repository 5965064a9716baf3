"""Builders de blocos para `PATCH /blocks/{id}/children`.

Funções puras que montam dicts no formato da API de blocos do Notion.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ai.models.property_research import SurroundingsResearchResult, TransitTime

Block = dict[str, Any]

MAX_LINKED_SOURCES = 5
EMPTY_CELL = "-"

# Dados de demonstração do processador de playground
DEMO_TABLE_HEADER = ("Name", "Number", "Link")
DEMO_TABLE_ROWS = (
    ("Alice Johnson", "42", "Alice's Link", "https://example.com/alice"),
    ("Bob Smith", "17", "Bob's Link", "https://example.com/bob"),
    ("Charlie Brown", "99", "Charlie's Link", "https://example.com/charlie"),
)


def text(content: str, *, link: str | None = None) -> dict[str, Any]:
    """Rich text simples (opcionalmente com link)."""
    payload: dict[str, Any] = {"content": content}
    if link:
        payload["link"] = {"url": link}
    return {"type": "text", "text": payload}


def heading(content: str, level: int = 2) -> Block:
    if level not in (1, 2, 3):
        raise ValueError(f"Nível de heading inválido: {level}")
    block_type = f"heading_{level}"
    return {"type": block_type, block_type: {"rich_text": [text(content)]}}


def paragraph(*parts: dict[str, Any]) -> Block:
    return {"type": "paragraph", "paragraph": {"rich_text": list(parts)}}


def _row(cells: Sequence[str | dict[str, Any]]) -> Block:
    rendered = [[cell] if isinstance(cell, dict) else [text(cell)] for cell in cells]
    return {"type": "table_row", "table_row": {"cells": rendered}}


def table(
    header: Sequence[str],
    rows: Sequence[Sequence[str | dict[str, Any]]],
) -> Block:
    """Tabela com cabeçalho de colunas; toda linha deve ter a largura do cabeçalho."""
    width = len(header)
    for row in rows:
        if len(row) != width:
            raise ValueError(f"Linha com {len(row)} células; esperado {width}")
    return {
        "type": "table",
        "table": {
            "table_width": width,
            "has_column_header": True,
            "has_row_header": False,
            "children": [_row(header), *(_row(row) for row in rows)],
        },
    }


def build_demo_table() -> list[Block]:
    """Tabela de teste com três pessoas (nome, número e link)."""
    rows = [
        (name, number, text(label, link=url)) for name, number, label, url in DEMO_TABLE_ROWS
    ]
    return [table(DEMO_TABLE_HEADER, rows)]


def _minutes(value: float) -> str:
    return f"{value:g} min"


def _joined(values: Sequence[str]) -> str:
    return ", ".join(values) or EMPTY_CELL


def _sources_paragraph(sources: Sequence[str]) -> Block:
    linked = list(sources[:MAX_LINKED_SOURCES])
    parts = [text("Sources: ")]
    for index, source in enumerate(linked):
        content = source if index == len(linked) - 1 else f"{source}, "
        parts.append(text(content, link=source))
    return paragraph(*parts)


def build_surroundings_blocks(surroundings: SurroundingsResearchResult) -> list[Block]:
    """Seção "Location & Surroundings": parques, transporte e tempos."""
    blocks: list[Block] = [heading("📍 Location & Surroundings", 2)]

    if surroundings.nearby_parks:
        blocks.append(heading("🌳 Nearby Parks (10 min walk)", 3))
        blocks.append(
            table(
                ("Park Name", "Walk Time", "Features"),
                [
                    (park.name, _minutes(park.walk_time_minutes), _joined(park.features))
                    for park in surroundings.nearby_parks
                ],
            )
        )

    if surroundings.public_transit:
        blocks.append(heading("🚌 Public Transit (15 min walk)", 3))
        blocks.append(
            table(
                ("Stop/Station", "Type", "Walk Time", "Routes"),
                [
                    (
                        option.name,
                        option.type,
                        _minutes(option.walk_time_minutes),
                        _joined(option.routes),
                    )
                    for option in surroundings.public_transit
                ],
            )
        )

    times = surroundings.transit_times
    destinations: tuple[tuple[str, TransitTime], ...] = (
        ("Downtown Vancouver", times.to_downtown),
        ("UBC", times.to_ubc),
        ("YVR Airport", times.to_yvr),
        ("Oakridge Park", times.to_oakridge_park),
    )
    blocks.append(heading("🚇 Transit Times to Key Destinations", 3))
    blocks.append(
        table(
            ("Destination", "Transit Time", "Route"),
            [
                (name, _minutes(time.transit_time_minutes), time.description or EMPTY_CELL)
                for name, time in destinations
            ],
        )
    )

    if surroundings.sources:
        blocks.append(_sources_paragraph(surroundings.sources))

    return blocks
