"""Testes para modelos e prompts de pesquisa de imóvel."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ai.models import PropertyResearchResult, SurroundingsResearchResult
from ai.prompts import format_property_research_prompt, format_surroundings_research_prompt


def test_property_result_defaults() -> None:
    result = PropertyResearchResult()
    assert result.filled_properties == {}
    assert result.has_values() is False


def test_property_result_has_values() -> None:
    result = PropertyResearchResult(filled_properties={"Bedrooms": 3, "Heating": None})
    assert result.has_values() is True


def test_confidence_levels_are_closed() -> None:
    with pytest.raises(ValidationError):
        PropertyResearchResult(confidence={"Bedrooms": "certain"})


def test_surroundings_requires_transit_times() -> None:
    with pytest.raises(ValidationError):
        SurroundingsResearchResult.model_validate({"nearby_parks": []})


def test_unknown_transit_kind_is_rejected() -> None:
    payload = {
        "public_transit": [{"name": "Stop", "type": "tram", "walk_time_minutes": 3}],
        "transit_times": {
            key: {"transit_time_minutes": 10}
            for key in ("to_downtown", "to_ubc", "to_yvr", "to_oakridge_park")
        },
    }
    with pytest.raises(ValidationError):
        SurroundingsResearchResult.model_validate(payload)


def test_property_prompt_includes_context() -> None:
    prompt = format_property_research_prompt(
        address="1234 Main St",
        schema={"Bedrooms": {"type": "number", "name": "Bedrooms"}},
        current_values={"Bedrooms": None},
        missing_properties=["Bedrooms"],
    )
    assert "1234 Main St" in prompt
    assert "Bedrooms" in prompt


def test_surroundings_prompt_includes_address() -> None:
    assert "1234 Main St" in format_surroundings_research_prompt(address="1234 Main St")
