"""Modelos/DTOs de saída das chamadas de IA."""

from ai.models.property_research import (
    ConfidenceLevel,
    NearbyPark,
    PropertyResearchResult,
    SurroundingsResearchResult,
    TransitKind,
    TransitOption,
    TransitTime,
    TransitTimes,
)

__all__ = [
    "ConfidenceLevel",
    "NearbyPark",
    "PropertyResearchResult",
    "SurroundingsResearchResult",
    "TransitKind",
    "TransitOption",
    "TransitTime",
    "TransitTimes",
]
