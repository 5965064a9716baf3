"""Models de saída das pesquisas de imóvel (propriedades e entorno).

Contratos validados sobre o JSON devolvido pela IA. Campos ausentes
recebem defaults para que respostas parciais ainda sejam úteis.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

ConfidenceLevel = Literal["high", "medium", "low"]
TransitKind = Literal["bus", "skytrain", "seabus", "westcoastexpress", "other"]


class PropertyResearchResult(BaseModel):
    """Valores pesquisados para as propriedades vazias da página."""

    model_config = ConfigDict(extra="ignore")

    filled_properties: dict[str, Any] = Field(default_factory=dict)
    sources: list[str] = Field(default_factory=list)
    confidence: dict[str, ConfidenceLevel] = Field(default_factory=dict)
    notes: str | None = None

    def has_values(self) -> bool:
        """True se ao menos uma propriedade veio preenchida."""
        return any(value is not None for value in self.filled_properties.values())


class NearbyPark(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    walk_time_minutes: float
    distance_meters: float | None = None
    features: list[str] = Field(default_factory=list)


class TransitOption(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    type: TransitKind = "other"
    walk_time_minutes: float
    routes: list[str] = Field(default_factory=list)


class TransitTime(BaseModel):
    model_config = ConfigDict(extra="ignore")

    transit_time_minutes: float
    description: str = ""


class TransitTimes(BaseModel):
    """Tempos de transporte público até os destinos de referência."""

    model_config = ConfigDict(extra="ignore")

    to_downtown: TransitTime
    to_ubc: TransitTime
    to_yvr: TransitTime
    to_oakridge_park: TransitTime


class SurroundingsResearchResult(BaseModel):
    """Parques, transporte e tempos de deslocamento a partir do endereço."""

    model_config = ConfigDict(extra="ignore")

    nearby_parks: list[NearbyPark] = Field(default_factory=list)
    public_transit: list[TransitOption] = Field(default_factory=list)
    transit_times: TransitTimes
    sources: list[str] = Field(default_factory=list)
