"""Wire models for the classification exchange.

These mirror the remote classification service contract: requests carry
``{parameters, targetExoplanet}`` and responses ``{classifications,
similarity}``. Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..parameters import ParameterVector

__all__ = [
    "ClassificationOut",
    "ClassificationRequest",
    "ClassificationResponse",
    "ParameterPayload",
]


class ParameterPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    mass: float
    radius: float
    temperature: float
    orbital_distance: float = Field(alias="orbitalDistance")
    atmosphere: float
    composition: float
    brightness: float = 1.0

    @classmethod
    def from_vector(cls, vector: ParameterVector) -> ParameterPayload:
        return cls.model_validate(vector.to_payload())

    def to_vector(self) -> ParameterVector:
        return ParameterVector(
            mass=self.mass,
            radius=self.radius,
            temperature=self.temperature,
            orbital_distance=self.orbital_distance,
            atmosphere=self.atmosphere,
            composition=self.composition,
            brightness=self.brightness,
        )


class ClassificationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    parameters: ParameterPayload
    target_exoplanet: str = Field(alias="targetExoplanet")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class ClassificationOut(BaseModel):
    name: str
    description: str = ""
    probability: float = Field(ge=0.0, le=1.0)


class ClassificationResponse(BaseModel):
    classifications: list[ClassificationOut] = Field(default_factory=list)
    similarity: float = Field(ge=0.0, le=1.0)

    @property
    def top(self) -> ClassificationOut | None:
        return self.classifications[0] if self.classifications else None
