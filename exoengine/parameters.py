"""Physical parameter vectors and their documented global intervals."""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

__all__ = [
    "DEFAULT_PARAMETERS",
    "PARAMETER_NAMES",
    "PARAMETER_SPECS",
    "WEIGHTED_PARAMETERS",
    "ParameterSpec",
    "ParameterVector",
    "clamp_to_bounds",
    "payload_key",
]


# Order matters: classifier weights, catalog intervals and similarity terms
# are all walked in this order.
WEIGHTED_PARAMETERS: tuple[str, ...] = (
    "mass",
    "radius",
    "temperature",
    "orbital_distance",
    "atmosphere",
    "composition",
)

PARAMETER_NAMES: tuple[str, ...] = WEIGHTED_PARAMETERS + ("brightness",)

_PAYLOAD_KEYS: Mapping[str, str] = MappingProxyType(
    {name: name for name in PARAMETER_NAMES} | {"orbital_distance": "orbitalDistance"}
)
_FIELD_FOR_KEY: Mapping[str, str] = MappingProxyType(
    {key: name for name, key in _PAYLOAD_KEYS.items()}
    | {name: name for name in PARAMETER_NAMES}
)


def payload_key(name: str) -> str:
    """Return the camelCase wire key for the parameter ``name``."""

    return _PAYLOAD_KEYS[name]


@dataclass(frozen=True)
class ParameterVector:
    """Seven named scalars describing a candidate planet.

    Units: mass in Earth masses, radius in Earth radii, temperature in Kelvin,
    orbital distance in AU, atmosphere in atm, composition as water content
    percentage and brightness as a unitless multiplier.
    """

    mass: float
    radius: float
    temperature: float
    orbital_distance: float
    atmosphere: float
    composition: float
    brightness: float = 1.0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ParameterVector:
        """Build a vector from snake_case or camelCase keys.

        Missing fields fall back to :data:`DEFAULT_PARAMETERS`; unknown keys are
        ignored.
        """

        values: dict[str, float] = {}
        for key, raw in data.items():
            field_name = _FIELD_FOR_KEY.get(str(key))
            if field_name is None or raw is None:
                continue
            values[field_name] = float(raw)
        return dataclasses.replace(DEFAULT_PARAMETERS, **values)

    def value(self, name: str) -> float:
        return float(getattr(self, name))

    def replace(self, **changes: float) -> ParameterVector:
        return dataclasses.replace(self, **changes)

    def to_payload(self) -> dict[str, float]:
        """Return the camelCase mapping used by the classification exchange."""

        return {payload_key(name): self.value(name) for name in PARAMETER_NAMES}


@dataclass(frozen=True)
class ParameterSpec:
    """Global valid interval and slider metadata for one parameter."""

    name: str
    minimum: float
    maximum: float
    step: float
    label: str
    unit: str

    def clamp(self, value: float) -> float:
        if math.isnan(value):
            return self.minimum
        return max(self.minimum, min(self.maximum, value))

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum


PARAMETER_SPECS: Mapping[str, ParameterSpec] = MappingProxyType(
    {
        spec.name: spec
        for spec in (
            ParameterSpec("mass", 0.1, 10.0, 0.1, "Mass", "Earth masses"),
            ParameterSpec("radius", 0.1, 2.0, 0.01, "Radius", "Earth radii"),
            ParameterSpec("temperature", 200.0, 800.0, 10.0, "Temperature", "K"),
            ParameterSpec("orbital_distance", 0.01, 5.0, 0.01, "Orbital Distance", "AU"),
            ParameterSpec("atmosphere", 0.0, 100.0, 1.0, "Atmosphere", "atm"),
            ParameterSpec("composition", 0.0, 100.0, 1.0, "Water Content", "%"),
            ParameterSpec("brightness", 0.1, 3.0, 0.1, "Brightness", "x"),
        )
    }
)

DEFAULT_PARAMETERS = ParameterVector(
    mass=1.0,
    radius=1.0,
    temperature=288.0,
    orbital_distance=1.0,
    atmosphere=1.0,
    composition=70.0,
    brightness=1.0,
)


def clamp_to_bounds(vector: ParameterVector) -> ParameterVector:
    """Clamp every field of ``vector`` into its documented global interval.

    The scoring functions accept out-of-interval values as-is; this helper is
    meant for input surfaces that want slider-compatible vectors.
    """

    return vector.replace(
        **{name: PARAMETER_SPECS[name].clamp(vector.value(name)) for name in PARAMETER_NAMES}
    )
