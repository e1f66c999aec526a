"""Celestial bodies as one role-tagged value type.

Stars and planets share the physical fields; the role-specific data lives in
``payload`` and consumers branch on ``role`` explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Union

from .parameters import DEFAULT_PARAMETERS, ParameterVector

__all__ = [
    "BodyRole",
    "CelestialBody",
    "PlanetPayload",
    "StarPayload",
    "display_radius",
    "make_planet",
    "make_star",
]

# Display radius bounds for planets, in scene units.
_MIN_DISPLAY_RADIUS = 0.5
_MAX_DISPLAY_RADIUS = 2.0


class BodyRole(StrEnum):
    PLANET = "planet"
    STAR = "star"


@dataclass(frozen=True)
class StarPayload:
    """Light emitted by a star."""

    light_color: int = 0xFFF5C0
    light_intensity: float = 2.5
    temperature: float = 5778.0


@dataclass(frozen=True)
class PlanetPayload:
    has_atmosphere: bool = False


@dataclass(frozen=True)
class CelestialBody:
    name: str
    role: BodyRole
    parameters: ParameterVector
    radius: float
    payload: Union[StarPayload, PlanetPayload]

    def __post_init__(self) -> None:
        expected = StarPayload if self.role is BodyRole.STAR else PlanetPayload
        if not isinstance(self.payload, expected):
            raise TypeError(
                f"{self.role.value} '{self.name}' needs a {expected.__name__}, "
                f"got {type(self.payload).__name__}"
            )

    @property
    def is_star(self) -> bool:
        return self.role is BodyRole.STAR


def display_radius(vector: ParameterVector) -> float:
    """Planet radius in scene units, clamped to a viewable range."""

    return max(_MIN_DISPLAY_RADIUS, min(_MAX_DISPLAY_RADIUS, vector.radius))


def make_planet(
    name: str,
    parameters: ParameterVector,
    *,
    atmosphere_threshold: float = 0.1,
) -> CelestialBody:
    return CelestialBody(
        name=name,
        role=BodyRole.PLANET,
        parameters=parameters,
        radius=display_radius(parameters),
        payload=PlanetPayload(has_atmosphere=parameters.atmosphere > atmosphere_threshold),
    )


def make_star(
    name: str,
    radius: float,
    parameters: ParameterVector | None = None,
    *,
    light: StarPayload | None = None,
) -> CelestialBody:
    return CelestialBody(
        name=name,
        role=BodyRole.STAR,
        parameters=parameters or DEFAULT_PARAMETERS,
        radius=float(radius),
        payload=light or StarPayload(),
    )
