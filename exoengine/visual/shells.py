"""Concentric shell layers (corona, atmosphere, glow) around a body."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum

__all__ = [
    "BlendMode",
    "CORONA_LAYER_COUNT",
    "GLOW_LAYER_COUNT",
    "ShellLayer",
    "ShellRole",
    "atmosphere_layers",
    "corona_layers",
]

CORONA_LAYER_COUNT = 4
GLOW_LAYER_COUNT = 3

_ATMOSPHERE_RADIUS = 1.08
_ATMOSPHERE_OPACITY_SCALE = 0.4


class ShellRole(StrEnum):
    CORONA = "corona"
    GLOW = "glow"
    ATMOSPHERE = "atmosphere"


class BlendMode(StrEnum):
    ADDITIVE = "additive"
    NORMAL = "normal"


@dataclass(frozen=True)
class ShellLayer:
    """One semi-transparent shell; ``radius_multiplier`` scales the body radius."""

    radius_multiplier: float
    opacity: float
    blend_mode: BlendMode
    role: ShellRole

    def to_payload(self) -> dict[str, object]:
        return {
            "radiusMultiplier": self.radius_multiplier,
            "opacity": self.opacity,
            "blendMode": self.blend_mode.value,
            "role": self.role.value,
        }


def _opacity(value: float) -> float:
    return max(0.0, min(1.0, value))


def corona_layers() -> tuple[ShellLayer, ...]:
    """Four additive corona shells, each wider and fainter than the last."""

    return tuple(
        ShellLayer(
            radius_multiplier=1 + i * 0.2,
            opacity=_opacity(0.15 / i),
            blend_mode=BlendMode.ADDITIVE,
            role=ShellRole.CORONA,
        )
        for i in range(1, CORONA_LAYER_COUNT + 1)
    )


def atmosphere_layers(
    atmosphere: float,
    glow_intensity: float,
    *,
    threshold: float = 0.1,
) -> tuple[ShellLayer, ...]:
    """Atmosphere shell plus three glow shells, or nothing for thin air.

    Opacities are clamped to ``[0, 1]``.
    """

    if math.isnan(atmosphere) or not atmosphere > threshold:
        return ()
    layers = [
        ShellLayer(
            radius_multiplier=_ATMOSPHERE_RADIUS,
            opacity=_opacity(atmosphere * _ATMOSPHERE_OPACITY_SCALE),
            blend_mode=BlendMode.ADDITIVE,
            role=ShellRole.ATMOSPHERE,
        )
    ]
    for i in range(1, GLOW_LAYER_COUNT + 1):
        layers.append(
            ShellLayer(
                radius_multiplier=1.12 + i * 0.04,
                opacity=_opacity(atmosphere * glow_intensity * 0.1 * (1 - i * 0.3)),
                blend_mode=BlendMode.ADDITIVE,
                role=ShellRole.GLOW,
            )
        )
    return tuple(layers)
