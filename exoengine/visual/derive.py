"""Physical-to-visual parameter mapping.

Every descriptor field is resolved in the same order: preset value, value
computed from the physical parameters, caller override, hard-coded default.
Missing steps are skipped. Stars force their material factors to an emissive,
non-metallic surface before any of that applies.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from ..bodies import BodyRole, CelestialBody, StarPayload
from ..config import VisualCfg
from ..observability import EventHook, emit
from ..parameters import ParameterVector
from .colors import (
    ATMOSPHERE_COLD,
    DEFAULT_PLANET_COLOR,
    DEFAULT_STAR_COLOR,
    DEFAULT_STAR_LIGHT_COLOR,
    atmosphere_color_for,
    format_color,
    parse_color,
)
from .presets import VisualPresetProfile, get_visual_preset
from .shells import ShellLayer, atmosphere_layers, corona_layers

__all__ = [
    "OVERRIDE_FIELDS",
    "VisualDescriptor",
    "computed_metalness",
    "computed_roughness",
    "computed_surface_variation",
    "derive_visual",
    "descriptor_for_body",
]

_DEFAULT_CFG = VisualCfg()

_STAR_ROUGHNESS = 0.1
_STAR_METALNESS = 0.0
_STAR_EMISSIVE_PER_BRIGHTNESS = 0.8
_DEFAULT_ROUGHNESS = 0.5
_DEFAULT_STAR_LIGHT_INTENSITY = 2.5

_COLOR_OVERRIDES = frozenset({"base_color", "atmosphere_color", "light_color"})
OVERRIDE_FIELDS: frozenset[str] = _COLOR_OVERRIDES | {
    "roughness",
    "metalness",
    "emissive_intensity",
    "surface_variation",
    "glow_intensity",
    "light_intensity",
}


@dataclass(frozen=True)
class VisualDescriptor:
    """Fully resolved rendering parameters for one body."""

    role: BodyRole
    base_color: int
    roughness: float
    metalness: float
    emissive_intensity: float
    atmosphere_color: Optional[int]
    surface_variation: float
    glow_intensity: float
    shell_layers: tuple[ShellLayer, ...]
    preset: Optional[str] = None
    light_color: Optional[int] = None
    light_intensity: Optional[float] = None

    def layers_for(self, role: str) -> tuple[ShellLayer, ...]:
        return tuple(layer for layer in self.shell_layers if layer.role == role)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "role": self.role.value,
            "baseColor": format_color(self.base_color),
            "roughness": self.roughness,
            "metalness": self.metalness,
            "emissiveIntensity": self.emissive_intensity,
            "atmosphereColor": (
                format_color(self.atmosphere_color) if self.atmosphere_color is not None else None
            ),
            "surfaceVariation": self.surface_variation,
            "glowIntensity": self.glow_intensity,
            "shellLayers": [layer.to_payload() for layer in self.shell_layers],
            "preset": self.preset,
        }
        if self.role is BodyRole.STAR:
            payload["lightColor"] = (
                format_color(self.light_color) if self.light_color is not None else None
            )
            payload["lightIntensity"] = self.light_intensity
        return payload


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _finite(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


def computed_roughness(temperature: float) -> Optional[float]:
    if not math.isfinite(temperature):
        return None
    return _clamp((temperature - 200.0) / 600.0, 0.1, 1.0)


def computed_metalness(composition: float) -> Optional[float]:
    if not math.isfinite(composition):
        return None
    return _clamp((100.0 - composition) / 100.0, 0.0, 0.8)


def computed_surface_variation(composition: float) -> Optional[float]:
    if not math.isfinite(composition):
        return None
    return max(0.0, composition / 100.0)


def _first(*candidates: Any) -> Any:
    for candidate in candidates:
        if candidate is None:
            continue
        if isinstance(candidate, float) and not math.isfinite(candidate):
            continue
        return candidate
    return None


def _normalize_overrides(overrides: Mapping[str, Any] | None) -> dict[str, Any]:
    if not overrides:
        return {}
    unknown = sorted(set(overrides) - OVERRIDE_FIELDS)
    if unknown:
        raise ValueError(f"unknown visual override fields: {unknown}")
    cleaned: dict[str, Any] = {}
    for key, raw in overrides.items():
        if raw is None:
            continue
        cleaned[key] = parse_color(raw) if key in _COLOR_OVERRIDES else float(raw)
    return cleaned


def derive_visual(
    vector: ParameterVector,
    role: BodyRole | str = BodyRole.PLANET,
    preset_name: str | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
    settings: VisualCfg | None = None,
    hook: EventHook | None = None,
) -> VisualDescriptor:
    """Map ``vector`` to a :class:`VisualDescriptor` for a planet or a star.

    ``preset_name`` selects a :class:`VisualPresetProfile`; an unknown name
    behaves as if no preset was given. ``overrides`` holds caller-supplied raw
    values (colors as ``0xRRGGBB`` or ``#rrggbb``) that apply only where no
    preset or computed value exists.
    """

    body_role = BodyRole(role)
    cfg = settings or _DEFAULT_CFG
    raw = _normalize_overrides(overrides)

    preset: VisualPresetProfile | None = get_visual_preset(preset_name)
    if preset_name and preset is None:
        emit(hook, "visual.preset_unknown", preset=preset_name)
    p = preset or VisualPresetProfile(name="")

    if body_role is BodyRole.STAR:
        roughness = _STAR_ROUGHNESS
        metalness = _STAR_METALNESS
        brightness = _finite(vector.brightness)
        emissive_computed = (
            _STAR_EMISSIVE_PER_BRIGHTNESS * (1.0 if brightness is None else brightness)
        )
        emissive = _first(p.emissive_intensity, emissive_computed, raw.get("emissive_intensity"), 0.0)
        base_color = _first(p.base_color, raw.get("base_color"), DEFAULT_STAR_COLOR)
        atmosphere_color = None
    else:
        roughness = _first(
            p.roughness,
            computed_roughness(vector.temperature),
            raw.get("roughness"),
            _DEFAULT_ROUGHNESS,
        )
        metalness = _first(
            p.metalness,
            computed_metalness(vector.composition),
            raw.get("metalness"),
            0.0,
        )
        emissive = _first(p.emissive_intensity, raw.get("emissive_intensity"), 0.0)
        base_color = _first(p.base_color, raw.get("base_color"), DEFAULT_PLANET_COLOR)
        atmosphere_color = _first(
            p.atmosphere_color,
            atmosphere_color_for(vector.temperature),
            raw.get("atmosphere_color"),
            ATMOSPHERE_COLD,
        )

    surface_variation = _first(
        p.surface_variation,
        computed_surface_variation(vector.composition),
        raw.get("surface_variation"),
        0.0,
    )
    glow_intensity = _first(
        p.glow_intensity,
        raw.get("glow_intensity"),
        cfg.default_glow_intensity,
    )

    if body_role is BodyRole.STAR:
        layers = corona_layers()
        light_color = _first(raw.get("light_color"), DEFAULT_STAR_LIGHT_COLOR)
        light_intensity = _first(raw.get("light_intensity"), _DEFAULT_STAR_LIGHT_INTENSITY)
    else:
        layers = atmosphere_layers(
            vector.atmosphere,
            glow_intensity,
            threshold=cfg.atmosphere_threshold,
        )
        light_color = None
        light_intensity = None

    descriptor = VisualDescriptor(
        role=body_role,
        base_color=base_color,
        roughness=_clamp(roughness, 0.0, 1.0),
        metalness=_clamp(metalness, 0.0, 1.0),
        emissive_intensity=max(0.0, emissive),
        atmosphere_color=atmosphere_color,
        surface_variation=max(0.0, surface_variation),
        glow_intensity=max(0.0, glow_intensity),
        shell_layers=layers,
        preset=preset.name if preset is not None else None,
        light_color=light_color,
        light_intensity=light_intensity,
    )
    emit(
        hook,
        "visual.derived",
        role=body_role.value,
        preset=descriptor.preset,
        layers=len(layers),
    )
    return descriptor


def descriptor_for_body(
    body: CelestialBody,
    preset_name: str | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
    settings: VisualCfg | None = None,
    hook: EventHook | None = None,
) -> VisualDescriptor:
    """Derive the descriptor for ``body``, feeding star light from its payload."""

    merged: dict[str, Any] = dict(overrides or {})
    if isinstance(body.payload, StarPayload):
        merged.setdefault("light_color", body.payload.light_color)
        merged.setdefault("light_intensity", body.payload.light_intensity)
    return derive_visual(
        body.parameters,
        body.role,
        preset_name,
        overrides=merged,
        settings=settings,
        hook=hook,
    )
