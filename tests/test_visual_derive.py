"""Physical-to-visual mapping for planets and stars."""

from __future__ import annotations

import pytest

from exoengine.bodies import BodyRole, StarPayload, make_planet, make_star
from exoengine.config import VisualCfg
from exoengine.parameters import ParameterVector
from exoengine.visual import (
    ATMOSPHERE_COLD,
    ATMOSPHERE_HOT,
    ATMOSPHERE_TEMPERATE,
    ShellRole,
    derive_visual,
    descriptor_for_body,
)
from exoengine.visual.colors import (
    DEFAULT_PLANET_COLOR,
    DEFAULT_STAR_COLOR,
    DEFAULT_STAR_LIGHT_COLOR,
)


def test_planet_without_preset_uses_computed_values(earth_vector: ParameterVector) -> None:
    descriptor = derive_visual(earth_vector)

    assert descriptor.role is BodyRole.PLANET
    assert descriptor.base_color == DEFAULT_PLANET_COLOR
    assert descriptor.roughness == pytest.approx(88.0 / 600.0)
    assert descriptor.metalness == pytest.approx(0.29)
    assert descriptor.surface_variation == pytest.approx(0.71)
    assert descriptor.atmosphere_color == ATMOSPHERE_TEMPERATE
    assert descriptor.glow_intensity == 0.5
    assert descriptor.emissive_intensity == 0.0
    assert descriptor.preset is None
    assert descriptor.light_color is None


def test_preset_wins_over_computed_values(earth_vector: ParameterVector) -> None:
    hot_dry = earth_vector.replace(temperature=700.0, composition=5.0)

    descriptor = derive_visual(hot_dry, preset_name="Earth-like")

    assert descriptor.base_color == 0x4A90E2
    assert descriptor.atmosphere_color == 0x87CEEB
    assert descriptor.roughness == 0.7
    assert descriptor.metalness == 0.1
    assert descriptor.glow_intensity == 0.4
    assert descriptor.surface_variation == 0.3
    assert descriptor.preset == "Earth-like"


@pytest.mark.parametrize(
    ("temperature", "expected"),
    [(200.0, 0.1), (100.0, 0.1), (500.0, 0.5), (800.0, 1.0), (1500.0, 1.0)],
)
def test_roughness_follows_temperature(
    earth_vector: ParameterVector, temperature: float, expected: float
) -> None:
    descriptor = derive_visual(earth_vector.replace(temperature=temperature))
    assert descriptor.roughness == pytest.approx(expected)


@pytest.mark.parametrize(
    ("composition", "expected"),
    [(0.0, 0.8), (10.0, 0.8), (50.0, 0.5), (100.0, 0.0)],
)
def test_metalness_follows_composition(
    earth_vector: ParameterVector, composition: float, expected: float
) -> None:
    descriptor = derive_visual(earth_vector.replace(composition=composition))
    assert descriptor.metalness == pytest.approx(expected)


@pytest.mark.parametrize(
    ("temperature", "expected"),
    [
        (150.0, ATMOSPHERE_COLD),
        (199.9, ATMOSPHERE_COLD),
        (200.0, ATMOSPHERE_TEMPERATE),
        (399.9, ATMOSPHERE_TEMPERATE),
        (400.0, ATMOSPHERE_HOT),
        (1200.0, ATMOSPHERE_HOT),
    ],
)
def test_atmosphere_color_buckets(
    earth_vector: ParameterVector, temperature: float, expected: int
) -> None:
    descriptor = derive_visual(earth_vector.replace(temperature=temperature))
    assert descriptor.atmosphere_color == expected


def test_no_atmosphere_means_no_shells(earth_vector: ParameterVector) -> None:
    assert derive_visual(earth_vector.replace(atmosphere=0.0)).shell_layers == ()
    assert derive_visual(earth_vector.replace(atmosphere=0.1)).shell_layers == ()


def test_thick_atmosphere_adds_four_shells(earth_vector: ParameterVector) -> None:
    descriptor = derive_visual(earth_vector.replace(atmosphere=5.0))

    assert len(descriptor.shell_layers) == 4
    (atmosphere,) = descriptor.layers_for(ShellRole.ATMOSPHERE)
    assert atmosphere.radius_multiplier == pytest.approx(1.08)
    assert atmosphere.opacity == 1.0
    glow = descriptor.layers_for(ShellRole.GLOW)
    assert [layer.radius_multiplier for layer in glow] == pytest.approx([1.16, 1.20, 1.24])
    assert [layer.opacity for layer in glow] == pytest.approx([0.175, 0.1, 0.025])


def test_thin_atmosphere_shell_opacities(earth_vector: ParameterVector) -> None:
    descriptor = derive_visual(earth_vector.replace(atmosphere=1.0))

    opacities = [layer.opacity for layer in descriptor.shell_layers]
    assert opacities == pytest.approx([0.4, 0.035, 0.02, 0.005])
    assert all(0.0 <= value <= 1.0 for value in opacities)


def test_star_uses_fixed_material_and_corona(earth_vector: ParameterVector) -> None:
    descriptor = derive_visual(earth_vector.replace(brightness=2.0), BodyRole.STAR)

    assert descriptor.role is BodyRole.STAR
    assert descriptor.roughness == 0.1
    assert descriptor.metalness == 0.0
    assert descriptor.emissive_intensity == pytest.approx(1.6)
    assert descriptor.base_color == DEFAULT_STAR_COLOR
    assert descriptor.atmosphere_color is None
    assert descriptor.light_color == DEFAULT_STAR_LIGHT_COLOR
    assert descriptor.light_intensity == 2.5

    corona = descriptor.layers_for(ShellRole.CORONA)
    assert len(corona) == 4 == len(descriptor.shell_layers)
    assert [layer.radius_multiplier for layer in corona] == pytest.approx([1.2, 1.4, 1.6, 1.8])
    assert [layer.opacity for layer in corona] == pytest.approx([0.15, 0.075, 0.05, 0.0375])


def test_star_material_is_not_overridden_by_preset(earth_vector: ParameterVector) -> None:
    descriptor = derive_visual(earth_vector, "star", "Earth-like")

    assert descriptor.roughness == 0.1
    assert descriptor.metalness == 0.0
    assert descriptor.base_color == 0x4A90E2


def test_default_brightness_gives_default_star_emission(earth_vector: ParameterVector) -> None:
    assert derive_visual(earth_vector, "star").emissive_intensity == pytest.approx(0.8)


def test_unknown_preset_is_ignored(earth_vector: ParameterVector, recorder) -> None:
    plain = derive_visual(earth_vector)
    unknown = derive_visual(earth_vector, preset_name="Brown Dwarf", hook=recorder)

    assert unknown == plain
    assert recorder.last("visual.preset_unknown") == {"preset": "Brown Dwarf"}
    assert recorder.last("visual.derived")["layers"] == 4


def test_override_applies_only_without_preset(earth_vector: ParameterVector) -> None:
    overrides = {"base_color": "#123456", "emissive_intensity": 0.3}

    plain = derive_visual(earth_vector, overrides=overrides)
    preset = derive_visual(earth_vector, preset_name="Earth-like", overrides=overrides)

    assert plain.base_color == 0x123456
    assert plain.emissive_intensity == 0.3
    assert preset.base_color == 0x4A90E2
    assert preset.emissive_intensity == 0.0


def test_computed_value_wins_over_override(earth_vector: ParameterVector) -> None:
    descriptor = derive_visual(earth_vector, overrides={"roughness": 0.33})
    assert descriptor.roughness == pytest.approx(88.0 / 600.0)


def test_override_fills_missing_computation(earth_vector: ParameterVector) -> None:
    unknown_temperature = earth_vector.replace(temperature=float("nan"))

    descriptor = derive_visual(
        unknown_temperature, overrides={"roughness": 0.33, "atmosphere_color": 0x00FF00}
    )
    fallback = derive_visual(unknown_temperature)

    assert descriptor.roughness == 0.33
    assert descriptor.atmosphere_color == 0x00FF00
    assert fallback.roughness == 0.5
    assert fallback.atmosphere_color == ATMOSPHERE_COLD


def test_unknown_override_field_is_rejected(earth_vector: ParameterVector) -> None:
    with pytest.raises(ValueError, match="opacity"):
        derive_visual(earth_vector, overrides={"opacity": 0.3})


def test_unknown_role_is_rejected(earth_vector: ParameterVector) -> None:
    with pytest.raises(ValueError):
        derive_visual(earth_vector, "moon")


def test_settings_change_default_glow(earth_vector: ParameterVector) -> None:
    descriptor = derive_visual(earth_vector, settings=VisualCfg(default_glow_intensity=1.0))

    assert descriptor.glow_intensity == 1.0
    assert descriptor.layers_for(ShellRole.GLOW)[0].opacity == pytest.approx(0.07)


def test_descriptor_for_star_body_uses_its_light() -> None:
    star = make_star("Sol", 3.0, light=StarPayload(light_color=0xFFD27F, light_intensity=4.0))

    descriptor = descriptor_for_body(star)

    assert descriptor.light_color == 0xFFD27F
    assert descriptor.light_intensity == 4.0


def test_descriptor_for_planet_body(earth_vector: ParameterVector) -> None:
    planet = make_planet("Terra", earth_vector)
    assert descriptor_for_body(planet, "Earth-like") == derive_visual(
        earth_vector, BodyRole.PLANET, "Earth-like"
    )


def test_payload_renders_colors(earth_vector: ParameterVector) -> None:
    planet = derive_visual(earth_vector, preset_name="Earth-like").to_payload()
    star = derive_visual(earth_vector, BodyRole.STAR).to_payload()

    assert planet["baseColor"] == "#4a90e2"
    assert planet["atmosphereColor"] == "#87ceeb"
    assert planet["shellLayers"][0] == {
        "radiusMultiplier": 1.08,
        "opacity": 0.4,
        "blendMode": "additive",
        "role": "atmosphere",
    }
    assert "lightColor" not in planet
    assert star["baseColor"] == "#ffff00"
    assert star["atmosphereColor"] is None
    assert star["lightColor"] == "#fff5c0"
