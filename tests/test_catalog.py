"""Archetype catalog loading and validation."""

from __future__ import annotations

import pytest

from exoengine.catalogs import (
    ArchetypeDefinition,
    archetype_catalog,
    archetype_names,
    build_catalog,
    find_archetype,
    get_archetype,
)
from exoengine.errors import CatalogError, UnknownArchetypeError
from exoengine.parameters import WEIGHTED_PARAMETERS


def test_packaged_catalog_order() -> None:
    assert archetype_names() == (
        "Earth-like",
        "Super Earth",
        "Hot Jupiter",
        "Gas Giant",
        "Ice Giant",
        "Ocean World",
        "Desert World",
    )


def test_every_archetype_defines_all_weighted_intervals() -> None:
    for archetype in archetype_catalog():
        assert set(archetype.intervals) == set(WEIGHTED_PARAMETERS)
        for lower, upper in archetype.intervals.values():
            assert lower <= upper


def test_lookup_helpers() -> None:
    hot = get_archetype("Hot Jupiter")
    assert hot.interval("orbital_distance") == (0.01, 0.1)
    assert find_archetype("Hot Jupiter") is hot
    assert find_archetype("Brown Dwarf") is None


def test_strict_lookup_raises_key_error() -> None:
    with pytest.raises(UnknownArchetypeError) as excinfo:
        get_archetype("Brown Dwarf")
    assert isinstance(excinfo.value, KeyError)
    assert str(excinfo.value) == "Unknown archetype 'Brown Dwarf'"


def test_intervals_are_read_only() -> None:
    archetype = get_archetype("Earth-like")
    with pytest.raises(TypeError):
        archetype.intervals["mass"] = (0.0, 1.0)  # type: ignore[index]


def _intervals(**overrides: tuple[float, float]) -> dict[str, tuple[float, float]]:
    data = {name: (0.0, 1.0) for name in WEIGHTED_PARAMETERS}
    data.update(overrides)
    return data


def test_inverted_interval_is_rejected() -> None:
    with pytest.raises(CatalogError, match="inverted mass"):
        ArchetypeDefinition("Broken", "", _intervals(mass=(2.0, 1.0)))


def test_missing_interval_is_rejected() -> None:
    intervals = _intervals()
    del intervals["composition"]
    with pytest.raises(CatalogError):
        ArchetypeDefinition("Partial", "", intervals)


def test_zero_width_interval_is_allowed() -> None:
    archetype = ArchetypeDefinition("Point", "", _intervals(radius=(1.0, 1.0)))
    assert archetype.interval("radius") == (1.0, 1.0)


def test_duplicate_names_are_rejected() -> None:
    entry = {"name": "Twin", "intervals": _intervals()}
    with pytest.raises(CatalogError, match="duplicate"):
        build_catalog([entry, dict(entry)])


def test_malformed_entries_are_rejected() -> None:
    with pytest.raises(CatalogError):
        build_catalog([{"description": "no name"}])
    with pytest.raises(CatalogError):
        build_catalog([{"name": "Bad", "intervals": {"mass": [1.0]}}])
