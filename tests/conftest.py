from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from exoengine.parameters import ParameterVector


class EventRecorder:
    """Collects events emitted through an observability hook."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def __call__(self, name: str, fields: Mapping[str, Any]) -> None:
        self.events.append((name, dict(fields)))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]

    def last(self, name: str) -> dict[str, Any]:
        for event, fields in reversed(self.events):
            if event == name:
                return fields
        raise AssertionError(f"event {name!r} not emitted; saw {self.names()}")


@pytest.fixture
def recorder() -> EventRecorder:
    return EventRecorder()


@pytest.fixture
def earth_vector() -> ParameterVector:
    return ParameterVector(
        mass=1.0,
        radius=1.0,
        temperature=288.0,
        orbital_distance=1.0,
        atmosphere=1.0,
        composition=71.0,
        brightness=1.0,
    )


@pytest.fixture
def hot_jupiter_vector() -> ParameterVector:
    return ParameterVector(
        mass=150.0,
        radius=12.0,
        temperature=1500.0,
        orbital_distance=0.05,
        atmosphere=80.0,
        composition=5.0,
        brightness=1.5,
    )
