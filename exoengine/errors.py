"""Exception hierarchy shared by the exoengine modules."""

from __future__ import annotations

__all__ = [
    "CatalogError",
    "ExoEngineError",
    "RemoteClassificationError",
    "UnknownArchetypeError",
]


class ExoEngineError(RuntimeError):
    """Base class for runtime failures raised by exoengine."""


class CatalogError(ValueError):
    """Raised when a static table (catalog, presets, weights) is malformed."""


class UnknownArchetypeError(KeyError):
    """Raised by strict catalog lookups for names that are not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown archetype '{self.name}'"


class RemoteClassificationError(ExoEngineError):
    """Wraps a failed or malformed remote classification round-trip."""

    def __init__(self, reason: str, message: str) -> None:
        super().__init__(message)
        self.reason = reason
