"""Radial surface perturbation parameterized by ``surface_variation``.

Each surface sample's radius is scaled by ``1 + surface_variation * 0.1 *
(u - 0.5)`` for a uniform sample ``u`` in ``[0, 1)`` chosen by the renderer.
"""

from __future__ import annotations

__all__ = ["surface_jitter_bounds", "surface_jitter_factor"]

_JITTER_SCALE = 0.1


def surface_jitter_factor(surface_variation: float, u: float) -> float:
    """Radius multiplier for one surface sample drawn at ``u``."""

    u = max(0.0, min(1.0, float(u)))
    return 1.0 + surface_variation * _JITTER_SCALE * (u - 0.5)


def surface_jitter_bounds(surface_variation: float) -> tuple[float, float]:
    """Smallest and largest multipliers: ``1 -/+ surface_variation * 0.05``."""

    half = abs(surface_variation) * _JITTER_SCALE * 0.5
    return (1.0 - half, 1.0 + half)
