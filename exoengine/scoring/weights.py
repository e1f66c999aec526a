"""Per-parameter weights shared by the classifier and the similarity metric."""

from __future__ import annotations

import math
from collections.abc import Mapping
from types import MappingProxyType

from ..errors import CatalogError
from ..parameters import WEIGHTED_PARAMETERS

__all__ = ["PARAMETER_WEIGHTS", "validate_weights"]


PARAMETER_WEIGHTS: Mapping[str, float] = MappingProxyType(
    {
        "mass": 0.20,
        "radius": 0.20,
        "temperature": 0.20,
        "orbital_distance": 0.15,
        "atmosphere": 0.15,
        "composition": 0.10,
    }
)


def validate_weights(weights: Mapping[str, float]) -> dict[str, float]:
    """Return ``weights`` as a plain dict after checking its invariants.

    The keys must be exactly the six weighted parameters, every weight must be
    non-negative and the weights must sum to ``1.0``.
    """

    keys = set(weights)
    expected = set(WEIGHTED_PARAMETERS)
    if keys != expected:
        missing = sorted(expected - keys)
        extra = sorted(keys - expected)
        raise CatalogError(f"weights must cover {sorted(expected)} (missing={missing}, extra={extra})")
    cleaned = {name: float(weights[name]) for name in WEIGHTED_PARAMETERS}
    negative = [name for name, value in cleaned.items() if value < 0.0 or math.isnan(value)]
    if negative:
        raise CatalogError(f"weights must be non-negative: {negative}")
    total = math.fsum(cleaned.values())
    if not math.isclose(total, 1.0, abs_tol=1e-9):
        raise CatalogError(f"weights must sum to 1.0 (got {total:.6f})")
    return cleaned


validate_weights(PARAMETER_WEIGHTS)
