"""Scoring primitives exposed at the package level."""

from __future__ import annotations

from .ranges import Interval, range_score
from .similarity import parameter_similarity, similarity
from .weights import PARAMETER_WEIGHTS, validate_weights

__all__ = [
    "Interval",
    "PARAMETER_WEIGHTS",
    "parameter_similarity",
    "range_score",
    "similarity",
    "validate_weights",
]
