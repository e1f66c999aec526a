"""Observability primitives: event hooks and Prometheus metrics."""

from __future__ import annotations

from .events import EventHook, emit
from .metrics import (
    CLASSIFICATION_FALLBACKS,
    REMOTE_CLASSIFICATION_DURATION,
    ensure_metrics_registered,
)

__all__ = [
    "CLASSIFICATION_FALLBACKS",
    "REMOTE_CLASSIFICATION_DURATION",
    "EventHook",
    "emit",
    "ensure_metrics_registered",
]
