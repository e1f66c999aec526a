"""Classification exchange compatible with the remote service contract."""

from __future__ import annotations

from .resolver import (
    AsyncRemoteClassifier,
    RemoteClassifier,
    ResolvedClassification,
    aresolve_classification,
    local_classification,
    resolve_classification,
)
from .schemas import (
    ClassificationOut,
    ClassificationRequest,
    ClassificationResponse,
    ParameterPayload,
)

__all__ = [
    "AsyncRemoteClassifier",
    "ClassificationOut",
    "ClassificationRequest",
    "ClassificationResponse",
    "ParameterPayload",
    "RemoteClassifier",
    "ResolvedClassification",
    "aresolve_classification",
    "local_classification",
    "resolve_classification",
]
