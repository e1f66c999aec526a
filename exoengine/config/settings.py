"""Configuration models and helpers for exoengine settings."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from ..errors import CatalogError
from ..scoring.weights import PARAMETER_WEIGHTS, validate_weights

__all__ = [
    "CONFIG_ENV_VAR",
    "ClassifierCfg",
    "ExchangeCfg",
    "FeedbackCfg",
    "Settings",
    "VisualCfg",
    "default_settings",
    "load_settings",
    "settings_from_mapping",
]

LOG = logging.getLogger(__name__)

CONFIG_ENV_VAR = "EXOENGINE_CONFIG"


# -------------------- Settings Schema --------------------


class ClassifierCfg(BaseModel):
    """Threshold, rounding and weights used when ranking archetypes."""

    threshold: float = 0.10
    decimals: int = 2
    weights: Dict[str, float] = Field(default_factory=lambda: dict(PARAMETER_WEIGHTS))

    @field_validator("threshold", mode="before")
    @classmethod
    def _cap_threshold(cls, value: float) -> float:
        numeric = float(value)
        return max(0.0, min(1.0, numeric))

    @field_validator("decimals", mode="before")
    @classmethod
    def _cap_decimals(cls, value: int) -> int:
        return max(0, min(6, int(value)))

    @model_validator(mode="after")
    def _check_weights(self) -> ClassifierCfg:
        try:
            self.weights = validate_weights(self.weights)
        except CatalogError as exc:
            raise ValueError(str(exc)) from exc
        return self


class VisualCfg(BaseModel):
    """Defaults for the visual derivation engine."""

    default_glow_intensity: float = 0.5
    atmosphere_threshold: float = 0.1

    @field_validator("default_glow_intensity", "atmosphere_threshold", mode="before")
    @classmethod
    def _non_negative(cls, value: float) -> float:
        return max(0.0, float(value))


class ExchangeCfg(BaseModel):
    """Remote classification exchange settings."""

    timeout_s: float = 5.0
    endpoint: str = "/api/classify-exoplanet"

    @field_validator("timeout_s", mode="before")
    @classmethod
    def _cap_timeout(cls, value: float) -> float:
        numeric = float(value)
        return max(0.1, min(120.0, numeric))


class FeedbackCfg(BaseModel):
    """Similarity level at which a guess counts as a match."""

    win_threshold: float = 0.8

    @field_validator("win_threshold", mode="before")
    @classmethod
    def _cap_win_threshold(cls, value: float) -> float:
        numeric = float(value)
        return max(0.0, min(1.0, numeric))


class Settings(BaseModel):
    """Top-level settings container."""

    classifier: ClassifierCfg = Field(default_factory=ClassifierCfg)
    visual: VisualCfg = Field(default_factory=VisualCfg)
    exchange: ExchangeCfg = Field(default_factory=ExchangeCfg)
    feedback: FeedbackCfg = Field(default_factory=FeedbackCfg)


# -------------------- Loading --------------------


def default_settings() -> Settings:
    """Instantiate a Settings object populated with defaults."""

    return Settings()


def settings_from_mapping(data: Mapping[str, Any] | None) -> Settings:
    """Validate a raw mapping (e.g. parsed YAML) into :class:`Settings`."""

    if not data:
        return default_settings()
    return Settings(**dict(data))


def _resolve_path(path: Optional[Path]) -> Optional[Path]:
    if path is not None:
        return Path(path)
    raw = os.environ.get(CONFIG_ENV_VAR, "").strip()
    return Path(raw) if raw else None


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from YAML, falling back to defaults.

    ``path`` takes precedence over the ``EXOENGINE_CONFIG`` environment
    variable. A missing file yields the defaults; nothing is written to disk.
    """

    source_path = _resolve_path(path)
    if source_path is None or not source_path.exists():
        if source_path is not None:
            LOG.info("settings.missing", extra={"path": str(source_path)})
        return default_settings()
    with source_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        LOG.warning("settings.not_a_mapping", extra={"path": str(source_path)})
        raw = {}
    return settings_from_mapping(raw)
