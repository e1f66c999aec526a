"""Configuration helpers exposed at :mod:`exoengine.config`."""

from __future__ import annotations

from .settings import (
    CONFIG_ENV_VAR,
    ClassifierCfg,
    ExchangeCfg,
    FeedbackCfg,
    Settings,
    VisualCfg,
    default_settings,
    load_settings,
    settings_from_mapping,
)

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
