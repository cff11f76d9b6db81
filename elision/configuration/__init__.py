"""Configuration utilities for Elision."""
from __future__ import annotations

from .settings import (
    CONTEXT,
    DEFAULT_SETTINGS,
    WORTH_HIDING,
    ElisionSettings,
    load_settings,
    settings_from_mapping,
)

__all__ = [
    "CONTEXT",
    "DEFAULT_SETTINGS",
    "ElisionSettings",
    "WORTH_HIDING",
    "load_settings",
    "settings_from_mapping",
]
