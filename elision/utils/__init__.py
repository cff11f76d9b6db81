"""Utility helpers for Elision."""

from __future__ import annotations

from .io import (
    LoadedDocument,
    format_display_path,
    load_text_document,
    normalize_newlines,
)
from .text import common_prefix, common_suffix, valid_surrogate_pair_at

__all__ = [
    "LoadedDocument",
    "common_prefix",
    "common_suffix",
    "format_display_path",
    "load_text_document",
    "normalize_newlines",
    "valid_surrogate_pair_at",
]
