"""Shared exit code definitions for Elision CLI operations."""
from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Deterministic exit codes returned by the CLI."""

    SUCCESS = 0
    UNEXPECTED_ERROR = 1
    INVALID_INPUT = 2
    MISMATCH = 3


__all__ = ["ExitCode"]
