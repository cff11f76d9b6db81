"""Domain-specific exception hierarchy for Elision."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ElisionError(Exception):
    """Base exception for Elision-specific errors with optional remediation text."""

    message: str
    remediation: str | None = None

    def __post_init__(self) -> None:  # pragma: no cover - dataclass validation hook
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InputValidationError(ElisionError, ValueError):
    """Raised for missing values, unreadable inputs or invalid settings."""


__all__ = [
    "ElisionError",
    "InputValidationError",
]
