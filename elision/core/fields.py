"""Labeled values that make up a failure report."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Field:
    """A single ``label: text`` line of a failure report."""

    label: str
    text: str

    def __str__(self) -> str:
        return f"{self.label}: {self.text}"


def field(label: str, text: str) -> Field:
    return Field(label=label, text=text)


__all__ = ["Field", "field"]
