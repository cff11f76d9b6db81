"""Reporting helpers for Elision output."""
from __future__ import annotations

from .renderer import make_message

__all__ = ["make_message"]
