"""Elision: readable expected/actual messages for failed string comparisons."""
from __future__ import annotations

from .errors import ElisionError

__all__ = ("__version__", "ElisionError")

__version__ = "0.1.0"
