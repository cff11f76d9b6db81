"""Orchestration layer for Elision."""
from __future__ import annotations

from .runner import (
    MATCH_MESSAGE,
    ComparisonOutcome,
    compare_values,
    handle_domain_error,
    run_comparison,
)

__all__ = [
    "ComparisonOutcome",
    "MATCH_MESSAGE",
    "compare_values",
    "handle_domain_error",
    "run_comparison",
]
