"""Core comparison formatting for Elision."""
from __future__ import annotations

from .elider import ACTUAL_LABEL, EXPECTED_LABEL, format_expected_and_actual
from .failure import (
    ComparisonFailure,
    FailureBuilder,
    build_failure_object,
    create_comparison_failure,
    make_fields,
)
from .fields import Field, field

__all__ = [
    "ACTUAL_LABEL",
    "ComparisonFailure",
    "EXPECTED_LABEL",
    "FailureBuilder",
    "Field",
    "build_failure_object",
    "create_comparison_failure",
    "field",
    "format_expected_and_actual",
    "make_fields",
]
