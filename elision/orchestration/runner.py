"""Execution orchestrator for Elision CLI commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from elision.configuration import ElisionSettings, load_settings
from elision.core import ComparisonFailure, create_comparison_failure
from elision.errors import ElisionError, InputValidationError
from elision.exit_codes import ExitCode
from elision.utils import LoadedDocument, load_text_document

logger = logging.getLogger("elision.orchestration.runner")

MATCH_MESSAGE = "Values are equal."


@dataclass(frozen=True)
class ComparisonOutcome:
    """Result of comparing an expected value with an actual one."""

    exit_code: ExitCode
    status: str
    message: str | None = None
    remediation: str | None = None
    failure: ComparisonFailure | None = None


_ERROR_MAPPINGS: tuple[
    tuple[type[ElisionError], ExitCode, str, str | None],
    ...,
] = (
    (
        InputValidationError,
        ExitCode.INVALID_INPUT,
        "Input validation failed.",
        "Double-check the compared file paths and the settings file.",
    ),
)


def compare_values(
    expected: str,
    actual: str,
    *,
    messages: Sequence[str] = (),
    settings: ElisionSettings | None = None,
) -> ComparisonOutcome:
    """Compare two strings and describe the mismatch, if any."""

    if expected == actual:
        logger.info("Compared values are equal", extra={"length": len(expected)})
        return ComparisonOutcome(
            exit_code=ExitCode.SUCCESS,
            status="match",
            message=MATCH_MESSAGE,
        )

    failure = create_comparison_failure(
        messages,
        (),
        (),
        expected,
        actual,
        settings=settings,
    )
    logger.info(
        "Compared values differ",
        extra={
            "expected_chars": len(expected),
            "actual_chars": len(actual),
            "field_count": len(failure.fields),
        },
    )
    return ComparisonOutcome(
        exit_code=ExitCode.MISMATCH,
        status="mismatch",
        message=failure.message,
        failure=failure,
    )


def run_comparison(
    expected_path: Path,
    actual_path: Path,
    *,
    messages: Sequence[str] = (),
    config_path: Path | None = None,
) -> ComparisonOutcome:
    """Load two files and compare their contents."""

    try:
        settings = load_settings(config_path)
        expected_doc = _load_document(expected_path, description="expected")
        actual_doc = _load_document(actual_path, description="actual")
        return compare_values(
            expected_doc.text,
            actual_doc.text,
            messages=messages,
            settings=settings,
        )
    except ElisionError as error:
        return handle_domain_error(error)
    except Exception as error:  # pragma: no cover - defensive
        logger.exception("Unexpected error occurred during comparison.")
        return ComparisonOutcome(
            exit_code=ExitCode.UNEXPECTED_ERROR,
            status="failure",
            message=str(error) or "An unexpected error occurred during the comparison.",
            remediation="Re-run without --quiet and inspect the logs for details.",
        )


def _load_document(path: Path, *, description: str) -> LoadedDocument:
    document = load_text_document(path, description)
    logger.info(
        "Loaded document",
        extra={
            "role": description,
            "document": document.display_name,
            "encoding": document.display_encoding,
            "chars": len(document.text),
        },
    )
    return document


def handle_domain_error(error: ElisionError) -> ComparisonOutcome:
    """Translate a domain error into an outcome and log remediation hints."""

    exit_code, default_message, default_remediation = _map_error(error)
    message = error.message or default_message
    remediation = error.remediation or default_remediation

    logger.error(message, extra={"exit_code": int(exit_code)})
    if remediation:
        logger.error("Remediation: %s", remediation)

    return ComparisonOutcome(
        exit_code=exit_code,
        status="failure",
        message=message,
        remediation=remediation,
    )


def _map_error(error: ElisionError) -> tuple[ExitCode, str, str | None]:
    for error_type, exit_code, message, remediation in _ERROR_MAPPINGS:
        if isinstance(error, error_type):
            return exit_code, message, remediation

    return (
        ExitCode.UNEXPECTED_ERROR,
        "An unexpected error occurred during the comparison.",
        "Enable logging and retry. If the issue persists, open a bug report with the logs.",
    )


__all__ = [
    "ComparisonOutcome",
    "MATCH_MESSAGE",
    "compare_values",
    "handle_domain_error",
    "run_comparison",
]
