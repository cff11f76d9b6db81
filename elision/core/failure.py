"""Assertion errors describing a failed string comparison."""
from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from elision.configuration.settings import ElisionSettings
from elision.core.elider import format_expected_and_actual
from elision.core.fields import Field
from elision.errors import InputValidationError
from elision.reporting.renderer import make_message


class ComparisonFailure(AssertionError):
    """An assertion error built from messages and fields.

    The displayed message may abbreviate the compared values, but ``expected``
    and ``actual`` always hold them in full for tooling that wants the raw
    strings.
    """

    def __init__(
        self,
        messages: Sequence[str],
        fields: Sequence[Field],
        expected: str,
        actual: str,
        cause: BaseException | None = None,
    ) -> None:
        self.messages = tuple(messages)
        self.fields = tuple(fields)
        self.expected = expected
        self.actual = actual
        self.message = make_message(self.messages, self.fields)
        super().__init__(self.message)
        if cause is not None:
            self.__cause__ = cause


class FailureBuilder(Protocol):
    """Turns assembled fields into the error raised to the test runner."""

    def __call__(
        self,
        messages: Sequence[str],
        fields: Sequence[Field],
        expected: str,
        actual: str,
        cause: BaseException | None,
    ) -> AssertionError:
        ...


def build_failure_object(
    messages: Sequence[str],
    fields: Sequence[Field],
    expected: str,
    actual: str,
    cause: BaseException | None,
) -> AssertionError:
    """Default builder producing a :class:`ComparisonFailure`."""

    return ComparisonFailure(messages, fields, expected, actual, cause)


def make_fields(
    head_fields: Iterable[Field],
    tail_fields: Iterable[Field],
    expected: str,
    actual: str,
    *,
    settings: ElisionSettings | None = None,
) -> tuple[Field, ...]:
    """Place the expected/actual fields between the caller's head and tail fields."""

    return (
        *head_fields,
        *format_expected_and_actual(expected, actual, settings=settings),
        *tail_fields,
    )


def create_comparison_failure(
    messages: Iterable[str],
    head_fields: Iterable[Field],
    tail_fields: Iterable[Field],
    expected: str,
    actual: str,
    cause: BaseException | None = None,
    *,
    builder: FailureBuilder = build_failure_object,
    settings: ElisionSettings | None = None,
) -> AssertionError:
    """Build the error reported when *actual* was not equal to *expected*."""

    _check_not_none(expected, "expected")
    _check_not_none(actual, "actual")

    fields = make_fields(head_fields, tail_fields, expected, actual, settings=settings)
    return builder(tuple(messages), fields, expected, actual, cause)


def _check_not_none(value: object, name: str) -> None:
    if value is None:
        raise InputValidationError(
            message=f"The {name} value of a string comparison must not be None.",
            remediation=f"Pass the {name} string, using '' for an empty value.",
        )


__all__ = [
    "ComparisonFailure",
    "FailureBuilder",
    "build_failure_object",
    "create_comparison_failure",
    "make_fields",
]
