"""Abbreviate expected/actual strings that share a long prefix or suffix.

Two long strings that differ only somewhere in the middle are hard to read
side by side. The elider hides the text the values have in common, keeping a
few characters of context around the divergence, and marks each cut with an
ellipsis. Short common regions are never hidden.
"""
from __future__ import annotations

from elision.configuration.settings import (
    CONTEXT,
    DEFAULT_SETTINGS,
    WORTH_HIDING,
    ElisionSettings,
)
from elision.core.fields import Field, field
from elision.utils.text import common_prefix, common_suffix, valid_surrogate_pair_at

EXPECTED_LABEL = "expected"
ACTUAL_LABEL = "but was"


def format_expected_and_actual(
    expected: str,
    actual: str,
    *,
    settings: ElisionSettings | None = None,
) -> tuple[Field, Field]:
    """Return the expected and actual fields, abbreviated when that saves enough text.

    Both fields hold the full values unless the strings share enough leading
    and trailing text (``WORTH_HIDING`` characters after keeping ``CONTEXT``
    characters on each side) for eliding it to pay off.
    """

    active = settings or DEFAULT_SETTINGS
    elided = _remove_common_prefix_and_suffix(expected, actual, active)
    if elided is not None:
        return elided
    return field(EXPECTED_LABEL, expected), field(ACTUAL_LABEL, actual)


def _remove_common_prefix_and_suffix(
    expected: str, actual: str, settings: ElisionSettings
) -> tuple[Field, Field] | None:
    raw_prefix = len(common_prefix(expected, actual))
    prefix = max(0, raw_prefix - settings.context)
    while prefix > 0 and valid_surrogate_pair_at(expected, prefix - 1):
        prefix -= 1
    if prefix <= settings.min_hidden:
        # A short common prefix may as well be shown.
        prefix = 0

    # Measured past the raw prefix so the two regions never overlap.
    raw_suffix = len(common_suffix(expected[raw_prefix:], actual[raw_prefix:]))
    suffix = max(0, raw_suffix - settings.context)
    while suffix > 0 and valid_surrogate_pair_at(expected, len(expected) - suffix - 1):
        suffix -= 1
    if suffix <= settings.min_hidden:
        suffix = 0

    if prefix + suffix < settings.worth_hiding:
        return None

    return (
        field(EXPECTED_LABEL, _hide_prefix_and_suffix(expected, prefix, suffix, settings.ellipsis)),
        field(ACTUAL_LABEL, _hide_prefix_and_suffix(actual, prefix, suffix, settings.ellipsis)),
    )


def _hide_prefix_and_suffix(text: str, prefix: int, suffix: int, marker: str) -> str:
    middle = text[prefix : len(text) - suffix]
    return _maybe_dots(prefix, marker) + middle + _maybe_dots(suffix, marker)


def _maybe_dots(hidden: int, marker: str) -> str:
    return marker if hidden > 0 else ""


__all__ = [
    "ACTUAL_LABEL",
    "CONTEXT",
    "EXPECTED_LABEL",
    "WORTH_HIDING",
    "format_expected_and_actual",
]
