"""Code-unit string helpers shared by the elider."""
from __future__ import annotations


def is_high_surrogate(char: str) -> bool:
    return "\ud800" <= char <= "\udbff"


def is_low_surrogate(char: str) -> bool:
    return "\udc00" <= char <= "\udfff"


def valid_surrogate_pair_at(text: str, index: int) -> bool:
    """Return True when *text* holds a high/low surrogate pair starting at *index*."""

    return (
        0 <= index <= len(text) - 2
        and is_high_surrogate(text[index])
        and is_low_surrogate(text[index + 1])
    )


def common_prefix(first: str, second: str) -> str:
    """Return the longest prefix shared by both strings without splitting a surrogate pair."""

    limit = min(len(first), len(second))
    length = 0
    while length < limit and first[length] == second[length]:
        length += 1
    if valid_surrogate_pair_at(first, length - 1) or valid_surrogate_pair_at(
        second, length - 1
    ):
        length -= 1
    return first[:length]


def common_suffix(first: str, second: str) -> str:
    """Return the longest suffix shared by both strings without splitting a surrogate pair."""

    limit = min(len(first), len(second))
    length = 0
    while length < limit and first[-length - 1] == second[-length - 1]:
        length += 1
    if valid_surrogate_pair_at(first, len(first) - length - 1) or valid_surrogate_pair_at(
        second, len(second) - length - 1
    ):
        length -= 1
    return first[len(first) - length :]


__all__ = [
    "common_prefix",
    "common_suffix",
    "is_high_surrogate",
    "is_low_surrogate",
    "valid_surrogate_pair_at",
]
