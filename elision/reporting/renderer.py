"""Assemble free-form messages and labeled fields into one failure report."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Sequence

if TYPE_CHECKING:
    from elision.core.fields import Field


def make_message(messages: Iterable[str], fields: Sequence[Field]) -> str:
    """Render *messages* one per line followed by one line per field.

    Labels are padded to a common width so values line up. When any value
    spans several lines, each field is written as ``label:`` followed by its
    value on the next line instead.
    """

    lines: list[str] = list(messages)

    longest_label = max((len(item.label) for item in fields), default=0)
    multiline = any("\n" in item.text for item in fields)

    for item in fields:
        if multiline:
            lines.append(f"{item.label}:\n{item.text}")
        else:
            lines.append(f"{item.label.ljust(longest_label)}: {item.text}")

    return "\n".join(lines)


__all__ = ["make_message"]
