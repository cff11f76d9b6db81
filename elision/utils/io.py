"""Reading comparison inputs from disk."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from elision.errors import InputValidationError

_PREFERRED_ENCODINGS: tuple[str, ...] = ("utf-8-sig", "cp1252")
_ENCODING_LABELS: dict[str, str] = {
    "utf-8-sig": "UTF-8 (with BOM)",
    "cp1252": "Windows-1252",
    "utf-8": "UTF-8",
}


@dataclass(frozen=True)
class LoadedDocument:
    """Text loaded from disk together with the encoding that decoded it."""

    path: Path
    text: str
    encoding: str

    @property
    def display_name(self) -> str:
        return format_display_path(self.path)

    @property
    def display_encoding(self) -> str:
        """Return a human-friendly label for the document encoding."""

        return _ENCODING_LABELS.get(self.encoding, self.encoding)


def normalize_newlines(text: str) -> str:
    """Convert Windows/legacy newline sequences to Unix-style newlines."""

    if "\r" not in text:
        return text

    text = text.replace("\r\n", "\n")
    return text.replace("\r", "\n")


def format_display_path(path: Path) -> str:
    """Return the file name, quoted when it contains spaces."""

    name = path.name
    if " " in name:
        return f'"{name}"'
    return name


def load_text_document(path: Path, description: str) -> LoadedDocument:
    """Read text from disk trying UTF-8 (BOM tolerated) first, then Windows-1252."""

    try:
        data = path.read_bytes()
    except OSError as exc:
        raise InputValidationError(
            message=f"Unable to read the {description} file {format_display_path(path)}.",
            remediation="Verify the path exists and that the file is readable.",
        ) from exc

    last_error: UnicodeDecodeError | None = None
    for encoding in _PREFERRED_ENCODINGS:
        try:
            text = data.decode(encoding)
        except UnicodeDecodeError as exc:
            last_error = exc
            continue
        return LoadedDocument(path=path, text=normalize_newlines(text), encoding=encoding)

    supported = ", ".join(_ENCODING_LABELS[enc] for enc in _PREFERRED_ENCODINGS)
    raise InputValidationError(
        message=(
            f"The {description} file {format_display_path(path)} is not encoded as {supported}."
        ),
        remediation="Re-save the file as UTF-8 and retry.",
    ) from last_error


__all__ = [
    "LoadedDocument",
    "format_display_path",
    "load_text_document",
    "normalize_newlines",
]
