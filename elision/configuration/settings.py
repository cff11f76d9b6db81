"""Elision thresholds and their optional YAML override file."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml

from elision.errors import InputValidationError

CONTEXT = 5
WORTH_HIDING = 60
MIN_HIDDEN = 3
ELLIPSIS = "…"


@dataclass(frozen=True)
class ElisionSettings:
    """Thresholds controlling when and how common text is hidden."""

    context: int = CONTEXT
    worth_hiding: int = WORTH_HIDING
    min_hidden: int = MIN_HIDDEN
    ellipsis: str = ELLIPSIS


DEFAULT_SETTINGS = ElisionSettings()

_INTEGER_KEYS = ("context", "worth_hiding", "min_hidden")


def load_settings(path: Path | None = None) -> ElisionSettings:
    """Return the defaults, overridden by the YAML mapping at *path* when given."""

    if path is None:
        return DEFAULT_SETTINGS

    resolved = _resolve_path(path)
    payload = _load_yaml(resolved)
    return settings_from_mapping(payload, source=resolved)


def settings_from_mapping(
    payload: Mapping[str, object], *, source: Path | None = None
) -> ElisionSettings:
    """Validate *payload* and apply it on top of the default settings."""

    display = str(source) if source is not None else "<settings>"
    known = {item.name for item in fields(ElisionSettings)}
    unknown = sorted(str(key) for key in payload if key not in known)
    if unknown:
        raise InputValidationError(
            message=f"Settings file {display} has unknown keys: {', '.join(unknown)}.",
            remediation=f"Use only: {', '.join(sorted(known))}.",
        )

    overrides: dict[str, object] = {}
    for key in _INTEGER_KEYS:
        if key not in payload:
            continue
        value = payload[key]
        # bool is an int subclass; reject it explicitly.
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InputValidationError(
                message=f"Setting '{key}' in {display} must be a non-negative integer.",
                remediation=(
                    f"Set '{key}' to a whole number such as {getattr(DEFAULT_SETTINGS, key)}."
                ),
            )
        overrides[key] = value

    if "ellipsis" in payload:
        marker = payload["ellipsis"]
        if not isinstance(marker, str):
            raise InputValidationError(
                message=f"Setting 'ellipsis' in {display} must be a string.",
                remediation="Quote the marker in YAML, for example: ellipsis: \"...\".",
            )
        overrides["ellipsis"] = marker

    return replace(DEFAULT_SETTINGS, **overrides)


def _resolve_path(path: Path) -> Path:
    candidate = path.expanduser()
    try:
        resolved = candidate.resolve()
    except OSError:
        resolved = candidate

    if not resolved.exists() or not resolved.is_file():
        raise InputValidationError(
            message=f"Settings file {resolved} does not exist or is not a file.",
            remediation="Verify the path or remove the --config option.",
        )
    return resolved


def _load_yaml(path: Path) -> dict:
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InputValidationError(
            message=f"Unable to read settings file {path}.",
            remediation="Check file permissions and retry.",
        ) from exc

    try:
        loaded = yaml.safe_load(raw_text) or {}
    except yaml.YAMLError as exc:
        raise InputValidationError(
            message=f"Settings file {path} contains invalid YAML.",
            remediation="Ensure the file is a flat mapping of setting names to values.",
        ) from exc

    if not isinstance(loaded, dict):
        raise InputValidationError(
            message=f"Settings file {path} must define a mapping at the root level.",
            remediation="Provide keys such as 'context' and 'worth_hiding' at the top level.",
        )
    return loaded


__all__ = [
    "CONTEXT",
    "DEFAULT_SETTINGS",
    "ELLIPSIS",
    "ElisionSettings",
    "MIN_HIDDEN",
    "WORTH_HIDING",
    "load_settings",
    "settings_from_mapping",
]
