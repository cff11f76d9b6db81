from __future__ import annotations

import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from elision import __version__
from elision.cli import ExitCode, app, configure_logging

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logging_state() -> None:
    """Ensure each test runs with a clean logging configuration."""

    configure_logging._configured = False  # type: ignore[attr-defined]
    configure_logging._level = logging.INFO  # type: ignore[attr-defined]
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    yield
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    configure_logging._configured = False  # type: ignore[attr-defined]
    configure_logging._level = logging.INFO  # type: ignore[attr-defined]


def _normalize(output: str) -> str:
    """Collapse whitespace to simplify assertions across Rich formatting."""

    return " ".join(output.split())


def test_root_help_lists_commands() -> None:
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == int(ExitCode.SUCCESS)
    normalized = _normalize(result.output)
    assert "compare" in normalized
    assert "inline" in normalized
    assert "--quiet" in normalized


def test_version_flag() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == int(ExitCode.SUCCESS)
    assert __version__ in result.output


def test_inline_reports_mismatch() -> None:
    expected = "a" * 100 + "x" + "b" * 100
    actual = "a" * 100 + "y" + "b" * 100

    result = runner.invoke(app, ["--quiet", "inline", expected, actual, "-m", "payload differs"])

    assert result.exit_code == int(ExitCode.MISMATCH)
    assert "payload differs" in result.output
    assert "expected: …aaaaaxbbbbb…" in result.output
    assert "but was : …aaaaaybbbbb…" in result.output


def test_inline_reports_match() -> None:
    result = runner.invoke(app, ["--quiet", "inline", "same", "same"])

    assert result.exit_code == int(ExitCode.SUCCESS)
    assert "Values are equal." in result.output


def test_compare_requires_required_options() -> None:
    result = runner.invoke(app, ["compare"])

    assert result.exit_code == int(ExitCode.INVALID_INPUT)
    assert "Missing option" in result.output or "Usage" in result.output


def test_compare_reads_files(tmp_path: Path) -> None:
    expected = tmp_path / "expected.txt"
    expected.write_text("short", encoding="utf-8")
    actual = tmp_path / "actual.txt"
    actual.write_text("shore", encoding="utf-8")

    result = runner.invoke(
        app,
        ["--quiet", "compare", "--expected", str(expected), "--actual", str(actual)],
    )

    assert result.exit_code == int(ExitCode.MISMATCH)
    assert "expected: short" in result.output
    assert "but was : shore" in result.output
    assert getattr(configure_logging, "_level", logging.INFO) == logging.WARNING


def test_compare_reports_undecodable_file(tmp_path: Path) -> None:
    expected = tmp_path / "expected.txt"
    expected.write_bytes(bytes([0x81, 0x82, 0x83]))
    actual = tmp_path / "actual.txt"
    actual.write_text("text", encoding="utf-8")

    result = runner.invoke(
        app,
        ["compare", "-e", str(expected), "-a", str(actual)],
        catch_exceptions=False,
    )

    assert result.exit_code == int(ExitCode.INVALID_INPUT)
    assert "expected:" not in result.output


def test_inline_rejects_invalid_settings(tmp_path: Path) -> None:
    config = tmp_path / "elision.yaml"
    config.write_text("context: -4\n", encoding="utf-8")

    result = runner.invoke(
        app,
        ["inline", "left", "right", "--config", str(config)],
        catch_exceptions=False,
    )

    assert result.exit_code == int(ExitCode.INVALID_INPUT)
