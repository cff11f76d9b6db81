from __future__ import annotations

from pathlib import Path

from elision.errors import ElisionError, InputValidationError
from elision.exit_codes import ExitCode
from elision.orchestration import (
    MATCH_MESSAGE,
    compare_values,
    handle_domain_error,
    run_comparison,
)


def test_compare_values_reports_match() -> None:
    outcome = compare_values("same", "same")

    assert outcome.exit_code == ExitCode.SUCCESS
    assert outcome.status == "match"
    assert outcome.message == MATCH_MESSAGE
    assert outcome.failure is None


def test_compare_values_reports_mismatch_with_failure() -> None:
    outcome = compare_values("Hello", "hello", messages=["greeting differs"])

    assert outcome.exit_code == ExitCode.MISMATCH
    assert outcome.status == "mismatch"
    assert outcome.message == "greeting differs\nexpected: Hello\nbut was : hello"
    assert outcome.failure is not None
    assert outcome.failure.expected == "Hello"


def test_run_comparison_reads_files(tmp_path: Path) -> None:
    expected = tmp_path / "expected.txt"
    expected.write_text("a" * 100 + "x" + "b" * 100, encoding="utf-8")
    actual = tmp_path / "actual.txt"
    actual.write_text("a" * 100 + "y" + "b" * 100, encoding="utf-8")

    outcome = run_comparison(expected, actual)

    assert outcome.exit_code == ExitCode.MISMATCH
    assert outcome.message == "expected: …aaaaaxbbbbb…\nbut was : …aaaaaybbbbb…"


def test_run_comparison_applies_settings_file(tmp_path: Path) -> None:
    expected = tmp_path / "expected.txt"
    expected.write_text("a" * 10 + "x", encoding="utf-8")
    actual = tmp_path / "actual.txt"
    actual.write_text("a" * 10 + "y", encoding="utf-8")
    config = tmp_path / "elision.yaml"
    config.write_text("context: 0\nworth_hiding: 10\nmin_hidden: 0\nellipsis: '...'\n")

    outcome = run_comparison(expected, actual, config_path=config)

    assert outcome.message == "expected: ...x\nbut was : ...y"


def test_run_comparison_maps_undecodable_input(tmp_path: Path) -> None:
    expected = tmp_path / "expected.txt"
    expected.write_bytes(bytes([0x81, 0x82]))
    actual = tmp_path / "actual.txt"
    actual.write_text("text", encoding="utf-8")

    outcome = run_comparison(expected, actual)

    assert outcome.exit_code == ExitCode.INVALID_INPUT
    assert outcome.status == "failure"
    assert outcome.remediation


def test_handle_domain_error_falls_back_for_unknown_errors() -> None:
    outcome = handle_domain_error(ElisionError(""))

    assert outcome.exit_code == ExitCode.UNEXPECTED_ERROR
    assert outcome.message == "An unexpected error occurred during the comparison."


def test_handle_domain_error_keeps_specific_message() -> None:
    outcome = handle_domain_error(InputValidationError("Bad path", remediation="Fix it"))

    assert outcome.exit_code == ExitCode.INVALID_INPUT
    assert outcome.message == "Bad path"
    assert outcome.remediation == "Fix it"
