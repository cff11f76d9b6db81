from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.logging import RichHandler

from . import __version__
from .configuration import load_settings
from .errors import ElisionError
from .exit_codes import ExitCode
from .orchestration import (
    ComparisonOutcome,
    compare_values,
    handle_domain_error,
    run_comparison,
)

APP_NAME = "elision"
_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

app = typer.Typer(
    name=APP_NAME,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def configure_logging(*, quiet: bool = False) -> None:
    """Initialise application-wide logging."""

    level = logging.WARNING if quiet else logging.INFO
    root = logging.getLogger()

    if getattr(configure_logging, "_configured", False):
        root.setLevel(level)
        for handler in root.handlers:
            handler.setLevel(level)
        configure_logging._level = level
        return

    handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))

    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    configure_logging._configured = True
    configure_logging._level = level


def _emit(outcome: ComparisonOutcome) -> None:
    """Print the comparison result and exit with its code."""

    # Domain errors were already logged with their remediation.
    if outcome.status != "failure" and outcome.message:
        typer.echo(outcome.message)
    raise typer.Exit(code=int(outcome.exit_code))


_MESSAGE_OPTION = typer.Option(
    [],
    "--message",
    "-m",
    help="Line printed above the expected/actual fields (pass multiple times).",
)
_CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    exists=True,
    file_okay=True,
    dir_okay=False,
    readable=True,
    help="YAML file overriding the elision thresholds.",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Reduce log output to warnings and errors.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the Elision version and exit.",
    ),
) -> None:
    """Configure logging and handle global options."""

    configure_logging(quiet=quiet)

    if version:
        typer.echo(__version__)
        raise typer.Exit(code=int(ExitCode.SUCCESS))

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=int(ExitCode.SUCCESS))


@app.command("compare")
def compare(
    expected: Path = typer.Option(
        ...,
        "--expected",
        "-e",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="File holding the expected text.",
    ),
    actual: Path = typer.Option(
        ...,
        "--actual",
        "-a",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="File holding the actual text.",
    ),
    message: list[str] = _MESSAGE_OPTION,
    config: Path | None = _CONFIG_OPTION,
) -> None:
    """Compare the contents of two text files."""

    outcome = run_comparison(
        expected,
        actual,
        messages=message,
        config_path=config,
    )
    _emit(outcome)


@app.command("inline")
def inline(
    expected: str = typer.Argument(..., help="Expected text."),
    actual: str = typer.Argument(..., help="Actual text."),
    message: list[str] = _MESSAGE_OPTION,
    config: Path | None = _CONFIG_OPTION,
) -> None:
    """Compare two strings given on the command line."""

    logger = logging.getLogger("elision.cli")

    try:
        settings = load_settings(config)
    except ElisionError as exc:
        outcome = handle_domain_error(exc)
        raise typer.Exit(code=int(outcome.exit_code)) from exc
    except Exception as exc:  # pragma: no cover - defensive guard
        logger.exception("Unexpected error while loading settings.")
        raise typer.Exit(code=int(ExitCode.UNEXPECTED_ERROR)) from exc

    _emit(compare_values(expected, actual, messages=message, settings=settings))


def entrypoint() -> None:
    """Execute the Typer application."""

    app()


__all__ = ["app", "entrypoint", "configure_logging", "ExitCode"]
