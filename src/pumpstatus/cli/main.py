"""CLI commands for pumpstatus."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING, NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from pumpstatus.core.exceptions import PumpStatusError
from pumpstatus.core.formatting import (
    classify_battery,
    classify_expiry,
    classify_reservoir,
    format_remaining,
)


if TYPE_CHECKING:
    from pumpstatus.core.thresholds import StatusThresholds


app = typer.Typer(
    name="pumpstatus",
    help="Pump header status: reservoir, battery and pod expiry at a glance.",
    no_args_is_help=True,
)


class Measurement(StrEnum):
    """Measurements the classify command accepts."""

    RESERVOIR = "reservoir"
    BATTERY = "battery"
    EXPIRY = "expiry"


@app.callback()
def _configure(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging.",
    ),
) -> None:
    """Pump header status: reservoir, battery and pod expiry at a glance."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(show_path=False)],
        )


def exit_with_error(e: PumpStatusError) -> NoReturn:
    """Print a library error and its recovery hint, then exit with status 1."""
    typer.echo(f"Error: {e}", err=True)
    if e.recovery_hint:
        typer.echo(f"Hint: {e.recovery_hint}", err=True)
    raise typer.Exit(1) from None


def load_thresholds_context() -> StatusThresholds:
    """Load project thresholds for CLI commands.

    Raises:
        typer.Exit: If the config file is invalid.
    """
    from pumpstatus.config import load_thresholds

    try:
        return load_thresholds()
    except PumpStatusError as e:
        exit_with_error(e)


def get_console() -> Console:
    """Console used by all commands."""
    return Console(force_terminal=True)


@app.command()
def classify(
    measurement: Measurement = typer.Argument(..., help="What the value measures."),
    value: float = typer.Argument(
        ...,
        help="Units for reservoir, percent for battery, seconds remaining for expiry.",
    ),
) -> None:
    """Classify a single measurement as critical, warning or normal."""
    from pumpstatus.cli.formatting import format_severity

    thresholds = load_thresholds_context()
    classifiers = {
        Measurement.RESERVOIR: classify_reservoir,
        Measurement.BATTERY: classify_battery,
        Measurement.EXPIRY: classify_expiry,
    }
    try:
        severity = classifiers[measurement](value, thresholds)
    except PumpStatusError as e:
        exit_with_error(e)

    get_console().print(format_severity(severity, measurement.value))


@app.command()
def remaining(
    seconds: float = typer.Argument(..., help="Signed seconds until expiry."),
) -> None:
    """Format seconds until pod/cannula expiry, e.g. "1d 4h"."""
    from pumpstatus.cli.formatting import format_label

    try:
        token = format_remaining(seconds)
    except PumpStatusError as e:
        exit_with_error(e)

    get_console().print(Text(format_label(token)))


def main() -> None:
    """Entry point for the CLI."""
    app()
