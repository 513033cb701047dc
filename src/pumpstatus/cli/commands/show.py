"""Show command for CLI."""

from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path

import typer

from pumpstatus.cli.formatting import render_display
from pumpstatus.cli.main import app, exit_with_error, get_console, load_thresholds_context
from pumpstatus.core.exceptions import PumpStatusError
from pumpstatus.core.models import BatteryReading, PumpSnapshot, Reservoir, to_decimal
from pumpstatus.core.services import select_display
from pumpstatus.snapshots import load_snapshot


DATETIME_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]


@app.command()
def show(
    snapshot: Path | None = typer.Option(
        None,
        "--snapshot",
        "-s",
        help="Read pump values from a JSON snapshot file.",
    ),
    reservoir: float | None = typer.Option(
        None,
        "--reservoir",
        "-r",
        help="Insulin units remaining.",
    ),
    overfull: bool = typer.Option(
        False,
        "--overfull",
        help="Reservoir holds more than the pump can measure (shown as 50+ U).",
    ),
    battery: float | None = typer.Option(
        None,
        "--battery",
        "-b",
        help="Battery percent.",
    ),
    battery_display: bool = typer.Option(
        True,
        "--battery-display/--no-battery-display",
        help="Whether the pump's battery should be shown.",
    ),
    expires_in: int | None = typer.Option(
        None,
        "--expires-in",
        help="Seconds until the pod/cannula expires (negative if already expired).",
    ),
    expires_at: datetime | None = typer.Option(
        None,
        "--expires-at",
        help="When the pod/cannula expires.",
        formats=DATETIME_FORMATS,
    ),
    now: datetime | None = typer.Option(
        None,
        "--now",
        help="Reference time. Defaults to the current local time.",
        formats=DATETIME_FORMATS,
    ),
    message: str | None = typer.Option(
        None,
        "--message",
        "-m",
        help="Override message shown instead of pump values.",
    ),
) -> None:
    """Show what the pump header displays for the given values."""
    if snapshot is not None and (
        any(v is not None for v in (reservoir, battery, expires_in, expires_at, now, message))
        or overfull
        or not battery_display
    ):
        typer.echo("Error: --snapshot cannot be combined with value options.")
        raise typer.Exit(1)

    if expires_in is not None and expires_at is not None:
        typer.echo("Error: --expires-in and --expires-at are mutually exclusive.")
        raise typer.Exit(1)

    if overfull and reservoir is not None:
        typer.echo("Error: --overfull and --reservoir are mutually exclusive.")
        raise typer.Exit(1)

    thresholds = load_thresholds_context()

    try:
        if snapshot is not None:
            snap = load_snapshot(snapshot)
        else:
            snap = _snapshot_from_options(
                now=now if now is not None else datetime.now(),
                reservoir=reservoir,
                overfull=overfull,
                battery=battery,
                battery_display=battery_display,
                expires_in=expires_in,
                expires_at=expires_at,
                message=message,
            )
        display = select_display(snap, thresholds)
    except PumpStatusError as e:
        exit_with_error(e)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    get_console().print(render_display(display))


def _snapshot_from_options(
    *,
    now: datetime,
    reservoir: float | None,
    overfull: bool,
    battery: float | None,
    battery_display: bool,
    expires_in: int | None,
    expires_at: datetime | None,
    message: str | None,
) -> PumpSnapshot:
    res = None
    if overfull:
        res = Reservoir(overfull=True)
    elif reservoir is not None:
        res = Reservoir.from_reading(reservoir)

    bat = None
    if battery is not None:
        bat = BatteryReading(percent=to_decimal(battery), display_enabled=battery_display)

    if expires_in is not None:
        expires_at = now + timedelta(seconds=expires_in)

    return PumpSnapshot(
        now=now,
        reservoir=res,
        battery=bat,
        expires_at=expires_at,
        override_message=message,
    )
