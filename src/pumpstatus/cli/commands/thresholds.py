"""Thresholds command for CLI."""

from __future__ import annotations

from pumpstatus.cli.formatting import render_thresholds
from pumpstatus.cli.main import app, get_console, load_thresholds_context


@app.command()
def thresholds() -> None:
    """Show the effective severity thresholds for this project."""
    get_console().print(render_thresholds(load_thresholds_context()))
