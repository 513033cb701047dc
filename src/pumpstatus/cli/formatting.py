"""Shared formatting helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text

from pumpstatus.core.formatting import EXPIRED, format_remaining, severity_to_color
from pumpstatus.core.models import BatterySlot, ReservoirSlot


if TYPE_CHECKING:
    from rich.console import RenderableType

    from pumpstatus.core.models import PumpDisplay, Severity, Slot
    from pumpstatus.core.thresholds import StatusThresholds


# English labels for the language-neutral tokens produced by the core.
LABELS = {
    EXPIRED: "Replace pod",
}

PLACEHOLDER_LABEL = "Add pump"


def format_label(token: str) -> str:
    """Map a core token to its display label. Unknown tokens pass through."""
    return LABELS.get(token, token)


def format_severity(severity: Severity | None, measurement: str | None = None) -> Text:
    """Format a severity with color coding.

    Args:
        severity: Severity, or None for a neutral reading.
        measurement: Measurement name, used for the reservoir's insulin color.

    Returns:
        Rich Text with the severity name ("-" when neutral).
    """
    label = severity.value if severity is not None else "-"
    return Text(label, style=severity_to_color(severity, measurement))


def _slot_name(slot: Slot) -> str:
    if isinstance(slot, ReservoirSlot):
        return "reservoir"
    if isinstance(slot, BatterySlot):
        return "battery"
    return "expiry"


def render_display(display: PumpDisplay) -> RenderableType:
    """Render a PumpDisplay for the terminal.

    An override message or the placeholder is shown on its own; otherwise
    each slot gets a row with its value colored by severity.
    """
    if display.message is not None:
        return Text(display.message, style="bold", justify="center")
    if display.placeholder:
        return Text(PLACEHOLDER_LABEL, style="bold grey50")

    table = Table()
    table.add_column("Slot")
    table.add_column("Value")
    table.add_column("Severity")

    for slot in display.slots:
        name = _slot_name(slot)
        color = severity_to_color(slot.severity, name)
        table.add_row(
            name.capitalize(),
            Text(format_label(slot.text), style=f"bold {color}"),
            format_severity(slot.severity, name),
        )
    return table


def render_thresholds(thresholds: StatusThresholds) -> Table:
    """Render effective thresholds, expiry bounds as durations."""
    table = Table()
    table.add_column("Measurement")
    table.add_column("Critical at or below")
    table.add_column("Warning at or below")

    table.add_row(
        "Reservoir",
        f"{thresholds.reservoir.critical} U",
        f"{thresholds.reservoir.warning} U",
    )
    table.add_row(
        "Battery",
        f"{thresholds.battery.critical} %",
        f"{thresholds.battery.warning} %",
    )
    table.add_row(
        "Expiry",
        format_remaining(thresholds.expiry.critical),
        format_remaining(thresholds.expiry.warning),
    )
    return table
