"""Display selection for the pump header.

Decides which slots the header shows for a snapshot and fills each one
with its severity and text.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pumpstatus.core.formatting import (
    classify_battery,
    classify_expiry,
    classify_reservoir,
    format_battery,
    format_remaining,
    format_reservoir,
)
from pumpstatus.core.models import BatterySlot, ExpirySlot, PumpDisplay, ReservoirSlot


if TYPE_CHECKING:
    from pumpstatus.core.models import BatteryReading, PumpSnapshot, Reservoir
    from pumpstatus.core.thresholds import StatusThresholds


logger = logging.getLogger(__name__)


def select_display(
    snapshot: PumpSnapshot,
    thresholds: StatusThresholds | None = None,
) -> PumpDisplay:
    """Build the header display for a snapshot.

    Precedence, first match wins:

    1. An override message replaces everything else.
    2. With neither reservoir nor battery, show the "no pump" placeholder,
       whatever the expiry.
    3. Otherwise reservoir, battery and expiry slots render independently,
       except that the battery is hidden while an expiry timer is shown.

    Args:
        snapshot: Pump values for this render.
        thresholds: Optional threshold overrides passed to the classifiers.

    Returns:
        The PumpDisplay to render.

    Example:
        >>> from datetime import datetime
        >>> from pumpstatus.core.models import PumpSnapshot, Reservoir
        >>> snap = PumpSnapshot(now=datetime(2024, 1, 1), reservoir=Reservoir.from_reading(40))
        >>> select_display(snap).reservoir.text
        '40 U'
    """
    if snapshot.override_message is not None:
        logger.debug("Override message present, suppressing pump slots")
        return PumpDisplay(message=snapshot.override_message)

    if snapshot.reservoir is None and snapshot.battery is None:
        logger.debug("No reservoir or battery reading, showing placeholder")
        return PumpDisplay(placeholder=True)

    reservoir_slot = None
    if snapshot.reservoir is not None:
        reservoir_slot = _reservoir_slot(snapshot.reservoir, thresholds)

    battery_slot = None
    if (
        snapshot.battery is not None
        and snapshot.battery.display_enabled
        and snapshot.expires_at is None
    ):
        battery_slot = _battery_slot(snapshot.battery, thresholds)

    expiry_slot = None
    seconds = snapshot.seconds_remaining
    if seconds is not None:
        expiry_slot = ExpirySlot(
            severity=classify_expiry(seconds, thresholds),
            text=format_remaining(seconds),
        )

    return PumpDisplay(reservoir=reservoir_slot, battery=battery_slot, expiry=expiry_slot)


def _reservoir_slot(
    reservoir: Reservoir, thresholds: StatusThresholds | None
) -> ReservoirSlot:
    return ReservoirSlot(
        severity=classify_reservoir(reservoir, thresholds),
        text=format_reservoir(reservoir),
    )


def _battery_slot(battery: BatteryReading, thresholds: StatusThresholds | None) -> BatterySlot:
    severity = None
    if battery.percent is not None:
        severity = classify_battery(battery.percent, thresholds)
    return BatterySlot(severity=severity, text=format_battery(battery))
