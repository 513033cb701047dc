"""Core domain module for pumpstatus.

This module contains pure Python domain models, thresholds and the
formatting/display-selection logic. It has no I/O dependencies and can be
tested in isolation.
"""

from pumpstatus.core.models import (
    BatteryReading,
    PumpDisplay,
    PumpSnapshot,
    Reservoir,
    Severity,
)
from pumpstatus.core.services import select_display
from pumpstatus.core.thresholds import DEFAULT_THRESHOLDS, StatusThresholds, Threshold


__all__ = [
    "DEFAULT_THRESHOLDS",
    "BatteryReading",
    "PumpDisplay",
    "PumpSnapshot",
    "Reservoir",
    "Severity",
    "StatusThresholds",
    "Threshold",
    "select_display",
]
