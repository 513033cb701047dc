"""pumpstatus - Pump header status for diabetes-management apps.

This library turns pump readings (reservoir, battery, pod/cannula expiry and
an optional override message) into what a compact header widget shows: a
three-tier severity per measurement, a compact time-remaining string, and
the rules deciding which values are displayed.

Example:
    >>> from datetime import datetime, timedelta
    >>> from pumpstatus import PumpSnapshot, Reservoir, select_display
    >>> now = datetime(2024, 5, 1, 8, 0)
    >>> snapshot = PumpSnapshot(
    ...     now=now,
    ...     reservoir=Reservoir.from_reading(25),
    ...     expires_at=now + timedelta(hours=30),
    ... )
    >>> display = select_display(snapshot)
    >>> display.reservoir.severity, display.expiry.text
    (<Severity.WARNING: 'warning'>, '1d 6h')
"""

from pumpstatus.config import find_project_root, load_thresholds
from pumpstatus.core.exceptions import (
    ConfigurationError,
    InvalidMeasurementError,
    PumpStatusError,
    SnapshotLoadError,
)
from pumpstatus.core.formatting import (
    EXPIRED,
    classify_battery,
    classify_expiry,
    classify_reservoir,
    format_battery,
    format_remaining,
    format_reservoir,
    seconds_until,
    severity_to_color,
)
from pumpstatus.core.models import (
    OVERFULL_SENTINEL,
    BatteryReading,
    BatterySlot,
    ExpirySlot,
    PumpDisplay,
    PumpSnapshot,
    Reservoir,
    ReservoirSlot,
    Severity,
)
from pumpstatus.core.services import select_display
from pumpstatus.core.thresholds import DEFAULT_THRESHOLDS, StatusThresholds, Threshold
from pumpstatus.snapshots import load_snapshot


__version__ = "0.1.0"

__all__ = [
    "DEFAULT_THRESHOLDS",
    "EXPIRED",
    "OVERFULL_SENTINEL",
    "BatteryReading",
    "BatterySlot",
    "ConfigurationError",
    "ExpirySlot",
    "InvalidMeasurementError",
    "PumpDisplay",
    "PumpSnapshot",
    "PumpStatusError",
    "Reservoir",
    "ReservoirSlot",
    "Severity",
    "SnapshotLoadError",
    "StatusThresholds",
    "Threshold",
    "__version__",
    "classify_battery",
    "classify_expiry",
    "classify_reservoir",
    "find_project_root",
    "format_battery",
    "format_remaining",
    "format_reservoir",
    "load_snapshot",
    "load_thresholds",
    "seconds_until",
    "select_display",
    "severity_to_color",
]
