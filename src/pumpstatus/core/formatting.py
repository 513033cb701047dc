"""Formatting and classification helpers for pump status values."""

from __future__ import annotations

from datetime import timedelta
from decimal import ROUND_HALF_EVEN, Decimal
from typing import TYPE_CHECKING

from pumpstatus.core.exceptions import InvalidMeasurementError
from pumpstatus.core.models import (
    OVERFULL_DISPLAY_UNITS,
    OVERFULL_SENTINEL,
    Reservoir,
    Severity,
    require_finite,
)
from pumpstatus.core.thresholds import DAY, DEFAULT_THRESHOLDS, HOUR


if TYPE_CHECKING:
    from datetime import datetime

    from pumpstatus.core.models import BatteryReading
    from pumpstatus.core.thresholds import Number, StatusThresholds


EXPIRED = "expired"

MINUTE = 60


def classify_reservoir(
    amount: Reservoir | Number,
    thresholds: StatusThresholds | None = None,
) -> Severity:
    """Classify insulin remaining in the reservoir.

    Args:
        amount: A Reservoir or a raw amount in units. An overfull reservoir
            (or the raw overfull sentinel) is always NORMAL.
        thresholds: Threshold set to use. Defaults to 10 U / 30 U.

    Returns:
        CRITICAL at 10 U or less, WARNING up to 30 U, otherwise NORMAL.

    Raises:
        InvalidMeasurementError: If amount is negative or not finite.
    """
    thresholds = thresholds or DEFAULT_THRESHOLDS
    if isinstance(amount, Reservoir):
        if amount.overfull:
            return Severity.NORMAL
        assert amount.units is not None  # Reservoir invariant
        amount = amount.units
    require_finite("reservoir", amount)
    if amount == OVERFULL_SENTINEL:
        return Severity.NORMAL
    if amount < 0:
        raise InvalidMeasurementError("reservoir", amount, "must not be negative")
    return thresholds.reservoir.classify(amount)


def classify_battery(
    percent: Number,
    thresholds: StatusThresholds | None = None,
) -> Severity:
    """Classify battery charge.

    Args:
        percent: Charge level 0-100.
        thresholds: Threshold set to use. Defaults to 10 % / 20 %.

    Returns:
        CRITICAL at 10 % or less, WARNING up to 20 %, otherwise NORMAL.

    Raises:
        InvalidMeasurementError: If percent is outside 0-100 or not finite.
    """
    thresholds = thresholds or DEFAULT_THRESHOLDS
    require_finite("battery", percent)
    if not 0 <= percent <= 100:
        raise InvalidMeasurementError("battery", percent, "must be between 0 and 100")
    return thresholds.battery.classify(percent)


def classify_expiry(
    seconds_remaining: Number | timedelta,
    thresholds: StatusThresholds | None = None,
) -> Severity:
    """Classify time left before the pod/cannula must be replaced.

    Args:
        seconds_remaining: Signed seconds until expiry. Already expired
            values are negative.
        thresholds: Threshold set to use. Defaults to 8 hours / 24 hours.

    Returns:
        CRITICAL at 8 hours or less (including expired), WARNING up to
        24 hours, otherwise NORMAL.

    Raises:
        InvalidMeasurementError: If seconds_remaining is NaN or infinite.
    """
    thresholds = thresholds or DEFAULT_THRESHOLDS
    if isinstance(seconds_remaining, timedelta):
        seconds_remaining = seconds_remaining.total_seconds()
    require_finite("expiry", seconds_remaining)
    return thresholds.expiry.classify(seconds_remaining)


def format_remaining(seconds_remaining: Number | timedelta) -> str:
    """Format time until expiry as a compact token.

    The duration is split greedily into whole days, hours and minutes.
    Only the two largest units are kept at the day tier and minutes are
    dropped entirely at the hour tier.

    Args:
        seconds_remaining: Signed seconds until expiry.

    Returns:
        "expired" when zero or negative, otherwise "2d 5h", "7h" or "42m".

    Raises:
        InvalidMeasurementError: If seconds_remaining is NaN or infinite.

    Example:
        >>> format_remaining(90061)
        '1d 1h'
        >>> format_remaining(59)
        '0m'
    """
    if isinstance(seconds_remaining, timedelta):
        seconds_remaining = seconds_remaining.total_seconds()
    require_finite("expiry", seconds_remaining)
    if seconds_remaining <= 0:
        return EXPIRED

    total = int(seconds_remaining)
    days, rest = divmod(total, DAY)
    hours, rest = divmod(rest, HOUR)
    minutes = rest // MINUTE

    if days >= 1:
        return f"{days}d {hours}h"
    if hours >= 1:
        return f"{hours}h"
    return f"{minutes}m"


def seconds_until(expires_at: datetime, now: datetime) -> float:
    """Signed seconds from now until expires_at."""
    return (expires_at - now).total_seconds()


def format_reservoir(reservoir: Reservoir) -> str:
    """Format a reservoir as whole insulin units, e.g. "12 U" or "50+ U"."""
    if reservoir.overfull:
        return f"{OVERFULL_DISPLAY_UNITS}+ U"
    assert reservoir.units is not None
    units = reservoir.units.quantize(Decimal(1), rounding=ROUND_HALF_EVEN)
    return f"{units:f} U"


def format_battery(reading: BatteryReading) -> str:
    """Format battery charge, e.g. "45 %". Unknown charge shows as 100 %."""
    percent = reading.percent if reading.percent is not None else 100
    return f"{int(percent)} %"


def severity_to_color(severity: Severity | None, measurement: str | None = None) -> str:
    """Map a severity to a Rich color name.

    Args:
        severity: Severity, or None for a measurement with no usable value.
        measurement: Optional measurement name. A normal reservoir uses the
            insulin color rather than green.

    Returns:
        Color name string:
        - CRITICAL -> "red"
        - WARNING -> "yellow"
        - NORMAL -> "green" ("blue" for the reservoir)
        - None -> "grey50"
    """
    if severity is None:
        return "grey50"
    if severity is Severity.NORMAL and measurement == "reservoir":
        return "blue"
    color_map = {
        Severity.CRITICAL: "red",
        Severity.WARNING: "yellow",
        Severity.NORMAL: "green",
    }
    return color_map[severity]
