"""Core domain models for pumpstatus.

These models are pure Python dataclasses with no I/O dependencies. Inputs
describe what the pump reported at one moment; outputs describe what the
header widget should show for it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Self

from pumpstatus.core.exceptions import InvalidMeasurementError


if TYPE_CHECKING:
    from datetime import datetime


# Raw reservoir reading some pumps report when they hold more insulin than
# they can measure precisely.
OVERFULL_SENTINEL = Decimal(0xDEADBEEF)

# Amount shown in place of the sentinel.
OVERFULL_DISPLAY_UNITS = 50


class Severity(StrEnum):
    """Three-tier urgency shared by reservoir, battery and expiry."""

    CRITICAL = "critical"
    WARNING = "warning"
    NORMAL = "normal"


def to_decimal(value: int | float | Decimal) -> Decimal:
    """Convert a reading to Decimal, going through str for floats."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def require_finite(measurement: str, value: Any) -> None:
    """Reject NaN and infinite readings."""
    finite = value.is_finite() if isinstance(value, Decimal) else math.isfinite(value)
    if not finite:
        raise InvalidMeasurementError(measurement, value, "must be a finite number")


@dataclass(frozen=True, slots=True)
class Reservoir:
    """Insulin remaining in the pump.

    Attributes:
        units: Insulin units remaining. None only when overfull.
        overfull: The pump holds more than it can measure precisely.

    Example:
        >>> Reservoir.from_reading(OVERFULL_SENTINEL).overfull
        True
        >>> Reservoir.from_reading(12.5).units
        Decimal('12.5')
    """

    units: Decimal | None = None
    overfull: bool = False

    def __post_init__(self) -> None:
        """Validate that exactly one of units/overfull is meaningful."""
        if self.overfull:
            if self.units is not None:
                raise ValueError("Overfull reservoir cannot carry units")
            return
        if self.units is None:
            raise ValueError("Reservoir needs units unless overfull")
        require_finite("reservoir", self.units)
        units = to_decimal(self.units)
        if units < 0:
            raise InvalidMeasurementError("reservoir", units, "must not be negative")
        # -0 would render as "-0 U"
        object.__setattr__(self, "units", units.copy_abs() if units == 0 else units)

    @classmethod
    def from_reading(cls, value: int | float | Decimal) -> Self:
        """Build a Reservoir from a raw pump reading.

        Args:
            value: Units as reported by the pump. The overfull sentinel is
                recognised and mapped to an overfull reservoir.

        Returns:
            A new Reservoir.

        Raises:
            InvalidMeasurementError: If value is negative or not finite.
        """
        units = to_decimal(value)
        if units == OVERFULL_SENTINEL:
            return cls(overfull=True)
        return cls(units=units)


@dataclass(frozen=True, slots=True)
class BatteryReading:
    """Pump battery state.

    Attributes:
        percent: Charge level 0-100, if the pump reports one.
        display_enabled: Whether the battery should be shown at all. Pumps
            with integrated batteries leave this off.
    """

    percent: Decimal | None = None
    display_enabled: bool = False

    def __post_init__(self) -> None:
        """Validate the percent range."""
        if self.percent is None:
            return
        require_finite("battery", self.percent)
        percent = to_decimal(self.percent)
        if not 0 <= percent <= 100:
            raise InvalidMeasurementError("battery", percent, "must be between 0 and 100")
        object.__setattr__(self, "percent", percent)


@dataclass(frozen=True, slots=True)
class PumpSnapshot:
    """Everything the header needs for one render.

    Attributes:
        now: Reference time all expiry computations are relative to.
        reservoir: Reservoir reading, or None when no pump is paired.
        battery: Battery reading, or None when unavailable.
        expires_at: When the current pod/cannula must be replaced.
        override_message: Higher-priority status text (e.g. "Insulin
            suspended") that replaces the normal display.
    """

    now: datetime
    reservoir: Reservoir | None = None
    battery: BatteryReading | None = None
    expires_at: datetime | None = None
    override_message: str | None = None

    def __post_init__(self) -> None:
        """Validate that now and expires_at can be compared."""
        if self.expires_at is not None and (
            (self.expires_at.tzinfo is None) != (self.now.tzinfo is None)
        ):
            raise ValueError("now and expires_at must both be timezone-aware or both naive")

    @property
    def seconds_remaining(self) -> float | None:
        """Signed seconds from now until expiry, or None without expiry."""
        if self.expires_at is None:
            return None
        return (self.expires_at - self.now).total_seconds()


@dataclass(frozen=True, slots=True)
class ReservoirSlot:
    """Rendered reservoir: severity and text such as "12 U"."""

    severity: Severity
    text: str


@dataclass(frozen=True, slots=True)
class BatterySlot:
    """Rendered battery.

    severity is None when the pump did not report a percent; the renderer
    shows it in a neutral color.
    """

    severity: Severity | None
    text: str


@dataclass(frozen=True, slots=True)
class ExpirySlot:
    """Rendered expiry timer: severity and a token from format_remaining."""

    severity: Severity
    text: str


Slot = ReservoirSlot | BatterySlot | ExpirySlot


@dataclass(frozen=True, slots=True)
class PumpDisplay:
    """What the header shows for a snapshot.

    Exactly one of three shapes: an override message alone, the "no pump"
    placeholder alone, or any combination of the three slots.
    """

    message: str | None = None
    placeholder: bool = False
    reservoir: ReservoirSlot | None = None
    battery: BatterySlot | None = None
    expiry: ExpirySlot | None = None

    @property
    def is_override(self) -> bool:
        """True when an override message replaces the normal display."""
        return self.message is not None

    @property
    def slots(self) -> list[Slot]:
        """Rendered slots in display order."""
        return [s for s in (self.reservoir, self.battery, self.expiry) if s is not None]
