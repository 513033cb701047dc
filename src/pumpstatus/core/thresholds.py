"""Stepped three-tier thresholds shared by every measurement."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Self

from pumpstatus.core.exceptions import ConfigurationError
from pumpstatus.core.models import Severity


Number = int | float | Decimal

HOUR = 60 * 60
DAY = 24 * HOUR


@dataclass(frozen=True, slots=True)
class Threshold:
    """Upper bounds (inclusive) of the critical and warning tiers.

    Attributes:
        critical: Values at most this are CRITICAL.
        warning: Values above critical and at most this are WARNING.
            Anything larger is NORMAL.

    Example:
        >>> Threshold(critical=10, warning=30).classify(25)
        <Severity.WARNING: 'warning'>
    """

    critical: Number
    warning: Number

    def __post_init__(self) -> None:
        """Validate tier ordering."""
        if self.critical > self.warning:
            raise ConfigurationError(
                f"Threshold critical ({self.critical}) must not exceed warning ({self.warning})"
            )

    def classify(self, value: Number) -> Severity:
        """Map value onto a severity tier."""
        if value <= self.critical:
            return Severity.CRITICAL
        if value <= self.warning:
            return Severity.WARNING
        return Severity.NORMAL


@dataclass(frozen=True, slots=True)
class StatusThresholds:
    """Threshold set for reservoir units, battery percent and expiry seconds."""

    reservoir: Threshold = field(default_factory=lambda: Threshold(critical=10, warning=30))
    battery: Threshold = field(default_factory=lambda: Threshold(critical=10, warning=20))
    expiry: Threshold = field(
        default_factory=lambda: Threshold(critical=8 * HOUR, warning=DAY)
    )

    def with_overrides(
        self,
        reservoir: Threshold | None = None,
        battery: Threshold | None = None,
        expiry: Threshold | None = None,
    ) -> Self:
        """Return a copy with the given thresholds replaced.

        Useful for device types whose reservoir or battery behaves differently.
        """
        return type(self)(
            reservoir=reservoir if reservoir is not None else self.reservoir,
            battery=battery if battery is not None else self.battery,
            expiry=expiry if expiry is not None else self.expiry,
        )


DEFAULT_THRESHOLDS = StatusThresholds()
