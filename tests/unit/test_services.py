"""Unit tests for header display selection."""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal
from unittest.mock import patch

import pytest

from pumpstatus.core.models import BatteryReading, PumpSnapshot, Reservoir, Severity
from pumpstatus.core.services import select_display
from pumpstatus.core.thresholds import StatusThresholds, Threshold


@pytest.mark.core
@pytest.mark.tra("UseCase.SelectDisplay")
@pytest.mark.tier(0)
class TestOverrideMessage:
    """An override message replaces every other slot."""

    def test_message_suppresses_reservoir(self, now: datetime, reservoir: Reservoir) -> None:
        """Only the message is shown when it is present."""
        snapshot = PumpSnapshot(
            now=now,
            reservoir=reservoir,
            expires_at=now + timedelta(hours=1),
            override_message="Insulin suspended",
        )

        display = select_display(snapshot)

        assert display.message == "Insulin suspended"
        assert display.is_override
        assert display.reservoir is None
        assert display.battery is None
        assert display.expiry is None
        assert display.placeholder is False

    def test_message_never_classifies(self, now: datetime, reservoir: Reservoir) -> None:
        """Classifiers are not invoked when a message is present."""
        snapshot = PumpSnapshot(now=now, reservoir=reservoir, override_message="Paused")

        with patch("pumpstatus.core.services.classify_reservoir") as classify:
            select_display(snapshot)

        classify.assert_not_called()

    def test_empty_message_still_overrides(self, now: datetime, reservoir: Reservoir) -> None:
        """An empty string is a present message, not an absent one."""
        display = select_display(PumpSnapshot(now=now, reservoir=reservoir, override_message=""))

        assert display.is_override
        assert display.slots == []


@pytest.mark.core
@pytest.mark.tra("UseCase.SelectDisplay")
@pytest.mark.tier(0)
class TestPlaceholder:
    """No reservoir and no battery means no pump is paired."""

    def test_placeholder_without_readings(self, now: datetime) -> None:
        """Neither reading present shows the placeholder."""
        display = select_display(PumpSnapshot(now=now))

        assert display.placeholder is True
        assert display.slots == []

    def test_placeholder_ignores_expiry(self, now: datetime) -> None:
        """The placeholder is shown whatever the expiry."""
        snapshot = PumpSnapshot(now=now, expires_at=now + timedelta(hours=3))

        display = select_display(snapshot)

        assert display.placeholder is True
        assert display.expiry is None

    def test_hidden_battery_alone_is_not_placeholder(self, now: datetime) -> None:
        """A present battery, even one that is not displayed, counts as a pump."""
        snapshot = PumpSnapshot(now=now, battery=BatteryReading(percent=Decimal(50)))

        display = select_display(snapshot)

        assert display.placeholder is False
        assert display.slots == []


@pytest.mark.core
@pytest.mark.tra("UseCase.SelectDisplay")
@pytest.mark.tier(0)
class TestSlots:
    """Reservoir, battery and expiry slots."""

    def test_reservoir_slot(self, now: datetime) -> None:
        """Reservoir renders with its severity and whole units."""
        display = select_display(PumpSnapshot(now=now, reservoir=Reservoir.from_reading(25)))

        assert display.reservoir is not None
        assert display.reservoir.severity is Severity.WARNING
        assert display.reservoir.text == "25 U"

    def test_zero_reservoir_is_rendered(self, now: datetime) -> None:
        """A zero reading is shown, not treated as absent."""
        display = select_display(PumpSnapshot(now=now, reservoir=Reservoir.from_reading(0)))

        assert display.placeholder is False
        assert display.reservoir is not None
        assert display.reservoir.severity is Severity.CRITICAL
        assert display.reservoir.text == "0 U"

    def test_int_units_reservoir_slot(self, now: datetime) -> None:
        """A Reservoir built directly with int units renders."""
        reservoir = Reservoir(units=12)  # type: ignore[arg-type]

        display = select_display(PumpSnapshot(now=now, reservoir=reservoir))

        assert display.reservoir is not None
        assert display.reservoir.text == "12 U"
        assert display.reservoir.severity is Severity.CRITICAL

    def test_overfull_reservoir_slot(self, now: datetime) -> None:
        """An overfull reservoir renders as 50+ U, normal severity."""
        display = select_display(
            PumpSnapshot(now=now, reservoir=Reservoir.from_reading(0xDEADBEEF))
        )

        assert display.reservoir is not None
        assert display.reservoir.severity is Severity.NORMAL
        assert display.reservoir.text == "50+ U"

    def test_battery_shown_without_expiry(
        self, now: datetime, reservoir: Reservoir, shown_battery: BatteryReading
    ) -> None:
        """A displayable battery renders when no expiry timer is shown."""
        display = select_display(PumpSnapshot(now=now, reservoir=reservoir, battery=shown_battery))

        assert display.battery is not None
        assert display.battery.severity is Severity.NORMAL
        assert display.battery.text == "60 %"
        assert display.reservoir is not None

    def test_battery_suppressed_by_expiry(
        self, now: datetime, shown_battery: BatteryReading
    ) -> None:
        """The expiry timer takes the battery's place."""
        snapshot = PumpSnapshot(
            now=now,
            battery=shown_battery,
            expires_at=now + timedelta(hours=30),
        )

        display = select_display(snapshot)

        assert display.battery is None
        assert display.expiry is not None
        assert display.expiry.text == "1d 6h"
        assert display.expiry.severity is Severity.NORMAL

    def test_battery_hidden_when_display_disabled(
        self, now: datetime, reservoir: Reservoir
    ) -> None:
        """Pumps with integrated batteries do not show them."""
        battery = BatteryReading(percent=Decimal(5), display_enabled=False)

        display = select_display(PumpSnapshot(now=now, reservoir=reservoir, battery=battery))

        assert display.battery is None

    def test_battery_without_percent_is_neutral(
        self, now: datetime, reservoir: Reservoir
    ) -> None:
        """A battery with no percent renders 100 % with no severity."""
        battery = BatteryReading(percent=None, display_enabled=True)

        display = select_display(PumpSnapshot(now=now, reservoir=reservoir, battery=battery))

        assert display.battery is not None
        assert display.battery.severity is None
        assert display.battery.text == "100 %"

    def test_expired_pod(self, now: datetime, reservoir: Reservoir) -> None:
        """An expired pod renders the expired token as critical."""
        snapshot = PumpSnapshot(now=now, reservoir=reservoir, expires_at=now - timedelta(hours=1))

        display = select_display(snapshot)

        assert display.expiry is not None
        assert display.expiry.text == "expired"
        assert display.expiry.severity is Severity.CRITICAL

    def test_all_slots_co_render(self, now: datetime, shown_battery: BatteryReading) -> None:
        """Reservoir and expiry render together."""
        snapshot = PumpSnapshot(
            now=now,
            reservoir=Reservoir.from_reading(5),
            battery=shown_battery,
            expires_at=now + timedelta(hours=10),
        )

        display = select_display(snapshot)

        assert [s.text for s in display.slots] == ["5 U", "10h"]
        assert [s.severity for s in display.slots] == [Severity.CRITICAL, Severity.WARNING]

    def test_thresholds_are_passed_through(self, now: datetime) -> None:
        """Custom thresholds apply to every slot."""
        thresholds = StatusThresholds().with_overrides(
            reservoir=Threshold(critical=50, warning=100),
            expiry=Threshold(critical=3600, warning=7200),
        )
        snapshot = PumpSnapshot(
            now=now,
            reservoir=Reservoir.from_reading(40),
            expires_at=now + timedelta(hours=10),
        )

        display = select_display(snapshot, thresholds)

        assert display.reservoir is not None
        assert display.reservoir.severity is Severity.CRITICAL
        assert display.expiry is not None
        assert display.expiry.severity is Severity.NORMAL
