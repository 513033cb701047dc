"""Unit tests for the exception hierarchy."""

from __future__ import annotations

from pathlib import Path

import pytest

from pumpstatus import (
    ConfigurationError,
    InvalidMeasurementError,
    PumpStatusError,
    SnapshotLoadError,
)


@pytest.mark.core
@pytest.mark.tier(0)
class TestExceptionHierarchy:
    """All library errors share a base class and offer hints."""

    def test_all_inherit_from_base(self) -> None:
        """Every library error is a PumpStatusError."""
        errors = [
            InvalidMeasurementError("battery", 120, "too high"),
            ConfigurationError("bad"),
            SnapshotLoadError("bad", Path("snap.json")),
        ]

        for error in errors:
            assert isinstance(error, PumpStatusError)
            assert error.recovery_hint

    def test_invalid_measurement_is_value_error(self) -> None:
        """Measurement errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            raise InvalidMeasurementError("reservoir", -1, "must not be negative")

    def test_invalid_measurement_message_and_hint(self) -> None:
        """The message names the measurement and value."""
        error = InvalidMeasurementError("reservoir", -1, "must not be negative")

        assert str(error) == "Invalid reservoir value -1: must not be negative"
        assert error.recovery_hint == "Reservoir amount must be zero or greater"

    def test_configuration_hint_without_path(self) -> None:
        """Without a file the hint explains threshold ordering."""
        assert "critical" in ConfigurationError("bad").recovery_hint

    def test_base_has_no_hint(self) -> None:
        """The base class has no recovery hint."""
        assert PumpStatusError("x").recovery_hint is None
