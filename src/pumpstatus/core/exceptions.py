"""Domain exceptions for pumpstatus.

All library errors inherit from PumpStatusError, allowing callers to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from pathlib import Path


class PumpStatusError(Exception):
    """Base class for all pumpstatus exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class InvalidMeasurementError(PumpStatusError, ValueError):
    """Raised when a measurement is outside its documented domain.

    Attributes:
        measurement: Which measurement was rejected ("reservoir", "battery").
        value: The offending value.
    """

    def __init__(self, measurement: str, value: Any, reason: str) -> None:
        self.measurement = measurement
        self.value = value
        super().__init__(f"Invalid {measurement} value {value!r}: {reason}")

    @property
    def recovery_hint(self) -> str:
        """Describe the accepted range for the measurement."""
        if self.measurement == "battery":
            return "Battery percent must be between 0 and 100"
        if self.measurement == "reservoir":
            return "Reservoir amount must be zero or greater"
        return f"Check the {self.measurement} reading supplied by the pump"


class ConfigurationError(PumpStatusError):
    """Raised for invalid threshold configuration.

    Attributes:
        path: Config file the bad value came from, if any.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Point at the config file when one was involved."""
        if self.path is not None:
            return f"Check the thresholds in {self.path.name}"
        return "Each threshold needs 'critical' <= 'warning'"


class SnapshotLoadError(PumpStatusError):
    """Raised when a snapshot file cannot be loaded.

    Attributes:
        snapshot_path: Path to the snapshot file that failed to load.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        snapshot_path: Path,
        cause: Exception | None = None,
    ) -> None:
        self.snapshot_path = snapshot_path
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest checking the snapshot file."""
        return f"Check {self.snapshot_path.name} is valid JSON with a 'now' timestamp"
