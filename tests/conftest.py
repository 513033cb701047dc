"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures for the test suite.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from pumpstatus.core.models import BatteryReading, Reservoir


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, thresholds, formatting and services")
    config.addinivalue_line("markers", "config: Threshold configuration and snapshot files")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


@pytest.fixture
def now() -> datetime:
    """Fixed reference time for snapshot tests."""
    return datetime(2024, 5, 1, 8, 0, 0)


@pytest.fixture
def reservoir() -> Reservoir:
    """A reservoir in the normal range."""
    return Reservoir.from_reading(120)


@pytest.fixture
def shown_battery() -> BatteryReading:
    """A battery reading the pump allows to be displayed."""
    return BatteryReading(percent=60, display_enabled=True)
