"""Snapshot file loading.

Reads a PumpSnapshot from a JSON document such as::

    {
        "now": "2024-05-01T08:00:00+00:00",
        "reservoir": 42.5,
        "battery": {"percent": 60, "display": true},
        "expires_at": "2024-05-02T20:00:00+00:00",
        "message": null
    }
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any

from pumpstatus.core.exceptions import InvalidMeasurementError, SnapshotLoadError
from pumpstatus.core.models import BatteryReading, PumpSnapshot, Reservoir


if TYPE_CHECKING:
    from pathlib import Path


logger = logging.getLogger(__name__)


def load_snapshot(path: Path) -> PumpSnapshot:
    """Load a snapshot file.

    Args:
        path: Path to the JSON snapshot.

    Returns:
        The parsed PumpSnapshot.

    Raises:
        SnapshotLoadError: If the file is missing, not JSON, or has bad fields.
        InvalidMeasurementError: If a measurement is outside its range.
    """
    try:
        data = json.loads(path.read_text(), parse_float=Decimal)
    except FileNotFoundError as e:
        raise SnapshotLoadError(f"Snapshot not found: {path}", path, cause=e) from e
    except json.JSONDecodeError as e:
        raise SnapshotLoadError(
            f"Invalid JSON in {path.name} at line {e.lineno}", path, cause=e
        ) from e

    if not isinstance(data, dict):
        raise SnapshotLoadError(f"{path.name} must contain a JSON object", path)

    logger.debug("Loaded snapshot from %s", path)
    try:
        return snapshot_from_dict(data)
    except InvalidMeasurementError:
        raise
    except (AttributeError, InvalidOperation, KeyError, TypeError, ValueError) as e:
        raise SnapshotLoadError(f"Invalid snapshot in {path.name}: {e}", path, cause=e) from e


def snapshot_from_dict(data: dict[str, Any]) -> PumpSnapshot:
    """Build a PumpSnapshot from decoded JSON.

    Raises:
        KeyError: If "now" is missing.
        ValueError: If a timestamp cannot be parsed or a measurement is not a number.
    """
    reservoir = None
    if data.get("reservoir") is not None:
        reservoir = Reservoir.from_reading(_number(data["reservoir"], "reservoir"))

    battery = None
    raw_battery = data.get("battery")
    if raw_battery is not None:
        percent = raw_battery.get("percent")
        battery = BatteryReading(
            percent=_number(percent, "battery.percent") if percent is not None else None,
            display_enabled=bool(raw_battery.get("display", False)),
        )

    expires_at = None
    if data.get("expires_at") is not None:
        expires_at = datetime.fromisoformat(data["expires_at"])

    return PumpSnapshot(
        now=datetime.fromisoformat(data["now"]),
        reservoir=reservoir,
        battery=battery,
        expires_at=expires_at,
        override_message=data.get("message"),
    )


def _number(value: Any, field: str) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, int | Decimal):
        raise ValueError(f"'{field}' must be a number, got {value!r}")
    return Decimal(value)
