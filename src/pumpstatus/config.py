"""Configuration utilities for pumpstatus.

This module provides project-root discovery and loads threshold overrides
from ``.pumpstatus.toml`` or the ``[tool.pumpstatus]`` table of
``pyproject.toml``.
"""

from __future__ import annotations

import logging
import math
import tomllib
from pathlib import Path
from typing import Any

from pumpstatus.core.exceptions import ConfigurationError
from pumpstatus.core.thresholds import DEFAULT_THRESHOLDS, StatusThresholds, Threshold


logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".pumpstatus.toml"

_MEASUREMENTS = ("reservoir", "battery", "expiry")


def find_project_root(start: Path | None = None) -> Path:
    """Find the project root directory by walking up from start directory.

    Searches for marker files in the following priority order:
    1. .pumpstatus.toml - Explicit project config
    2. pyproject.toml - Python project root
    3. .git - Version control root

    Args:
        start: Directory to start searching from. If None, uses current directory.

    Returns:
        Path to project root directory. Returns start directory if no markers found.
    """
    if start is None:
        start = Path.cwd()

    markers = [CONFIG_FILENAME, "pyproject.toml", ".git"]
    current = start.resolve()

    for parent in [current, *current.parents]:
        for marker in markers:
            if (parent / marker).exists():
                return parent

    return start.resolve()


def load_thresholds(root: Path | None = None) -> StatusThresholds:
    """Load threshold overrides for the project.

    ``.pumpstatus.toml`` takes precedence over ``pyproject.toml``. Each
    measurement table holds ``critical`` and ``warning``; missing tables or
    keys keep the defaults. Expiry values are in seconds.

    Example ``.pumpstatus.toml``::

        [reservoir]
        critical = 5
        warning = 20

    Args:
        root: Project root. If None, uses find_project_root().

    Returns:
        The effective StatusThresholds.

    Raises:
        ConfigurationError: If the file is not valid TOML or a value is invalid.
    """
    if root is None:
        root = find_project_root()

    config_path = root / CONFIG_FILENAME
    if config_path.exists():
        table = _read_toml(config_path)
    else:
        config_path = root / "pyproject.toml"
        if not config_path.exists():
            return DEFAULT_THRESHOLDS
        table = _read_toml(config_path).get("tool", {}).get("pumpstatus", {})

    if not table:
        return DEFAULT_THRESHOLDS

    logger.debug("Loading thresholds from %s", config_path)
    overrides = {
        name: _parse_threshold(table[name], getattr(DEFAULT_THRESHOLDS, name), name, config_path)
        for name in _MEASUREMENTS
        if name in table
    }
    unknown = sorted(set(table) - set(_MEASUREMENTS))
    if unknown:
        raise ConfigurationError(f"Unknown threshold section(s): {', '.join(unknown)}", config_path)
    return DEFAULT_THRESHOLDS.with_overrides(**overrides)


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in {path.name}: {e}", path) from e


def _parse_threshold(raw: Any, default: Threshold, name: str, path: Path) -> Threshold:
    if not isinstance(raw, dict):
        raise ConfigurationError(f"'{name}' must be a table with critical/warning", path)

    values = {}
    for key in ("critical", "warning"):
        value = raw.get(key, getattr(default, key))
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ConfigurationError(f"'{name}.{key}' must be a number, got {value!r}", path)
        if not math.isfinite(value):
            raise ConfigurationError(f"'{name}.{key}' must be finite, got {value!r}", path)
        values[key] = value

    try:
        return Threshold(**values)
    except ConfigurationError as e:
        raise ConfigurationError(f"'{name}': {e}", path) from e
