"""CLI for pumpstatus."""

# Import commands to register them with the app
# These imports have side effects (registering commands with @app.command())
from pumpstatus.cli.commands import show as _show_module  # noqa: F401
from pumpstatus.cli.commands import thresholds as _thresholds_module  # noqa: F401
from pumpstatus.cli.main import app, main


__all__ = ["app", "main"]
