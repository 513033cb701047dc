"""Per-device threshold overrides example.

Smaller reservoirs and pods with longer wear times call for different
tiers. Thresholds can be overridden in code, or per project in
.pumpstatus.toml:

    [reservoir]
    critical = 5
    warning = 20

    [expiry]
    critical = 14400   # 4 hours, in seconds
"""

from pumpstatus import (
    DEFAULT_THRESHOLDS,
    Threshold,
    classify_expiry,
    classify_reservoir,
    load_thresholds,
)


# Option 1: Override in code
small_reservoir = DEFAULT_THRESHOLDS.with_overrides(
    reservoir=Threshold(critical=5, warning=20),
)
print(classify_reservoir(15))  # warning with the defaults
print(classify_reservoir(15, small_reservoir))  # still warning
print(classify_reservoir(25, small_reservoir))  # normal

# Option 2: Load from the project's .pumpstatus.toml or pyproject.toml
# Falls back to the defaults when neither file configures thresholds
thresholds = load_thresholds()
print(classify_expiry(6 * 3600, thresholds))
