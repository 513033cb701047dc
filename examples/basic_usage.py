"""Basic header status example.

This example shows the simplest usage pattern: build a snapshot from the
pump's latest readings, select what the header displays, and print each
slot with its severity.
"""

from datetime import datetime, timedelta

from pumpstatus import BatteryReading, PumpSnapshot, Reservoir, select_display


now = datetime.now()

# Readings as the pump reported them. The reference time is passed in;
# nothing in the library reads the clock.
snapshot = PumpSnapshot(
    now=now,
    reservoir=Reservoir.from_reading(27.4),
    battery=BatteryReading(percent=64, display_enabled=True),
    expires_at=now + timedelta(hours=50, minutes=12),
)

display = select_display(snapshot)

if display.is_override:
    print(display.message)
elif display.placeholder:
    print("Add pump")
else:
    # Battery is hidden here: the pod timer takes its place
    for slot in display.slots:
        print(f"{slot.text:>8}  {slot.severity}")
