#!/usr/bin/env python3
"""
Quick example demonstrating hotel-topology basic usage.

Run with: PYTHONPATH=src python3 example.py
"""

from datetime import datetime, timedelta, UTC
from hotel_topology import Controller, Hotel, MotionEvent

print("=" * 60)
print("hotel-topology Example")
print("=" * 60)

# 1. Build the hotel
print("\n1. Building reference topology...")
hotel = Hotel("Grand")
controller = Controller(hotel)
for floor in hotel.floors:
    print(f"   ✓ {floor.name}: {[c.name for c in floor.corridors]}")

# 2. Motion in a sub corridor
print("\n2. Broadcasting motion...")
t0 = datetime.now(UTC)
event = MotionEvent("Sub Corridor 22", t0)
controller.broadcast(event)
print(f"   ✓ Broadcast: {event.location} at {event.time.isoformat()}")

# 3. Status right after the event
print("\n3. Status after motion:")
for line in controller.display_status().render():
    print(f"   {line}")

# 4. Let the auto-off timer expire
print("\n4. Advancing clock...")
next_check = controller.get_next_timeout()
print(f"   ✓ Next timeout: {next_check.isoformat()}")
fired = controller.check_timeouts(t0 + timedelta(seconds=5))
print(f"   ✓ {fired} timer(s) fired")

for device in hotel.find_devices("Sub Corridor 22"):
    print(f"   {device.status().render()}")

print("\n" + "=" * 60)
print("Example complete!")
print("=" * 60)
