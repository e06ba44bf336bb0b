"""
The hotel tree: hotel -> floors -> corridors -> lights and cameras.

Events enter at the Hotel and are passed down to every device. Devices
compare the event location to their own name.
"""

from hotel_topology.building.devices import Camera, DeviceKind, Light
from hotel_topology.building.corridor import Corridor, CorridorKind
from hotel_topology.building.floor import Floor
from hotel_topology.building.hotel import Hotel
from hotel_topology.building.status import (
    CorridorStatus,
    DeviceStatus,
    FloorStatus,
    HotelStatus,
)

__all__ = [
    "Camera",
    "DeviceKind",
    "Light",
    "Corridor",
    "CorridorKind",
    "Floor",
    "Hotel",
    "CorridorStatus",
    "DeviceStatus",
    "FloorStatus",
    "HotelStatus",
]
