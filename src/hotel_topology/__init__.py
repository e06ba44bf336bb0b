"""
hotel-topology: a motion-sensing notification network for a hotel.

This library simulates the devices of a building:
- Containment tree: hotel -> floors -> corridors -> lights and cameras
- Observer fan-out of motion events down the tree
- Host-driven auto-off timers for lights
- Status snapshots instead of console output
"""

from hotel_topology.core import (
    InvalidConfigurationError,
    MotionEvent,
    Observer,
    SubjectUnderObservation,
    TimerPolicy,
    TimerScheduler,
)
from hotel_topology.building import (
    Camera,
    Corridor,
    CorridorKind,
    Floor,
    Hotel,
    HotelStatus,
    Light,
)
from hotel_topology.controller import Controller, ControllerConfig

__version__ = "0.1.0"

__all__ = [
    "InvalidConfigurationError",
    "MotionEvent",
    "Observer",
    "SubjectUnderObservation",
    "TimerPolicy",
    "TimerScheduler",
    "Camera",
    "Corridor",
    "CorridorKind",
    "Floor",
    "Hotel",
    "HotelStatus",
    "Light",
    "Controller",
    "ControllerConfig",
]
