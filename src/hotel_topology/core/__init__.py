"""
Core components of the hotel-topology kernel.

This package contains:
- events: MotionEvent payload
- subject: Observer protocol and SubjectUnderObservation fan-out
- scheduler: host-driven one-shot timers
- errors: configuration errors
"""

from hotel_topology.core.errors import InvalidConfigurationError
from hotel_topology.core.events import MotionEvent
from hotel_topology.core.subject import Observer, SubjectUnderObservation
from hotel_topology.core.scheduler import ScheduledTask, TimerPolicy, TimerScheduler

__all__ = [
    "InvalidConfigurationError",
    "MotionEvent",
    "Observer",
    "SubjectUnderObservation",
    "ScheduledTask",
    "TimerPolicy",
    "TimerScheduler",
]
