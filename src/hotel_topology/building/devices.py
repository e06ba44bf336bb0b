"""
Lights and cameras: the observers at the leaves of the hotel tree.

A device reacts to a motion event only when the event location is exactly
its own name. Anything else leaves its state untouched.
"""

from datetime import datetime, timedelta
from enum import Enum
from functools import partial
from typing import List, Optional
import logging
import threading

from hotel_topology.core.events import MotionEvent
from hotel_topology.core.scheduler import TimerPolicy, TimerScheduler
from hotel_topology.building.status import DeviceStatus

logger = logging.getLogger(__name__)

DEFAULT_AUTO_OFF = timedelta(seconds=5)


class DeviceKind(Enum):
    """Kinds of corridor device."""

    LIGHT = "light"
    CAMERA = "camera"


class Light:
    """
    A corridor light.

    Turns on when motion is reported at its name and schedules itself off
    `auto_off` after the event time. Without a scheduler the light stays on
    until something calls turn_off().
    """

    kind = DeviceKind.LIGHT

    def __init__(
        self,
        name: str,
        is_on: bool = False,
        scheduler: Optional[TimerScheduler] = None,
        auto_off: timedelta = DEFAULT_AUTO_OFF,
    ) -> None:
        """
        Initialize a light.

        Args:
            name: Device name; also the location it reacts to
            is_on: Initial state
            scheduler: Where the auto-off timer is registered
            auto_off: Delay between the motion event and switching off
        """
        self.name = name
        self.scheduler = scheduler
        self.auto_off = auto_off
        self._is_on = is_on
        self._off_at: Optional[datetime] = None  # due time of the latest auto-off
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Light({self.name!r})"

    @property
    def is_on(self) -> bool:
        return self._is_on

    def notify(self, event: MotionEvent) -> None:
        """
        React to a motion event.

        Args:
            event: The motion event; ignored unless event.location == name
        """
        if event.location != self.name:
            return

        off_at = event.time + self.auto_off
        with self._lock:
            was_on = self._is_on
            self._is_on = True
            if self.scheduler is not None:
                self._off_at = off_at

        if not was_on:
            logger.info(f"Light {self.name} turned ON (motion at {event.time.isoformat()})")

        if self.scheduler is not None:
            self.scheduler.schedule(self, off_at, partial(self._auto_off_expired, off_at))

    def _auto_off_expired(self, off_at: datetime) -> None:
        """Timer callback; a newer trigger keeps the light on unless timers overlap."""
        with self._lock:
            if self._off_at != off_at and self.scheduler.policy is not TimerPolicy.OVERLAP:
                logger.debug(f"Light {self.name}: ignoring stale auto-off due {off_at.isoformat()}")
                return
            was_on = self._is_on
            self._is_on = False
            self._off_at = None

        if was_on:
            logger.info(f"Light {self.name} turned OFF")

    def turn_off(self) -> None:
        with self._lock:
            was_on = self._is_on
            self._is_on = False
            self._off_at = None

        if was_on:
            logger.info(f"Light {self.name} turned OFF")

    def status(self) -> DeviceStatus:
        return DeviceStatus(name=self.name, kind=self.kind.value, state=self._is_on)

    def log(self) -> List[str]:
        line = self.status().render()
        logger.info(line)
        return [line]


class Camera:
    """
    A corridor camera.

    Starts showing when motion is reported at its name and keeps showing;
    there is no auto-hide.
    """

    kind = DeviceKind.CAMERA

    def __init__(self, name: str, is_showing: bool = False) -> None:
        self.name = name
        self._is_showing = is_showing
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Camera({self.name!r})"

    @property
    def is_showing(self) -> bool:
        return self._is_showing

    def notify(self, event: MotionEvent) -> None:
        """React to a motion event at this camera's name."""
        if event.location != self.name:
            return

        with self._lock:
            was_showing = self._is_showing
            self._is_showing = True

        if not was_showing:
            logger.info(f"Camera {self.name} SHOWING (motion at {event.time.isoformat()})")

    def status(self) -> DeviceStatus:
        return DeviceStatus(name=self.name, kind=self.kind.value, state=self._is_showing)

    def log(self) -> List[str]:
        line = self.status().render()
        logger.info(line)
        return [line]
