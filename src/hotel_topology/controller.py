"""
Controller: builds the reference hotel and injects motion events.

The controller simulates the sensors. It wires a fixed topology onto a Hotel,
broadcasts motion events into it, and owns the timer scheduler that switches
lights off again.

Note: The controller does NOT run timers on its own. The host is
responsible for calling check_timeouts(now), either directly (tests, CLI)
or through monitor() / start_monitor().
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, UTC
from typing import Dict, Optional
import logging
import threading

from hotel_topology.core.errors import InvalidConfigurationError
from hotel_topology.core.events import MotionEvent
from hotel_topology.core.scheduler import TimerPolicy, TimerScheduler
from hotel_topology.building import Camera, Corridor, Floor, Hotel, HotelStatus, Light

logger = logging.getLogger(__name__)

FLOOR_COUNT = 2
SUB_CORRIDORS_PER_FLOOR = 2


@dataclass
class ControllerConfig:
    """Controller configuration."""

    version: int = 1
    auto_off_seconds: float = 5.0  # Light switches off this long after motion
    timer_policy: str = TimerPolicy.CANCEL_AND_RESCHEDULE.value  # or "overlap"
    monitor_interval_seconds: float = 5.0
    main_lights_on: bool = True  # Initial state of main corridor lights

    def __post_init__(self) -> None:
        policies = [p.value for p in TimerPolicy]
        if self.timer_policy not in policies:
            raise InvalidConfigurationError(
                f"Unknown timer_policy '{self.timer_policy}', expected one of {policies}"
            )
        if self.auto_off_seconds <= 0:
            raise InvalidConfigurationError(
                f"auto_off_seconds must be positive, got {self.auto_off_seconds}"
            )
        if self.monitor_interval_seconds <= 0:
            raise InvalidConfigurationError(
                f"monitor_interval_seconds must be positive, got {self.monitor_interval_seconds}"
            )

    @property
    def policy(self) -> TimerPolicy:
        return TimerPolicy(self.timer_policy)

    @property
    def auto_off(self) -> timedelta:
        return timedelta(seconds=self.auto_off_seconds)

    def to_dict(self) -> dict:
        """Serialize to dict."""
        return {
            "version": self.version,
            "auto_off_seconds": self.auto_off_seconds,
            "timer_policy": self.timer_policy,
            "monitor_interval_seconds": self.monitor_interval_seconds,
            "main_lights_on": self.main_lights_on,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ControllerConfig":
        """Deserialize from dict."""
        return cls(
            version=data.get("version", 1),
            auto_off_seconds=data.get("auto_off_seconds", 5.0),
            timer_policy=data.get("timer_policy", TimerPolicy.CANCEL_AND_RESCHEDULE.value),
            monitor_interval_seconds=data.get("monitor_interval_seconds", 5.0),
            main_lights_on=data.get("main_lights_on", True),
        )


class Controller:
    """
    Builds the reference topology on a hotel and injects motion events.

    Reference topology (per floor f in 1..2):
    - "Main Corridor f": light on, camera hidden
    - "Sub Corridor f1", "Sub Corridor f2": light off, camera hidden
    """

    def __init__(
        self,
        hotel: Hotel,
        config: Optional[ControllerConfig] = None,
        scheduler: Optional[TimerScheduler] = None,
    ) -> None:
        """
        Initialize the controller and wire the topology onto `hotel`.

        Args:
            hotel: The hotel to populate (two add_floor() calls)
            config: Controller configuration (defaults if None)
            scheduler: Timer scheduler shared by all lights
                (a new one using config.timer_policy if None)

        Raises:
            InvalidConfigurationError: If hotel is missing or not a Hotel
        """
        if hotel is None:
            raise InvalidConfigurationError("Controller requires a hotel")
        if not isinstance(hotel, Hotel):
            raise InvalidConfigurationError(f"Controller requires a Hotel, got {hotel!r}")

        self.config = config or ControllerConfig()
        self.scheduler = scheduler or TimerScheduler(self.config.policy)
        self._hotel = hotel
        self._monitor_thread: Optional[threading.Thread] = None
        self._monitor_stop = threading.Event()

        for number in range(1, FLOOR_COUNT + 1):
            hotel.add_floor(self._build_floor(number))

        logger.info(
            f"Controller ready: hotel {hotel.name} with {FLOOR_COUNT} floors, "
            f"timer_policy={self.config.timer_policy}"
        )

    @staticmethod
    def default_config() -> Dict:
        """Default configuration."""
        return ControllerConfig().to_dict()

    @property
    def hotel(self) -> Hotel:
        return self._hotel

    def _build_floor(self, number: int) -> Floor:
        floor = Floor(f"Floor {number}")

        name = f"Main Corridor {number}"
        floor.add_main_corridor(
            Corridor.main(name, self._light(name, self.config.main_lights_on), Camera(name))
        )

        for index in range(1, SUB_CORRIDORS_PER_FLOOR + 1):
            name = f"Sub Corridor {number}{index}"
            floor.add_sub_corridor(Corridor.sub(name, self._light(name, False), Camera(name)))

        return floor

    def _light(self, name: str, is_on: bool) -> Light:
        return Light(name, is_on=is_on, scheduler=self.scheduler, auto_off=self.config.auto_off)

    def broadcast(self, event: MotionEvent) -> None:
        """
        Inject one motion event into the hotel.

        Synchronous: every device has seen the event when this returns.

        Args:
            event: The motion event, passed on unchanged
        """
        logger.info(f"Event: {event.location} at {event.time.isoformat()}")
        self._hotel.receive_event(event)

    def display_status(self) -> HotelStatus:
        """
        Log the state of the whole tree.

        Returns:
            HotelStatus snapshot that was logged
        """
        snapshot = self._hotel.status()
        for line in snapshot.render():
            logger.info(line)
        return snapshot

    def get_next_timeout(self) -> Optional[datetime]:
        """Get when the next light is due to switch off (None if no timers)."""
        return self.scheduler.get_next_timeout()

    def check_timeouts(self, now: Optional[datetime] = None) -> int:
        """
        Switch off lights whose auto-off time has passed.

        Args:
            now: Current time (defaults to datetime.now(UTC); naive is taken as UTC)

        Returns:
            Number of timers that fired
        """
        if now is None:
            now = datetime.now(UTC)
        return self.scheduler.check_timeouts(now)

    def monitor(
        self,
        interval: Optional[float] = None,
        stop_event: Optional[threading.Event] = None,
        max_iterations: Optional[int] = None,
    ) -> int:
        """
        Periodically expire timers and display status.

        Blocks until `stop_event` is set or `max_iterations` ticks have run.

        Args:
            interval: Seconds between ticks (defaults to config.monitor_interval_seconds)
            stop_event: Set it to end the loop
            max_iterations: Stop after this many ticks (None = no limit)

        Returns:
            Number of ticks run
        """
        if interval is None:
            interval = self.config.monitor_interval_seconds
        if stop_event is None:
            stop_event = threading.Event()

        ticks = 0
        while not stop_event.is_set():
            if max_iterations is not None and ticks >= max_iterations:
                break
            self.check_timeouts()
            self.display_status()
            ticks += 1
            if max_iterations is not None and ticks >= max_iterations:
                break
            if stop_event.wait(interval):
                break

        logger.debug(f"Monitor stopped after {ticks} tick(s)")
        return ticks

    def start_monitor(self, interval: Optional[float] = None) -> None:
        """Run monitor() on a daemon thread until stop_monitor() is called."""
        if self._monitor_thread is not None and self._monitor_thread.is_alive():
            logger.warning("Monitor already running")
            return

        self._monitor_stop.clear()
        self._monitor_thread = threading.Thread(
            target=self.monitor,
            kwargs={"interval": interval, "stop_event": self._monitor_stop},
            daemon=True,
        )
        self._monitor_thread.start()
        logger.info("Monitor started")

    def stop_monitor(self) -> None:
        self._monitor_stop.set()
        if self._monitor_thread is not None:
            self._monitor_thread.join(timeout=1)
            self._monitor_thread = None
        logger.info("Monitor stopped")
