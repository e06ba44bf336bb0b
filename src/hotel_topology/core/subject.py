"""
Observer registration and synchronous fan-out.

A subject under observation keeps an ordered list of observers and hands
every event to each of them.
"""

from typing import List, Protocol, Tuple
import logging

from hotel_topology.core.events import MotionEvent

logger = logging.getLogger(__name__)


class Observer(Protocol):
    """Anything that can be notified of a motion event."""

    def notify(self, event: MotionEvent) -> None: ...


class SubjectUnderObservation:
    """
    Base behaviour for containers that fan events out to observers.

    Observers are called synchronously, in registration order. Each call is
    wrapped in try/except so one broken device does not block the others.
    """

    def __init__(self) -> None:
        """Initialize with no observers."""
        self._observers: List[Observer] = []

    @property
    def observers(self) -> Tuple[Observer, ...]:
        """Currently registered observers, in registration order."""
        return tuple(self._observers)

    def add_observer(self, observer: Observer) -> None:
        """
        Register an observer.

        The same observer may be registered more than once; it is then
        notified once per registration.

        Args:
            observer: Object exposing notify(event)
        """
        self._observers.append(observer)
        logger.debug(f"Added observer {observer!r} to {self!r}")

    def remove_observer(self, observer: Observer) -> None:
        """
        Remove every registration of an observer.

        Args:
            observer: The exact object to remove (identity comparison)
        """
        self._observers = [o for o in self._observers if o is not observer]
        logger.debug(f"Removed observer {observer!r} from {self!r}")

    def notify_observers(self, event: MotionEvent) -> None:
        """
        Pass an event to all registered observers.

        Args:
            event: The motion event to deliver
        """
        for observer in list(self._observers):
            try:
                observer.notify(event)
            except Exception as e:
                logger.error(
                    f"Error in observer {observer!r} for event at {event.location}: {e}",
                    exc_info=True,
                )
