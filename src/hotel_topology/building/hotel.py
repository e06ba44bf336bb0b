"""
Hotel: the root of the containment tree.
"""

from typing import Iterator, List, Tuple, Union
import logging

from hotel_topology.core.errors import InvalidConfigurationError
from hotel_topology.core.events import MotionEvent
from hotel_topology.building.devices import Camera, Light
from hotel_topology.building.floor import Floor
from hotel_topology.building.status import HotelStatus

logger = logging.getLogger(__name__)

Device = Union[Light, Camera]


class Hotel:
    """
    A hotel: an ordered list of floors.

    receive_event() is the entry point for motion once the tree is built.
    The hotel does not validate locations; an unknown location reaches every
    device and changes nothing.
    """

    def __init__(self, name: str) -> None:
        """
        Initialize an empty hotel.

        Args:
            name: Hotel name, used in status output
        """
        self.name = name
        self._floors: List[Floor] = []

    def __repr__(self) -> str:
        return f"Hotel({self.name!r})"

    @property
    def floors(self) -> Tuple[Floor, ...]:
        return tuple(self._floors)

    def add_floor(self, floor: Floor) -> None:
        """
        Append a floor.

        Args:
            floor: The Floor to add

        Raises:
            InvalidConfigurationError: If floor is not a Floor
        """
        if not isinstance(floor, Floor):
            raise InvalidConfigurationError(f"Hotel '{self.name}' expects a Floor, got {floor!r}")

        self._floors.append(floor)
        logger.info(f"Added floor {floor.name} to hotel {self.name}")

    def receive_event(self, event: MotionEvent) -> None:
        """
        Propagate a motion event to every floor, in insertion order.

        Args:
            event: The motion event
        """
        logger.debug(f"Hotel {self.name} received event: {event.location}")
        for floor in list(self._floors):
            floor.receive_event(event)

    def devices(self) -> Iterator[Device]:
        """
        Iterate every light and camera in tree order.

        Yields:
            For each corridor, its light then its camera
        """
        for floor in self._floors:
            for corridor in floor.corridors:
                yield corridor.light
                yield corridor.camera

    def find_devices(self, name: str) -> List[Device]:
        """
        Get the devices that would react to motion at `name`.

        Args:
            name: Device name / location

        Returns:
            List of matching lights and cameras (empty if none)
        """
        return [d for d in self.devices() if d.name == name]

    def status(self) -> HotelStatus:
        """Take a snapshot of the whole tree."""
        return HotelStatus(name=self.name, floors=tuple(f.status() for f in self._floors))

    def log(self) -> List[str]:
        """
        Log the status of the whole tree, one line per node.

        Returns:
            The rendered lines
        """
        lines = self.status().render()
        for line in lines:
            logger.info(line)
        return lines
