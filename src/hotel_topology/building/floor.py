"""
Floor: an ordered group of main and sub corridors.
"""

from typing import List, Tuple
import logging

from hotel_topology.core.errors import InvalidConfigurationError
from hotel_topology.core.events import MotionEvent
from hotel_topology.building.corridor import Corridor, CorridorKind
from hotel_topology.building.status import FloorStatus

logger = logging.getLogger(__name__)


class Floor:
    """
    A floor of the hotel.

    Events go to every main corridor, then every sub corridor, in the order
    they were added. Every corridor is visited; matching happens at the
    devices.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._main_corridors: List[Corridor] = []
        self._sub_corridors: List[Corridor] = []

    def __repr__(self) -> str:
        return f"Floor({self.name!r})"

    @property
    def main_corridors(self) -> Tuple[Corridor, ...]:
        return tuple(self._main_corridors)

    @property
    def sub_corridors(self) -> Tuple[Corridor, ...]:
        return tuple(self._sub_corridors)

    @property
    def corridors(self) -> Tuple[Corridor, ...]:
        """Main corridors then sub corridors, each in insertion order."""
        return tuple(self._main_corridors) + tuple(self._sub_corridors)

    def add_main_corridor(self, corridor: Corridor) -> None:
        """
        Append a main corridor.

        Raises:
            InvalidConfigurationError: If the corridor is not a main corridor
        """
        self._check_kind(corridor, CorridorKind.MAIN)
        self._main_corridors.append(corridor)
        logger.debug(f"Added main corridor {corridor.name} to {self.name}")

    def add_sub_corridor(self, corridor: Corridor) -> None:
        """
        Append a sub corridor.

        Raises:
            InvalidConfigurationError: If the corridor is not a sub corridor
        """
        self._check_kind(corridor, CorridorKind.SUB)
        self._sub_corridors.append(corridor)
        logger.debug(f"Added sub corridor {corridor.name} to {self.name}")

    def _check_kind(self, corridor: Corridor, kind: CorridorKind) -> None:
        if not isinstance(corridor, Corridor):
            raise InvalidConfigurationError(
                f"Floor '{self.name}' expects a Corridor, got {corridor!r}"
            )
        if corridor.kind is not kind:
            raise InvalidConfigurationError(
                f"Corridor '{corridor.name}' is a {corridor.kind.value} corridor, "
                f"cannot add it to {self.name} as {kind.value}"
            )

    def receive_event(self, event: MotionEvent) -> None:
        logger.debug(f"{self.name} received event: {event.location}")
        for corridor in list(self._main_corridors):
            corridor.receive_event(event)
        for corridor in list(self._sub_corridors):
            corridor.receive_event(event)

    def status(self) -> FloorStatus:
        return FloorStatus(
            name=self.name,
            corridors=tuple(c.status() for c in self.corridors),
        )

    def log(self) -> List[str]:
        lines = self.status().render()
        for line in lines:
            logger.info(line)
        return lines
