"""
Corridors: the subjects under observation.

Each corridor owns exactly one light and one camera, registered as its
observers when the corridor is built.
"""

from enum import Enum
from typing import List
import logging

from hotel_topology.core.errors import InvalidConfigurationError
from hotel_topology.core.events import MotionEvent
from hotel_topology.core.subject import SubjectUnderObservation
from hotel_topology.building.devices import Camera, Light
from hotel_topology.building.status import CorridorStatus

logger = logging.getLogger(__name__)


class CorridorKind(Enum):
    """Main corridors run the length of a floor; sub corridors branch off."""

    MAIN = "main"
    SUB = "sub"


class Corridor(SubjectUnderObservation):
    """
    A corridor with its light and camera.

    The kind only changes how the corridor is filed on a floor and labelled
    in status output; propagation is identical for both.
    """

    def __init__(
        self,
        name: str,
        light: Light,
        camera: Camera,
        kind: CorridorKind = CorridorKind.SUB,
    ) -> None:
        """
        Initialize a corridor and register its devices.

        Args:
            name: Corridor name
            light: The corridor's light
            camera: The corridor's camera
            kind: MAIN or SUB

        Raises:
            InvalidConfigurationError: If light or camera is missing or of the wrong type
        """
        if not isinstance(light, Light):
            raise InvalidConfigurationError(f"Corridor '{name}' requires a Light, got {light!r}")
        if not isinstance(camera, Camera):
            raise InvalidConfigurationError(f"Corridor '{name}' requires a Camera, got {camera!r}")

        super().__init__()
        self.name = name
        self.kind = CorridorKind(kind)
        self._light = light
        self._camera = camera
        self.add_observer(light)
        self.add_observer(camera)

    @classmethod
    def main(cls, name: str, light: Light, camera: Camera) -> "Corridor":
        return cls(name, light, camera, kind=CorridorKind.MAIN)

    @classmethod
    def sub(cls, name: str, light: Light, camera: Camera) -> "Corridor":
        return cls(name, light, camera, kind=CorridorKind.SUB)

    def __repr__(self) -> str:
        return f"Corridor({self.name!r}, kind={self.kind.value})"

    @property
    def light(self) -> Light:
        return self._light

    @property
    def camera(self) -> Camera:
        return self._camera

    def receive_event(self, event: MotionEvent) -> None:
        """Hand the event to this corridor's observers."""
        logger.debug(f"{self.name} received event: {event.location}")
        self.notify_observers(event)

    def status(self) -> CorridorStatus:
        return CorridorStatus(
            name=self.name,
            kind=self.kind.value,
            light=self._light.status(),
            camera=self._camera.status(),
        )

    def log(self) -> List[str]:
        lines = self.status().render()
        for line in lines:
            logger.info(line)
        return lines
