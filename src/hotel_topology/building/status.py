"""
Status snapshots for the hotel tree.

Snapshots are frozen values taken at one instant. They replace printing from
inside the tree: callers decide whether to render them as text or JSON.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

INDENT = "  "


@dataclass(frozen=True)
class DeviceStatus:
    """State of one light or camera.

    Attributes:
        name: Device name (also the location it reacts to).
        kind: "light" or "camera".
        state: True when the light is on / the camera is showing.
    """

    name: str
    kind: str
    state: bool

    @property
    def label(self) -> str:
        """ON/OFF for lights, SHOW/HIDE for cameras."""
        if self.kind == "camera":
            return "SHOW" if self.state else "HIDE"
        return "ON" if self.state else "OFF"

    def render(self) -> str:
        return f"{self.kind.capitalize()} {self.name} - {self.label}"

    def to_dict(self) -> dict:
        """Serialize to dict."""
        return {"name": self.name, "kind": self.kind, "state": self.state}


@dataclass(frozen=True)
class CorridorStatus:
    """State of a corridor and its two devices."""

    name: str
    kind: str  # "main" or "sub"
    light: DeviceStatus
    camera: DeviceStatus

    def devices(self) -> Tuple[DeviceStatus, DeviceStatus]:
        return (self.light, self.camera)

    def render(self, depth: int = 0) -> List[str]:
        pad = INDENT * depth
        return [
            f"{pad}{self.name} ({self.kind}) :",
            f"{pad}{INDENT}{self.light.render()}",
            f"{pad}{INDENT}{self.camera.render()}",
        ]

    def to_dict(self) -> dict:
        """Serialize to dict."""
        return {
            "name": self.name,
            "kind": self.kind,
            "light": self.light.to_dict(),
            "camera": self.camera.to_dict(),
        }


@dataclass(frozen=True)
class FloorStatus:
    """State of a floor: main corridors first, then sub corridors."""

    name: str
    corridors: Tuple[CorridorStatus, ...] = ()

    def render(self, depth: int = 0) -> List[str]:
        lines = [f"{INDENT * depth}{self.name} :"]
        for corridor in self.corridors:
            lines.extend(corridor.render(depth + 1))
        return lines

    def to_dict(self) -> dict:
        """Serialize to dict."""
        return {
            "name": self.name,
            "corridors": [c.to_dict() for c in self.corridors],
        }


@dataclass(frozen=True)
class HotelStatus:
    """State of the whole hotel tree."""

    name: str
    floors: Tuple[FloorStatus, ...] = ()

    def devices(self) -> Iterator[DeviceStatus]:
        """Iterate every device status in tree order."""
        for floor in self.floors:
            for corridor in floor.corridors:
                yield from corridor.devices()

    def render(self) -> List[str]:
        """
        Render the tree as indented text lines.

        Example:
            Hotel Grand :
              Floor 1 :
                Main Corridor 1 (main) :
                  Light Main Corridor 1 - ON
                  Camera Main Corridor 1 - HIDE
        """
        lines = [f"Hotel {self.name} :"]
        for floor in self.floors:
            lines.extend(floor.render(1))
        return lines

    def to_dict(self) -> dict:
        """Serialize to dict."""
        return {
            "name": self.name,
            "floors": [f.to_dict() for f in self.floors],
        }
