"""
Tests for the hotel tree: Corridor, Floor and Hotel.

Tests verify:
- Corridors own exactly one light and one camera
- Observer registration and catch-and-continue fan-out
- Fan-out order (main corridors before sub corridors, floors in order)
- Configuration errors at construction
- Nodes added later are reached
- Status snapshots and rendering
"""

import logging
from datetime import datetime, UTC

import pytest

from hotel_topology import InvalidConfigurationError, MotionEvent
from hotel_topology.building import (
    Camera,
    Corridor,
    CorridorKind,
    Floor,
    Hotel,
    Light,
)

T0 = datetime(2024, 1, 15, 10, 0, 0, tzinfo=UTC)


class Recorder:
    """Observer that records what it was sent."""

    def __init__(self, label, log):
        self.label = label
        self.log = log

    def notify(self, event):
        self.log.append((self.label, event.location))


def make_corridor(name, kind=CorridorKind.SUB, light_on=False):
    return Corridor(name, Light(name, is_on=light_on), Camera(name), kind=kind)


@pytest.fixture
def hotel():
    """Two floors, each with one main and two sub corridors."""
    hotel = Hotel("Grand")
    for f in (1, 2):
        floor = Floor(f"Floor {f}")
        floor.add_main_corridor(make_corridor(f"Main Corridor {f}", CorridorKind.MAIN, True))
        floor.add_sub_corridor(make_corridor(f"Sub Corridor {f}1"))
        floor.add_sub_corridor(make_corridor(f"Sub Corridor {f}2"))
        hotel.add_floor(floor)
    return hotel


class TestCorridor:
    """Corridor ownership and observer behaviour."""

    def test_registers_light_and_camera(self):
        light = Light("Sub Corridor 11")
        camera = Camera("Sub Corridor 11")
        corridor = Corridor("Sub Corridor 11", light, camera)

        assert corridor.light is light
        assert corridor.camera is camera
        assert corridor.observers == (light, camera)
        assert corridor.kind is CorridorKind.SUB

    def test_kind_constructors(self):
        main = Corridor.main("Main Corridor 1", Light("Main Corridor 1"), Camera("Main Corridor 1"))
        sub = Corridor.sub("Sub Corridor 11", Light("Sub Corridor 11"), Camera("Sub Corridor 11"))
        assert main.kind is CorridorKind.MAIN
        assert sub.kind is CorridorKind.SUB

    def test_requires_light(self):
        with pytest.raises(InvalidConfigurationError):
            Corridor("Sub Corridor 11", None, Camera("Sub Corridor 11"))

    def test_requires_camera(self):
        with pytest.raises(InvalidConfigurationError):
            Corridor("Sub Corridor 11", Light("Sub Corridor 11"), None)

    def test_rejects_swapped_devices(self):
        with pytest.raises(InvalidConfigurationError):
            Corridor("Sub Corridor 11", Camera("Sub Corridor 11"), Light("Sub Corridor 11"))

    def test_receive_event_reaches_devices(self):
        corridor = make_corridor("Sub Corridor 11")
        corridor.receive_event(MotionEvent("Sub Corridor 11", T0))
        assert corridor.light.is_on is True
        assert corridor.camera.is_showing is True

    def test_receive_event_no_match(self):
        corridor = make_corridor("Sub Corridor 11")
        corridor.receive_event(MotionEvent("Sub Corridor 12", T0))
        assert corridor.light.is_on is False
        assert corridor.camera.is_showing is False

    def test_remove_observer(self):
        corridor = make_corridor("Sub Corridor 11")
        corridor.remove_observer(corridor.light)

        corridor.receive_event(MotionEvent("Sub Corridor 11", T0))

        assert corridor.light.is_on is False
        assert corridor.camera.is_showing is True
        assert corridor.observers == (corridor.camera,)

    def test_duplicate_observers_notified_twice(self):
        log = []
        corridor = make_corridor("Sub Corridor 11")
        recorder = Recorder("extra", log)
        corridor.add_observer(recorder)
        corridor.add_observer(recorder)

        corridor.receive_event(MotionEvent("anywhere", T0))
        assert log == [("extra", "anywhere"), ("extra", "anywhere")]

        corridor.remove_observer(recorder)
        corridor.receive_event(MotionEvent("anywhere", T0))
        assert len(log) == 2

    def test_broken_observer_does_not_block_others(self, caplog):
        class Broken:
            def notify(self, event):
                raise RuntimeError("sensor fault")

        light = Light("Sub Corridor 11")
        camera = Camera("Sub Corridor 11")
        corridor = Corridor("Sub Corridor 11", light, camera)
        corridor.remove_observer(light)
        corridor.add_observer(Broken())
        corridor.add_observer(light)

        with caplog.at_level(logging.ERROR):
            corridor.receive_event(MotionEvent("Sub Corridor 11", T0))

        assert camera.is_showing is True
        assert light.is_on is True
        assert "sensor fault" in caplog.text

    def test_log_lines(self):
        corridor = make_corridor("Main Corridor 1", CorridorKind.MAIN, light_on=True)
        assert corridor.log() == [
            "Main Corridor 1 (main) :",
            "  Light Main Corridor 1 - ON",
            "  Camera Main Corridor 1 - HIDE",
        ]


class TestFloor:
    """Floor collections and fan-out order."""

    def test_add_corridors(self):
        floor = Floor("Floor 1")
        main = make_corridor("Main Corridor 1", CorridorKind.MAIN)
        sub1 = make_corridor("Sub Corridor 11")
        sub2 = make_corridor("Sub Corridor 12")
        floor.add_sub_corridor(sub1)
        floor.add_main_corridor(main)
        floor.add_sub_corridor(sub2)

        assert floor.main_corridors == (main,)
        assert floor.sub_corridors == (sub1, sub2)
        assert floor.corridors == (main, sub1, sub2)

    def test_wrong_kind_rejected(self):
        floor = Floor("Floor 1")
        with pytest.raises(InvalidConfigurationError):
            floor.add_main_corridor(make_corridor("Sub Corridor 11"))
        with pytest.raises(InvalidConfigurationError):
            floor.add_sub_corridor(make_corridor("Main Corridor 1", CorridorKind.MAIN))
        with pytest.raises(InvalidConfigurationError):
            floor.add_sub_corridor("Sub Corridor 11")

    def test_visits_main_then_sub_corridors(self):
        log = []
        floor = Floor("Floor 1")
        sub = make_corridor("Sub Corridor 11")
        main = make_corridor("Main Corridor 1", CorridorKind.MAIN)
        sub.add_observer(Recorder("sub", log))
        main.add_observer(Recorder("main", log))
        floor.add_sub_corridor(sub)
        floor.add_main_corridor(main)

        floor.receive_event(MotionEvent("nowhere", T0))

        assert log == [("main", "nowhere"), ("sub", "nowhere")]

    def test_log_lines(self):
        floor = Floor("Floor 1")
        floor.add_sub_corridor(make_corridor("Sub Corridor 11"))
        floor.add_main_corridor(make_corridor("Main Corridor 1", CorridorKind.MAIN, light_on=True))
        floor.receive_event(MotionEvent("Sub Corridor 11", T0))

        assert floor.log() == [
            "Floor 1 :",
            "  Main Corridor 1 (main) :",
            "    Light Main Corridor 1 - ON",
            "    Camera Main Corridor 1 - HIDE",
            "  Sub Corridor 11 (sub) :",
            "    Light Sub Corridor 11 - ON",
            "    Camera Sub Corridor 11 - SHOW",
        ]


class TestHotel:
    """Hotel fan-out, lookups and status."""

    def test_rejects_non_floor(self):
        with pytest.raises(InvalidConfigurationError):
            Hotel("Grand").add_floor("Floor 1")

    def test_every_corridor_visited(self, hotel):
        log = []
        for floor in hotel.floors:
            for corridor in floor.corridors:
                corridor.add_observer(Recorder(corridor.name, log))

        hotel.receive_event(MotionEvent("Sub Corridor 22", T0))

        assert [label for label, _ in log] == [
            "Main Corridor 1",
            "Sub Corridor 11",
            "Sub Corridor 12",
            "Main Corridor 2",
            "Sub Corridor 21",
            "Sub Corridor 22",
        ]

    def test_only_matching_devices_change(self, hotel):
        before = hotel.status()
        hotel.receive_event(MotionEvent("Sub Corridor 12", T0))
        after = hotel.status()

        changed = [
            (b.kind, b.name) for b, a in zip(before.devices(), after.devices()) if b != a
        ]
        assert changed == [("light", "Sub Corridor 12"), ("camera", "Sub Corridor 12")]

    def test_unknown_location_is_noop(self, hotel):
        before = hotel.status()
        hotel.receive_event(MotionEvent("Lobby", T0))
        assert hotel.status() == before

    def test_floor_added_later_is_reached(self, hotel):
        floor = Floor("Floor 3")
        hotel.add_floor(floor)
        corridor = make_corridor("Sub Corridor 31")
        floor.add_sub_corridor(corridor)

        hotel.receive_event(MotionEvent("Sub Corridor 31", T0))

        assert corridor.light.is_on is True
        assert corridor.camera.is_showing is True

    def test_devices_and_find(self, hotel):
        devices = list(hotel.devices())
        assert len(devices) == 12
        assert isinstance(devices[0], Light)
        assert isinstance(devices[1], Camera)

        found = hotel.find_devices("Sub Corridor 21")
        assert [type(d) for d in found] == [Light, Camera]
        assert hotel.find_devices("Lobby") == []

    def test_status_snapshot(self, hotel):
        status = hotel.status()
        assert status.name == "Grand"
        assert [f.name for f in status.floors] == ["Floor 1", "Floor 2"]
        assert [c.kind for c in status.floors[0].corridors] == ["main", "sub", "sub"]

        data = status.to_dict()
        assert data["floors"][1]["corridors"][0]["light"] == {
            "name": "Main Corridor 2",
            "kind": "light",
            "state": True,
        }

    def test_log_renders_tree(self, hotel):
        lines = hotel.log()
        assert lines[0] == "Hotel Grand :"
        assert lines[1] == "  Floor 1 :"
        assert lines[2] == "    Main Corridor 1 (main) :"
        assert lines[3] == "      Light Main Corridor 1 - ON"
        assert lines[4] == "      Camera Main Corridor 1 - HIDE"
        assert len(lines) == 1 + 2 * (1 + 3 * 3)
