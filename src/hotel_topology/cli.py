"""
Command line front end.

Builds the reference hotel, broadcasts the given motion events and prints the
resulting status.

Example:
    hotel-topology --event "Sub Corridor 22" --event "Main Corridor 1"
    hotel-topology --event "Sub Corridor 11" --advance 5 --json
"""

from datetime import datetime, timedelta, UTC
from typing import List, Optional
import argparse
import json
import logging
import sys

from hotel_topology.core.errors import InvalidConfigurationError
from hotel_topology.core.events import MotionEvent
from hotel_topology.core.scheduler import TimerPolicy
from hotel_topology.building import Hotel, HotelStatus
from hotel_topology.controller import Controller, ControllerConfig


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hotel-topology",
        description="Simulate motion events in a hotel and show light/camera status",
    )
    p.add_argument("--name", default="Hotel", help="Hotel name (default: Hotel)")
    p.add_argument(
        "--event",
        "-e",
        action="append",
        default=[],
        metavar="LOCATION",
        help="Broadcast motion at LOCATION (repeatable, in order)",
    )
    p.add_argument(
        "--advance",
        type=float,
        default=None,
        metavar="SECONDS",
        help="Run timeouts SECONDS after the last event before printing",
    )
    p.add_argument(
        "--policy",
        choices=[policy.value for policy in TimerPolicy],
        default=TimerPolicy.CANCEL_AND_RESCHEDULE.value,
        help="Light re-trigger behaviour",
    )
    p.add_argument("--auto-off", type=float, default=5.0, help="Light auto-off delay in seconds")
    p.add_argument("--json", action="store_true", help="Print status as JSON")
    p.add_argument("--monitor", type=int, default=0, metavar="N", help="Run N monitor ticks")
    p.add_argument("--interval", type=float, default=5.0, help="Seconds between monitor ticks")
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return p


def _print_status(snapshot: HotelStatus, as_json: bool) -> None:
    if as_json:
        print(json.dumps(snapshot.to_dict(), indent=2))
    else:
        print("\n".join(snapshot.render()))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO if args.monitor else logging.WARNING,
        format="%(asctime)s %(levelname)-5s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        config = ControllerConfig(
            auto_off_seconds=args.auto_off,
            timer_policy=args.policy,
            monitor_interval_seconds=args.interval,
        )
        controller = Controller(Hotel(args.name), config=config)
    except InvalidConfigurationError as e:
        print(f"hotel-topology: {e}", file=sys.stderr)
        return 2

    started = datetime.now(UTC)
    for location in args.event:
        controller.broadcast(MotionEvent(location, started))

    if args.advance is not None:
        controller.check_timeouts(started + timedelta(seconds=args.advance))

    if args.monitor > 0:
        controller.monitor(max_iterations=args.monitor)

    _print_status(controller.hotel.status(), args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
