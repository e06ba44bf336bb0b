"""
Motion event definition.

A MotionEvent is the single payload that travels down the hotel tree.
"""

from dataclasses import dataclass, field
from datetime import datetime, UTC


def _utc_now() -> datetime:
    """Get current UTC time (for default factory)."""
    return datetime.now(UTC)


@dataclass(frozen=True)
class MotionEvent:
    """
    Movement detected at a location.

    Attributes:
        location: Name of the place where motion was detected
            (e.g., "Sub Corridor 11"). Matched against device names.
        time: When the motion occurred. Naive datetimes are taken as UTC.
    """

    location: str
    time: datetime = field(default_factory=_utc_now)

    def __post_init__(self) -> None:
        if self.time.tzinfo is None:
            object.__setattr__(self, "time", self.time.replace(tzinfo=UTC))
