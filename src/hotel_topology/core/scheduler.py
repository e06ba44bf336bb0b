"""
Host-driven one-shot timers.

The scheduler never sleeps and starts no threads of its own. Callers register
tasks with a due time, and the host calls check_timeouts(now) to run whatever
has expired. Tests pass explicit times; a live process calls it from a
monitor loop.
"""

from dataclasses import dataclass, field
from datetime import datetime, UTC
from enum import Enum
from typing import Callable, Dict, Hashable, List, Optional
import itertools
import logging
import threading

logger = logging.getLogger(__name__)


def _as_utc(when: datetime) -> datetime:
    """Read a naive datetime as UTC."""
    if when.tzinfo is None:
        return when.replace(tzinfo=UTC)
    return when


class TimerPolicy(Enum):
    """What happens when a key is scheduled again while a task is pending.

    CANCEL_AND_RESCHEDULE: Pending tasks for the key are dropped first, so
        only the latest schedule fires.
    OVERLAP: Every schedule adds a task. Earlier tasks still fire, which can
        undo a later trigger early.
    """

    CANCEL_AND_RESCHEDULE = "cancel_and_reschedule"
    OVERLAP = "overlap"


@dataclass(frozen=True)
class ScheduledTask:
    """A pending one-shot callback.

    Attributes:
        key: Identity of the owner (one device = one key).
        due: When the callback should run.
        callback: Zero-argument callable.
        seq: Scheduling order, breaks ties between equal due times.
        generation: Key generation at scheduling time; a task whose key has
            since been rescheduled or cancelled is stale and never runs.
    """

    key: Hashable
    due: datetime
    callback: Callable[[], None] = field(compare=False)
    seq: int = 0
    generation: int = 0


class TimerScheduler:
    """Keyed one-shot timers driven by an external clock."""

    def __init__(self, policy: TimerPolicy = TimerPolicy.CANCEL_AND_RESCHEDULE) -> None:
        """
        Initialize an empty scheduler.

        Args:
            policy: Re-scheduling behaviour for keys with pending tasks
        """
        self.policy = policy
        self._tasks: Dict[Hashable, List[ScheduledTask]] = {}
        self._generations: Dict[Hashable, int] = {}
        self._counter = itertools.count()
        self._lock = threading.RLock()

    def _bump(self, key: Hashable) -> int:
        generation = self._generations.get(key, 0) + 1
        self._generations[key] = generation
        return generation

    def schedule(
        self,
        key: Hashable,
        due: datetime,
        callback: Callable[[], None],
    ) -> ScheduledTask:
        """
        Register a callback to run once at or after `due`.

        Args:
            key: Owner identity; the policy applies per key
            due: Due time
            callback: Called with no arguments by check_timeouts()

        Returns:
            The ScheduledTask that was created
        """
        due = _as_utc(due)
        with self._lock:
            if self.policy is TimerPolicy.CANCEL_AND_RESCHEDULE:
                generation = self._bump(key)
            else:
                generation = self._generations.get(key, 0)
            task = ScheduledTask(
                key=key,
                due=due,
                callback=callback,
                seq=next(self._counter),
                generation=generation,
            )
            if self.policy is TimerPolicy.CANCEL_AND_RESCHEDULE:
                dropped = len(self._tasks.get(key, []))
                self._tasks[key] = [task]
                if dropped:
                    logger.debug(f"Rescheduled {key!r}: cancelled {dropped} pending task(s)")
            else:
                self._tasks.setdefault(key, []).append(task)

        logger.debug(f"Scheduled {key!r} at {due.isoformat()}")
        return task

    def cancel(self, key: Hashable) -> int:
        """
        Cancel every pending task for a key.

        Args:
            key: Owner identity

        Returns:
            Number of tasks cancelled
        """
        with self._lock:
            cancelled = len(self._tasks.pop(key, []))
            self._bump(key)

        if cancelled:
            logger.debug(f"Cancelled {cancelled} task(s) for {key!r}")
        return cancelled

    def pending(self, key: Optional[Hashable] = None) -> List[ScheduledTask]:
        """
        Get pending tasks ordered by due time.

        Args:
            key: Restrict to one owner (None = all owners)

        Returns:
            List of ScheduledTask
        """
        with self._lock:
            if key is None:
                tasks = [t for group in self._tasks.values() for t in group]
            else:
                tasks = list(self._tasks.get(key, []))

        return sorted(tasks, key=lambda t: (t.due, t.seq))

    def get_next_timeout(self) -> Optional[datetime]:
        """
        Get when check_timeouts() next has something to do.

        Returns:
            Earliest due time, or None if nothing is pending
        """
        tasks = self.pending()
        return tasks[0].due if tasks else None

    def check_timeouts(self, now: datetime) -> int:
        """
        Run every task that is due.

        Tasks run in due order, outside the lock. A task whose key was
        rescheduled or cancelled after it was collected is skipped. A failing
        callback is logged and the remaining tasks still run.

        Args:
            now: Current time (naive datetimes are taken as UTC)

        Returns:
            Number of tasks that ran
        """
        now = _as_utc(now)
        with self._lock:
            due: List[ScheduledTask] = []
            for key in list(self._tasks):
                remaining = []
                for task in self._tasks[key]:
                    (due if task.due <= now else remaining).append(task)
                if remaining:
                    self._tasks[key] = remaining
                else:
                    del self._tasks[key]

        due.sort(key=lambda t: (t.due, t.seq))
        if due:
            logger.debug(f"Checking timeouts at {now.isoformat()}: {len(due)} due")

        ran = 0
        for task in due:
            with self._lock:
                stale = task.generation != self._generations.get(task.key, 0)
            if stale:
                logger.debug(f"Skipped stale task for {task.key!r} due {task.due.isoformat()}")
                continue

            ran += 1
            try:
                task.callback()
            except Exception as e:
                logger.error(f"Error in timer callback for {task.key!r}: {e}", exc_info=True)

        return ran
