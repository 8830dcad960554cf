"""Priority scheduler that runs at most one due tasklet per invocation."""

from __future__ import annotations

from typing import Optional

from fero.tasklet import Tasklet

__all__ = ["SchedulerFull", "Scheduler"]


class SchedulerFull(Exception):
    """Raised when adding a tasklet to a scheduler at capacity."""


class Scheduler:
    """Holds tasklets ordered by priority, highest first."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._tasklets: list[Tasklet] = []

    def __len__(self) -> int:
        return len(self._tasklets)

    def __repr__(self) -> str:
        return f"Scheduler(capacity={self.capacity}, tasklets={self._tasklets!r})"

    @property
    def tasklets(self) -> tuple[Tasklet, ...]:
        """The tasklets in the order they are considered."""
        return tuple(self._tasklets)

    def add_tasklet(self, tasklet: Tasklet, priority: int) -> None:
        """Add ``tasklet`` with ``priority``; higher values run first.

        Among equal priorities, tasklets added earlier come first.
        """
        if len(self._tasklets) >= self.capacity:
            raise SchedulerFull(f"scheduler is full ({self.capacity} tasklets)")
        tasklet.priority = priority
        position = next(
            (
                index
                for index, existing in enumerate(self._tasklets)
                if existing.priority < priority
            ),
            len(self._tasklets),
        )
        self._tasklets.insert(position, tasklet)

    def invoke(self, time: int) -> Optional[Tasklet]:
        """Run the first due tasklet at ``time`` and return it, or None."""
        for tasklet in self._tasklets:
            if tasklet.is_due(time):
                tasklet.invoke()
                return tasklet
        return None