"""Tasklets: units of user code together with when they should run."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Optional

from fero.queue import Queue

__all__ = ["InvocationType", "Tasklet"]


class InvocationType(IntEnum):
    """How a tasklet decides that it is due."""

    NONE = 0
    ALWAYS = 1
    PERIODIC = 2
    QUEUE = 3


class Tasklet:
    """User code plus the scheduling information that governs it.

    Times are integers in nanoseconds.
    """

    def __init__(
        self,
        name: str,
        function: Optional[Callable[[Any], Any]],
        data: Any = None,
    ) -> None:
        self.name = name
        self.function = function
        self.data = data
        self.invocation_type = InvocationType.NONE
        self.queue: Optional[Queue] = None
        self.period = 0
        self.offset = 0
        self.next_activation_time = 0
        self.priority = 0

    def __repr__(self) -> str:
        return (
            f"Tasklet(name={self.name!r}, "
            f"invocation_type={self.invocation_type.name}, "
            f"priority={self.priority})"
        )

    def set_always_active(self) -> None:
        """Make the tasklet due on every scheduler cycle."""
        self.invocation_type = InvocationType.ALWAYS

    def set_periodic(self, period: int, offset: int) -> None:
        """Run every ``period`` nanoseconds, first at ``offset``."""
        self.invocation_type = InvocationType.PERIODIC
        self.period = period
        self.offset = offset
        self.next_activation_time = offset

    def set_queue_activated(self, queue: Queue) -> None:
        """Make the tasklet due whenever ``queue`` is not empty."""
        self.invocation_type = InvocationType.QUEUE
        self.queue = queue

    def is_due(self, time: int) -> bool:
        """Whether the tasklet should run at ``time``."""
        if self.invocation_type is InvocationType.ALWAYS:
            return True
        if self.invocation_type is InvocationType.PERIODIC:
            return self.next_activation_time <= time
        if self.invocation_type is InvocationType.QUEUE:
            return self.queue is not None and len(self.queue) > 0
        return False

    def invoke(self) -> Any:
        """Run the tasklet's function and return what it returns.

        For periodic tasklets the next activation time advances by one period.
        """
        if self.function is None:
            raise TypeError(f"tasklet {self.name!r} has no function")
        if self.invocation_type is InvocationType.PERIODIC:
            self.next_activation_time += self.period
        return self.function(self.data)