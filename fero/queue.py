"""Bounded FIFO queue for passing messages between tasklets."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

__all__ = ["QueueError", "QueueFull", "QueueEmpty", "ItemTooLarge", "Queue"]


class QueueError(Exception):
    """Base class for queue errors."""


class QueueFull(QueueError):
    """Raised when putting into a queue that holds its full capacity."""


class QueueEmpty(QueueError):
    """Raised when reading from a queue that holds no items."""


class ItemTooLarge(QueueError):
    """Raised when an item is larger than the queue's item size."""


class Queue:
    """A fixed-capacity FIFO of byte items, each at most ``item_size`` bytes."""

    def __init__(self, capacity: int, item_size: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        if item_size < 0:
            raise ValueError("item_size must not be negative")
        self.capacity = capacity
        self.item_size = item_size
        self._items: deque[bytes] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[bytes]:
        return iter(tuple(self._items))

    def __repr__(self) -> str:
        return (
            f"Queue(capacity={self.capacity}, item_size={self.item_size}, "
            f"count={len(self)})"
        )

    @property
    def full(self) -> bool:
        """Whether the queue holds as many items as it can."""
        return len(self._items) >= self.capacity

    def put(self, data: bytes | bytearray | memoryview) -> None:
        """Append a copy of ``data`` to the end of the queue."""
        item = bytes(data)
        if len(item) > self.item_size:
            raise ItemTooLarge(
                f"item of {len(item)} bytes exceeds item size {self.item_size}"
            )
        if self.full:
            raise QueueFull(f"queue is full ({self.capacity} items)")
        self._items.append(item)

    def get(self) -> bytes:
        """Remove and return the oldest item."""
        if not self._items:
            raise QueueEmpty("queue is empty")
        return self._items.popleft()

    def peek(self) -> bytes:
        """Return the oldest item without removing it."""
        if not self._items:
            raise QueueEmpty("queue is empty")
        return self._items[0]