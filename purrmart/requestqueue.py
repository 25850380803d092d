"""Bounded first-in first-out queue of store requests."""

from __future__ import annotations

from collections import deque
from typing import Iterator

MAX_QUEUE_SIZE = 100


class QueueError(Exception):
    """Raised when adding to a full queue or taking from an empty one."""


class RequestQueue:
    """A FIFO queue of strings with a fixed capacity."""

    def __init__(self, capacity: int = MAX_QUEUE_SIZE) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: deque[str] = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def enqueue(self, value: str) -> None:
        """Add value at the tail of the queue."""
        if self.is_full():
            raise QueueError("queue is full")
        self._items.append(value)

    def dequeue(self) -> str:
        """Remove and return the value at the head of the queue."""
        if self.is_empty():
            raise QueueError("queue is empty")
        return self._items.popleft()

    def head(self) -> str:
        """Return the value at the head without removing it."""
        if self.is_empty():
            raise QueueError("queue is empty")
        return self._items[0]

    def tail(self) -> str:
        """Return the value at the tail without removing it."""
        if self.is_empty():
            raise QueueError("queue is empty")
        return self._items[-1]

    def render(self) -> str:
        """Return the values as numbered lines, head first."""
        return "".join(
            f"{number}. {value}\n" for number, value in enumerate(self._items, start=1)
        )

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"RequestQueue({list(self._items)!r}, capacity={self._capacity})"