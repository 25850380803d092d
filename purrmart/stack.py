"""Bounded LIFO stack used for purchase history."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

MAX_STACK_SIZE = 100


class StackError(Exception):
    """Raised when pushing onto a full stack or popping an empty one."""


@dataclass
class PurchaseRecord:
    """One purchase: the total price paid and the name of the goods."""

    price: int
    name: str


class Stack:
    """A stack with a fixed capacity; the last item pushed is the top."""

    def __init__(self, capacity: int = MAX_STACK_SIZE) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, item: Any) -> None:
        """Put item on top of the stack."""
        if self.is_full():
            raise StackError("stack is full")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def reverse(self) -> Stack:
        """Move every item onto a new stack, emptying this one.

        The old top becomes the bottom of the returned stack.
        """
        reversed_stack = Stack(self._capacity)
        while not self.is_empty():
            reversed_stack.push(self.pop())
        return reversed_stack

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r}, capacity={self._capacity})"