"""Growable array of strings with case-insensitive search."""

from __future__ import annotations

from typing import Iterable, Iterator

INITIAL_SIZE = 10


class DynamicArray:
    """An ordered array of strings whose capacity doubles when it fills up."""

    def __init__(self, values: Iterable[str] = ()) -> None:
        self._items: list[str] = []
        self._capacity = INITIAL_SIZE
        for value in values:
            self.insert_last(value)

    def capacity(self) -> int:
        """Return the number of slots currently reserved."""
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def insert_at(self, index: int, value: str) -> None:
        """Insert value so that it ends up at position index."""
        if not 0 <= index <= len(self._items):
            raise IndexError("insert position out of range")
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.insert(index, value)

    def insert_first(self, value: str) -> None:
        self.insert_at(0, value)

    def insert_last(self, value: str) -> None:
        self.insert_at(len(self._items), value)

    def delete_at(self, index: int) -> str:
        """Remove and return the value at position index."""
        if not 0 <= index < len(self._items):
            raise IndexError("delete position out of range")
        return self._items.pop(index)

    def delete_first(self) -> str:
        return self.delete_at(0)

    def delete_last(self) -> str:
        return self.delete_at(len(self._items) - 1)

    def reverse(self) -> None:
        """Reverse the order of the values in place."""
        self._items.reverse()

    def copy(self) -> DynamicArray:
        """Return an independent array with the same values and capacity."""
        duplicate = DynamicArray(self._items)
        duplicate._capacity = self._capacity
        return duplicate

    def search(self, value: str) -> int:
        """Return the first index whose value matches ignoring case, or -1."""
        wanted = value.upper()
        for index, item in enumerate(self._items):
            if item.upper() == wanted:
                return index
        return -1

    def render(self) -> str:
        """Return the values as ``[a, b, c]`` followed by a newline."""
        return "[" + ", ".join(self._items) + "]\n"

    def __contains__(self, value: object) -> bool:
        return isinstance(value, str) and self.search(value) != -1

    def __getitem__(self, index: int) -> str:
        if not 0 <= index < len(self._items):
            raise IndexError("index out of range")
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r})"