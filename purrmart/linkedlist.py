"""Singly ordered list of strings, used for wishlists."""

from __future__ import annotations

from typing import Iterable, Iterator


class LinkedList:
    """An ordered sequence of strings with insertion at either end."""

    def __init__(self, values: Iterable[str] = ()) -> None:
        self._values: list[str] = list(values)

    def is_empty(self) -> bool:
        return not self._values

    def insert_first(self, value: str) -> None:
        self._values.insert(0, value)

    def insert_last(self, value: str) -> None:
        self._values.append(value)

    def delete_first(self) -> str:
        """Remove and return the first value."""
        if not self._values:
            raise IndexError("delete from empty list")
        return self._values.pop(0)

    def delete_last(self) -> str:
        """Remove and return the last value."""
        if not self._values:
            raise IndexError("delete from empty list")
        return self._values.pop()

    def remove(self, value: str) -> bool:
        """Remove the first occurrence of value; return whether one was found."""
        try:
            self._values.remove(value)
        except ValueError:
            return False
        return True

    def at(self, index: int) -> str | None:
        """Return the value at a zero-based position, or None past the end."""
        if index < 0:
            raise IndexError("index must not be negative")
        if index >= len(self._values):
            return None
        return self._values[index]

    def render(self) -> str:
        """Return the values as numbered lines, one per value."""
        return "".join(
            f"{number} {value}\n" for number, value in enumerate(self._values, start=1)
        )

    def __contains__(self, value: object) -> bool:
        return value in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __repr__(self) -> str:
        return f"LinkedList({self._values!r})"