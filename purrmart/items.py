"""Priced items sold in the store and the list that holds them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

INITIAL_SIZE = 10


@dataclass
class Item:
    """A product with its name and unit price."""

    name: str
    price: int


class ItemList:
    """An ordered list of items whose capacity grows in steps of ten."""

    def __init__(self, items: Iterable[Item] = ()) -> None:
        self._items: list[Item] = []
        self._capacity = INITIAL_SIZE
        for item in items:
            self.append(item)

    def capacity(self) -> int:
        """Return the number of slots currently reserved."""
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def insert_at(self, index: int, item: Item) -> None:
        """Insert item so that it ends up at position index."""
        if not 0 <= index <= len(self._items):
            raise IndexError("insert position out of range")
        if len(self._items) == self._capacity:
            self._capacity += INITIAL_SIZE
        self._items.insert(index, item)

    def insert_first(self, item: Item) -> None:
        self.insert_at(0, item)

    def append(self, item: Item) -> None:
        self.insert_at(len(self._items), item)

    def delete_at(self, index: int) -> Item:
        """Remove and return the item at position index."""
        if not 0 <= index < len(self._items):
            raise IndexError("delete position out of range")
        return self._items.pop(index)

    def delete_first(self) -> Item:
        return self.delete_at(0)

    def delete_last(self) -> Item:
        return self.delete_at(len(self._items) - 1)

    def reverse(self) -> None:
        """Reverse the order of the items in place."""
        self._items.reverse()

    def copy(self) -> ItemList:
        """Return a new list holding copies of the same items."""
        return ItemList(Item(item.name, item.price) for item in self._items)

    def contains(self, name: str) -> bool:
        """Return whether an item with exactly this name is in the list."""
        return any(item.name == name for item in self._items)

    def index_of(self, name: str) -> int:
        """Return the index of the first item with this name.

        When no item matches, the length of the list is returned.
        """
        for index, item in enumerate(self._items):
            if item.name == name:
                return index
        return len(self._items)

    def __getitem__(self, index: int) -> Item:
        if not 0 <= index < len(self._items):
            raise IndexError("index out of range")
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"ItemList({self._items!r})"