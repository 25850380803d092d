"""Registered users and the bounded list that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from purrmart.linkedlist import LinkedList
from purrmart.stack import Stack

MAX_USERS = 100


class UserListError(Exception):
    """Raised when adding to a full user list or removing from an empty one."""


@dataclass
class User:
    """A shop account with its balance, purchase history and wishlist."""

    name: str
    password: str
    money: int = 0
    history: Stack = field(default_factory=Stack)
    wishlist: LinkedList = field(default_factory=LinkedList)


class UserList:
    """An ordered list of at most MAX_USERS users, indexed from zero."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: list[User] = []
        for user in users:
            self.append(user)

    def max_size(self) -> int:
        """Return the number of users the list can hold."""
        return MAX_USERS

    def is_empty(self) -> bool:
        return not self._users

    def is_full(self) -> bool:
        return len(self._users) == MAX_USERS

    def is_valid_index(self, index: int) -> bool:
        """Return whether index addresses a slot of the container."""
        return 0 <= index < MAX_USERS

    def append(self, user: User) -> None:
        """Add user at the end of the list."""
        if self.is_full():
            raise UserListError("user list is full")
        self._users.append(user)

    def pop_last(self) -> User:
        """Remove and return the last user."""
        if self.is_empty():
            raise UserListError("user list is empty")
        return self._users.pop()

    def __getitem__(self, index: int) -> User:
        if not 0 <= index < len(self._users):
            raise IndexError("user index out of range")
        return self._users[index]

    def __setitem__(self, index: int, user: User) -> None:
        """Replace the user at index, or add one when index is the length."""
        if index == len(self._users):
            self.append(user)
            return
        if not 0 <= index < len(self._users):
            raise IndexError("user index out of range")
        self._users[index] = user

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(list(self._users))

    def __repr__(self) -> str:
        return f"UserList({[user.name for user in self._users]!r})"