"""Bounded set of words that keeps insertion order."""

from __future__ import annotations

from typing import Iterable, Iterator

MAX_SET_SIZE = 100


class WordSet:
    """A set of at most MAX_SET_SIZE distinct words, in insertion order."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: list[str] = []
        for word in words:
            self.add(word)

    def is_empty(self) -> bool:
        return not self._words

    def is_full(self) -> bool:
        return len(self._words) == MAX_SET_SIZE

    def add(self, word: str) -> None:
        """Add word unless it is already a member."""
        if word in self._words:
            return
        if self.is_full():
            raise ValueError("set is full")
        self._words.append(word)

    def discard(self, word: str) -> None:
        """Remove word if it is a member; do nothing otherwise."""
        if word in self._words:
            self._words.remove(word)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._words))

    def __repr__(self) -> str:
        return f"WordSet({self._words!r})"