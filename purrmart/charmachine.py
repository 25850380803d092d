"""Character-at-a-time reading of input and save files, and writing of saves."""

from __future__ import annotations

import io
from pathlib import Path
from typing import TextIO

MARK = "\n"
DEFAULT_SAVE_DIR = "saves"


def save_path(filename: str, base_dir: str | Path = DEFAULT_SAVE_DIR) -> Path:
    """Return the path of a save file inside the save directory."""
    return Path(base_dir) / filename


def open_save(filename: str, base_dir: str | Path = DEFAULT_SAVE_DIR) -> CharReader:
    """Open a save file for reading, positioned on its first character.

    Raises FileNotFoundError (or another OSError) when the file cannot be read.
    """
    with open(save_path(filename, base_dir), encoding="utf-8") as handle:
        text = handle.read()
    return CharReader(io.StringIO(text))


class CharReader:
    """Reads a text stream one character at a time.

    The reader always has a current character; it starts on the first
    character of the stream. The end of the stream reads as MARK.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._current = MARK
        self.advance()

    def advance(self) -> str:
        """Move to the next character and return it."""
        char = self._stream.read(1)
        self._current = char if char else MARK
        return self._current

    def current(self) -> str:
        return self._current

    def at_mark(self) -> bool:
        """Return whether the current character is the line mark."""
        return self._current == MARK

    def reset(self) -> None:
        """Rewind a seekable stream to its start.

        The current character is left as it is; the next advance reads the
        first character again. Streams that cannot seek are left alone.
        """
        if self._stream.seekable():
            self._stream.seek(0)


class SaveWriter:
    """Writes a save file inside the save directory."""

    def __init__(self, filename: str, base_dir: str | Path = DEFAULT_SAVE_DIR) -> None:
        self.path = save_path(filename, base_dir)
        self._handle: TextIO | None = open(self.path, "w", encoding="utf-8")

    def __enter__(self) -> SaveWriter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _write(self, text: str) -> None:
        if self._handle is None:
            raise ValueError("save file is closed")
        self._handle.write(text)

    def write_char(self, char: str) -> None:
        """Write a single character."""
        if len(char) != 1:
            raise ValueError("expected exactly one character")
        self._write(char)

    def write_int(self, number: int) -> None:
        """Write an integer in decimal."""
        self._write(str(int(number)))

    def write_newline(self) -> None:
        self._write(MARK)

    def write_blank(self) -> None:
        self._write(" ")

    def close(self) -> None:
        """Close the file; further writes raise ValueError."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None