"""Word and line reading built on the character reader."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from purrmart.charmachine import DEFAULT_SAVE_DIR, CharReader, open_save

MAX_WORD_LENGTH = 150
BLANK = " "


@dataclass
class ScanResult:
    """Values read by scan; fields not asked for keep their defaults."""

    first_word: str = ""
    second_word: str = ""
    first_number: int = 0
    second_number: int = 0


def word_to_int(word: str) -> int:
    """Read a word as a decimal number; an empty word gives 0."""
    result = 0
    for char in word:
        result = result * 10 + (ord(char) - ord("0"))
    return result


def is_contained(text: str, pattern: str) -> bool:
    """Return whether pattern occurs in text; the empty pattern always does."""
    return pattern in text


def _read_raw_line(reader: CharReader) -> str:
    while reader.current() == BLANK:
        reader.advance()
    chars = []
    while not reader.at_mark():
        chars.append(reader.current())
        reader.advance()
    return "".join(chars)


def read_line(stream: TextIO | None = None) -> str:
    """Read one line, without leading blanks, cut to MAX_WORD_LENGTH characters."""
    reader = CharReader(sys.stdin if stream is None else stream)
    return _read_raw_line(reader)[:MAX_WORD_LENGTH]


def split_words(line: str) -> list[str]:
    """Split a line on blanks, each word cut to MAX_WORD_LENGTH characters."""
    return [word[:MAX_WORD_LENGTH] for word in line.split(BLANK) if word]


def read_save_lines(filename: str, base_dir: str | Path = DEFAULT_SAVE_DIR) -> list[str]:
    """Read the lines of a save file up to the first empty line or the end.

    Each line is cut to MAX_WORD_LENGTH characters.
    """
    reader = open_save(filename, base_dir)
    lines = []
    while not reader.at_mark():
        chars = []
        while not reader.at_mark():
            chars.append(reader.current())
            reader.advance()
        lines.append("".join(chars)[:MAX_WORD_LENGTH])
        reader.advance()
    return lines


def scan(fmt: str, stream: TextIO | None = None) -> ScanResult:
    """Read one line of input as described by fmt.

    ``%c`` reads a word, ``%d`` a number and ``%s`` the whole line. The first
    ``%c`` or ``%d`` fills the first field of its kind, later ones the second.
    A format with no directive reads nothing.
    """
    result = ScanResult()
    directives = [
        fmt[pos + 1] for pos, char in enumerate(fmt[:-1]) if char == "%"
    ]
    directives = [d for d in directives if d in "csd"]
    if not directives:
        return result

    line = _read_raw_line(CharReader(sys.stdin if stream is None else stream))
    words = iter(split_words(line))
    first = False
    for directive in directives:
        if directive == "s":
            result.first_word = line[:MAX_WORD_LENGTH]
            continue
        word = next(words, "")
        if directive == "c":
            if first:
                result.second_word = word
            else:
                result.first_word = word
                first = True
        else:
            if first:
                result.second_number = word_to_int(word)
            else:
                result.first_number = word_to_int(word)
                first = True
    return result