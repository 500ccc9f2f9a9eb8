"""Line-oriented console input/output and small text helpers."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterable
from typing import Any, TextIO

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_DIGITS = frozenset("0123456789")


class Console:
    """Reads user input line by line and writes prompts and reports."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write text as is, without adding a newline."""
        self.stdout.write(text)
        self.stdout.flush()

    def read_line(self) -> str:
        """Read one line without its line break; raise EOFError at end of input."""
        line = self.stdin.readline()
        if line == "":
            raise EOFError("no more input")
        return line.split("\n", 1)[0]

    def read_int(self) -> int | None:
        """Read the integer that starts a line, skipping blank lines.

        The rest of the line is discarded. Returns None when the line does
        not start with an integer.
        """
        line = self.read_line()
        while not line.strip():
            line = self.read_line()
        match = _LEADING_INT.match(line)
        return int(match.group(1)) if match else None

    def read_char(self) -> str:
        """Read the first character of a line and discard the rest."""
        line = self.read_line()
        return line[0] if line else "\n"


def _digit_count(value: int) -> int:
    count = 0
    value = abs(value)
    while value:
        value //= 10
        count += 1
    return count


def read_code(console: Console, digits: int) -> int:
    """Ask until the user enters a number with exactly ``digits`` digits."""
    while True:
        code = console.read_int()
        if code is not None and _digit_count(code) == digits:
            return code
        console.write(f"The code must consist of {digits} digits! Try again ")


def is_product_code(code: str) -> bool:
    """A product code is exactly six decimal digits."""
    return len(code) == 6 and all(ch in _DIGITS for ch in code)


def equals_ignore_case(first: str | None, second: str | None) -> bool:
    """Compare two strings character by character, ignoring case."""
    if first is None or second is None:
        return False
    if len(first) != len(second):
        return False
    return all(a.lower() == b.lower() for a, b in zip(first, second))


def numbered_lines(items: Iterable[Any], formatter: Callable[[Any], str]) -> list[str]:
    """Format items as lines numbered from 1."""
    return [f"{index}: {formatter(item)}" for index, item in enumerate(items, start=1)]