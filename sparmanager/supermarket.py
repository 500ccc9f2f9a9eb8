"""Supermarket branches."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .address import read_address
from .console import Console, equals_ignore_case, read_code

SUPERMARKET_CODE_DIGITS = 5


@dataclass
class Supermarket:
    """A branch; two branches are the same when all fields match exactly."""

    name: str
    address: str
    code: int

    def __str__(self) -> str:
        return f"Name: {self.name}, Address:{self.address}, Code: {self.code}"

    def matches_name(self, name: str) -> bool:
        """True if the branch name equals ``name`` ignoring case."""
        return equals_ignore_case(self.name, name)

    def matches_code(self, code: int) -> bool:
        """True if the branch has the code ``code``."""
        return self.code == code


def read_supermarket(console: Console, exists: Callable[[str], bool]) -> Supermarket:
    """Ask for a new branch whose name ``exists`` does not report as taken."""
    console.write("Enter supermarket branch name:\n ")
    name = console.read_line()
    while exists(name):
        console.write("The name already exists, Try again: ")
        name = console.read_line()
    console.write("Enter supermarket branch address:\n ")
    address = read_address(console)
    console.write(f"Enter supermarket code ({SUPERMARKET_CODE_DIGITS} numbers):\n ")
    code = read_code(console, SUPERMARKET_CODE_DIGITS)
    return Supermarket(name, address, code)