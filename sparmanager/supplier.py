"""Suppliers that deliver products to the branches."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .console import Console, equals_ignore_case, read_code

SUPPLIER_CODE_DIGITS = 6


@dataclass
class Supplier:
    name: str
    code: int

    def __str__(self) -> str:
        return f"Name: {self.name}, Code: {self.code}"

    def matches_name(self, name: str) -> bool:
        """True if the supplier's name equals ``name`` ignoring case."""
        return equals_ignore_case(self.name, name)

    def matches_code(self, code: int) -> bool:
        """True if the supplier has the code ``code``."""
        return self.code == code

    def same_as(self, other: Supplier) -> bool:
        """Same code and the same name ignoring case."""
        return self.code == other.code and equals_ignore_case(self.name, other.name)


def read_supplier(console: Console, exists: Callable[[str], bool]) -> Supplier:
    """Ask for a new supplier whose name ``exists`` does not report as taken."""
    console.write("Enter supplier name:\n ")
    name = console.read_line()
    while exists(name):
        console.write("The name already exists, Try again ")
        name = console.read_line()
    console.write(f"Enter supplier code ({SUPPLIER_CODE_DIGITS} numbers):\n ")
    code = read_code(console, SUPPLIER_CODE_DIGITS)
    return Supplier(name, code)