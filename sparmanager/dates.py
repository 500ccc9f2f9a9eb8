"""Dates entered as dd^^mm^^yyyy and checked for validity."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .console import Console

FIRST_YEAR = 2024
DATE_FORMAT = "dd^^mm^^yyyy"

_DIGIT_POSITIONS = frozenset({0, 1, 4, 5, 8, 9, 10, 11})
_SEPARATOR_POSITIONS = frozenset({2, 3, 6, 7})
_FORMAT_MESSAGE = "The date you entered isn't of a good format!"


class Month(IntEnum):
    JAN = 1
    FEB = 2
    MAR = 3
    APR = 4
    MAY = 5
    JUN = 6
    JUL = 7
    AUG = 8
    SEP = 9
    OCT = 10
    NOV = 11
    DEC = 12


_DAYS_IN_MONTH = {
    Month.JAN: 31,
    Month.FEB: 29,
    Month.MAR: 31,
    Month.APR: 30,
    Month.MAY: 31,
    Month.JUN: 30,
    Month.JUL: 31,
    Month.AUG: 31,
    Month.SEP: 30,
    Month.OCT: 31,
    Month.NOV: 30,
    Month.DEC: 31,
}


class DateError(ValueError):
    """The text or the values do not make a valid date."""


@dataclass
class Date:
    day: int
    month: int
    year: int

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"


def validate_format(text: str) -> None:
    """Raise DateError unless each character fits the dd^^mm^^yyyy layout."""
    for index, ch in enumerate(text):
        if index in _DIGIT_POSITIONS:
            if ch not in "0123456789":
                raise DateError(f"(1){_FORMAT_MESSAGE}")
        elif index in _SEPARATOR_POSITIONS:
            if ch != "^":
                raise DateError(f"(2){_FORMAT_MESSAGE}")
        else:
            raise DateError(f"(3){_FORMAT_MESSAGE}")


def validate_date(date: Date) -> Date:
    """Check the year, month and day ranges; return the date if valid."""
    if date.year < FIRST_YEAR:
        raise DateError("The value entered for year isn't right!")
    try:
        month = Month(date.month)
    except ValueError:
        raise DateError("The value entered for month isn't right!") from None
    if not 1 <= date.day <= _DAYS_IN_MONTH[month]:
        raise DateError("The value entered for day isn't right for this month!")
    return date


def parse_date(text: str) -> Date:
    """Parse and validate a date written as dd^^mm^^yyyy."""
    validate_format(text)
    fields = [int(token) for token in text.split("^") if token]
    day, month, year = (fields + [0, 0, 0])[:3]
    return validate_date(Date(day, month, year))


def read_date(console: Console) -> Date:
    """Read dates from the console until a valid one is entered."""
    while True:
        try:
            return parse_date(console.read_line())
        except DateError as error:
            console.write(f"{error}\nEnter the date again: ")