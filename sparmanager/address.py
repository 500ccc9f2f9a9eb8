"""Branch addresses: country, city, street and number joined with '#'."""

from __future__ import annotations

from .console import Console

FIELD_NAMES = ("Country", "City", "Street", "Number")

_WHITESPACE = " \t\n\v\f\r"


def capitalize_words(text: str) -> str:
    """Upper-case the first character and each character after whitespace,
    turning each whitespace character into '&'."""
    result = []
    upper_next = True
    for ch in text:
        if ch in _WHITESPACE:
            result.append("&")
            upper_next = True
        else:
            result.append(ch.upper() if upper_next else ch)
            upper_next = False
    return "".join(result)


def build_address(country: str, city: str, street: str, number: str) -> str:
    """Trim and capitalize each part and join the parts with '#'."""
    parts = (country, city, street, number)
    return "#".join(capitalize_words(part.strip(_WHITESPACE)) for part in parts)


def read_address(console: Console) -> str:
    """Ask the user for each address field and return the joined address."""
    console.write("To initialize an adress, enter following parameters:\n")
    values = []
    for field in FIELD_NAMES:
        console.write(f"{field}: ")
        values.append(console.read_line())
    return build_address(*values)