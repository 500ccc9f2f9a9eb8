"""The list of suppliers and the catalog file they are loaded from."""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import TextIO

from .console import Console
from .dates import Date
from .product import Product, ProductType
from .supplier import Supplier, read_supplier

_INT = re.compile(r"\s*([+-]?\d+)")
_WORD = re.compile(r"\s*(\S+)")


class SupplierManager:
    """Suppliers in the order they were added."""

    def __init__(self):
        self._suppliers: list[Supplier] = []

    def add(self, supplier: Supplier) -> None:
        """Append a supplier."""
        self._suppliers.append(supplier)

    def remove(self, supplier: Supplier) -> None:
        """Remove a matching supplier, moving the last one into its place."""
        for index, stored in enumerate(self._suppliers):
            if stored.same_as(supplier):
                last = self._suppliers.pop()
                if index < len(self._suppliers):
                    self._suppliers[index] = last
                return
        raise LookupError(f"no such supplier: {supplier.name}")

    def find(self, name: str = "", code: int = -1) -> Supplier | None:
        """The first supplier with this name (ignoring case) or this code."""
        for supplier in self._suppliers:
            if supplier.matches_name(name) or supplier.matches_code(code):
                return supplier
        return None

    def update(self, supplier: Supplier, console: Console) -> Supplier:
        """Replace a matching supplier with details entered by the user."""
        for index, stored in enumerate(self._suppliers):
            if supplier.same_as(stored):
                replacement = read_supplier(
                    console, lambda name: self.find(name) is not None
                )
                self._suppliers[index] = replacement
                return replacement
        raise LookupError(f"no such supplier: {supplier.name}")

    def __iter__(self) -> Iterator[Supplier]:
        return iter(list(self._suppliers))

    def __len__(self) -> int:
        return len(self._suppliers)


class _Scanner:
    """Reads lines, words and integers from catalog text."""

    def __init__(self, text: str):
        self._text = text
        self._pos = 0

    def skip_line(self) -> None:
        end = self._text.find("\n", self._pos)
        self._pos = len(self._text) if end == -1 else end + 1

    def line(self) -> str | None:
        if self._pos >= len(self._text):
            return None
        end = self._text.find("\n", self._pos)
        if end == -1:
            result, self._pos = self._text[self._pos:], len(self._text)
        else:
            result, self._pos = self._text[self._pos:end], end + 1
        return result.rstrip("\r")

    def integer(self) -> int | None:
        match = _INT.match(self._text, self._pos)
        if not match:
            return None
        self._pos = match.end()
        return int(match.group(1))

    def word(self) -> str | None:
        match = _WORD.match(self._text, self._pos)
        if not match:
            return None
        self._pos = match.end()
        return match.group(1)

    def exhausted(self) -> bool:
        return not self._text[self._pos:].strip()


def _read_product(scanner: _Scanner) -> Product | None:
    scanner.skip_line()
    name = scanner.line()
    if name is None:
        return None
    code = scanner.word()
    if code is None:
        return None
    type_number = scanner.integer()
    if type_number is None:
        return None
    return Product(
        name,
        code,
        ProductType(type_number),
        Date(20, 5, 2024),
        Date(20, 7, 2024),
    )


def load_catalog(stream: TextIO) -> tuple[SupplierManager, list[Product]]:
    """Read suppliers and the products each supplies.

    The first line is a header. Each supplier record is a name line, its
    code, and a product count followed by that many products, each a name
    line and a line holding the product code and type number.
    """
    scanner = _Scanner(stream.read())
    suppliers = SupplierManager()
    products: list[Product] = []
    while True:
        scanner.skip_line()
        if scanner.exhausted():
            break
        name = scanner.line()
        code = scanner.integer()
        if name is None or code is None:
            raise ValueError("incomplete supplier record in catalog")
        supplier = Supplier(name, code)
        suppliers.add(supplier)
        count = scanner.integer()
        for _ in range(count or 0):
            product = _read_product(scanner)
            if product is not None:
                product.supplier = supplier.name
                products.append(product)
    return suppliers, products


def read_suppliers(console: Console) -> SupplierManager:
    """Ask the user for suppliers until they choose to stop."""
    console.write("Please initialize suppliers that work with Spar company\n")
    manager = SupplierManager()
    while True:
        manager.add(read_supplier(console, lambda name: manager.find(name) is not None))
        console.write("Do you want to initialize more? 1-yes, 0-no: ")
        if console.read_int() == 0:
            return manager