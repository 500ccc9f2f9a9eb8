"""The catalog of products with sorting, searching and reports."""

from __future__ import annotations

import re
from bisect import bisect_left
from collections.abc import Iterator
from enum import IntEnum

from .console import equals_ignore_case, is_product_code
from .product import Product, ProductType
from .supermarket_manager import SupermarketManager

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _code_number(code: str) -> int:
    """The integer a code starts with, or 0 when it starts with none."""
    match = _LEADING_INT.match(code)
    return int(match.group(1)) if match else 0


class SortKey(IntEnum):
    """How the product list is currently ordered."""

    NOT_SORTED = 0
    BY_NAME = 1
    BY_CODE = 2
    BY_TYPE = 3

    @property
    def label(self) -> str:
        """The title shown to the user."""
        return _SORT_LABELS[self]


_SORT_LABELS = {
    SortKey.NOT_SORTED: "Not Sorted",
    SortKey.BY_NAME: "By Name",
    SortKey.BY_CODE: "By Code",
    SortKey.BY_TYPE: "By Type",
}

_SORT_KEYS = {
    SortKey.BY_NAME: lambda product: product.name,
    SortKey.BY_CODE: lambda product: _code_number(product.code),
    SortKey.BY_TYPE: lambda product: product.type.label,
}


class ProductManager:
    """All products known to the company, in insertion or sorted order."""

    def __init__(self):
        self._products: list[Product] = []
        self.sorted_by = SortKey.NOT_SORTED

    def add(self, product: Product) -> None:
        """Append a product."""
        self._products.append(product)

    def find(self, name: str = "", code: str = "-1") -> Product | None:
        """The first product with this name or this code, ignoring case."""
        for product in self._products:
            if product.matches_name(name) or product.matches_code(code):
                return product
        return None

    def sort(self, key: SortKey) -> None:
        """Sort by name, code or type label; NOT_SORTED leaves things as they are."""
        key = SortKey(key)
        if key is SortKey.NOT_SORTED:
            return
        self._products.sort(key=_SORT_KEYS[key])
        self.sorted_by = key

    def search(self, value: str | int | ProductType) -> Product | list[Product] | None:
        """Binary search by the current sort key.

        When sorted by name or code, returns the matching product or None.
        When sorted by type, returns every product of that type. Raises
        ValueError when the list is not sorted or the code is malformed.
        """
        if self.sorted_by is SortKey.NOT_SORTED:
            raise ValueError("The search can't be completed, the array is yet to be sorted!")
        if self.sorted_by is SortKey.BY_TYPE:
            product_type = ProductType(value)
            return [product for product in self._products if product.type == product_type]
        if self.sorted_by is SortKey.BY_CODE:
            if not is_product_code(str(value)):
                raise ValueError("Value entered doesn't match requirments!")
            target: int | str = _code_number(str(value))
        else:
            target = str(value)
        key = _SORT_KEYS[self.sorted_by]
        index = bisect_left(self._products, target, key=key)
        if index < len(self._products) and key(self._products[index]) == target:
            return self._products[index]
        return None

    def add_to_supermarket(
        self, product_name: str, supermarket_name: str, supermarkets: SupermarketManager
    ) -> None:
        """Record that an existing branch sells an existing product."""
        product = self.find(product_name)
        if product is None:
            raise LookupError("Product doesn't exist")
        if supermarkets.find(supermarket_name) is None:
            raise LookupError("Supermarket doesn't exist")
        product.add_supermarket(supermarket_name)

    def suppliers_by_type(self, product_type: ProductType) -> list[str]:
        """Distinct suppliers (ignoring case) of products of this type."""
        found: list[str] = []
        for product in self._products:
            if product.type == product_type and not any(
                equals_ignore_case(name, product.supplier) for name in found
            ):
                found.append(product.supplier)
        return found

    def supermarkets_by_type(self, product_type: ProductType) -> list[str]:
        """Distinct branches (ignoring case) selling products of this type."""
        found: list[str] = []
        for product in self._products:
            if product.type != product_type:
                continue
            for branch in product.supermarkets:
                if not any(equals_ignore_case(name, branch) for name in found):
                    found.append(branch)
        return found

    def products_in_supermarket(self, name: str) -> list[str]:
        """Names of the products sold in the branch ``name``."""
        result = []
        for product in self._products:
            match = self.find(product.name)
            if match is not None and match.is_sold_in(name):
                result.append(product.name)
        return result

    def products_of_supplier(self, name: str) -> list[str]:
        """Names of the products supplied by ``name``."""
        result = []
        for product in self._products:
            match = self.find(product.name)
            if match is not None and equals_ignore_case(match.supplier, name):
                result.append(product.name)
        return result

    def product_type_of(self, code: str, name: str) -> ProductType:
        """The type of the product called ``name``.

        Raises LookupError when no product has that name, or when its code
        equals ``code``.
        """
        product = self.find(name)
        if product is None:
            raise LookupError("Product name doesn't exist")
        if product.matches_code(code):
            raise LookupError("Product code doesn't exist")
        return product.type

    def product_code_of(self, name: str) -> int:
        """The numeric code of the product called ``name``."""
        product = self.find(name)
        if product is None:
            raise LookupError("Product name doesn't exist")
        return _code_number(product.code)

    def __iter__(self) -> Iterator[Product]:
        return iter(list(self._products))

    def __len__(self) -> int:
        return len(self._products)