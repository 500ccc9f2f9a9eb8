"""Products sold in branches and supplied by suppliers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .console import Console, equals_ignore_case, is_product_code
from .dates import DATE_FORMAT, Date, read_date


class ProductType(IntEnum):
    FOOD = 0
    CLEANING = 1
    GENERAL = 2

    @property
    def label(self) -> str:
        """The lower-case title shown to the user."""
        return _TYPE_LABELS[self]


_TYPE_LABELS = {
    ProductType.FOOD: "food",
    ProductType.CLEANING: "cleaning",
    ProductType.GENERAL: "general",
}


@dataclass
class Product:
    """A product with its dates, its supplier and the branches that sell it."""

    name: str
    code: str
    type: ProductType
    manufacture_date: Date
    expiration_date: Date
    supplier: str = ""
    supermarkets: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return f"Name: {self.name}, Code: {self.code}, Type: {self.type.label} "

    def matches_name(self, name: str) -> bool:
        """True if the product's name equals ``name`` ignoring case."""
        return equals_ignore_case(self.name, name)

    def matches_code(self, code: str) -> bool:
        """True if the product's code equals ``code`` ignoring case."""
        return equals_ignore_case(self.code, code)

    def add_supermarket(self, name: str) -> None:
        """Record that the product is sold in the branch ``name``."""
        self.supermarkets.append(name)

    def remove_supermarket(self, name: str) -> None:
        """Forget every record of the product being sold in ``name``."""
        if not self.is_sold_in(name):
            raise ValueError("Product is not in supermarket")
        self.supermarkets = [
            branch for branch in self.supermarkets if not equals_ignore_case(branch, name)
        ]

    def is_sold_in(self, name: str) -> bool:
        """True if the branch ``name`` sells the product."""
        return any(equals_ignore_case(branch, name) for branch in self.supermarkets)


def read_product_type(console: Console) -> ProductType:
    """Ask for a product type until a valid number is entered."""
    console.write("Enter product type\n")
    while True:
        for product_type in ProductType:
            console.write(f"Enter {product_type.value} for {product_type.label}\n")
        value = console.read_int()
        if value is not None and 0 <= value < len(ProductType):
            return ProductType(value)


def read_product(console: Console) -> Product:
    """Ask the user for all the details of a new product."""
    console.write("Please enter product name: ")
    name = console.read_line()
    console.write("Please enter product code: ")
    code = console.read_line()
    while not is_product_code(code):
        console.write("Value entered doesn't match requirments!\nPlease re-enter: ")
        code = console.read_line()
    product_type = read_product_type(console)
    console.write("Set manufacture date\n")
    console.write(f"Enter the date in the format {DATE_FORMAT}: ")
    manufactured = read_date(console)
    console.write("Set expiration date:\n")
    console.write(f"Enter the date in the format {DATE_FORMAT}: ")
    expires = read_date(console)
    return Product(name, code, product_type, manufactured, expires)