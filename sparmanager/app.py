"""The interactive branch, supplier and product management menu."""

from __future__ import annotations

import argparse
import re
from collections.abc import Callable, Iterable
from pathlib import Path

from .console import Console, equals_ignore_case, is_product_code, numbered_lines
from .product import Product, ProductType, read_product, read_product_type
from .product_manager import ProductManager, SortKey
from .supermarket import read_supermarket
from .supermarket_manager import SortOrder, SupermarketManager, default_supermarkets
from .supplier_manager import SupplierManager, load_catalog, read_suppliers

DEFAULT_CATALOG = "suppliers.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_MENU = (
    "\t\tMain Menu\n"
    "1 - Add new SPAR branch to system.\n"
    "2 - Find product in supermarket or supplier.\n"
    "3 - Add product to branch or supplier.\n"
    "4 - Show details of a SPAR branch and all products. \n"
    "5 - Show details of all SPAR branches\n"
    "6 - Show all products of a supplier.\n"
    "7 - Show all products sold in SPAR by product type.\n"
    "8 - Show all products supplied by product type.\n"
    "9 - Show all products sold in a SPAR branch.\n"
    "a - Sort SPAR products.\n"
    "b - Search SPAR products.\n"
    "c - Change sorting of SPAR branches.\n"
    "e - Exit program.\n"
    " Please enter an option from the main menu: "
)


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class App:
    """Holds the branches, suppliers and products and runs the menu."""

    def __init__(self, console: Console | None = None, catalog_path: str | Path = DEFAULT_CATALOG):
        self.console = console if console is not None else Console()
        self.catalog_path = Path(catalog_path)
        self.supermarkets = SupermarketManager(SortOrder.CODE)
        self.suppliers = SupplierManager()
        self.products = ProductManager()

    # -- reports -------------------------------------------------------

    def _write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.console.write(f"{line}\n")

    def _print_branches(self) -> None:
        self.console.write("The SPAR supermarket branches:\n")
        self._write_lines(str(branch) for branch in self.supermarkets)

    def _print_suppliers(self) -> None:
        if not len(self.suppliers):
            self.console.write("No suppliers")
            return
        self.console.write("The SPAR suppliers list:\n")
        self._write_lines(numbered_lines(self.suppliers, str))

    def _print_products(self) -> None:
        if not len(self.products):
            self.console.write("No products")
            return
        self.console.write("The products sold in SPAR supermarket branches:\n")
        self._write_lines(numbered_lines(self.products, str))

    def _print_products_in_branch(self, name: str) -> None:
        if self.supermarkets.find(name) is None:
            self.console.write("Supermarket name doesn't exist\n")
            return
        self.console.write(f"The products sold in {name} branch are:\n")
        self._write_lines(self.products.products_in_supermarket(name))

    def _print_branches_of(self, product: Product | None, missing: str) -> None:
        if product is None:
            self.console.write(missing)
            return
        self._write_lines(f"Sold in: {branch}" for branch in product.supermarkets)
        if not product.supermarkets:
            self.console.write("This product isn't sold in any supermarket at the moment.\n")

    def _print_supplier_of(self, product: Product | None) -> None:
        if product is None:
            self.console.write("Product name doesn't exist\n")
            return
        self.console.write(f"Supplier is: {product.supplier}\n")

    def _branch_exists(self, name: str) -> bool:
        return self.supermarkets.find(name) is not None

    # -- start-up ------------------------------------------------------

    def setup(self) -> None:
        """Enter branches, add the standard ones, load suppliers and products."""
        self.console.write("Please initialize supermarket branches into the Spar company\n")
        self.supermarkets = SupermarketManager(SortOrder.CODE)
        while True:
            self.supermarkets.add(read_supermarket(self.console, self._branch_exists))
            self.console.write("Do you want to init more? 1-yes, 0-no: ")
            if not self.console.read_int():
                break
        for branch in default_supermarkets():
            self.supermarkets.add(branch)
        self.products = ProductManager()
        self._load_suppliers()
        self._print_branches()
        self._print_suppliers()
        self._print_products()

    def _load_suppliers(self) -> None:
        try:
            with self.catalog_path.open(encoding="utf-8") as stream:
                suppliers, products = load_catalog(stream)
        except FileNotFoundError:
            self.console.write("File not found\n")
            self.suppliers = read_suppliers(self.console)
            return
        except ValueError:
            self.suppliers = read_suppliers(self.console)
            return
        self.suppliers = suppliers
        for product in products:
            self.products.add(product)
        self.console.write("Suppliers initialized successfully from file!\n\n")

    # -- menu actions --------------------------------------------------

    def add_branch(self) -> None:
        """Add a new branch entered by the user."""
        self.console.write("Please enter new branch details:\n")
        branch = read_supermarket(self.console, self._branch_exists)
        self.console.write("The details you entered:\n")
        self.console.write(f"{branch}\n")
        self.supermarkets.add(branch)
        self.console.write("The branch added successfully!\n")

    def find_product(self) -> None:
        """Show where a product is sold or who supplies it."""
        self._print_products()
        self.console.write("Please enter product details:\n")
        self.console.write("Product name: ")
        name = self.console.read_line()
        self.console.write("Product code: ")
        code = self.console.read_line()
        self.console.write("Where do you want to search? 1-Supermarket , 2-Supplier\n")
        choice = self.console.read_int()
        if choice == 1:
            self.console.write("Finding supermarkets where the product is being sold by name:\n")
            self._print_branches_of(self.products.find(name), "Product name doesn't exist\n")
            self.console.write("Finding supermarkets where the product is being sold by code:\n")
            self._print_branches_of(self.products.find("", code), "Product code doesn't exist\n")
        elif choice == 2:
            self.console.write("Finding supplier of the product by name:\n")
            self._print_supplier_of(self.products.find(name))
            self.console.write("Finding supplier of the product by code:\n")
            self._print_supplier_of(self.products.find("", code))
        else:
            self.console.write("Wrong input!\n Going back to main menu.\n")

    def add_product(self) -> None:
        """Add a new product, or link an existing one to a supplier and branch."""
        self.console.write("Add product to a branch and supplier\n")
        self.console.write("Do you want to init new product or add existing? 1-new 2-existing  ")
        choice = self.console.read_char()
        if choice == "1":
            self._add_new_product()
        elif choice == "2":
            self._add_existing_product()
        else:
            self.console.write("You entered wrong input \n\n")

    def _link_branch(self, product_name: str, branch_name: str) -> None:
        try:
            self.products.add_to_supermarket(product_name, branch_name, self.supermarkets)
        except LookupError as error:
            self.console.write(str(error))

    def _add_new_product(self) -> None:
        product = read_product(self.console)
        self.console.write(f"Product: {product}\n")
        self.products.add(product)
        self.console.write(
            "Added successfuly to the data base!\n Enter the supplier of the product: "
        )
        supplier = self.console.read_line()
        if self.suppliers.find(supplier) is not None:
            product.supplier = supplier
        else:
            self.console.write("Supplier is not in the data base\n")
        while True:
            self.console.write("Enter a supermarket where this product is being sold: ")
            branch = self.console.read_line()
            if self._branch_exists(branch):
                self._link_branch(product.name, branch)
            self.console.write("Do you want to add another supermarket? 1-yes , 0-no")
            if not self.console.read_int():
                break

    def _add_existing_product(self) -> None:
        self._print_products()
        self.console.write("Enter product name: ")
        product = self.products.find(self.console.read_line())
        if product is None:
            return
        self.console.write("Enter supplier name: ")
        supplier = self.console.read_line()
        if self.suppliers.find(supplier) is not None and not equals_ignore_case(
            product.supplier, supplier
        ):
            product.supplier = supplier
            self.console.write("Succsess\n")
        else:
            self.console.write("Somthing went wrong\n")
        self.console.write("Enter super name: ")
        branch = self.console.read_line()
        if self._branch_exists(branch) and not product.is_sold_in(branch):
            self._link_branch(product.name, branch)
            self.console.write("Succsess\n")
        else:
            self.console.write("Somthing went wrong\n")

    def show_branch(self) -> None:
        """Show one branch and the products it sells."""
        self.console.write("Enter Supermarket branch name: ")
        name = self.console.read_line()
        branch = self.supermarkets.find(name)
        if branch is None:
            self.console.write("Supermarket doesn't exist\n")
            return
        self.console.write(f"{branch}\n")
        self._print_products_in_branch(name)

    def show_branches(self) -> None:
        """Show every branch."""
        self._print_branches()

    def show_supplier_products(self) -> None:
        """Show the products of a supplier chosen by name."""
        self._print_suppliers()
        self.console.write("Enter Supplier name: ")
        name = self.console.read_line()
        if self.suppliers.find(name) is None:
            self.console.write("Supplier name doesn't exist\n")
            return
        self.console.write(f"The products supplied by {name} are:\n")
        self._write_lines(self.products.products_of_supplier(name))

    def show_type_in_branches(self) -> None:
        """Show the branches selling products of a chosen type."""
        product_type = read_product_type(self.console)
        self.console.write("Finding supermarkets where this type of product is being sold:\n")
        branches = self.products.supermarkets_by_type(product_type)
        if branches:
            self._write_lines(branches)
        else:
            self.console.write("Not sold in any branch\n")

    def show_type_suppliers(self) -> None:
        """Show the suppliers of products of a chosen type."""
        product_type = read_product_type(self.console)
        self.console.write("Finding suppliers that supply this type of product:\n")
        suppliers = self.products.suppliers_by_type(product_type)
        if suppliers:
            self._write_lines(suppliers)
        else:
            self.console.write("Not sold by any supplier\n")

    def show_branch_products(self) -> None:
        """Show the products of a branch chosen by name or code."""
        self._print_branches()
        self.console.write("Enter the supermarket name or code: ")
        text = self.console.read_line()
        branch = self.supermarkets.find(text, _leading_int(text))
        if branch is None:
            self.console.write("Supermarket doesn't exist\n")
            return
        self._print_products_in_branch(branch.name)

    def _read_sort_key(self) -> SortKey:
        self.console.write("Enter sorting type\n")
        while True:
            for key in SortKey:
                self.console.write(f"Enter {key.value} for {key.label}\n")
            value = self.console.read_int()
            if value is not None and 0 <= value < len(SortKey):
                return SortKey(value)

    def sort_products(self) -> None:
        """Sort the products by a key the user picks."""
        self.console.write(f"Right now the products sorting is: {self.products.sorted_by.label}\n")
        self._print_products()
        self.console.write("Select sorting method:\n")
        key = self._read_sort_key()
        self.products.sort(key)
        self.console.write(f"The products after sorting {key.label}: \n")
        self._print_products()

    def _read_valid_code(self) -> str:
        code = self.console.read_line()
        while not is_product_code(code):
            self.console.write("Value entered doesn't match requirments!\nPlease re-enter: ")
            code = self.console.read_line()
        return code

    def _read_type_choice(self) -> ProductType:
        while True:
            for product_type in ProductType:
                self.console.write(f"Enter {product_type.value} for {product_type.label}\n")
            value = self.console.read_int()
            if value is not None and 0 <= value < len(ProductType):
                return ProductType(value)

    def _report_found(self, product: Product | None) -> None:
        if product is None:
            self.console.write("Product not found\n")
        else:
            self.console.write("The product found:\n")
            self.console.write(f"{product}\n")

    def search_products(self) -> None:
        """Search the sorted products by their current sort key."""
        self._print_products()
        key = self.products.sorted_by
        self.console.write(key.label)
        if key is SortKey.NOT_SORTED:
            self.console.write("The search can't be completed, the array is yet to be sorted!\n")
            self.console.write("Returning to main menu...\n")
            return
        self.console.write("Please enter product details:\n")
        if key is SortKey.BY_NAME:
            self.console.write("Product name: ")
            self._report_found(self.products.search(self.console.read_line()))
        elif key is SortKey.BY_CODE:
            self.console.write("Product code: ")
            self._report_found(self.products.search(self._read_valid_code()))
        else:
            self.console.write("Product type:\n")
            found = self.products.search(self._read_type_choice())
            self._write_lines(str(product) for product in found)

    def resort_branches(self) -> None:
        """Change the order the branches are kept in."""
        self.console.write(
            "Enter the way to sort the branches (0 - by code, 1 - lexicographicaly): "
        )
        choice = self.console.read_int()
        if choice not in (SortOrder.CODE, SortOrder.LEXI):
            self.console.write("Wrong value entered!\n")
            self.console.write("Return to main menu...\n")
            return
        self.supermarkets.resort(SortOrder(choice))
        self.console.write("SPAR branches sorted successfully!\n")
        self.console.write("Return to main menu...\n")

    def run(self) -> None:
        """Show the main menu until the user exits or input ends."""
        actions: dict[str, Callable[[], None]] = {
            "1": self.add_branch,
            "2": self.find_product,
            "3": self.add_product,
            "4": self.show_branch,
            "5": self.show_branches,
            "6": self.show_supplier_products,
            "7": self.show_type_in_branches,
            "8": self.show_type_suppliers,
            "9": self.show_branch_products,
            "a": self.sort_products,
            "b": self.search_products,
            "c": self.resort_branches,
        }
        self.console.write("     SPAR SuperMarket branch manager system\n")
        self.console.write("------------------------------------------\n\n")
        try:
            while True:
                self.console.write(_MENU)
                choice = self.console.read_char()
                if choice == "e":
                    self.console.write("Exitting... Have a nice day!")
                    return
                action = actions.get(choice)
                if action is None:
                    self.console.write("You entered wrong input, Try again. \n\n")
                else:
                    action()
        except EOFError:
            return


def main(argv: list[str] | None = None) -> int:
    """Start the manager with the catalog named on the command line."""
    parser = argparse.ArgumentParser(description="SPAR branch manager")
    parser.add_argument("--catalog", default=DEFAULT_CATALOG, help="supplier catalog file")
    args = parser.parse_args(argv)
    app = App(Console(), args.catalog)
    try:
        app.setup()
    except EOFError:
        return 1
    app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())