import io

import pytest

from sparmanager.console import Console
from sparmanager.dates import Date
from sparmanager.product import Product, ProductType, read_product, read_product_type


def make_console(text):
    return Console(io.StringIO(text), io.StringIO())


def make_product(**overrides):
    values = dict(
        name="Milk",
        code="123456",
        type=ProductType.FOOD,
        manufacture_date=Date(20, 5, 2024),
        expiration_date=Date(20, 7, 2024),
    )
    values.update(overrides)
    return Product(**values)


def test_type_labels():
    console = make_console("0\n")
    assert read_product_type(console) is ProductType.FOOD
    assert console.stdout.getvalue() == (
        "Enter product type\n"
        "Enter 0 for food\n"
        "Enter 1 for cleaning\n"
        "Enter 2 for general\n"
    )


def test_str_format():
    product = make_product(type=ProductType.CLEANING)
    assert str(product) == "Name: Milk, Code: 123456, Type: cleaning "


def test_new_product_has_no_branches_or_supplier():
    product = make_product()
    assert product.supermarkets == []
    assert product.supplier == ""


def test_matches_name_ignores_case():
    product = make_product()
    assert product.matches_name("mILK")
    assert not product.matches_name("Milks")


def test_matches_code():
    product = make_product()
    assert product.matches_code("123456")
    assert not product.matches_code("-1")


def test_add_and_query_supermarket():
    product = make_product()
    product.add_supermarket("KS")
    assert product.is_sold_in("ks")
    assert not product.is_sold_in("David super")


def test_remove_supermarket():
    product = make_product()
    product.add_supermarket("KS")
    product.add_supermarket("Super Duper")
    product.remove_supermarket("ks")
    assert product.supermarkets == ["Super Duper"]
    assert not product.is_sold_in("KS")


def test_remove_missing_supermarket_raises():
    product = make_product()
    with pytest.raises(ValueError):
        product.remove_supermarket("KS")


def test_read_product_type_retries_until_valid():
    console = make_console("7\nabc\n-1\n1\n")
    assert read_product_type(console) is ProductType.CLEANING
    output = console.stdout.getvalue()
    assert output.startswith("Enter product type\n")
    assert output.count("Enter 0 for food\n") == 4


def test_read_product_full_dialogue():
    console = make_console(
        "Bread\n12a\n1234567\n654321\n2\n"
        "01^^06^^2024\n01^^08^^2024\n"
    )
    product = read_product(console)
    assert product.name == "Bread"
    assert product.code == "654321"
    assert product.type is ProductType.GENERAL
    assert product.manufacture_date == Date(1, 6, 2024)
    assert product.expiration_date == Date(1, 8, 2024)
    assert product.supermarkets == []
    output = console.stdout.getvalue()
    assert output.count("Please re-enter: ") == 2


def test_read_product_retries_bad_date():
    console = make_console(
        "Soap\n111111\n1\n31^^04^^2024\n30^^04^^2024\n15^^02^^2025\n"
    )
    product = read_product(console)
    assert product.manufacture_date == Date(30, 4, 2024)
    assert product.expiration_date == Date(15, 2, 2025)
    assert "Enter the date again: " in console.stdout.getvalue()


def test_read_product_runs_out_of_input():
    console = make_console("Soap\n")
    with pytest.raises(EOFError):
        read_product(console)