import io

import pytest

from sparmanager.console import Console
from sparmanager.dates import Date
from sparmanager.product import ProductType
from sparmanager.supplier import Supplier
from sparmanager.supplier_manager import SupplierManager, load_catalog, read_suppliers

SAMPLE = (
    "Suppliers\n"
    "Tnuva\n"
    "123456\n"
    "2\n"
    "Milk\n"
    "111111 0\n"
    "Soap\n"
    "222222 1\n"
    "Osem\n"
    "654321\n"
    "0\n"
)


def _console(text):
    return Console(io.StringIO(text), io.StringIO())


def _manager(*suppliers):
    manager = SupplierManager()
    for supplier in suppliers:
        manager.add(supplier)
    return manager


def test_add_and_find():
    manager = _manager(Supplier("Tnuva", 123456), Supplier("Osem", 654321))
    assert len(manager) == 2
    assert manager.find("tnuva").code == 123456
    assert manager.find("", 654321).name == "Osem"
    assert manager.find("nobody") is None


def test_remove_moves_last_into_place():
    a, b, c = Supplier("A", 111111), Supplier("B", 222222), Supplier("C", 333333)
    manager = _manager(a, b, c)
    manager.remove(Supplier("a", 111111))
    assert [s.name for s in manager] == ["C", "B"]


def test_remove_last_element():
    manager = _manager(Supplier("A", 111111), Supplier("B", 222222))
    manager.remove(Supplier("B", 222222))
    assert [s.name for s in manager] == ["A"]


def test_remove_missing_raises():
    manager = _manager(Supplier("A", 111111))
    with pytest.raises(LookupError):
        manager.remove(Supplier("A", 999999))
    assert len(manager) == 1


def test_update_replaces_supplier():
    manager = _manager(Supplier("A", 111111), Supplier("B", 222222))
    console = _console("B\nFresh\n123\n444444\n")
    replacement = manager.update(Supplier("a", 111111), console)
    assert replacement == Supplier("Fresh", 444444)
    assert [s.name for s in manager] == ["Fresh", "B"]
    assert "The name already exists" in console.stdout.getvalue()


def test_update_missing_raises():
    with pytest.raises(LookupError):
        SupplierManager().update(Supplier("X", 1), _console(""))


def test_load_catalog_suppliers_and_products():
    suppliers, products = load_catalog(io.StringIO(SAMPLE))
    assert [(s.name, s.code) for s in suppliers] == [("Tnuva", 123456), ("Osem", 654321)]
    assert [p.name for p in products] == ["Milk", "Soap"]
    assert [p.code for p in products] == ["111111", "222222"]
    assert [p.type for p in products] == [ProductType.FOOD, ProductType.CLEANING]
    assert all(p.supplier == "Tnuva" for p in products)
    assert all(p.supermarkets == [] for p in products)


def test_load_catalog_fixed_dates():
    _, products = load_catalog(io.StringIO(SAMPLE))
    assert products[0].manufacture_date == Date(20, 5, 2024)
    assert products[0].expiration_date == Date(20, 7, 2024)


def test_load_catalog_without_trailing_newline():
    suppliers, products = load_catalog(io.StringIO(SAMPLE.rstrip("\n")))
    assert len(suppliers) == 2
    assert len(products) == 2


def test_load_catalog_header_only_is_empty():
    suppliers, products = load_catalog(io.StringIO("Suppliers\n"))
    assert len(suppliers) == 0
    assert products == []


def test_load_catalog_bad_type_raises():
    text = "Suppliers\nTnuva\n123456\n1\nMilk\n111111 9\n"
    with pytest.raises(ValueError):
        load_catalog(io.StringIO(text))


def test_load_catalog_missing_code_raises():
    with pytest.raises(ValueError):
        load_catalog(io.StringIO("Suppliers\nTnuva\n"))


def test_read_suppliers_interactive():
    console = _console("Acme\n111111\n1\nacme\nBeta\n12\n222222\n0\n")
    manager = read_suppliers(console)
    assert [(s.name, s.code) for s in manager] == [("Acme", 111111), ("Beta", 222222)]
    output = console.stdout.getvalue()
    assert "The name already exists" in output
    assert "The code must consist of 6 digits!" in output