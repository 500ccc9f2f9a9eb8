import io

import pytest

from sparmanager.console import Console
from sparmanager.supermarket import Supermarket
from sparmanager.supermarket_manager import (
    SortOrder,
    SupermarketManager,
    default_supermarkets,
)


def _console(text):
    return Console(io.StringIO(text), io.StringIO())


def _filled(order=SortOrder.CODE):
    manager = SupermarketManager(order)
    for branch in default_supermarkets():
        manager.add(branch)
    return manager


def test_default_supermarkets_values():
    branches = default_supermarkets()
    assert [b.name for b in branches] == ["Super Duper", "David super", "KS"]
    assert [b.code for b in branches] == [12345, 23456, 34567]
    assert branches[0].address == "Israel#Tel-Aviv#Alenbi#105"


def test_add_keeps_code_order():
    manager = SupermarketManager()
    manager.add(Supermarket("B", "x", 30000))
    manager.add(Supermarket("A", "x", 10000))
    manager.add(Supermarket("C", "x", 20000))
    codes = [b.code for b in manager]
    assert codes == sorted(codes)
    assert len(manager) == 3


def test_equal_keys_keep_insertion_order():
    manager = SupermarketManager()
    manager.add(Supermarket("first", "x", 11111))
    manager.add(Supermarket("second", "x", 11111))
    assert [b.name for b in manager] == ["first", "second"]


def test_lexi_order():
    manager = _filled(SortOrder.LEXI)
    names = [b.name for b in manager]
    assert names == sorted(names)
    assert names[0] == "David super"


def test_resort_switches_order_and_keeps_all():
    manager = _filled(SortOrder.CODE)
    manager.resort(SortOrder.LEXI)
    assert manager.order is SortOrder.LEXI
    names = [b.name for b in manager]
    assert names == sorted(names)
    manager.resort(SortOrder.CODE)
    codes = [b.code for b in manager]
    assert codes == sorted(codes)
    assert len(manager) == 3


def test_find_by_name_ignoring_case_and_by_code():
    manager = _filled()
    assert manager.find("ks").code == 34567
    assert manager.find("", 23456).name == "David super"
    assert manager.find("nowhere") is None
    assert manager.find("nowhere", 99999) is None


def test_remove_exact_match():
    manager = _filled()
    manager.remove(Supermarket("KS", "Israel#Ashdod#hertzl#53", 34567))
    assert manager.find("KS") is None
    assert len(manager) == 2


def test_remove_requires_all_fields():
    manager = _filled()
    with pytest.raises(LookupError):
        manager.remove(Supermarket("KS", "Elsewhere", 34567))
    assert len(manager) == 3


def test_update_reads_new_details():
    manager = _filled()
    target = manager.find("KS")
    console = _console("KS\nNew Branch\nisrael\nhaifa\nherzl\n7\n54321\n")
    replacement = manager.update(target, console)
    assert replacement.code == 54321
    assert manager.find("new branch") is replacement
    assert manager.find("KS") is None
    assert "The name already exists" in console.stdout.getvalue()


def test_update_missing_raises():
    manager = _filled()
    with pytest.raises(LookupError):
        manager.update(Supermarket("Nope", "x", 1), _console(""))