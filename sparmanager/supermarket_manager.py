"""The ordered collection of supermarket branches."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterator
from enum import IntEnum

from .console import Console
from .supermarket import Supermarket, read_supermarket


class SortOrder(IntEnum):
    """How branches are kept ordered."""

    CODE = 0
    LEXI = 1


class SupermarketManager:
    """Keeps branches sorted by code or by name as they are added."""

    def __init__(self, order: SortOrder = SortOrder.CODE):
        self.order = SortOrder(order)
        self._branches: list[Supermarket] = []

    def _key(self, supermarket: Supermarket) -> int | str:
        if self.order is SortOrder.CODE:
            return supermarket.code
        return supermarket.name

    def add(self, supermarket: Supermarket) -> None:
        """Insert a branch before the first branch with a greater key."""
        index = bisect_right(self._branches, self._key(supermarket), key=self._key)
        self._branches.insert(index, supermarket)

    def remove(self, supermarket: Supermarket) -> None:
        """Remove the branch whose name, address and code all match."""
        try:
            self._branches.remove(supermarket)
        except ValueError:
            raise LookupError(f"no such supermarket: {supermarket.name}") from None

    def find(self, name: str = "", code: int = -1) -> Supermarket | None:
        """The first branch with this name (ignoring case) or this code."""
        for branch in self._branches:
            if branch.matches_name(name) or branch.matches_code(code):
                return branch
        return None

    def resort(self, order: SortOrder) -> None:
        """Switch to another order and rearrange the branches."""
        self.order = SortOrder(order)
        branches, self._branches = self._branches, []
        for branch in branches:
            self.add(branch)

    def update(self, supermarket: Supermarket, console: Console) -> Supermarket:
        """Replace a stored branch with new details entered by the user."""
        for index, branch in enumerate(self._branches):
            if branch == supermarket:
                replacement = read_supermarket(
                    console, lambda name: self.find(name) is not None
                )
                self._branches[index] = replacement
                return replacement
        raise LookupError(f"no such supermarket: {supermarket.name}")

    def __iter__(self) -> Iterator[Supermarket]:
        return iter(list(self._branches))

    def __len__(self) -> int:
        return len(self._branches)


def default_supermarkets() -> list[Supermarket]:
    """The branches the system starts with."""
    return [
        Supermarket("Super Duper", "Israel#Tel-Aviv#Alenbi#105", 12345),
        Supermarket("David super", "Israel#Lod#Dakar#3", 23456),
        Supermarket("KS", "Israel#Ashdod#hertzl#53", 34567),
    ]