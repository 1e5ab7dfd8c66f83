"""Inventories: amounts per good, with partial ordering and keyed arithmetic."""

from __future__ import annotations

from typing import Dict, Optional, TypeVar

from hexcolony.good import Good

T = TypeVar("T")


def _compare(a: object, b: object) -> Optional[int]:
    if a < b:  # type: ignore[operator]
        return -1
    if a > b:  # type: ignore[operator]
        return 1
    if a == b:
        return 0
    return None


class Inventory(Dict[Good, T]):
    """A mapping from goods to amounts.

    ``+=`` and ``-=`` only touch goods this inventory already holds. Ordering
    is partial: an inventory is smaller than another when every amount is at
    most the other's and its goods are a subset of the other's.
    """

    def copy(self) -> Inventory[T]:
        """A shallow copy of the same type."""
        return type(self)(self)

    def partial_cmp(self, other: Inventory[T]) -> Optional[int]:
        """-1, 0 or 1 when the inventories are comparable, otherwise None."""
        if all(key in other for key in self):
            acc = 0
            for good, value in self.items():
                ordering = _compare(value, other[good])
                if ordering is None:
                    return None
                if acc == 0:
                    acc = ordering
                elif ordering != 0 and acc != ordering:
                    return None
            if acc == 0:
                return 0 if len(self) == len(other) else -1
            if acc == 1:
                return 1 if len(self) == len(other) else None
            return acc
        if all(key in self for key in other):
            acc = 0
            for good, value in other.items():
                ordering = _compare(value, self[good])
                if ordering is None:
                    return None
                if acc == 0:
                    acc = ordering
                elif ordering != 0 and acc != ordering:
                    return None
            if acc == 0:
                return 0 if len(self) == len(other) else 1
            if acc == -1:
                return -1 if len(self) == len(other) else None
            return acc
        return None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Inventory):
            return NotImplemented
        return self.partial_cmp(other) == -1

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Inventory):
            return NotImplemented
        return self.partial_cmp(other) in (-1, 0)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Inventory):
            return NotImplemented
        return self.partial_cmp(other) == 1

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Inventory):
            return NotImplemented
        return self.partial_cmp(other) in (1, 0)

    def __iadd__(self, other: Dict[Good, T]) -> Inventory[T]:
        for good, amount in other.items():
            if good in self:
                self[good] += amount  # type: ignore[operator]
        return self

    def __isub__(self, other: Dict[Good, T]) -> Inventory[T]:
        for good, amount in other.items():
            if good in self:
                self[good] -= amount  # type: ignore[operator]
        return self


class Costs(Inventory[int]):
    """What it takes to construct something."""


class Consumes(Inventory[int]):
    """The goods a tile takes in and how many of each it holds at most."""