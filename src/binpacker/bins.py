from __future__ import annotations

from typing import Generic, TypeVar

from binpacker.errors import BinOverflowError
from binpacker.models import Packable

T = TypeVar("T", bound=Packable)


class Bin(Generic[T]):
    """
    Fixed-capacity container with a running remaining-space counter.

    Items are only ever appended. Invariant:
      remaining_space + sum(item.size for item in items) == capacity
    """

    def __init__(self, capacity: int):
        self.capacity = capacity
        self.remaining_space = capacity
        self.items: list[T] = []

    @classmethod
    def from_item(cls, item: T, capacity: int) -> "Bin[T]":
        """Create a bin already holding one seed item."""
        seeded = cls(capacity)
        seeded.add(item)
        return seeded

    def add(self, item: T) -> None:
        if not self.fits(item):
            raise BinOverflowError(item.size, self.remaining_space)
        self.remaining_space -= item.size
        self.items.append(item)

    def fits(self, item: T) -> bool:
        return item.size <= self.remaining_space

    def item_count(self) -> int:
        return len(self.items)

    @property
    def used_space(self) -> int:
        return self.capacity - self.remaining_space

    def weights_summary(self) -> str:
        return ", ".join(str(item.size) for item in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return f"Bin(remaining_space={self.remaining_space}, sizes=[{self.weights_summary()}])"
