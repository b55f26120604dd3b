"""Exceptions raised by the packing strategies and the Bin container."""

from __future__ import annotations


class PackingError(Exception):
    """Base class for every error raised by binpacker."""


class SizingError(PackingError):
    """An item is larger than the bin capacity, so no bin could ever hold it."""

    def __init__(self, item_size: int, capacity: int):
        super().__init__(item_size, capacity)
        self.item_size = item_size
        self.capacity = capacity

    def __str__(self) -> str:
        return f"Object too big! {self.item_size} can't fit in {self.capacity}"


class BinOverflowError(PackingError, ValueError):
    """An item was added to a bin without enough remaining space."""

    def __init__(self, item_size: int, remaining_space: int):
        super().__init__(item_size, remaining_space)
        self.item_size = item_size
        self.remaining_space = remaining_space

    def __str__(self) -> str:
        return f"item of size {self.item_size} overflows bin with {self.remaining_space} remaining"
