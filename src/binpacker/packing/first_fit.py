# src/binpacker/packing/first_fit.py

from __future__ import annotations

import logging
from typing import Iterable, Optional, TypeVar

from binpacker.bins import Bin
from binpacker.errors import SizingError
from binpacker.models import Packable

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Packable)


def sort_decreasing(items: Iterable[T]) -> list[T]:
    """Copy of `items`, largest first. Ties keep input order."""
    return sorted(items, key=lambda item: item.size, reverse=True)


def first_fit_into(items: Iterable[T], bins: list[Bin[T]], capacity: int) -> list[Bin[T]]:
    """
    Place each item into the first bin (creation order) it fits, else open a new one.

    `bins` may already hold partially filled bins and is extended in place.
    Items are expected largest first; the order is not re-checked here.
    """
    for item in items:
        target: Optional[Bin[T]] = None
        for bin in bins:
            if bin.fits(item):
                target = bin
                break

        if target is not None:
            target.add(item)
            continue

        if item.size > capacity:
            raise SizingError(item.size, capacity)
        bins.append(Bin.from_item(item, capacity))

    return bins


def pack_first_fit_decreasing(items: Iterable[T], capacity: int) -> list[Bin[T]]:
    """
    First-fit-decreasing packer.
    - Sorts a copy of the items largest first
    - Puts each into the first open bin with room, opening bins as needed
    - O(n * b) for b bins

    Raises SizingError if the largest item exceeds `capacity`.
    """
    items_sorted = sort_decreasing(items)
    bins = first_fit_into(items_sorted, [], capacity)

    logger.debug("ffd packed %d items into %d bins (capacity=%d)", len(items_sorted), len(bins), capacity)
    return bins
