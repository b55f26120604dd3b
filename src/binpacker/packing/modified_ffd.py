"""
Modified first-fit-decreasing (MFFD), after Johnson and Garey (1985).

Items are split into size classes relative to the capacity C:

    large   C/2 <  size
    medium  C/3 <  size <= C/2
    small   C/6 <  size <= C/3
    tiny           size <= C/6

Every large item opens its own bin. Those bins are then topped up with one
medium each where possible, the ones that got no medium try to take two
smalls, and whatever is left goes through plain first-fit over the same bins.

The scans over the class lists make this O(n^2) in the worst case rather
than the O(n log n) it is often quoted at.
"""

from __future__ import annotations

import logging
from typing import Iterable, TypeVar

from binpacker.bins import Bin
from binpacker.errors import SizingError
from binpacker.models import Packable
from binpacker.packing.first_fit import first_fit_into, sort_decreasing
from binpacker.packing.placement import largest_that_fits

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Packable)


def classify(items: Iterable[T], capacity: int) -> tuple[list[Bin[T]], list[T], list[T], list[T]]:
    """
    Split items (largest first) into large-seeded bins and medium/small/tiny lists.

    Each output list keeps the input order, so it stays sorted descending.
    """
    bins: list[Bin[T]] = []
    medium: list[T] = []
    small: list[T] = []
    tiny: list[T] = []

    for item in items:
        size = item.size
        if size > capacity:
            raise SizingError(size, capacity)
        if size > capacity // 2:
            bins.append(Bin.from_item(item, capacity))
        elif size > capacity // 3:
            medium.append(item)
        elif size > capacity // 6:
            small.append(item)
        else:
            tiny.append(item)

    return bins, medium, small, tiny


def _insert_mediums(bins: list[Bin[T]], medium: list[T]) -> None:
    for bin in bins:
        index = largest_that_fits(medium, bin)
        if index is not None:
            bin.add(medium.pop(index))


def _insert_smalls(bins: list[Bin[T]], small: list[T]) -> None:
    for bin in reversed(bins):
        # only bins that missed a medium, and only while a pair is left
        if bin.item_count() != 1 or len(small) < 2:
            continue

        if bin.remaining_space < small[-1].size + small[-2].size:
            continue

        bin.add(small.pop())
        index = largest_that_fits(small, bin)
        if index is not None:
            bin.add(small.pop(index))


def pack_modified_ffd(items: Iterable[T], capacity: int) -> list[Bin[T]]:
    """
    Modified first-fit-decreasing packer.

    Returns the large-seeded bins first (largest seed first), followed by any
    bins opened for the residue. Raises SizingError on an item larger than
    `capacity`.
    """
    items_sorted = sort_decreasing(items)

    bins, medium, small, tiny = classify(items_sorted, capacity)
    logger.debug(
        "mffd classes: large=%d medium=%d small=%d tiny=%d",
        len(bins), len(medium), len(small), len(tiny),
    )

    _insert_mediums(bins, medium)
    _insert_smalls(bins, small)

    # not re-sorted: each class list is already descending on its own
    residue = medium + small + tiny
    bins = first_fit_into(residue, bins, capacity)

    logger.debug("mffd packed %d items into %d bins (capacity=%d)", len(items_sorted), len(bins), capacity)
    return bins
