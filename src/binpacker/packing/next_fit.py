from __future__ import annotations

import logging
from typing import Iterable, TypeVar

from binpacker.bins import Bin
from binpacker.errors import SizingError
from binpacker.models import Packable

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Packable)


def pack_online_next_fit(items: Iterable[T], capacity: int) -> list[Bin[T]]:
    """
    Online next-fit packer: one pass, input order, no sorting.
    - Keeps a single open bin and closes it as soon as an item does not fit
    - O(n), at the cost of potentially many more bins than the other strategies
    - The open bin is always emitted, so empty input yields one empty bin

    Raises SizingError on the first item larger than `capacity`.
    """
    current_bin: Bin[T] = Bin(capacity)
    closed_bins: list[Bin[T]] = []
    count = 0

    for item in items:
        if item.size > current_bin.remaining_space:
            if item.size > capacity:
                raise SizingError(item.size, capacity)

            closed_bins.append(current_bin)
            current_bin = Bin(capacity)

        current_bin.add(item)
        count += 1

    closed_bins.append(current_bin)

    logger.debug("next_fit packed %d items into %d bins (capacity=%d)", count, len(closed_bins), capacity)
    return closed_bins
