"""Placement primitive shared by the decreasing strategies."""

from __future__ import annotations

from bisect import bisect_left
from typing import Optional, Sequence

from binpacker.bins import Bin
from binpacker.models import Packable


def largest_that_fits(items: Sequence[Packable], bin: Bin) -> Optional[int]:
    """
    Return the index of the largest item that fits in `bin`, or None.

    `items` must be sorted by descending size. On such a list the fit test is
    False for a prefix and True for the rest, so the first True position is
    the earliest (hence largest) item that fits.
    """
    if not items or not bin.fits(items[-1]):
        return None

    # False < True, so the keys are ascending and bisect applies
    return bisect_left(items, True, key=bin.fits)
