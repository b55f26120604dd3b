"""One-dimensional bin packing: next-fit, first-fit-decreasing and modified FFD."""

from binpacker.bins import Bin
from binpacker.errors import BinOverflowError, PackingError, SizingError
from binpacker.models import Packable, Parcel, PackingResult
from binpacker.packing import (
    STRATEGIES,
    get_strategy,
    largest_that_fits,
    pack_first_fit_decreasing,
    pack_modified_ffd,
    pack_online_next_fit,
)

__all__ = [
    "Bin",
    "BinOverflowError",
    "Packable",
    "PackingError",
    "PackingResult",
    "Parcel",
    "STRATEGIES",
    "SizingError",
    "get_strategy",
    "largest_that_fits",
    "pack_first_fit_decreasing",
    "pack_modified_ffd",
    "pack_online_next_fit",
]
