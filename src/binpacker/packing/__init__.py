"""Packing strategies."""

from __future__ import annotations

from typing import Callable

from binpacker.packing.first_fit import first_fit_into, pack_first_fit_decreasing
from binpacker.packing.modified_ffd import pack_modified_ffd
from binpacker.packing.next_fit import pack_online_next_fit
from binpacker.packing.placement import largest_that_fits

STRATEGIES: dict[str, Callable] = {
    "next_fit": pack_online_next_fit,
    "ffd": pack_first_fit_decreasing,
    "mffd": pack_modified_ffd,
}


def get_strategy(name: str) -> Callable:
    key = name.strip().lower()
    if key not in STRATEGIES:
        raise ValueError(f"Unknown strategy '{name}'. Valid: {sorted(STRATEGIES.keys())}")
    return STRATEGIES[key]


__all__ = [
    "STRATEGIES",
    "first_fit_into",
    "get_strategy",
    "largest_that_fits",
    "pack_first_fit_decreasing",
    "pack_modified_ffd",
    "pack_online_next_fit",
]
