from __future__ import annotations

from typing import Iterable

from binpacker.bins import Bin
from binpacker.models import BinReport, Packable, PackingResult


def compute_metrics(bins: list[Bin], capacity: int) -> tuple[int, int, float]:
    used_space = sum(b.used_space for b in bins)
    total_space = len(bins) * capacity
    fill_rate = 0.0 if total_space == 0 else used_space / total_space
    return used_space, total_space, fill_rate


def lower_bound(items: Iterable[Packable], capacity: int) -> int:
    """Fewest bins any packing could use: ceil(total size / capacity)."""
    total = sum(item.size for item in items)
    return -(-total // capacity)


def item_id(item: Packable) -> str:
    return str(getattr(item, "id", item))


def bin_report(bin: Bin) -> BinReport:
    return BinReport(
        item_ids=[item_id(item) for item in bin.items],
        sizes=[item.size for item in bin.items],
        remaining_space=bin.remaining_space,
        used_space=bin.used_space,
    )


def build_result(strategy: str, capacity: int, bins: list[Bin]) -> PackingResult:
    """Summarise packed bins into the PackingResult returned by the CLI and API."""
    packed = [item for b in bins for item in b.items]
    used_space, total_space, fill_rate = compute_metrics(bins, capacity)

    return PackingResult(
        strategy=strategy,
        capacity=capacity,
        bins=[bin_report(b) for b in bins],
        bin_count=len(bins),
        item_count=len(packed),
        used_space=used_space,
        total_space=total_space,
        fill_rate=fill_rate,
        lower_bound=lower_bound(packed, capacity),
    )
