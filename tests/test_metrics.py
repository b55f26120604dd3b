from __future__ import annotations

from binpacker.bins import Bin
from binpacker.metrics import build_result, compute_metrics, lower_bound
from binpacker.models import Parcel
from binpacker.packing import pack_first_fit_decreasing


def test_compute_metrics() -> None:
    a = Bin.from_item(Parcel(id="a", size=60), 100)
    b = Bin.from_item(Parcel(id="b", size=20), 100)

    used, total, fill_rate = compute_metrics([a, b], 100)

    assert used == 80
    assert total == 200
    assert fill_rate == 0.4


def test_compute_metrics_no_bins() -> None:
    assert compute_metrics([], 100) == (0, 0, 0.0)


def test_lower_bound() -> None:
    assert lower_bound([], 10) == 0
    assert lower_bound([Parcel(id="a", size=10)], 10) == 1
    assert lower_bound([Parcel(id="a", size=10), Parcel(id="b", size=1)], 10) == 2


def test_build_result() -> None:
    items = [Parcel(id=f"P{i}", size=s) for i, s in enumerate([8, 5, 7, 6, 2, 4, 1])]
    bins = pack_first_fit_decreasing(items, 10)

    result = build_result("ffd", 10, bins)

    assert result.strategy == "ffd"
    assert result.bin_count == 4
    assert result.item_count == 7
    assert result.used_space == 33
    assert result.total_space == 40
    assert result.lower_bound == 4
    assert result.bins[0].item_ids == ["P0", "P4"]
    assert result.bins[0].sizes == [8, 2]
    assert result.bins[-1].remaining_space == 5


def test_build_result_items_without_id() -> None:
    class Job:
        def __init__(self, size):
            self.size = size

        def __str__(self):
            return f"job-{self.size}"

    result = build_result("ffd", 10, pack_first_fit_decreasing([Job(3), Job(4)], 10))

    assert result.bins[0].item_ids == ["job-4", "job-3"]
