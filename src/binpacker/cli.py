from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from binpacker.config import load_settings
from binpacker.errors import SizingError
from binpacker.io.schemas import PackingRequestSchema, expand_items
from binpacker.metrics import build_result
from binpacker.models import Parcel
from binpacker.packing import STRATEGIES, get_strategy

logger = logging.getLogger(__name__)


def load_input(path: Path) -> tuple[PackingRequestSchema, list[Parcel]]:
    """
    Read a request JSON file.

    Items may be given one by one ({"id": "a", "size": 12}) or as a SKU batch
    ({"sku": "A", "size": 12, "quantity": 40}), which expands to ids A_0000..A_0039.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    request = PackingRequestSchema(**data)
    parcels = expand_items(request)
    logger.debug("loaded %d parcels from %s (capacity=%d)", len(parcels), path, request.capacity)
    return request, parcels


def write_plan(plan: dict, path: str = "plan.json") -> None:
    """Dump a packing plan as pretty-printed JSON, replacing any earlier plan at `path`."""
    output_path = Path(path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    logger.debug("writing plan to %s", output_path)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(plan, f, indent=2, sort_keys=True)


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    parser = argparse.ArgumentParser(description="Bin packer CLI")
    parser.add_argument("--input", required=True, help="Input request JSON file")
    parser.add_argument("--output", required=True, help="Output plan JSON file")
    parser.add_argument(
        "--strategy",
        choices=sorted(STRATEGIES.keys()),
        default=None,
        help="next_fit = single pass, ffd = first-fit-decreasing, mffd = modified ffd "
             "(default: request 'strategy', then BINPACKER_DEFAULT_STRATEGY)",
    )
    parser.add_argument(
        "--full",
        action="store_true",
        help="Include per-bin contents in the written plan",
    )

    args = parser.parse_args(argv)

    try:
        request, parcels = load_input(Path(args.input))
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        print(f"error: cannot read {args.input}: {e}", file=sys.stderr)
        return 2

    strategy = (args.strategy or request.strategy or settings.default_strategy).strip().lower()
    try:
        pack_fn = get_strategy(strategy)
        bins = pack_fn(parcels, request.capacity)
    except (SizingError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    result = build_result(strategy, request.capacity, bins)
    print(
        f"Packed {result.item_count} items into {result.bin_count} bins "
        f"(lower bound {result.lower_bound}), Fill={result.fill_rate:.3f}"
    )

    plan = result.model_dump(exclude=None if args.full else {"bins"})
    write_plan(plan, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
