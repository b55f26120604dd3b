"""FastAPI endpoint for the bin packer."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from binpacker.config import load_settings
from binpacker.errors import SizingError
from binpacker.io.schemas import PackingRequestSchema, count_items, expand_items
from binpacker.metrics import build_result
from binpacker.models import PackingResult
from binpacker.packing import STRATEGIES, get_strategy

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Bin Packer API",
    description="One-dimensional bin packing service",
)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Health check endpoint."""
    return {
        "ok": True,
        "strategies": sorted(STRATEGIES.keys()),
    }


@app.post("/pack", response_model=PackingResult)
async def pack(request: PackingRequestSchema):
    """
    Pack items into bins of one capacity.

    Input (request body):
        {
            "capacity": 100,
            "strategy": "mffd",
            "items": [
                { "id": "a", "size": 60 },
                { "sku": "B", "size": 20, "quantity": 4 }
            ]
        }

    Returns:
        PackingResult with per-bin contents and fill metrics
    """
    settings = load_settings()
    strategy = (request.strategy or settings.default_strategy).strip().lower()

    try:
        pack_fn = get_strategy(strategy)
    except ValueError as e:
        return JSONResponse(
            status_code=422,
            content={"error": "UNKNOWN_STRATEGY", "detail": str(e)},
        )

    requested = count_items(request)
    if requested > settings.max_items:
        raise HTTPException(
            status_code=413,
            detail=f"{requested} items exceeds the limit of {settings.max_items}",
        )

    try:
        parcels = expand_items(request)
        bins = pack_fn(parcels, request.capacity)
        result = build_result(strategy, request.capacity, bins)

        logger.info(
            f"strategy={strategy}, items={result.item_count}, "
            f"bins={result.bin_count}, fill_rate={result.fill_rate:.3f}"
        )
        return result

    except HTTPException:
        raise
    except SizingError as e:
        return JSONResponse(
            status_code=422,
            content={"error": "ITEM_TOO_BIG", "detail": str(e), "item_size": e.item_size, "capacity": e.capacity},
        )
    except Exception as e:
        logger.error(f"ERROR in /pack endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
