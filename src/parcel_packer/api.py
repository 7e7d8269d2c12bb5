"""FastAPI endpoints for the parcel packer."""

from __future__ import annotations

import logging
from typing import Any, List, Union

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from parcel_packer.config import configure_logging, settings
from parcel_packer.destinations import DEFAULT_CONSTRAINTS, DESTINATION_CONSTRAINTS
from parcel_packer.io.schemas import PackRequestSchema
from parcel_packer.metrics import calculate_cost
from parcel_packer.models import Item, PackingSolution
from parcel_packer.packing.first_fit import pack_items

logger = logging.getLogger(__name__)

# PACKER_LOG_LEVEL / PACKER_DEBUG apply when served (e.g. under uvicorn)
configure_logging()


# FastAPI app instance (exactly one)
app = FastAPI(
    title="Parcel Packer API",
    description="Destination-aware 3D box packing service",
)

# Only the local UI shell talks to this service
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=settings.cors_origin_regex,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    max_age=3600,
)


@app.post("/pack", response_model=PackingSolution)
def pack(payload: Union[List[Item], PackRequestSchema]) -> PackingSolution:
    """
    Pack items into boxes.

    Input (request body), either a list of items:
        [
            { "id": "A", "destination": "USA", "length": 30, "width": 30,
              "height": 30, "weight": 5, "position": null, "box_index": null }
        ]
    or item lines with quantities:
        { "items": [ { "sku": "A", "destination": "UK", "dims_cm": {"L": 30, "W": 20, "H": 10},
                       "weight_kg": 2, "quantity": 4 } ] }

    Returns:
        PackingSolution with boxes, total_volume and unpacked_items
    """
    try:
        items = payload.to_items() if isinstance(payload, PackRequestSchema) else payload
        solution = pack_items(items)

        # Log one concise line
        logger.info(
            f"items={len(items)}, boxes={len(solution.boxes)}, "
            f"unpacked={len(solution.unpacked_items)}, total_volume={solution.total_volume:.1f}"
        )
        return solution

    except HTTPException:
        raise
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"ERROR in /pack endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/cost")
async def cost(solution: PackingSolution) -> dict[str, float]:
    """Cost of a packing solution (its total box volume)."""
    return {"cost": calculate_cost(solution)}


@app.get("/destinations")
async def destinations() -> dict[str, Any]:
    """Destination policies in effect, plus the fallback for unknown names."""
    return {
        "destinations": {name: c.model_dump() for name, c in DESTINATION_CONSTRAINTS.items()},
        "default": DEFAULT_CONSTRAINTS.model_dump(),
    }


@app.get("/health")
async def health() -> dict[str, Any]:
    """Health check endpoint."""
    return {"ok": True}
