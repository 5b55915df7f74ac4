"""FastAPI endpoint for the bin packer."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import ValidationError

from cuboid_packer.errors import NoPlacementError
from cuboid_packer.io.schemas import PackRequestSchema
from cuboid_packer.packing.multi_container import BinPacker
from cuboid_packer.plan import build_plan
from cuboid_packer.settings import configure_logging, verify_option

logger = logging.getLogger(__name__)
configure_logging()

app = FastAPI(
    title="Cuboid Packer API",
    description="3D bin packing service",
)


@app.post("/pack")
async def pack(request: dict[str, Any]) -> dict[str, Any]:
    """
    Pack boxes and return the plan.

    Input (request body):
        {
            "bin": { "width": 1000, "height": 1000, "depth": 1000, "max_weight": 0 },
            "boxes": [
                { "id": "A", "width": 500, "height": 500, "depth": 500, "weight": 10, "quantity": 2 }
            ]
        }

    Returns:
        Plan with summary and per-bin placements
    """
    try:
        parameters = PackRequestSchema.model_validate(request).to_parameters()
    except (ValidationError, ValueError) as e:
        raise HTTPException(status_code=422, detail=str(e))

    try:
        result = BinPacker(verify=verify_option()).pack(parameters)
    except NoPlacementError as e:
        logger.warning(f"/pack could not place boxes: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"ERROR in /pack endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    plan = build_plan(parameters, result)
    summary = plan["summary"]
    logger.info(
        f"packed_boxes={summary['packed_boxes']}, bins={summary['bin_count']}, "
        f"average_volume_rate={summary['average_volume_rate']:.4f}"
    )
    return plan


@app.get("/health")
async def health() -> dict[str, Any]:
    """Health check endpoint."""
    return {"ok": True}
