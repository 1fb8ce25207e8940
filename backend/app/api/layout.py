"""POST /api/layout — curvature-shaped node rings for the visualisation."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from app.config import Settings
from app.dependencies import get_settings
from app.engine.curvature import classify
from app.engine.layout import generate_layout
from app.models.requests import LayoutRequest
from app.models.responses import LayoutResponse, NodeModel

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/layout", response_model=LayoutResponse)
async def layout(req: LayoutRequest, settings: Settings = Depends(get_settings)) -> LayoutResponse:
    if req.nodes_per_ring * req.ring_count > settings.max_nodes:
        raise HTTPException(status_code=413, detail=f"layout exceeds limit of {settings.max_nodes} nodes")

    start = time.perf_counter()
    nodes = generate_layout(req.curvature, req.nodes_per_ring, req.ring_count)
    elapsed = (time.perf_counter() - start) * 1000
    logger.debug("Layout of %d nodes in %.2fms", len(nodes), elapsed)

    return LayoutResponse(
        curvature=req.curvature,
        regime=classify(req.curvature),
        nodes_per_ring=req.nodes_per_ring,
        ring_count=req.ring_count,
        nodes=[
            NodeModel(
                index=n.index,
                ring=n.ring,
                position=n.position,
                x=n.x,
                y=n.y,
                z=n.z,
                size=n.size,
            )
            for n in nodes
        ],
        processing_time_ms=round(elapsed, 3),
    )
