"""GET /api/curvature/{value} — regime lookup for slider labels."""

from __future__ import annotations

from fastapi import APIRouter

from app.engine.curvature import classify, describe
from app.models.responses import CurvatureResponse

router = APIRouter()


@router.get("/curvature/{value}", response_model=CurvatureResponse)
async def curvature(value: float) -> CurvatureResponse:
    return CurvatureResponse(curvature=value, regime=classify(value), description=describe(value))
