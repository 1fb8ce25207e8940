"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from app.api import curvature, health, layout, pattern

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(curvature.router)
api_router.include_router(pattern.router)
api_router.include_router(layout.router)
