"""API request models.

Bounds are deliberately not declared here: out-of-range values reach the
engine, which rejects them with InvalidParameter.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class PatternRequest(BaseModel):
    curvature: float = Field(..., description="Curvature K in [-1, 1]")
    rows: int = Field(default=12, description="Number of rows to generate")


class LayoutRequest(BaseModel):
    curvature: float = Field(..., description="Curvature K in [-1, 1]")
    nodes_per_ring: int = Field(default=12, description="Nodes placed on every ring")
    ring_count: int = Field(default=5, description="Number of concentric rings")
