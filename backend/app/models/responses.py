"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.engine.curvature import CurvatureRegime


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class CurvatureResponse(BaseModel):
    curvature: float
    regime: CurvatureRegime
    description: str


class PatternResponse(BaseModel):
    curvature: float
    regime: CurvatureRegime
    description: str
    rows: int
    stitch_counts: list[int]
    total_stitches: int
    density: float


class RowInstructionModel(BaseModel):
    round: int
    stitch_count: int
    instruction: str
    notes: list[str] = Field(default_factory=list)


class InstructionsResponse(BaseModel):
    pattern: PatternResponse
    skill_level: str
    materials: list[str] = Field(default_factory=list)
    abbreviations: dict[str, str] = Field(default_factory=dict)
    instructions: list[RowInstructionModel] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)


class NodeModel(BaseModel):
    index: int
    ring: int
    position: int
    x: float
    y: float
    z: float
    size: float


class LayoutResponse(BaseModel):
    curvature: float
    regime: CurvatureRegime
    nodes_per_ring: int
    ring_count: int
    nodes: list[NodeModel] = Field(default_factory=list)
    processing_time_ms: float = 0.0
