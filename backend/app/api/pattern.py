"""POST /api/pattern — stitch schedules and compiled instructions."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.config import Settings
from app.content.instructions import compile_pattern
from app.dependencies import get_settings
from app.engine.pattern import StitchPattern, generate_pattern
from app.models.requests import PatternRequest
from app.models.responses import InstructionsResponse, PatternResponse, RowInstructionModel

router = APIRouter(prefix="/pattern")


def _guard_rows(rows: int, settings: Settings) -> None:
    if rows > settings.max_rows:
        raise HTTPException(status_code=413, detail=f"rows exceeds limit of {settings.max_rows}")


def _to_response(pattern: StitchPattern) -> PatternResponse:
    return PatternResponse(
        curvature=pattern.curvature,
        regime=pattern.regime,
        description=pattern.description,
        rows=pattern.row_count,
        stitch_counts=list(pattern.stitch_counts),
        total_stitches=pattern.total_stitches,
        density=round(pattern.density, 4),
    )


@router.post("", response_model=PatternResponse)
async def pattern(
    req: PatternRequest, settings: Settings = Depends(get_settings)
) -> PatternResponse:
    _guard_rows(req.rows, settings)
    return _to_response(generate_pattern(req.curvature, req.rows))


@router.post("/instructions", response_model=InstructionsResponse)
async def instructions(
    req: PatternRequest, settings: Settings = Depends(get_settings)
) -> InstructionsResponse:
    _guard_rows(req.rows, settings)
    compiled = compile_pattern(req.curvature, req.rows)
    return InstructionsResponse(
        pattern=_to_response(compiled.pattern),
        skill_level=compiled.skill_level,
        materials=compiled.materials,
        abbreviations=compiled.abbreviations,
        instructions=[
            RowInstructionModel(
                round=row.round,
                stitch_count=row.stitch_count,
                instruction=row.instruction,
                notes=row.notes,
            )
            for row in compiled.instructions
        ],
        notes=compiled.notes,
    )
