"""Stitch schedules: curvature to a per-row stitch count.

Row i (0-indexed) works ``base + direction * round(i * |K| * STITCH_RATE_SCALE)``
stitches, floored at MIN_ROW_STITCHES:

    K < 0  hyperbolic  base 8, rows grow
    K = 0  euclidean   base 8, every row identical
    K > 0  spherical   base 6, rows shrink toward the floor

The base depends only on the sign of K, never on the row count.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from app.engine.constants import (
    FLAT_BASE_STITCHES,
    MIN_ROW_STITCHES,
    SPHERICAL_BASE_STITCHES,
    STITCH_RATE_SCALE,
)
from app.engine.curvature import CurvatureRegime, classify, describe
from app.engine.params import check_count, check_curvature

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StitchPattern:
    """Ordered stitch counts, one per row. ``len(stitch_counts) == row_count``."""

    curvature: float
    row_count: int
    stitch_counts: tuple[int, ...]

    @property
    def regime(self) -> CurvatureRegime:
        return classify(self.curvature)

    @property
    def description(self) -> str:
        return describe(self.curvature)

    @property
    def total_stitches(self) -> int:
        return sum(self.stitch_counts)

    @property
    def density(self) -> float:
        """Worked stitches over the rectangle ``row_count x widest row``. 1.0 when flat."""
        return self.total_stitches / (self.row_count * max(self.stitch_counts))


def base_stitches(curvature: float) -> int:
    """Seed ring size: tighter for spherical work than for flat/hyperbolic."""
    return SPHERICAL_BASE_STITCHES if check_curvature(curvature) > 0 else FLAT_BASE_STITCHES


def stitch_rate(curvature: float) -> float:
    """Magnitude of per-row change; exactly 0.0 when flat."""
    return abs(check_curvature(curvature)) * STITCH_RATE_SCALE


def generate_pattern(curvature: float, row_count: int) -> StitchPattern:
    """Build the stitch schedule for ``row_count`` rows at ``curvature``."""
    k = check_curvature(curvature)
    rows = check_count("row_count", row_count)

    base = base_stitches(k)
    rate = stitch_rate(k)
    direction = -1 if k > 0 else 1

    counts = tuple(
        max(MIN_ROW_STITCHES, base + direction * round(i * rate)) for i in range(rows)
    )
    logger.debug("Pattern K=%.3f rows=%d -> %s", k, rows, counts)
    return StitchPattern(curvature=k, row_count=rows, stitch_counts=counts)
