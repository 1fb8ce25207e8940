"""Thalia curvature engine: stitch schedules and node layouts from a single K."""

from app.engine.curvature import CurvatureRegime, classify, describe
from app.engine.errors import InvalidParameter
from app.engine.layout import Node, generate_layout, growth
from app.engine.pattern import StitchPattern, generate_pattern

__all__ = [
    "CurvatureRegime",
    "classify",
    "describe",
    "InvalidParameter",
    "Node",
    "generate_layout",
    "growth",
    "StitchPattern",
    "generate_pattern",
]
