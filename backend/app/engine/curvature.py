"""Curvature regimes and their display labels."""

from __future__ import annotations

import enum

from app.engine.params import check_curvature


class CurvatureRegime(str, enum.Enum):
    HYPERBOLIC = "hyperbolic"
    EUCLIDEAN = "euclidean"
    SPHERICAL = "spherical"


# (exclusive upper bound, label), scanned in order. Zero is handled apart.
_NEGATIVE_BANDS = [
    (-0.7, "Strong Hyperbolic (Ruffles/Corals)"),
    (-0.3, "Moderate Hyperbolic (Waves)"),
    (0.0, "Mild Hyperbolic (Gentle Expansion)"),
]
_POSITIVE_BANDS = [
    (0.3, "Mild Spherical (Gentle Contraction)"),
    (0.7, "Moderate Spherical (Domes)"),
]
_FLAT_LABEL = "Euclidean (Flat Surface)"
_STRONG_SPHERICAL_LABEL = "Strong Spherical (Hats/Balls)"


def classify(curvature: float) -> CurvatureRegime:
    """Regime selected by the sign of the curvature."""
    k = check_curvature(curvature)
    if k < 0:
        return CurvatureRegime.HYPERBOLIC
    if k > 0:
        return CurvatureRegime.SPHERICAL
    return CurvatureRegime.EUCLIDEAN


def describe(curvature: float) -> str:
    """Human-readable strength label, e.g. ``"Moderate Spherical (Domes)"``."""
    k = check_curvature(curvature)
    if k == 0:
        return _FLAT_LABEL
    bands = _NEGATIVE_BANDS if k < 0 else _POSITIVE_BANDS
    for bound, label in bands:
        if k < bound:
            return label
    return _STRONG_SPHERICAL_LABEL
