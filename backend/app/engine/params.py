"""Argument validation shared by the pattern and layout generators."""

from __future__ import annotations

import math
import numbers

from app.engine.constants import CURVATURE_MAX, CURVATURE_MIN
from app.engine.errors import InvalidParameter


def check_curvature(curvature: float) -> float:
    """Return ``curvature`` as a float, or raise if it is not in [-1, 1]."""
    if isinstance(curvature, bool) or not isinstance(curvature, numbers.Real):
        raise InvalidParameter("curvature", curvature, "must be a real number")
    value = float(curvature)
    if math.isnan(value):
        raise InvalidParameter("curvature", curvature, "must not be NaN")
    if not CURVATURE_MIN <= value <= CURVATURE_MAX:
        raise InvalidParameter(
            "curvature", curvature, f"must be within [{CURVATURE_MIN}, {CURVATURE_MAX}]"
        )
    return value


def check_count(name: str, value: int) -> int:
    """Return ``value`` as an int, or raise if it is not an integer >= 1."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameter(name, value, "must be an integer")
    if value < 1:
        raise InvalidParameter(name, value, "must be at least 1")
    return int(value)


def check_index(name: str, value: int) -> int:
    """Return ``value`` as an int, or raise if it is not an integer >= 0."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameter(name, value, "must be an integer")
    if value < 0:
        raise InvalidParameter(name, value, "must be non-negative")
    return int(value)
