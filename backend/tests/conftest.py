"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Curvature values spanning every regime and every description band,
# including both domain endpoints.
CURVATURE_SWEEP = [-1.0, -0.85, -0.5, -0.2, -1e-9, 0.0, 1e-9, 0.2, 0.5, 0.85, 1.0]

HYPERBOLIC_K = -0.5
SPHERICAL_K = 0.5

# Out-of-domain inputs that must be rejected, never clamped
BAD_CURVATURES = [1.0001, -2.0, 5.0, float("nan"), float("inf"), float("-inf")]
BAD_COUNTS = [0, -1, -12]


@pytest.fixture
def sweep() -> list[float]:
    return list(CURVATURE_SWEEP)

