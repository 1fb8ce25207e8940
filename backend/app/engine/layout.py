"""Node layout: concentric rings of nodes shaped by curvature.

Ring r sits at ``BASE_RADIUS * growth(r, K)``. With t = r + 1 and
a = GEODESIC_SCALE * sqrt(|K|):

    K < 0  sinh(a t) / a   convex, outpaces the flat rings
    K = 0  t               evenly spaced
    K > 0  tanh(a t) / a   concave, bounded above by 1 / a

The hyperbolic branch is the geodesic circumference law. The spherical
branch uses tanh rather than sin so radii stay positive and monotone
for any ring count.

Both curved branches tend to t as a -> 0, so the layout does not jump
when the slider crosses zero.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from app.engine.constants import (
    BASE_RADIUS,
    GEODESIC_SCALE,
    RING_TWIST,
    SIZE_MAX,
    SIZE_MIN,
    SIZE_STEP,
)
from app.engine.errors import InvalidParameter
from app.engine.params import check_count, check_curvature, check_index

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Node:
    """A positioned node. ``index = ring * nodes_per_ring + position``."""

    index: int
    ring: int
    position: int
    x: float
    y: float
    z: float
    size: float


def _geodesic_scale(curvature: float) -> float:
    return GEODESIC_SCALE * math.sqrt(abs(curvature))


def growth(ring: int, curvature: float) -> float:
    """Radius multiplier for ``ring``. ``growth(0, 0) == 1``."""
    ring = check_index("ring", ring)
    k = check_curvature(curvature)
    t = ring + 1.0
    if k == 0:
        return t
    a = _geodesic_scale(k)
    if k < 0:
        try:
            return math.sinh(a * t) / a
        except OverflowError as exc:
            raise InvalidParameter("ring", ring, f"radius overflows at curvature {k}") from exc
    return math.tanh(a * t) / a


def ring_radius(ring: int, curvature: float) -> float:
    """Radius of ``ring``; raises InvalidParameter once it no longer fits in a float."""
    radius = BASE_RADIUS * growth(ring, curvature)
    if not math.isfinite(radius):
        raise InvalidParameter("ring", ring, f"radius overflows at curvature {curvature}")
    return radius


def depth(ring: int, curvature: float) -> float:
    """Out-of-plane offset for 3D views: lag (or lead) of a ring behind flat spacing.

    Zero when flat, positive (a dome) when spherical, negative when hyperbolic.
    """
    return BASE_RADIUS * ((ring + 1.0) - growth(ring, curvature))


def rotational_offset(ring: int) -> float:
    """Angular twist of ``ring`` in radians; depends on the ring index only."""
    return ring * RING_TWIST


def size_hint(ring: int) -> float:
    """Visual emphasis: inner rings draw larger."""
    return max(SIZE_MIN, SIZE_MAX - ring * SIZE_STEP)


def generate_layout(curvature: float, nodes_per_ring: int, ring_count: int) -> list[Node]:
    """Lay out ``ring_count * nodes_per_ring`` nodes, ring-major."""
    k = check_curvature(curvature)
    n = check_count("nodes_per_ring", nodes_per_ring)
    m = check_count("ring_count", ring_count)

    # Radii grow with ring index, so the outermost ring bounds every coordinate.
    try:
        ring_radius(m - 1, k)
    except InvalidParameter as exc:
        raise InvalidParameter(
            "ring_count", ring_count, f"outermost ring radius is not finite at curvature {k}"
        ) from exc

    base_angles = 2.0 * np.pi * np.arange(n) / n
    nodes: list[Node] = []
    for r in range(m):
        radius = ring_radius(r, k)
        z = depth(r, k)
        size = size_hint(r)
        angles = base_angles + rotational_offset(r)
        xs = radius * np.cos(angles)
        ys = radius * np.sin(angles)
        for i in range(n):
            nodes.append(
                Node(
                    index=r * n + i,
                    ring=r,
                    position=i,
                    x=float(xs[i]),
                    y=float(ys[i]),
                    z=z,
                    size=size,
                )
            )

    logger.debug("Layout K=%.3f: %d rings x %d nodes", k, m, n)
    return nodes
