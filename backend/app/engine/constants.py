"""Fixed constants of the curvature engine.

Only the qualitative behaviour is binding (flat at zero curvature,
accelerating growth when hyperbolic, bounded growth when spherical,
continuity across zero). The values below are the chosen realisation and
are held fixed so generated patterns stay reproducible between releases.
"""

import math

# Curvature slider domain.
CURVATURE_MIN = -1.0
CURVATURE_MAX = 1.0

# -- Stitch schedule -----------------------------------------------------

# Spherical work starts from a tight magic ring that closes up quickly.
SPHERICAL_BASE_STITCHES = 6
# Flat and hyperbolic work is seeded wider so increases have room.
FLAT_BASE_STITCHES = 8
# Stitches gained (hyperbolic) or lost (spherical) per row at |K| = 1.
STITCH_RATE_SCALE = 4.0
# Smallest round that can still be worked around.
MIN_ROW_STITCHES = 3

# -- Node layout ---------------------------------------------------------

# Radius of the innermost ring at zero curvature.
BASE_RADIUS = 60.0
# Maps |K| onto the geodesic scale a = GEODESIC_SCALE * sqrt(|K|).
# At |K| = 1 a spherical layout is bounded by BASE_RADIUS / 0.35.
GEODESIC_SCALE = 0.35
# Per-ring twist. The golden angle keeps rings out of radial alignment
# for any node count.
RING_TWIST = math.pi * (3.0 - math.sqrt(5.0))

# Node size hint: shrinks by SIZE_STEP per ring, never below SIZE_MIN.
SIZE_MAX = 9.0
SIZE_STEP = 1.2
SIZE_MIN = 4.0
