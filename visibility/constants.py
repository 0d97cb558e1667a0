"""Named sampling constants for visibility ray casting.

Geometric tolerances (DEGENERATE_EPS, PARAM_EPS) live in shared.geometry
and are re-exported here so callers can tune from one place.
"""
from shared.geometry import DEGENERATE_EPS, PARAM_EPS

ANGLE_EPS = 1e-5          # radians; grazing rays either side of each corner
CIRCLE_STEP_DEG = 2.0     # coarse full-circle sampling for the radius boundary
RAYS_PER_UNIT = 0.1       # extra rays per unit of arc length subtended by an occluder
