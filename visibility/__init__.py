"""Visibility polygons by ray casting against occluder segments."""

from .constants import DEGENERATE_EPS, PARAM_EPS, ANGLE_EPS, CIRCLE_STEP_DEG, RAYS_PER_UNIT
from .raycast import (
    compute_visibility, cast_ray, sample_angles,
    boundary_segments, wall_segments,
)
