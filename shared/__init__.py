"""Shared types, geometry, editor records, and SVG helpers."""

from .types import Point, Segment, Path, MapBounds, VisibilityPolygon, Ring, Polygon, PolygonSet
from .geometry import (
    GeometryError, DEGENERATE_EPS, PARAM_EPS,
    polar_angle, dist, point_at, in_rect,
    ray_segment_isect, poly_area, path_edges,
)
from .records import path_from_record, path_to_record
from .svg import mask_path_d, svg_points
