"""Shared type definitions for visibility and wall-shape geometry."""
from typing import NamedTuple


class Point(NamedTuple):
    x: float; y: float


class Segment(NamedTuple):
    """Occluding edge. *width* is stroke styling only, never intersection geometry."""
    a: Point; b: Point
    width: float = 0.0
    blocks_light: bool = True


class Path(NamedTuple):
    """User-drawn shape. The point ring closes implicitly when clipped."""
    points: list[Point]
    color: str
    width: float
    blocks_light: bool
    is_portal: bool = False


class MapBounds(NamedTuple):
    width: float; height: float


VisibilityPolygon = list[Point]

# Clipping representation: a ring is a coordinate list, a polygon is an
# outer ring followed by holes, a polygon set is a list of polygons.
Ring = list[tuple[float, float]]
Polygon = list[Ring]
PolygonSet = list[Polygon]
