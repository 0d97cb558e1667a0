"""Polygon-clipping interface and its shapely backend.

Callers speak in plain coordinate lists (see shared.types: Ring, Polygon,
PolygonSet) so that the clipping engine can be swapped by passing other
functions with the same signatures:

    union(*sets: PolygonSet) -> PolygonSet
    intersection(a: PolygonSet, b: PolygonSet) -> PolygonSet

Invalid input rings raise ClippingError instead of being repaired.
"""
from shapely.errors import ShapelyError
from shapely.geometry import Polygon as ShapelyPolygon, MultiPolygon, GeometryCollection
from shapely.ops import unary_union

from shared.types import Path, Ring, PolygonSet
from shared.geometry import GeometryError


class ClippingError(GeometryError):
    """Raised when a ring is malformed or the clipping backend fails."""

# ============================================================
# Path <-> Polygon Set Conversion
# ============================================================
def path_to_polygon_set(path: Path) -> PolygonSet:
    """One polygon with a single (implicitly closed) outer ring."""
    ring = [(float(p[0]), float(p[1])) for p in path.points]
    if len(ring) > 1 and ring[0] == ring[-1]:
        ring = ring[:-1]
    return [[ring]]

def _open_ring(coords) -> Ring:
    ring = [(float(x), float(y)) for x, y in coords]
    if len(ring) > 1 and ring[0] == ring[-1]:
        ring.pop()  # drop closing point (= ring[0])
    return ring

def outer_rings(polys: PolygonSet) -> list[Ring]:
    """Outer ring of each polygon; holes are dropped."""
    return [poly[0] for poly in polys if poly and poly[0]]

# ============================================================
# Shapely Backend
# ============================================================
def _to_shapely(polys: PolygonSet):
    parts = []
    for poly in polys:
        if not poly:
            continue
        outer, holes = poly[0], poly[1:]
        if len(set(outer)) < 3:
            raise ClippingError(f"Ring needs at least 3 distinct points, got {len(set(outer))}")
        try:
            sp = ShapelyPolygon(outer, holes)
        except (ShapelyError, ValueError) as e:
            raise ClippingError(f"Cannot build polygon: {e}") from e
        if not sp.is_valid:
            raise ClippingError("Self-intersecting or degenerate ring")
        parts.append(sp)
    return parts

def _from_shapely(geom) -> PolygonSet:
    """Polygonal parts of a shapely result; lines and points are discarded."""
    if geom.is_empty:
        return []
    if isinstance(geom, ShapelyPolygon):
        geoms = [geom]
    elif isinstance(geom, (MultiPolygon, GeometryCollection)):
        geoms = [g for g in geom.geoms if isinstance(g, ShapelyPolygon)]
    else:
        return []
    return [[_open_ring(g.exterior.coords)] + [_open_ring(h.coords) for h in g.interiors]
            for g in geoms if not g.is_empty and g.area > 0]

def union(*polygon_sets: PolygonSet) -> PolygonSet:
    """Union of all polygons in all sets; disjoint regions stay separate polygons."""
    parts = [p for s in polygon_sets for p in _to_shapely(s)]
    try:
        return _from_shapely(unary_union(parts))
    except ShapelyError as e:
        raise ClippingError(f"Union failed: {e}") from e

def intersection(a: PolygonSet, b: PolygonSet) -> PolygonSet:
    """Intersection of the regions covered by a and b."""
    parts_a = _to_shapely(a); parts_b = _to_shapely(b)
    try:
        return _from_shapely(unary_union(parts_a).intersection(unary_union(parts_b)))
    except ShapelyError as e:
        raise ClippingError(f"Intersection failed: {e}") from e
