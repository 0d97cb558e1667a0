"""Pure geometry functions: angles, distances, ray intersection, polygon utilities."""
import math
from .types import Point, Path, Segment

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for malformed geometry input."""

# ============================================================
# Tolerances
# ============================================================
DEGENERATE_EPS = 1e-9   # zero-length vectors, near-parallel denominators
PARAM_EPS = 1e-6        # ray / segment parameter inclusion

# ============================================================
# Point Utilities
# ============================================================
def polar_angle(origin: Point, p: Point) -> float:
    """Angle of p around origin in radians, in (-pi, pi]."""
    return math.atan2(p[1]-origin[1], p[0]-origin[0])

def dist(p1: Point, p2: Point) -> float:
    return math.hypot(p2[0]-p1[0], p2[1]-p1[1])

def point_at(origin: Point, angle: float, d: float) -> Point:
    """Point at distance d from origin along direction angle."""
    return Point(origin[0]+math.cos(angle)*d, origin[1]+math.sin(angle)*d)

def in_rect(p: Point, width: float, height: float, tol: float = PARAM_EPS) -> bool:
    """True if p lies inside [0, width] x [0, height], boundary included."""
    return -tol <= p[0] <= width+tol and -tol <= p[1] <= height+tol

# ============================================================
# Ray Casting
# ============================================================
def ray_segment_isect(origin: Point, direction: Point,
                      seg_a: Point, seg_b: Point) -> tuple[float, Point] | None:
    """Intersection of the ray origin + T1*direction with segment seg_a-seg_b.

    Returns (T1, point) with T1 >= -PARAM_EPS and the segment parameter T2 in
    [-PARAM_EPS, 1+PARAM_EPS], or None for a miss. Zero-length ray or segment
    and parallel lines (|denominator| < DEGENERATE_EPS) are misses.
    """
    r_dx, r_dy = direction[0], direction[1]
    s_dx = seg_b[0]-seg_a[0]; s_dy = seg_b[1]-seg_a[1]
    if math.hypot(r_dx, r_dy) < DEGENERATE_EPS or math.hypot(s_dx, s_dy) < DEGENERATE_EPS:
        return None
    denom = r_dx*s_dy - r_dy*s_dx
    if abs(denom) < DEGENERATE_EPS:
        return None
    qx = seg_a[0]-origin[0]; qy = seg_a[1]-origin[1]
    t1 = (qx*s_dy - qy*s_dx)/denom
    t2 = (qx*r_dy - qy*r_dx)/denom
    if t1 < -PARAM_EPS or t2 < -PARAM_EPS or t2 > 1+PARAM_EPS:
        return None
    return t1, Point(origin[0]+r_dx*t1, origin[1]+r_dy*t1)

# ============================================================
# Polygon Utilities
# ============================================================
def poly_area(verts: list[Point]) -> float:
    """Polygon area via the shoelace formula. Works for either winding order."""
    n = len(verts); a = 0
    for i in range(n):
        j = (i+1)%n; a += verts[i][0]*verts[j][1]-verts[j][0]*verts[i][1]
    return abs(a)/2

def path_edges(path: Path, closed: bool = False) -> list[Segment]:
    """Segments between consecutive path points, carrying the path's width.

    With closed=True the last point also connects back to the first.
    """
    pts = [Point(*p) for p in path.points]
    edges = [Segment(pts[i], pts[i+1], path.width, path.blocks_light)
             for i in range(len(pts)-1)]
    if closed and len(pts) > 2 and pts[0] != pts[-1]:
        edges.append(Segment(pts[-1], pts[0], path.width, path.blocks_light))
    return edges
