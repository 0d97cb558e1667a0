"""Visibility polygon computation by angular ray casting.

Rays are cast from the light toward every occluder endpoint and map corner
(plus a grazing ray either side of each), densified along long occluders and
around a coarse full circle. Each ray stops at the nearest occluder or map
edge, or at the sight radius. The hit points sorted by polar angle form the
visibility polygon.

All rays are intersected against all segments at once with numpy; cast_ray
is the scalar form of the same computation for a single direction.
"""
import math
import numpy as np

from shared.types import Point, Segment, Path, MapBounds, VisibilityPolygon
from shared.geometry import (
    GeometryError, polar_angle, dist, point_at, in_rect,
    ray_segment_isect, path_edges,
)
from .constants import DEGENERATE_EPS, PARAM_EPS, ANGLE_EPS, CIRCLE_STEP_DEG, RAYS_PER_UNIT


def _check_inputs(bounds: MapBounds, radius: float) -> None:
    if not radius > 0:
        raise GeometryError(f"Sight radius must be positive: radius={radius}")
    if not (bounds.width > 0 and bounds.height > 0):
        raise GeometryError(f"Map bounds must be positive: {bounds.width} x {bounds.height}")

# ============================================================
# Segment Sources
# ============================================================
def boundary_segments(bounds: MapBounds) -> list[Segment]:
    """The four zero-width map edges, clockwise from the origin corner."""
    w, h = bounds.width, bounds.height
    c = [Point(0, 0), Point(w, 0), Point(w, h), Point(0, h)]
    return [Segment(c[i], c[(i+1)%4], 0.0) for i in range(4)]

def wall_segments(paths: list[Path], *, closed: bool = False) -> list[Segment]:
    """Occluder segments from every light-blocking, non-portal path.

    Paths with zero stroke width are ignored. With closed=True each path
    also contributes its closing edge.
    """
    segs = []
    for path in paths:
        if not path.blocks_light or path.is_portal or path.width <= 0:
            continue
        segs.extend(path_edges(path, closed))
    return segs

# ============================================================
# Angle Sampling
# ============================================================
def _densify(light: Point, seg: Segment, rays_per_unit: float) -> list[float]:
    """Angles spread across the arc an occluder subtends, one per 1/rays_per_unit of arc length."""
    ang_a = polar_angle(light, seg.a); ang_b = polar_angle(light, seg.b)
    diff = ang_b - ang_a
    if diff > math.pi: diff -= 2*math.pi
    if diff < -math.pi: diff += 2*math.pi
    arc_len = abs(diff) * (dist(light, seg.a) + dist(light, seg.b)) / 2
    n = math.ceil(arc_len * rays_per_unit)
    return [ang_a + diff*i/n for i in range(1, n)]

def sample_angles(
    light: Point, segments: list[Segment], bounds: MapBounds, radius: float,
    *, rays_per_unit: float = RAYS_PER_UNIT,
) -> list[float]:
    """Ray directions to cast, in casting order.

    Endpoints inside the map and corners within radius each give three
    angles (exact and +/- ANGLE_EPS). A full circle every CIRCLE_STEP_DEG
    follows, then the per-occluder densification rays.
    """
    w, h = bounds.width, bounds.height
    targets = [p for s in segments for p in (s.a, s.b) if in_rect(p, w, h)]
    targets += [c for c in (Point(0, 0), Point(w, 0), Point(w, h), Point(0, h))
                if dist(light, c) <= radius]
    angles = []
    for p in dict.fromkeys(Point(*t) for t in targets):
        ang = polar_angle(light, p)
        angles.extend((ang, ang - ANGLE_EPS, ang + ANGLE_EPS))

    n_circle = int(round(360.0 / CIRCLE_STEP_DEG))
    angles.extend(math.radians(-180.0 + i*CIRCLE_STEP_DEG) for i in range(n_circle))

    if rays_per_unit > 0:
        for seg in segments:
            angles.extend(_densify(light, seg, rays_per_unit))
    return angles
# ============================================================
# Ray Casting
# ============================================================
def _leaves_map(direction, edge: Segment) -> bool:
    """True if direction crosses a clockwise map edge from inside to outside.

    The outward normal of edge a->b is (b.y-a.y, -(b.x-a.x)).
    """
    return direction[0]*(edge.b[1]-edge.a[1]) - direction[1]*(edge.b[0]-edge.a[0]) > 0

def cast_ray(light: Point, angle: float, segments: list[Segment],
             bounds: MapBounds, radius: float) -> Point:
    """Visible end point of a single ray: nearest hit within radius, else the radius point.

    A map edge through the light only stops rays that leave the map.
    """
    _check_inputs(bounds, radius)
    direction = (math.cos(angle), math.sin(angle))
    nearest = math.inf
    for seg in segments:
        hit = ray_segment_isect(light, direction, seg.a, seg.b)
        if hit is not None:
            nearest = min(nearest, max(hit[0], 0.0))
    for edge in boundary_segments(bounds):
        hit = ray_segment_isect(light, direction, edge.a, edge.b)
        if hit is not None and (hit[0] > PARAM_EPS or _leaves_map(direction, edge)):
            nearest = min(nearest, max(hit[0], 0.0))
    return point_at(light, angle, nearest if nearest <= radius else radius)

def _cast_rays(light: Point, angles: np.ndarray, segments: list[Segment],
               bounds: MapBounds, radius: float) -> np.ndarray:
    """Distance along each ray to its visible end point, shape (n_rays,).

    segments are the occluders; the map edges are appended here.
    """
    edges = boundary_segments(bounds)
    all_segs = list(segments) + edges
    is_edge = np.arange(len(all_segs)) >= len(all_segs) - len(edges)

    dx = np.cos(angles)[:, None]; dy = np.sin(angles)[:, None]
    seg = np.array([(s.a[0], s.a[1], s.b[0], s.b[1]) for s in all_segs], dtype=float)
    ax, ay = seg[:, 0], seg[:, 1]
    sdx = seg[:, 2] - ax; sdy = seg[:, 3] - ay
    qx = ax - light[0]; qy = ay - light[1]

    denom = dx*sdy - dy*sdx                              # (n_rays, n_segs)
    valid = (np.abs(denom) >= DEGENERATE_EPS) & (np.hypot(sdx, sdy) >= DEGENERATE_EPS)
    safe = np.where(valid, denom, 1.0)
    t1 = (qx*sdy - qy*sdx) / safe
    t2 = (qx*dy - qy*dx) / safe
    hit = valid & (t1 >= -PARAM_EPS) & (t2 >= -PARAM_EPS) & (t2 <= 1 + PARAM_EPS)
    # Map edge through the light: denom > 0 means the ray is leaving the map
    hit &= ~(is_edge & (t1 <= PARAM_EPS) & (denom <= 0))

    nearest = np.where(hit, np.maximum(t1, 0.0), np.inf).min(axis=1)
    return np.where(nearest <= radius, nearest, radius)

def compute_visibility(
    light: Point, segments: list[Segment], bounds: MapBounds, radius: float,
    *, rays_per_unit: float = RAYS_PER_UNIT,
) -> VisibilityPolygon:
    """Visibility polygon around light, ordered by ascending polar angle.

    Occluders are intersected as zero-width lines; the map edges always
    take part, so the polygon stays inside the map even for a light placed
    outside it. A light on a map edge sees into the map; a light exactly on
    an occluder is blocked at the source on every ray not parallel to it.
    Near-duplicate vertices are kept (ties keep casting order).
    Raises GeometryError for a non-positive radius or bounds.
    """
    _check_inputs(bounds, radius)
    light = Point(float(light[0]), float(light[1]))
    angles = np.array(sample_angles(light, segments, bounds, radius, rays_per_unit=rays_per_unit))
    d = _cast_rays(light, angles, segments, bounds, radius)

    xs = light.x + np.cos(angles)*d
    ys = light.y + np.sin(angles)*d
    order = np.argsort(np.arctan2(ys - light.y, xs - light.x), kind="stable")
    return [Point(float(xs[i]), float(ys[i])) for i in order]
