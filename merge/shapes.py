"""Merging of freehand-drawn wall shapes.

merge_shapes consolidates overlapping paths into their union outline;
paths_intersect tests two paths for overlap before a merge. Both fail
closed: clipping problems give None / False and are logged, never raised.
"""
from typing import Callable

import structlog

from shared.types import Point, Path, PolygonSet
from . import clipping
from .clipping import path_to_polygon_set, outer_rings

log = structlog.get_logger()

UnionFn = Callable[..., PolygonSet]
IntersectionFn = Callable[[PolygonSet, PolygonSet], PolygonSet]


def merge_shapes(paths: list[Path], *, union: UnionFn = clipping.union) -> list[Path] | None:
    """Union of paths as one Path per connected region.

    Style (color, width) comes from the first path; blocks_light is set if
    any input blocks light; results are never portals. A single path is
    returned as-is apart from is_portal. Returns None for no input, an
    empty union or a clipping failure.

    Rings are not repaired: a self-intersecting ring (a freehand stroke
    that crosses itself) or one with fewer than three distinct points
    fails the whole merge, so such drawings come back as None.
    """
    if not paths:
        return None
    if len(paths) == 1:
        return [paths[0]._replace(is_portal=False)]

    try:
        merged = union(*(path_to_polygon_set(p) for p in paths))
    except Exception as e:
        log.error("Failed to merge shapes", n_paths=len(paths), error=str(e),
                  error_type=type(e).__name__)
        return None

    rings = outer_rings(merged)
    if not rings:
        log.error("Polygon clipping returned an empty result", n_paths=len(paths))
        return None

    rep = paths[0]
    blocks_light = any(p.blocks_light for p in paths)
    log.debug("Merged shapes", n_paths=len(paths), n_regions=len(rings))
    return [Path(points=[Point(x, y) for x, y in ring], color=rep.color, width=rep.width,
                 blocks_light=blocks_light, is_portal=False)
            for ring in rings]


def paths_intersect(path_a: Path, path_b: Path, *,
                    intersection: IntersectionFn = clipping.intersection) -> bool:
    """True if the two closed paths share area. Failures count as no overlap.

    A self-intersecting or degenerate ring is a failure, so a stroke that
    crosses itself never reports overlap.
    """
    try:
        overlap = intersection(path_to_polygon_set(path_a), path_to_polygon_set(path_b))
    except Exception as e:
        log.warning("Intersection check failed", error=str(e), error_type=type(e).__name__)
        return False
    return len(outer_rings(overlap)) > 0
