"""Boolean combination of freehand-drawn wall shapes."""

from .clipping import ClippingError, union, intersection, path_to_polygon_set, outer_rings
from .shapes import merge_shapes, paths_intersect
