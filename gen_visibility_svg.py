"""Generate a fog-of-war preview SVG for a demo map.

Two overlapping wall strokes are merged into one outline, the merged walls
and a free-standing wall become occluder segments, and the visibility
polygon of a torch is drawn both as an outline and as a fog mask.
"""
import os, datetime, logging

import structlog

from shared.types import Point, Path, MapBounds
from shared.geometry import poly_area
from shared.svg import mask_path_d, svg_points
from shared.logging_utils import setup_logging
from visibility import compute_visibility, wall_segments
from merge import merge_shapes, paths_intersect

log = structlog.get_logger()

# Demo scene (map units are pixels)
MAP_W, MAP_H = 800, 600
TORCH = Point(260.0, 320.0)
TORCH_RADIUS = 300.0

def _rect(x, y, w, h):
    return [Point(x, y), Point(x+w, y), Point(x+w, y+h), Point(x, y+h)]

# ============================================================
# Scene geometry
# ============================================================

def build_scene_data():
    """Merge the demo walls and compute the torch visibility polygon."""
    bounds = MapBounds(MAP_W, MAP_H)
    stroke_a = Path(_rect(380, 180, 40, 200), "#333333", 4, True)
    stroke_b = Path(_rect(380, 340, 200, 40), "#555555", 6, False, is_portal=True)
    pillar = Path(_rect(150, 150, 30, 30), "#333333", 4, True)

    walls = [stroke_a, stroke_b]
    if paths_intersect(stroke_a, stroke_b):
        merged = merge_shapes(walls)
        if merged is None:
            log.warning("Wall merge failed, keeping strokes separate")
        else:
            walls = merged
    walls.append(pillar)

    segs = wall_segments(walls, closed=True)
    polygon = compute_visibility(TORCH, segs, bounds, TORCH_RADIUS)
    log.info("Visibility computed", n_walls=len(walls), n_segments=len(segs),
             n_vertices=len(polygon))
    return {
        "bounds": bounds, "walls": walls, "segments": segs,
        "light": TORCH, "radius": TORCH_RADIUS, "polygon": polygon,
        "lit_area": poly_area(polygon),
    }

# ============================================================
# SVG rendering
# ============================================================

def render_scene_svg(data):
    """Render walls, the lit region outline and a fog mask. Returns SVG string."""
    bounds = data["bounds"]; light = data["light"]; polygon = data["polygon"]
    out = []
    out.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{bounds.width}" height="{bounds.height}"'
               f' viewBox="0 0 {bounds.width} {bounds.height}">')
    out.append('<defs>')
    out.append('  <mask id="fog-mask">')
    out.append(f'    <rect x="0" y="0" width="{bounds.width}" height="{bounds.height}" fill="black"/>')
    out.append(f'    <path d="{mask_path_d(polygon)}" fill="white"/>')
    out.append('  </mask>')
    out.append('</defs>')
    out.append(f'<rect x="0" y="0" width="{bounds.width}" height="{bounds.height}" fill="#f4efe4"/>')

    # Lit floor, masked
    out.append(f'<rect x="0" y="0" width="{bounds.width}" height="{bounds.height}"'
               f' fill="#ffe9a8" mask="url(#fog-mask)"/>')

    for wall in data["walls"]:
        out.append(f'<polygon points="{svg_points(wall.points)}" fill="none"'
                   f' stroke="{wall.color}" stroke-width="{wall.width}" stroke-linejoin="round"/>')

    out.append(f'<polygon points="{svg_points(polygon)}" fill="none" stroke="#d08000"'
               f' stroke-width="1" stroke-dasharray="4 3"/>')
    out.append(f'<circle cx="{light.x:.1f}" cy="{light.y:.1f}" r="5" fill="#d08000"/>')

    _now = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    out.append(f'<text x="10" y="{bounds.height - 10}" font-family="Arial" font-size="10" fill="#999">'
               f'{len(polygon)} vertices, lit area {data["lit_area"]:.0f}, generated {_now}</text>')
    out.append('</svg>')
    return "\n".join(out)

# ============================================================
# Main entry point
# ============================================================

if __name__ == "__main__":
    setup_logging(logging.INFO)
    data = build_scene_data()
    svg_content = render_scene_svg(data)

    svg_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "visibility.svg")
    with open(svg_path, "w") as f:
        f.write(svg_content)

    print(f"Visibility preview written to {svg_path}")
    print(f"Walls:      {len(data['walls'])}")
    print(f"Segments:   {len(data['segments'])}")
    print(f"Vertices:   {len(data['polygon'])}")
    print(f"Lit area:   {data['lit_area']:.2f} sq px")
