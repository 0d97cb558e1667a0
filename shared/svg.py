"""SVG path helpers for the renderer's visibility mask."""
from .types import Point


def mask_path_d(polygon: list[Point]) -> str:
    """Closed SVG path data 'M x y L x y ... Z'; empty polygon gives ''."""
    if not polygon:
        return ""
    return "M " + " L ".join(f"{p[0]:.2f} {p[1]:.2f}" for p in polygon) + " Z"

def svg_points(points: list[Point]) -> str:
    """Points attribute for <polygon> / <polyline>: 'x,y x,y ...'."""
    return " ".join(f"{p[0]:.2f},{p[1]:.2f}" for p in points)
