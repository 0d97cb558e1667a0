"""Editor record adaptation: stored path dicts to and from Path values.

Records use the editor's camelCase keys. Legacy records are either a bare
point list or a dict missing style attributes; both are normalized to a
light-blocking wall with the default style.
"""
from .types import Point, Path
from .geometry import GeometryError

# Defaults for records that predate style attributes
DEFAULT_COLOR = "#000000"
DEFAULT_WIDTH = 10
DEFAULT_BLOCKS_LIGHT = True


def _point(p) -> Point:
    if isinstance(p, dict):
        try:
            return Point(float(p["x"]), float(p["y"]))
        except (KeyError, TypeError, ValueError) as e:
            raise GeometryError(f"Bad point record: {p!r}") from e
    try:
        x, y = p
        return Point(float(x), float(y))
    except (TypeError, ValueError) as e:
        raise GeometryError(f"Bad point record: {p!r}") from e


def path_from_record(record) -> Path:
    """Build a Path from a stored record, filling defaults for missing fields."""
    if isinstance(record, list):
        record = {"points": record}
    if not isinstance(record, dict) or "points" not in record:
        raise GeometryError(f"Path record has no points: {record!r}")
    points = [_point(p) for p in record["points"]]
    if not points:
        raise GeometryError("Path record has an empty point list")
    width = record.get("width")
    return Path(
        points=points,
        color=record.get("color") or DEFAULT_COLOR,
        width=DEFAULT_WIDTH if width is None else width,
        blocks_light=record.get("blocksLight", DEFAULT_BLOCKS_LIGHT),
        is_portal=bool(record.get("isPortal", False)),
    )


def path_to_record(path: Path) -> dict:
    """Inverse of path_from_record for a fully specified Path."""
    return {
        "points": [{"x": p[0], "y": p[1]} for p in path.points],
        "color": path.color,
        "width": path.width,
        "blocksLight": path.blocks_light,
        "isPortal": path.is_portal,
    }
