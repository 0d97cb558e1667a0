"""Shared test fixtures for visibility and merge tests."""
import math
import pytest
from shared.types import Point, Segment, Path, MapBounds


def square(x, y, size=1.0, **kw):
    """Axis-aligned square Path with its lower-left corner at (x, y)."""
    pts = [Point(x, y), Point(x+size, y), Point(x+size, y+size), Point(x, y+size)]
    style = {"color": "#000000", "width": 10, "blocks_light": True}
    style.update(kw)
    return Path(pts, **style)


def vertex_dist(light, p):
    return math.hypot(p[0]-light[0], p[1]-light[1])


@pytest.fixture(scope="session")
def big_bounds():
    """Map large enough that its edges sit outside a radius-10 light at the center."""
    return MapBounds(100.0, 100.0)


@pytest.fixture(scope="session")
def centered_light():
    return Point(50.0, 50.0)


@pytest.fixture(scope="session")
def east_wall():
    """Vertical wall 5 units east of centered_light, spanning 5 units either side."""
    return Segment(Point(55, 45), Point(55, 55), 2.0)


@pytest.fixture
def unit_square():
    return square(0, 0)
