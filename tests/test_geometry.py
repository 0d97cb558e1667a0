"""Tests for shared/geometry.py pure functions."""
import math
import pytest
from shared.types import Point, Segment, Path
from shared.geometry import (
    GeometryError, DEGENERATE_EPS, PARAM_EPS,
    polar_angle, dist, point_at, in_rect,
    ray_segment_isect, poly_area, path_edges,
)


# --- polar_angle / dist / point_at ---

def test_polar_angle_axes():
    o = Point(1, 1)
    assert abs(polar_angle(o, (2, 1)) - 0.0) < 1e-12
    assert abs(polar_angle(o, (1, 2)) - math.pi/2) < 1e-12
    assert abs(polar_angle(o, (0, 1)) - math.pi) < 1e-12


def test_dist_345():
    assert abs(dist((0, 0), (3, 4)) - 5.0) < 1e-12


def test_point_at_roundtrip():
    p = point_at(Point(2, 3), math.radians(30), 4.0)
    assert abs(dist((2, 3), p) - 4.0) < 1e-12
    assert abs(polar_angle(Point(2, 3), p) - math.radians(30)) < 1e-12


def test_in_rect_boundary_included():
    assert in_rect((0, 0), 10, 5)
    assert in_rect((10, 5), 10, 5)
    assert not in_rect((10.1, 5), 10, 5)
    assert not in_rect((-1, 2), 10, 5)


def test_tolerance_values():
    assert DEGENERATE_EPS == 1e-9
    assert PARAM_EPS == 1e-6


# --- ray_segment_isect ---

class TestRaySegmentIsect:
    def test_perpendicular_hit(self):
        t, p = ray_segment_isect((0, 0), (1, 0), (5, -5), (5, 5))
        assert t == pytest.approx(5.0)
        assert p == pytest.approx((5.0, 0.0))

    def test_behind_source_misses(self):
        assert ray_segment_isect((0, 0), (-1, 0), (5, -5), (5, 5)) is None

    def test_outside_segment_misses(self):
        assert ray_segment_isect((0, 0), (1, 0), (5, 1), (5, 5)) is None

    def test_endpoint_graze_within_tolerance(self):
        # Segment ends a hair short of the ray; parameter tolerance still accepts it
        hit = ray_segment_isect((0, 0), (1, 0), (5, 1e-8), (5, 5))
        assert hit is not None
        assert hit[0] == pytest.approx(5.0)

    def test_parallel_is_no_intersection(self):
        assert ray_segment_isect((0, 0), (1, 0), (1, 1), (5, 1)) is None

    def test_collinear_is_no_intersection(self):
        assert ray_segment_isect((0, 0), (1, 0), (1, 0), (5, 0)) is None

    def test_zero_length_segment(self):
        assert ray_segment_isect((0, 0), (1, 0), (3, 0), (3, 0)) is None

    def test_zero_length_ray(self):
        assert ray_segment_isect((0, 0), (0, 0), (5, -5), (5, 5)) is None

    def test_source_on_segment(self):
        t, p = ray_segment_isect((5, 0), (1, 1), (5, -5), (5, 5))
        assert abs(t) < 1e-12
        assert p == pytest.approx((5.0, 0.0))

    def test_direction_length_scales_parameter(self):
        t, p = ray_segment_isect((0, 0), (2, 0), (5, -5), (5, 5))
        assert t == pytest.approx(2.5)
        assert p == pytest.approx((5.0, 0.0))


# --- poly_area ---

def test_poly_area_unit_square():
    sq = [(0, 0), (1, 0), (1, 1), (0, 1)]
    assert abs(poly_area(sq) - 1.0) < 1e-12


def test_poly_area_reversed_winding():
    sq = [(0, 1), (1, 1), (1, 0), (0, 0)]
    assert abs(poly_area(sq) - 1.0) < 1e-12


# --- path_edges ---

class TestPathEdges:
    def _path(self, pts):
        return Path([Point(*p) for p in pts], "#000", 3.0, True)

    def test_open_polyline(self):
        edges = path_edges(self._path([(0, 0), (1, 0), (1, 1)]))
        assert len(edges) == 2
        assert edges[0] == Segment(Point(0, 0), Point(1, 0), 3.0, True)

    def test_closed_adds_return_edge(self):
        edges = path_edges(self._path([(0, 0), (1, 0), (1, 1)]), closed=True)
        assert len(edges) == 3
        assert edges[-1].a == Point(1, 1)
        assert edges[-1].b == Point(0, 0)

    def test_closed_ring_already_closed(self):
        edges = path_edges(self._path([(0, 0), (1, 0), (1, 1), (0, 0)]), closed=True)
        assert len(edges) == 3

    def test_single_point_has_no_edges(self):
        assert path_edges(self._path([(4, 4)]), closed=True) == []

    def test_width_carried(self):
        assert all(e.width == 3.0 for e in path_edges(self._path([(0, 0), (2, 0), (2, 2)])))


def test_geometry_error_is_value_error():
    assert issubclass(GeometryError, ValueError)
