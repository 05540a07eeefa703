"""Unit tests for planar and geographic geometry helpers.

These tests verify:
- Shoelace area invariances (winding, start vertex, translation)
- Bounding boxes and even-odd containment
- Great-circle distance and bearings
- Longest edge, horizontal spans and azimuth estimation
"""

import math

import pytest

from rooflayout.domain.services.geometry import (
    bounding_box,
    edge_bearing,
    estimate_azimuth,
    great_circle_distance,
    horizontal_span,
    initial_bearing,
    interior_angle,
    longest_edge,
    point_in_polygon,
    polygon_area,
)
from rooflayout.domain.value_objects import GeoPoint, Point, Polygon

RECT = Polygon.from_xy([(0, 0), (40, 0), (40, 30), (0, 30)])


class TestPolygonArea:
    """Tests for polygon_area."""

    def test_rectangle_area(self) -> None:
        assert polygon_area(RECT) == pytest.approx(1200.0)

    def test_area_ignores_winding_order(self) -> None:
        reversed_rect = Polygon(tuple(reversed(RECT.points)))
        assert polygon_area(reversed_rect) == pytest.approx(polygon_area(RECT))

    def test_area_ignores_start_vertex(self) -> None:
        rotated = Polygon(RECT.points[2:] + RECT.points[:2])
        assert polygon_area(rotated) == pytest.approx(1200.0)

    def test_area_ignores_translation(self) -> None:
        moved = Polygon(tuple(p.offset(1_000_000, -250_000) for p in RECT.points))
        assert polygon_area(moved) == pytest.approx(1200.0)

    def test_triangle_area(self) -> None:
        triangle = Polygon.from_xy([(0, 0), (40, 0), (20, 30)])
        assert polygon_area(triangle) == pytest.approx(600.0)

    def test_degenerate_polygon_has_zero_area(self) -> None:
        assert polygon_area(Polygon.from_xy([(0, 0), (10, 0)])) == 0.0

    def test_collinear_points_have_zero_area(self) -> None:
        assert polygon_area(Polygon.from_xy([(0, 0), (5, 0), (10, 0)])) == 0.0


class TestBoundingBox:
    """Tests for bounding_box."""

    def test_extents(self) -> None:
        bbox = bounding_box(Polygon.from_xy([(2, 3), (12, -1), (7, 9)]))
        assert (bbox.west, bbox.east, bbox.south, bbox.north) == (2, 12, -1, 9)
        assert bbox.width == 10
        assert bbox.height == 10
        assert bbox.center == Point(7, 4)

    def test_half_diagonal(self) -> None:
        bbox = bounding_box(RECT)
        assert bbox.half_diagonal == pytest.approx(25.0)

    def test_empty_polygon_raises(self) -> None:
        with pytest.raises(ValueError):
            bounding_box(Polygon(()))


class TestPointInPolygon:
    """Tests for point_in_polygon."""

    def test_interior_point(self) -> None:
        assert point_in_polygon(Point(20, 15), RECT) is True

    def test_exterior_point(self) -> None:
        assert point_in_polygon(Point(50, 15), RECT) is False
        assert point_in_polygon(Point(20, -1), RECT) is False

    def test_concave_notch_is_outside(self) -> None:
        l_shape = Polygon.from_xy(
            [(0, 0), (40, 0), (40, 15), (20, 15), (20, 30), (0, 30)]
        )
        assert point_in_polygon(Point(30, 25), l_shape) is False
        assert point_in_polygon(Point(10, 25), l_shape) is True
        assert point_in_polygon(Point(30, 5), l_shape) is True

    def test_fewer_than_three_points_contains_nothing(self) -> None:
        assert point_in_polygon(Point(0, 0), Polygon.from_xy([(0, 0), (1, 1)])) is False

    def test_boundary_answer_is_deterministic(self) -> None:
        on_edge = Point(0, 15)
        assert point_in_polygon(on_edge, RECT) == point_in_polygon(on_edge, RECT)


class TestGreatCircle:
    """Tests for great_circle_distance and initial_bearing."""

    def test_zero_distance(self) -> None:
        p = GeoPoint(40.0, -75.0)
        assert great_circle_distance(p, p) == 0.0

    def test_one_degree_of_latitude(self) -> None:
        # 111.195 km per degree on a 6371 km sphere
        distance = great_circle_distance(GeoPoint(0, 0), GeoPoint(1, 0))
        assert distance == pytest.approx(111_194.9 * 3.28084, rel=1e-4)

    def test_distance_is_symmetric(self) -> None:
        a = GeoPoint(37.77, -122.42)
        b = GeoPoint(37.78, -122.41)
        assert great_circle_distance(a, b) == pytest.approx(great_circle_distance(b, a))

    def test_bearing_due_north_and_east(self) -> None:
        assert initial_bearing(GeoPoint(0, 0), GeoPoint(1, 0)) == pytest.approx(0.0)
        assert initial_bearing(GeoPoint(0, 0), GeoPoint(0, 1)) == pytest.approx(90.0)

    def test_bearing_range(self) -> None:
        bearing = initial_bearing(GeoPoint(0, 0), GeoPoint(-1, -1))
        assert 0 <= bearing < 360


class TestAngles:
    """Tests for interior_angle and edge_bearing."""

    def test_right_angle(self) -> None:
        assert interior_angle(Point(0, 1), Point(0, 0), Point(1, 0)) == pytest.approx(90.0)

    def test_straight_angle(self) -> None:
        assert interior_angle(Point(-1, 0), Point(0, 0), Point(1, 0)) == pytest.approx(180.0)

    def test_angle_never_exceeds_180(self) -> None:
        angle = interior_angle(Point(1, -1), Point(0, 0), Point(1, 1))
        assert 0 <= angle <= 180
        assert angle == pytest.approx(90.0)

    @pytest.mark.parametrize(
        "end,expected",
        [((0, 1), 0.0), ((1, 0), 90.0), ((0, -1), 180.0), ((-1, 0), 270.0)],
    )
    def test_edge_bearing_compass(self, end: tuple[float, float], expected: float) -> None:
        assert edge_bearing(Point(0, 0), Point(*end)) == pytest.approx(expected)


class TestLongestEdgeAndSpans:
    """Tests for longest_edge, horizontal_span and estimate_azimuth."""

    def test_longest_edge_first_wins_ties(self) -> None:
        assert longest_edge(RECT) == (0, 1)

    def test_longest_edge_closing_edge(self) -> None:
        polygon = Polygon.from_xy([(0, 0), (1, 0), (1, 1), (0, 50)])
        assert longest_edge(polygon) == (3, 0)

    def test_longest_edge_needs_two_points(self) -> None:
        with pytest.raises(ValueError):
            longest_edge(Polygon.from_xy([(0, 0)]))

    def test_horizontal_span_of_triangle(self) -> None:
        triangle = Polygon.from_xy([(0, 0), (40, 0), (20, 30)])
        west, east = horizontal_span(triangle, 15.0)
        assert west == pytest.approx(10.0)
        assert east == pytest.approx(30.0)

    def test_horizontal_span_misses_polygon(self) -> None:
        assert horizontal_span(RECT, 31.0) is None

    def test_azimuth_of_south_facing_rectangle(self) -> None:
        assert estimate_azimuth(RECT) == pytest.approx(180.0)

    def test_azimuth_default_for_single_point(self) -> None:
        assert estimate_azimuth(Polygon.from_xy([(1, 1)])) == 180.0

    def test_azimuth_in_range(self) -> None:
        polygon = Polygon.from_xy([(0, 0), (0, 40), (10, 40), (10, 0)])
        azimuth = estimate_azimuth(polygon)
        assert 0 <= azimuth < 360
        assert math.isclose(azimuth, 90.0)
