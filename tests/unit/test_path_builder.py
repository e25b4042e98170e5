"""Unit tests for curved sail path construction."""

import pytest

from shadesail.core.geometry import midpoint, squared_distance
from shadesail.core.path_builder import (
    build_path,
    build_sail_path,
    flatten_path,
    inward_control_point,
    path_bounding_box,
)
from shadesail.domain import (
    BoundingBox,
    ClosePath,
    LineTo,
    MoveTo,
    Point,
    Polygon,
    QuadTo,
    Sail,
)
from shadesail.exceptions import EdgeProfileError


@pytest.fixture
def square() -> Polygon:
    return Polygon.from_tuples([(0, 0), (100, 0), (100, 100), (0, 100)])


@pytest.fixture
def triangle() -> Polygon:
    return Polygon.from_tuples([(100, 100), (300, 80), (200, 250)])


def _quads(commands) -> list[QuadTo]:
    return [c for c in commands if isinstance(c, QuadTo)]


class TestBuildPath:
    """Tests for build_path function."""

    def test_all_curved_square(self, square):
        """Each control point sits 16 units inside the square (2 * 0.08 * 100)."""
        commands = build_path(square, [True] * 4, 0.08)

        assert commands[0] == MoveTo(Point(0, 0))
        assert isinstance(commands[-1], ClosePath)
        controls = [q.control for q in _quads(commands)]
        assert controls[0].x == pytest.approx(50)
        assert controls[0].y == pytest.approx(16)
        assert controls[1].x == pytest.approx(84)
        assert controls[1].y == pytest.approx(50)
        assert controls[2].x == pytest.approx(50)
        assert controls[2].y == pytest.approx(84)
        assert controls[3].x == pytest.approx(16)
        assert controls[3].y == pytest.approx(50)

    def test_command_structure(self, triangle):
        """MoveTo, one segment per edge, ClosePath."""
        commands = build_path(triangle, [True, False, True])

        assert len(commands) == triangle.edge_count + 2
        assert isinstance(commands[0], MoveTo)
        assert isinstance(commands[1], QuadTo)
        assert isinstance(commands[2], LineTo)
        assert isinstance(commands[3], QuadTo)
        assert isinstance(commands[4], ClosePath)

    def test_segments_end_at_next_vertex(self, triangle):
        """Edge i always ends at vertex (i + 1) mod n; the last closes on vertex 0."""
        commands = build_path(triangle, [True, True, True])
        endpoints = [c.endpoint() for c in commands[1:-1]]
        assert endpoints == [triangle.points[1], triangle.points[2], triangle.points[0]]

    def test_all_straight(self, square):
        commands = build_path(square, [False] * 4)
        assert all(isinstance(c, LineTo) for c in commands[1:-1])
        assert commands[-2] == LineTo(Point(0, 0))

    def test_profile_length_mismatch(self, square):
        with pytest.raises(EdgeProfileError):
            build_path(square, [True, True, True])

    def test_deterministic(self, triangle):
        """Same inputs always build the same commands."""
        assert build_path(triangle, [True, False, True], 0.1) == build_path(
            triangle, [True, False, True], 0.1
        )

    def test_zero_sag_puts_control_on_chord(self, square):
        commands = build_path(square, [True] * 4, 0.0)
        first = _quads(commands)[0]
        assert first.control == Point(50, 0)

    def test_short_edge_skipped(self):
        """Edges shorter than one unit are dropped from the path."""
        polygon = Polygon.from_tuples([(0, 0), (100, 0), (100, 0.5), (0, 100)])
        commands = build_path(polygon, [True] * 4)

        assert len(commands) == 5
        assert all(c.endpoint() != Point(100, 0.5) for c in commands[1:])

    def test_sag_scales_bow_depth(self, square):
        shallow = _quads(build_path(square, [True] * 4, 0.05))[0].control
        deep = _quads(build_path(square, [True] * 4, 0.2))[0].control
        assert shallow.y == pytest.approx(10)
        assert deep.y == pytest.approx(40)


class TestInwardBow:
    """Curved edges bow toward the interior regardless of winding."""

    @pytest.mark.parametrize("reverse", [False, True])
    def test_controls_move_toward_centroid(self, triangle, reverse):
        polygon = Polygon(tuple(reversed(triangle.points))) if reverse else triangle
        center = polygon.centroid()
        commands = build_path(polygon, [True] * polygon.edge_count)

        for (start, end), quad in zip(polygon.edges(), _quads(commands)):
            mid = midpoint(start, end)
            assert squared_distance(quad.control, center) < squared_distance(mid, center)

    def test_winding_independent(self, square):
        """Reversing vertex order yields the same set of control points."""
        reversed_square = Polygon(tuple(reversed(square.points)))
        forward = {
            (round(q.control.x, 6), round(q.control.y, 6))
            for q in _quads(build_path(square, [True] * 4))
        }
        backward = {
            (round(q.control.x, 6), round(q.control.y, 6))
            for q in _quads(build_path(reversed_square, [True] * 4))
        }
        assert forward == backward

    def test_symmetric_polygon_gives_mirrored_controls(self):
        """An isosceles triangle bows its two equal sides symmetrically."""
        polygon = Polygon.from_tuples([(0, 0), (100, 0), (50, 80)])
        right, left = _quads(build_path(polygon, [True] * 3))[1:]

        assert right.control.x == pytest.approx(100 - left.control.x)
        assert right.control.y == pytest.approx(left.control.y)

    def test_inward_control_point(self):
        control = inward_control_point(Point(0, 0), Point(100, 0), Point(50, -40), 0.1)
        assert control.x == pytest.approx(50)
        assert control.y == pytest.approx(-20)


class TestSailPath:
    """Tests for sail-level helpers."""

    def test_build_sail_path_uses_sail_fields(self, square):
        sail = Sail("sail-1", square, (True, False, True, False), sag_ratio=0.1)
        assert build_sail_path(sail) == build_path(square, [True, False, True, False], 0.1)

    def test_toggling_rebuilds_path(self, square):
        sail = Sail("sail-1", square, (True, True, True, True))
        edited = sail.with_profile([True, False, True, True])

        before = build_sail_path(sail)
        after = build_sail_path(edited)
        assert isinstance(before[2], QuadTo)
        assert after[2] == LineTo(Point(100, 100))


class TestFlattening:
    """Tests for flatten_path and path_bounding_box."""

    def test_flatten_straight_path(self, square):
        points = flatten_path(build_path(square, [False] * 4))
        assert points == [Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100), Point(0, 0)]

    def test_flatten_curve_adds_points(self, square):
        points = flatten_path(build_path(square, [True] * 4), tolerance=0.5)
        assert len(points) > 5
        assert Point(100, 0) in points

    def test_curved_bbox_stays_within_vertices(self, square):
        """Inward bows never extend the outline beyond the corners."""
        bbox = path_bounding_box(build_path(square, [True] * 4))
        assert bbox == BoundingBox(0, 0, 100, 100)

    def test_quad_without_move_to(self):
        with pytest.raises(ValueError, match="MoveTo"):
            flatten_path([QuadTo(Point(1, 1), Point(2, 0))])
