"""Curved-path construction for sail outlines.

Converts a polygon plus a per-edge straight/curved flag into draw commands.
Each curved edge becomes a single quadratic Bezier segment that bows toward
the polygon interior by ``sag_ratio`` of the edge length, mimicking the sag
of tensioned fabric between two corners.

The builder is pure: the same polygon, profile and sag ratio always produce
the same commands. Editing a sail means building a new path, not patching
an old one.
"""

import math
from collections.abc import Sequence

import structlog

from shadesail.core._bezier import flatten_quadratic
from shadesail.core.geometry import midpoint, squared_distance, unit_normals
from shadesail.domain import (
    BoundingBox,
    ClosePath,
    LineTo,
    MoveTo,
    PathCommands,
    Point,
    Polygon,
    QuadTo,
    Sail,
)
from shadesail.exceptions import EdgeProfileError

logger = structlog.get_logger("shadesail.path_builder")

DEFAULT_SAG_RATIO = 0.08

# Edges shorter than this are skipped entirely
MIN_EDGE_LENGTH = 1.0


def inward_control_point(start: Point, end: Point, center: Point, sag_ratio: float) -> Point:
    """Control point that bows the edge start-end toward ``center``.

    Of the two unit normals at the edge midpoint, picks the one whose offset
    lands closer to ``center`` (squared-distance comparison), so the bow is
    inward whatever the polygon winding. A quadratic Bezier deviates from its
    chord midpoint by half the control point offset, so the control point
    sits at twice the desired depth.

    Args:
        start: Edge start vertex
        end: Edge end vertex
        center: Polygon centroid
        sag_ratio: Bow depth as a fraction of edge length

    Returns:
        Quadratic control point

    Raises:
        ValueError: If the edge has zero length
    """
    edge_length = math.hypot(end.x - start.x, end.y - start.y)
    mid = midpoint(start, end)
    normal1, normal2 = unit_normals(start, end)

    d1 = squared_distance(Point(mid.x + normal1[0], mid.y + normal1[1]), center)
    d2 = squared_distance(Point(mid.x + normal2[0], mid.y + normal2[1]), center)
    inward = normal1 if d1 < d2 else normal2

    curve_depth = edge_length * sag_ratio
    return Point(mid.x + 2 * curve_depth * inward[0], mid.y + 2 * curve_depth * inward[1])


def build_path(
    polygon: Polygon,
    curve_profile: Sequence[bool],
    sag_ratio: float = DEFAULT_SAG_RATIO,
) -> PathCommands:
    """Build the draw commands of a sail outline.

    Starts with a MoveTo at vertex 0. For each edge i (vertex i to vertex
    (i + 1) mod n) emits a LineTo when the edge is straight or a QuadTo
    through an inward control point when it is curved, and finishes with a
    ClosePath. Edges shorter than one unit are skipped.

    Args:
        polygon: Sail outline
        curve_profile: One flag per edge, True for curved
        sag_ratio: Bow depth of curved edges as a fraction of edge length.
            Not clamped; large values give implausibly concave sails.

    Returns:
        List of path commands

    Raises:
        EdgeProfileError: If the profile length differs from the edge count
    """
    if len(curve_profile) != polygon.edge_count:
        raise EdgeProfileError(expected=polygon.edge_count, actual=len(curve_profile))

    center = polygon.centroid()
    commands: PathCommands = [MoveTo(polygon.points[0])]

    for i, (start, end) in enumerate(polygon.edges()):
        edge_length = math.hypot(end.x - start.x, end.y - start.y)

        if edge_length < MIN_EDGE_LENGTH:
            logger.debug("Skipping degenerate edge", edge=i, length=edge_length)
            continue

        if curve_profile[i]:
            control = inward_control_point(start, end, center, sag_ratio)
            commands.append(QuadTo(control, end))
        else:
            commands.append(LineTo(end))

    commands.append(ClosePath())
    return commands


def build_sail_path(sail: Sail) -> PathCommands:
    """Build the draw commands of a sail from its own profile and sag ratio."""
    return build_path(sail.polygon, sail.curve_profile, sail.sag_ratio)


def flatten_path(commands: PathCommands, tolerance: float = 0.5) -> list[Point]:
    """Approximate a path by a polyline.

    Quadratic segments are flattened by recursive subdivision; the closing
    segment is implied and not repeated.

    Args:
        commands: Path commands starting with a MoveTo
        tolerance: Maximum deviation of the polyline from each curve

    Returns:
        Ordered polyline points
    """
    points: list[Point] = []
    current: Point | None = None

    for command in commands:
        if isinstance(command, MoveTo):
            current = command.point
            points.append(current)
        elif isinstance(command, LineTo):
            current = command.point
            points.append(current)
        elif isinstance(command, QuadTo):
            if current is None:
                raise ValueError("Path must start with a MoveTo")
            flattened = flatten_quadratic([current, command.control, command.point], tolerance)
            points.extend(flattened[1:])
            current = command.point

    return points


def path_bounding_box(commands: PathCommands, tolerance: float = 0.5) -> BoundingBox:
    """Bounding box of the rendered outline (curves included, control points not)."""
    return BoundingBox.from_points(flatten_path(commands, tolerance))
