"""Geometric primitives for polygon capture and sail construction.

This module provides core mathematical utilities for:
- Distance and dot product of 2D points/vectors
- Point-to-segment distance (used by path simplification)
- Midpoints, centroids and signed areas
- Unit tangent and normal computation for edges
- Line segment intersection

All functions are pure and stateless.
"""

import math

from shadesail.domain import Point, shoelace_area, vertex_mean

# Below this magnitude a denominator or length is treated as zero
EPSILON = 1e-10


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points.

    Examples:
        >>> distance(Point(0.0, 0.0), Point(3.0, 4.0))
        5.0
    """
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def squared_distance(p1: Point, p2: Point) -> float:
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return dx * dx + dy * dy


def dot(v1: tuple[float, float], v2: tuple[float, float]) -> float:
    """Dot product of two 2D vectors."""
    return v1[0] * v2[0] + v1[1] * v2[1]


def midpoint(p1: Point, p2: Point) -> Point:
    return Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)


def centroid(points: list[Point]) -> Point:
    """Calculate the vertex centroid (mean of all vertices).

    Args:
        points: Points to average

    Returns:
        Mean point

    Raises:
        ValueError: If points is empty
    """
    if not points:
        raise ValueError("Cannot compute centroid of an empty point list")

    return vertex_mean(points)


def signed_area(points: list[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The polygon is implicitly closed; a duplicated closing point contributes
    a zero-length edge and does not change the result.

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> square = [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)]
        >>> signed_area(square)
        1.0
        >>> signed_area(list(reversed(square)))
        -1.0
    """
    if len(points) < 3:
        return 0.0
    return shoelace_area(points)


def polygon_area(points: list[Point]) -> float:
    """Unsigned enclosed area of a polygon."""
    return abs(signed_area(points))


def perpendicular_distance(point: Point, seg_start: Point, seg_end: Point) -> float:
    """Distance from a point to a line segment.

    Projects the point onto the segment's line, clamps the projection to the
    segment, and measures to it. A degenerate segment (coincident endpoints)
    falls back to plain point-to-point distance.

    Args:
        point: The point to measure from
        seg_start: Start point of line segment
        seg_end: End point of line segment

    Returns:
        Euclidean distance from the point to the segment

    Examples:
        >>> perpendicular_distance(Point(1.0, 1.0), Point(0.0, 0.0), Point(2.0, 0.0))
        1.0
    """
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y

    if dx == 0 and dy == 0:
        return distance(point, seg_start)

    segment_length_sq = dx * dx + dy * dy
    t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / segment_length_sq
    t = max(0.0, min(1.0, t))

    return math.hypot(point.x - (seg_start.x + t * dx), point.y - (seg_start.y + t * dy))


def unit_tangent(p1: Point, p2: Point) -> tuple[float, float]:
    """Unit direction vector from p1 to p2.

    Raises:
        ValueError: If p1 and p2 are the same point (zero-length line)
    """
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    length = math.hypot(dx, dy)

    if length < EPSILON:
        raise ValueError("Cannot calculate tangent of zero-length line")

    return dx / length, dy / length


def unit_normals(p1: Point, p2: Point) -> tuple[tuple[float, float], tuple[float, float]]:
    """Both unit normals of the line from p1 to p2.

    Args:
        p1: Start point of line
        p2: End point of line

    Returns:
        Pair (rotated +90 degrees, rotated -90 degrees) of unit vectors

    Raises:
        ValueError: If p1 and p2 are the same point (zero-length line)

    Examples:
        >>> unit_normals(Point(0.0, 0.0), Point(1.0, 0.0))
        ((-0.0, 1.0), (0.0, -1.0))
    """
    tx, ty = unit_tangent(p1, p2)
    # (x, y) -> (-y, x) and (x, y) -> (y, -x)
    return (-ty, tx), (ty, -tx)


def line_intersection(p1: Point, p2: Point, p3: Point, p4: Point) -> Point | None:
    """Find intersection point of two line segments.

    Uses parametric line equations to find intersection. Returns None if lines
    are parallel or if intersection is outside either segment.

    Args:
        p1: First endpoint of segment 1
        p2: Second endpoint of segment 1
        p3: First endpoint of segment 2
        p4: Second endpoint of segment 2

    Returns:
        Point at intersection if segments intersect, None otherwise

    Examples:
        >>> line_intersection(Point(0.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0), Point(2.0, 0.0))
        Point(x=1.0, y=1.0)
    """
    params = intersection_parameters(p1, p2, p3, p4)
    if params is None:
        return None

    t, u = params
    if 0 <= t <= 1 and 0 <= u <= 1:
        return Point(p1.x + t * (p2.x - p1.x), p1.y + t * (p2.y - p1.y))

    return None


def intersection_parameters(
    p1: Point, p2: Point, p3: Point, p4: Point
) -> tuple[float, float] | None:
    """Solve p1 + t*(p2 - p1) == p3 + u*(p4 - p3) for (t, u).

    Returns:
        (t, u), or None when the lines are parallel or coincident
    """
    x1, y1 = p1.x, p1.y
    x2, y2 = p2.x, p2.y
    x3, y3 = p3.x, p3.y
    x4, y4 = p4.x, p4.y

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)

    # Lines are parallel or coincident
    if abs(denom) < EPSILON:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / denom

    return t, u
