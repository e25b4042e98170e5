"""Core geometric types for sail outlines.

This module defines the fundamental geometric types used throughout shadesail:
- Point: An immutable 2D point in canvas coordinates
- BoundingBox: An axis-aligned rectangle (left, top, width, height)
- Polygon: An implicitly closed, ordered sequence of vertices
- WindingDirection: Enum for polygon winding direction
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from shadesail.exceptions import InvalidPolygonError


class WindingDirection(Enum):
    """Polygon winding direction.

    Canvas coordinates grow downwards, so a polygon that looks clockwise on
    screen has a positive shoelace area. The enum reports the mathematical
    (y-up) orientation of the signed area.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D canvas space.

    Immutable and hashable, no identity beyond its coordinates.

    Attributes:
        x: X coordinate in canvas units
        y: Y coordinate in canvas units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned rectangle in canvas space (y grows downwards).

    Attributes:
        left: Minimum x coordinate
        top: Minimum y coordinate
        width: Extent along x
        height: Extent along y
    """

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> Point:
        return Point(self.left + self.width / 2, self.top + self.height / 2)

    @classmethod
    def from_points(cls, points: list[Point]) -> "BoundingBox":
        """Build the tightest box around a set of points.

        Args:
            points: Points to enclose

        Returns:
            BoundingBox instance (all zero for an empty list)
        """
        if not points:
            return cls(0.0, 0.0, 0.0, 0.0)

        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def to_dict(self) -> dict[str, float]:
        return {"left": self.left, "top": self.top, "width": self.width, "height": self.height}


def shoelace_area(points: Sequence[Point]) -> float:
    """Signed area of an implicitly closed ring (shoelace formula).

    Positive for counter-clockwise rings in y-up coordinates.
    """
    n = len(points)
    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def vertex_mean(points: Sequence[Point]) -> Point:
    n = len(points)
    return Point(sum(p.x for p in points) / n, sum(p.y for p in points) / n)


@dataclass(frozen=True)
class Polygon:
    """An ordered, implicitly closed sequence of at least 3 vertices.

    The closing edge from the last vertex back to the first is never stored
    as a duplicated point: edge i always runs from vertex i to vertex
    (i + 1) mod n, so the edge count equals the vertex count.

    Attributes:
        points: Vertices in insertion order (defines adjacency and winding)
    """

    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        points = tuple(self.points)
        object.__setattr__(self, "points", points)

        if len(points) < 3:
            raise InvalidPolygonError(f"needs at least 3 points, got {len(points)}")

        n = len(points)
        for i in range(n):
            if points[i] == points[(i + 1) % n]:
                raise InvalidPolygonError(f"vertices {i} and {(i + 1) % n} coincide")

    @classmethod
    def from_tuples(cls, coords: list[tuple[float, float]]) -> "Polygon":
        """Build a polygon from (x, y) pairs."""
        return cls(tuple(Point(float(x), float(y)) for x, y in coords))

    @property
    def point_count(self) -> int:
        return len(self.points)

    @property
    def edge_count(self) -> int:
        return len(self.points)

    def edges(self) -> list[tuple[Point, Point]]:
        """List the edges in order, including the implicit closing edge.

        Returns:
            List of (start, end) pairs, one per edge
        """
        n = len(self.points)
        return [(self.points[i], self.points[(i + 1) % n]) for i in range(n)]

    def signed_area(self) -> float:
        """Calculate signed area using the shoelace formula.

        Returns:
            Signed area of the polygon
        """
        return shoelace_area(self.points)

    def area(self) -> float:
        """Enclosed area (absolute value of the signed area)."""
        return abs(self.signed_area())

    def winding(self) -> WindingDirection:
        if self.signed_area() >= 0:
            return WindingDirection.COUNTER_CLOCKWISE
        return WindingDirection.CLOCKWISE

    def centroid(self) -> Point:
        """Vertex centroid (mean of all vertices)."""
        return vertex_mean(self.points)

    def bounding_box(self) -> BoundingBox:
        return BoundingBox.from_points(list(self.points))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the polygon
        """
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a polygon

        Returns:
            Polygon instance
        """
        return cls(tuple(Point.from_dict(p) for p in data["points"]))
