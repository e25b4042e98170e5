"""Draw command types handed to the rendering surface.

A sail outline is a flat list of commands: one MoveTo, then one LineTo or
QuadTo per non-degenerate edge, then ClosePath. The command letters follow
SVG path data so the list serializes directly to a ``d`` attribute.
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from shadesail.domain.geometry import Point


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new subpath at ``point``."""

    LETTER: ClassVar[str] = "M"

    point: Point

    def endpoint(self) -> Point:
        return self.point

    def coordinates(self) -> list[float]:
        return [self.point.x, self.point.y]

    def to_dict(self) -> dict[str, Any]:
        return {"command": self.LETTER, "point": self.point.to_dict()}


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight segment from the current point to ``point``."""

    LETTER: ClassVar[str] = "L"

    point: Point

    def endpoint(self) -> Point:
        return self.point

    def coordinates(self) -> list[float]:
        return [self.point.x, self.point.y]

    def to_dict(self) -> dict[str, Any]:
        return {"command": self.LETTER, "point": self.point.to_dict()}


@dataclass(frozen=True, slots=True)
class QuadTo:
    """Quadratic Bezier segment from the current point to ``point``.

    Attributes:
        control: Off-curve control point
        point: On-curve end point
    """

    LETTER: ClassVar[str] = "Q"

    control: Point
    point: Point

    def endpoint(self) -> Point:
        return self.point

    def coordinates(self) -> list[float]:
        return [self.control.x, self.control.y, self.point.x, self.point.y]

    def to_dict(self) -> dict[str, Any]:
        return {
            "command": self.LETTER,
            "control": self.control.to_dict(),
            "point": self.point.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Close the current subpath back to its starting point."""

    LETTER: ClassVar[str] = "Z"

    def endpoint(self) -> None:
        return None

    def coordinates(self) -> list[float]:
        return []

    def to_dict(self) -> dict[str, Any]:
        return {"command": self.LETTER}


PathCommand = MoveTo | LineTo | QuadTo | ClosePath
PathCommands = list[PathCommand]
