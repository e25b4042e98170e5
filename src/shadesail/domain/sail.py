"""Sail, draw session and perspective anchor types.

A Sail is the renderable entity built from a Polygon. It is immutable:
toggling an edge between straight and curved produces a new Sail whose path
is rebuilt from scratch, never patched.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from shadesail.domain.geometry import BoundingBox, Point, Polygon
from shadesail.exceptions import EdgeProfileError


class SourceKind(str, Enum):
    """How a sail's polygon was obtained."""

    PRESET = "preset"
    DRAWN = "drawn"


class Corner(int, Enum):
    """Logical corner of a perspective anchor set, valued by anchor index."""

    TOP_LEFT = 0
    TOP_RIGHT = 1
    BOTTOM_LEFT = 2
    BOTTOM_RIGHT = 3


@dataclass(frozen=True, slots=True)
class SailStyle:
    """Style descriptor passed to the rendering surface alongside the path.

    Attributes:
        fill: Fill color
        stroke: Stroke color
        opacity: Overall opacity in [0, 1]
        stroke_width: Stroke width in canvas units
    """

    fill: str = "#2D4A40"
    stroke: str = "#2D4A40"
    opacity: float = 0.8
    stroke_width: float = 2.0

    def with_color(self, color: str) -> "SailStyle":
        """Recolor fill and stroke together."""
        return replace(self, fill=color, stroke=color)

    def with_opacity(self, opacity: float) -> "SailStyle":
        return replace(self, opacity=max(0.0, min(1.0, opacity)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "fill": self.fill,
            "stroke": self.stroke,
            "opacity": self.opacity,
            "stroke_width": self.stroke_width,
        }


@dataclass(frozen=True)
class Sail:
    """A curved/straight-edged polygon overlay representing a shade sail.

    Attributes:
        sail_id: Workspace-unique identifier
        polygon: Outline vertices
        curve_profile: One flag per edge; edge i runs from vertex i to
            vertex (i + 1) mod n and is curved when its flag is True
        sag_ratio: Inward bow depth of curved edges as a fraction of edge length
        style: Rendering style
        source_kind: Whether the polygon came from a preset or a drawing
        shape_type: Preset name for preset sails
    """

    sail_id: str
    polygon: Polygon
    curve_profile: tuple[bool, ...]
    sag_ratio: float = 0.08
    style: SailStyle = field(default_factory=SailStyle)
    source_kind: SourceKind = SourceKind.PRESET
    shape_type: str | None = None

    def __post_init__(self) -> None:
        profile = tuple(bool(flag) for flag in self.curve_profile)
        object.__setattr__(self, "curve_profile", profile)
        if len(profile) != self.polygon.edge_count:
            raise EdgeProfileError(expected=self.polygon.edge_count, actual=len(profile))

    @property
    def edge_count(self) -> int:
        return self.polygon.edge_count

    def with_profile(self, curve_profile: list[bool] | tuple[bool, ...]) -> "Sail":
        """Return a copy of this sail with a new edge curve profile."""
        return replace(self, curve_profile=tuple(curve_profile))

    def with_style(self, style: SailStyle) -> "Sail":
        return replace(self, style=style)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.sail_id,
            "polygon": self.polygon.to_dict(),
            "curve_profile": list(self.curve_profile),
            "sag_ratio": self.sag_ratio,
            "style": self.style.to_dict(),
            "source_kind": self.source_kind.value,
            "shape_type": self.shape_type,
        }


@dataclass(frozen=True, slots=True)
class EdgeProfileInfo:
    """Edge profile summary exposed to the shape/style selection UI."""

    curved_edges: tuple[bool, ...]
    edge_count: int
    source_kind: SourceKind
    shape_type: str | None = None


@dataclass
class DrawSession:
    """Transient state of an interactive polygon capture.

    Attributes:
        captured_points: Points placed so far, in placement order
        is_active: Whether the user is currently in drawing mode
    """

    captured_points: list[Point] = field(default_factory=list)
    is_active: bool = False

    @property
    def point_count(self) -> int:
        return len(self.captured_points)

    @property
    def last_point(self) -> Point | None:
        if not self.captured_points:
            return None
        return self.captured_points[-1]

    def clear(self) -> None:
        self.captured_points = []


@dataclass(frozen=True, slots=True)
class PerspectiveAnchorSet:
    """Four corner anchors of a target object's bounding box."""

    top_left: Point
    top_right: Point
    bottom_left: Point
    bottom_right: Point

    @classmethod
    def from_bounding_box(cls, bbox: BoundingBox) -> "PerspectiveAnchorSet":
        """Anchors sitting exactly on the corners of ``bbox``."""
        return cls(
            top_left=Point(bbox.left, bbox.top),
            top_right=Point(bbox.right, bbox.top),
            bottom_left=Point(bbox.left, bbox.bottom),
            bottom_right=Point(bbox.right, bbox.bottom),
        )

    @classmethod
    def from_list(cls, corners: list[Point]) -> "PerspectiveAnchorSet":
        """Build from [top-left, top-right, bottom-left, bottom-right]."""
        if len(corners) != 4:
            raise ValueError(f"Expected 4 corners, got {len(corners)}")
        return cls(*corners)

    def as_list(self) -> list[Point]:
        return [self.top_left, self.top_right, self.bottom_left, self.bottom_right]

    def corner(self, corner: Corner) -> Point:
        return self.as_list()[corner.value]

    def with_corner(self, corner: Corner, point: Point) -> "PerspectiveAnchorSet":
        corners = self.as_list()
        corners[corner.value] = point
        return PerspectiveAnchorSet.from_list(corners)

    def to_dict(self) -> dict[str, Any]:
        return {
            "top_left": self.top_left.to_dict(),
            "top_right": self.top_right.to_dict(),
            "bottom_left": self.bottom_left.to_dict(),
            "bottom_right": self.bottom_right.to_dict(),
        }
