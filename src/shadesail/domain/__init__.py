"""Domain models for shadesail.

This module contains the core domain models representing points, polygons,
draw commands, sails and the transient capture and perspective sessions.
All value types are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries
- Independent of any rendering surface

Key classes:
- Point: A 2D point in canvas coordinates
- Polygon: An implicitly closed vertex sequence
- MoveTo, LineTo, QuadTo, ClosePath: Draw commands
- Sail: A polygon with a per-edge curve profile and a style
- DrawSession: Points captured during interactive drawing
- PerspectiveAnchorSet: Four corner anchors for perspective editing
"""

from shadesail.domain.geometry import (
    BoundingBox,
    Point,
    Polygon,
    WindingDirection,
    shoelace_area,
    vertex_mean,
)
from shadesail.domain.path import (
    ClosePath,
    LineTo,
    MoveTo,
    PathCommand,
    PathCommands,
    QuadTo,
)
from shadesail.domain.sail import (
    Corner,
    DrawSession,
    EdgeProfileInfo,
    PerspectiveAnchorSet,
    Sail,
    SailStyle,
    SourceKind,
)

__all__: list[str] = [
    # Enums
    "Corner",
    "SourceKind",
    "WindingDirection",
    # Core types
    "BoundingBox",
    "Point",
    "Polygon",
    "shoelace_area",
    "vertex_mean",
    # Draw commands
    "ClosePath",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "PathCommands",
    "QuadTo",
    # Sail types
    "DrawSession",
    "EdgeProfileInfo",
    "PerspectiveAnchorSet",
    "Sail",
    "SailStyle",
]
