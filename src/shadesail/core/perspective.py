"""Four-corner perspective estimation for sails.

Dragging the four corner anchors of a sail's bounding box simulates viewing
the panel from an oblique angle. The estimator reduces the anchor layout to
independent per-axis scale and shear plus a center point. It is not a
homography: it cannot converge edges toward a vanishing point, but it is
cheap enough to recompute on every drag event.

Key components:
- estimate_transform: Scale/skew/center from four corners
- preset_corners: Stock corner layouts (tilt left/right, stretch, perspective)
- apply_axis_adjustment: X/Y translation, simulated Z depth, tilt sliders
- PerspectiveEditor: Anchor-editing session for one sail
"""

from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum

import structlog

from shadesail.config import AxisAdjustment, PerspectiveConfig
from shadesail.core.path_builder import build_sail_path, path_bounding_box
from shadesail.domain import BoundingBox, Corner, PerspectiveAnchorSet, Point, Sail
from shadesail.exceptions import PerspectiveError, UnknownPresetError

logger = structlog.get_logger("shadesail.perspective")


class PerspectivePreset(str, Enum):
    """Named stock corner layouts."""

    NORMAL = "normal"
    TILT_LEFT = "tiltLeft"
    TILT_RIGHT = "tiltRight"
    STRETCH = "stretch"
    PERSPECTIVE = "perspective"


# Pixel offsets (dx, dy) from the axis-aligned corners, ordered
# top-left, top-right, bottom-left, bottom-right
PRESET_OFFSETS: dict[PerspectivePreset, tuple[tuple[float, float], ...]] = {
    PerspectivePreset.NORMAL: ((0, 0), (0, 0), (0, 0), (0, 0)),
    PerspectivePreset.TILT_LEFT: ((20, 0), (0, -10), (-20, 0), (0, 10)),
    PerspectivePreset.TILT_RIGHT: ((0, -10), (-20, 0), (0, 10), (20, 0)),
    PerspectivePreset.STRETCH: ((-30, 0), (30, 0), (10, 0), (-10, 0)),
    PerspectivePreset.PERSPECTIVE: ((15, -5), (-15, -5), (-15, 15), (15, 15)),
}


@dataclass(frozen=True, slots=True)
class PerspectiveEstimate:
    """Scale/skew approximation of a four-corner distortion.

    Skew values are dimensionless ratios; ``to_object_transform`` maps them
    into degrees for a skew-capable renderer.
    """

    center_x: float
    center_y: float
    scale_x: float
    scale_y: float
    skew_x: float
    skew_y: float

    def to_object_transform(self, skew_degrees: float = 45.0) -> "ObjectTransform":
        return ObjectTransform(
            left=self.center_x,
            top=self.center_y,
            scale_x=self.scale_x,
            scale_y=self.scale_y,
            skew_x=self.skew_x * skew_degrees,
            skew_y=self.skew_y * skew_degrees,
        )


@dataclass(frozen=True, slots=True)
class ObjectTransform:
    """Transform applied to the rendered sail, with its origin at the center.

    Attributes:
        left: Center x position
        top: Center y position
        scale_x: Horizontal scale factor
        scale_y: Vertical scale factor
        skew_x: Horizontal skew in degrees
        skew_y: Vertical skew in degrees
    """

    left: float
    top: float
    scale_x: float = 1.0
    scale_y: float = 1.0
    skew_x: float = 0.0
    skew_y: float = 0.0

    def to_dict(self) -> dict[str, float | str]:
        return {
            "left": self.left,
            "top": self.top,
            "scaleX": self.scale_x,
            "scaleY": self.scale_y,
            "skewX": self.skew_x,
            "skewY": self.skew_y,
            "originX": "center",
            "originY": "center",
        }


@dataclass(frozen=True, slots=True)
class PerspectiveSettings:
    """Snapshot of an editing session for the controls UI."""

    anchors: PerspectiveAnchorSet | None
    tilt: float
    perspective: float


def _as_corner_list(corners: PerspectiveAnchorSet | Sequence[Point]) -> list[Point]:
    if isinstance(corners, PerspectiveAnchorSet):
        return corners.as_list()
    corner_list = list(corners)
    if len(corner_list) != 4:
        raise PerspectiveError(f"expected 4 corners, got {len(corner_list)}")
    return corner_list


def estimate_transform(
    corners: PerspectiveAnchorSet | Sequence[Point],
    original_width: float,
    original_height: float,
    min_scale: float = 0.1,
) -> PerspectiveEstimate:
    """Estimate scale, skew and center from four corner positions.

    Corners are ordered top-left, top-right, bottom-left, bottom-right.
    Skew compares the top and bottom widths (x) and the horizontal drift of
    the left and right sides (y) against the original size. Scale averages
    the opposite side lengths against the original size and is floored at
    ``min_scale``.

    Args:
        corners: Current anchor positions
        original_width: Width of the axis-aligned reference rectangle
        original_height: Height of the axis-aligned reference rectangle
        min_scale: Floor for both scale factors

    Returns:
        PerspectiveEstimate

    Raises:
        PerspectiveError: If the reference size is not positive or the corner
            count is wrong
    """
    if original_width <= 0 or original_height <= 0:
        raise PerspectiveError(
            f"reference size must be positive, got {original_width}x{original_height}"
        )

    top_left, top_right, bottom_left, bottom_right = _as_corner_list(corners)

    top_width = abs(top_right.x - top_left.x)
    bottom_width = abs(bottom_right.x - bottom_left.x)
    left_height = abs(bottom_left.y - top_left.y)
    right_height = abs(bottom_right.y - top_right.y)

    skew_x = (
        (top_right.x - top_left.x) - (bottom_right.x - bottom_left.x)
    ) / original_height
    skew_y = (
        (bottom_left.x - top_left.x) - (bottom_right.x - top_right.x)
    ) / original_width

    scale_x = (top_width + bottom_width) / (2 * original_width)
    scale_y = (left_height + right_height) / (2 * original_height)

    center_x = (top_left.x + top_right.x + bottom_left.x + bottom_right.x) / 4
    center_y = (top_left.y + top_right.y + bottom_left.y + bottom_right.y) / 4

    return PerspectiveEstimate(
        center_x=center_x,
        center_y=center_y,
        scale_x=max(min_scale, scale_x),
        scale_y=max(min_scale, scale_y),
        skew_x=skew_x,
        skew_y=skew_y,
    )


def parse_preset(kind: PerspectivePreset | str) -> PerspectivePreset:
    """Resolve a preset name.

    Raises:
        UnknownPresetError: If the name is not a known preset
    """
    if isinstance(kind, PerspectivePreset):
        return kind
    try:
        return PerspectivePreset(kind)
    except ValueError:
        raise UnknownPresetError(str(kind)) from None


def preset_corners(kind: PerspectivePreset | str, bbox: BoundingBox) -> PerspectiveAnchorSet:
    """Corner layout of a named preset around ``bbox``.

    Args:
        kind: Preset name
        bbox: Axis-aligned reference rectangle

    Returns:
        Anchor set with the preset's fixed pixel offsets applied

    Raises:
        UnknownPresetError: If the name is not a known preset
    """
    preset = parse_preset(kind)
    base = PerspectiveAnchorSet.from_bounding_box(bbox).as_list()
    offsets = PRESET_OFFSETS[preset]
    return PerspectiveAnchorSet.from_list(
        [Point(p.x + dx, p.y + dy) for p, (dx, dy) in zip(base, offsets)]
    )


def apply_axis_adjustment(
    transform: ObjectTransform,
    adjustment: AxisAdjustment,
    depth_scale_per_unit: float = 0.01,
) -> ObjectTransform:
    """Apply direct positioning sliders on top of an estimated transform.

    X/Y offsets translate. Z depth is simulated as a uniform scale factor of
    ``1 + z_depth * depth_scale_per_unit``. Tilt and perspective add to the
    horizontal and vertical skew angles.

    Args:
        transform: Base transform
        adjustment: Slider values
        depth_scale_per_unit: Scale change per unit of Z depth

    Returns:
        Adjusted transform
    """
    depth_factor = 1.0 + adjustment.z_depth * depth_scale_per_unit
    return replace(
        transform,
        left=transform.left + adjustment.x_offset,
        top=transform.top + adjustment.y_offset,
        scale_x=transform.scale_x * depth_factor,
        scale_y=transform.scale_y * depth_factor,
        skew_x=transform.skew_x + adjustment.tilt,
        skew_y=transform.skew_y + adjustment.perspective,
    )


class PerspectiveEditor:
    """Perspective-editing session for one sail.

    Holds the sail's axis-aligned reference rectangle, the current corner
    layout and the positioning sliders. Draggable anchors exist only while
    anchor mode is on; turning it off discards them.

    Example:
        editor = PerspectiveEditor.for_sail(sail)
        editor.toggle_anchor_mode(True)
        transform = editor.move_anchor(Corner.TOP_LEFT, Point(120, 95))
    """

    def __init__(self, reference: BoundingBox, config: PerspectiveConfig | None = None) -> None:
        """Initialize an editing session.

        Args:
            reference: Axis-aligned bounding box of the undistorted sail
            config: Estimator settings (defaults if None)

        Raises:
            PerspectiveError: If the reference rectangle has no area
        """
        if reference.width <= 0 or reference.height <= 0:
            raise PerspectiveError("reference rectangle must have positive width and height")

        self.config = config or PerspectiveConfig()
        self.reference = reference
        self._corners = PerspectiveAnchorSet.from_bounding_box(reference)
        self._anchors: PerspectiveAnchorSet | None = None
        self._adjustment = AxisAdjustment()

    @classmethod
    def for_sail(cls, sail: Sail, config: PerspectiveConfig | None = None) -> "PerspectiveEditor":
        """Start a session using the bounds of the sail's rendered outline."""
        return cls(path_bounding_box(build_sail_path(sail)), config)

    @property
    def anchor_mode(self) -> bool:
        return self._anchors is not None

    @property
    def anchors(self) -> PerspectiveAnchorSet | None:
        return self._anchors

    @property
    def corners(self) -> PerspectiveAnchorSet:
        return self._corners

    @property
    def adjustment(self) -> AxisAdjustment:
        return self._adjustment

    def estimate(self) -> PerspectiveEstimate:
        return estimate_transform(
            self._corners,
            self.reference.width,
            self.reference.height,
            min_scale=self.config.min_scale,
        )

    @property
    def transform(self) -> ObjectTransform:
        """Current transform: corner estimate plus positioning sliders."""
        base = self.estimate().to_object_transform(self.config.skew_degrees)
        return apply_axis_adjustment(base, self._adjustment, self.config.depth_scale_per_unit)

    def toggle_anchor_mode(self, enabled: bool) -> PerspectiveAnchorSet | None:
        """Show or hide the draggable anchors.

        Anchors are created at the current corner layout and destroyed when
        anchor mode is turned off.

        Returns:
            The anchor set, or None when anchor mode is off
        """
        self._anchors = self._corners if enabled else None
        logger.debug("Anchor mode toggled", enabled=enabled)
        return self._anchors

    def move_anchor(self, corner: Corner | int, position: Point) -> ObjectTransform:
        """Drag one anchor to ``position`` and re-derive the transform.

        Raises:
            PerspectiveError: If anchor mode is off
        """
        if self._anchors is None:
            raise PerspectiveError("anchor mode is off")

        self._corners = self._corners.with_corner(Corner(corner), position)
        self._anchors = self._corners
        return self.transform

    def apply_preset(self, kind: PerspectivePreset | str) -> ObjectTransform:
        """Replace the corner layout with a preset and re-derive the transform.

        Visible anchors move with the layout.

        Raises:
            UnknownPresetError: If the name is not a known preset
        """
        self._corners = preset_corners(kind, self.reference)
        if self._anchors is not None:
            self._anchors = self._corners

        logger.info("Perspective preset applied", preset=parse_preset(kind).value)
        return self.transform

    def apply_adjustment(self, adjustment: AxisAdjustment) -> ObjectTransform:
        """Set the positioning sliders and return the resulting transform."""
        self._adjustment = adjustment
        return self.transform

    def current_settings(self) -> PerspectiveSettings:
        transform = self.transform
        return PerspectiveSettings(
            anchors=self._anchors,
            tilt=transform.skew_x,
            perspective=transform.skew_y,
        )

    def reset(self) -> ObjectTransform:
        """Return to the normal layout with all sliders at zero."""
        self._adjustment = AxisAdjustment()
        return self.apply_preset(PerspectivePreset.NORMAL)
