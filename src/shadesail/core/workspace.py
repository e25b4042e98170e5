"""Sail workspace: the registry of sails on one canvas.

The workspace is what the shape/style selection UI talks to. It creates
sails from preset shapes or from a completed drawing, enforces the sail
capacity, and exposes per-edge curve profiles for toggling edges between
straight and curved.

Key components:
- PRESET_SHAPES: Fixed vertex sequences of the stock shapes
- get_edge_profile / set_edge_profile: Edge profile access on a single sail
- SailWorkspace: Ordered sail registry with capture and perspective helpers
"""

from collections.abc import Sequence
from typing import ClassVar

from shadesail.config import ShadeSailSettings
from shadesail.core.capture import CaptureController
from shadesail.core.intersection import would_auto_close
from shadesail.core.path_builder import build_sail_path
from shadesail.core.perspective import PerspectiveEditor
from shadesail.domain import (
    DrawSession,
    EdgeProfileInfo,
    PathCommands,
    Point,
    Polygon,
    Sail,
    SailStyle,
    SourceKind,
)
from shadesail.exceptions import (
    CapacityExceededError,
    EdgeProfileError,
    InsufficientGeometryError,
    SailNotFoundError,
    UnknownShapeError,
)
from shadesail.utils import WorkspaceLogger, configure_logging

# Canvas coordinates of the stock shapes (800x600 canvas)
PRESET_SHAPES: dict[str, tuple[tuple[float, float], ...]] = {
    "triangle": ((100.0, 100.0), (300.0, 80.0), (200.0, 250.0)),
    "square": ((150.0, 120.0), (270.0, 120.0), (270.0, 240.0), (150.0, 240.0)),
    "rectangle": ((120.0, 140.0), (320.0, 140.0), (320.0, 220.0), (120.0, 220.0)),
}


def preset_polygon(shape: str) -> Polygon:
    """Polygon of a stock shape.

    Raises:
        UnknownShapeError: If the shape name is not known
    """
    try:
        coords = PRESET_SHAPES[shape]
    except KeyError:
        raise UnknownShapeError(shape) from None
    return Polygon.from_tuples(list(coords))


def get_edge_profile(sail: Sail) -> EdgeProfileInfo:
    """Describe a sail's edge profile for the selection UI."""
    return EdgeProfileInfo(
        curved_edges=sail.curve_profile,
        edge_count=sail.edge_count,
        source_kind=sail.source_kind,
        shape_type=sail.shape_type,
    )


def set_edge_profile(sail: Sail, new_profile: Sequence[bool]) -> Sail:
    """Return a copy of ``sail`` with a new edge profile.

    The sail's path must be rebuilt from the returned sail; straight and
    curved edges differ in geometry, not just in style.

    Raises:
        EdgeProfileError: If the profile length differs from the edge count
    """
    if len(new_profile) != sail.edge_count:
        raise EdgeProfileError(expected=sail.edge_count, actual=len(new_profile))
    return sail.with_profile(tuple(new_profile))


class SailWorkspace:
    """Ordered registry of the sails on one canvas.

    All state is owned by a single controller and mutated synchronously in
    response to discrete UI events.

    Example:
        workspace = SailWorkspace.with_logging()
        sail = workspace.add_preset("triangle")
        workspace.set_edge_profile(sail.sail_id, [True, False, True])
        commands = workspace.sail_path(sail.sail_id)

    The plain constructor leaves logging setup to the caller (the CLI does it
    once per run). Until ``configure_logging`` has been called, structlog
    prints every event, debug included, to stdout.
    """

    ID_PREFIX: ClassVar[str] = "sail"

    def __init__(
        self,
        settings: ShadeSailSettings | None = None,
        workspace_logger: WorkspaceLogger | None = None,
    ) -> None:
        """Initialize an empty workspace.

        Args:
            settings: Application settings (defaults if None)
            workspace_logger: Lifecycle logger (a fresh one if None)
        """
        self.settings = settings or ShadeSailSettings()
        self.logger = workspace_logger or WorkspaceLogger()
        self.capture = CaptureController(self.settings.capture)
        self._sails: dict[str, Sail] = {}
        self._next_id = 1

    @classmethod
    def with_logging(cls, settings: ShadeSailSettings | None = None) -> "SailWorkspace":
        """Configure logging from ``settings.logging`` and create a workspace.

        Args:
            settings: Application settings (defaults if None)

        Returns:
            Empty workspace logging through the configured handlers
        """
        settings = settings or ShadeSailSettings()
        configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=False,
        )
        return cls(settings)

    def __len__(self) -> int:
        return len(self._sails)

    def __contains__(self, sail_id: object) -> bool:
        return sail_id in self._sails

    @property
    def sails(self) -> list[Sail]:
        return list(self._sails.values())

    @property
    def capacity(self) -> int:
        return self.settings.sail.max_sails

    def default_style(self) -> SailStyle:
        return SailStyle(**self.settings.sail.style.model_dump())

    def _ensure_capacity(self, source: str) -> None:
        if len(self._sails) >= self.capacity:
            error = CapacityExceededError(self.capacity)
            self.logger.log_sail_rejected(source, error)
            raise error

    def _new_id(self) -> str:
        sail_id = f"{self.ID_PREFIX}-{self._next_id}"
        self._next_id += 1
        return sail_id

    def add_polygon(
        self,
        polygon: Polygon,
        source_kind: SourceKind = SourceKind.DRAWN,
        shape_type: str | None = None,
        curve_profile: Sequence[bool] | None = None,
        color: str | None = None,
    ) -> Sail:
        """Create a sail from a finished polygon.

        Args:
            polygon: Sail outline
            source_kind: Where the polygon came from
            shape_type: Preset name for preset sails
            curve_profile: Edge flags (all edges ``default_curved`` if None)
            color: Fill and stroke color (configured default if None)

        Returns:
            The new sail

        Raises:
            CapacityExceededError: If the workspace is full
            InsufficientGeometryError: If the enclosed area is below ``min_area``
            EdgeProfileError: If the profile length differs from the edge count
        """
        self._ensure_capacity(source_kind.value)

        area = polygon.area()
        if area < self.settings.capture.min_area:
            error = InsufficientGeometryError(
                f"area {area:.1f} is below the minimum of {self.settings.capture.min_area:.1f}",
                polygon.point_count,
                area,
            )
            self.logger.log_sail_rejected(source_kind.value, error)
            raise error

        if curve_profile is None:
            curve_profile = [self.settings.sail.default_curved] * polygon.edge_count

        style = self.default_style()
        if color is not None:
            style = style.with_color(color)

        sail = Sail(
            sail_id=self._new_id(),
            polygon=polygon,
            curve_profile=tuple(curve_profile),
            sag_ratio=self.settings.sail.sag_ratio,
            style=style,
            source_kind=source_kind,
            shape_type=shape_type,
        )
        self._sails[sail.sail_id] = sail
        self.logger.log_sail_created(
            sail.sail_id,
            source=source_kind.value,
            vertices=polygon.point_count,
            curved_edges=sum(sail.curve_profile),
        )
        return sail

    def add_preset(self, shape: str, color: str | None = None) -> Sail:
        """Create a sail from a stock shape.

        Raises:
            UnknownShapeError: If the shape name is not known
            CapacityExceededError: If the workspace is full
        """
        polygon = preset_polygon(shape)
        return self.add_polygon(
            polygon,
            source_kind=SourceKind.PRESET,
            shape_type=shape,
            color=color,
        )

    def start_drawing(self) -> DrawSession:
        """Enter drawing mode.

        Raises:
            CapacityExceededError: If the workspace is already full
        """
        self._ensure_capacity(SourceKind.DRAWN.value)
        return self.capture.start()

    def capture_point(self, point: Point, color: str | None = None) -> Sail | None:
        """Place a point in the active drawing.

        Returns:
            The new sail when the point auto-completed the drawing, else None

        Raises:
            CaptureInactiveError: If drawing mode is off
            CapacityExceededError: If auto-completion would exceed the capacity
            InsufficientGeometryError: If auto-completion produced an invalid
                shape (drawing continues)
        """
        if self.capture.is_active and would_auto_close(point, self.capture.points):
            self._ensure_capacity(SourceKind.DRAWN.value)

        try:
            result = self.capture.add_point(point)
        except InsufficientGeometryError as e:
            self.logger.log_sail_rejected(SourceKind.DRAWN.value, e)
            raise

        if result.polygon is None:
            return None
        return self.add_polygon(result.polygon, source_kind=SourceKind.DRAWN, color=color)

    def finish_drawing(self, tolerance: float | None = None, color: str | None = None) -> Sail:
        """Complete the active drawing explicitly and create its sail.

        Raises:
            CaptureInactiveError: If drawing mode is off
            CapacityExceededError: If the workspace is full (drawing continues)
            InsufficientGeometryError: If the drawing is not a valid shape
                (drawing continues)
        """
        self._ensure_capacity(SourceKind.DRAWN.value)
        try:
            polygon = self.capture.finish(tolerance)
        except InsufficientGeometryError as e:
            self.logger.log_sail_rejected(SourceKind.DRAWN.value, e)
            raise
        return self.add_polygon(polygon, source_kind=SourceKind.DRAWN, color=color)

    def cancel_drawing(self) -> None:
        self.capture.cancel()

    def get(self, sail_id: str) -> Sail:
        """Look up a sail.

        Raises:
            SailNotFoundError: If no sail has this id
        """
        try:
            return self._sails[sail_id]
        except KeyError:
            raise SailNotFoundError(sail_id) from None

    def remove(self, sail_id: str) -> Sail:
        """Remove a sail and return it."""
        sail = self.get(sail_id)
        del self._sails[sail_id]
        self.logger.log_sail_removed(sail_id)
        return sail

    def reset(self) -> None:
        """Remove every sail and discard any drawing in progress."""
        for sail_id in list(self._sails):
            self.remove(sail_id)
        self.capture.cancel()

    def get_edge_profile(self, sail_id: str) -> EdgeProfileInfo:
        return get_edge_profile(self.get(sail_id))

    def set_edge_profile(self, sail_id: str, new_profile: Sequence[bool]) -> Sail:
        """Replace a sail's edge profile.

        Raises:
            SailNotFoundError: If no sail has this id
            EdgeProfileError: If the profile length differs from the edge count
        """
        old = self.get(sail_id)
        sail = set_edge_profile(old, new_profile)
        self._sails[sail_id] = sail
        self.logger.log_profile_changed(sail_id, old.curve_profile, sail.curve_profile)
        return sail

    def toggle_edge(self, sail_id: str, edge_index: int) -> Sail:
        """Flip one edge between straight and curved.

        Raises:
            IndexError: If the edge index is out of range
        """
        profile = list(self.get(sail_id).curve_profile)
        if not 0 <= edge_index < len(profile):
            raise IndexError(f"edge {edge_index} is out of range (0-{len(profile) - 1})")
        profile[edge_index] = not profile[edge_index]
        return self.set_edge_profile(sail_id, profile)

    def recolor(self, sail_id: str, color: str) -> Sail:
        sail = self.get(sail_id)
        sail = sail.with_style(sail.style.with_color(color))
        self._sails[sail_id] = sail
        return sail

    def set_opacity(self, sail_id: str, opacity: float) -> Sail:
        sail = self.get(sail_id)
        sail = sail.with_style(sail.style.with_opacity(opacity))
        self._sails[sail_id] = sail
        return sail

    def sail_path(self, sail_id: str) -> PathCommands:
        """Build the current draw commands of a sail."""
        return build_sail_path(self.get(sail_id))

    def perspective_editor(self, sail_id: str) -> PerspectiveEditor:
        """Start a perspective-editing session for a sail."""
        return PerspectiveEditor.for_sail(self.get(sail_id), self.settings.perspective)
