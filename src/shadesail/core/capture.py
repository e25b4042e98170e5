"""Interactive polygon capture.

The CaptureController owns the draw session while the user places points.
Every candidate point is checked against the captured history; when the new
edge would cross an earlier, non-adjacent edge the polygon completes itself
without the user having to click back near the start point. Completion
simplifies the captured path and validates the result.

Each pointer event is processed to completion (point added, intersection
checked, state updated) before the next one is handled.
"""

from dataclasses import dataclass

import structlog

from shadesail.config import CaptureConfig
from shadesail.core.geometry import distance, polygon_area
from shadesail.core.intersection import would_auto_close
from shadesail.core.simplify import simplify_to_limit
from shadesail.domain import DrawSession, Point, Polygon
from shadesail.exceptions import CaptureInactiveError, InsufficientGeometryError

logger = structlog.get_logger("shadesail.capture")

MIN_POLYGON_POINTS = 3


@dataclass(frozen=True, slots=True)
class CaptureResult:
    """Outcome of placing one point.

    Attributes:
        accepted: Whether the point was added to the session
        auto_closed: Whether the point triggered auto-completion
        point_count: Captured point count after the event
        polygon: Finished polygon when auto-completion succeeded
    """

    accepted: bool
    auto_closed: bool
    point_count: int
    polygon: Polygon | None = None


@dataclass(frozen=True, slots=True)
class PreviewSegment:
    """Provisional edge from the last captured point to the pointer."""

    start: Point
    end: Point
    would_close: bool


class CaptureController:
    """Orchestrates point-by-point polygon drawing.

    Example:
        controller = CaptureController()
        controller.start()
        for point in points:
            result = controller.add_point(point)
            if result.polygon is not None:
                break
        else:
            polygon = controller.finish()
    """

    def __init__(self, config: CaptureConfig | None = None) -> None:
        """Initialize the controller.

        Args:
            config: Capture settings (defaults if None)
        """
        self.config = config or CaptureConfig()
        self._session = DrawSession()

    @property
    def session(self) -> DrawSession:
        return self._session

    @property
    def is_active(self) -> bool:
        return self._session.is_active

    @property
    def points(self) -> list[Point]:
        return list(self._session.captured_points)

    def start(self) -> DrawSession:
        """Enter drawing mode with an empty session, discarding any previous one."""
        self._session = DrawSession(is_active=True)
        logger.debug("Draw session started")
        return self._session

    def cancel(self) -> None:
        """Discard the session immediately."""
        if self._session.is_active:
            logger.debug("Draw session cancelled", points=self._session.point_count)
        self._session = DrawSession()

    def _require_active(self) -> None:
        if not self._session.is_active:
            raise CaptureInactiveError()

    def add_point(self, point: Point) -> CaptureResult:
        """Place a point.

        A point identical to the last one is ignored. A point whose edge
        would cross an earlier non-adjacent edge is not added; instead the
        polygon is completed from the points captured so far.

        Args:
            point: Pointer-down position in canvas coordinates

        Returns:
            CaptureResult describing what happened

        Raises:
            CaptureInactiveError: If no session is active
            InsufficientGeometryError: If auto-completion produced an
                invalid shape (the session stays active)
        """
        self._require_active()
        history = self._session.captured_points

        if history and history[-1] == point:
            return CaptureResult(accepted=False, auto_closed=False, point_count=len(history))

        if would_auto_close(point, history):
            logger.info("Auto-close triggered", points=len(history), x=point.x, y=point.y)
            polygon = self.finish()
            return CaptureResult(
                accepted=False,
                auto_closed=True,
                point_count=polygon.point_count,
                polygon=polygon,
            )

        history.append(point)
        logger.debug("Point captured", index=len(history) - 1, x=point.x, y=point.y)
        return CaptureResult(accepted=True, auto_closed=False, point_count=len(history))

    def preview_segment(self, hover: Point) -> PreviewSegment | None:
        """Provisional edge for a pointer-move event, without changing state.

        Returns:
            PreviewSegment, or None when nothing has been captured yet

        Raises:
            CaptureInactiveError: If no session is active
        """
        self._require_active()
        last = self._session.last_point
        if last is None:
            return None

        return PreviewSegment(
            start=last,
            end=hover,
            would_close=would_auto_close(hover, self._session.captured_points),
        )

    def finish(self, tolerance: float | None = None) -> Polygon:
        """Simplify the captured path into a validated polygon.

        The path is simplified with ``tolerance`` (the configured default if
        None) and re-simplified with a growing tolerance while it has more
        than ``max_points`` points. A final point that duplicates the start
        within the close tolerance is dropped, so the polygon never stores
        its closing point twice.

        On success the session ends. On failure the session and its points
        are kept so more points can be added.

        Args:
            tolerance: Simplification tolerance override

        Returns:
            The finished polygon

        Raises:
            CaptureInactiveError: If no session is active
            InsufficientGeometryError: If fewer than 3 points remain or the
                enclosed area is below ``min_area``
        """
        self._require_active()
        captured = self._session.captured_points
        tolerance = self.config.tolerance if tolerance is None else tolerance

        if len(captured) < MIN_POLYGON_POINTS:
            self._reject(f"need at least {MIN_POLYGON_POINTS} points", len(captured))

        simplified, _ = simplify_to_limit(
            captured,
            tolerance,
            max_points=self.config.max_points,
            growth=self.config.tolerance_growth,
            max_passes=self.config.max_resimplify_passes,
        )
        simplified = [p for i, p in enumerate(simplified) if i == 0 or p != simplified[i - 1]]

        if len(simplified) > 1 and (
            simplified[-1] == simplified[0]
            or (
                len(simplified) > MIN_POLYGON_POINTS
                and distance(simplified[-1], simplified[0]) <= self.config.get_close_tolerance()
            )
        ):
            simplified = simplified[:-1]

        if len(simplified) < MIN_POLYGON_POINTS:
            self._reject("fewer than 3 points after simplification", len(simplified))

        area = polygon_area(simplified)
        if area < self.config.min_area:
            self._reject(
                f"area {area:.1f} is below the minimum of {self.config.min_area:.1f}",
                len(simplified),
                area,
            )

        polygon = Polygon(tuple(simplified))
        logger.info(
            "Draw session completed",
            captured=len(captured),
            vertices=polygon.point_count,
            area=round(area, 1),
        )
        self._session = DrawSession()
        return polygon

    def _reject(self, reason: str, point_count: int, area: float | None = None) -> None:
        logger.warning("Shape rejected", reason=reason, points=point_count, area=area)
        raise InsufficientGeometryError(reason, point_count, area)
