"""Unit tests for the sail workspace."""

from unittest.mock import MagicMock, patch

import pytest

from shadesail.config import LoggingConfig, SailConfig, ShadeSailSettings
from shadesail.core.workspace import (
    PRESET_SHAPES,
    SailWorkspace,
    get_edge_profile,
    preset_polygon,
    set_edge_profile,
)
from shadesail.domain import LineTo, Point, Polygon, QuadTo, SourceKind
from shadesail.exceptions import (
    CapacityExceededError,
    EdgeProfileError,
    InsufficientGeometryError,
    SailNotFoundError,
    UnknownShapeError,
)
from shadesail.utils import WorkspaceLogger

KITE = [Point(0, 0), Point(50, -20), Point(100, 0), Point(50, 80)]


@pytest.fixture
def workspace() -> SailWorkspace:
    return SailWorkspace()


class TestPresets:
    """Tests for stock shapes."""

    @pytest.mark.parametrize(("shape", "vertices"), [("triangle", 3), ("square", 4), ("rectangle", 4)])
    def test_preset_polygon(self, shape, vertices):
        polygon = preset_polygon(shape)
        assert polygon.point_count == vertices
        assert polygon.points[0] == Point(*PRESET_SHAPES[shape][0])

    def test_unknown_shape(self):
        with pytest.raises(UnknownShapeError, match="hexagon"):
            preset_polygon("hexagon")

    def test_add_preset(self, workspace):
        sail = workspace.add_preset("triangle")

        assert sail.sail_id == "sail-1"
        assert sail.source_kind == SourceKind.PRESET
        assert sail.shape_type == "triangle"
        assert sail.curve_profile == (True, True, True)
        assert sail.sag_ratio == 0.08
        assert sail.sail_id in workspace

    def test_small_polygon_rejected(self, workspace):
        """Polygons below the minimum area never become sails."""
        polygon = Polygon.from_tuples([(0, 0), (30, 0), (0, 30)])
        with pytest.raises(InsufficientGeometryError) as exc_info:
            workspace.add_polygon(polygon)

        assert exc_info.value.area == pytest.approx(450)
        assert len(workspace) == 0
        assert workspace.logger.stats.sails_rejected == 1

    def test_add_preset_with_color(self, workspace):
        sail = workspace.add_preset("square", color="#AA3322")
        assert sail.style.fill == "#AA3322"
        assert sail.style.stroke == "#AA3322"


class TestEdgeProfiles:
    """Tests for edge profile access and editing."""

    def test_get_edge_profile(self, workspace):
        sail = workspace.add_preset("rectangle")
        info = workspace.get_edge_profile(sail.sail_id)

        assert info.curved_edges == (True, True, True, True)
        assert info.edge_count == 4
        assert info.source_kind == SourceKind.PRESET
        assert info.shape_type == "rectangle"
        assert get_edge_profile(sail) == info

    def test_set_edge_profile(self, workspace):
        sail = workspace.add_preset("square")
        updated = workspace.set_edge_profile(sail.sail_id, [True, False, True, False])

        assert updated.curve_profile == (True, False, True, False)
        assert workspace.get(sail.sail_id) is updated
        assert sail.curve_profile == (True, True, True, True)

    def test_set_edge_profile_wrong_length(self, workspace):
        sail = workspace.add_preset("triangle")
        with pytest.raises(EdgeProfileError):
            workspace.set_edge_profile(sail.sail_id, [True, False])
        assert workspace.get(sail.sail_id).curve_profile == (True, True, True)

    def test_set_edge_profile_function(self, workspace):
        sail = workspace.add_preset("triangle")
        edited = set_edge_profile(sail, [False, False, False])
        assert edited.curve_profile == (False, False, False)
        assert edited.sail_id == sail.sail_id

    def test_toggle_edge_rebuilds_path(self, workspace):
        sail = workspace.add_preset("square")
        assert isinstance(workspace.sail_path(sail.sail_id)[2], QuadTo)

        workspace.toggle_edge(sail.sail_id, 1)
        commands = workspace.sail_path(sail.sail_id)
        assert commands[2] == LineTo(Point(270, 240))

        workspace.toggle_edge(sail.sail_id, 1)
        assert isinstance(workspace.sail_path(sail.sail_id)[2], QuadTo)

    def test_toggle_edge_out_of_range(self, workspace):
        sail = workspace.add_preset("triangle")
        with pytest.raises(IndexError):
            workspace.toggle_edge(sail.sail_id, 5)

    def test_toggle_edge_negative_index(self, workspace):
        """Negative indices are rejected instead of wrapping to the last edge."""
        sail = workspace.add_preset("triangle")
        with pytest.raises(IndexError, match="out of range"):
            workspace.toggle_edge(sail.sail_id, -1)

        assert workspace.get(sail.sail_id).curve_profile == (True, True, True)
        assert workspace.logger.stats.profile_edits == 0


class TestCapacity:
    """Tests for the simultaneous sail limit."""

    def test_capacity_limit(self, workspace):
        for _ in range(workspace.capacity):
            workspace.add_preset("triangle")

        with pytest.raises(CapacityExceededError) as exc_info:
            workspace.add_preset("square")

        assert exc_info.value.limit == 10
        assert len(workspace) == 10

    def test_custom_capacity(self):
        workspace = SailWorkspace(ShadeSailSettings(sail=SailConfig(max_sails=2)))
        workspace.add_preset("triangle")
        workspace.add_preset("square")
        with pytest.raises(CapacityExceededError):
            workspace.add_preset("rectangle")

    def test_start_drawing_when_full(self):
        workspace = SailWorkspace(ShadeSailSettings(sail=SailConfig(max_sails=1)))
        workspace.add_preset("triangle")
        with pytest.raises(CapacityExceededError):
            workspace.start_drawing()

    def test_full_workspace_keeps_drawing_on_auto_close(self):
        """Filling up mid-drawing rejects completion but keeps every point."""
        workspace = SailWorkspace(ShadeSailSettings(sail=SailConfig(max_sails=1)))
        workspace.start_drawing()
        for point in KITE:
            workspace.capture_point(point)
        preset = workspace.add_preset("square")

        with pytest.raises(CapacityExceededError):
            workspace.capture_point(Point(20, -30))

        assert workspace.capture.is_active
        assert list(workspace.capture.points) == KITE
        assert workspace.sails == [preset]

        with pytest.raises(CapacityExceededError):
            workspace.finish_drawing()

        assert workspace.capture.is_active
        assert list(workspace.capture.points) == KITE
        assert workspace.logger.stats.sails_rejected == 2

        workspace.remove(preset.sail_id)
        assert workspace.finish_drawing().edge_count == 4

    def test_removal_frees_capacity(self):
        workspace = SailWorkspace(ShadeSailSettings(sail=SailConfig(max_sails=1)))
        sail = workspace.add_preset("triangle")
        workspace.remove(sail.sail_id)
        assert workspace.add_preset("square").sail_id == "sail-2"


class TestDrawing:
    """Tests for drawing sails through the workspace."""

    def test_auto_closed_drawing(self, workspace):
        workspace.start_drawing()
        for point in KITE:
            assert workspace.capture_point(point) is None

        sail = workspace.capture_point(Point(20, -30))

        assert sail is not None
        assert sail.source_kind == SourceKind.DRAWN
        assert sail.shape_type is None
        assert sail.edge_count == 4
        assert len(workspace) == 1
        assert not workspace.capture.is_active

    def test_explicit_finish(self, workspace):
        workspace.start_drawing()
        for point in KITE:
            workspace.capture_point(point)
        sail = workspace.finish_drawing(color="#112233")

        assert sail.polygon.point_count == 4
        assert sail.style.fill == "#112233"

    def test_rejected_drawing_continues(self, workspace):
        workspace.start_drawing()
        workspace.capture_point(Point(0, 0))
        workspace.capture_point(Point(10, 0))

        with pytest.raises(InsufficientGeometryError):
            workspace.finish_drawing()

        assert workspace.capture.is_active
        assert len(workspace) == 0
        assert workspace.logger.stats.sails_rejected == 1

        workspace.capture_point(Point(10, 60))
        workspace.capture_point(Point(-40, 60))
        assert workspace.finish_drawing().edge_count == 4

    def test_cancel_drawing(self, workspace):
        workspace.start_drawing()
        workspace.capture_point(Point(0, 0))
        workspace.cancel_drawing()
        assert not workspace.capture.is_active
        assert len(workspace) == 0


class TestRegistry:
    """Tests for lookup, removal, style and perspective helpers."""

    def test_ids_are_unique(self, workspace):
        first = workspace.add_preset("triangle")
        workspace.remove(first.sail_id)
        second = workspace.add_preset("triangle")
        assert second.sail_id != first.sail_id

    def test_sails_in_creation_order(self, workspace):
        ids = [workspace.add_preset(shape).sail_id for shape in ("square", "triangle")]
        assert [s.sail_id for s in workspace.sails] == ids

    def test_get_missing(self, workspace):
        with pytest.raises(SailNotFoundError, match="sail-9"):
            workspace.get("sail-9")

    def test_remove(self, workspace):
        sail = workspace.add_preset("triangle")
        assert workspace.remove(sail.sail_id) == sail
        assert sail.sail_id not in workspace

    def test_reset(self, workspace):
        workspace.add_preset("triangle")
        workspace.add_preset("square")
        workspace.start_drawing()
        workspace.reset()

        assert len(workspace) == 0
        assert not workspace.capture.is_active

    def test_recolor_and_opacity(self, workspace):
        sail = workspace.add_preset("triangle")
        workspace.recolor(sail.sail_id, "#FFFFFF")
        updated = workspace.set_opacity(sail.sail_id, 0.5)

        assert updated.style.fill == "#FFFFFF"
        assert updated.style.opacity == 0.5
        assert updated.polygon == sail.polygon

    def test_configured_sag_ratio(self):
        workspace = SailWorkspace(ShadeSailSettings(sail=SailConfig(sag_ratio=0.12)))
        assert workspace.add_preset("square").sag_ratio == 0.12

    def test_default_straight_edges(self):
        workspace = SailWorkspace(ShadeSailSettings(sail=SailConfig(default_curved=False)))
        assert workspace.add_preset("triangle").curve_profile == (False, False, False)

    def test_perspective_editor(self, workspace):
        sail = workspace.add_preset("rectangle")
        editor = workspace.perspective_editor(sail.sail_id)
        assert editor.reference.left == pytest.approx(120)
        assert editor.reference.width == pytest.approx(200)


class TestLifecycleLogging:
    """Tests for workspace lifecycle logging."""

    def test_with_logging_uses_logging_settings(self, tmp_path):
        log_file = tmp_path / "workspace.log"
        settings = ShadeSailSettings(
            logging=LoggingConfig(log_file=log_file, log_level="ERROR", file_log_level="INFO")
        )

        with patch("shadesail.core.workspace.configure_logging") as mock_configure:
            workspace = SailWorkspace.with_logging(settings)

        mock_configure.assert_called_once_with(
            log_file=log_file, console_level="ERROR", file_level="INFO", quiet=False
        )
        assert workspace.settings is settings
        assert len(workspace) == 0

    def test_with_logging_defaults(self):
        with patch("shadesail.core.workspace.configure_logging") as mock_configure:
            SailWorkspace.with_logging()

        mock_configure.assert_called_once_with(
            log_file=None, console_level="WARNING", file_level="DEBUG", quiet=False
        )

    def test_events_are_logged(self):
        mock_logger = MagicMock()
        workspace = SailWorkspace(workspace_logger=WorkspaceLogger(mock_logger))

        sail = workspace.add_preset("triangle")
        workspace.toggle_edge(sail.sail_id, 0)
        workspace.remove(sail.sail_id)

        stats = workspace.logger.stats
        assert stats.sails_created == 1
        assert stats.profile_edits == 1
        assert stats.sails_removed == 1
        assert stats.active_estimate == 0
        mock_logger.info.assert_any_call(
            "Sail created", sail="sail-1", source="preset", vertices=3, curved_edges=3
        )

    def test_rejection_is_logged(self):
        mock_logger = MagicMock()
        workspace = SailWorkspace(
            ShadeSailSettings(sail=SailConfig(max_sails=1)),
            workspace_logger=WorkspaceLogger(mock_logger),
        )
        workspace.add_preset("triangle")
        with pytest.raises(CapacityExceededError):
            workspace.add_preset("triangle")

        assert workspace.logger.stats.sails_rejected == 1
        assert workspace.logger.stats.rejections[0][0] == "preset"
        mock_logger.warning.assert_called_once()
