"""End-to-end sail workflows through the workspace.

Each test drives the engine the way the canvas UI does: create a sail,
edit its edges, render its path and distort it in perspective.
"""

import pytest

from shadesail.config import AxisAdjustment, CaptureConfig, ShadeSailSettings
from shadesail.core import PerspectivePreset, SailWorkspace, flatten_path
from shadesail.domain import ClosePath, Corner, LineTo, MoveTo, Point, QuadTo, SourceKind
from shadesail.exceptions import CapacityExceededError, InsufficientGeometryError
from shadesail.io import format_path_data, sail_to_dict


@pytest.fixture
def workspace() -> SailWorkspace:
    return SailWorkspace()


class TestPresetWorkflow:
    """Preset sail from creation to perspective."""

    def test_square_preset_to_perspective(self, workspace):
        sail = workspace.add_preset("square")
        commands = workspace.sail_path(sail.sail_id)

        assert isinstance(commands[0], MoveTo)
        assert all(isinstance(c, QuadTo) for c in commands[1:-1])
        assert isinstance(commands[-1], ClosePath)

        # Straighten the top and bottom edges
        workspace.set_edge_profile(sail.sail_id, [False, True, False, True])
        path_data = format_path_data(workspace.sail_path(sail.sail_id))
        assert path_data.startswith("M 150 120 L 270 120 Q")

        editor = workspace.perspective_editor(sail.sail_id)
        editor.apply_preset(PerspectivePreset.PERSPECTIVE)
        transform = editor.apply_adjustment(AxisAdjustment(z_depth=10))

        assert transform.left == pytest.approx(210)
        assert transform.scale_x == pytest.approx(1.1)
        assert transform.skew_x != 0.0

    def test_edge_edits_never_touch_polygon(self, workspace):
        sail = workspace.add_preset("triangle")
        for i in range(sail.edge_count):
            workspace.toggle_edge(sail.sail_id, i)

        edited = workspace.get(sail.sail_id)
        assert edited.polygon == sail.polygon
        assert edited.curve_profile == (False, False, False)
        assert all(isinstance(c, LineTo) for c in workspace.sail_path(sail.sail_id)[1:-1])


class TestFreehandWorkflow:
    """Freehand drawing from first point to finished sail."""

    def test_kite_auto_closes(self, workspace):
        """Four placed points then a crossing point produce a four-sided sail."""
        workspace.start_drawing()
        for point in [Point(0, 0), Point(50, -20), Point(100, 0), Point(50, 80)]:
            assert workspace.capture_point(point) is None

        preview = workspace.capture.preview_segment(Point(20, -30))
        assert preview.would_close

        sail = workspace.capture_point(Point(20, -30))
        assert sail.source_kind == SourceKind.DRAWN
        assert sail.polygon.area() == pytest.approx(5000)
        assert sail.curve_profile == (True, True, True, True)

        data = sail_to_dict(sail)
        assert data["path"].startswith("M 0 0 Q")
        assert data["path"].endswith("Z")

    def test_dense_stroke_is_simplified(self, workspace):
        """A hand-drawn rectangle with jitter simplifies to its corners."""
        stroke = []
        for x in range(0, 201, 10):
            stroke.append(Point(x, (x % 20) / 10))
        for y in range(10, 101, 10):
            stroke.append(Point(200 + (y % 20) / 10, y))
        for x in range(190, -1, -10):
            stroke.append(Point(x, 100 + (x % 20) / 10))
        for y in range(90, 9, -10):
            stroke.append(Point((y % 20) / 10, y))
        stroke.append(Point(1, 3))

        workspace.start_drawing()
        sail = None
        for point in stroke:
            sail = workspace.capture_point(point)
            assert sail is None
        sail = workspace.finish_drawing()

        assert sail.polygon.point_count == 4
        assert sail.polygon.area() == pytest.approx(20000, rel=0.05)

    def test_rejected_drawing_can_be_extended(self):
        workspace = SailWorkspace(ShadeSailSettings(capture=CaptureConfig(min_area=2000)))
        workspace.start_drawing()
        for point in [Point(0, 0), Point(40, 0), Point(40, 40)]:
            workspace.capture_point(point)

        with pytest.raises(InsufficientGeometryError):
            workspace.finish_drawing()

        workspace.capture_point(Point(-20, 60))
        sail = workspace.finish_drawing()
        assert sail.edge_count == 4

    def test_outline_flattens_within_bounds(self, workspace):
        sail = workspace.add_preset("rectangle")
        bbox = sail.polygon.bounding_box()
        for point in flatten_path(workspace.sail_path(sail.sail_id)):
            assert bbox.left - 1e-9 <= point.x <= bbox.right + 1e-9
            assert bbox.top - 1e-9 <= point.y <= bbox.bottom + 1e-9


class TestCapacityWorkflow:
    """Filling the workspace and making room again."""

    def test_full_workspace_blocks_drawing_until_removal(self, workspace):
        sails = [workspace.add_preset("triangle") for _ in range(workspace.capacity)]

        with pytest.raises(CapacityExceededError):
            workspace.start_drawing()

        workspace.remove(sails[0].sail_id)
        workspace.start_drawing()
        for point in [Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)]:
            workspace.capture_point(point)
        workspace.finish_drawing()

        assert len(workspace) == workspace.capacity
        assert workspace.logger.stats.sails_created == workspace.capacity + 1


class TestAnchorDragging:
    """Dragging corner anchors on a sail."""

    def test_drag_corner(self, workspace):
        sail = workspace.add_preset("rectangle")
        editor = workspace.perspective_editor(sail.sail_id)
        editor.toggle_anchor_mode(True)

        top_left = editor.anchors.corner(Corner.TOP_LEFT)
        transform = editor.move_anchor(Corner.TOP_LEFT, Point(top_left.x + 20, top_left.y))

        # Top edge narrows by 20 of 200
        assert transform.scale_x == pytest.approx(0.95)
        assert transform.skew_x == pytest.approx(-20 / 80 * 45)
