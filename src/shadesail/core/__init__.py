"""Core geometry algorithms for shadesail.

This module contains the core algorithms for:

- Geometry primitives (distances, normals, centroids, areas, intersections)
- Path simplification (Ramer-Douglas-Peucker)
- Freehand auto-close detection (segment intersection)
- Curved sail path construction (quadratic Bezier edges)
- Four-corner perspective estimation
- Interactive polygon capture and the sail workspace

The geometry functions are:
- Stateless and pure (no side effects)
- Deterministic for a given input

Key functions:
- simplify: Ramer-Douglas-Peucker point reduction
- segments_intersect: Segment/segment crossing test
- would_auto_close: Freehand auto-completion trigger
- build_path: Polygon + edge profile to draw commands
- estimate_transform: Scale/skew approximation from four corners
- preset_corners: Stock perspective corner layouts

Key classes:
- CaptureController: Point-by-point polygon drawing
- PerspectiveEditor: Anchor-editing session for one sail
- SailWorkspace: Sail registry with capacity and edge profiles
"""

from shadesail.core.capture import CaptureController, CaptureResult, PreviewSegment
from shadesail.core.geometry import (
    centroid,
    distance,
    dot,
    line_intersection,
    perpendicular_distance,
    polygon_area,
    signed_area,
    unit_normals,
)
from shadesail.core.intersection import segments_intersect, would_auto_close
from shadesail.core.path_builder import (
    DEFAULT_SAG_RATIO,
    build_path,
    build_sail_path,
    flatten_path,
    inward_control_point,
    path_bounding_box,
)
from shadesail.core.perspective import (
    ObjectTransform,
    PerspectiveEditor,
    PerspectiveEstimate,
    PerspectivePreset,
    PerspectiveSettings,
    apply_axis_adjustment,
    estimate_transform,
    preset_corners,
)
from shadesail.core.simplify import simplify, simplify_to_limit
from shadesail.core.workspace import (
    PRESET_SHAPES,
    SailWorkspace,
    get_edge_profile,
    preset_polygon,
    set_edge_profile,
)

__all__ = [
    "DEFAULT_SAG_RATIO",
    "PRESET_SHAPES",
    # Capture classes
    "CaptureController",
    "CaptureResult",
    "PreviewSegment",
    # Perspective classes
    "ObjectTransform",
    "PerspectiveEditor",
    "PerspectiveEstimate",
    "PerspectivePreset",
    "PerspectiveSettings",
    # Workspace classes
    "SailWorkspace",
    # Functions
    "apply_axis_adjustment",
    "build_path",
    "build_sail_path",
    "centroid",
    "distance",
    "dot",
    "estimate_transform",
    "flatten_path",
    "get_edge_profile",
    "inward_control_point",
    "line_intersection",
    "path_bounding_box",
    "perpendicular_distance",
    "polygon_area",
    "preset_corners",
    "preset_polygon",
    "segments_intersect",
    "set_edge_profile",
    "signed_area",
    "simplify",
    "simplify_to_limit",
    "unit_normals",
    "would_auto_close",
]
