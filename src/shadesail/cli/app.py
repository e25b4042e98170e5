"""CLI application entry point for shadesail.

This module provides the command-line interface using Typer. Each command
reads points from a JSON file (or uses a stock shape), runs the geometry
engine and prints SVG path data or a summary.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from shadesail import __version__
from shadesail.cli.output import (
    console,
    print_capture_progress,
    print_error,
    print_header,
    print_points,
    print_sail_summary,
    print_step,
    print_success,
    print_transform,
    print_warning,
)
from shadesail.config import (
    AxisAdjustment,
    CaptureConfig,
    LoggingConfig,
    SailConfig,
    ShadeSailSettings,
)
from shadesail.core import (
    PerspectiveEditor,
    PerspectivePreset,
    SailWorkspace,
    build_path,
    simplify,
)
from shadesail.domain import BoundingBox, Corner, Polygon, Sail
from shadesail.exceptions import (
    InsufficientGeometryError,
    InvalidPolygonError,
    PointsFileError,
    ShadeSailError,
    WorkspaceError,
)
from shadesail.io import format_path_data, load_points, sail_to_dict
from shadesail.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="shadesail",
    help="Turn polygons into curved-edge shade sail outlines.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Shadesail[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Sail geometry engine: presets, freehand capture, curved paths and perspective."""
    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(f"Invalid log level: {log_level}", details="Valid values: DEBUG, INFO, WARNING, ERROR")
        raise typer.Exit(code=1)

    logging_config = LoggingConfig(log_file=log_file, log_level=log_level.upper())
    configure_logging(
        log_file=logging_config.log_file,
        console_level=logging_config.log_level,
        file_level=logging_config.file_log_level,
        quiet=False,
    )


def _parse_straight_edges(straight: str | None, edge_count: int) -> list[bool]:
    """Build a curve profile from a comma-separated list of straight edge indices."""
    profile = [True] * edge_count
    if not straight:
        return profile

    for token in straight.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            index = int(token)
        except ValueError:
            raise typer.BadParameter(f"'{token}' is not an edge index", param_hint="--straight") from None
        if not 0 <= index < edge_count:
            raise typer.BadParameter(
                f"edge {index} is out of range (0-{edge_count - 1})", param_hint="--straight"
            )
        profile[index] = False
    return profile


def _parse_bbox(bbox: str) -> BoundingBox:
    try:
        left, top, width, height = (float(v) for v in bbox.split(","))
    except ValueError:
        raise typer.BadParameter("expected left,top,width,height", param_hint="--bbox") from None
    return BoundingBox(left, top, width, height)


def _emit_sail(sail: Sail, as_json: bool, quiet: bool) -> None:
    if as_json:
        typer.echo(json.dumps(sail_to_dict(sail), indent=2))
        return

    if not quiet:
        print_step("Sail")
        print_sail_summary(sail)
        print_step("Path data")
    typer.echo(format_path_data(build_path(sail.polygon, sail.curve_profile, sail.sag_ratio)))


@app.command()
def preset(
    shape: Annotated[
        str,
        typer.Argument(help="Stock shape (triangle|square|rectangle)", show_default=False),
    ],
    sag: Annotated[
        float,
        typer.Option("--sag", "-s", help="Inward bow depth as a fraction of edge length", min=0.0),
    ] = 0.08,
    straight: Annotated[
        str | None,
        typer.Option("--straight", help="Comma-separated indices of straight edges"),
    ] = None,
    color: Annotated[
        str | None,
        typer.Option("--color", "-c", help="Fill and stroke color"),
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the sail as JSON")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Print path data only")] = False,
) -> None:
    """Build the sail of a stock shape and print its path data."""
    settings = ShadeSailSettings(sail=SailConfig(sag_ratio=sag))
    workspace = SailWorkspace(settings)

    try:
        sail = workspace.add_preset(shape.lower(), color=color)
        sail = workspace.set_edge_profile(
            sail.sail_id, _parse_straight_edges(straight, sail.edge_count)
        )
    except WorkspaceError as e:
        print_error(str(e), details="Valid shapes: triangle, square, rectangle")
        raise typer.Exit(code=1)

    if not quiet and not as_json:
        print_header(__version__)
    _emit_sail(sail, as_json, quiet)


@app.command()
def path(
    points_file: Annotated[
        Path,
        typer.Argument(help="JSON file with the polygon vertices", show_default=False),
    ],
    sag: Annotated[
        float,
        typer.Option("--sag", "-s", help="Inward bow depth as a fraction of edge length", min=0.0),
    ] = 0.08,
    straight: Annotated[
        str | None,
        typer.Option("--straight", help="Comma-separated indices of straight edges"),
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the sail as JSON")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Print path data only")] = False,
) -> None:
    """Build a sail from explicit polygon vertices and print its path data."""
    try:
        points = load_points(points_file)
        polygon = Polygon(tuple(points))
    except PointsFileError as e:
        print_error(f"Could not load points: {e.reason}")
        raise typer.Exit(code=1)
    except InvalidPolygonError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    workspace = SailWorkspace(ShadeSailSettings(sail=SailConfig(sag_ratio=sag)))
    try:
        sail = workspace.add_polygon(
            polygon, curve_profile=_parse_straight_edges(straight, polygon.edge_count)
        )
    except InsufficientGeometryError as e:
        print_warning("Shape not created", details=f"{e.reason}.")
        raise typer.Exit(code=1)

    if not quiet and not as_json:
        print_header(__version__)
    _emit_sail(sail, as_json, quiet)


@app.command()
def draw(
    points_file: Annotated[
        Path,
        typer.Argument(help="JSON file with the freehand points in placement order", show_default=False),
    ],
    tolerance: Annotated[
        float,
        typer.Option("--tolerance", "-t", help="Simplification tolerance", min=0.0, max=50.0),
    ] = 5.0,
    sag: Annotated[
        float,
        typer.Option("--sag", "-s", help="Inward bow depth as a fraction of edge length", min=0.0),
    ] = 0.08,
    min_area: Annotated[
        float,
        typer.Option("--min-area", help="Minimum enclosed area of a valid sail", min=0.0),
    ] = 1000.0,
    as_json: Annotated[bool, typer.Option("--json", help="Print the sail as JSON")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Print path data only")] = False,
) -> None:
    """Replay freehand points through the capture controller and build the sail.

    Points are placed one at a time. If a point's edge crosses an earlier
    edge the drawing completes itself; otherwise it is finished explicitly
    after the last point.
    """
    try:
        points = load_points(points_file)
    except PointsFileError as e:
        print_error(f"Could not load points: {e.reason}")
        raise typer.Exit(code=1)

    settings = ShadeSailSettings(
        capture=CaptureConfig(tolerance=tolerance, min_area=min_area),
        sail=SailConfig(sag_ratio=sag),
    )
    workspace = SailWorkspace(settings)
    show = not quiet and not as_json

    if show:
        print_header(__version__)
        print_step("Capturing points")

    try:
        workspace.start_drawing()
        sail = None
        for point in points:
            sail = workspace.capture_point(point)
            if sail is not None:
                break
        auto_closed = sail is not None
        if sail is None:
            sail = workspace.finish_drawing()
    except InsufficientGeometryError as e:
        print_warning(
            "Shape not created",
            details=f"{e.reason}. Add more points or lower the tolerance.",
        )
        raise typer.Exit(code=1)
    except ShadeSailError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if show:
        print_capture_progress(sail.polygon.point_count, auto_closed)
    _emit_sail(sail, as_json, quiet)


@app.command(name="simplify")
def simplify_command(
    points_file: Annotated[
        Path,
        typer.Argument(help="JSON file with the points to simplify", show_default=False),
    ],
    tolerance: Annotated[
        float,
        typer.Option("--tolerance", "-t", help="Simplification tolerance", min=0.0),
    ] = 5.0,
    as_json: Annotated[bool, typer.Option("--json", help="Print the points as JSON")] = False,
) -> None:
    """Reduce a point sequence with Ramer-Douglas-Peucker simplification."""
    try:
        points = load_points(points_file)
    except PointsFileError as e:
        print_error(f"Could not load points: {e.reason}")
        raise typer.Exit(code=1)

    result = simplify(points, tolerance)

    if as_json:
        typer.echo(json.dumps([p.to_dict() for p in result], indent=2))
        return

    print_header(__version__)
    print_points(result, title=f"{len(points)} → {len(result)} points")
    print_success("Simplified")


@app.command()
def perspective(
    bbox: Annotated[
        str,
        typer.Option("--bbox", help="Reference rectangle as left,top,width,height", show_default=False),
    ],
    preset_name: Annotated[
        str | None,
        typer.Option("--preset", "-p", help="Preset (normal|tiltLeft|tiltRight|stretch|perspective)"),
    ] = None,
    corners_file: Annotated[
        Path | None,
        typer.Option("--corners", help="JSON file with 4 corners: TL, TR, BL, BR"),
    ] = None,
    x_offset: Annotated[float, typer.Option("--x", help="X-axis offset", min=-200, max=200)] = 0.0,
    y_offset: Annotated[float, typer.Option("--y", help="Y-axis offset", min=-200, max=200)] = 0.0,
    z_depth: Annotated[float, typer.Option("--z", help="Simulated depth", min=-50, max=50)] = 0.0,
    tilt: Annotated[float, typer.Option("--tilt", help="Extra skew x in degrees", min=-45, max=45)] = 0.0,
    depth_angle: Annotated[
        float,
        typer.Option("--perspective", help="Extra skew y in degrees", min=-30, max=30),
    ] = 0.0,
    as_json: Annotated[bool, typer.Option("--json", help="Print the transform as JSON")] = False,
) -> None:
    """Estimate the perspective transform of a corner layout."""
    reference = _parse_bbox(bbox)

    try:
        editor = PerspectiveEditor(reference, ShadeSailSettings().perspective)
        if preset_name is not None:
            editor.apply_preset(preset_name)
        if corners_file is not None:
            corners = load_points(corners_file)
            if len(corners) != 4:
                print_error(f"Expected 4 corners, got {len(corners)}")
                raise typer.Exit(code=1)
            editor.toggle_anchor_mode(True)
            for corner, point in zip(Corner, corners):
                editor.move_anchor(corner, point)
        transform = editor.apply_adjustment(
            AxisAdjustment(
                x_offset=x_offset,
                y_offset=y_offset,
                z_depth=z_depth,
                tilt=tilt,
                perspective=depth_angle,
            )
        )
    except PointsFileError as e:
        print_error(f"Could not load corners: {e.reason}")
        raise typer.Exit(code=1)
    except ShadeSailError as e:
        valid = ", ".join(p.value for p in PerspectivePreset)
        print_error(str(e), details=f"Valid presets: {valid}")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(transform.to_dict(), indent=2))
        return

    print_header(__version__)
    print_transform(transform)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
