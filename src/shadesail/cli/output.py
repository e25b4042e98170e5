"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from shadesail.core.perspective import ObjectTransform
from shadesail.domain import Point, Sail

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_WARN = "!"  # Recoverable warning
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Shadesail[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_points(points: list[Point], title: str = "Points") -> None:
    """Print a point sequence as a table.

    Args:
        points: Points to show
        title: Table title
    """
    table = Table(title=title, show_edge=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for i, point in enumerate(points):
        table.add_row(str(i), f"{point.x:.2f}", f"{point.y:.2f}")
    console.print(table)


def print_capture_progress(point_count: int, auto_closed: bool) -> None:
    """Print the outcome of feeding a point sequence to the capture controller."""
    if auto_closed:
        console.print(f"  {point_count} points {SYM_DOT} [green]auto-closed[/green]")
    else:
        console.print(f"  {point_count} points {SYM_DOT} closed explicitly")


def print_sail_summary(sail: Sail) -> None:
    """Print sail information.

    Args:
        sail: Sail to describe
    """
    curved = sum(sail.curve_profile)
    straight = sail.edge_count - curved
    line = Text("  ")
    line.append(sail.sail_id, style="bold")
    line.append(f" ({sail.source_kind.value}")
    if sail.shape_type:
        line.append(f": {sail.shape_type}")
    line.append(")")
    console.print(line)
    console.print(
        f"  {sail.edge_count} edges {SYM_DOT} {curved} curved {SYM_DOT} "
        f"{straight} straight {SYM_DOT} sag {sail.sag_ratio:g}"
    )
    console.print(f"  area {sail.polygon.area():,.1f}")


def print_transform(transform: ObjectTransform) -> None:
    """Print an object transform as a table.

    Args:
        transform: Transform to show
    """
    table = Table(title="Perspective transform", show_edge=False, min_width=30)
    table.add_column("Property")
    table.add_column("Value", justify="right")
    table.add_row("center x", f"{transform.left:.2f}")
    table.add_row("center y", f"{transform.top:.2f}")
    table.add_row("scale x", f"{transform.scale_x:.4f}")
    table.add_row("scale y", f"{transform.scale_y:.4f}")
    table.add_row("skew x", f"{transform.skew_x:.2f}°")
    table.add_row("skew y", f"{transform.skew_y:.2f}°")
    console.print(table)


def print_success(message: str) -> None:
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")


def print_warning(message: str, details: str | None = None) -> None:
    """Print a recoverable warning.

    Args:
        message: Main warning message
        details: Optional detailed information
    """
    console.print(f"\n[bold yellow]{SYM_WARN} Warning:[/bold yellow] {message}")
    if details:
        console.print(f"  {details}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
