"""Command-line interface for shadesail.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Stock shapes and explicit polygons to SVG path data
- Freehand point replay with auto-close detection
- Perspective transform estimation from presets or corner files
"""

from shadesail.cli.app import cli, main

__all__ = ["cli", "main"]
