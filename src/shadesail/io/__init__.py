"""File I/O layer for shadesail.

This module reads point sequences from JSON files and serializes sail
paths into SVG path data and JSON. It sits at the edge of the engine; the
core never touches the filesystem.

Key functions:
- load_points: Load a point sequence from a JSON file
- format_path_data: Draw commands to an SVG path data string
- sail_to_dict: Sail description with rebuilt path data
- write_json: Write a JSON document
"""

from shadesail.io.reader import load_points, parse_points
from shadesail.io.writer import format_number, format_path_data, sail_to_dict, write_json

__all__ = [
    "format_number",
    "format_path_data",
    "load_points",
    "parse_points",
    "sail_to_dict",
    "write_json",
]
