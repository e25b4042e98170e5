"""Point file reader.

Point files are JSON documents holding an ordered point sequence in one of
three shapes:

- ``[[x, y], [x, y], ...]``
- ``[{"x": x, "y": y}, ...]``
- ``{"points": <either of the above>}``
"""

import json
from pathlib import Path
from typing import Any

from shadesail.domain import Point
from shadesail.exceptions import PointsFileError


def parse_points(data: Any) -> list[Point]:
    """Convert decoded JSON into points.

    Args:
        data: Decoded JSON document

    Returns:
        List of points in document order

    Raises:
        ValueError: If the document does not describe a point sequence
    """
    if isinstance(data, dict):
        if "points" not in data:
            raise ValueError("object has no 'points' key")
        data = data["points"]

    if not isinstance(data, list):
        raise ValueError(f"expected a list of points, got {type(data).__name__}")

    points: list[Point] = []
    for i, item in enumerate(data):
        if isinstance(item, dict):
            try:
                points.append(Point.from_dict(item))
            except (KeyError, TypeError, ValueError) as e:
                raise ValueError(f"point {i} is not an {{x, y}} object") from e
        elif isinstance(item, (list, tuple)) and len(item) == 2:
            try:
                points.append(Point(float(item[0]), float(item[1])))
            except (TypeError, ValueError) as e:
                raise ValueError(f"point {i} has non-numeric coordinates") from e
        else:
            raise ValueError(f"point {i} must be [x, y] or {{x, y}}")

    return points


def load_points(path: Path) -> list[Point]:
    """Load a point sequence from a JSON file.

    Args:
        path: Path to the JSON file

    Returns:
        List of points

    Raises:
        PointsFileError: If the file is missing, unreadable or malformed
    """
    if not path.exists():
        raise PointsFileError(str(path), "file not found")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise PointsFileError(str(path), str(e)) from e

    try:
        return parse_points(data)
    except ValueError as e:
        raise PointsFileError(str(path), str(e)) from e
