"""Path data writer.

Serializes draw commands into SVG path data (``M x y Q cx cy x y ... Z``),
the string a rendering surface consumes, and into JSON for inspection.
"""

import json
from pathlib import Path
from typing import Any

from shadesail.core.path_builder import build_sail_path
from shadesail.domain import PathCommands, Sail


def format_number(value: float, precision: int = 3) -> str:
    """Format a coordinate without trailing zeros.

    Examples:
        >>> format_number(100.0)
        '100'
        >>> format_number(8.12345)
        '8.123'
    """
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def format_path_data(commands: PathCommands, precision: int = 3) -> str:
    """Join commands into an SVG path data string.

    Args:
        commands: Draw commands
        precision: Decimal places kept for coordinates

    Returns:
        Space-separated path data
    """
    tokens: list[str] = []
    for command in commands:
        tokens.append(command.LETTER)
        tokens.extend(format_number(v, precision) for v in command.coordinates())
    return " ".join(tokens)


def sail_to_dict(sail: Sail, precision: int = 3) -> dict[str, Any]:
    """Sail description including its rebuilt path data."""
    data = sail.to_dict()
    data["path"] = format_path_data(build_sail_path(sail), precision)
    return data


def write_json(data: Any, path: Path) -> Path:
    """Write a JSON document, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return path
