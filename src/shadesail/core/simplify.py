"""Path simplification using the Ramer-Douglas-Peucker algorithm.

Reduces a captured point sequence to a tolerance-bounded polyline. The
output is always a subsequence of the input with both endpoints preserved.
"""

import structlog

from shadesail.core.geometry import perpendicular_distance
from shadesail.domain import Point

logger = structlog.get_logger("shadesail.simplify")


def simplify(points: list[Point], tolerance: float) -> list[Point]:
    """Ramer-Douglas-Peucker simplification.

    Recursively finds the point farthest from the segment joining the first
    and last points. If it lies farther than ``tolerance`` the sequence is
    split there and both halves are simplified independently; otherwise the
    whole run collapses to its two endpoints.

    Args:
        points: Ordered points to simplify
        tolerance: Maximum allowed distance of a dropped point (>= 0)

    Returns:
        Simplified list of points. Inputs of length <= 2 are returned unchanged.

    Raises:
        ValueError: If tolerance is negative
    """
    if tolerance < 0:
        raise ValueError(f"Tolerance must be non-negative, got {tolerance}")

    if len(points) <= 2:
        return list(points)

    start = points[0]
    end = points[-1]

    max_distance = 0.0
    max_index = 0
    for i in range(1, len(points) - 1):
        d = perpendicular_distance(points[i], start, end)
        if d > max_distance:
            max_distance = d
            max_index = i

    if max_distance > tolerance:
        left = simplify(points[: max_index + 1], tolerance)
        right = simplify(points[max_index:], tolerance)
        # Split point ends left and starts right
        return left + right[1:]

    return [start, end]


def simplify_to_limit(
    points: list[Point],
    tolerance: float,
    max_points: int,
    growth: float = 2.0,
    max_passes: int = 4,
) -> tuple[list[Point], float]:
    """Simplify, growing the tolerance until the result fits ``max_points``.

    Each pass re-simplifies the original points with the tolerance multiplied
    by ``growth``. After ``max_passes`` growth steps the last result is
    returned even if it is still above the cap.

    Args:
        points: Ordered points to simplify
        tolerance: Starting tolerance
        max_points: Desired maximum output length
        growth: Tolerance multiplier per pass (> 1)
        max_passes: Maximum number of re-simplification passes

    Returns:
        Tuple of (simplified points, tolerance actually used)
    """
    result = simplify(points, tolerance)
    used = tolerance

    passes = 0
    while len(result) > max_points and passes < max_passes:
        # A zero tolerance cannot grow multiplicatively
        used = used * growth if used > 0 else 1.0
        result = simplify(points, used)
        passes += 1

    logger.debug(
        "Simplified path",
        points_before=len(points),
        points_after=len(result),
        tolerance=tolerance,
        tolerance_used=used,
        passes=passes,
    )
    return result, used
