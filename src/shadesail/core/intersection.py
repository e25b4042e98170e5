"""Segment intersection and freehand auto-close detection.

A freehand polygon completes itself when the edge being placed crosses an
earlier, non-adjacent edge of the captured history.
"""

from shadesail.core.geometry import intersection_parameters
from shadesail.domain import Point

# Auto-close needs a closed-off region: at least this many captured points
MIN_POINTS_FOR_AUTO_CLOSE = 3


def segments_intersect(a0: Point, a1: Point, b0: Point, b1: Point) -> bool:
    """Test whether segment a0-a1 crosses segment b0-b1.

    Solves ``a0 + t*(a1 - a0) == b0 + u*(b1 - b0)``; the segments intersect
    when both parameters lie in [0, 1]. Parallel or coincident segments are
    reported as not intersecting. Two non-parallel segments that share an
    endpoint meet only at that endpoint, which is not a crossing.

    Args:
        a0: First endpoint of segment a
        a1: Second endpoint of segment a
        b0: First endpoint of segment b
        b1: Second endpoint of segment b

    Returns:
        True if the segments cross, False otherwise

    Examples:
        >>> segments_intersect(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
        True
        >>> segments_intersect(Point(0, 0), Point(1, 0), Point(1, 0), Point(1, 1))
        False
    """
    params = intersection_parameters(a0, a1, b0, b1)
    if params is None:
        return False

    if a0 in (b0, b1) or a1 in (b0, b1):
        return False

    t, u = params
    return 0 <= t <= 1 and 0 <= u <= 1


def would_auto_close(candidate: Point, history: list[Point]) -> bool:
    """Check whether placing ``candidate`` would cross an earlier edge.

    The in-progress segment runs from the last captured point to the
    candidate. It is tested against every captured edge except the one
    immediately preceding it, which shares its start point.

    Args:
        candidate: Point about to be placed
        history: Points captured so far, in order

    Returns:
        True if at least 3 points are captured and the new segment crosses
        a non-adjacent edge
    """
    if len(history) < MIN_POINTS_FOR_AUTO_CLOSE:
        return False

    last = history[-1]
    if candidate == last:
        return False

    # Edges h[j] -> h[j+1] for j < n-2; edge n-2 ends at ``last``
    for j in range(len(history) - 2):
        if segments_intersect(last, candidate, history[j], history[j + 1]):
            return True

    return False
