"""Distance calculations for the sector grid."""

import math


def euclidean_distance(x1: int, y1: int, x2: int, y2: int) -> float:
    """Calculate straight-line distance between two sector cells.

    Args:
        x1: X coordinate of first point
        y1: Y coordinate of first point
        x2: X coordinate of second point
        y2: Y coordinate of second point

    Returns:
        Euclidean distance, unrounded

    Examples:
        >>> euclidean_distance(1, 1, 4, 5)
        5.0
    """
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    return math.sqrt(dx * dx + dy * dy)
