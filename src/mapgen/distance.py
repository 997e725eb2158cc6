"""Distance helpers for integer coordinates."""

import math


def abs_diff(a: int, b: int) -> int:
    """Absolute difference of 2 unsigned values."""
    return a - b if a >= b else b - a


def calculate_distance(x0: int, y0: int, x1: int, y1: int) -> int:
    """Euclidean distance between 2 points, rounded half up."""
    distance = math.hypot(abs_diff(x0, x1), abs_diff(y0, y1))
    return int(distance + 0.5)
