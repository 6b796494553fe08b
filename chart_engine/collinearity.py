"""Degeneracy checks for collinear or x == y data."""

from typing import Any, List, Mapping, Sequence

from .coercion import to_number

SAMPLE_SIZE = 100


def _sample_indices(n: int) -> List[int]:
    """Evenly spaced probe indices, at most about SAMPLE_SIZE of them."""
    step = max(1, n // min(SAMPLE_SIZE, n))
    return list(range(0, n, step))


def is_collinear(data: Sequence[Mapping[str, Any]], tolerance: float = 1e-10) -> bool:
    """
    Check whether the sampled points of a series lie on one straight line.

    Series with fewer than three distinct points are collinear by definition.

    Args:
        data: Series of {x, y} points
        tolerance: Absolute tolerance on triangle area and cross product

    Returns:
        True if every sampled point is on the line through the first two
        distinct points
    """
    n = len(data)
    if n < 3:
        return True

    probes = [(to_number(data[i]["x"]), float(data[i]["y"])) for i in _sample_indices(n)]

    p1 = p2 = p3 = None
    for point in probes:
        if p1 is None:
            p1 = point
        elif p2 is None:
            if point != p1:
                p2 = point
        elif point != p1 and point != p2:
            p3 = point
            break

    if p1 is None or p2 is None or p3 is None:
        return True

    (x1, y1), (x2, y2), (x3, y3) = p1, p2, p3
    area = abs((x1 * (y2 - y3) + x2 * (y3 - y1) + x3 * (y1 - y2)) / 2)
    if area >= tolerance:
        return False

    for x, y in probes:
        cross = (x2 - x1) * (y - y1) - (y2 - y1) * (x - x1)
        if abs(cross) > tolerance:
            return False

    return True


def is_xy_identical(data: Sequence[Mapping[str, Any]], tolerance: float = 1e-10) -> bool:
    """Check whether x equals y for every sampled point (a perfect diagonal)."""
    n = len(data)
    if n == 0:
        return False

    for i in _sample_indices(n):
        if abs(to_number(data[i]["x"]) - float(data[i]["y"])) > tolerance:
            return False

    return True
