"""Douglas-Peucker line simplification, by epsilon or by target point count."""

import logging
import math
from typing import Any, List, Mapping, Sequence

from ..coercion import extract_xy

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 50


def perpendicular_distance(
    px: float, py: float, ax: float, ay: float, bx: float, by: float
) -> float:
    """
    Distance from point P to the line through A and B.

    Falls back to the Euclidean distance |PA| when A and B coincide.
    """
    dx = bx - ax
    dy = by - ay

    if dx == 0 and dy == 0:
        return math.hypot(px - ax, py - ay)

    # Relative to A so large x offsets (epoch ms) do not cancel out
    return abs(dy * (px - ax) - dx * (py - ay)) / math.hypot(dx, dy)


def douglas_peucker_indices(
    xs: Sequence[float], ys: Sequence[float], epsilon: float
) -> List[int]:
    """
    Indices kept by Douglas-Peucker simplification at a fixed epsilon.

    Uses an explicit stack of (start, end) segments instead of recursion.
    """
    n = len(xs)
    if n <= 2 or epsilon <= 0:
        return list(range(n))

    keep = [False] * n
    keep[0] = keep[n - 1] = True
    stack = [(0, n - 1)]

    while stack:
        start, end = stack.pop()
        if end - start <= 1:
            continue

        ax, ay, bx, by = xs[start], ys[start], xs[end], ys[end]
        max_distance = 0.0
        max_index = start
        for i in range(start + 1, end):
            distance = perpendicular_distance(xs[i], ys[i], ax, ay, bx, by)
            if distance > max_distance:
                max_distance = distance
                max_index = i

        if max_distance > epsilon:
            keep[max_index] = True
            stack.append((start, max_index))
            stack.append((max_index, end))

    return [i for i in range(n) if keep[i]]


def douglas_peucker_target_indices(
    xs: Sequence[float],
    ys: Sequence[float],
    target: int,
    max_iterations: int = MAX_ITERATIONS,
) -> List[int]:
    """
    Binary-search epsilon so the simplification lands at or just under target.

    Args:
        xs: Numeric x values
        ys: Numeric y values
        target: Maximum number of points to keep
        max_iterations: Cap on simplification passes

    Returns:
        Increasing list of kept indices, never longer than target
    """
    n = len(xs)
    if n <= target or target < 2:
        return list(range(n))

    data_range = math.hypot(max(xs) - min(xs), max(ys) - min(ys))

    # Simplification at an unbounded epsilon keeps only the endpoints
    best = [0, n - 1]
    if data_range == 0:
        return best

    low = 0.0
    high = data_range / 2

    for _ in range(max_iterations):
        mid = (low + high) / 2
        simplified = douglas_peucker_indices(xs, ys, mid)

        if len(simplified) > target:
            low = mid
            continue

        if len(simplified) > len(best):
            best = simplified
        if target - len(simplified) <= 1:
            return simplified
        high = mid

    logger.warning(
        f"Epsilon search did not converge in {max_iterations} iterations, "
        f"returning {len(best)} of {target} target points"
    )
    return best


def douglas_peucker(data: Sequence[Mapping[str, Any]], epsilon: float) -> List[Mapping[str, Any]]:
    """Simplify a series with a fixed distance threshold."""
    if len(data) <= 2 or epsilon <= 0:
        return list(data)

    xs, ys = extract_xy(data)
    return [data[i] for i in douglas_peucker_indices(xs, ys, epsilon)]


def douglas_peucker_sample(
    data: Sequence[Mapping[str, Any]],
    target: int,
    max_iterations: int = MAX_ITERATIONS,
) -> List[Mapping[str, Any]]:
    """
    Simplify a series down to at most `target` points.

    Good for preserving sharp turns; cost grows with the epsilon search.
    """
    if len(data) <= target or target < 2:
        return list(data)

    xs, ys = extract_xy(data)
    return [data[i] for i in douglas_peucker_target_indices(xs, ys, target, max_iterations)]
