"""Nth-point decimation: plain, stratified and jittered variants.

These samplers only look at positions, never at y values, so they are fast
but can step over isolated spikes.
"""

import random
from typing import Any, List, Mapping, Optional, Sequence


def nth_point_indices(n: int, target: int) -> List[int]:
    """Every step-th index (step = n // target), always ending on the last."""
    if n <= target:
        return list(range(n))
    if target < 2:
        return [0]

    step = n // target
    indices: List[int] = []
    for i in range(0, n, step):
        indices.append(i)
        if len(indices) >= target - 1:
            break

    # Always include last point if not already included
    if indices[-1] != n - 1:
        indices.append(n - 1)

    return indices


def stratified_nth_point_indices(n: int, target: int) -> List[int]:
    """Middle index of each of `target` equal-width strata."""
    if n <= target:
        return list(range(n))

    strata_size = n / target
    indices = []
    for i in range(target):
        start = int(i * strata_size)
        end = int((i + 1) * strata_size)
        middle = (start + end) // 2
        if middle < n:
            indices.append(middle)

    return indices


def random_nth_point_indices(n: int, target: int, seed: Optional[int] = None) -> List[int]:
    """
    Nth-point decimation with each step jittered by up to 25%.

    Breaks up the systematic aliasing of a fixed stride on periodic signals.
    First and last indices are always kept and the output stays strictly
    increasing.
    """
    if n <= target:
        return list(range(n))
    if target < 3:
        return [0, n - 1][:max(target, 1)]

    rng = random.Random(seed)
    avg_step = n / target

    indices = [0]
    current = 0
    for _ in range(1, target - 1):
        step = max(1, int(avg_step * (0.75 + rng.random() * 0.5)))
        current = min(current + step, n - 2)
        if current <= indices[-1]:
            break
        indices.append(current)

    indices.append(n - 1)
    return indices


def nth_point_sample(data: Sequence[Mapping[str, Any]], target: int) -> List[Mapping[str, Any]]:
    """Plain nth-point sampling; keeps the first and last point."""
    return [data[i] for i in nth_point_indices(len(data), target)]


def stratified_nth_point_sample(
    data: Sequence[Mapping[str, Any]], target: int
) -> List[Mapping[str, Any]]:
    """Stratified nth-point sampling; more even coverage than plain decimation."""
    return [data[i] for i in stratified_nth_point_indices(len(data), target)]


def random_nth_point_sample(
    data: Sequence[Mapping[str, Any]], target: int, seed: Optional[int] = None
) -> List[Mapping[str, Any]]:
    """Jittered nth-point sampling, reproducible when a seed is given."""
    return [data[i] for i in random_nth_point_indices(len(data), target, seed)]
