"""Offline scoring of sampling results against the original series."""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Sequence

from ..coercion import extract_xy
from ..models import SamplingMethod
from .douglas_peucker import douglas_peucker_target_indices, perpendicular_distance
from .lttb import lttb_indices
from .nth_point import nth_point_indices

logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    """Per-method quality scores in [0, 1]; higher is better."""

    best_method: str
    scores: Dict[str, float] = field(default_factory=dict)


def douglas_peucker_quality(
    xs: Sequence[float], ys: Sequence[float], selected: Sequence[int]
) -> float:
    """
    Score a selection by its worst perpendicular deviation.

    Every original point is measured against the simplified segment whose
    endpoint indices bracket it. The maximum deviation is normalised by the
    y-range and mapped through exp(-2 * deviation).
    """
    n = len(xs)
    if n == 0 or not selected:
        return 0.0
    if len(selected) >= n:
        return 1.0
    if len(selected) == 1:
        only = selected[0]
        max_deviation = max(abs(y - ys[only]) for y in ys)
    else:
        max_deviation = 0.0
        segment = 0
        last_segment = len(selected) - 2
        for i in range(n):
            while segment < last_segment and selected[segment + 1] <= i:
                segment += 1
            a, b = selected[segment], selected[segment + 1]
            distance = perpendicular_distance(xs[i], ys[i], xs[a], ys[a], xs[b], ys[b])
            max_deviation = max(max_deviation, distance)

    y_range = (max(ys) - min(ys)) or 1.0
    return math.exp(-2 * (max_deviation / y_range))


def nth_point_quality(n: int, selected: Sequence[int]) -> float:
    """Score how evenly the selected indices are spread over the series."""
    if n == 0 or not selected:
        return 0.0
    if len(selected) >= n:
        return 1.0
    if len(selected) == 1:
        return 0.0

    ideal_step = n / len(selected)
    total_deviation = 0.0
    for prev, curr in zip(selected, selected[1:]):
        total_deviation += abs((curr - prev) - ideal_step) / ideal_step

    return max(0.0, 1 - total_deviation / (len(selected) - 1))


def evaluate_sampling_methods(
    data: Sequence[Mapping[str, Any]], target: int
) -> EvaluationResult:
    """
    Run each primitive sampler on the same series and score the results.

    LTTB and Douglas-Peucker are scored on shape fidelity; nth-point on
    shape fidelity weighted by how uniform its index gaps are.

    Args:
        data: Series of {x, y} points
        target: Target number of points for every sampler

    Returns:
        EvaluationResult naming the highest-scoring method
    """
    if len(data) <= target:
        return EvaluationResult(best_method=SamplingMethod.NONE.value, scores={"none": 1.0})

    xs, ys = extract_xy(data)
    n = len(data)

    if target < 3:
        # sample_data keeps only the endpoints for the geometric samplers here
        lttb_selected = dp_selected = [0, n - 1]
    else:
        lttb_selected = lttb_indices(xs, ys, target)
        dp_selected = douglas_peucker_target_indices(xs, ys, target)

    selections: Dict[str, List[int]] = {
        SamplingMethod.LTTB.value: lttb_selected,
        SamplingMethod.NTH_POINT.value: nth_point_indices(n, target),
        SamplingMethod.DOUGLAS_PEUCKER.value: dp_selected,
    }

    scores: Dict[str, float] = {}
    for method, selected in selections.items():
        fidelity = douglas_peucker_quality(xs, ys, selected)
        if method == SamplingMethod.NTH_POINT.value:
            fidelity *= nth_point_quality(n, selected)
        scores[method] = fidelity

    # max() keeps the first of equal scores, so insertion order breaks ties
    best_method = max(scores, key=scores.get)

    logger.info(
        "Sampling evaluation: "
        + ", ".join(f"{method}={score:.3f}" for method, score in scores.items())
        + f" -> {best_method}"
    )

    return EvaluationResult(best_method=best_method, scores=scores)
