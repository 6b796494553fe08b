"""Adaptive selection and chaining of the primitive samplers."""

import logging
import math
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence

from ..coercion import extract_xy, to_number
from ..collinearity import is_collinear, is_xy_identical
from ..models import SamplingMethod
from .lttb import lttb_indices
from .nth_point import nth_point_indices

logger = logging.getLogger(__name__)

# Largest series handed to LTTB in a single pass
LTTB_DIRECT_LIMIT = 5000
# Above this, a second nth-point stage is inserted before LTTB
TWO_STAGE_LIMIT = 50000
# Size of the first nth-point stage for very large series
PRESAMPLE_POINTS = 5000

# Series above this many points always go through the adaptive chain
ADAPTIVE_FORCE_LIMIT = 10000
# Reduction ratios below this are cheap enough for plain LTTB
LTTB_RATIO_LIMIT = 10

PROBE_SIZE = 100
HIGH_VARIANCE_RATIO = 0.2


@dataclass
class DataCharacteristics:
    """Shape summary of a series, probed from a prefix and a strided sample."""

    is_time_series: bool
    has_high_variance: bool
    density: float
    is_collinear: bool = False
    is_xy_identical: bool = False


def adaptive_indices(
    xs: Sequence[float],
    ys: Sequence[float],
    target: int,
    threshold: Optional[int] = None,
) -> List[int]:
    """
    Choose and chain samplers by series size; returns selected indices.

    Up to `threshold` (default 5000) points go straight to LTTB. Up to 50000
    points are first decimated to 2 * target with nth-point. Larger series are
    decimated to `threshold` points, then to 2 * target, then finished with
    LTTB.
    """
    n = len(xs)
    if n <= target:
        return list(range(n))

    direct_limit = threshold or LTTB_DIRECT_LIMIT
    if n <= direct_limit:
        return lttb_indices(xs, ys, target)

    if n <= TWO_STAGE_LIMIT:
        stages = [2 * target]
    else:
        stages = [threshold or PRESAMPLE_POINTS, 2 * target]

    # Each stage indexes into the previous stage's selection
    selected = list(range(n))
    for stage_target in stages:
        picked = nth_point_indices(len(selected), stage_target)
        selected = [selected[i] for i in picked]
        logger.debug(f"Nth-point stage: {n} -> {len(selected)} points")

    stage_xs = [xs[i] for i in selected]
    stage_ys = [ys[i] for i in selected]
    return [selected[i] for i in lttb_indices(stage_xs, stage_ys, target)]


def adaptive_sample(
    data: Sequence[Mapping[str, Any]],
    target: int,
    threshold: Optional[int] = None,
) -> List[Mapping[str, Any]]:
    """
    Downsample with the best sampler (or chain of samplers) for the series size.

    Args:
        data: Series of {x, y} points
        target: Target number of points
        threshold: Optional override of the single-pass LTTB ceiling and of
            the first-stage size for very large series

    Returns:
        Downsampled list of the original point objects
    """
    if len(data) <= target:
        return list(data)

    xs, ys = extract_xy(data)
    return [data[i] for i in adaptive_indices(xs, ys, target, threshold)]


def _is_monotonic(data: Sequence[Mapping[str, Any]]) -> bool:
    """True if x strictly increases over the first PROBE_SIZE points."""
    prev_x = None
    for point in data[:PROBE_SIZE]:
        x = to_number(point["x"])
        if prev_x is not None and x <= prev_x:
            return False
        prev_x = x
    return True


def analyze_data_characteristics(data: Sequence[Mapping[str, Any]]) -> DataCharacteristics:
    """
    Classify a series as time series, estimate y variance and x density.

    Variance is "high" when the standard deviation of a strided sample of up
    to 100 y values exceeds 20% of its mean magnitude. Density is points per
    unit of x range, 0 when the range is empty.
    """
    n = len(data)
    if n < 10:
        return DataCharacteristics(
            is_time_series=_is_monotonic(data) if n >= 2 else False,
            has_high_variance=False,
            density=0.0,
        )

    sample_size = min(PROBE_SIZE, n)
    step = max(1, n // sample_size)
    sample = [float(data[i]["y"]) for i in range(0, n, step)][:sample_size]

    mean = sum(sample) / len(sample)
    variance = sum((y - mean) ** 2 for y in sample) / len(sample)
    std_dev = math.sqrt(variance)

    x_range = to_number(data[-1]["x"]) - to_number(data[0]["x"])
    density = n / x_range if x_range else 0.0

    return DataCharacteristics(
        is_time_series=_is_monotonic(data),
        has_high_variance=std_dev > abs(mean) * HIGH_VARIANCE_RATIO,
        density=density,
        is_collinear=is_collinear(data),
        is_xy_identical=is_xy_identical(data),
    )


def get_optimal_sampling_method(
    data: Sequence[Mapping[str, Any]],
    target: int,
    is_time_series: Optional[bool] = None,
) -> SamplingMethod:
    """
    Recommend a sampling method for a series.

    Args:
        data: Series of {x, y} points
        target: Target number of points
        is_time_series: Caller hint; skips monotonicity detection when set

    Returns:
        The recommended SamplingMethod
    """
    n = len(data)
    if n <= target:
        return SamplingMethod.NONE

    if n > ADAPTIVE_FORCE_LIMIT:
        return SamplingMethod.ADAPTIVE

    if n / target < LTTB_RATIO_LIMIT:
        return SamplingMethod.LTTB

    if is_time_series is None:
        is_time_series = _is_monotonic(data)

    return SamplingMethod.LTTB if is_time_series else SamplingMethod.DOUGLAS_PEUCKER
