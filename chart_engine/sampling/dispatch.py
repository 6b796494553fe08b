"""Public sampling entry points: method dispatch and extremes preservation."""

import logging
from concurrent.futures import Executor
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..coercion import extract_xy
from ..models import SamplingMethod, SamplingOptions
from .adaptive import adaptive_indices
from .douglas_peucker import douglas_peucker_target_indices
from .lttb import lttb_indices
from .nth_point import stratified_nth_point_indices

logger = logging.getLogger(__name__)


@dataclass
class SamplingResult:
    """Outcome of sampling one series."""

    data: List[Mapping[str, Any]] = field(default_factory=list)
    original_count: int = 0
    sampled_count: int = 0
    method: SamplingMethod = SamplingMethod.NONE


def _select_indices(
    data: Sequence[Mapping[str, Any]], options: SamplingOptions
) -> List[int]:
    n = len(data)
    target = options.target_points
    method = options.method

    if method == SamplingMethod.NTH_POINT:
        return stratified_nth_point_indices(n, target)

    # LTTB is undefined below 3 output points; the endpoints are the best fit
    if target < 3:
        return [0, n - 1]

    xs, ys = extract_xy(data)

    if method == SamplingMethod.LTTB:
        return lttb_indices(xs, ys, target)
    if method == SamplingMethod.DOUGLAS_PEUCKER:
        return douglas_peucker_target_indices(xs, ys, target)
    return adaptive_indices(xs, ys, target, options.threshold)


def _preserve_extremes(indices: List[int], n: int, capacity: int) -> List[int]:
    """
    Make index 0 and index n - 1 the ends of the selection.

    A missing endpoint is inserted while the selection is below capacity,
    otherwise it replaces the outermost selected index.
    """
    indices = list(indices)

    if not indices or indices[0] != 0:
        if len(indices) < capacity:
            indices.insert(0, 0)
        else:
            indices[0] = 0

    if indices[-1] != n - 1:
        if len(indices) < capacity:
            indices.append(n - 1)
        else:
            indices[-1] = n - 1

    return indices


def sample_data(
    data: Sequence[Mapping[str, Any]], options: SamplingOptions
) -> SamplingResult:
    """
    Downsample a series with the requested (or automatically chosen) method.

    Series that already fit the target, and requests for method "none", come
    back unchanged and report method "none". With preserve_extremes the first
    and last input points always bound the output, and the output never
    exceeds max(target_points, 2) points.

    Args:
        data: Series of {x, y} points; extra keys pass through untouched
        options: Sampling options

    Returns:
        SamplingResult holding the original point objects that were kept
    """
    if not data:
        return SamplingResult(data=[], original_count=0, sampled_count=0, method=options.method)

    n = len(data)
    if n <= options.target_points or options.method == SamplingMethod.NONE:
        return SamplingResult(
            data=list(data),
            original_count=n,
            sampled_count=n,
            method=SamplingMethod.NONE,
        )

    indices = _select_indices(data, options)

    if options.preserve_extremes:
        indices = _preserve_extremes(indices, n, max(options.target_points, 2))

    sampled = [data[i] for i in indices]

    logger.debug(f"Sampled {n} -> {len(sampled)} points using {options.method.value}")

    return SamplingResult(
        data=sampled,
        original_count=n,
        sampled_count=len(sampled),
        method=options.method,
    )


def sample_multiple_series(
    series_map: Mapping[str, Sequence[Mapping[str, Any]]],
    options: SamplingOptions,
    executor: Optional[Executor] = None,
) -> Dict[str, SamplingResult]:
    """
    Apply the same options independently to every series.

    Args:
        series_map: Series keyed by id
        options: Sampling options shared by all series
        executor: Optional executor to spread series across workers

    Returns:
        Results keyed by the same ids, in input order
    """
    if executor is None:
        return {series_id: sample_data(data, options) for series_id, data in series_map.items()}

    futures = {
        series_id: executor.submit(sample_data, data, options)
        for series_id, data in series_map.items()
    }
    return {series_id: future.result() for series_id, future in futures.items()}
