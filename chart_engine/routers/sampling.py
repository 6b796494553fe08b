"""Sampling router."""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException

from ..config import settings
from ..models import (
    AnalyzeRequest,
    AnalyzeResponse,
    BatchSampleRequest,
    BatchSampleResponse,
    DataPoint,
    EvaluateRequest,
    EvaluateResponse,
    SampleRequest,
    SampleResponse,
    SamplingMethod,
    SamplingOptions,
)
from ..sampling.adaptive import analyze_data_characteristics, get_optimal_sampling_method
from ..sampling.dispatch import SamplingResult, sample_data, sample_multiple_series
from ..sampling.quality import evaluate_sampling_methods

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_series(points: List[DataPoint]) -> List[Dict[str, Any]]:
    """Convert validated points to plain dicts, rejecting oversized series."""
    if len(points) > settings.max_series_points:
        raise HTTPException(
            status_code=413,
            detail=f"Series has {len(points)} points, limit is {settings.max_series_points}",
        )
    return [p.model_dump() for p in points]


def _resolve_options(options: Optional[SamplingOptions]) -> SamplingOptions:
    if options is not None:
        return options
    return SamplingOptions(
        method=SamplingMethod(settings.default_method),
        target_points=settings.default_target_points,
    )


def _to_response(result: SamplingResult) -> SampleResponse:
    return SampleResponse(
        data=result.data,
        original_count=result.original_count,
        sampled_count=result.sampled_count,
        method=result.method,
    )


@router.post("/sample", response_model=SampleResponse)
async def sample(request: SampleRequest):
    """Downsample one series."""
    series = _to_series(request.data)
    return _to_response(sample_data(series, _resolve_options(request.options)))


@router.post("/batch", response_model=BatchSampleResponse)
async def sample_batch(request: BatchSampleRequest):
    """Downsample several independent series with shared options."""
    if not request.series:
        raise HTTPException(status_code=400, detail="No series supplied")

    series_map = {series_id: _to_series(points) for series_id, points in request.series.items()}
    results = sample_multiple_series(series_map, _resolve_options(request.options))

    logger.info(f"Sampled batch of {len(results)} series")

    return BatchSampleResponse(
        results={series_id: _to_response(result) for series_id, result in results.items()}
    )


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(request: AnalyzeRequest):
    """Classify a series and recommend a sampling method."""
    series = _to_series(request.data)
    characteristics = analyze_data_characteristics(series)
    return AnalyzeResponse(
        is_time_series=characteristics.is_time_series,
        has_high_variance=characteristics.has_high_variance,
        density=characteristics.density,
        is_collinear=characteristics.is_collinear,
        is_xy_identical=characteristics.is_xy_identical,
        recommended_method=get_optimal_sampling_method(
            series, request.target_points, request.is_time_series
        ),
    )


@router.post("/evaluate", response_model=EvaluateResponse)
async def evaluate(request: EvaluateRequest):
    """Score each primitive sampler on the series."""
    series = _to_series(request.data)
    result = evaluate_sampling_methods(series, request.target_points)
    return EvaluateResponse(best_method=result.best_method, scores=result.scores)
