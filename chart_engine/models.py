"""Pydantic models for sampling options and API request/response schemas."""

from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class SamplingMethod(str, Enum):
    """Downsampling algorithm requested by (or reported to) the caller."""

    LTTB = "lttb"
    NTH_POINT = "nth-point"
    DOUGLAS_PEUCKER = "douglas-peucker"
    ADAPTIVE = "adaptive"
    AUTO = "auto"
    NONE = "none"


class RenderMode(str, Enum):
    """Drawing backend tier."""

    SVG = "svg"
    CANVAS = "canvas"
    WEBGL = "webgl"


class LODLevel(str, Enum):
    """Level-of-detail tier."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SamplingOptions(BaseModel):
    """Options for a single sampling request."""

    method: SamplingMethod = SamplingMethod.AUTO
    target_points: int = Field(
        ..., ge=1, validation_alias=AliasChoices("target_points", "targetPoints")
    )
    preserve_extremes: bool = Field(
        default=True,
        validation_alias=AliasChoices("preserve_extremes", "preserveExtremes"),
    )
    chart_type: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("chart_type", "chartType")
    )
    is_time_series: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("is_time_series", "isTimeSeries"),
    )
    threshold: Optional[int] = Field(default=None, ge=3)


class Viewport(BaseModel):
    """Drawing area in pixels."""

    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)

    @property
    def pixel_count(self) -> float:
        return self.width * self.height


class DataPoint(BaseModel):
    """Single chart data point; extra fields are carried through."""

    model_config = ConfigDict(extra="allow")

    x: Union[float, str, datetime, date]
    y: float


class SampleRequest(BaseModel):
    """Sampling request for one series."""

    data: List[DataPoint]
    options: Optional[SamplingOptions] = None


class SampleResponse(BaseModel):
    """Sampled series with counts."""

    data: List[Dict[str, Any]]
    original_count: int
    sampled_count: int
    method: SamplingMethod


class BatchSampleRequest(BaseModel):
    """Sampling request for several independent series."""

    series: Dict[str, List[DataPoint]]
    options: Optional[SamplingOptions] = None


class BatchSampleResponse(BaseModel):
    """Per-series sampling results."""

    results: Dict[str, SampleResponse]


class AnalyzeRequest(BaseModel):
    """Series to classify."""

    data: List[DataPoint]
    target_points: int = Field(default=1000, ge=1)
    is_time_series: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("is_time_series", "isTimeSeries"),
    )


class AnalyzeResponse(BaseModel):
    """Series characteristics and recommended method."""

    is_time_series: bool
    has_high_variance: bool
    density: float
    is_collinear: bool
    is_xy_identical: bool
    recommended_method: SamplingMethod


class EvaluateRequest(BaseModel):
    """Series to score against each sampler."""

    data: List[DataPoint]
    target_points: int = Field(..., ge=1)


class EvaluateResponse(BaseModel):
    """Sampler comparison."""

    best_method: str
    scores: Dict[str, float]


class LODRequest(BaseModel):
    """Inputs for the level-of-detail classifier."""

    point_count: int = Field(..., ge=0)
    zoom_level: float = 1.0
    viewport: Viewport


class LODResponse(BaseModel):
    """Display parameters for a detail tier."""

    level: LODLevel
    max_points: int
    show_grid: bool
    show_labels: bool
    show_markers: bool
    marker_size: float
    line_width: float


class RenderModeRequest(BaseModel):
    """Inputs for the renderer-mode selector."""

    point_count: int = Field(..., ge=0)
    viewport: Viewport
    webgl_supported: Optional[bool] = None


class RenderModeResponse(BaseModel):
    """Selected drawing backend."""

    mode: RenderMode


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
