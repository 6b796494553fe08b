"""Level-of-detail classification from data density and zoom."""

import math
from dataclasses import dataclass
from typing import Any, List, Mapping, Sequence

from ..models import LODLevel, Viewport
from ..sampling.douglas_peucker import douglas_peucker_sample

# pixels-per-point and effective-point limits per tier
LOW_PIXELS_PER_POINT = 10
LOW_EFFECTIVE_POINTS = 5000
MEDIUM_PIXELS_PER_POINT = 50
MEDIUM_EFFECTIVE_POINTS = 1000


@dataclass(frozen=True)
class LODConfig:
    """Display parameters for one detail tier."""

    level: LODLevel
    max_points: int
    show_grid: bool
    show_labels: bool
    show_markers: bool
    marker_size: float
    line_width: float


LOW_DETAIL = LODConfig(
    level=LODLevel.LOW,
    max_points=500,
    show_grid=False,
    show_labels=False,
    show_markers=False,
    marker_size=0,
    line_width=1,
)

MEDIUM_DETAIL = LODConfig(
    level=LODLevel.MEDIUM,
    max_points=1000,
    show_grid=True,
    show_labels=True,
    show_markers=False,
    marker_size=0,
    line_width=1.5,
)

HIGH_DETAIL = LODConfig(
    level=LODLevel.HIGH,
    max_points=5000,
    show_grid=True,
    show_labels=True,
    show_markers=True,
    marker_size=3,
    line_width=2,
)


def determine_lod_level(
    point_count: int, zoom_level: float, viewport: Viewport
) -> LODConfig:
    """
    Pick a detail tier for the points visible at the current zoom.

    Args:
        point_count: Number of points in the series
        zoom_level: Zoom factor; values <= 0 are treated as 1
        viewport: Drawing area in pixels

    Returns:
        The LODConfig of the first matching tier (low, medium, then high)
    """
    if zoom_level <= 0:
        zoom_level = 1

    effective_points = point_count / zoom_level
    if effective_points > 0:
        pixels_per_point = viewport.pixel_count / effective_points
    else:
        pixels_per_point = math.inf

    if pixels_per_point < LOW_PIXELS_PER_POINT or effective_points > LOW_EFFECTIVE_POINTS:
        return LOW_DETAIL
    if pixels_per_point < MEDIUM_PIXELS_PER_POINT or effective_points > MEDIUM_EFFECTIVE_POINTS:
        return MEDIUM_DETAIL
    return HIGH_DETAIL


def simplify_for_lod(
    data: Sequence[Mapping[str, Any]], lod_config: LODConfig
) -> List[Mapping[str, Any]]:
    """Douglas-Peucker the series down to the tier's point budget."""
    if len(data) <= lod_config.max_points:
        return list(data)
    return douglas_peucker_sample(data, lod_config.max_points)
