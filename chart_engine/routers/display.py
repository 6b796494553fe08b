"""Display router: level of detail and renderer mode."""

from fastapi import APIRouter

from ..config import settings
from ..models import LODRequest, LODResponse, RenderModeRequest, RenderModeResponse
from ..rendering.lod import determine_lod_level
from ..rendering.render_mode import get_render_method_with_webgl

router = APIRouter()


@router.post("/lod", response_model=LODResponse)
async def lod(request: LODRequest):
    """Detail tier for a point count, zoom level and viewport."""
    config = determine_lod_level(request.point_count, request.zoom_level, request.viewport)
    return LODResponse(
        level=config.level,
        max_points=config.max_points,
        show_grid=config.show_grid,
        show_labels=config.show_labels,
        show_markers=config.show_markers,
        marker_size=config.marker_size,
        line_width=config.line_width,
    )


@router.post("/render-mode", response_model=RenderModeResponse)
async def render_mode(request: RenderModeRequest):
    """Drawing backend for a point count and viewport."""
    webgl_supported = request.webgl_supported
    if webgl_supported is None:
        webgl_supported = settings.webgl_supported

    mode = get_render_method_with_webgl(request.point_count, request.viewport, webgl_supported)
    return RenderModeResponse(mode=mode)
