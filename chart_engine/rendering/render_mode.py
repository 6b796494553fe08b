"""Renderer-mode selection from point density and GPU capability."""

import math

from ..models import RenderMode, Viewport

CANVAS_DENSITY = 0.1

WEBGL_MIN_POINTS = 10000
WEBGL_CANVAS_DENSITY = 0.01
WEBGL_CANVAS_MIN_POINTS = 100


def _point_density(point_count: int, viewport: Viewport) -> float:
    """Points per pixel; a zero-area viewport is infinitely dense."""
    pixels = viewport.pixel_count
    if pixels <= 0:
        return math.inf if point_count > 0 else 0.0
    return point_count / pixels


def get_render_method(point_count: int, viewport: Viewport) -> RenderMode:
    """Canvas above 0.1 points per pixel, SVG otherwise."""
    if _point_density(point_count, viewport) > CANVAS_DENSITY:
        return RenderMode.CANVAS
    return RenderMode.SVG


def get_render_method_with_webgl(
    point_count: int, viewport: Viewport, webgl_supported: bool = True
) -> RenderMode:
    """
    Three-tier selection including GPU-batched rendering.

    WebGL for more than 10000 points when the host supports it; otherwise
    canvas above 0.01 points per pixel or 100 points, and SVG below that.
    """
    if point_count > WEBGL_MIN_POINTS and webgl_supported:
        return RenderMode.WEBGL

    density = _point_density(point_count, viewport)
    if density > WEBGL_CANVAS_DENSITY or point_count > WEBGL_CANVAS_MIN_POINTS:
        return RenderMode.CANVAS

    return RenderMode.SVG
