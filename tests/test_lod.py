"""Tests for level-of-detail classification."""

import math
from datetime import datetime, timedelta

import pytest

from chart_engine.models import LODLevel, Viewport
from chart_engine.rendering.lod import determine_lod_level, simplify_for_lod


@pytest.fixture
def viewport():
    """Typical chart viewport."""
    return Viewport(width=800, height=600)


def test_dense_data_is_low_detail(viewport):
    """Test more than 5000 effective points selects the low tier."""
    config = determine_lod_level(6000, 1, viewport)

    assert config.level == LODLevel.LOW
    assert config.max_points == 500
    assert not config.show_grid
    assert not config.show_labels
    assert not config.show_markers


def test_medium_detail(viewport):
    """Test 1000-5000 effective points selects the medium tier."""
    config = determine_lod_level(2000, 1, viewport)

    assert config.level == LODLevel.MEDIUM
    assert config.max_points == 1000
    assert config.show_grid and config.show_labels
    assert not config.show_markers


def test_sparse_data_is_high_detail(viewport):
    """Test sparse data gets markers and thicker lines."""
    config = determine_lod_level(1000, 1, viewport)

    assert config.level == LODLevel.HIGH
    assert config.max_points == 5000
    assert config.show_markers
    assert config.marker_size == 3
    assert config.line_width == 2


def test_zoom_reduces_effective_points(viewport):
    """Test zooming in raises the detail tier."""
    assert determine_lod_level(6000, 10, viewport).level == LODLevel.HIGH


def test_small_viewport_is_low_detail():
    """Test fewer than 10 pixels per point selects the low tier."""
    assert determine_lod_level(50, 1, Viewport(width=10, height=10)).level == LODLevel.LOW
    assert determine_lod_level(50, 1, Viewport(width=40, height=40)).level == LODLevel.MEDIUM


def test_degenerate_inputs(viewport):
    """Test zero points and non-positive zoom do not divide by zero."""
    assert determine_lod_level(0, 1, viewport).level == LODLevel.HIGH
    assert determine_lod_level(6000, 0, viewport).level == LODLevel.LOW


def test_simplify_for_lod(viewport):
    """Test the tier's point budget is applied with Douglas-Peucker."""
    data = [{"x": i, "y": (i * 7919) % 101} for i in range(2000)]
    config = determine_lod_level(len(data), 1, viewport)

    simplified = simplify_for_lod(data, config)

    assert len(simplified) <= config.max_points
    assert simplify_for_lod(data[:100], config) == data[:100]


def test_simplify_for_lod_with_timestamps(viewport):
    """Test timestamped data is simplified close to the tier budget."""
    start = datetime(2024, 1, 1)
    data = [
        {"x": start + timedelta(seconds=i), "y": math.sin(i / 25) * 10 + 20}
        for i in range(6000)
    ]
    config = determine_lod_level(len(data), 1, viewport)

    simplified = simplify_for_lod(data, config)

    assert config.level == LODLevel.LOW
    assert 375 <= len(simplified) <= config.max_points
