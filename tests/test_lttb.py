"""Tests for LTTB downsampling."""

import math
from datetime import datetime, timedelta, timezone

import pytest

from chart_engine.sampling.lttb import lttb_indices, lttb_sample


@pytest.fixture
def sine_data():
    """1000-point sine wave between 0 and 100."""
    return [{"x": i, "y": math.sin(i / 10) * 50 + 50} for i in range(1000)]


@pytest.fixture
def timestamped_data():
    """500 points at one-minute intervals with datetime x values."""
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return [
        {"x": start + timedelta(minutes=i), "y": float(i % 37), "sensor": "T1"}
        for i in range(500)
    ]


def test_returns_input_when_below_target(sine_data):
    """Test series that already fit are returned unchanged."""
    short = sine_data[:50]
    assert lttb_sample(short, 100) == short


def test_returns_input_for_target_below_three(sine_data):
    """Test the bucket construction is skipped below three points."""
    assert lttb_sample(sine_data, 2) == sine_data


def test_minimum_target(sine_data):
    """Test any series of three or more points samples to exactly three."""
    assert len(lttb_sample(sine_data, 3)) == 3
    assert len(lttb_sample(sine_data[:4], 3)) == 3


def test_preserves_first_and_last(sine_data):
    """Test the endpoints are always kept."""
    sampled = lttb_sample(sine_data, 10)

    assert sampled[0] is sine_data[0]
    assert sampled[-1] is sine_data[-1]


def test_exact_target_count(sine_data):
    """Test output size equals target."""
    assert len(lttb_sample(sine_data, 100)) == 100


def test_preserves_sine_extremes(sine_data):
    """Test peaks and valleys survive downsampling."""
    sampled = lttb_sample(sine_data, 100)

    original_max = max(p["y"] for p in sine_data)
    original_min = min(p["y"] for p in sine_data)
    sampled_max = max(p["y"] for p in sampled)
    sampled_min = min(p["y"] for p in sampled)

    assert abs(sampled_max - original_max) < 5
    assert abs(sampled_min - original_min) < 5


def test_indices_strictly_increasing(sine_data):
    """Test selected indices form an ordered subsequence."""
    xs = [p["x"] for p in sine_data]
    ys = [p["y"] for p in sine_data]
    indices = lttb_indices(xs, ys, 77)

    assert len(indices) == 77
    assert all(a < b for a, b in zip(indices, indices[1:]))


def test_keeps_spike():
    """Test an isolated spike on a flat line is selected."""
    data = [{"x": i, "y": 0.0} for i in range(1000)]
    data[437] = {"x": 437, "y": 500.0}

    sampled = lttb_sample(data, 50)

    assert any(p["y"] == 500.0 for p in sampled)


def test_datetime_x_and_extra_fields(timestamped_data):
    """Test datetime x values work and point objects pass through."""
    sampled = lttb_sample(timestamped_data, 40)

    assert len(sampled) == 40
    assert all(p["sensor"] == "T1" for p in sampled)
    assert all(any(p is q for q in timestamped_data) for p in sampled)
