"""Tests for the sampling quality evaluator."""

import math

import pytest

from chart_engine.sampling.quality import (
    douglas_peucker_quality,
    evaluate_sampling_methods,
    nth_point_quality,
)


@pytest.fixture
def sine_data():
    """500-point sine wave."""
    return [{"x": i, "y": math.sin(i / 10) * 50 + 50} for i in range(500)]


def test_evaluate_scores_each_method(sine_data):
    """Test every sampler is scored within [0, 1]."""
    result = evaluate_sampling_methods(sine_data, 50)

    assert result.best_method in ("lttb", "nth-point", "douglas-peucker")
    assert set(result.scores) == {"lttb", "nth-point", "douglas-peucker"}
    for score in result.scores.values():
        assert 0.0 <= score <= 1.0
    assert result.scores[result.best_method] == max(result.scores.values())


def test_evaluate_short_series():
    """Test series below target short-circuit to 'none'."""
    data = [{"x": i, "y": i} for i in range(10)]
    result = evaluate_sampling_methods(data, 20)

    assert result.best_method == "none"
    assert result.scores == {"none": 1.0}


def test_deviation_score_for_exact_line():
    """Test endpoints of a straight line lose nothing."""
    xs = [0.0, 1.0, 2.0, 3.0, 4.0]
    ys = [0.0, 1.0, 2.0, 3.0, 4.0]
    assert douglas_peucker_quality(xs, ys, [0, 4]) == pytest.approx(1.0)


def test_deviation_score_for_dropped_peak():
    """Test dropping a full-range peak scores exp(-2)."""
    xs = [0.0, 1.0, 2.0, 3.0, 4.0]
    ys = [0.0, 0.0, 10.0, 0.0, 0.0]
    assert douglas_peucker_quality(xs, ys, [0, 4]) == pytest.approx(math.exp(-2))


def test_uniformity_score():
    """Test an evenly strided selection is perfectly uniform."""
    assert nth_point_quality(100, list(range(0, 100, 10))) == pytest.approx(1.0)
    assert nth_point_quality(100, [0, 1, 2, 99]) < 0.5


@pytest.mark.parametrize("target", [1, 2])
def test_evaluate_tiny_targets_score_real_reductions(sine_data, target):
    """Test no sampler gets a perfect score for keeping every point."""
    result = evaluate_sampling_methods(sine_data, target)

    for score in result.scores.values():
        assert score < 1.0
    assert result.scores["lttb"] == result.scores["douglas-peucker"]
