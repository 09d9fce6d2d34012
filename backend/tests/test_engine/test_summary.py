"""Tests for pattern summaries."""

import math
from dataclasses import replace

import pytest

from app.engine.context import Path, Pattern, Point
from app.engine.generator import generate_pattern
from app.engine.summary import summarize_pattern
from tests.conftest import LINEAR_HIGH, MINIMAL_RADIAL


def test_minimal_radial_summary():
    summary = summarize_pattern(generate_pattern(MINIMAL_RADIAL))
    assert summary.dot_count == 9
    assert summary.path_count == 1
    assert summary.closed_path_count == 1
    assert summary.open_path_count == 0
    assert summary.vertex_count == 8
    # Regular octagon of radius 20, closing side included
    assert summary.total_length == pytest.approx(16 * 20 * math.sin(math.pi / 8), abs=0.01)
    assert summary.bounds == (20.0, 20.0, 100.0, 100.0)


def test_linear_lengths():
    pattern = generate_pattern(replace(LINEAR_HIGH, complexity=1))
    summary = summarize_pattern(pattern)
    # six open lines, each spanning six cells
    assert summary.total_length == pytest.approx(6 * 240)
    assert summary.open_path_count == 6


def test_degenerate_paths_skipped():
    pattern = Pattern(
        grid=(),
        dots=(Point.dot(0, 0),),
        paths=(
            Path(points=(), is_closed=False, stroke_width=1, color="#000"),
            Path(points=(Point.vertex(5, 5),), is_closed=True, stroke_width=1, color="#000"),
        ),
        grid_size=1,
        pattern_type="radial",
        shapes=(),
        complexity=1,
        symmetry="radial",
    )
    summary = summarize_pattern(pattern)
    assert summary.path_count == 2
    assert summary.total_length == 0
    assert summary.bounds == (0.0, 0.0, 0.0, 0.0)


def test_to_dict():
    data = summarize_pattern(generate_pattern(MINIMAL_RADIAL)).to_dict()
    assert data["bounds"] == [20.0, 20.0, 100.0, 100.0]
    assert data["dot_count"] == 9
