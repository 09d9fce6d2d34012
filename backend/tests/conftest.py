"""Shared test fixtures."""

from __future__ import annotations

import pytest

from app.engine.context import GenerationParams

# Parameter records used across the suite

MINIMAL_RADIAL = GenerationParams(
    grid_size=3,
    pattern_type="radial",
    selected_shapes=("circle",),
    complexity=1,
    symmetry="radial",
    loops=1,
    spacing=1,
)

GEOMETRIC_TWO_SHAPES = GenerationParams(
    grid_size=5,
    pattern_type="geometric",
    selected_shapes=("square", "triangle"),
    complexity=10,
    symmetry="bilateral",
    loops=2,
    spacing=2,
)

LINEAR_HIGH = GenerationParams(
    grid_size=7,
    pattern_type="linear",
    selected_shapes=("circle",),
    complexity=7,
    symmetry="bilateral",
    loops=3,
    spacing=2,
)

STUDIO_DEFAULT = GenerationParams(
    grid_size=7,
    pattern_type="mandala",
    selected_shapes=("circle", "square"),
    complexity=5,
    symmetry="radial",
    loops=3,
    spacing=2,
)

PATTERN_TYPES = ("radial", "mandala", "geometric", "linear", "floral")

# JSON body for the API
STUDIO_BODY = {
    "grid_size": 7,
    "pattern_type": "floral",
    "selected_shapes": ["circle", "diamond"],
    "complexity": 8,
    "symmetry": "rotational",
    "loops": 3,
    "spacing": 2,
}


@pytest.fixture
def minimal_radial() -> GenerationParams:
    return MINIMAL_RADIAL


@pytest.fixture
def studio_params() -> GenerationParams:
    return STUDIO_DEFAULT


@pytest.fixture
def studio_body() -> dict:
    return dict(STUDIO_BODY)
