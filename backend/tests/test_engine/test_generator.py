"""Tests for the generator dispatcher."""

from __future__ import annotations

import threading
from dataclasses import replace

import pytest

from app.engine.config import GeneratorConfig
from app.engine.context import GenerationParams
from app.engine.generator import PatternGenerator, create_generator, generate_pattern
from app.engine.registry import StrategyRegistry, StrategySpec
from tests.conftest import PATTERN_TYPES, STUDIO_DEFAULT


@pytest.mark.parametrize("pattern_type", PATTERN_TYPES)
def test_deterministic(pattern_type):
    params = replace(STUDIO_DEFAULT, pattern_type=pattern_type, complexity=9)
    assert generate_pattern(params) == generate_pattern(params)
    assert generate_pattern(params).to_dict() == generate_pattern(params).to_dict()


@pytest.mark.parametrize("unknown", ["unknown-value", "", "Radial", "spiral"])
def test_unknown_type_matches_radial(unknown):
    radial = generate_pattern(replace(STUDIO_DEFAULT, pattern_type="radial"))
    fallback = generate_pattern(replace(STUDIO_DEFAULT, pattern_type=unknown))
    assert fallback == radial
    assert fallback.pattern_type == "radial"


def test_dispatches_by_exact_name():
    for pattern_type in PATTERN_TYPES:
        pattern = generate_pattern(replace(STUDIO_DEFAULT, pattern_type=pattern_type))
        assert pattern.pattern_type == pattern_type


def test_default_params_generate_radial():
    pattern = generate_pattern(GenerationParams())
    assert pattern.pattern_type == "radial"
    assert len(pattern.dots) == 49


def test_cell_size_from_config():
    gen = create_generator(GeneratorConfig(cell_size=10))
    pattern = gen.generate(replace(STUDIO_DEFAULT, grid_size=2))
    assert [(p.x, p.y) for p in pattern.dots[:2]] == [(5, 5), (15, 5)]


def test_custom_registry():
    calls = []

    def only(ctx):
        calls.append(ctx.params.pattern_type)
        ctx.add_path([(0, 0), (1, 1)], closed=False, stroke_width=1, color="#000")

    reg = StrategyRegistry(default="only")
    reg.register(StrategySpec(name="only", fn=only))
    pattern = PatternGenerator(registry=reg).generate(replace(STUDIO_DEFAULT, pattern_type="x"))
    assert calls == ["x"]
    assert pattern.pattern_type == "only"
    assert len(pattern.paths) == 1


def test_pattern_is_immutable():
    pattern = generate_pattern(STUDIO_DEFAULT)
    with pytest.raises(AttributeError):
        pattern.grid_size = 3
    assert isinstance(pattern.paths, tuple)
    assert isinstance(pattern.dots, tuple)


def test_concurrent_calls_agree():
    expected = generate_pattern(replace(STUDIO_DEFAULT, pattern_type="floral", complexity=9))
    results = []

    def work():
        results.append(generate_pattern(replace(STUDIO_DEFAULT, pattern_type="floral", complexity=9)))

    threads = [threading.Thread(target=work) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(results) == 8
    assert all(r == expected for r in results)


def test_to_dict_shape():
    data = generate_pattern(STUDIO_DEFAULT).to_dict()
    assert set(data) == {
        "grid", "dots", "paths", "grid_size", "pattern_type",
        "shapes", "complexity", "symmetry",
    }
    assert data["shapes"] == ["circle", "square"]
    assert set(data["paths"][0]) == {"points", "is_closed", "stroke_width", "color"}
    assert set(data["dots"][0]) == {"x", "y", "is_dot", "is_connected"}
