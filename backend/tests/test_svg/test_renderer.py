"""Tests for Pattern → SVG rendering."""

import xml.etree.ElementTree as ET
from dataclasses import replace

import pytest

from app.engine.context import Path, Point
from app.engine.generator import generate_pattern
from app.svg.renderer import (
    RenderConfig,
    canvas_size,
    export_filename,
    path_data,
    pattern_caption,
    pattern_to_svg,
)
from tests.conftest import MINIMAL_RADIAL, STUDIO_DEFAULT

NS = "{http://www.w3.org/2000/svg}"


def _strokes(root):
    return [p for p in root.iter(f"{NS}path") if p.get("class") != "glow"]


def test_path_data_open_and_closed():
    pts = (Point.vertex(0, 0), Point.vertex(10.123, 5), Point.vertex(3, 4))
    assert path_data(Path(pts, False, 1, "#000")) == "M 0 0 L 10.12 5 L 3 4"
    assert path_data(Path(pts, True, 1, "#000")).endswith(" Z")
    assert path_data(Path((), False, 1, "#000")) == ""


def test_canvas_size_and_caption():
    pattern = generate_pattern(STUDIO_DEFAULT)
    assert canvas_size(pattern) == 7 * 40 + 40
    assert pattern_caption(pattern) == "MANDALA • 7×7 • circle+square"
    assert export_filename(pattern, "svg", 1700000000000) == "kolam-mandala-1700000000000.svg"


def test_minimal_drawing():
    pattern = generate_pattern(MINIMAL_RADIAL)
    root = ET.fromstring(pattern_to_svg(pattern))
    assert root.get("width") == "160.0"

    strokes = _strokes(root)
    assert len(strokes) == 1
    assert strokes[0].get("d").count("L") == 7
    assert strokes[0].get("d").endswith("Z")
    assert strokes[0].get("stroke") == "hsl(75, 70%, 50%)"
    assert strokes[0].get("fill") == "none"

    glows = [p for p in root.iter(f"{NS}path") if p.get("class") == "glow"]
    assert len(glows) == 1
    assert float(glows[0].get("stroke-width")) == pytest.approx(2.7 + 2)

    assert len(list(root.iter(f"{NS}circle"))) == 9
    assert root.find(f"{NS}text").text == "RADIAL • 3×3 • circle"


def test_paths_drawn_in_order_before_dots():
    pattern = generate_pattern(replace(STUDIO_DEFAULT, pattern_type="floral", complexity=8))
    root = ET.fromstring(pattern_to_svg(pattern, RenderConfig(glow=False, caption=False)))
    children = [c.tag.replace(NS, "") for c in root if c.tag not in (f"{NS}title", f"{NS}desc")]
    assert children[0] == "rect"
    first_circle = children.index("circle")
    assert children[1:first_circle] == ["path"] * len(pattern.paths)
    assert children[first_circle:] == ["circle"] * len(pattern.dots)

    strokes = _strokes(root)
    assert [p.get("stroke") for p in strokes] == [p.color for p in pattern.paths]


def test_degenerate_paths_not_drawn():
    pattern = generate_pattern(MINIMAL_RADIAL)
    broken = replace(
        pattern,
        paths=pattern.paths + (
            Path((), False, 1, "#000"),
            Path((Point.vertex(1, 1),), True, 1, "#000"),
        ),
    )
    root = ET.fromstring(pattern_to_svg(broken, RenderConfig(glow=False)))
    assert len(_strokes(root)) == 1


def test_custom_cell_size():
    pattern = generate_pattern(MINIMAL_RADIAL)
    root = ET.fromstring(pattern_to_svg(pattern, RenderConfig(cell_size=20)))
    assert root.get("viewBox") == "0 0 80.0 80.0"
