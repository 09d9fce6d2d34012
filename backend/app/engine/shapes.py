"""Shape synthesizers: nested closed outlines around the lattice centre.

Each synthesizer appends up to three concentric copies of its shape; the
copy count is min(3, complexity / 2), floored.
"""

from __future__ import annotations

from typing import Callable

from app.engine.context import Path, Point
from app.utils.geometry import polar_to_cartesian

MAX_NESTING = 3

_TRIANGLE_RADIUS = 0.8
_DIAMOND_OFFSET = 0.7
_CIRCLE_RADIUS = 0.6
# 10° steps → 36-gon
_CIRCLE_STEP = 10

ShapeSynthesizer = Callable[[list[Path], int, float, str, int], None]


def nesting_levels(complexity: float) -> range:
    """Iteration indices 1..min(3, complexity/2); empty below complexity 2."""
    return range(1, int(min(MAX_NESTING, complexity / 2)) + 1)


def _stroke_width(i: int) -> float:
    return 2.5 - i * 0.3


def _center(grid_size: int, cell_size: float) -> tuple[float, float]:
    c = grid_size / 2 * cell_size
    return (c, c)


def _closed(points: list[tuple[float, float]], i: int, color: str) -> Path:
    return Path(
        points=tuple(Point.vertex(x, y) for x, y in points),
        is_closed=True,
        stroke_width=_stroke_width(i),
        color=color,
    )


def add_square_pattern(
    paths: list[Path], grid_size: int, cell_size: float, color: str, complexity: int,
) -> None:
    cx, cy = _center(grid_size, cell_size)
    for i in nesting_levels(complexity):
        half = i * cell_size / 2
        corners = [
            (cx - half, cy - half),
            (cx + half, cy - half),
            (cx + half, cy + half),
            (cx - half, cy + half),
        ]
        paths.append(_closed(corners, i, color))


def add_triangle_pattern(
    paths: list[Path], grid_size: int, cell_size: float, color: str, complexity: int,
) -> None:
    cx, cy = _center(grid_size, cell_size)
    for i in nesting_levels(complexity):
        radius = i * cell_size * _TRIANGLE_RADIUS
        vertices = [polar_to_cartesian(cx, cy, radius, j * 120) for j in range(3)]
        paths.append(_closed(vertices, i, color))


def add_diamond_pattern(
    paths: list[Path], grid_size: int, cell_size: float, color: str, complexity: int,
) -> None:
    cx, cy = _center(grid_size, cell_size)
    for i in nesting_levels(complexity):
        size = i * cell_size * _DIAMOND_OFFSET
        vertices = [
            (cx, cy - size),
            (cx + size, cy),
            (cx, cy + size),
            (cx - size, cy),
        ]
        paths.append(_closed(vertices, i, color))


def add_circle_pattern(
    paths: list[Path], grid_size: int, cell_size: float, color: str, complexity: int,
) -> None:
    cx, cy = _center(grid_size, cell_size)
    for i in nesting_levels(complexity):
        radius = i * cell_size * _CIRCLE_RADIUS
        ring = [
            polar_to_cartesian(cx, cy, radius, angle) for angle in range(0, 360, _CIRCLE_STEP)
        ]
        paths.append(_closed(ring, i, color))


SHAPE_SYNTHESIZERS: dict[str, ShapeSynthesizer] = {
    "square": add_square_pattern,
    "triangle": add_triangle_pattern,
    "diamond": add_diamond_pattern,
    "circle": add_circle_pattern,
}


def get_synthesizer(shape: str) -> ShapeSynthesizer | None:
    """None for identifiers without a synthesizer (e.g. "star", "lotus")."""
    return SHAPE_SYNTHESIZERS.get(shape)
