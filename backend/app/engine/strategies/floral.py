"""Floral: a ring of kite-shaped petals, a centre ring, and leaves at high complexity."""

from __future__ import annotations

from app.engine.context import LatticeContext
from app.engine.palette import LEAF_GREEN, MARIGOLD, floral_petal_color
from app.engine.registry import strategy
from app.utils.geometry import polar_to_cartesian

_MIN_PETALS = 6
# Petal reach as a fraction of the grid half-extent
_PETAL_REACH = 0.6
_PETAL_BASE = 0.3
_PETAL_SIDE = 0.7
_PETAL_SIDE_ANGLE = 20
# Flower centre ring: radius in cells, 10° steps
_CENTER_RADIUS = 0.8
_CENTER_STEP = 10
_LEAF_COMPLEXITY = 7
_LEAF_OFFSET = 30
_LEAF_SIDE_ANGLE = 10


@strategy(name="floral", description="Nature-inspired organic shapes")
def floral(ctx: LatticeContext) -> None:
    params = ctx.params
    cx, cy = ctx.center
    petal_count = max(_MIN_PETALS, params.complexity)
    petal_radius = min(cx, cy) * _PETAL_REACH

    for i in range(petal_count):
        angle = (i * 360) / petal_count
        petal = [
            polar_to_cartesian(cx, cy, petal_radius * _PETAL_BASE, angle),
            polar_to_cartesian(cx, cy, petal_radius * _PETAL_SIDE, angle - _PETAL_SIDE_ANGLE),
            polar_to_cartesian(cx, cy, petal_radius, angle),
            polar_to_cartesian(cx, cy, petal_radius * _PETAL_SIDE, angle + _PETAL_SIDE_ANGLE),
        ]
        ctx.add_path(petal, closed=True, stroke_width=2, color=floral_petal_color(i))

    center_radius = ctx.cell_size * _CENTER_RADIUS
    center_ring = [
        polar_to_cartesian(cx, cy, center_radius, angle) for angle in range(0, 360, _CENTER_STEP)
    ]
    ctx.add_path(center_ring, closed=True, stroke_width=3, color=MARIGOLD)

    if params.complexity > _LEAF_COMPLEXITY:
        leaf_count = petal_count // 2
        for i in range(leaf_count):
            angle = (i * 360) / leaf_count + _LEAF_OFFSET
            leaf = [
                polar_to_cartesian(cx, cy, petal_radius * 0.8, angle),
                polar_to_cartesian(cx, cy, petal_radius * 1.0, angle - _LEAF_SIDE_ANGLE),
                polar_to_cartesian(cx, cy, petal_radius * 1.2, angle),
                polar_to_cartesian(cx, cy, petal_radius * 1.0, angle + _LEAF_SIDE_ANGLE),
            ]
            ctx.add_path(leaf, closed=True, stroke_width=1.5, color=LEAF_GREEN)
