"""Radial: concentric octagonal rings, with spokes at higher complexity."""

from __future__ import annotations

from app.engine.context import LatticeContext
from app.engine.palette import GOLD, ring_color
from app.engine.registry import strategy
from app.utils.geometry import polar_to_cartesian

# Ring vertices every 45°
_RING_STEP = 45
# Spokes appear above this complexity, at most this many
_SPOKE_COMPLEXITY = 5
_MAX_SPOKES = 8


@strategy(name="radial", description="Central point with radiating elements")
def radial(ctx: LatticeContext) -> None:
    params = ctx.params
    cell = ctx.cell_size
    cx, cy = ctx.center

    for loop in range(1, params.loops + 1):
        radius = loop * params.spacing * cell / 2
        ring = [polar_to_cartesian(cx, cy, radius, angle) for angle in range(0, 360, _RING_STEP)]
        ctx.add_path(ring, closed=True, stroke_width=3 - loop * 0.3, color=ring_color(loop))

    if params.complexity > _SPOKE_COMPLEXITY:
        spokes = min(_MAX_SPOKES, params.complexity)
        outer_radius = params.loops * params.spacing * cell / 2
        for i in range(spokes):
            angle = (i * 360) / spokes
            inner = polar_to_cartesian(cx, cy, cell / 4, angle)
            outer = polar_to_cartesian(cx, cy, outer_radius, angle)
            ctx.add_path([inner, outer], closed=False, stroke_width=2, color=GOLD)
