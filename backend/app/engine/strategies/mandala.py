"""Mandala: layered petal rings around a centre dot."""

from __future__ import annotations

from app.engine.context import LatticeContext, Point
from app.engine.palette import BASE_RING, petal_color
from app.engine.registry import strategy
from app.utils.geometry import polar_to_cartesian

_MIN_PETALS = 6
# Petal bases sit at 70% of the layer radius, ±15° from the tip
_PETAL_BASE_RADIUS = 0.7
_PETAL_HALF_ANGLE = 15
# Connective ring at 60% of the layer radius, 10° steps
_RING_RADIUS = 0.6
_RING_STEP = 10


@strategy(name="mandala", description="Circular concentric design")
def mandala(ctx: LatticeContext) -> None:
    params = ctx.params
    cx, cy = ctx.center

    for layer in range(1, params.loops + 1):
        radius = layer * params.spacing * ctx.cell_size / 3
        petals = max(_MIN_PETALS, layer * 2)

        for i in range(petals):
            angle = (i * 360) / petals
            tip = polar_to_cartesian(cx, cy, radius, angle)
            base1 = polar_to_cartesian(
                cx, cy, radius * _PETAL_BASE_RADIUS, angle - _PETAL_HALF_ANGLE,
            )
            base2 = polar_to_cartesian(
                cx, cy, radius * _PETAL_BASE_RADIUS, angle + _PETAL_HALF_ANGLE,
            )
            ctx.add_path(
                [base1, tip, base2],
                closed=False,
                stroke_width=2.5 - layer * 0.2,
                color=petal_color(layer),
            )

        ring = [
            polar_to_cartesian(cx, cy, radius * _RING_RADIUS, angle)
            for angle in range(0, 360, _RING_STEP)
        ]
        ctx.add_path(ring, closed=True, stroke_width=1.5, color=BASE_RING)

    # Centre dot lives in dots only, after the lattice
    ctx.dots.append(Point.dot(cx, cy))
