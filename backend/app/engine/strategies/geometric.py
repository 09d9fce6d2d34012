"""Geometric: nested outlines for each selected shape, one hue per shape."""

from __future__ import annotations

from app.engine.context import LatticeContext
from app.engine.palette import shape_band_color
from app.engine.registry import strategy
from app.engine.shapes import get_synthesizer


@strategy(name="geometric", description="Angular mathematical forms")
def geometric(ctx: LatticeContext) -> None:
    params = ctx.params
    for index, shape in enumerate(params.selected_shapes):
        synthesize = get_synthesizer(shape)
        if synthesize is None:
            continue
        synthesize(
            ctx.paths,
            params.grid_size,
            ctx.cell_size,
            shape_band_color(index),
            params.complexity,
        )
