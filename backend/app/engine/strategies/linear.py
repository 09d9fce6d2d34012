"""Linear: row and column threads through the lattice, diagonals at high complexity."""

from __future__ import annotations

import math

from app.engine.context import LatticeContext
from app.engine.palette import GOLD, SAFFRON
from app.engine.registry import strategy

_DIAGONAL_COMPLEXITY = 6


@strategy(name="linear", description="Sequential connected lines")
def linear(ctx: LatticeContext) -> None:
    params = ctx.params
    n = params.grid_size
    ratio = n / params.spacing
    # A vanishing spacing overflows to inf: only row and column 0
    step = max(1, math.floor(ratio)) if math.isfinite(ratio) else n

    for row in range(0, n, step):
        line = [ctx.lattice_xy(row, col) for col in range(n)]
        ctx.add_path(line, closed=False, stroke_width=2, color=GOLD)

    for col in range(0, n, step):
        line = [ctx.lattice_xy(row, col) for row in range(n)]
        ctx.add_path(line, closed=False, stroke_width=2, color=GOLD)

    if params.complexity > _DIAGONAL_COMPLEXITY:
        main = [ctx.lattice_xy(i, i) for i in range(n)]
        anti = [ctx.lattice_xy(n - 1 - i, i) for i in range(n)]
        ctx.add_path(main, closed=False, stroke_width=2.5, color=SAFFRON)
        ctx.add_path(anti, closed=False, stroke_width=2.5, color=SAFFRON)
