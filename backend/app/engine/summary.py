"""Pattern summary: counts and measurements shown next to a generated pattern."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

import numpy as np

from app.engine.context import Pattern
from app.utils.geometry import bbox, polyline_length, to_array


@dataclass(frozen=True)
class PatternSummary:
    dot_count: int
    path_count: int
    closed_path_count: int
    open_path_count: int
    vertex_count: int
    # Sum of drawn segment lengths, closing segments included
    total_length: float
    # (xmin, ymin, xmax, ymax) over dots and path vertices
    bounds: tuple[float, float, float, float]

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["bounds"] = list(self.bounds)
        return data


def summarize_pattern(pattern: Pattern) -> PatternSummary:
    drawable = [p for p in pattern.paths if not p.is_degenerate]
    arrays = [to_array(p.points) for p in drawable]

    total_length = sum(
        polyline_length(arr, closed=path.is_closed) for arr, path in zip(arrays, drawable)
    )

    every_point = [to_array(pattern.dots), *arrays]
    stacked = np.vstack(every_point) if every_point else np.empty((0, 2))

    return PatternSummary(
        dot_count=len(pattern.dots),
        path_count=len(pattern.paths),
        closed_path_count=len(pattern.closed_paths),
        open_path_count=len(pattern.open_paths),
        vertex_count=sum(len(p.points) for p in pattern.paths),
        total_length=round(float(total_length), 2),
        bounds=tuple(round(v, 2) for v in bbox(stacked)),
    )
