"""Render a generated Pattern to SVG: paths in draw order, then dots, then a caption."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.engine.context import Path, Pattern
from app.svg.serializer import serialize_svg


@dataclass
class RenderConfig:
    """Look of the exported drawing. Geometry comes from the pattern alone."""

    cell_size: float = 40.0
    background: str = "#FFFEF7"
    dot_radius: float = 3.0
    dot_fill: str = "#8B4513"
    dot_stroke: str = "#654321"
    dot_stroke_width: float = 0.5
    # Soft underlay drawn beneath every stroke
    glow: bool = True
    glow_extra_width: float = 2.0
    glow_opacity: float = 0.3
    caption: bool = True
    caption_color: str = "#8B4513"
    caption_size: int = 10


def canvas_size(pattern: Pattern, cell_size: float = 40.0) -> float:
    """Square canvas edge: the lattice plus one cell of margin."""
    return pattern.grid_size * cell_size + cell_size


def pattern_caption(pattern: Pattern) -> str:
    """e.g. ``RADIAL • 7×7 • circle+square``."""
    n = pattern.grid_size
    return f"{pattern.pattern_type.upper()} • {n}×{n} • {'+'.join(pattern.shapes)}"


def export_filename(pattern: Pattern, ext: str, timestamp_ms: int) -> str:
    return f"kolam-{pattern.pattern_type}-{timestamp_ms}.{ext}"


def path_data(path: Path) -> str:
    """``M x y L x y ...`` with a trailing ``Z`` only for closed paths."""
    if not path.points:
        return ""
    first, *rest = path.points
    parts = [f"M {round(first.x, 2)} {round(first.y, 2)}"]
    parts.extend(f"L {round(p.x, 2)} {round(p.y, 2)}" for p in rest)
    if path.is_closed:
        parts.append("Z")
    return " ".join(parts)


def _path_elements(path: Path, config: RenderConfig) -> list[dict[str, Any]]:
    d = path_data(path)
    stroke = {
        "tag": "path",
        "d": d,
        "fill": "none",
        "stroke": path.color,
        "stroke-width": str(round(path.stroke_width, 2)),
        "stroke-linecap": "round",
        "stroke-linejoin": "round",
    }
    if not config.glow:
        return [stroke]
    glow = dict(stroke)
    glow["stroke-width"] = str(round(path.stroke_width + config.glow_extra_width, 2))
    glow["opacity"] = str(config.glow_opacity)
    glow["class"] = "glow"
    return [glow, stroke]


def pattern_to_svg(pattern: Pattern, config: RenderConfig | None = None) -> str:
    """Full drawing: background, paths (z-order = list order), dots, caption."""
    config = config or RenderConfig()
    size = canvas_size(pattern, config.cell_size)

    elements: list[dict[str, Any]] = [
        {"tag": "rect", "width": "100%", "height": "100%", "fill": config.background},
    ]

    for path in pattern.paths:
        if path.is_degenerate:
            continue
        elements.extend(_path_elements(path, config))

    for dot in pattern.dots:
        elements.append({
            "tag": "circle",
            "cx": str(round(dot.x, 2)),
            "cy": str(round(dot.y, 2)),
            "r": str(config.dot_radius),
            "fill": config.dot_fill,
            "stroke": config.dot_stroke,
            "stroke-width": str(config.dot_stroke_width),
        })

    if config.caption:
        elements.append({
            "tag": "text",
            "x": "10",
            "y": str(round(size - 10, 2)),
            "font-size": str(config.caption_size),
            "font-family": "monospace",
            "fill": config.caption_color,
            "opacity": "0.7",
            "text": pattern_caption(pattern),
        })

    return serialize_svg(
        elements,
        canvas_w=size,
        canvas_h=size,
        title=f"Kolam {pattern.pattern_type} pattern",
        description=pattern_caption(pattern),
    )
