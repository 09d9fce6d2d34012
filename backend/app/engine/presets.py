"""Starter templates and parameter variants offered by the creation studio.

Both only build GenerationParams records; nothing here draws.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from app.engine.context import GenerationParams

# Shape identifiers the studio offers. Only square/triangle/diamond/circle have
# synthesizers; the rest are accepted and skipped by the geometric strategy.
SHAPE_TYPES = ("circle", "square", "triangle", "diamond", "star", "lotus")
SYMMETRY_TYPES = ("radial", "bilateral", "rotational", "asymmetric")

_VARIANT_SYMMETRIES = ("radial", "bilateral", "rotational")
_COMPLEXITY_RANGE = (1, 10)
_LOOPS_RANGE = (1, 8)


@dataclass(frozen=True)
class Template:
    name: str
    grid_size: int
    pattern_type: str
    shapes: tuple[str, ...]
    level: str
    preview: str

    def to_params(self) -> GenerationParams:
        """Bigger grids get higher complexity and more loops."""
        if self.grid_size > 9:
            complexity = 8
        elif self.grid_size > 5:
            complexity = 6
        else:
            complexity = 4
        return GenerationParams(
            grid_size=self.grid_size,
            pattern_type=self.pattern_type,
            selected_shapes=self.shapes,
            complexity=complexity,
            symmetry="radial" if self.pattern_type == "mandala" else "bilateral",
            loops=self.grid_size // 3,
            spacing=2,
        )


TEMPLATES: tuple[Template, ...] = (
    Template("Simple Grid", 5, "radial", ("circle", "square"), "Beginner", "5×5 Basic Grid"),
    Template(
        "Festival Mandala", 9, "mandala", ("circle", "lotus", "star"), "Intermediate", "9×9 Mandala",
    ),
    Template(
        "Temple Gateway",
        13,
        "geometric",
        ("square", "diamond", "triangle"),
        "Advanced",
        "13×13 Complex",
    ),
)


def get_template(name: str) -> Template | None:
    for template in TEMPLATES:
        if template.name == name:
            return template
    return None


def _clamp(value: int, bounds: tuple[int, int]) -> int:
    lo, hi = bounds
    return max(lo, min(hi, value))


def make_variants(base: GenerationParams) -> list[GenerationParams]:
    """Three siblings of base: complexity −2/0/+2, loops −1/0/+1, one symmetry each."""
    variants: list[GenerationParams] = []
    for i, symmetry in enumerate(_VARIANT_SYMMETRIES):
        variants.append(
            replace(
                base,
                complexity=_clamp(base.complexity + (i - 1) * 2, _COMPLEXITY_RANGE),
                loops=_clamp(base.loops + (i - 1), _LOOPS_RANGE),
                symmetry=symmetry,
            )
        )
    return variants
