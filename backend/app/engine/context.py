"""Pattern records and the per-call build state every strategy starts from.

GenerationParams → strategy(LatticeContext) → Pattern

Records are frozen; the only mutable object is the LatticeContext a single
generator call owns while it appends paths.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    # Lattice marker
    is_dot: bool = False
    # Vertex of a traced line
    is_connected: bool = False

    @classmethod
    def dot(cls, x: float, y: float) -> Point:
        return cls(x, y, is_dot=True, is_connected=False)

    @classmethod
    def vertex(cls, x: float, y: float) -> Point:
        return cls(x, y, is_dot=False, is_connected=True)


@dataclass(frozen=True)
class Path:
    points: tuple[Point, ...]
    is_closed: bool
    stroke_width: float
    # Display token only: "hsl(h, s%, l%)" or hex
    color: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))

    @property
    def is_degenerate(self) -> bool:
        """Nothing to draw: no points, or a loop that cannot close."""
        return len(self.points) == 0 or (self.is_closed and len(self.points) < 2)


@dataclass(frozen=True)
class GenerationParams:
    """The single input record. Not validated here; callers reject grid_size < 1."""

    grid_size: int = 7
    pattern_type: str = ""
    selected_shapes: tuple[str, ...] = ()
    complexity: int = 5
    symmetry: str = "radial"
    loops: int = 3
    spacing: float = 2.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "selected_shapes", tuple(self.selected_shapes))

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["selected_shapes"] = list(self.selected_shapes)
        return data


@dataclass(frozen=True)
class Pattern:
    grid: tuple[tuple[Point, ...], ...]
    # Row-major lattice, then any extra dots (mandala centre)
    dots: tuple[Point, ...]
    # Draw order == z-order
    paths: tuple[Path, ...]
    grid_size: int
    pattern_type: str
    shapes: tuple[str, ...]
    complexity: int
    symmetry: str

    @property
    def closed_paths(self) -> list[Path]:
        return [p for p in self.paths if p.is_closed]

    @property
    def open_paths(self) -> list[Path]:
        return [p for p in self.paths if not p.is_closed]

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict (tuples become lists)."""
        return {
            "grid": [[asdict(p) for p in row] for row in self.grid],
            "dots": [asdict(p) for p in self.dots],
            "paths": [
                {
                    "points": [asdict(p) for p in path.points],
                    "is_closed": path.is_closed,
                    "stroke_width": path.stroke_width,
                    "color": path.color,
                }
                for path in self.paths
            ],
            "grid_size": self.grid_size,
            "pattern_type": self.pattern_type,
            "shapes": list(self.shapes),
            "complexity": self.complexity,
            "symmetry": self.symmetry,
        }


@dataclass
class LatticeContext:
    """Mutable build state for one generator call."""

    params: GenerationParams
    cell_size: float = 40.0
    grid: list[list[Point]] = field(default_factory=list)
    dots: list[Point] = field(default_factory=list)
    paths: list[Path] = field(default_factory=list)

    @classmethod
    def build(cls, params: GenerationParams, cell_size: float = 40.0) -> LatticeContext:
        """Lay down the grid_size × grid_size dot lattice, shared by grid and dots."""
        ctx = cls(params=params, cell_size=cell_size)
        for row in range(params.grid_size):
            cells: list[Point] = []
            for col in range(params.grid_size):
                point = Point.dot(*ctx.lattice_xy(row, col))
                cells.append(point)
                ctx.dots.append(point)
            ctx.grid.append(cells)
        return ctx

    def lattice_xy(self, row: int, col: int) -> tuple[float, float]:
        half = self.cell_size / 2
        return (col * self.cell_size + half, row * self.cell_size + half)

    @property
    def center(self) -> tuple[float, float]:
        # grid_size / 2 cells in: between dots for even sizes, off the middle dot for odd
        c = self.params.grid_size / 2 * self.cell_size
        return (c, c)

    def add_path(
        self,
        points: list[tuple[float, float]],
        *,
        closed: bool,
        stroke_width: float,
        color: str,
    ) -> None:
        self.paths.append(
            Path(
                points=tuple(Point.vertex(x, y) for x, y in points),
                is_closed=closed,
                stroke_width=stroke_width,
                color=color,
            )
        )

    def freeze(self, pattern_type: str) -> Pattern:
        return Pattern(
            grid=tuple(tuple(row) for row in self.grid),
            dots=tuple(self.dots),
            paths=tuple(self.paths),
            grid_size=self.params.grid_size,
            pattern_type=pattern_type,
            shapes=self.params.selected_shapes,
            complexity=self.params.complexity,
            symmetry=self.params.symmetry,
        )
