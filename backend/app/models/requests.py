"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.engine.context import GenerationParams


class PatternRequest(BaseModel):
    """Caller-side validation of a parameter record before it reaches the engine."""

    grid_size: int = Field(default=7, ge=1, le=51, description="Dots per lattice side")
    pattern_type: str = Field(
        default="",
        description="radial | mandala | geometric | linear | floral (anything else → radial)",
    )
    selected_shapes: list[str] = Field(
        default_factory=list,
        description="Shape identifiers, order-significant",
    )
    complexity: int = Field(default=5, ge=1, le=100, description="Studio slider is 1-10")
    symmetry: str = Field(default="radial", description="Advisory symmetry class")
    loops: int = Field(default=3, ge=1, le=50, description="Concentric layer count")
    spacing: float = Field(default=2.0, gt=0, le=50, description="Radius scaling")

    def to_params(self) -> GenerationParams:
        return GenerationParams(
            grid_size=self.grid_size,
            pattern_type=self.pattern_type,
            selected_shapes=tuple(self.selected_shapes),
            complexity=self.complexity,
            symmetry=self.symmetry,
            loops=self.loops,
            spacing=self.spacing,
        )


class GenerateRequest(BaseModel):
    prompt: str = Field(default="", description="What kind of kolam to describe")
