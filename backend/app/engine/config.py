"""Generator configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GeneratorConfig:
    """Controls the lattice every strategy draws on."""

    # Distance between neighbouring lattice dots, in drawing units
    cell_size: float = 40.0
