"""Kolam procedural pattern engine."""

from app.engine.context import GenerationParams, Path, Pattern, Point
from app.engine.generator import PatternGenerator, generate_pattern
from app.engine.registry import get_registry, strategy

__all__ = [
    "GenerationParams",
    "Path",
    "Pattern",
    "Point",
    "PatternGenerator",
    "generate_pattern",
    "get_registry",
    "strategy",
]
