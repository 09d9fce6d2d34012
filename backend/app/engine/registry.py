"""Strategy registry: every pattern strategy is a standalone function registered via decorator.

Usage:
    @strategy(name="radial", description="Concentric rings with optional spokes")
    def radial(ctx: LatticeContext) -> None:
        for loop in range(1, ctx.params.loops + 1):
            ctx.add_path(...)

Adding a new strategy = creating one file in app/engine/strategies with the
decorator. Nothing else changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from app.engine.context import LatticeContext

logger = logging.getLogger(__name__)

DEFAULT_STRATEGY = "radial"


@dataclass
class StrategySpec:
    name: str
    fn: Callable[["LatticeContext"], None]
    description: str = ""


class StrategyRegistry:
    """Lookup table of strategies with an explicit default entry."""

    def __init__(self, default: str = DEFAULT_STRATEGY) -> None:
        self._strategies: dict[str, StrategySpec] = {}
        self.default = default

    def register(self, spec: StrategySpec) -> None:
        if spec.name in self._strategies:
            raise ValueError(f"Duplicate strategy name: {spec.name}")
        self._strategies[spec.name] = spec
        logger.debug("Registered strategy %s", spec.name)

    def get(self, name: str) -> StrategySpec:
        return self._strategies[name]

    def resolve(self, name: str | None) -> StrategySpec:
        """Exact-match lookup; unknown or empty names resolve to the default entry."""
        spec = self._strategies.get(name or "")
        if spec is None:
            spec = self._strategies[self.default]
        return spec

    def names(self) -> list[str]:
        return sorted(self._strategies)

    def all(self) -> list[StrategySpec]:
        return [self._strategies[n] for n in self.names()]

    def __contains__(self, name: object) -> bool:
        return name in self._strategies

    @property
    def count(self) -> int:
        return len(self._strategies)


# Module-level singleton
_registry = StrategyRegistry()


def get_registry() -> StrategyRegistry:
    return _registry


def strategy(*, name: str, description: str = ""):
    """Decorator to register a strategy function."""

    def decorator(fn: Callable[["LatticeContext"], None]):
        _registry.register(StrategySpec(name=name, fn=fn, description=description))
        return fn

    return decorator
