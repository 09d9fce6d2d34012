"""Generator dispatcher: picks a strategy by pattern type and runs it on a fresh lattice."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from app.engine.config import GeneratorConfig
from app.engine.context import GenerationParams, LatticeContext, Pattern
from app.engine.registry import StrategyRegistry, get_registry

logger = logging.getLogger(__name__)

_STRATEGY_PACKAGE = "app.engine.strategies"
_loaded = False


def load_strategies() -> None:
    """Import all strategy modules so @strategy decorators fire."""
    global _loaded
    if _loaded:
        return
    package = importlib.import_module(_STRATEGY_PACKAGE)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{_STRATEGY_PACKAGE}.{module_name}")
    _loaded = True


class PatternGenerator:
    """Runs one strategy per call. Holds no per-call state."""

    def __init__(
        self,
        registry: StrategyRegistry | None = None,
        config: GeneratorConfig | None = None,
    ) -> None:
        if registry is None:
            load_strategies()
            registry = get_registry()
        self.registry = registry
        self.config = config or GeneratorConfig()

    def generate(self, params: GenerationParams) -> Pattern:
        start = time.perf_counter()

        spec = self.registry.resolve(params.pattern_type)
        ctx = LatticeContext.build(params, cell_size=self.config.cell_size)
        spec.fn(ctx)
        pattern = ctx.freeze(spec.name)

        logger.debug(
            "Generated %s pattern: %d dots, %d paths in %.1fms",
            spec.name,
            len(pattern.dots),
            len(pattern.paths),
            (time.perf_counter() - start) * 1000,
        )
        return pattern


def create_generator(config: GeneratorConfig | None = None) -> PatternGenerator:
    """Factory function for creating a generator instance."""
    return PatternGenerator(config=config)


def generate_pattern(params: GenerationParams) -> Pattern:
    """Sole entry point: parameter record in, immutable pattern out."""
    return create_generator().generate(params)
