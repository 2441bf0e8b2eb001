"""Pipeline orchestrator — runs stages in dependency order with component gating."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from svgsprite.engine.context import TransformContext
from svgsprite.engine.registry import Layer, StageRegistry, get_registry

logger = logging.getLogger(__name__)

_STAGES_PACKAGE = "svgsprite.engine.stages"


class Pipeline:
    """Orchestrates the transform stages for one graphic at a time."""

    def __init__(self, registry: StageRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def run(self, ctx: TransformContext) -> TransformContext:
        """Run all stages on the given context.

        Stage errors are logged with the stage id and re-raised; a failed
        invocation produces no result.
        """
        start = time.perf_counter()

        skip_ids = self._gate(ctx)
        ordered = self.registry.ordered(skip=skip_ids)

        logger.debug(
            "Pipeline %s: %d stages queued (%d skipped)",
            ctx.path,
            len(ordered),
            len(skip_ids),
        )

        for spec in ordered:
            if ctx.halted and spec.layer > Layer.PARSING:
                logger.debug("  %s skipped, no <svg> element in %s", spec.id, ctx.path)
                continue
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
            except Exception:
                logger.exception("  %s FAILED for %s", spec.id, ctx.path)
                raise
            ctx.completed_stages.append(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.1fms", spec.id, elapsed)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete for %s: %d/%d stages in %.0fms",
            ctx.path,
            len(ctx.completed_stages),
            len(ordered),
            total,
        )
        return ctx

    def _gate(self, ctx: TransformContext) -> set[str]:
        """Determine which stages to skip based on the options."""
        from svgsprite.codegen.component import is_known_type

        skip: set[str] = set()
        component = ctx.options.component
        if component is None or not is_known_type(component.type):
            skip.add("S2.02")  # Component wrapper
        return skip


def register_stages() -> None:
    """Import all stage modules so @stage decorators fire."""
    package = importlib.import_module(_STAGES_PACKAGE)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{_STAGES_PACKAGE}.{module_name}")


def create_pipeline(registry: StageRegistry | None = None) -> Pipeline:
    """Factory function for creating a pipeline with all stages registered."""
    if registry is None:
        register_stages()
    return Pipeline(registry=registry)
