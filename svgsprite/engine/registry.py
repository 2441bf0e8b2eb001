"""Stage registry — pipeline stages declared with ``@stage`` and ordered by dependency.

A stage is a plain function taking the TransformContext. Dropping a module
with a decorated function into ``engine/stages`` is all it takes to add one.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from graphlib import CycleError, TopologicalSorter
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from svgsprite.engine.context import TransformContext

logger = logging.getLogger(__name__)

StageFn = Callable[["TransformContext"], None]


class Layer(enum.IntEnum):
    PARSING = 0
    NORMALIZATION = 1
    EMISSION = 2


@dataclass
class StageSpec:
    id: str
    layer: Layer
    fn: StageFn
    dependencies: list[str] = field(default_factory=list)


class StageRegistry:
    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.layer.name)

    def ordered(self, skip: set[str] | None = None) -> list[StageSpec]:
        """Stages in dependency order, earliest layer first among those ready.

        Skipped stages are left out together with the edges pointing at them.
        """
        skip = skip or set()
        active = {sid: spec for sid, spec in self._stages.items() if sid not in skip}

        sorter: TopologicalSorter[str] = TopologicalSorter()
        for sid, spec in active.items():
            unknown = [d for d in spec.dependencies if d not in self._stages]
            if unknown:
                raise ValueError(f"Stage {sid} depends on unknown stage(s): {unknown}")
            sorter.add(sid, *(d for d in spec.dependencies if d in active))
        try:
            sorter.prepare()
        except CycleError as e:
            raise ValueError(f"Circular dependency detected among: {e.args[1]}") from e

        result: list[StageSpec] = []
        ready: list[str] = []
        while sorter.is_active():
            ready.extend(sorter.get_ready())
            ready.sort(key=lambda sid: (active[sid].layer, sid))
            sid = ready.pop(0)
            result.append(active[sid])
            sorter.done(sid)
        return result

    @property
    def count(self) -> int:
        return len(self._stages)


_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(*, id: str, layer: Layer, dependencies: list[str] | None = None):
    """Register the decorated function as a pipeline stage."""

    def decorator(fn: StageFn) -> StageFn:
        _registry.register(StageSpec(id=id, layer=layer, fn=fn, dependencies=dependencies or []))
        return fn

    return decorator
