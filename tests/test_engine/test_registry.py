"""Tests for the stage registry."""

import pytest

from svgsprite.engine.context import TransformContext
from svgsprite.engine.pipeline import register_stages
from svgsprite.engine.registry import Layer, StageRegistry, StageSpec, get_registry


def _noop(ctx: TransformContext) -> None:
    pass


def _spec(sid: str, layer: Layer = Layer.PARSING, deps: list[str] | None = None) -> StageSpec:
    return StageSpec(id=sid, layer=layer, fn=_noop, dependencies=deps or [])


def test_register_counts():
    reg = StageRegistry()
    reg.register(_spec("S0.01"))
    assert reg.count == 1


def test_duplicate_id_rejected():
    reg = StageRegistry()
    reg.register(_spec("S0.01"))
    with pytest.raises(ValueError):
        reg.register(_spec("S0.01"))


def test_dependencies_run_first():
    reg = StageRegistry()
    reg.register(_spec("S1.01", Layer.NORMALIZATION, ["S0.02"]))
    reg.register(_spec("S0.02"))
    assert [s.id for s in reg.ordered()] == ["S0.02", "S1.01"]


def test_ready_stages_ordered_by_layer():
    reg = StageRegistry()
    reg.register(_spec("S0.01"))
    reg.register(_spec("S0.02"))
    reg.register(_spec("S2.02", Layer.EMISSION, ["S0.01"]))
    reg.register(_spec("S1.01", Layer.NORMALIZATION, ["S0.02"]))
    assert [s.id for s in reg.ordered()] == ["S0.01", "S0.02", "S1.01", "S2.02"]


def test_skipped_stage_left_out():
    reg = StageRegistry()
    reg.register(_spec("S0.01"))
    reg.register(_spec("S2.02", Layer.EMISSION, ["S0.01"]))
    assert [s.id for s in reg.ordered(skip={"S2.02"})] == ["S0.01"]


def test_unknown_dependency_rejected():
    reg = StageRegistry()
    reg.register(_spec("S1.01", Layer.NORMALIZATION, ["S0.99"]))
    with pytest.raises(ValueError, match="unknown"):
        reg.ordered()


def test_circular_dependency():
    reg = StageRegistry()
    reg.register(_spec("A", deps=["B"]))
    reg.register(_spec("B", deps=["A"]))
    with pytest.raises(ValueError, match="Circular"):
        reg.ordered()


def test_builtin_stages_registered():
    register_stages()
    ids = [s.id for s in get_registry().ordered()]
    assert ids == ["S0.01", "S0.02", "S1.01", "S2.01", "S2.02"]
