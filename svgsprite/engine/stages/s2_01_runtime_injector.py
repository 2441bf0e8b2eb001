"""S2.01 — Runtime Injector Emission."""

from __future__ import annotations

from svgsprite.codegen.injector import emit_injector
from svgsprite.engine.context import TransformContext
from svgsprite.engine.registry import Layer, stage


@stage(
    id="S2.01",
    layer=Layer.EMISSION,
    dependencies=["S1.01"],
)
def runtime_injector(ctx: TransformContext) -> None:
    ctx.runtime_code = emit_injector(ctx.tree, ctx.symbol_id)
