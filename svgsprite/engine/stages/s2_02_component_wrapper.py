"""S2.02 — Component Wrapper Emission.

Only runs when component generation is configured with a known type; the
pipeline gates it out otherwise.
"""

from __future__ import annotations

from svgsprite.codegen.component import emit_component
from svgsprite.engine.context import TransformContext
from svgsprite.engine.registry import Layer, stage


@stage(
    id="S2.02",
    layer=Layer.EMISSION,
    dependencies=["S0.01"],
)
def component_wrapper(ctx: TransformContext) -> None:
    component = ctx.options.component
    if component is None:
        return
    ctx.component_code = emit_component(component, ctx.name, ctx.path, ctx.symbol_id, ctx.source)
