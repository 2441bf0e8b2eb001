"""S0.01 — Symbol Id Resolution.

Derive the symbol id from the module's file name, or from the caller's
``symbol_id(name, path)`` override.
"""

from __future__ import annotations

from svgsprite.engine.context import TransformContext
from svgsprite.engine.registry import Layer, stage
from svgsprite.svg.symbol_id import resolve_symbol_id, svg_name


@stage(
    id="S0.01",
    layer=Layer.PARSING,
)
def symbol_id_resolution(ctx: TransformContext) -> None:
    ctx.name = svg_name(ctx.path)
    ctx.symbol_id = resolve_symbol_id(ctx.name, ctx.path, ctx.options.symbol_id)
