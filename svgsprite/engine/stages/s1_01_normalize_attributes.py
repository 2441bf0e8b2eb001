"""S1.01 — Attribute Normalization."""

from __future__ import annotations

from svgsprite.engine.context import TransformContext
from svgsprite.engine.registry import Layer, stage
from svgsprite.svg.normalizer import normalize_tree


@stage(
    id="S1.01",
    layer=Layer.NORMALIZATION,
    dependencies=["S0.01", "S0.02"],
)
def attribute_normalization(ctx: TransformContext) -> None:
    normalize_tree(
        ctx.tree,
        ctx.symbol_id,
        remove_attrs=ctx.options.effective_remove_attrs,
        transform=ctx.options.transform,
    )
