"""S0.02 — Symbol Extraction.

Locate the root <svg> span in the raw content and parse it. A NotFound result
halts the pipeline; the host source is then passed through unchanged.
"""

from __future__ import annotations

from svgsprite.engine.context import TransformContext
from svgsprite.engine.registry import Layer, stage
from svgsprite.svg.parser import extract_symbol


@stage(
    id="S0.02",
    layer=Layer.PARSING,
)
def symbol_extraction(ctx: TransformContext) -> None:
    ctx.extraction = extract_symbol(ctx.content)
