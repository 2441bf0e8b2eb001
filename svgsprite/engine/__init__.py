"""svg-sprite-component transform engine."""

from svgsprite.engine.registry import stage, Layer, get_registry
from svgsprite.engine.context import TransformContext, TransformResult, GraphicTree
from svgsprite.engine.cache import TransformCache
from svgsprite.engine.pipeline import Pipeline, create_pipeline

__all__ = [
    "stage",
    "Layer",
    "get_registry",
    "TransformContext",
    "TransformResult",
    "GraphicTree",
    "TransformCache",
    "Pipeline",
    "create_pipeline",
]
