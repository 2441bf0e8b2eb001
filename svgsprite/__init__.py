"""svg-sprite-component — SVG files as lazily injected sprite symbols."""

__version__ = "0.1.0"

from svgsprite.engine.config import ComponentOptions, SpriteOptions
from svgsprite.engine.cache import TransformCache
from svgsprite.engine.context import TransformResult
from svgsprite.plugin import SpriteComponentPlugin, create_plugin

__all__ = [
    "__version__",
    "ComponentOptions",
    "SpriteOptions",
    "TransformCache",
    "TransformResult",
    "SpriteComponentPlugin",
    "create_plugin",
]
