"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from svgsprite.config import Settings, settings
from svgsprite.plugin import SpriteComponentPlugin, confined_reader, create_plugin


def get_settings() -> Settings:
    return settings


@lru_cache(maxsize=1)
def get_plugin() -> SpriteComponentPlugin:
    """One plugin, and therefore one cache, shared by every request."""
    cfg = get_settings()
    return create_plugin(options=cfg.sprite_options(), loader=confined_reader(cfg.svg_root))
