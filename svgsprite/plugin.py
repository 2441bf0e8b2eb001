"""Build-host plugin — turns ``*.svg`` modules into sprite-registering code.

The host calls ``await plugin.transform(source, path)`` for every module. SVG
modules are read, run through the pipeline once, and memoized by path.
"""

from __future__ import annotations

import asyncio
import logging
import re
from pathlib import Path
from typing import Callable

from svgsprite.engine.cache import TransformCache
from svgsprite.engine.config import SpriteOptions
from svgsprite.engine.context import TransformContext, TransformResult
from svgsprite.engine.pipeline import Pipeline, create_pipeline

logger = logging.getLogger(__name__)

PLUGIN_NAME = "svg-sprite-component"

_SVG_PATH_RE = re.compile(r"\.svg$", re.IGNORECASE)


def read_source(path: str) -> str:
    """Read the raw graphic markup from disk."""
    return Path(path).read_text(encoding="utf-8")


def confined_reader(root: str) -> Callable[[str], str]:
    """Loader that only reads files inside ``root``; relative paths resolve against it."""
    base = Path(root).resolve()

    def read(path: str) -> str:
        target = (base / path).resolve()
        if not target.is_relative_to(base):
            raise PermissionError(f"{path} is outside {base}")
        return target.read_text(encoding="utf-8")

    return read


def is_svg_path(path: str) -> bool:
    return bool(_SVG_PATH_RE.search(path))


class SpriteComponentPlugin:
    """Host-facing transform with a per-plugin result cache."""

    name = PLUGIN_NAME

    def __init__(
        self,
        options: SpriteOptions | None = None,
        cache: TransformCache | None = None,
        loader: Callable[[str], str] | None = None,
        pipeline: Pipeline | None = None,
    ) -> None:
        self.options = options or SpriteOptions()
        self.cache = cache if cache is not None else TransformCache()
        self.loader = loader or read_source
        self.pipeline = pipeline or create_pipeline()

    async def transform(
        self,
        source: str,
        path: str,
        content: str | None = None,
    ) -> TransformResult:
        """Transform one module.

        ``content`` bypasses the loader when the host already holds the raw
        markup. Loader errors propagate to the caller.
        """
        if not is_svg_path(path):
            return TransformResult(code=source, map={"mappings": ""})

        cached = self.cache.get(path)
        if cached is not None:
            logger.debug("Cache hit for %s", path)
            return cached

        if content is None:
            loop = asyncio.get_running_loop()
            content = await loop.run_in_executor(None, self.loader, path)

        result = self.run(source, path, content)
        self.cache.put(path, result)
        return result

    def run(self, source: str, path: str, content: str) -> TransformResult:
        """Run the pipeline synchronously, bypassing the cache."""
        ctx = TransformContext(path=path, source=source, content=content, options=self.options)
        self.pipeline.run(ctx)
        if ctx.halted:
            logger.info("No <svg> element in %s, source passed through", path)
        return ctx.to_result()


def create_plugin(
    options: SpriteOptions | None = None,
    cache: TransformCache | None = None,
    loader: Callable[[str], str] | None = None,
) -> SpriteComponentPlugin:
    """Factory mirroring the host's plugin convention."""
    return SpriteComponentPlugin(options=options, cache=cache, loader=loader)
