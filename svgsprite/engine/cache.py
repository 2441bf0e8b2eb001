"""Transform cache — final results keyed by source path.

Entries live as long as the cache object; there is no eviction and no
content fingerprinting, so a changed file keeps its first result.
"""

from __future__ import annotations

import logging

from svgsprite.engine.context import TransformResult

logger = logging.getLogger(__name__)


class TransformCache:
    """Path → TransformResult store injected into the plugin."""

    def __init__(self) -> None:
        self._entries: dict[str, TransformResult] = {}

    def get(self, path: str) -> TransformResult | None:
        return self._entries.get(path)

    def put(self, path: str, result: TransformResult) -> None:
        self._entries[path] = result
        logger.debug("Cached transform for %s (%d entries)", path, len(self._entries))

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)
