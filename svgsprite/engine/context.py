"""TransformContext — the single mutable state object flowing through all stages.

Per-graphic parse results → GraphicTree
Emitted code → TransformContext.runtime_code / component_code
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Union

from bs4 import Tag

from svgsprite.engine.config import SpriteOptions


@dataclass
class GraphicTree:
    """A single root graphic element with its attributes and child nodes."""

    root: Tag

    @property
    def attributes(self) -> dict[str, str]:
        return self.root.attrs

    def elements(self) -> Iterator[Tag]:
        """Root first, then every descendant element in document order."""
        yield self.root
        yield from self.root.find_all(True)

    def serialize_children(self) -> str:
        return "".join(str(child) for child in self.root.contents)


@dataclass
class Found:
    tree: GraphicTree


@dataclass
class NotFound:
    pass


Extraction = Union[Found, NotFound]


@dataclass(frozen=True)
class TransformResult:
    """Generated module code plus its source map (placeholder, no mappings)."""

    code: str
    map: dict[str, Any] = field(default_factory=lambda: {"mappings": ""})


def placeholder_map(path: str) -> dict[str, Any]:
    return {"version": 3, "sources": [path], "names": [], "mappings": ""}


@dataclass
class TransformContext:
    """Shared state flowing through the entire pipeline."""

    # Module path as given by the host
    path: str
    # Code the host handed us for this module
    source: str = ""
    # Raw graphic markup read from disk (or injected)
    content: str = ""
    options: SpriteOptions = field(default_factory=SpriteOptions)

    # --- Populated by stages ---
    # File base name without extension
    name: str = ""
    symbol_id: str = ""
    extraction: Extraction | None = None
    runtime_code: str = ""
    component_code: str = ""

    # --- Pipeline metadata ---
    completed_stages: list[str] = field(default_factory=list)

    @property
    def tree(self) -> GraphicTree:
        if not isinstance(self.extraction, Found):
            raise LookupError(f"No graphic extracted for {self.path}")
        return self.extraction.tree

    @property
    def halted(self) -> bool:
        return isinstance(self.extraction, NotFound)

    def to_result(self) -> TransformResult:
        if self.halted:
            return TransformResult(code=self.source, map=placeholder_map(self.path))
        return TransformResult(
            code=self.runtime_code + self.component_code,
            map=placeholder_map(self.path),
        )
