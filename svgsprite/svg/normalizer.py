"""Attribute normalizer — turns a parsed <svg> tree into a reusable <symbol>.

Per element (root first, then all descendants):
1. root without viewBox gets ``0 0 {width or 200} {height or 200}``
2. inline style decoded into a map
3. caller hook ``transform(element, style)`` runs
4. configured attributes removed (width/height survive on descendants)
5. style map re-encoded, or the style attribute dropped when empty
"""

from __future__ import annotations

import logging
from typing import Callable

from bs4 import Tag

from svgsprite.engine.config import DEFAULT_REMOVE_ATTRS
from svgsprite.engine.context import GraphicTree
from svgsprite.svg.style import decode_style, encode_style

logger = logging.getLogger(__name__)

DEFAULT_VIEWBOX_SIZE = "200"

# Only these names are kept on descendants when listed for removal
_ROOT_ONLY_ATTRS = ("width", "height")


def default_viewbox(attrs: dict[str, str]) -> str:
    width = attrs.get("width") or DEFAULT_VIEWBOX_SIZE
    height = attrs.get("height") or DEFAULT_VIEWBOX_SIZE
    return f"0 0 {width} {height}"


def normalize_tree(
    tree: GraphicTree,
    symbol_id: str,
    remove_attrs: list[str] | None = None,
    transform: Callable[[Tag, dict[str, str]], None] | None = None,
) -> GraphicTree:
    """Rename the root to <symbol> and normalize every element in place."""
    root = tree.root
    root.name = "symbol"
    root["id"] = symbol_id

    remove_list = DEFAULT_REMOVE_ATTRS if remove_attrs is None else remove_attrs
    count = 0
    for element in tree.elements():
        _normalize_element(element, element is root, remove_list, transform)
        count += 1

    # A removal list or hook may have touched the id
    root["id"] = symbol_id
    logger.debug("Normalized %d elements of symbol %r", count, symbol_id)
    return tree


def _normalize_element(
    element: Tag,
    is_root: bool,
    remove_list: list[str],
    transform: Callable[[Tag, dict[str, str]], None] | None,
) -> None:
    attrs = element.attrs

    if is_root and "viewBox" not in attrs:
        attrs["viewBox"] = default_viewbox(attrs)

    style = decode_style(attrs["style"]) if "style" in attrs else {}

    if transform is not None:
        transform(element, style)
        attrs = element.attrs

    for name in remove_list:
        keep_on_child = name in _ROOT_ONLY_ATTRS and not is_root
        if not keep_on_child:
            attrs.pop(name, None)
        style.pop(name, None)

    style_text = encode_style(style)
    if style_text.strip():
        attrs["style"] = style_text
    elif "style" in attrs:
        del attrs["style"]
