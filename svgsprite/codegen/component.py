"""Framework component wrappers that render a <use> reference to the symbol."""

from __future__ import annotations

import logging
import re
from typing import Callable

from svgsprite.codegen.escape import js_string
from svgsprite.engine.config import ComponentOptions

logger = logging.getLogger(__name__)

_DASH_RE = re.compile(r"-([a-z])?")


def default_component_name(symbol_id: str) -> str:
    """``icon-home`` => ``IconHome``; a dash not followed by a-z is dropped."""
    head, rest = symbol_id[:1], symbol_id[1:]
    return head.upper() + _DASH_RE.sub(lambda m: m.group(1).upper() if m.group(1) else "", rest)


def component_name(options: ComponentOptions, name: str, path: str, symbol_id: str) -> str:
    if options.export_name is not None:
        return options.export_name(name, path)
    return default_component_name(symbol_id)


def render_vue(export_name: str, symbol_id: str, default_export: bool, source: str) -> str:
    href = js_string(f"#{symbol_id}")
    lines = [
        'import {h} from "vue";',
        f'export const {export_name} = (props)=> h("svg",props,h("use",{{"xlink:href":{href}}}));',
        # Without a default export the host's original module code fills the slot
        f"export default {export_name};" if default_export else f"{source};",
    ]
    return "\n".join(lines) + "\n"


_RENDERERS: dict[str, Callable[[str, str, bool, str], str]] = {
    "vue": render_vue,
}


def is_known_type(component_type: str | None) -> bool:
    return component_type in _RENDERERS


def emit_component(
    options: ComponentOptions,
    name: str,
    path: str,
    symbol_id: str,
    source: str,
) -> str:
    """Generate wrapper code, or ``""`` for an unknown component type."""
    renderer = _RENDERERS.get(options.type)
    if renderer is None:
        logger.debug("Unknown component type %r, no wrapper emitted", options.type)
        return ""
    export_name = component_name(options, name, path, symbol_id)
    return renderer(export_name, symbol_id, options.default_export, source)
