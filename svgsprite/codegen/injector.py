"""Runtime injector — module code that registers a <symbol> in the shared sprite container.

The emitted snippet is idempotent: the container is created only when missing,
and the symbol is inserted only when no node with its id exists yet. Two
graphics resolving to the same id therefore register once, first load wins.
"""

from __future__ import annotations

from svgsprite.codegen.escape import js_string
from svgsprite.engine.context import GraphicTree

SVG_NS = "http://www.w3.org/2000/svg"
CONTAINER_ID = "svg-sprite-component-wrap"


def emit_injector(tree: GraphicTree, symbol_id: str) -> str:
    """Generate the registration snippet for a normalized symbol tree."""
    lines = [
        f"let node = document.getElementById({js_string(symbol_id)});",
        f"let wrap = document.getElementById({js_string(CONTAINER_ID)});",
        "if(!wrap){",
        f"  wrap = document.createElementNS({js_string(SVG_NS)}, \"svg\");",
        f"  wrap.id = {js_string(CONTAINER_ID)};",
        "  wrap.style.setProperty(\"display\", \"none\");",
        "  document.body.appendChild(wrap);",
        "}",
        "if(!node){",
        f"  let symbol = document.createElementNS({js_string(SVG_NS)}, \"symbol\");",
        "  wrap.appendChild(symbol);",
    ]
    for name, value in tree.attributes.items():
        lines.append(f"  symbol.setAttribute({js_string(str(name))}, {js_string(str(value))});")
    lines.append(f"  symbol.innerHTML = {js_string(tree.serialize_children())};")
    lines.append("}")
    return "\n".join(lines) + "\n"
