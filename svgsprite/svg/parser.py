"""SVG markup parser — facade over BeautifulSoup + lxml.

Locates the root <svg> span in raw text and parses it into a GraphicTree.
The XML parser keeps names case-sensitive but is strict about namespaces and
entities, so the span is prepared first:

- prefixes used without an ``xmlns:`` declaration get a temporary one on the
  root, removed again after parsing
- HTML named entities (``&nbsp;``) become numeric references; names nobody
  defines (``&ns_svg;`` from an external DTD) are kept as literal text
"""

from __future__ import annotations

import logging
import re
from html.entities import name2codepoint

from bs4 import BeautifulSoup

from svgsprite.engine.context import Extraction, Found, GraphicTree, NotFound

logger = logging.getLogger(__name__)

# First <svg ...> up to the first closing tag; nested <svg> are not balanced
_SVG_SPAN_RE = re.compile(r"<svg(?=[\s/>])[\s\S]*?</svg\s*>")
_ROOT_OPEN_RE = re.compile(r"^<svg")
_ENTITY_RE = re.compile(r"&([A-Za-z][\w.-]*);")
# prefix:name= in attributes, <prefix:name / </prefix:name in tags
_PREFIXED_ATTR_RE = re.compile(r"\s([A-Za-z_][\w.-]*):[A-Za-z_][\w.-]*\s*=")
_PREFIXED_TAG_RE = re.compile(r"</?([A-Za-z_][\w.-]*):[A-Za-z_]")
_NS_DECL_RE = re.compile(r"\sxmlns:([A-Za-z_][\w.-]*)\s*=")

_XML_ENTITIES = {"amp", "lt", "gt", "quot", "apos"}
_RESERVED_PREFIXES = {"xml", "xmlns"}
KNOWN_NAMESPACES = {
    "xlink": "http://www.w3.org/1999/xlink",
    "sodipodi": "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
    "inkscape": "http://www.inkscape.org/namespaces/inkscape",
}


def find_svg_span(text: str) -> str | None:
    """Return the raw text of the root graphic span, or None."""
    match = _SVG_SPAN_RE.search(text)
    if not match:
        return None
    return match.group(0)


def _replace_entity(match: re.Match) -> str:
    name = match.group(1)
    if name in _XML_ENTITIES:
        return match.group(0)
    codepoint = name2codepoint.get(name)
    if codepoint is not None:
        return f"&#{codepoint};"
    return f"&amp;{name};"


def _undeclared_prefixes(span: str) -> list[str]:
    used = set(_PREFIXED_ATTR_RE.findall(span)) | set(_PREFIXED_TAG_RE.findall(span))
    declared = set(_NS_DECL_RE.findall(span))
    return sorted(used - declared - _RESERVED_PREFIXES)


def prepare_span(span: str) -> tuple[str, list[str]]:
    """Make ``span`` acceptable to the XML parser without losing names or text.

    Returns the prepared markup and the ``xmlns:*`` attributes that were added.
    """
    span = _ENTITY_RE.sub(_replace_entity, span)
    added: list[str] = []
    declarations = ""
    for prefix in _undeclared_prefixes(span):
        uri = KNOWN_NAMESPACES.get(prefix, f"urn:x-undeclared:{prefix}")
        declarations += f' xmlns:{prefix}="{uri}"'
        added.append(f"xmlns:{prefix}")
    if declarations:
        span = _ROOT_OPEN_RE.sub(lambda m: m.group(0) + declarations, span, count=1)
    return span, added


def extract_symbol(text: str) -> Extraction:
    """Parse the first root graphic element of ``text``.

    Returns ``Found(tree)`` on success and ``NotFound()`` when the text holds no
    ``<svg>...</svg>`` span. Tag and attribute names keep their original case.
    """
    span = find_svg_span(text)
    if span is None:
        logger.debug("No <svg> span in %d chars of markup", len(text))
        return NotFound()

    prepared, added = prepare_span(span)
    # XML mode keeps viewBox / linearGradient as written
    soup = BeautifulSoup(prepared, "xml")
    root = soup.find(True)
    if root is None:
        logger.warning("Markup span could not be parsed into an element")
        return NotFound()

    for name in added:
        root.attrs.pop(name, None)
    if added:
        logger.debug("Declared missing namespace prefixes: %s", ", ".join(added))

    tree = GraphicTree(root=root)
    logger.debug(
        "Parsed <%s>: %d attributes, %d child nodes",
        root.name,
        len(root.attrs),
        len(root.contents),
    )
    return Found(tree=tree)
