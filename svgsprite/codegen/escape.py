"""JavaScript literal escaping for generated module code."""

from __future__ import annotations

import json


def js_string(value: str) -> str:
    """Quote ``value`` as a double-quoted JavaScript string literal.

    Quotes, backslashes and newlines are escaped by the JSON encoder; ``</``
    and the two JSON-legal line separators are escaped so the literal stays
    valid when the module is inlined into a <script> tag.
    """
    literal = json.dumps(value, ensure_ascii=False)
    return (
        literal.replace("</", "<\\/")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )
