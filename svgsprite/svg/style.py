"""Inline style codec — ``style`` attribute text <-> ordered property map."""

from __future__ import annotations


def decode_style(style_text: str) -> dict[str, str]:
    """Decode ``"fill:red;stroke:blue"`` into ``{"fill": "red", "stroke": "blue"}``.

    Keys and values keep their whitespace as written, so ``" width"`` is not
    ``"width"``. Entries with an empty property name or without a ``:`` are
    dropped. A repeated property keeps its first position and takes the last value.
    """
    style: dict[str, str] = {}
    for entry in style_text.split(";"):
        key, sep, value = entry.partition(":")
        if not key or not sep:
            continue
        style[key] = value
    return style


def encode_style(style: dict[str, str]) -> str:
    """Encode a property map back to ``key:value;`` text. Empty map => ``""``."""
    return "".join(f"{key}:{value};" for key, value in style.items())
