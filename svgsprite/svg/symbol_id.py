"""Symbol id derivation from file name and path."""

from __future__ import annotations

from pathlib import PurePath
from typing import Callable


def svg_name(path: str) -> str:
    """Base name without extension: ``/icons/icon-home.svg`` => ``icon-home``."""
    return PurePath(path).stem


def resolve_symbol_id(
    name: str,
    path: str,
    override: Callable[[str, str], str] | None = None,
) -> str:
    # Ids are not checked for uniqueness; a colliding id is injected only once at runtime
    if override is not None:
        return override(name, path)
    return name
