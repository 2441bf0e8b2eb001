"""Plugin options — controls how a graphic becomes a symbol and what code is emitted."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from bs4 import Tag

DEFAULT_REMOVE_ATTRS = ["width", "height"]


@dataclass
class ComponentOptions:
    """Framework component wrapper settings."""

    # Export component type, only "vue" is known
    type: str = "vue"
    # export const [export_name]; default: icon-example => IconExample
    export_name: Callable[[str, str], str] | None = None
    # export default [export_name]
    default_export: bool = False


@dataclass
class SpriteOptions:
    """Options consumed by the transform pipeline.

    ``symbol_id(name, path)`` overrides the <symbol> id, which defaults to the
    file's base name (``/icons/example.svg`` => ``example``).
    ``remove_attrs`` are deleted from elements and from their inline style.
    ``transform(element, style)`` may mutate each element and its style map.
    """

    symbol_id: Callable[[str, str], str] | None = None
    remove_attrs: list[str] | None = None
    transform: Callable[["Tag", dict[str, str]], None] | None = None
    component: ComponentOptions | None = None

    @property
    def effective_remove_attrs(self) -> list[str]:
        if self.remove_attrs is None:
            return list(DEFAULT_REMOVE_ATTRS)
        return list(self.remove_attrs)
