"""Facade for starting selectors.

Each entry point creates a fresh CompoundSelector seeded with one fragment,
ready for chaining:

    >>> css_selector_builder.element("a").attr('href$=".png"').pseudo_class("focus").render()
    'a[href$=".png"]:focus'

Thread Safety:
SelectorBuilder holds no state. Every call returns a new, independently
owned selector, so the shared instance is safe to use from any thread.

"""

from __future__ import annotations

from selectra.combinators import CombinedSelector, combine
from selectra.protocols import Renderable
from selectra.selector import CompoundSelector


class SelectorBuilder:
    """Stateless facade with one entry point per fragment kind plus combine."""

    __slots__ = ()

    def element(self, value: str) -> CompoundSelector:
        return CompoundSelector().element(value)

    def id(self, value: str) -> CompoundSelector:
        return CompoundSelector().id(value)

    def class_(self, value: str) -> CompoundSelector:
        return CompoundSelector().class_(value)

    def attr(self, value: str) -> CompoundSelector:
        return CompoundSelector().attr(value)

    def pseudo_class(self, value: str) -> CompoundSelector:
        return CompoundSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> CompoundSelector:
        return CompoundSelector().pseudo_element(value)

    def combine(
        self, left: Renderable, combinator: str, right: Renderable
    ) -> CombinedSelector:
        return combine(left, combinator, right)


css_selector_builder = SelectorBuilder()

# Module-level shortcuts
element = css_selector_builder.element
id_ = css_selector_builder.id
class_ = css_selector_builder.class_
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element


__all__ = [
    "SelectorBuilder",
    "attr",
    "class_",
    "css_selector_builder",
    "element",
    "id_",
    "pseudo_class",
    "pseudo_element",
]
