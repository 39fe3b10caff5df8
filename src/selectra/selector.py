"""Compound selector accumulator.

CompoundSelector collects the fragments of one CSS compound selector through
chained calls and renders them in CSS grammar order:

    >>> CompoundSelector().id("main").class_("container").class_("editable").render()
    '#main.container.editable'

Every chained call validates before it mutates. A rejected call raises and
leaves the selector unchanged. An empty element, id or pseudo-element counts
as unset: it renders as nothing and a later call may replace it.

Thread Safety:
CompoundSelector is mutable and unsynchronized. Use one instance per caller.

"""

from __future__ import annotations

from collections.abc import Iterator

from selectra.errors import DuplicateFragmentError, OutOfOrderError
from selectra.fragments import FragmentKind
from selectra.stringbuilder import StringBuilder


class CompoundSelector:
    """Mutable builder for a single compound selector.

    Attributes:
        element_tag: Type selector, set at most once
        id_value: Id selector, set at most once
        class_list: Class selectors in insertion order
        attribute_list: Raw attribute selector interiors, e.g. 'href$=".png"'
        pseudo_class_list: Pseudo-class selectors in insertion order
        pseudo_element_value: Pseudo-element selector, set at most once
        last_rank: Rank of the most recently added fragment kind (0 when empty)

    """

    __slots__ = (
        "attribute_list",
        "class_list",
        "element_tag",
        "id_value",
        "last_rank",
        "pseudo_class_list",
        "pseudo_element_value",
    )

    def __init__(self) -> None:
        self.element_tag: str | None = None
        self.id_value: str | None = None
        self.class_list: list[str] = []
        self.attribute_list: list[str] = []
        self.pseudo_class_list: list[str] = []
        self.pseudo_element_value: str | None = None
        self.last_rank: int = 0

    # =========================================================================
    # Chained fragment calls
    # =========================================================================

    def element(self, tag: str) -> CompoundSelector:
        self._accept(FragmentKind.ELEMENT, tag, self.element_tag)
        self.element_tag = tag
        return self

    def id(self, value: str) -> CompoundSelector:
        self._accept(FragmentKind.ID, value, self.id_value)
        self.id_value = value
        return self

    def class_(self, value: str) -> CompoundSelector:
        self._accept(FragmentKind.CLASS, value)
        self.class_list.append(value)
        return self

    def attr(self, value: str) -> CompoundSelector:
        """Add an attribute selector.

        Args:
            value: Text between the brackets, passed through unchecked
        """
        self._accept(FragmentKind.ATTRIBUTE, value)
        self.attribute_list.append(value)
        return self

    def pseudo_class(self, value: str) -> CompoundSelector:
        self._accept(FragmentKind.PSEUDO_CLASS, value)
        self.pseudo_class_list.append(value)
        return self

    def pseudo_element(self, value: str) -> CompoundSelector:
        self._accept(FragmentKind.PSEUDO_ELEMENT, value, self.pseudo_element_value)
        self.pseudo_element_value = value
        return self

    def add(self, kind: FragmentKind, value: str) -> CompoundSelector:
        """Add a fragment by kind.

        Dispatches to the matching chained call, so the same rules apply.
        """
        return getattr(self, _METHOD_NAMES[kind])(value)

    def _accept(self, kind: FragmentKind, value: str, current: str | None = None) -> None:
        if kind.singular and current:
            raise DuplicateFragmentError(kind, value)
        if self.last_rank > kind:
            raise OutOfOrderError(kind, value, FragmentKind(self.last_rank))
        self.last_rank = int(kind)

    # =========================================================================
    # Rendering and inspection
    # =========================================================================

    def fragments(self) -> Iterator[tuple[FragmentKind, str]]:
        """Yield (kind, value) pairs in render order."""
        if self.element_tag:
            yield FragmentKind.ELEMENT, self.element_tag
        if self.id_value:
            yield FragmentKind.ID, self.id_value
        for value in self.class_list:
            yield FragmentKind.CLASS, value
        for value in self.attribute_list:
            yield FragmentKind.ATTRIBUTE, value
        for value in self.pseudo_class_list:
            yield FragmentKind.PSEUDO_CLASS, value
        if self.pseudo_element_value:
            yield FragmentKind.PSEUDO_ELEMENT, self.pseudo_element_value

    def render(self) -> str:
        """Render the selector text.

        Groups appear in kind order, each value with its CSS prefix, and with
        no separator between values or groups. Empty groups are omitted.
        """
        sb = StringBuilder()
        sb.extend(kind.format(value) for kind, value in self.fragments())
        return sb.build()

    def stringify(self) -> str:
        """Alias of render()."""
        return self.render()

    def is_empty(self) -> bool:
        return self.last_rank == 0

    def copy(self) -> CompoundSelector:
        """Return an independent selector with the same fragments."""
        clone = CompoundSelector()
        clone.element_tag = self.element_tag
        clone.id_value = self.id_value
        clone.class_list = list(self.class_list)
        clone.attribute_list = list(self.attribute_list)
        clone.pseudo_class_list = list(self.pseudo_class_list)
        clone.pseudo_element_value = self.pseudo_element_value
        clone.last_rank = self.last_rank
        return clone

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"CompoundSelector({self.render()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompoundSelector):
            return NotImplemented
        return list(self.fragments()) == list(other.fragments())

    __hash__ = None  # type: ignore[assignment]


_METHOD_NAMES: dict[FragmentKind, str] = {
    FragmentKind.ELEMENT: "element",
    FragmentKind.ID: "id",
    FragmentKind.CLASS: "class_",
    FragmentKind.ATTRIBUTE: "attr",
    FragmentKind.PSEUDO_CLASS: "pseudo_class",
    FragmentKind.PSEUDO_ELEMENT: "pseudo_element",
}


__all__ = ["CompoundSelector"]
