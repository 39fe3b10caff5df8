"""Fragment kinds of a CSS compound selector.

A compound selector is written in a fixed left-to-right order:

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              Can be several occurrences

Each FragmentKind's value is its rank in that order. Builders compare ranks
to reject fragments that would go backward.

Thread Safety:
FragmentKind is an enum (inherently immutable).

"""

from enum import IntEnum


class FragmentKind(IntEnum):
    """Kinds of compound selector fragments, valued by kind-rank."""

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def prefix(self) -> str:
        return _SYNTAX[self][0]

    @property
    def suffix(self) -> str:
        return _SYNTAX[self][1]

    @property
    def singular(self) -> bool:
        """True if the kind may occur at most once per compound selector."""
        return self in _SINGULAR

    @property
    def label(self) -> str:
        """Human-readable name used in error messages."""
        return self.name.lower().replace("_", "-")

    def format(self, value: str) -> str:
        """Render a single fragment value with its CSS syntax.

        Example:
            >>> FragmentKind.ATTRIBUTE.format('href$=".png"')
            '[href$=".png"]'
        """
        return f"{self.prefix}{value}{self.suffix}"


# (prefix, suffix) per kind
_SYNTAX: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}

_SINGULAR = frozenset({FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT})


__all__ = ["FragmentKind"]
