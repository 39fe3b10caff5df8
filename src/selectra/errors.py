"""Exception classes for Selectra.

Provides standardized exceptions for selector construction errors.
All of them are programming errors: raise at the offending call, never retry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectra.fragments import FragmentKind


class SelectraError(Exception):
    """Base exception for all Selectra errors.

    Subclass this for specific error categories.
    """

    pass


class SelectorError(SelectraError):
    """Error while building a compound selector.

    Carries the fragment kind and value of the call that failed.
    """

    def __init__(self, kind: FragmentKind, value: str, message: str) -> None:
        """Initialize selector error.

        Args:
            kind: Fragment kind of the rejected call
            value: Value passed to the rejected call
            message: Description of the grammar violation
        """
        self.kind = kind
        self.value = value
        super().__init__(f"{kind.label} {value!r}: {message}")


class DuplicateFragmentError(SelectorError):
    """Singular fragment given twice.

    Element, id and pseudo-element may occur at most once per compound selector.
    """

    def __init__(self, kind: FragmentKind, value: str) -> None:
        super().__init__(
            kind,
            value,
            "element, id and pseudo-element should not occur more than one time "
            "inside the selector",
        )


class OutOfOrderError(SelectorError):
    """Fragment added after a fragment of a later kind.

    Selector parts should be arranged in the following order:
    element, id, class, attribute, pseudo-class, pseudo-element.
    """

    def __init__(self, kind: FragmentKind, value: str, previous: FragmentKind) -> None:
        """Initialize ordering error.

        Args:
            kind: Fragment kind of the rejected call
            value: Value passed to the rejected call
            previous: Highest fragment kind already present in the selector
        """
        self.previous = previous
        super().__init__(
            kind,
            value,
            f"cannot follow {previous.label}; selector parts should be arranged in "
            "the following order: element, id, class, attribute, pseudo-class, "
            "pseudo-element",
        )


class UnknownCombinatorError(SelectraError):
    """Combinator token outside the CSS set in strict mode."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown combinator {token!r}: expected one of ' ', '>', '+', '~'")
