"""StringBuilder for selector text accumulation.

Appends to a list, joins once at the end instead of repeated string
concatenation.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.extend(["div", "#main", ""])
            >>> sb.build()
            'div#main'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def extend(self, strings: Iterable[str]) -> StringBuilder:
        """Append multiple strings at once.

        Args:
            strings: Strings to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        self._parts.extend(s for s in strings if s)
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)
