"""Combinators: joining selectors into selector trees.

combine() joins two renderables with a combinator token. The result is an
immutable CombinedSelector that can itself be an operand, so arbitrarily deep
trees render by recursive left/right expansion:

    >>> from selectra import element
    >>> combine(element("ul"), ">", combine(element("li"), "+", element("li"))).render()
    'ul > li + li'

The token is inserted verbatim with one space on each side. The descendant
token is itself a space, which yields three spaces in the output.

combine() snapshots its operands, so mutating a CompoundSelector after it was
combined does not change what the tree renders.

Thread Safety:
CombinedSelector and RenderedSelector are frozen and own their operands.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from selectra.config import get_selector_config
from selectra.errors import UnknownCombinatorError
from selectra.protocols import Renderable
from selectra.selector import CompoundSelector
from selectra.utils.logger import get_logger

logger = get_logger(__name__)


class Combinator(StrEnum):
    """CSS combinator tokens."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


_KNOWN_TOKENS = frozenset(c.value for c in Combinator)


@dataclass(frozen=True, slots=True)
class RenderedSelector:
    """Selector text captured from a renderable this library does not know."""

    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class CombinedSelector:
    """Two selectors joined by a combinator.

    Exposes no fragment calls; its operands are fixed once combined.

    Attributes:
        left: Left operand (compound, combined or rendered)
        combinator: Token inserted between the operands
        right: Right operand (compound, combined or rendered)

    """

    left: Renderable
    combinator: str
    right: Renderable

    def render(self) -> str:
        return f"{self.left.render()} {self.combinator} {self.right.render()}"

    def stringify(self) -> str:
        """Alias of render()."""
        return self.render()

    def compounds(self) -> Iterator[Renderable]:
        """Yield leaf operands left to right."""
        for operand in (self.left, self.right):
            if isinstance(operand, CombinedSelector):
                yield from operand.compounds()
            else:
                yield operand

    def __str__(self) -> str:
        return self.render()


def combine(left: Renderable, combinator: str, right: Renderable) -> CombinedSelector:
    """Join two selectors with a combinator token.

    Args:
        left: Left operand, snapshotted at call time
        combinator: Combinator token, usually one of ' ', '>', '+', '~'
        right: Right operand, snapshotted at call time

    Returns:
        New CombinedSelector

    Raises:
        UnknownCombinatorError: If strict_combinators is enabled in the active
            SelectorConfig and the token is not a CSS combinator.

    """
    token = str(combinator)
    if token not in _KNOWN_TOKENS:
        if get_selector_config().strict_combinators:
            raise UnknownCombinatorError(token)
        logger.debug("Combining with non-CSS combinator token %r", token)
    return CombinedSelector(left=_freeze(left), combinator=token, right=_freeze(right))


def _freeze(operand: Renderable) -> Renderable:
    if isinstance(operand, CompoundSelector):
        return operand.copy()
    if isinstance(operand, (CombinedSelector, RenderedSelector)):
        return operand
    return RenderedSelector(operand.render())


__all__ = ["CombinedSelector", "Combinator", "RenderedSelector", "combine"]
