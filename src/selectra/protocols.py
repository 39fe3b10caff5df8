"""Protocols for Selectra.

Defines the contract shared by compound and combined selectors so either
can be used as an operand to combine().
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Renderable(Protocol):
    """Anything that renders to CSS selector text.

    Implementations must make render() a pure projection of current state:
    calling it twice without mutation in between returns the same string.

    """

    def render(self) -> str:
        """Return the selector text."""
        ...
