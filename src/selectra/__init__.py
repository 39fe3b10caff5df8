"""
Selectra — Fluent CSS Selector Builder

Builds CSS selectors through method chaining, enforcing the order CSS grammar
requires inside a compound selector:

    element#id.class[attr]:pseudo-class::pseudo-element

Quick Start:
    >>> from selectra import css_selector_builder as css
    >>> css.id("main").class_("container").class_("editable").render()
    '#main.container.editable'

    >>> css.element("a").attr('href$=".png"').pseudo_class("focus").render()
    'a[href$=".png"]:focus'

    >>> css.combine(css.element("ul"), ">", css.element("li")).render()
    'ul > li'

Errors:
    >>> css.class_("x").id("main")
    Traceback (most recent call last):
    ...
    selectra.errors.OutOfOrderError: id 'main': cannot follow class; ...

Installation:
    pip install selectra    # zero runtime dependencies
"""

from selectra.builder import (
    SelectorBuilder,
    attr,
    class_,
    css_selector_builder,
    element,
    id_,
    pseudo_class,
    pseudo_element,
)
from selectra.combinators import CombinedSelector, Combinator, RenderedSelector, combine
from selectra.config import (
    SelectorConfig,
    get_selector_config,
    reset_selector_config,
    selector_config_context,
    set_selector_config,
)
from selectra.errors import (
    DuplicateFragmentError,
    OutOfOrderError,
    SelectorError,
    SelectraError,
    UnknownCombinatorError,
)
from selectra.fragments import FragmentKind
from selectra.protocols import Renderable
from selectra.selector import CompoundSelector
from selectra.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Facade
    "SelectorBuilder",
    "css_selector_builder",
    "element",
    "id_",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    # Selectors
    "CompoundSelector",
    "CombinedSelector",
    "Combinator",
    "RenderedSelector",
    "FragmentKind",
    "Renderable",
    # Errors
    "SelectraError",
    "SelectorError",
    "DuplicateFragmentError",
    "OutOfOrderError",
    "UnknownCombinatorError",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "SelectorConfig",
    "get_selector_config",
    "set_selector_config",
    "reset_selector_config",
    "selector_config_context",
]
