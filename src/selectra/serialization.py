"""Selector serialization — JSON round-trip for selector trees.

Converts compound and combined selectors to/from JSON-compatible dicts.
Output is deterministic (sorted keys) so serialized selectors can be used
as cache keys.

Example:
    from selectra import combine, element
    from selectra.serialization import to_json, from_json

    sel = combine(element("ul").class_("menu"), ">", element("li"))
    restored = from_json(to_json(sel))
    assert restored.render() == sel.render()

Deserialization replays fragments through the normal chained calls, so
ordering and duplicate rules are enforced on input too.

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from typing import Any

from selectra.combinators import CombinedSelector, RenderedSelector
from selectra.protocols import Renderable
from selectra.selector import CompoundSelector
from selectra.utils.logger import get_logger

logger = get_logger(__name__)

# (chained call, attribute, is_list) in kind order
_FIELDS: tuple[tuple[str, str, bool], ...] = (
    ("element", "element_tag", False),
    ("id", "id_value", False),
    ("class_", "class_list", True),
    ("attr", "attribute_list", True),
    ("pseudo_class", "pseudo_class_list", True),
    ("pseudo_element", "pseudo_element_value", False),
)


def to_dict(selector: Renderable) -> dict[str, Any]:
    """Convert a selector to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Raises:
        TypeError: If selector is not a CompoundSelector, CombinedSelector
            or RenderedSelector.

    """
    if isinstance(selector, CompoundSelector):
        result: dict[str, Any] = {"_type": "CompoundSelector"}
        for _, attr_name, is_list in _FIELDS:
            value = getattr(selector, attr_name)
            result[attr_name] = list(value) if is_list else value
        return result
    if isinstance(selector, CombinedSelector):
        return {
            "_type": "CombinedSelector",
            "left": to_dict(selector.left),
            "combinator": selector.combinator,
            "right": to_dict(selector.right),
        }
    if isinstance(selector, RenderedSelector):
        return {"_type": "RenderedSelector", "text": selector.text}
    msg = f"Cannot serialize {type(selector).__name__}"
    raise TypeError(msg)


def from_dict(data: dict[str, Any]) -> CompoundSelector | CombinedSelector | RenderedSelector:
    """Reconstruct a selector from a dict produced by to_dict.

    Raises:
        ValueError: If ``_type`` is missing or unknown, or a field is missing
            or has the wrong type.
        SelectorError: If the fragments break ordering or duplicate rules.

    """
    if not isinstance(data, dict):
        msg = f"Expected a dict for a serialized selector, got {type(data).__name__}"
        raise ValueError(msg)

    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized selector"
        raise ValueError(msg)

    if type_name == "CompoundSelector":
        return _compound_from_dict(data)
    if type_name == "CombinedSelector":
        # Built directly: the token was already accepted when first combined
        return CombinedSelector(
            left=from_dict(_require(data, "left", dict)),
            combinator=_require(data, "combinator", str),
            right=from_dict(_require(data, "right", dict)),
        )
    if type_name == "RenderedSelector":
        return RenderedSelector(_require(data, "text", str))
    msg = f"Unknown selector type: {type_name!r}"
    raise ValueError(msg)


def _require(data: dict[str, Any], key: str, expected: type) -> Any:
    if key not in data:
        msg = f"Missing '{key}' field in serialized {data['_type']}"
        raise ValueError(msg)
    value = data[key]
    if not isinstance(value, expected):
        msg = f"Field '{key}' must be {expected.__name__}, got {type(value).__name__}"
        raise ValueError(msg)
    return value


def _compound_from_dict(data: dict[str, Any]) -> CompoundSelector:
    selector = CompoundSelector()
    for method_name, attr_name, is_list in _FIELDS:
        value = data.get(attr_name)
        if value is None:
            continue
        add = getattr(selector, method_name)
        if is_list:
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                msg = f"Field '{attr_name}' must be a list of strings"
                raise ValueError(msg)
            for item in value:
                add(item)
        else:
            if not isinstance(value, str):
                msg = f"Field '{attr_name}' must be str, got {type(value).__name__}"
                raise ValueError(msg)
            add(value)
    return selector


def to_json(selector: Renderable, *, indent: int | None = None) -> str:
    """Serialize a selector to a JSON string.

    Args:
        selector: Compound or combined selector.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_dict(selector), sort_keys=True, indent=indent)


def from_json(data: str) -> CompoundSelector | CombinedSelector | RenderedSelector:
    """Deserialize a selector from a JSON string.

    Raises:
        ValueError: If the JSON is not an object describing a selector.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise ValueError(msg)
    selector = from_dict(raw)
    logger.debug("Deserialized %s %r", type(selector).__name__, selector.render())
    return selector


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
