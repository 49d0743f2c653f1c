"""Node tree serialization: JSON round-trip for bbspan nodes.

Converts inline node trees to/from JSON-compatible dicts, for hosts that
hand the parsed tree across a process or cache boundary. This is a tree
format, not BBCode: nothing here writes markup.

All output is deterministic (sorted keys).

Example:
    from bbspan import parse
    from bbspan.serialization import to_json, from_json

    doc = parse("[b]Hello[/b]")
    assert from_json(to_json(doc)) == doc

"""

import json
from dataclasses import fields
from enum import Enum
from typing import Any

from bbspan.nodes import Container, Hyperlink, Image, InlineNode, LineBreak, Run
from bbspan.styles import Color, FontSlant, FontWeight, Style, TextDecoration

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Run": Run,
    "LineBreak": LineBreak,
    "Hyperlink": Hyperlink,
    "Image": Image,
    "Container": Container,
}

# Style fields holding enums, keyed to the enum used to decode them
_ENUM_FIELDS: dict[str, type[Enum]] = {
    "weight": FontWeight,
    "slant": FontSlant,
    "decoration": TextDecoration,
}

_COLOR_FIELDS = {"foreground", "background"}


def to_dict(node: InlineNode) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization. Styles
    are written sparsely: unset attributes are omitted.

    Args:
        node: Any bbspan inline node.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}
    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, (Run, LineBreak, Hyperlink, Image, Container)):
        return to_dict(value)
    if isinstance(value, Style):
        return _style_to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, float, None
    return value


def _style_to_dict(style: Style) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for f in fields(style):
        value = getattr(style, f.name)
        if value is None:
            continue
        if isinstance(value, Enum):
            value = value.name
        elif isinstance(value, Color):
            value = str(value)
        result[f.name] = value
    return result


def from_dict(data: dict[str, Any]) -> InlineNode:
    """Reconstruct a node from a dict.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed node (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or unknown, or a style value
            cannot be decoded.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        raw = data[f.name]
        if f.name == "style":
            kwargs[f.name] = _style_from_dict(raw)
        elif isinstance(raw, list):
            kwargs[f.name] = tuple(from_dict(item) for item in raw)
        elif isinstance(raw, dict):
            kwargs[f.name] = from_dict(raw)
        else:
            kwargs[f.name] = raw

    return node_cls(**kwargs)


def _style_from_dict(data: dict[str, Any]) -> Style:
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        if key in _ENUM_FIELDS:
            try:
                kwargs[key] = _ENUM_FIELDS[key][value]
            except KeyError:
                msg = f"Unknown {key} value: {value!r}"
                raise ValueError(msg) from None
        elif key in _COLOR_FIELDS:
            kwargs[key] = Color.parse(value)
        else:
            kwargs[key] = value
    return Style(**kwargs)


def to_json(doc: Container, *, indent: int | None = None) -> str:
    """Serialize a parsed tree to a JSON string.

    Args:
        doc: Root container to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> Container:
    """Deserialize a parsed tree from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a Container.

    """
    node = from_dict(json.loads(data))
    if not isinstance(node, Container):
        msg = f"Expected Container, got {type(node).__name__}"
        raise ValueError(msg)
    return node
