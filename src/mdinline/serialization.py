"""AST serialization: JSON round-trip for mdinline nodes.

Converts typed AST nodes to/from JSON-compatible dicts. Useful for
caching parsed blocks on disk and for shipping trees to a renderer in
another process.

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from mdinline import parse
    from mdinline.serialization import to_json, from_json

    paragraph = parse("extended", "Hello **World**")
    assert from_json(to_json(paragraph)) == paragraph

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from mdinline.errors import SerializationError
from mdinline.nodes import (
    BoldText,
    BracketedText,
    Code,
    Error,
    ExtensionInline,
    HtmlEntities,
    HtmlEntity,
    Image,
    InlineMath,
    ItalicText,
    Line,
    Link,
    Node,
    OrdinaryText,
    Paragraph,
    Stanza,
    StrikeThroughText,
)

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    cls.__name__: cls
    for cls in (
        OrdinaryText,
        ItalicText,
        BoldText,
        Code,
        InlineMath,
        StrikeThroughText,
        BracketedText,
        HtmlEntity,
        HtmlEntities,
        Link,
        Image,
        ExtensionInline,
        Line,
        Paragraph,
        Stanza,
        Error,
    )
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}
    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed AST node from a dict.

    Raises:
        SerializationError: If ``_type`` is missing or unknown, or a
            required field is absent.

    """
    type_name = data.get("_type")
    if type_name is None:
        raise SerializationError("Missing '_type' field in serialized node")

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        raise SerializationError(f"Unknown node type: {type_name!r}")

    kwargs = {
        f.name: _deserialize_value(data[f.name]) for f in fields(node_cls) if f.name in data
    }
    try:
        return node_cls(**kwargs)
    except TypeError as e:
        raise SerializationError(f"Invalid fields for {type_name}: {e}") from e


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize an AST node to a JSON string."""
    return json.dumps(to_dict(node), sort_keys=True, indent=indent)


def from_json(data: str) -> Paragraph:
    """Deserialize a Paragraph from a JSON string.

    Raises:
        SerializationError: If the JSON doesn't represent a Paragraph.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e
    if not isinstance(raw, dict):
        raise SerializationError(f"Expected a JSON object, got {type(raw).__name__}")
    node = from_dict(raw)
    if not isinstance(node, Paragraph):
        raise SerializationError(f"Expected Paragraph, got {type(node).__name__}")
    return node
