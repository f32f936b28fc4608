"""AST interchange through protobuf ``Struct`` messages.

A parser running in another process (or another language) hands its tree over as a
:class:`google.protobuf.struct_pb2.Struct`, or as that message's JSON mapping. Each node is an object with a ``"kind"``
entry naming its :class:`~sqlunparse.nodes.NodeKind` member plus one entry per node field:

* child nodes are nested objects; child tuples and storage option pairs are lists;
* enum options are member names (``"IF_NOT_EXISTS"``);
* scalars a ``Struct`` cannot carry losslessly are tagged single-key objects: ``{"$bytes": <base64>}``,
  ``{"$decimal": "1.50"}``, ``{"$date": "2024-01-31"}``, ``{"$time": "12:30:00"}``,
  ``{"$timestamp": "2024-01-31T12:30:00"}`` and ``{"$int": "<digits>"}`` for integers beyond a double's precision.

A ``"kind"`` outside the catalog decodes to :class:`~sqlunparse.nodes.UnknownNode` so the rest of the tree still
renders.
"""

from __future__ import annotations

import base64
import binascii
import dataclasses
import datetime
import decimal
import enum
import functools
import types
import typing
from collections.abc import Mapping
from typing import Any, Final, TypeVar

from google.protobuf import json_format, struct_pb2

from sqlunparse.errors import malformed
from sqlunparse.nodes.base import Node, UnknownNode, node_class
from sqlunparse.nodes.expressions import Constant
from sqlunparse.nodes.kinds import NodeKind

_KIND: Final = "kind"
_MAX_EXACT_INT: Final = 2**53

# Constant kinds whose integral values still decode as floats.
_FLOAT_CONSTANTS: Final = frozenset({NodeKind.DOUBLE_CONSTANT, NodeKind.FLOAT_CONSTANT})


# ── Encoding ──────────────────────────────────────────────────────


def _encode(value: object) -> Any:
    if isinstance(value, Node):
        return _encode_node(value)
    if isinstance(value, enum.Enum):
        return value.name
    if value is None or isinstance(value, (bool, str, float)):
        return value
    if isinstance(value, int):
        return value if abs(value) <= _MAX_EXACT_INT else {"$int": str(value)}
    if isinstance(value, bytes):
        return {"$bytes": base64.b64encode(value).decode("ascii")}
    if isinstance(value, decimal.Decimal):
        return {"$decimal": str(value)}
    # datetime is a date subclass; check it first.
    if isinstance(value, datetime.datetime):
        return {"$timestamp": value.isoformat()}
    if isinstance(value, datetime.date):
        return {"$date": value.isoformat()}
    if isinstance(value, datetime.time):
        return {"$time": value.isoformat()}
    if isinstance(value, (tuple, list)):
        return [_encode(item) for item in value]
    if isinstance(value, Mapping):
        return {str(key): _encode(item) for key, item in value.items()}
    malformed(f"cannot serialize {type(value).__name__} value {value!r}")


def _encode_node(node: Node) -> dict[str, Any]:
    if isinstance(node, UnknownNode):
        return {_KIND: node.kind, **{key: _encode(item) for key, item in node.fields.items()}}
    data: dict[str, Any] = {_KIND: node.kind.name}
    for field in dataclasses.fields(node):
        if field.name != _KIND:
            data[field.name] = _encode(getattr(node, field.name))
    return data


def to_struct(node: Node) -> struct_pb2.Struct:
    """Serialize *node* and its subtree into a protobuf ``Struct``.

    Raises:
        UnparseError: If the tree holds a value with no ``Struct`` representation.
    """
    message = struct_pb2.Struct()
    message.update(_encode_node(node))
    return message


def to_json(node: Node) -> str:
    """Serialize *node* to the JSON mapping of its ``Struct`` form."""
    return json_format.MessageToJson(to_struct(node), indent=None)


# ── Decoding ──────────────────────────────────────────────────────


def _tagged(data: Mapping[str, Any]) -> tuple[bool, Any]:
    """Decode a tagged scalar object, returning ``(False, None)`` when *data* is not one."""
    if len(data) != 1:
        return False, None
    ((tag, text),) = data.items()
    try:
        match tag:
            case "$bytes":
                return True, base64.b64decode(text, validate=True)
            case "$decimal":
                return True, decimal.Decimal(text)
            case "$timestamp":
                return True, datetime.datetime.fromisoformat(text)
            case "$date":
                return True, datetime.date.fromisoformat(text)
            case "$time":
                return True, datetime.time.fromisoformat(text)
            case "$int":
                return True, int(text)
            case _:
                return False, None
    except (TypeError, ValueError, decimal.InvalidOperation, binascii.Error) as e:
        malformed(f"bad {tag} value {text!r}: {e}")


def _decode_any(value: Any) -> Any:
    """Decode a value with no more specific type information."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, (list, tuple)):
        return tuple(_decode_any(item) for item in value)
    if isinstance(value, Mapping):
        if _KIND in value:
            return _decode_node(value)
        is_tagged, scalar = _tagged(value)
        if is_tagged:
            return scalar
        return {key: _decode_any(item) for key, item in value.items()}
    return value


def _decode(value: Any, hint: Any) -> Any:  # noqa: C901, PLR0911
    """Decode *value* as the field type *hint*."""
    if hint is Any:
        return _decode_any(value)
    origin = typing.get_origin(hint)
    if origin is typing.Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if value is None:
            return None
        if len(args) == 1:
            return _decode(value, args[0])
        return _decode_any(value)
    if origin is tuple:
        if not isinstance(value, (list, tuple)):
            malformed(f"expected a list, found {value!r}")
        args = typing.get_args(hint)
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(_decode(item, args[0]) for item in value)
        if len(value) != len(args):
            malformed(f"expected a list of {len(args)} items, found {value!r}")
        return tuple(_decode(item, arg) for item, arg in zip(value, args, strict=True))
    if isinstance(hint, TypeVar) or (isinstance(hint, type) and issubclass(hint, Node)):
        if not isinstance(value, Mapping):
            malformed(f"expected a node object, found {value!r}")
        node = _decode_node(value)
        if isinstance(hint, type) and not isinstance(node, (hint, UnknownNode)):
            malformed(f"expected {hint.__name__}, found {type(node).__name__}", kind=node.kind)
        return node
    if isinstance(hint, type) and issubclass(hint, enum.Enum):
        try:
            return hint[value]
        except (KeyError, TypeError):
            malformed(f"{value!r} is not a {hint.__name__} member")
    if hint is int:
        if isinstance(value, Mapping):
            return _decode_any(value)
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        malformed(f"expected an integer, found {value!r}")
    if hint is bool and not isinstance(value, bool):
        malformed(f"expected a boolean, found {value!r}")
    if hint is str and not isinstance(value, str):
        malformed(f"expected a string, found {value!r}")
    return value


@functools.lru_cache(maxsize=None)
def _field_hints(cls: type[Node]) -> dict[str, Any]:
    """Resolved type hints of *cls*'s dataclass fields, keyed by field name."""
    hints = typing.get_type_hints(cls)
    return {field.name: hints[field.name] for field in dataclasses.fields(cls) if field.name != _KIND}


def _decode_node(data: Mapping[str, Any]) -> Node:
    tag = data.get(_KIND)
    if tag is None:
        malformed(f"serialized node has no {_KIND!r}: {dict(data)!r}")
    fields = {key: item for key, item in data.items() if key != _KIND}

    kind = NodeKind.__members__.get(tag) if isinstance(tag, str) else None
    if kind is None:
        if isinstance(tag, float) and tag.is_integer():
            tag = int(tag)
        return UnknownNode(kind=tag, fields={key: _decode_any(item) for key, item in fields.items()})

    cls = node_class(kind)
    hints = _field_hints(cls)
    unknown = sorted(set(fields) - set(hints))
    if unknown:
        malformed(f"{cls.__name__} has no field(s) {', '.join(unknown)}", kind=kind)
    kwargs = {key: _decode(item, hints[key]) for key, item in fields.items()}
    if cls is Constant and kind in _FLOAT_CONSTANTS and isinstance(kwargs.get("value"), int):
        kwargs["value"] = float(kwargs["value"])
    try:
        return cls(kind=kind, **kwargs)  # type: ignore[call-arg]
    except TypeError as e:
        malformed(f"cannot build {cls.__name__}: {e}", kind=kind)


def from_struct(message: struct_pb2.Struct | Mapping[str, Any]) -> Node:
    """Decode a node tree from a protobuf ``Struct`` (or an equivalent plain mapping).

    Args:
        message: The serialized root node.

    Returns:
        The typed node tree.

    Raises:
        UnparseError: If a node has no ``"kind"``, names a field its class does not have, or carries a value of the
            wrong shape.

    Example:
        >>> from sqlunparse import from_struct, unparse
        >>> unparse(from_struct({"kind": "TABLE_NAME", "schema_name": "app", "table_name": "Users"}))
        'app."Users"'
    """
    data = json_format.MessageToDict(message) if isinstance(message, struct_pb2.Struct) else message
    return _decode_node(data)


def from_json(text: str) -> Node:
    """Decode a node tree from the JSON mapping of its ``Struct`` form.

    Raises:
        UnparseError: If *text* is not a JSON object or does not describe a valid tree.
    """
    message = struct_pb2.Struct()
    try:
        json_format.Parse(text, message)
    except json_format.ParseError as e:
        malformed(f"invalid AST JSON: {e}")
    return from_struct(message)
