"""Base class, registry, and list base for typed AST nodes."""

# ruff: noqa: D105

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from sqlunparse.errors import malformed
from sqlunparse.nodes.kinds import NodeKind

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

_N = TypeVar("_N", bound="Node")
_T = TypeVar("_T", bound="type[Node]")


class Node:
    """Base class for all AST nodes.

    Concrete nodes are frozen, keyword-only dataclasses. Every node exposes its discriminant as ``kind``; a class
    whose instances always share one kind defaults the field, while a *family* class (one field layout shared by
    several kinds, e.g. the six comparison operators) takes it as an argument and rejects kinds outside the family.
    """

    __slots__ = ()

    kind: NodeKind
    KINDS: ClassVar[frozenset[NodeKind]] = frozenset()

    def __post_init__(self) -> None:
        if self.kind not in type(self).KINDS:
            malformed(f"{type(self).__name__} cannot carry kind {self.kind!r}", kind=self.kind)


_REGISTRY: dict[NodeKind, type[Node]] = {}


def register(*kinds: NodeKind) -> Callable[[_T], _T]:
    """Class decorator binding *kinds* to a node class.

    Args:
        *kinds: The node kinds instances of the decorated class may carry.

    Returns:
        The decorator.
    """

    def decorate(cls: _T) -> _T:
        cls.KINDS = frozenset(kinds)
        for kind in kinds:
            if kind in _REGISTRY:
                msg = f"{kind.name} is already bound to {_REGISTRY[kind].__name__}"
                raise RuntimeError(msg)
            _REGISTRY[kind] = cls
        return cls

    return decorate


def node_class(kind: NodeKind) -> type[Node]:
    """Return the node class bound to *kind*.

    Example:
        >>> from sqlunparse.nodes import NodeKind, node_class
        >>> node_class(NodeKind.BINARY_PLUS).__name__
        'BinaryOperator'
    """
    return _REGISTRY[kind]


def registered_classes() -> set[type[Node]]:
    """Return every registered node class."""
    return set(_REGISTRY.values())


@dataclasses.dataclass(frozen=True, kw_only=True)
class UnknownNode(Node):
    """A node whose kind tag is outside the catalog.

    Produced when deserializing a tree from a newer parser. It renders as a visible ``**UNKNOWN(<tag>)**``
    placeholder instead of aborting the whole statement.
    """

    kind: str | int  # type: ignore[assignment]
    fields: dict[str, Any] = dataclasses.field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if isinstance(self.kind, NodeKind):
            malformed(f"UnknownNode cannot carry cataloged kind {self.kind.name}", kind=self.kind)


@dataclasses.dataclass(frozen=True, kw_only=True)
class NodeList(Node, Generic[_N]):
    """Base for the comma-separated list nodes (FROM lists, result columns, ORDER BY lists...)."""

    items: tuple[_N, ...] = ()

    def __iter__(self) -> Iterator[_N]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> _N:
        return self.items[index]
