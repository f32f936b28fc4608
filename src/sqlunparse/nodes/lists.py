"""List nodes: every clause that renders as a comma-joined sequence of children."""

from __future__ import annotations

import dataclasses

from sqlunparse.nodes.base import Node, NodeList, register
from sqlunparse.nodes.kinds import NodeKind


@register(NodeKind.TABLE_ELEMENT_LIST)
@dataclasses.dataclass(frozen=True, kw_only=True)
class TableElementList(NodeList[Node]):
    """Column definitions, constraints and ALTER TABLE actions."""

    kind: NodeKind = NodeKind.TABLE_ELEMENT_LIST


@register(NodeKind.TABLE_NAME_LIST)
@dataclasses.dataclass(frozen=True, kw_only=True)
class TableNameList(NodeList[Node]):
    kind: NodeKind = NodeKind.TABLE_NAME_LIST


@register(NodeKind.RESULT_COLUMN_LIST)
@dataclasses.dataclass(frozen=True, kw_only=True)
class ResultColumnList(NodeList[Node]):
    """Select list, column name lists of INSERT / CREATE VIEW / USING, and RETURNING lists."""

    kind: NodeKind = NodeKind.RESULT_COLUMN_LIST


@register(NodeKind.FROM_LIST)
@dataclasses.dataclass(frozen=True, kw_only=True)
class FromList(NodeList[Node]):
    kind: NodeKind = NodeKind.FROM_LIST


@register(NodeKind.GROUP_BY_LIST)
@dataclasses.dataclass(frozen=True, kw_only=True)
class GroupByList(NodeList[Node]):
    kind: NodeKind = NodeKind.GROUP_BY_LIST


@register(NodeKind.ORDER_BY_LIST)
@dataclasses.dataclass(frozen=True, kw_only=True)
class OrderByList(NodeList[Node]):
    kind: NodeKind = NodeKind.ORDER_BY_LIST


@register(NodeKind.PARTITION_BY_LIST)
@dataclasses.dataclass(frozen=True, kw_only=True)
class PartitionByList(NodeList[Node]):
    kind: NodeKind = NodeKind.PARTITION_BY_LIST


@register(NodeKind.WINDOW_LIST)
@dataclasses.dataclass(frozen=True, kw_only=True)
class WindowList(NodeList[Node]):
    """Named window definitions of a ``WINDOW`` clause."""

    kind: NodeKind = NodeKind.WINDOW_LIST


@register(NodeKind.VALUE_NODE_LIST)
@dataclasses.dataclass(frozen=True, kw_only=True)
class ValueNodeList(NodeList[Node]):
    """Expression list; every element is parenthesized when it is not a bare operand."""

    kind: NodeKind = NodeKind.VALUE_NODE_LIST
