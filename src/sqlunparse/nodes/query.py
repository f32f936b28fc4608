"""Query nodes: result sets, FROM items, joins, ordering and windows."""

from __future__ import annotations

import dataclasses

from sqlunparse.nodes.base import Node, register
from sqlunparse.nodes.expressions import ColumnReference, TableName
from sqlunparse.nodes.kinds import NodeKind
from sqlunparse.nodes.lists import (
    FromList,
    GroupByList,
    OrderByList,
    PartitionByList,
    ResultColumnList,
    WindowList,
)

# ── Select list ───────────────────────────────────────────────────


@register(NodeKind.RESULT_COLUMN)
@dataclasses.dataclass(frozen=True, kw_only=True)
class ResultColumn(Node):
    """One entry of a select list, INSERT column list or UPDATE assignment.

    When ``reference`` is set the column renders as that reference alone; UPDATE uses it as the assignment target
    and ``expression`` as the assigned value.
    """

    kind: NodeKind = NodeKind.RESULT_COLUMN
    name: str | None = None
    expression: Node | None = None
    reference: ColumnReference | None = None


@register(NodeKind.ALL_RESULT_COLUMN)
@dataclasses.dataclass(frozen=True, kw_only=True)
class AllResultColumn(Node):
    """``*`` or ``t.*``."""

    kind: NodeKind = NodeKind.ALL_RESULT_COLUMN
    table_name: TableName | None = None


# ── FROM items ────────────────────────────────────────────────────


@register(NodeKind.FROM_BASE_TABLE)
@dataclasses.dataclass(frozen=True, kw_only=True)
class FromBaseTable(Node):
    kind: NodeKind = NodeKind.FROM_BASE_TABLE
    table_name: TableName
    correlation_name: str | None = None


@register(NodeKind.FROM_SUBQUERY)
@dataclasses.dataclass(frozen=True, kw_only=True)
class FromSubquery(Node):
    """Derived table: ``(query) AS alias[(columns)]``."""

    kind: NodeKind = NodeKind.FROM_SUBQUERY
    subquery: Node
    correlation_name: str
    order_by: OrderByList | None = None
    fetch_first: Node | None = None
    offset: Node | None = None
    result_columns: ResultColumnList | None = None


@register(NodeKind.JOIN, NodeKind.HALF_OUTER_JOIN, NodeKind.FULL_OUTER_JOIN)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Join(Node):
    """Join of two result sets.

    ``JOIN`` is an inner join, ``HALF_OUTER_JOIN`` a left outer join (right outer when ``right_outer`` is set),
    ``FULL_OUTER_JOIN`` a full outer join.
    """

    kind: NodeKind
    left: Node
    right: Node
    join_clause: Node | None = None
    using_clause: ResultColumnList | None = None
    natural: bool = False
    right_outer: bool = False


@register(NodeKind.UNION)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Union(Node):
    kind: NodeKind = NodeKind.UNION
    left: Node
    right: Node
    all: bool = False


# ── Grouping, ordering and windows ────────────────────────────────


@register(NodeKind.GROUP_BY_COLUMN)
@dataclasses.dataclass(frozen=True, kw_only=True)
class GroupByColumn(Node):
    kind: NodeKind = NodeKind.GROUP_BY_COLUMN
    expression: Node


@register(NodeKind.ORDER_BY_COLUMN)
@dataclasses.dataclass(frozen=True, kw_only=True)
class OrderByColumn(Node):
    kind: NodeKind = NodeKind.ORDER_BY_COLUMN
    expression: Node
    ascending: bool = True
    nulls_first: bool = False


@register(NodeKind.PARTITION_BY_COLUMN)
@dataclasses.dataclass(frozen=True, kw_only=True)
class PartitionByColumn(Node):
    kind: NodeKind = NodeKind.PARTITION_BY_COLUMN
    expression: Node


@register(NodeKind.WINDOW_DEFINITION)
@dataclasses.dataclass(frozen=True, kw_only=True)
class WindowDefinition(Node):
    """Window specification; inline (``OVER (...)``) when ``name`` is ``None``, else ``name AS (...)``."""

    kind: NodeKind = NodeKind.WINDOW_DEFINITION
    name: str | None = None
    partition_by: PartitionByList | None = None
    order_by: OrderByList | None = None


@register(NodeKind.WINDOW_REFERENCE)
@dataclasses.dataclass(frozen=True, kw_only=True)
class WindowReference(Node):
    kind: NodeKind = NodeKind.WINDOW_REFERENCE
    name: str


# ── Result sets ───────────────────────────────────────────────────


@register(NodeKind.ROW_RESULT_SET)
@dataclasses.dataclass(frozen=True, kw_only=True)
class RowResultSet(Node):
    """Single-row ``VALUES(...)``."""

    kind: NodeKind = NodeKind.ROW_RESULT_SET
    result_columns: ResultColumnList


@register(NodeKind.ROWS_RESULT_SET)
@dataclasses.dataclass(frozen=True, kw_only=True)
class RowsResultSet(Node):
    """Multi-row ``VALUES(...), (...)``."""

    kind: NodeKind = NodeKind.ROWS_RESULT_SET
    rows: tuple[RowResultSet, ...] = ()


@register(NodeKind.SELECT)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Select(Node):
    """Query block. ORDER BY, LIMIT and OFFSET belong to the enclosing :class:`Cursor` or subquery."""

    kind: NodeKind = NodeKind.SELECT
    result_columns: ResultColumnList
    from_list: FromList = dataclasses.field(default_factory=FromList)
    distinct: bool = False
    where_clause: Node | None = None
    group_by: GroupByList | None = None
    having_clause: Node | None = None
    windows: WindowList | None = None


@register(NodeKind.CURSOR)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Cursor(Node):
    """Top-level query statement: a result set plus its ordering and row limits."""

    kind: NodeKind = NodeKind.CURSOR
    result_set: Node
    order_by: OrderByList | None = None
    fetch_first: Node | None = None
    offset: Node | None = None
