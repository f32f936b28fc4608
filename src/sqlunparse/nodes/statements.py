"""DML, session, cursor and COPY statement nodes."""

from __future__ import annotations

import dataclasses

from sqlunparse.nodes.base import Node, register
from sqlunparse.nodes.expressions import RoutineCall, TableName
from sqlunparse.nodes.kinds import (
    AccessMode,
    CopyFormat,
    CopyMode,
    ExplainDetail,
    IsolationLevel,
    NodeKind,
    TransactionCommand,
)
from sqlunparse.nodes.lists import OrderByList, ResultColumnList, TableNameList, ValueNodeList

# ── DML ───────────────────────────────────────────────────────────


@register(NodeKind.INSERT)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Insert(Node):
    kind: NodeKind = NodeKind.INSERT
    target: TableName
    result_set: Node
    columns: ResultColumnList | None = None
    order_by: OrderByList | None = None
    returning: ResultColumnList | None = None


@register(NodeKind.UPDATE)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Update(Node):
    """UPDATE statement, carried the way the parser builds it.

    ``result_set`` must be a :class:`~sqlunparse.nodes.query.Select` whose single FROM entry is the target table,
    whose result columns are the assignments (``reference`` = ``expression``) and whose WHERE clause is the
    statement's.
    """

    kind: NodeKind = NodeKind.UPDATE
    result_set: Node
    returning: ResultColumnList | None = None


@register(NodeKind.DELETE)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Delete(Node):
    """DELETE statement; ``result_set`` has the same shape as for :class:`Update`, minus the assignments."""

    kind: NodeKind = NodeKind.DELETE
    result_set: Node
    returning: ResultColumnList | None = None


@register(NodeKind.CALL_STATEMENT)
@dataclasses.dataclass(frozen=True, kw_only=True)
class CallStatement(Node):
    kind: NodeKind = NodeKind.CALL_STATEMENT
    call: RoutineCall


@register(NodeKind.COPY_STATEMENT)
@dataclasses.dataclass(frozen=True, kw_only=True)
class CopyStatement(Node):
    """``COPY`` between a table or query and a file or the client stream.

    ``mode`` decides the direction: ``FROM_TABLE`` and ``FROM_SUBQUERY`` export (``TO``), ``TO_TABLE`` imports
    (``FROM``). Without ``filename`` the client stream is used (``STDOUT`` / ``STDIN``). Zero ``commit_frequency``
    and ``max_retries`` mean unset.
    """

    kind: NodeKind = NodeKind.COPY_STATEMENT
    mode: CopyMode
    table_name: TableName | None = None
    columns: ResultColumnList | None = None
    subquery: Node | None = None
    filename: str | None = None
    format: CopyFormat | None = None
    delimiter: str | None = None
    null_string: str | None = None
    header: bool = False
    quote: str | None = None
    escape: str | None = None
    encoding: str | None = None
    commit_frequency: int = 0
    max_retries: int = 0


# ── Session ───────────────────────────────────────────────────────


@register(NodeKind.EXPLAIN)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Explain(Node):
    kind: NodeKind = NodeKind.EXPLAIN
    statement: Node
    detail: ExplainDetail = ExplainDetail.NORMAL


@register(NodeKind.TRANSACTION_CONTROL)
@dataclasses.dataclass(frozen=True, kw_only=True)
class TransactionControl(Node):
    kind: NodeKind = NodeKind.TRANSACTION_CONTROL
    command: TransactionCommand


@register(NodeKind.SET_TRANSACTION_ISOLATION)
@dataclasses.dataclass(frozen=True, kw_only=True)
class SetTransactionIsolation(Node):
    """``SET TRANSACTION ISOLATION LEVEL``; ``session`` targets the session default instead."""

    kind: NodeKind = NodeKind.SET_TRANSACTION_ISOLATION
    level: IsolationLevel
    session: bool = False


@register(NodeKind.SET_TRANSACTION_ACCESS)
@dataclasses.dataclass(frozen=True, kw_only=True)
class SetTransactionAccess(Node):
    kind: NodeKind = NodeKind.SET_TRANSACTION_ACCESS
    mode: AccessMode
    session: bool = False


@register(NodeKind.SET_CONSTRAINTS)
@dataclasses.dataclass(frozen=True, kw_only=True)
class SetConstraints(Node):
    """``SET CONSTRAINTS``; ``constraints=None`` means ``ALL``."""

    kind: NodeKind = NodeKind.SET_CONSTRAINTS
    constraints: TableNameList | None = None
    deferred: bool = False


@register(NodeKind.SET_CONFIGURATION)
@dataclasses.dataclass(frozen=True, kw_only=True)
class SetConfiguration(Node):
    kind: NodeKind = NodeKind.SET_CONFIGURATION
    variable: str
    value: str


@register(NodeKind.SHOW_CONFIGURATION)
@dataclasses.dataclass(frozen=True, kw_only=True)
class ShowConfiguration(Node):
    kind: NodeKind = NodeKind.SHOW_CONFIGURATION
    variable: str


# ── Cursors and prepared statements ───────────────────────────────


@register(NodeKind.DECLARE_STATEMENT)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Declare(Node):
    kind: NodeKind = NodeKind.DECLARE_STATEMENT
    name: str
    statement: Node


@register(NodeKind.FETCH_STATEMENT)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Fetch(Node):
    """``FETCH n FROM c``; a negative ``count`` fetches ``ALL``."""

    kind: NodeKind = NodeKind.FETCH_STATEMENT
    name: str
    count: int = -1


@register(NodeKind.CLOSE_STATEMENT)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Close(Node):
    kind: NodeKind = NodeKind.CLOSE_STATEMENT
    name: str


@register(NodeKind.PREPARE_STATEMENT)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Prepare(Node):
    kind: NodeKind = NodeKind.PREPARE_STATEMENT
    name: str
    statement: Node


@register(NodeKind.EXECUTE_STATEMENT)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Execute(Node):
    kind: NodeKind = NodeKind.EXECUTE_STATEMENT
    name: str
    parameters: ValueNodeList = dataclasses.field(default_factory=ValueNodeList)


@register(NodeKind.DEALLOCATE_STATEMENT)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Deallocate(Node):
    kind: NodeKind = NodeKind.DEALLOCATE_STATEMENT
    name: str
