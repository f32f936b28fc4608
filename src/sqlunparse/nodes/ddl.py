"""DDL nodes: table elements, ALTER TABLE actions and schema-changing statements."""

from __future__ import annotations

import dataclasses

from sqlunparse.errors import malformed
from sqlunparse.nodes.base import Node, NodeList, register
from sqlunparse.nodes.expressions import Default, TableName
from sqlunparse.nodes.kinds import (
    AliasType,
    ConstraintType,
    DefaultAction,
    DropBehavior,
    ExistenceCheck,
    JoinType,
    NodeKind,
    RenameType,
)
from sqlunparse.nodes.lists import ResultColumnList, TableElementList

# ── Table elements ────────────────────────────────────────────────


@register(NodeKind.COLUMN_DEFINITION)
@dataclasses.dataclass(frozen=True, kw_only=True)
class ColumnDefinition(Node):
    """``name TYPE [DEFAULT v]``. The type is the parser's canonical type text and is emitted verbatim."""

    kind: NodeKind = NodeKind.COLUMN_DEFINITION
    column_name: str
    data_type: str
    default: Default | None = None


@register(NodeKind.CONSTRAINT_DEFINITION)
@dataclasses.dataclass(frozen=True, kw_only=True)
class ConstraintDefinition(Node):
    """Primary key, unique or check constraint, or the removal of one.

    For ``ConstraintType.DROP`` the constraint being removed is named by ``verify_type``: ``DROP`` itself for a
    plain ``DROP CONSTRAINT n``, or ``PRIMARY_KEY`` / ``UNIQUE`` / ``CHECK`` / ``FOREIGN_KEY``. ``existence_check``
    only applies to drops.
    """

    kind: NodeKind = NodeKind.CONSTRAINT_DEFINITION
    constraint_type: ConstraintType
    constraint_name: TableName | None = None
    columns: ResultColumnList | None = None
    check_condition: Node | None = None
    verify_type: ConstraintType | None = None
    existence_check: ExistenceCheck = ExistenceCheck.NO_CONDITION


@register(NodeKind.FK_CONSTRAINT_DEFINITION)
@dataclasses.dataclass(frozen=True, kw_only=True)
class FKConstraintDefinition(Node):
    kind: NodeKind = NodeKind.FK_CONSTRAINT_DEFINITION
    columns: ResultColumnList
    ref_table: TableName
    ref_columns: ResultColumnList | None = None
    constraint_name: TableName | None = None
    grouping: bool = False
    deferrable: bool = False
    initially_deferred: bool = False


@register(NodeKind.STORAGE_FORMAT)
@dataclasses.dataclass(frozen=True, kw_only=True)
class StorageFormat(Node):
    """``STORAGE_FORMAT fmt(k = 'v', ...)`` clause.

    Options are ``(name, value)`` pairs so their order survives a ``Struct`` round trip.
    """

    kind: NodeKind = NodeKind.STORAGE_FORMAT
    format_name: str
    options: tuple[tuple[str, str], ...] = ()


@register(NodeKind.INDEX_COLUMN)
@dataclasses.dataclass(frozen=True, kw_only=True)
class IndexColumn(Node):
    kind: NodeKind = NodeKind.INDEX_COLUMN
    column_name: str
    table_name: TableName | None = None
    ascending: bool = True


@register(NodeKind.INDEX_COLUMN_LIST)
@dataclasses.dataclass(frozen=True, kw_only=True)
class IndexColumnList(NodeList[IndexColumn]):
    """Indexed columns, optionally wrapping the run ``items[function_start:function_end + 1]`` in a function.

    Example: ``Z_ORDER_LAT_LON(lat, lon), name`` has ``function_name="Z_ORDER_LAT_LON"``, ``function_start=0``
    and ``function_end=1``.
    """

    kind: NodeKind = NodeKind.INDEX_COLUMN_LIST
    function_name: str | None = None
    function_start: int | None = None
    function_end: int | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.function_name is None:
            return
        start, end = self.function_start, self.function_end
        if start is None or end is None or not 0 <= start <= end < len(self.items):
            malformed(
                f"index function {self.function_name} spans [{start}, {end}] over {len(self.items)} columns",
                kind=self.kind,
            )


@register(NodeKind.INDEX_DEFINITION)
@dataclasses.dataclass(frozen=True, kw_only=True)
class IndexDefinition(Node):
    """Index declared inside CREATE TABLE or added by ALTER TABLE."""

    kind: NodeKind = NodeKind.INDEX_DEFINITION
    columns: IndexColumnList
    name: str | None = None
    storage_format: StorageFormat | None = None


# ── ALTER TABLE actions ───────────────────────────────────────────


@register(NodeKind.AT_RENAME_COLUMN)
@dataclasses.dataclass(frozen=True, kw_only=True)
class RenameColumn(Node):
    kind: NodeKind = NodeKind.AT_RENAME_COLUMN
    old_name: str
    new_name: str


@register(NodeKind.DROP_COLUMN)
@dataclasses.dataclass(frozen=True, kw_only=True)
class DropColumn(Node):
    kind: NodeKind = NodeKind.DROP_COLUMN
    column_name: str
    existence_check: ExistenceCheck = ExistenceCheck.NO_CONDITION


@register(NodeKind.MODIFY_COLUMN_TYPE)
@dataclasses.dataclass(frozen=True, kw_only=True)
class ModifyColumnType(Node):
    kind: NodeKind = NodeKind.MODIFY_COLUMN_TYPE
    column_name: str
    data_type: str


@register(NodeKind.MODIFY_COLUMN_DEFAULT)
@dataclasses.dataclass(frozen=True, kw_only=True)
class ModifyColumnDefault(Node):
    """``ALTER COLUMN c`` default, identity or generation change.

    With ``DefaultAction.SET``: a generation expression or ``autoincrement`` renders ``SET GENERATED ...``
    (``BY DEFAULT`` when ``default`` is also set, else ``ALWAYS``); otherwise ``default`` renders
    ``SET DEFAULT v`` and its absence ``DROP DEFAULT``.
    """

    kind: NodeKind = NodeKind.MODIFY_COLUMN_DEFAULT
    column_name: str
    action: DefaultAction = DefaultAction.SET
    default: Default | None = None
    generation_expression: Node | None = None
    autoincrement: bool = False
    start: int | None = None
    increment: int | None = None


@register(NodeKind.MODIFY_COLUMN_CONSTRAINT, NodeKind.MODIFY_COLUMN_CONSTRAINT_NOT_NULL)
@dataclasses.dataclass(frozen=True, kw_only=True)
class ModifyColumnConstraint(Node):
    """``ALTER COLUMN c NULL`` or, for ``MODIFY_COLUMN_CONSTRAINT_NOT_NULL``, ``ALTER COLUMN c NOT NULL``."""

    kind: NodeKind
    column_name: str


@register(NodeKind.AT_DROP_INDEX)
@dataclasses.dataclass(frozen=True, kw_only=True)
class AlterDropIndex(Node):
    kind: NodeKind = NodeKind.AT_DROP_INDEX
    index_name: str


# ── Statements ────────────────────────────────────────────────────


@register(NodeKind.CREATE_TABLE)
@dataclasses.dataclass(frozen=True, kw_only=True)
class CreateTable(Node):
    """``CREATE TABLE``, either from element definitions or ``AS (query) WITH [NO] DATA``."""

    kind: NodeKind = NodeKind.CREATE_TABLE
    table_name: TableName
    elements: TableElementList | None = None
    query: Node | None = None
    with_data: bool = True
    existence_check: ExistenceCheck = ExistenceCheck.NO_CONDITION
    storage_format: StorageFormat | None = None


@register(NodeKind.CREATE_VIEW)
@dataclasses.dataclass(frozen=True, kw_only=True)
class CreateView(Node):
    kind: NodeKind = NodeKind.CREATE_VIEW
    view_name: TableName
    query: Node
    columns: ResultColumnList | None = None
    existence_check: ExistenceCheck = ExistenceCheck.NO_CONDITION


@register(NodeKind.CREATE_INDEX)
@dataclasses.dataclass(frozen=True, kw_only=True)
class CreateIndex(Node):
    """``CREATE [UNIQUE] INDEX``; ``join_type`` names the side of a group index (left or right outer only)."""

    kind: NodeKind = NodeKind.CREATE_INDEX
    index_name: TableName
    table_name: TableName
    columns: IndexColumnList
    unique: bool = False
    existence_check: ExistenceCheck = ExistenceCheck.NO_CONDITION
    join_type: JoinType | None = None
    storage_format: StorageFormat | None = None


@register(NodeKind.CREATE_SCHEMA)
@dataclasses.dataclass(frozen=True, kw_only=True)
class CreateSchema(Node):
    kind: NodeKind = NodeKind.CREATE_SCHEMA
    schema_name: str
    authorization: str | None = None
    character_set: str | None = None
    collation: str | None = None
    existence_check: ExistenceCheck = ExistenceCheck.NO_CONDITION


@register(NodeKind.CREATE_ALIAS)
@dataclasses.dataclass(frozen=True, kw_only=True)
class CreateAlias(Node):
    """``CREATE FUNCTION`` / ``CREATE PROCEDURE``.

    ``signature`` is the parser's text for everything between the routine name and its body, starting with the
    parameter list (e.g. ``(x INT) RETURNS INT LANGUAGE javascript``). The body is either an inline ``definition``
    or an ``external_name`` (with an optional ``method_name``).
    """

    kind: NodeKind = NodeKind.CREATE_ALIAS
    alias_name: TableName
    alias_type: AliasType
    signature: str
    definition: str | None = None
    external_name: str | None = None
    method_name: str | None = None
    create_or_replace: bool = False


@register(NodeKind.DROP_TABLE, NodeKind.DROP_VIEW, NodeKind.DROP_TRIGGER, NodeKind.DROP_SEQUENCE)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Drop(Node):
    """``DROP TABLE|VIEW|TRIGGER|SEQUENCE [IF EXISTS] name [CASCADE|RESTRICT]``."""

    kind: NodeKind
    object_name: TableName
    existence_check: ExistenceCheck = ExistenceCheck.NO_CONDITION
    drop_behavior: DropBehavior = DropBehavior.DEFAULT


@register(NodeKind.DROP_SCHEMA)
@dataclasses.dataclass(frozen=True, kw_only=True)
class DropSchema(Node):
    kind: NodeKind = NodeKind.DROP_SCHEMA
    schema_name: str
    existence_check: ExistenceCheck = ExistenceCheck.NO_CONDITION
    drop_behavior: DropBehavior = DropBehavior.DEFAULT


@register(NodeKind.DROP_INDEX)
@dataclasses.dataclass(frozen=True, kw_only=True)
class DropIndex(Node):
    kind: NodeKind = NodeKind.DROP_INDEX
    index_name: str
    table_name: TableName | None = None
    existence_check: ExistenceCheck = ExistenceCheck.NO_CONDITION


@register(NodeKind.ALTER_TABLE)
@dataclasses.dataclass(frozen=True, kw_only=True)
class AlterTable(Node):
    """``ALTER TABLE name action, ...`` or, with ``truncate``, ``TRUNCATE TABLE name``."""

    kind: NodeKind = NodeKind.ALTER_TABLE
    table_name: TableName
    elements: TableElementList | None = None
    truncate: bool = False
    existence_check: ExistenceCheck = ExistenceCheck.NO_CONDITION


@register(NodeKind.RENAME)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Rename(Node):
    """``RENAME TABLE|INDEX|COLUMN``, or ``ALTER TABLE t RENAME COLUMN`` when ``alter_table`` is set.

    Tables are renamed to ``new_table_name``; indexes and columns go from ``old_name`` to ``new_name`` inside the
    optional ``object_name``.
    """

    kind: NodeKind = NodeKind.RENAME
    rename_type: RenameType
    object_name: TableName | None = None
    old_name: str | None = None
    new_name: str | None = None
    new_table_name: TableName | None = None
    alter_table: bool = False
