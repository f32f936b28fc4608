"""Module-level constants used by the unparser."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from sqlunparse.nodes.kinds import (
    AccessMode,
    DropBehavior,
    ExistenceCheck,
    ExplainDetail,
    IsolationLevel,
    JoinType,
    NodeKind,
    SubqueryType,
    TransactionCommand,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

# ── Reserved words ────────────────────────────────────────────────

# SQL-92 reserved keywords of the grammar.
_SQL92_RESERVED: Final = (
    "add",
    "all",
    "allocate",
    "alter",
    "and",
    "any",
    "are",
    "as",
    "at",
    "authorization",
    "avg",
    "begin",
    "between",
    "bit",
    "both",
    "by",
    "cascaded",
    "case",
    "cast",
    "char",
    "character_length",
    "char_length",
    "check",
    "close",
    "collate",
    "column",
    "commit",
    "connect",
    "connection",
    "constraint",
    "continue",
    "convert",
    "corresponding",
    "create",
    "cross",
    "current",
    "current_date",
    "current_time",
    "current_timestamp",
    "current_user",
    "cursor",
    "deallocate",
    "dec",
    "decimal",
    "declare",
    "_default",
    "delete",
    "describe",
    "disconnect",
    "distinct",
    "double",
    "drop",
    "else",
    "end",
    "endexec",
    "escape",
    "except",
    "exec",
    "execute",
    "exists",
    "external",
    "false",
    "fetch",
    "float",
    "for",
    "foreign",
    "from",
    "full",
    "function",
    "get",
    "get_current_connection",
    "global",
    "grant",
    "group",
    "group_concat",
    "having",
    "hour",
    "identity",
    "immediate",
    "in",
    "index",
    "indicator",
    "inner",
    "inout",
    "input",
    "insensitive",
    "insert",
    "int",
    "integer",
    "intersect",
    "interval",
    "into",
    "is",
    "join",
    "leading",
    "left",
    "like",
    "limit",
    "lower",
    "match",
    "max",
    "min",
    "minute",
    "national",
    "natural",
    "nchar",
    "nvarchar",
    "next",
    "no",
    "none",
    "not",
    "null",
    "nullif",
    "numeric",
    "octet_length",
    "of",
    "on",
    "only",
    "open",
    "or",
    "order",
    "out",
    "outer",
    "output",
    "overlaps",
    "partition",
    "prepare",
    "primary",
    "procedure",
    "public",
    "real",
    "references",
    "restrict",
    "returning",
    "revoke",
    "right",
    "rollback",
    "rows",
    "schema",
    "scroll",
    "second",
    "select",
    "session_user",
    "set",
    "smallint",
    "some",
    "sql",
    "sqlcode",
    "sqlerror",
    "sqlstate",
    "sql_cache",
    "sql_no_cache",
    "straight_join",
    "substring",
    "sum",
    "system_user",
    "table",
    "timezone_hour",
    "timezone_minute",
    "to",
    "trailing",
    "translate",
    "translation",
    "true",
    "union",
    "unique",
    "unknown",
    "update",
    "upper",
    "user",
    "using",
    "values",
    "varchar",
    "varying",
    "whenever",
    "where",
    "with",
    "year",
)

# Dialect keywords the grammar also reserves.
_DIALECT_RESERVED: Final = (
    "atomic",
    "boolean",
    "call",
    "current_role",
    "current_schema",
    "explain",
    "grouping",
    "ltrim",
    "rtrim",
    "trim",
    "substr",
    "xml",
    "xmlexists",
    "xmlparse",
    "xmlquery",
    "xmlserialize",
    "z_order_lat_lon",
)

#: Lowercase words that must be quoted to be used as identifiers. Built once at import and never mutated.
RESERVED_WORDS: Final[frozenset[str]] = frozenset(_SQL92_RESERVED + _DIALECT_RESERVED)

# ── Option text ───────────────────────────────────────────────────

_EXISTENCE_CHECK: Final[Mapping[ExistenceCheck, str]] = {
    ExistenceCheck.NO_CONDITION: "",
    ExistenceCheck.IF_EXISTS: "IF EXISTS ",
    ExistenceCheck.IF_NOT_EXISTS: "IF NOT EXISTS ",
}

_DROP_BEHAVIOR: Final[Mapping[DropBehavior, str]] = {
    DropBehavior.DEFAULT: "",
    DropBehavior.CASCADE: " CASCADE",
    DropBehavior.RESTRICT: " RESTRICT",
}

_EXPLAIN_DETAIL: Final[Mapping[ExplainDetail, str]] = {
    ExplainDetail.NORMAL: "",
    ExplainDetail.BRIEF: "BRIEF ",
    ExplainDetail.VERBOSE: "VERBOSE ",
}

_ISOLATION_LEVEL: Final[Mapping[IsolationLevel, str]] = {
    IsolationLevel.READ_UNCOMMITTED: "READ UNCOMMITTED",
    IsolationLevel.READ_COMMITTED: "READ COMMITTED",
    IsolationLevel.REPEATABLE_READ: "REPEATABLE READ",
    IsolationLevel.SERIALIZABLE: "SERIALIZABLE",
}

_ACCESS_MODE: Final[Mapping[AccessMode, str]] = {
    AccessMode.READ_ONLY: "READ ONLY",
    AccessMode.READ_WRITE: "READ WRITE",
}

_TRANSACTION_COMMAND: Final[Mapping[TransactionCommand, str]] = {
    TransactionCommand.BEGIN: "BEGIN",
    TransactionCommand.COMMIT: "COMMIT",
    TransactionCommand.ROLLBACK: "ROLLBACK",
}

_JOIN_KEYWORD: Final[Mapping[JoinType, str]] = {
    JoinType.INNER: "INNER JOIN",
    JoinType.LEFT_OUTER: "LEFT OUTER JOIN",
    JoinType.RIGHT_OUTER: "RIGHT OUTER JOIN",
    JoinType.FULL_OUTER: "FULL OUTER JOIN",
}

#: Infix text placed between the left operand and the parenthesized query; ``None`` for bare subqueries.
_SUBQUERY_OPERATOR: Final[Mapping[SubqueryType, str | None]] = {
    SubqueryType.FROM: None,
    SubqueryType.EXPRESSION: None,
    SubqueryType.EXISTS: None,
    SubqueryType.NOT_EXISTS: None,
    SubqueryType.IN: "IN",
    SubqueryType.NOT_IN: "NOT IN",
    SubqueryType.EQ_ANY: "= ANY",
    SubqueryType.EQ_ALL: "= ALL",
    SubqueryType.NE_ANY: "<> ANY",
    SubqueryType.NE_ALL: "<> ALL",
    SubqueryType.GT_ANY: "> ANY",
    SubqueryType.GT_ALL: "> ALL",
    SubqueryType.GE_ANY: ">= ANY",
    SubqueryType.GE_ALL: ">= ALL",
    SubqueryType.LT_ANY: "< ANY",
    SubqueryType.LT_ALL: "< ALL",
    SubqueryType.LE_ANY: "<= ANY",
    SubqueryType.LE_ALL: "<= ALL",
}

_DROP_STATEMENT: Final[Mapping[NodeKind, str]] = {
    NodeKind.DROP_TABLE: "DROP TABLE",
    NodeKind.DROP_VIEW: "DROP VIEW",
    NodeKind.DROP_TRIGGER: "DROP TRIGGER",
    NodeKind.DROP_SEQUENCE: "DROP SEQUENCE",
}

#: ``TIMESTAMPADD`` / ``TIMESTAMPDIFF`` interval codes, as carried by the function's first argument.
_TIMESTAMP_INTERVAL: Final[Mapping[int, str]] = {
    0: "MICROSECOND",
    1: "SECOND",
    2: "MINUTE",
    3: "HOUR",
    4: "DAY",
    5: "WEEK",
    6: "MONTH",
    7: "QUARTER",
    8: "YEAR",
}

_SPECIAL_VALUE: Final[Mapping[NodeKind, str]] = {
    NodeKind.USER: "USER",
    NodeKind.CURRENT_USER: "CURRENT_USER",
    NodeKind.SESSION_USER: "SESSION_USER",
    NodeKind.SYSTEM_USER: "SYSTEM_USER",
    NodeKind.CURRENT_ISOLATION: "CURRENT ISOLATION",
    NodeKind.IDENTITY_VAL: "IDENTITY_VAL_LOCAL()",
    NodeKind.CURRENT_SCHEMA: "CURRENT SCHEMA",
    NodeKind.CURRENT_ROLE: "CURRENT_ROLE",
}
