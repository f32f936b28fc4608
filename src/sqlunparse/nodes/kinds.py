"""Node-kind catalog and the enumerated options carried by nodes."""

from __future__ import annotations

import enum


class NodeKind(enum.Enum):
    """Discriminant of every node the unparser knows how to render.

    The catalog is closed: the dispatcher matches on it exhaustively, so adding a member without a renderer is
    caught by the type checker and by ``tests/sqlunparse/test_dispatch.py``.
    """

    # -- Statements --
    CREATE_TABLE = enum.auto()
    CREATE_VIEW = enum.auto()
    CREATE_INDEX = enum.auto()
    CREATE_SCHEMA = enum.auto()
    CREATE_ALIAS = enum.auto()
    DROP_TABLE = enum.auto()
    DROP_VIEW = enum.auto()
    DROP_TRIGGER = enum.auto()
    DROP_INDEX = enum.auto()
    DROP_SEQUENCE = enum.auto()
    DROP_SCHEMA = enum.auto()
    ALTER_TABLE = enum.auto()
    RENAME = enum.auto()
    EXPLAIN = enum.auto()
    TRANSACTION_CONTROL = enum.auto()
    SET_TRANSACTION_ISOLATION = enum.auto()
    SET_TRANSACTION_ACCESS = enum.auto()
    SET_CONSTRAINTS = enum.auto()
    SET_CONFIGURATION = enum.auto()
    SHOW_CONFIGURATION = enum.auto()
    CURSOR = enum.auto()
    SELECT = enum.auto()
    INSERT = enum.auto()
    UPDATE = enum.auto()
    DELETE = enum.auto()
    CALL_STATEMENT = enum.auto()
    DECLARE_STATEMENT = enum.auto()
    FETCH_STATEMENT = enum.auto()
    CLOSE_STATEMENT = enum.auto()
    PREPARE_STATEMENT = enum.auto()
    EXECUTE_STATEMENT = enum.auto()
    DEALLOCATE_STATEMENT = enum.auto()
    COPY_STATEMENT = enum.auto()

    # -- Table elements and ALTER TABLE actions --
    TABLE_ELEMENT_LIST = enum.auto()
    TABLE_NAME_LIST = enum.auto()
    COLUMN_DEFINITION = enum.auto()
    CONSTRAINT_DEFINITION = enum.auto()
    FK_CONSTRAINT_DEFINITION = enum.auto()
    INDEX_DEFINITION = enum.auto()
    INDEX_COLUMN_LIST = enum.auto()
    INDEX_COLUMN = enum.auto()
    STORAGE_FORMAT = enum.auto()
    AT_RENAME_COLUMN = enum.auto()
    DROP_COLUMN = enum.auto()
    MODIFY_COLUMN_TYPE = enum.auto()
    MODIFY_COLUMN_DEFAULT = enum.auto()
    MODIFY_COLUMN_CONSTRAINT = enum.auto()
    MODIFY_COLUMN_CONSTRAINT_NOT_NULL = enum.auto()
    AT_DROP_INDEX = enum.auto()
    DEFAULT = enum.auto()

    # -- Query clauses --
    SUBQUERY = enum.auto()
    RESULT_COLUMN_LIST = enum.auto()
    RESULT_COLUMN = enum.auto()
    ALL_RESULT_COLUMN = enum.auto()
    FROM_LIST = enum.auto()
    JOIN = enum.auto()
    HALF_OUTER_JOIN = enum.auto()
    FULL_OUTER_JOIN = enum.auto()
    UNION = enum.auto()
    GROUP_BY_LIST = enum.auto()
    GROUP_BY_COLUMN = enum.auto()
    ORDER_BY_LIST = enum.auto()
    ORDER_BY_COLUMN = enum.auto()
    PARTITION_BY_LIST = enum.auto()
    PARTITION_BY_COLUMN = enum.auto()
    WINDOW_LIST = enum.auto()
    WINDOW_DEFINITION = enum.auto()
    WINDOW_REFERENCE = enum.auto()
    VALUE_NODE_LIST = enum.auto()
    FROM_BASE_TABLE = enum.auto()
    FROM_SUBQUERY = enum.auto()
    TABLE_NAME = enum.auto()
    COLUMN_REFERENCE = enum.auto()
    VIRTUAL_COLUMN = enum.auto()
    ROW_RESULT_SET = enum.auto()
    ROWS_RESULT_SET = enum.auto()

    # -- Binary operators --
    AND = enum.auto()
    OR = enum.auto()
    BINARY_EQUALS = enum.auto()
    BINARY_NOT_EQUALS = enum.auto()
    BINARY_GREATER_THAN = enum.auto()
    BINARY_GREATER_EQUALS = enum.auto()
    BINARY_LESS_THAN = enum.auto()
    BINARY_LESS_EQUALS = enum.auto()
    BINARY_PLUS = enum.auto()
    BINARY_MINUS = enum.auto()
    BINARY_TIMES = enum.auto()
    BINARY_DIVIDE = enum.auto()
    BINARY_DIV = enum.auto()
    MOD = enum.auto()
    BINARY_BIT = enum.auto()
    CONCATENATION = enum.auto()
    TIMESTAMP_OPERATOR = enum.auto()
    LEFT_FN = enum.auto()
    RIGHT_FN = enum.auto()

    # -- Unary operators --
    NOT = enum.auto()
    IS_NULL = enum.auto()
    IS_NOT_NULL = enum.auto()
    ABSOLUTE = enum.auto()
    SQRT = enum.auto()
    UNARY_PLUS = enum.auto()
    UNARY_MINUS = enum.auto()
    UNARY_BITNOT = enum.auto()
    UNARY_DATE_TIMESTAMP = enum.auto()
    CHAR_LENGTH = enum.auto()
    OCTET_LENGTH = enum.auto()
    SIMPLE_STRING_OPERATOR = enum.auto()
    EXTRACT = enum.auto()

    # -- Other expressions --
    IS = enum.auto()
    LIKE = enum.auto()
    LOCATE_FUNCTION = enum.auto()
    SUBSTRING = enum.auto()
    TIMESTAMP_ADD_FN = enum.auto()
    TIMESTAMP_DIFF_FN = enum.auto()
    TRIM = enum.auto()
    IN_LIST = enum.auto()
    ROW_CTOR = enum.auto()
    BETWEEN = enum.auto()
    CONDITIONAL = enum.auto()
    SIMPLE_CASE = enum.auto()
    COALESCE_FUNCTION = enum.auto()
    AGGREGATE = enum.auto()
    GROUP_CONCAT = enum.auto()
    AGGREGATE_WINDOW_FUNCTION = enum.auto()
    ROW_NUMBER_FUNCTION = enum.auto()
    CAST = enum.auto()
    EXPLICIT_COLLATE = enum.auto()
    NEXT_SEQUENCE = enum.auto()
    CURRENT_SEQUENCE = enum.auto()
    CURRENT_DATETIME = enum.auto()
    ROUTINE_CALL = enum.auto()
    PARAMETER = enum.auto()

    # -- Special values --
    USER = enum.auto()
    CURRENT_USER = enum.auto()
    SESSION_USER = enum.auto()
    SYSTEM_USER = enum.auto()
    CURRENT_ISOLATION = enum.auto()
    IDENTITY_VAL = enum.auto()
    CURRENT_SCHEMA = enum.auto()
    CURRENT_ROLE = enum.auto()

    # -- Constants --
    UNTYPED_NULL_CONSTANT = enum.auto()
    SQL_BOOLEAN_CONSTANT = enum.auto()
    BOOLEAN_CONSTANT = enum.auto()
    BIT_CONSTANT = enum.auto()
    VARBIT_CONSTANT = enum.auto()
    CHAR_CONSTANT = enum.auto()
    DECIMAL_CONSTANT = enum.auto()
    DOUBLE_CONSTANT = enum.auto()
    FLOAT_CONSTANT = enum.auto()
    INT_CONSTANT = enum.auto()
    LONGINT_CONSTANT = enum.auto()
    LONGVARBIT_CONSTANT = enum.auto()
    LONGVARCHAR_CONSTANT = enum.auto()
    SMALLINT_CONSTANT = enum.auto()
    TINYINT_CONSTANT = enum.auto()
    USERTYPE_CONSTANT = enum.auto()
    VARCHAR_CONSTANT = enum.auto()
    BLOB_CONSTANT = enum.auto()
    CLOB_CONSTANT = enum.auto()
    XML_CONSTANT = enum.auto()


# ---------------------------------------------------------------------------
# Enumerated options
# ---------------------------------------------------------------------------


class ExistenceCheck(enum.Enum):
    """``IF [NOT] EXISTS`` qualifier of a DDL statement."""

    NO_CONDITION = "no_condition"
    IF_EXISTS = "if_exists"
    IF_NOT_EXISTS = "if_not_exists"


class DropBehavior(enum.Enum):
    """``CASCADE`` / ``RESTRICT`` suffix of a DROP statement."""

    DEFAULT = "default"
    CASCADE = "cascade"
    RESTRICT = "restrict"


class SubqueryType(enum.Enum):
    """How a subquery is used inside an expression."""

    FROM = "from"
    EXPRESSION = "expression"
    EXISTS = "exists"
    NOT_EXISTS = "not_exists"
    IN = "in"
    NOT_IN = "not_in"
    EQ_ANY = "eq_any"
    EQ_ALL = "eq_all"
    NE_ANY = "ne_any"
    NE_ALL = "ne_all"
    GT_ANY = "gt_any"
    GT_ALL = "gt_all"
    GE_ANY = "ge_any"
    GE_ALL = "ge_all"
    LT_ANY = "lt_any"
    LT_ALL = "lt_all"
    LE_ANY = "le_any"
    LE_ALL = "le_all"


class JoinType(enum.Enum):
    """Join flavour, used by half-outer joins and ``CREATE INDEX ... USING ... JOIN``."""

    INNER = "inner"
    LEFT_OUTER = "left_outer"
    RIGHT_OUTER = "right_outer"
    FULL_OUTER = "full_outer"


class ConstraintType(enum.Enum):
    """Kind of a table constraint definition."""

    PRIMARY_KEY = "primary_key"
    UNIQUE = "unique"
    CHECK = "check"
    FOREIGN_KEY = "foreign_key"
    DROP = "drop"


class CopyMode(enum.Enum):
    """Direction of a COPY statement."""

    FROM_TABLE = "from_table"
    FROM_SUBQUERY = "from_subquery"
    TO_TABLE = "to_table"


class CopyFormat(enum.Enum):
    """File format of a COPY statement."""

    CSV = "csv"
    MYSQL_DUMP = "mysql_dump"


class ExplainDetail(enum.Enum):
    """Verbosity of an EXPLAIN statement."""

    NORMAL = "normal"
    BRIEF = "brief"
    VERBOSE = "verbose"


class TransactionCommand(enum.Enum):
    """Transaction control verb."""

    BEGIN = "begin"
    COMMIT = "commit"
    ROLLBACK = "rollback"


class IsolationLevel(enum.Enum):
    """Transaction isolation level."""

    READ_UNCOMMITTED = "read_uncommitted"
    READ_COMMITTED = "read_committed"
    REPEATABLE_READ = "repeatable_read"
    SERIALIZABLE = "serializable"


class AccessMode(enum.Enum):
    """Transaction access mode."""

    READ_ONLY = "read_only"
    READ_WRITE = "read_write"


class RenameType(enum.Enum):
    """Object renamed by a RENAME statement."""

    TABLE = "table"
    COLUMN = "column"
    INDEX = "index"


class AliasType(enum.Enum):
    """Routine kind created by CREATE FUNCTION / CREATE PROCEDURE."""

    FUNCTION = "function"
    PROCEDURE = "procedure"


class DatetimeField(enum.Enum):
    """Field of a ``CURRENT_DATE`` / ``CURRENT_TIME`` / ``CURRENT_TIMESTAMP`` expression."""

    DATE = "date"
    TIME = "time"
    TIMESTAMP = "timestamp"


class DefaultAction(enum.Enum):
    """What an ``ALTER COLUMN`` default modification changes."""

    SET = "set"
    INCREMENT = "increment"
    RESTART = "restart"
