"""Value-producing nodes: names, constants, operators, functions and subqueries."""

from __future__ import annotations

import dataclasses
import datetime
import decimal
from typing import Final, Union

from sqlunparse.errors import malformed
from sqlunparse.nodes.base import Node, register
from sqlunparse.nodes.kinds import DatetimeField, NodeKind, SubqueryType
from sqlunparse.nodes.lists import OrderByList, ValueNodeList

#: Python types a :class:`Constant` may hold.
ConstantValue = Union[None, bool, int, float, decimal.Decimal, str, bytes, datetime.date, datetime.time]

_INT_MAX: Final = 2**31 - 1


# ── Names ─────────────────────────────────────────────────────────


@register(NodeKind.TABLE_NAME)
@dataclasses.dataclass(frozen=True, kw_only=True)
class TableName(Node):
    """Optionally schema-qualified object name."""

    kind: NodeKind = NodeKind.TABLE_NAME
    table_name: str
    schema_name: str | None = None


@register(NodeKind.COLUMN_REFERENCE)
@dataclasses.dataclass(frozen=True, kw_only=True)
class ColumnReference(Node):
    kind: NodeKind = NodeKind.COLUMN_REFERENCE
    column_name: str
    table_name: TableName | None = None


@register(NodeKind.VIRTUAL_COLUMN)
@dataclasses.dataclass(frozen=True, kw_only=True)
class VirtualColumn(Node):
    """Reference to a column of an underlying result set, rendered by its source column's name."""

    kind: NodeKind = NodeKind.VIRTUAL_COLUMN
    source_column_name: str


# ── Leaf values ───────────────────────────────────────────────────

_CONSTANT_KINDS: Final = (
    NodeKind.UNTYPED_NULL_CONSTANT,
    NodeKind.SQL_BOOLEAN_CONSTANT,
    NodeKind.BOOLEAN_CONSTANT,
    NodeKind.BIT_CONSTANT,
    NodeKind.VARBIT_CONSTANT,
    NodeKind.CHAR_CONSTANT,
    NodeKind.DECIMAL_CONSTANT,
    NodeKind.DOUBLE_CONSTANT,
    NodeKind.FLOAT_CONSTANT,
    NodeKind.INT_CONSTANT,
    NodeKind.LONGINT_CONSTANT,
    NodeKind.LONGVARBIT_CONSTANT,
    NodeKind.LONGVARCHAR_CONSTANT,
    NodeKind.SMALLINT_CONSTANT,
    NodeKind.TINYINT_CONSTANT,
    NodeKind.USERTYPE_CONSTANT,
    NodeKind.VARCHAR_CONSTANT,
    NodeKind.BLOB_CONSTANT,
    NodeKind.CLOB_CONSTANT,
    NodeKind.XML_CONSTANT,
)


@register(*_CONSTANT_KINDS)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Constant(Node):
    """Literal value. The kind records the SQL type the parser assigned; rendering depends only on ``value``."""

    kind: NodeKind
    value: ConstantValue = None

    @classmethod
    def of(cls, value: ConstantValue) -> Constant:
        """Build a constant, inferring its kind from the Python type of *value*.

        Example:
            >>> Constant.of("abc").kind
            <NodeKind.VARCHAR_CONSTANT: ...>
        """
        kind: NodeKind
        if value is None:
            kind = NodeKind.UNTYPED_NULL_CONSTANT
        elif isinstance(value, bool):
            kind = NodeKind.BOOLEAN_CONSTANT
        elif isinstance(value, int):
            kind = NodeKind.INT_CONSTANT if -_INT_MAX - 1 <= value <= _INT_MAX else NodeKind.LONGINT_CONSTANT
        elif isinstance(value, float):
            kind = NodeKind.DOUBLE_CONSTANT
        elif isinstance(value, decimal.Decimal):
            kind = NodeKind.DECIMAL_CONSTANT
        elif isinstance(value, str):
            kind = NodeKind.VARCHAR_CONSTANT
        elif isinstance(value, bytes):
            kind = NodeKind.VARBIT_CONSTANT
        else:
            kind = NodeKind.USERTYPE_CONSTANT
        return cls(kind=kind, value=value)


@register(NodeKind.PARAMETER)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Parameter(Node):
    """Dynamic parameter. ``number`` is zero-based; the first parameter renders as ``$1``."""

    kind: NodeKind = NodeKind.PARAMETER
    number: int


@register(NodeKind.DEFAULT)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Default(Node):
    """``DEFAULT`` keyword, with the default expression text of a column definition when present."""

    kind: NodeKind = NodeKind.DEFAULT
    text: str | None = None


@register(
    NodeKind.USER,
    NodeKind.CURRENT_USER,
    NodeKind.SESSION_USER,
    NodeKind.SYSTEM_USER,
    NodeKind.CURRENT_ISOLATION,
    NodeKind.IDENTITY_VAL,
    NodeKind.CURRENT_SCHEMA,
    NodeKind.CURRENT_ROLE,
)
@dataclasses.dataclass(frozen=True, kw_only=True)
class SpecialValue(Node):
    """Niladic value such as ``CURRENT_USER``, fully determined by its kind."""

    kind: NodeKind


@register(NodeKind.CURRENT_DATETIME)
@dataclasses.dataclass(frozen=True, kw_only=True)
class CurrentDatetime(Node):
    kind: NodeKind = NodeKind.CURRENT_DATETIME
    field: DatetimeField


# ── Operators ─────────────────────────────────────────────────────

#: Operator spelling used when a node does not carry one explicitly.
_DEFAULT_OPERATORS: Final[dict[NodeKind, str]] = {
    NodeKind.AND: "and",
    NodeKind.OR: "or",
    NodeKind.BINARY_EQUALS: "=",
    NodeKind.BINARY_NOT_EQUALS: "<>",
    NodeKind.BINARY_GREATER_THAN: ">",
    NodeKind.BINARY_GREATER_EQUALS: ">=",
    NodeKind.BINARY_LESS_THAN: "<",
    NodeKind.BINARY_LESS_EQUALS: "<=",
    NodeKind.BINARY_PLUS: "+",
    NodeKind.BINARY_MINUS: "-",
    NodeKind.BINARY_TIMES: "*",
    NodeKind.BINARY_DIVIDE: "/",
    NodeKind.BINARY_DIV: "div",
    NodeKind.MOD: "mod",
    NodeKind.CONCATENATION: "||",
    NodeKind.TIMESTAMP_OPERATOR: "timestamp",
    NodeKind.LEFT_FN: "left",
    NodeKind.RIGHT_FN: "right",
    NodeKind.NOT: "not",
    NodeKind.IS_NULL: "is null",
    NodeKind.IS_NOT_NULL: "is not null",
    NodeKind.ABSOLUTE: "abs",
    NodeKind.SQRT: "sqrt",
    NodeKind.UNARY_PLUS: "+",
    NodeKind.UNARY_MINUS: "-",
    NodeKind.UNARY_BITNOT: "~",
    NodeKind.CHAR_LENGTH: "char_length",
    NodeKind.OCTET_LENGTH: "octet_length",
    NodeKind.LOCATE_FUNCTION: "locate",
    NodeKind.SUBSTRING: "substring",
    NodeKind.TIMESTAMP_ADD_FN: "timestampadd",
    NodeKind.TIMESTAMP_DIFF_FN: "timestampdiff",
}


def _operator_symbol(node: Node, operator: str | None) -> str:
    if operator is not None:
        return operator
    try:
        return _DEFAULT_OPERATORS[node.kind]
    except KeyError:
        malformed(f"{node.kind.name} node has no operator", kind=node.kind)


@register(
    NodeKind.AND,
    NodeKind.OR,
    NodeKind.BINARY_EQUALS,
    NodeKind.BINARY_NOT_EQUALS,
    NodeKind.BINARY_GREATER_THAN,
    NodeKind.BINARY_GREATER_EQUALS,
    NodeKind.BINARY_LESS_THAN,
    NodeKind.BINARY_LESS_EQUALS,
    NodeKind.BINARY_PLUS,
    NodeKind.BINARY_MINUS,
    NodeKind.BINARY_TIMES,
    NodeKind.BINARY_DIVIDE,
    NodeKind.BINARY_DIV,
    NodeKind.MOD,
    NodeKind.BINARY_BIT,
    NodeKind.CONCATENATION,
    NodeKind.TIMESTAMP_OPERATOR,
    NodeKind.LEFT_FN,
    NodeKind.RIGHT_FN,
)
@dataclasses.dataclass(frozen=True, kw_only=True)
class BinaryOperator(Node):
    """Two-operand operator.

    Whether it renders infix (``a + b``) or function style (``LEFT(a, b)``) is fixed by the kind. ``operator``
    overrides the kind's default spelling and is required for ``BINARY_BIT`` (``&``, ``|``, ``^``, ``<<``, ``>>``).
    """

    kind: NodeKind
    left: Node
    right: Node
    operator: str | None = None

    @property
    def symbol(self) -> str:
        return _operator_symbol(self, self.operator)


@register(
    NodeKind.NOT,
    NodeKind.IS_NULL,
    NodeKind.IS_NOT_NULL,
    NodeKind.ABSOLUTE,
    NodeKind.SQRT,
    NodeKind.UNARY_PLUS,
    NodeKind.UNARY_MINUS,
    NodeKind.UNARY_BITNOT,
    NodeKind.UNARY_DATE_TIMESTAMP,
    NodeKind.CHAR_LENGTH,
    NodeKind.OCTET_LENGTH,
    NodeKind.SIMPLE_STRING_OPERATOR,
)
@dataclasses.dataclass(frozen=True, kw_only=True)
class UnaryOperator(Node):
    """Single-operand operator; prefix, suffix or function style depending on the kind.

    ``operator`` is required for ``UNARY_DATE_TIMESTAMP`` (``date`` / ``timestamp``) and ``SIMPLE_STRING_OPERATOR``
    (``lower`` / ``upper``).
    """

    kind: NodeKind
    operand: Node
    operator: str | None = None

    @property
    def symbol(self) -> str:
        return _operator_symbol(self, self.operator)


@register(NodeKind.EXTRACT)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Extract(Node):
    """Datetime field extraction, rendered in function form (``YEAR(d)``)."""

    kind: NodeKind = NodeKind.EXTRACT
    field: str
    operand: Node


@register(NodeKind.IS)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Is(Node):
    kind: NodeKind = NodeKind.IS
    left: Node
    right: Node
    negated: bool = False


@register(NodeKind.LIKE)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Like(Node):
    kind: NodeKind = NodeKind.LIKE
    receiver: Node
    pattern: Node
    escape: Node | None = None
    operator: str = "like"


@register(NodeKind.LOCATE_FUNCTION, NodeKind.SUBSTRING, NodeKind.TIMESTAMP_ADD_FN, NodeKind.TIMESTAMP_DIFF_FN)
@dataclasses.dataclass(frozen=True, kw_only=True)
class TernaryOperator(Node):
    """Three-operand function such as ``SUBSTRING(s, 1, 3)`` or ``TIMESTAMPADD(DAY, 1, d)``.

    For the timestamp functions ``receiver`` is an integer constant naming the interval unit.
    """

    kind: NodeKind
    receiver: Node
    left: Node
    right: Node | None = None
    operator: str | None = None

    @property
    def symbol(self) -> str:
        return _operator_symbol(self, self.operator)


@register(NodeKind.TRIM)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Trim(Node):
    """``TRIM`` / ``LTRIM`` / ``RTRIM`` of ``operand``, removing ``characters``."""

    kind: NodeKind = NodeKind.TRIM
    operand: Node
    characters: Node
    operator: str = "trim"


@register(NodeKind.IN_LIST)
@dataclasses.dataclass(frozen=True, kw_only=True)
class InList(Node):
    kind: NodeKind = NodeKind.IN_LIST
    left: Node
    values: ValueNodeList
    negated: bool = False


@register(NodeKind.ROW_CTOR)
@dataclasses.dataclass(frozen=True, kw_only=True)
class RowConstructor(Node):
    kind: NodeKind = NodeKind.ROW_CTOR
    items: tuple[Node, ...] = ()


@register(NodeKind.BETWEEN)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Between(Node):
    """``left BETWEEN bounds[0] AND bounds[1]``."""

    kind: NodeKind = NodeKind.BETWEEN
    left: Node
    bounds: ValueNodeList


@register(NodeKind.CONDITIONAL)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Conditional(Node):
    """One ``WHEN test THEN then`` arm of a searched CASE.

    Further arms chain through ``else_node``; any other node there is the final ``ELSE`` expression.
    """

    kind: NodeKind = NodeKind.CONDITIONAL
    test: Node
    then: Node
    else_node: Node | None = None


@register(NodeKind.SIMPLE_CASE)
@dataclasses.dataclass(frozen=True, kw_only=True)
class SimpleCase(Node):
    kind: NodeKind = NodeKind.SIMPLE_CASE
    operand: Node
    when_values: tuple[Node, ...]
    results: tuple[Node, ...]
    else_value: Node | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if len(self.when_values) != len(self.results):
            malformed(
                f"CASE has {len(self.when_values)} WHEN values but {len(self.results)} results",
                kind=self.kind,
            )


@register(NodeKind.COALESCE_FUNCTION)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Coalesce(Node):
    kind: NodeKind = NodeKind.COALESCE_FUNCTION
    args: ValueNodeList
    function_name: str = "COALESCE"


@register(NodeKind.CAST)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Cast(Node):
    kind: NodeKind = NodeKind.CAST
    operand: Node
    data_type: str


@register(NodeKind.EXPLICIT_COLLATE)
@dataclasses.dataclass(frozen=True, kw_only=True)
class ExplicitCollate(Node):
    kind: NodeKind = NodeKind.EXPLICIT_COLLATE
    operand: Node
    collation: str


@register(NodeKind.NEXT_SEQUENCE, NodeKind.CURRENT_SEQUENCE)
@dataclasses.dataclass(frozen=True, kw_only=True)
class SequenceValue(Node):
    """``NEXT VALUE FOR seq`` or ``CURRENT VALUE FOR seq``."""

    kind: NodeKind
    sequence_name: TableName


@register(NodeKind.ROUTINE_CALL)
@dataclasses.dataclass(frozen=True, kw_only=True)
class RoutineCall(Node):
    """Call of a stored function or procedure, by ``procedure_name`` when resolved, else by ``method_name``."""

    kind: NodeKind = NodeKind.ROUTINE_CALL
    procedure_name: TableName | None = None
    method_name: str | None = None
    parameters: tuple[Node, ...] = ()


# ── Aggregates and windows ────────────────────────────────────────


@register(NodeKind.AGGREGATE)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Aggregate(Node):
    """Aggregate call. With no operand the name is rendered alone (the parser names ``COUNT(*)`` that way)."""

    kind: NodeKind = NodeKind.AGGREGATE
    aggregate_name: str
    operand: Node | None = None
    distinct: bool = False


@register(NodeKind.GROUP_CONCAT)
@dataclasses.dataclass(frozen=True, kw_only=True)
class GroupConcat(Node):
    kind: NodeKind = NodeKind.GROUP_CONCAT
    operands: tuple[Node, ...]
    separator: str = ","
    order_by: OrderByList | None = None
    distinct: bool = False


@register(NodeKind.AGGREGATE_WINDOW_FUNCTION)
@dataclasses.dataclass(frozen=True, kw_only=True)
class AggregateWindowFunction(Node):
    kind: NodeKind = NodeKind.AGGREGATE_WINDOW_FUNCTION
    aggregate: Node
    window: Node


@register(NodeKind.ROW_NUMBER_FUNCTION)
@dataclasses.dataclass(frozen=True, kw_only=True)
class RowNumberFunction(Node):
    """Ranking function (``row_number``, ``rank``, ``dense_rank``...) over a window."""

    kind: NodeKind = NodeKind.ROW_NUMBER_FUNCTION
    window: Node
    operator: str = "row_number"


# ── Subqueries ────────────────────────────────────────────────────


@register(NodeKind.SUBQUERY)
@dataclasses.dataclass(frozen=True, kw_only=True)
class Subquery(Node):
    """Parenthesized query used as an expression; ``left_operand`` is set for IN / ANY / ALL forms."""

    kind: NodeKind = NodeKind.SUBQUERY
    result_set: Node
    subquery_type: SubqueryType = SubqueryType.EXPRESSION
    left_operand: Node | None = None
    order_by: OrderByList | None = None
    fetch_first: Node | None = None
    offset: Node | None = None
