"""Expression renderers: names, literals, operators, functions, CASE and subqueries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from sqlunparse.errors import malformed
from sqlunparse.nodes.expressions import Conditional, Constant, RowConstructor, TableName
from sqlunparse.nodes.kinds import DatetimeField, NodeKind, SubqueryType
from sqlunparse.render.base import _UnparserBase, _unknown  # pyright: ignore[reportPrivateUsage]
from sqlunparse.render.constants import (
    _SPECIAL_VALUE,  # pyright: ignore[reportPrivateUsage]
    _SUBQUERY_OPERATOR,  # pyright: ignore[reportPrivateUsage]
    _TIMESTAMP_INTERVAL,  # pyright: ignore[reportPrivateUsage]
)
from sqlunparse.render.utils import _format_literal, quote_ident, quote_string  # pyright: ignore[reportPrivateUsage]

if TYPE_CHECKING:
    from sqlunparse.nodes.expressions import (
        Aggregate,
        AggregateWindowFunction,
        Between,
        BinaryOperator,
        Cast,
        Coalesce,
        ColumnReference,
        CurrentDatetime,
        Default,
        ExplicitCollate,
        Extract,
        GroupConcat,
        InList,
        Is,
        Like,
        Parameter,
        RoutineCall,
        RowNumberFunction,
        SequenceValue,
        SimpleCase,
        SpecialValue,
        Subquery,
        TernaryOperator,
        Trim,
        UnaryOperator,
        VirtualColumn,
    )
    from sqlunparse.nodes.lists import ValueNodeList

# Binary kinds rendered ``OP(left, right)`` rather than infix.
_FUNCTION_BINARY: Final = frozenset({NodeKind.LEFT_FN, NodeKind.RIGHT_FN, NodeKind.TIMESTAMP_OPERATOR})

_PREFIX_UNARY: Final = frozenset({NodeKind.NOT, NodeKind.UNARY_PLUS, NodeKind.UNARY_MINUS, NodeKind.UNARY_BITNOT})
_SUFFIX_UNARY: Final = frozenset({NodeKind.IS_NULL, NodeKind.IS_NOT_NULL})

_BOOLEAN_CONSTANTS: Final = frozenset({NodeKind.BOOLEAN_CONSTANT, NodeKind.SQL_BOOLEAN_CONSTANT})

_CURRENT_DATETIME: Final = {
    DatetimeField.DATE: "CURRENT_DATE",
    DatetimeField.TIME: "CURRENT_TIME",
    DatetimeField.TIMESTAMP: "CURRENT_TIMESTAMP",
}

_TRIM_SIDE: Final = {"LTRIM": "LEADING", "RTRIM": "TRAILING"}


class _ExpressionMixin(_UnparserBase):
    """Mixin providing expression renderers."""

    # ── Names ─────────────────────────────────────────────────────

    def _render_table_name(self, node: TableName) -> str:
        if node.schema_name is None:
            return quote_ident(node.table_name)
        return f"{quote_ident(node.schema_name)}.{quote_ident(node.table_name)}"

    def _render_column_reference(self, node: ColumnReference) -> str:
        if node.table_name is None:
            return quote_ident(node.column_name)
        return f"{self.visit(node.table_name)}.{quote_ident(node.column_name)}"

    def _render_virtual_column(self, node: VirtualColumn) -> str:
        return quote_ident(node.source_column_name)

    # ── Leaf values ───────────────────────────────────────────────

    def _render_constant(self, node: Constant) -> str:
        return _format_literal(node.value)

    def _render_parameter(self, node: Parameter) -> str:
        return f"${node.number + 1}"

    def _render_default(self, node: Default) -> str:
        if node.text:
            return f"DEFAULT {node.text}"
        return "DEFAULT"

    def _render_special_value(self, node: SpecialValue) -> str:
        return _SPECIAL_VALUE[node.kind]

    def _render_current_datetime(self, node: CurrentDatetime) -> str:
        text = _CURRENT_DATETIME.get(node.field)
        return text if text is not None else _unknown(node.field)

    # ── Operators ─────────────────────────────────────────────────

    def _render_binary(self, node: BinaryOperator) -> str:
        op = node.symbol.upper()
        if node.kind in _FUNCTION_BINARY:
            return f"{op}({self.visit(node.left)}, {self.visit(node.right)})"
        return f"{self._maybe_parens(node.left)} {op} {self._maybe_parens(node.right)}"

    def _render_unary(self, node: UnaryOperator) -> str:
        op = node.symbol.upper()
        if node.kind in _PREFIX_UNARY:
            return f"{op} {self._maybe_parens(node.operand)}"
        if node.kind in _SUFFIX_UNARY:
            return f"{self._maybe_parens(node.operand)} {op}"
        return f"{op}({self.visit(node.operand)})"

    def _render_extract(self, node: Extract) -> str:
        return f"{node.field.upper()}({self.visit(node.operand)})"

    def _render_is(self, node: Is) -> str:
        parts = [self._maybe_parens(node.left), "IS"]
        if node.negated:
            parts.append("NOT")
        right = node.right
        if isinstance(right, Constant) and right.kind in _BOOLEAN_CONSTANTS:
            parts.append("UNKNOWN" if right.value is None else ("TRUE" if right.value else "FALSE"))
        else:
            parts.append(self._maybe_parens(right))
        return " ".join(parts)

    def _render_like(self, node: Like) -> str:
        text = f"{self._maybe_parens(node.receiver)} {node.operator.upper()} {self._maybe_parens(node.pattern)}"
        if node.escape is not None:
            text += f" ESCAPE {self._maybe_parens(node.escape)}"
        return text

    def _render_ternary(self, node: TernaryOperator) -> str:
        if node.kind in (NodeKind.TIMESTAMP_ADD_FN, NodeKind.TIMESTAMP_DIFF_FN):
            return self._render_timestamp_function(node)
        args = [self.visit(node.receiver), self.visit(node.left)]
        if node.right is not None:
            args.append(self.visit(node.right))
        return f"{node.symbol.upper()}({', '.join(args)})"

    def _render_timestamp_function(self, node: TernaryOperator) -> str:
        if node.right is None:
            malformed(f"{node.symbol.upper()} needs two operands after the interval", kind=node.kind)
        receiver = node.receiver
        interval = None
        if isinstance(receiver, Constant) and isinstance(receiver.value, int) and not isinstance(receiver.value, bool):
            interval = _TIMESTAMP_INTERVAL.get(receiver.value)
        if interval is None:
            interval = self.visit(receiver)
        return f"{node.symbol.upper()}({interval}, {self.visit(node.left)}, {self.visit(node.right)})"

    def _render_trim(self, node: Trim) -> str:
        op = node.operator.upper()
        chars = node.characters
        if isinstance(chars, Constant) and chars.value == " ":
            return f"{op}({self.visit(node.operand)})"
        side = _TRIM_SIDE.get(op, "BOTH")
        return f"TRIM({side} {self.visit(chars)} FROM {self.visit(node.operand)})"

    # ── Predicates and lists ──────────────────────────────────────

    def _render_value_node_list(self, node: ValueNodeList) -> str:
        return self._join_operands(node)

    def _render_in_list(self, node: InList) -> str:
        keyword = "NOT IN" if node.negated else "IN"
        return f"{self._maybe_parens(node.left)} {keyword} ({self.visit(node.values)})"

    def _render_between(self, node: Between) -> str:
        if len(node.bounds) != 2:
            malformed(f"BETWEEN needs exactly 2 bounds, found {len(node.bounds)}", kind=node.kind)
        low, high = node.bounds
        return f"{self._maybe_parens(node.left)} BETWEEN {self._maybe_parens(low)} AND {self._maybe_parens(high)}"

    def _render_row_constructor(self, node: RowConstructor) -> str:
        items = node.items
        if not items:
            return "EMPTY"
        if len(items) == 1 and not isinstance(items[0], RowConstructor):
            return self.visit(items[0])
        return self._join(items)

    # ── CASE ──────────────────────────────────────────────────────

    def _render_conditional(self, node: Conditional) -> str:
        parts = ["CASE"]
        arm: Conditional | None = node
        else_node = None
        while arm is not None:
            parts.append(f"WHEN {self._maybe_parens(arm.test)} THEN {self._maybe_parens(arm.then)}")
            if isinstance(arm.else_node, Conditional):
                arm = arm.else_node
            else:
                else_node = arm.else_node
                arm = None
        if else_node is not None:
            parts.append(f"ELSE {self._maybe_parens(else_node)}")
        parts.append("END")
        return " ".join(parts)

    def _render_simple_case(self, node: SimpleCase) -> str:
        parts = ["CASE", self._maybe_parens(node.operand)]
        for value, result in zip(node.when_values, node.results):
            parts.append(f"WHEN {self._maybe_parens(value)} THEN {self._maybe_parens(result)}")
        if node.else_value is not None:
            parts.append(f"ELSE {self._maybe_parens(node.else_value)}")
        parts.append("END")
        return " ".join(parts)

    # ── Functions ─────────────────────────────────────────────────

    def _render_coalesce(self, node: Coalesce) -> str:
        return f"{node.function_name}({self.visit(node.args)})"

    def _render_cast(self, node: Cast) -> str:
        return f"CAST({self.visit(node.operand)} AS {node.data_type})"

    def _render_collate(self, node: ExplicitCollate) -> str:
        return f"{self._maybe_parens(node.operand)} COLLATE {node.collation}"

    def _render_sequence_value(self, node: SequenceValue) -> str:
        which = "NEXT" if node.kind is NodeKind.NEXT_SEQUENCE else "CURRENT"
        return f"{which} VALUE FOR {self.visit(node.sequence_name)}"

    def _render_routine_call(self, node: RoutineCall) -> str:
        # Routine names are emitted as written; quoting would change how they resolve.
        procedure = node.procedure_name
        if isinstance(procedure, TableName):
            name = procedure.table_name
            if procedure.schema_name is not None:
                name = f"{procedure.schema_name}.{name}"
        elif procedure is not None:
            name = self.visit(procedure)
        elif node.method_name is not None:
            name = node.method_name
        else:
            malformed("routine call has neither a procedure nor a method name", kind=node.kind)
        return f"{name}({self._join_operands(node.parameters)})"

    def _render_aggregate(self, node: Aggregate) -> str:
        if node.operand is None:
            return node.aggregate_name
        distinct = "DISTINCT " if node.distinct else ""
        return f"{node.aggregate_name}({distinct}{self.visit(node.operand)})"

    def _render_group_concat(self, node: GroupConcat) -> str:
        parts: list[str] = []
        if node.distinct:
            parts.append("DISTINCT")
        parts.append(self._join(node.operands))
        if node.order_by:
            parts.append(self.visit(node.order_by))
        parts.append(f"SEPARATOR {quote_string(node.separator)}")
        return f"GROUP_CONCAT({' '.join(parts)})"

    def _render_aggregate_window(self, node: AggregateWindowFunction) -> str:
        return f"{self.visit(node.aggregate)} OVER {self.visit(node.window)}"

    def _render_row_number(self, node: RowNumberFunction) -> str:
        return f"{node.operator.upper()}() OVER {self.visit(node.window)}"

    # ── Subqueries ────────────────────────────────────────────────

    def _render_subquery(self, node: Subquery) -> str:
        tail = self._order_fetch_offset(node.order_by, node.fetch_first, node.offset)
        query = f"({self.visit(node.result_set)}{tail})"
        subquery_type = node.subquery_type
        if subquery_type is SubqueryType.EXISTS:
            return f"EXISTS {query}"
        if subquery_type is SubqueryType.NOT_EXISTS:
            return f"NOT EXISTS {query}"
        operator = _SUBQUERY_OPERATOR.get(subquery_type)
        if operator is None:
            return query
        if node.left_operand is None:
            malformed(f"{subquery_type.name} subquery has no left operand", kind=node.kind)
        return f"{self._maybe_parens(node.left_operand)} {operator} {query}"
