"""Tests for expression rendering: literals, operators, predicates, functions, CASE and subqueries."""

from __future__ import annotations

import datetime
import decimal
from typing import TYPE_CHECKING

import pytest

from sqlunparse import UnparseError, unparse
from sqlunparse.nodes import (
    Aggregate,
    AggregateWindowFunction,
    BinaryOperator,
    Between,
    Cast,
    Coalesce,
    Conditional,
    Constant,
    CurrentDatetime,
    DatetimeField,
    Default,
    ExplicitCollate,
    Extract,
    GroupConcat,
    InList,
    Is,
    Like,
    NodeKind,
    Parameter,
    PartitionByColumn,
    PartitionByList,
    RoutineCall,
    RowConstructor,
    RowNumberFunction,
    SequenceValue,
    SimpleCase,
    SpecialValue,
    Subquery,
    SubqueryType,
    TernaryOperator,
    Trim,
    UnaryOperator,
    UnknownNode,
    ValueNodeList,
    VirtualColumn,
    WindowDefinition,
    WindowReference,
)

from .conftest import assert_malformed, assert_sql, binop, col, const, order_by, select, table

if TYPE_CHECKING:
    from sqlunparse.nodes import Node


def _values(*nodes: Node) -> ValueNodeList:
    return ValueNodeList(items=nodes)


# ── Literals ──────────────────────────────────────────────────────


class TestConstants:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "NULL"),
            (True, "TRUE"),
            (False, "FALSE"),
            (0, "0"),
            (-5, "-5"),
            (2**40, "1099511627776"),
            (1.5, "1.500000e+00"),
            (decimal.Decimal("1.50"), "1.50"),
            ("abc", "'abc'"),
            ("O'Brien", "'O''Brien'"),
            (b"\x0f\xa0", "X'0FA0'"),
            (b"", "X''"),
            (datetime.date(2024, 1, 31), "DATE '2024-01-31'"),
            (datetime.time(12, 30), "TIME '12:30:00'"),
            (datetime.datetime(2024, 1, 31, 12, 30), "TIMESTAMP '2024-01-31 12:30:00'"),
        ],
        ids=repr,
    )
    def test_literal(self, value: object, expected: str) -> None:
        assert_sql(const(value), expected)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            (None, NodeKind.UNTYPED_NULL_CONSTANT),
            (True, NodeKind.BOOLEAN_CONSTANT),
            (7, NodeKind.INT_CONSTANT),
            (2**31, NodeKind.LONGINT_CONSTANT),
            (-(2**31), NodeKind.INT_CONSTANT),
            (1.0, NodeKind.DOUBLE_CONSTANT),
            (decimal.Decimal("3"), NodeKind.DECIMAL_CONSTANT),
            ("x", NodeKind.VARCHAR_CONSTANT),
            (b"x", NodeKind.VARBIT_CONSTANT),
            (datetime.date(2024, 1, 1), NodeKind.USERTYPE_CONSTANT),
        ],
    )
    def test_kind_inference(self, value: object, kind: NodeKind) -> None:
        assert Constant.of(value).kind is kind  # type: ignore[arg-type]

    def test_rendering_ignores_declared_kind(self) -> None:
        assert unparse(Constant(kind=NodeKind.CLOB_CONSTANT, value="text")) == "'text'"

    def test_constant_rejects_foreign_kind(self) -> None:
        with pytest.raises(UnparseError, match="Constant cannot carry kind"):
            Constant(kind=NodeKind.TABLE_NAME, value=1)


class TestLeafValues:
    def test_parameter_is_one_based(self) -> None:
        assert_sql(Parameter(number=0), "$1")
        assert_sql(Parameter(number=9), "$10")

    def test_default(self) -> None:
        assert_sql(Default(), "DEFAULT")
        assert_sql(Default(text="0"), "DEFAULT 0")

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (NodeKind.USER, "USER"),
            (NodeKind.CURRENT_USER, "CURRENT_USER"),
            (NodeKind.SESSION_USER, "SESSION_USER"),
            (NodeKind.SYSTEM_USER, "SYSTEM_USER"),
            (NodeKind.CURRENT_ISOLATION, "CURRENT ISOLATION"),
            (NodeKind.IDENTITY_VAL, "IDENTITY_VAL_LOCAL()"),
            (NodeKind.CURRENT_SCHEMA, "CURRENT SCHEMA"),
            (NodeKind.CURRENT_ROLE, "CURRENT_ROLE"),
        ],
    )
    def test_special_value(self, kind: NodeKind, expected: str) -> None:
        assert_sql(SpecialValue(kind=kind), expected)

    @pytest.mark.parametrize(
        ("field", "expected"),
        [
            (DatetimeField.DATE, "CURRENT_DATE"),
            (DatetimeField.TIME, "CURRENT_TIME"),
            (DatetimeField.TIMESTAMP, "CURRENT_TIMESTAMP"),
        ],
    )
    def test_current_datetime(self, field: DatetimeField, expected: str) -> None:
        assert_sql(CurrentDatetime(field=field), expected)


# ── Names ─────────────────────────────────────────────────────────


class TestNames:
    def test_table_name(self) -> None:
        assert_sql(table("orders"), "orders")
        assert_sql(table("Users", "app"), 'app."Users"')

    def test_column_reference(self) -> None:
        assert_sql(col("a"), "a")
        assert_sql(col("A", "T"), '"T"."A"')

    def test_virtual_column_uses_source_name(self) -> None:
        assert_sql(VirtualColumn(source_column_name="Total"), '"Total"')


# ── Operators ─────────────────────────────────────────────────────


class TestBinaryOperators:
    def test_addition(self) -> None:
        assert_sql(binop(NodeKind.BINARY_PLUS, const(1), const(2)), "1 + 2")

    def test_compound_operand_is_parenthesized(self) -> None:
        inner = binop(NodeKind.BINARY_PLUS, const(1), const(2))
        assert_sql(binop(NodeKind.BINARY_TIMES, inner, const(3)), "(1 + 2) * 3")

    def test_both_sides_parenthesized(self) -> None:
        node = binop(
            NodeKind.AND,
            binop(NodeKind.BINARY_EQUALS, col("a"), const(1)),
            binop(NodeKind.BINARY_EQUALS, col("b"), const(2)),
        )
        assert_sql(node, "(a = 1) AND (b = 2)")

    def test_constant_with_whitespace_is_not_parenthesized(self) -> None:
        assert_sql(binop(NodeKind.BINARY_EQUALS, col("name"), const("a b")), "name = 'a b'")

    def test_quoted_identifier_with_space_is_parenthesized(self) -> None:
        assert_sql(binop(NodeKind.BINARY_EQUALS, col("has space"), const(1)), '("has space") = 1')

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (NodeKind.OR, "a OR b"),
            (NodeKind.BINARY_NOT_EQUALS, "a <> b"),
            (NodeKind.BINARY_GREATER_EQUALS, "a >= b"),
            (NodeKind.BINARY_LESS_THAN, "a < b"),
            (NodeKind.BINARY_DIVIDE, "a / b"),
            (NodeKind.BINARY_DIV, "a DIV b"),
            (NodeKind.MOD, "a MOD b"),
            (NodeKind.CONCATENATION, "a || b"),
            (NodeKind.LEFT_FN, "LEFT(a, b)"),
            (NodeKind.RIGHT_FN, "RIGHT(a, b)"),
            (NodeKind.TIMESTAMP_OPERATOR, "TIMESTAMP(a, b)"),
        ],
    )
    def test_operator_spelling(self, kind: NodeKind, expected: str) -> None:
        assert_sql(binop(kind, col("a"), col("b")), expected)

    def test_function_style_does_not_parenthesize_operands(self) -> None:
        node = binop(NodeKind.LEFT_FN, binop(NodeKind.CONCATENATION, col("a"), col("b")), const(3))
        assert_sql(node, "LEFT(a || b, 3)")

    def test_explicit_operator(self) -> None:
        assert_sql(BinaryOperator(kind=NodeKind.BINARY_BIT, left=col("a"), right=col("b"), operator="&"), "a & b")

    def test_bitwise_operator_requires_spelling(self) -> None:
        assert_malformed(binop(NodeKind.BINARY_BIT, col("a"), col("b")), "BINARY_BIT node has no operator")


class TestUnaryOperators:
    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (NodeKind.NOT, "NOT a"),
            (NodeKind.UNARY_MINUS, "- a"),
            (NodeKind.UNARY_PLUS, "+ a"),
            (NodeKind.UNARY_BITNOT, "~ a"),
            (NodeKind.IS_NULL, "a IS NULL"),
            (NodeKind.IS_NOT_NULL, "a IS NOT NULL"),
            (NodeKind.ABSOLUTE, "ABS(a)"),
            (NodeKind.SQRT, "SQRT(a)"),
            (NodeKind.CHAR_LENGTH, "CHAR_LENGTH(a)"),
            (NodeKind.OCTET_LENGTH, "OCTET_LENGTH(a)"),
        ],
    )
    def test_forms(self, kind: NodeKind, expected: str) -> None:
        assert_sql(UnaryOperator(kind=kind, operand=col("a")), expected)

    def test_not_of_comparison(self) -> None:
        node = UnaryOperator(kind=NodeKind.NOT, operand=binop(NodeKind.BINARY_EQUALS, col("a"), const(1)))
        assert_sql(node, "NOT (a = 1)")

    def test_explicit_function_name(self) -> None:
        node = UnaryOperator(kind=NodeKind.SIMPLE_STRING_OPERATOR, operand=col("name"), operator="lower")
        assert_sql(node, "LOWER(name)")
        node = UnaryOperator(kind=NodeKind.UNARY_DATE_TIMESTAMP, operand=col("created"), operator="date")
        assert_sql(node, "DATE(created)")

    def test_string_operator_requires_spelling(self) -> None:
        assert_malformed(
            UnaryOperator(kind=NodeKind.SIMPLE_STRING_OPERATOR, operand=col("name")),
            "SIMPLE_STRING_OPERATOR node has no operator",
        )

    def test_extract(self) -> None:
        assert_sql(Extract(field="year", operand=col("created")), "YEAR(created)")


# ── Predicates ────────────────────────────────────────────────────


class TestPredicates:
    def test_is_boolean(self) -> None:
        assert_sql(Is(left=col("a"), right=Constant(kind=NodeKind.BOOLEAN_CONSTANT, value=True)), "a IS TRUE")
        negated = Is(left=col("a"), right=Constant(kind=NodeKind.SQL_BOOLEAN_CONSTANT, value=False), negated=True)
        assert_sql(negated, "a IS NOT FALSE")

    def test_is_unknown(self) -> None:
        node = Is(left=col("a"), right=Constant(kind=NodeKind.BOOLEAN_CONSTANT, value=None), negated=True)
        assert_sql(node, "a IS NOT UNKNOWN")

    def test_is_expression(self) -> None:
        assert_sql(Is(left=col("a"), right=col("b")), "a IS b")

    def test_like(self) -> None:
        assert_sql(Like(receiver=col("name"), pattern=const("a%")), "name LIKE 'a%'")

    def test_like_escape(self) -> None:
        node = Like(receiver=col("name"), pattern=const("a!%"), escape=const("!"), operator="not like")
        assert_sql(node, "name NOT LIKE 'a!%' ESCAPE '!'")

    def test_in_list(self) -> None:
        assert_sql(InList(left=col("a"), values=_values(const(1), const(2), const(3))), "a IN (1, 2, 3)")

    def test_not_in_parenthesizes_compound_values(self) -> None:
        values = ValueNodeList(items=(binop(NodeKind.BINARY_PLUS, col("b"), const(1)), const("x y")))
        assert_sql(InList(left=col("a"), values=values, negated=True), "a NOT IN ((b + 1), 'x y')")

    def test_between(self) -> None:
        assert_sql(Between(left=col("a"), bounds=_values(const(1), const(10))), "a BETWEEN 1 AND 10")

    def test_between_needs_two_bounds(self) -> None:
        assert_malformed(Between(left=col("a"), bounds=_values(const(1))), "BETWEEN needs exactly 2 bounds, found 1")


class TestRowConstructor:
    def test_empty(self) -> None:
        assert_sql(RowConstructor(), "EMPTY")

    def test_single_element(self) -> None:
        assert_sql(RowConstructor(items=(const(1),)), "1")

    def test_several_elements(self) -> None:
        assert_sql(RowConstructor(items=(const(1), col("a"))), "1, a")

    def test_nested_row(self) -> None:
        inner = RowConstructor(items=(const(1), const(2)))
        assert_sql(RowConstructor(items=(inner,)), "1, 2")


# ── Functions ─────────────────────────────────────────────────────


class TestTernary:
    def test_substring(self) -> None:
        node = TernaryOperator(kind=NodeKind.SUBSTRING, receiver=col("s"), left=const(1), right=const(3))
        assert_sql(node, "SUBSTRING(s, 1, 3)")

    def test_locate_without_start(self) -> None:
        node = TernaryOperator(kind=NodeKind.LOCATE_FUNCTION, receiver=const("x"), left=col("s"))
        assert_sql(node, "LOCATE('x', s)")

    @pytest.mark.parametrize(
        ("code", "unit"),
        [(0, "MICROSECOND"), (1, "SECOND"), (4, "DAY"), (7, "QUARTER"), (8, "YEAR"), (42, "42")],
    )
    def test_timestamp_add_interval(self, code: int, unit: str) -> None:
        node = TernaryOperator(kind=NodeKind.TIMESTAMP_ADD_FN, receiver=const(code), left=const(1), right=col("d"))
        assert_sql(node, f"TIMESTAMPADD({unit}, 1, d)")

    def test_timestamp_diff(self) -> None:
        node = TernaryOperator(kind=NodeKind.TIMESTAMP_DIFF_FN, receiver=const(2), left=col("a"), right=col("b"))
        assert_sql(node, "TIMESTAMPDIFF(MINUTE, a, b)")

    def test_timestamp_function_needs_both_operands(self) -> None:
        node = TernaryOperator(kind=NodeKind.TIMESTAMP_ADD_FN, receiver=const(4), left=const(1))
        assert_malformed(node, "TIMESTAMPADD needs two operands")


class TestTrim:
    @pytest.mark.parametrize("operator", ["trim", "ltrim", "rtrim"])
    def test_blank_trim_uses_function_form(self, operator: str) -> None:
        node = Trim(operand=col("s"), characters=const(" "), operator=operator)
        assert_sql(node, f"{operator.upper()}(s)")

    @pytest.mark.parametrize(("operator", "side"), [("trim", "BOTH"), ("ltrim", "LEADING"), ("rtrim", "TRAILING")])
    def test_character_trim(self, operator: str, side: str) -> None:
        node = Trim(operand=col("s"), characters=const("x"), operator=operator)
        assert_sql(node, f"TRIM({side} 'x' FROM s)")


class TestFunctions:
    def test_coalesce(self) -> None:
        assert_sql(Coalesce(args=_values(col("a"), const(0))), "COALESCE(a, 0)")
        assert_sql(Coalesce(args=_values(col("a"), const(0)), function_name="IFNULL"), "IFNULL(a, 0)")

    def test_cast(self) -> None:
        node = Cast(operand=binop(NodeKind.BINARY_PLUS, col("a"), const(1)), data_type="BIGINT")
        assert_sql(node, "CAST(a + 1 AS BIGINT)")

    def test_collate(self) -> None:
        assert_sql(ExplicitCollate(operand=col("name"), collation="UCS_BASIC"), "name COLLATE UCS_BASIC")

    def test_sequence_values(self) -> None:
        next_value = SequenceValue(kind=NodeKind.NEXT_SEQUENCE, sequence_name=table("seq", "app"))
        assert_sql(next_value, "NEXT VALUE FOR app.seq")
        assert_sql(SequenceValue(kind=NodeKind.CURRENT_SEQUENCE, sequence_name=table("seq")), "CURRENT VALUE FOR seq")

    def test_routine_call_keeps_names_verbatim(self) -> None:
        node = RoutineCall(
            procedure_name=table("MyFunc", "app"),
            parameters=(const(1), binop(NodeKind.BINARY_PLUS, col("a"), const(1))),
        )
        assert_sql(node, "app.MyFunc(1, (a + 1))")

    def test_routine_call_with_unknown_name(self) -> None:
        name = UnknownNode(kind="FUTURE_NAME")
        node = RoutineCall(procedure_name=name, parameters=(const(1),))  # type: ignore[arg-type]
        assert_sql(node, "**UNKNOWN(FUTURE_NAME)**(1)")

    def test_routine_call_by_method_name(self) -> None:
        assert_sql(RoutineCall(method_name="now"), "now()")

    def test_routine_call_without_name(self) -> None:
        assert_malformed(RoutineCall(), "routine call has neither a procedure nor a method name")


class TestAggregates:
    def test_count_star(self) -> None:
        assert_sql(Aggregate(aggregate_name="COUNT(*)"), "COUNT(*)")

    def test_aggregate(self) -> None:
        assert_sql(Aggregate(aggregate_name="SUM", operand=col("a")), "SUM(a)")

    def test_distinct_aggregate(self) -> None:
        assert_sql(Aggregate(aggregate_name="COUNT", operand=col("a"), distinct=True), "COUNT(DISTINCT a)")

    def test_group_concat(self) -> None:
        assert_sql(GroupConcat(operands=(col("a"),)), "GROUP_CONCAT(a SEPARATOR ',')")

    def test_group_concat_full(self) -> None:
        node = GroupConcat(operands=(col("a"), col("b")), separator="; ", order_by=order_by(col("a")), distinct=True)
        assert_sql(node, "GROUP_CONCAT(DISTINCT a, b ORDER BY a SEPARATOR '; ')")

    def test_window_aggregate(self) -> None:
        window = WindowDefinition(
            partition_by=PartitionByList(items=(PartitionByColumn(expression=col("b")),)),
            order_by=order_by(col("c")),
        )
        node = AggregateWindowFunction(aggregate=Aggregate(aggregate_name="SUM", operand=col("a")), window=window)
        assert_sql(node, "SUM(a) OVER (PARTITION BY b ORDER BY c)")

    def test_window_reference(self) -> None:
        aggregate = Aggregate(aggregate_name="MAX", operand=col("a"))
        node = AggregateWindowFunction(aggregate=aggregate, window=WindowReference(name="w"))
        assert_sql(node, "MAX(a) OVER w")

    def test_row_number(self) -> None:
        ordered = WindowDefinition(order_by=order_by(col("a")))
        assert_sql(RowNumberFunction(window=ordered), "ROW_NUMBER() OVER (ORDER BY a)")
        assert_sql(RowNumberFunction(window=WindowReference(name="w"), operator="rank"), "RANK() OVER w")

    def test_empty_window(self) -> None:
        assert_sql(RowNumberFunction(window=WindowDefinition()), "ROW_NUMBER() OVER ()")


# ── CASE ──────────────────────────────────────────────────────────


class TestCase:
    def test_searched_case_chain(self) -> None:
        node = Conditional(
            test=binop(NodeKind.BINARY_EQUALS, col("a"), const(1)),
            then=const("x"),
            else_node=Conditional(
                test=binop(NodeKind.BINARY_EQUALS, col("a"), const(2)),
                then=const("y"),
                else_node=const("z"),
            ),
        )
        assert_sql(node, "CASE WHEN (a = 1) THEN 'x' WHEN (a = 2) THEN 'y' ELSE 'z' END")

    def test_searched_case_without_else(self) -> None:
        node = Conditional(test=col("flag"), then=const(1))
        assert_sql(node, "CASE WHEN flag THEN 1 END")

    def test_simple_case(self) -> None:
        node = SimpleCase(
            operand=col("a"),
            when_values=(const(1), const(2)),
            results=(const("x"), const("y")),
            else_value=const("z"),
        )
        assert_sql(node, "CASE a WHEN 1 THEN 'x' WHEN 2 THEN 'y' ELSE 'z' END")

    def test_simple_case_length_mismatch(self) -> None:
        with pytest.raises(UnparseError, match="CASE has 2 WHEN values but 1 results"):
            SimpleCase(operand=col("a"), when_values=(const(1), const(2)), results=(const("x"),))


# ── Subqueries ────────────────────────────────────────────────────


class TestSubqueries:
    def test_expression_subquery(self) -> None:
        assert_sql(Subquery(result_set=select(from_=("t",))), "(SELECT * FROM t)")

    def test_exists(self) -> None:
        exists = Subquery(result_set=select(from_=("t",)), subquery_type=SubqueryType.EXISTS)
        assert_sql(exists, "EXISTS (SELECT * FROM t)")
        assert_sql(
            Subquery(result_set=select(from_=("t",)), subquery_type=SubqueryType.NOT_EXISTS),
            "NOT EXISTS (SELECT * FROM t)",
        )

    @pytest.mark.parametrize(
        ("subquery_type", "operator"),
        [
            (SubqueryType.IN, "IN"),
            (SubqueryType.NOT_IN, "NOT IN"),
            (SubqueryType.EQ_ANY, "= ANY"),
            (SubqueryType.NE_ALL, "<> ALL"),
            (SubqueryType.GE_ALL, ">= ALL"),
            (SubqueryType.LT_ANY, "< ANY"),
        ],
    )
    def test_quantified(self, subquery_type: SubqueryType, operator: str) -> None:
        node = Subquery(result_set=select(col("b"), from_=("t",)), subquery_type=subquery_type, left_operand=col("a"))
        assert_sql(node, f"a {operator} (SELECT b FROM t)")

    def test_ordering_and_limits_stay_inside_parentheses(self) -> None:
        node = Subquery(
            result_set=select(col("a"), from_=("t",)),
            order_by=order_by(col("a")),
            fetch_first=const(1),
            offset=const(2),
        )
        assert_sql(node, "(SELECT a FROM t ORDER BY a LIMIT 1 OFFSET 2)")

    def test_quantified_needs_left_operand(self) -> None:
        assert_malformed(
            Subquery(result_set=select(from_=("t",)), subquery_type=SubqueryType.IN), "IN subquery has no left operand"
        )
