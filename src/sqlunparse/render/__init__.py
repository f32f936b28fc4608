"""Dispatcher that turns a typed AST back into SQL text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, assert_never, cast

from sqlunparse.errors import malformed
from sqlunparse.nodes.base import Node
from sqlunparse.nodes.kinds import NodeKind
from sqlunparse.render.base import _unknown  # pyright: ignore[reportPrivateUsage]
from sqlunparse.render.ddl import _DdlMixin  # pyright: ignore[reportPrivateUsage]
from sqlunparse.render.dml import _DmlMixin  # pyright: ignore[reportPrivateUsage]
from sqlunparse.render.expressions import _ExpressionMixin  # pyright: ignore[reportPrivateUsage]
from sqlunparse.render.query import _QueryMixin  # pyright: ignore[reportPrivateUsage]
from sqlunparse.render.session import _SessionMixin  # pyright: ignore[reportPrivateUsage]

if TYPE_CHECKING:
    from sqlunparse import nodes as n

logger = logging.getLogger("sqlunparse")


class _Unparser(_ExpressionMixin, _QueryMixin, _DmlMixin, _DdlMixin, _SessionMixin):
    """Stateless renderer; one instance is shared by every call to :func:`unparse`."""

    def visit(self, node: Node) -> str:  # noqa: C901, PLR0911, PLR0912
        if not isinstance(node, Node):
            malformed(f"expected a node, found {type(node).__name__}")
        kind = node.kind
        if not isinstance(kind, NodeKind):
            logger.debug("rendering placeholder for unknown node kind %r", kind)
            return _unknown(kind)

        match kind:
            # ── Statements ──
            case NodeKind.CREATE_TABLE:
                return self._render_create_table(cast("n.CreateTable", node))
            case NodeKind.CREATE_VIEW:
                return self._render_create_view(cast("n.CreateView", node))
            case NodeKind.CREATE_INDEX:
                return self._render_create_index(cast("n.CreateIndex", node))
            case NodeKind.CREATE_SCHEMA:
                return self._render_create_schema(cast("n.CreateSchema", node))
            case NodeKind.CREATE_ALIAS:
                return self._render_create_alias(cast("n.CreateAlias", node))
            case NodeKind.DROP_TABLE | NodeKind.DROP_VIEW | NodeKind.DROP_TRIGGER | NodeKind.DROP_SEQUENCE:
                return self._render_drop(cast("n.Drop", node))
            case NodeKind.DROP_INDEX:
                return self._render_drop_index(cast("n.DropIndex", node))
            case NodeKind.DROP_SCHEMA:
                return self._render_drop_schema(cast("n.DropSchema", node))
            case NodeKind.ALTER_TABLE:
                return self._render_alter_table(cast("n.AlterTable", node))
            case NodeKind.RENAME:
                return self._render_rename(cast("n.Rename", node))
            case NodeKind.EXPLAIN:
                return self._render_explain(cast("n.Explain", node))
            case NodeKind.TRANSACTION_CONTROL:
                return self._render_transaction_control(cast("n.TransactionControl", node))
            case NodeKind.SET_TRANSACTION_ISOLATION:
                return self._render_set_isolation(cast("n.SetTransactionIsolation", node))
            case NodeKind.SET_TRANSACTION_ACCESS:
                return self._render_set_access(cast("n.SetTransactionAccess", node))
            case NodeKind.SET_CONSTRAINTS:
                return self._render_set_constraints(cast("n.SetConstraints", node))
            case NodeKind.SET_CONFIGURATION:
                return self._render_set_configuration(cast("n.SetConfiguration", node))
            case NodeKind.SHOW_CONFIGURATION:
                return self._render_show_configuration(cast("n.ShowConfiguration", node))
            case NodeKind.CURSOR:
                return self._render_cursor(cast("n.Cursor", node))
            case NodeKind.SELECT:
                return self._render_select(cast("n.Select", node))
            case NodeKind.INSERT:
                return self._render_insert(cast("n.Insert", node))
            case NodeKind.UPDATE:
                return self._render_update(cast("n.Update", node))
            case NodeKind.DELETE:
                return self._render_delete(cast("n.Delete", node))
            case NodeKind.CALL_STATEMENT:
                return self._render_call(cast("n.CallStatement", node))
            case NodeKind.DECLARE_STATEMENT:
                return self._render_declare(cast("n.Declare", node))
            case NodeKind.FETCH_STATEMENT:
                return self._render_fetch(cast("n.Fetch", node))
            case NodeKind.CLOSE_STATEMENT:
                return self._render_close(cast("n.Close", node))
            case NodeKind.PREPARE_STATEMENT:
                return self._render_prepare(cast("n.Prepare", node))
            case NodeKind.EXECUTE_STATEMENT:
                return self._render_execute(cast("n.Execute", node))
            case NodeKind.DEALLOCATE_STATEMENT:
                return self._render_deallocate(cast("n.Deallocate", node))
            case NodeKind.COPY_STATEMENT:
                return self._render_copy(cast("n.CopyStatement", node))

            # ── Table elements and ALTER TABLE actions ──
            case NodeKind.TABLE_ELEMENT_LIST | NodeKind.TABLE_NAME_LIST:
                return self._render_list(cast("n.NodeList[Node]", node))
            case NodeKind.COLUMN_DEFINITION:
                return self._render_column_definition(cast("n.ColumnDefinition", node))
            case NodeKind.CONSTRAINT_DEFINITION:
                return self._render_constraint_definition(cast("n.ConstraintDefinition", node))
            case NodeKind.FK_CONSTRAINT_DEFINITION:
                return self._render_fk_constraint(cast("n.FKConstraintDefinition", node))
            case NodeKind.INDEX_DEFINITION:
                return self._render_index_definition(cast("n.IndexDefinition", node))
            case NodeKind.INDEX_COLUMN_LIST:
                return self._render_index_column_list(cast("n.IndexColumnList", node))
            case NodeKind.INDEX_COLUMN:
                return self._render_index_column(cast("n.IndexColumn", node))
            case NodeKind.STORAGE_FORMAT:
                return self._render_storage_format(cast("n.StorageFormat", node))
            case NodeKind.AT_RENAME_COLUMN:
                return self._render_rename_column(cast("n.RenameColumn", node))
            case NodeKind.DROP_COLUMN:
                return self._render_drop_column(cast("n.DropColumn", node))
            case NodeKind.MODIFY_COLUMN_TYPE:
                return self._render_modify_column_type(cast("n.ModifyColumnType", node))
            case NodeKind.MODIFY_COLUMN_DEFAULT:
                return self._render_modify_column_default(cast("n.ModifyColumnDefault", node))
            case NodeKind.MODIFY_COLUMN_CONSTRAINT | NodeKind.MODIFY_COLUMN_CONSTRAINT_NOT_NULL:
                return self._render_modify_column_constraint(cast("n.ModifyColumnConstraint", node))
            case NodeKind.AT_DROP_INDEX:
                return self._render_alter_drop_index(cast("n.AlterDropIndex", node))
            case NodeKind.DEFAULT:
                return self._render_default(cast("n.Default", node))

            # ── Query clauses ──
            case NodeKind.SUBQUERY:
                return self._render_subquery(cast("n.Subquery", node))
            case NodeKind.RESULT_COLUMN_LIST | NodeKind.FROM_LIST:
                return self._render_list(cast("n.NodeList[Node]", node))
            case NodeKind.RESULT_COLUMN:
                return self._render_result_column(cast("n.ResultColumn", node))
            case NodeKind.ALL_RESULT_COLUMN:
                return self._render_all_result_column(cast("n.AllResultColumn", node))
            case NodeKind.JOIN | NodeKind.HALF_OUTER_JOIN | NodeKind.FULL_OUTER_JOIN:
                return self._render_join(cast("n.Join", node))
            case NodeKind.UNION:
                return self._render_union(cast("n.Union", node))
            case NodeKind.GROUP_BY_LIST:
                return self._render_prefixed_list("GROUP BY", cast("n.GroupByList", node))
            case NodeKind.GROUP_BY_COLUMN:
                return self._render_group_by_column(cast("n.GroupByColumn", node))
            case NodeKind.ORDER_BY_LIST:
                return self._render_prefixed_list("ORDER BY", cast("n.OrderByList", node))
            case NodeKind.ORDER_BY_COLUMN:
                return self._render_order_by_column(cast("n.OrderByColumn", node))
            case NodeKind.PARTITION_BY_LIST:
                return self._render_prefixed_list("PARTITION BY", cast("n.PartitionByList", node))
            case NodeKind.PARTITION_BY_COLUMN:
                return self._render_partition_by_column(cast("n.PartitionByColumn", node))
            case NodeKind.WINDOW_LIST:
                return self._render_prefixed_list("WINDOW", cast("n.WindowList", node))
            case NodeKind.WINDOW_DEFINITION:
                return self._render_window_definition(cast("n.WindowDefinition", node))
            case NodeKind.WINDOW_REFERENCE:
                return self._render_window_reference(cast("n.WindowReference", node))
            case NodeKind.VALUE_NODE_LIST:
                return self._render_value_node_list(cast("n.ValueNodeList", node))
            case NodeKind.FROM_BASE_TABLE:
                return self._render_from_base_table(cast("n.FromBaseTable", node))
            case NodeKind.FROM_SUBQUERY:
                return self._render_from_subquery(cast("n.FromSubquery", node))
            case NodeKind.TABLE_NAME:
                return self._render_table_name(cast("n.TableName", node))
            case NodeKind.COLUMN_REFERENCE:
                return self._render_column_reference(cast("n.ColumnReference", node))
            case NodeKind.VIRTUAL_COLUMN:
                return self._render_virtual_column(cast("n.VirtualColumn", node))
            case NodeKind.ROW_RESULT_SET:
                return self._render_row_result_set(cast("n.RowResultSet", node))
            case NodeKind.ROWS_RESULT_SET:
                return self._render_rows_result_set(cast("n.RowsResultSet", node))

            # ── Operators ──
            case (
                NodeKind.AND
                | NodeKind.OR
                | NodeKind.BINARY_EQUALS
                | NodeKind.BINARY_NOT_EQUALS
                | NodeKind.BINARY_GREATER_THAN
                | NodeKind.BINARY_GREATER_EQUALS
                | NodeKind.BINARY_LESS_THAN
                | NodeKind.BINARY_LESS_EQUALS
                | NodeKind.BINARY_PLUS
                | NodeKind.BINARY_MINUS
                | NodeKind.BINARY_TIMES
                | NodeKind.BINARY_DIVIDE
                | NodeKind.BINARY_DIV
                | NodeKind.MOD
                | NodeKind.BINARY_BIT
                | NodeKind.CONCATENATION
                | NodeKind.TIMESTAMP_OPERATOR
                | NodeKind.LEFT_FN
                | NodeKind.RIGHT_FN
            ):
                return self._render_binary(cast("n.BinaryOperator", node))
            case (
                NodeKind.NOT
                | NodeKind.IS_NULL
                | NodeKind.IS_NOT_NULL
                | NodeKind.ABSOLUTE
                | NodeKind.SQRT
                | NodeKind.UNARY_PLUS
                | NodeKind.UNARY_MINUS
                | NodeKind.UNARY_BITNOT
                | NodeKind.UNARY_DATE_TIMESTAMP
                | NodeKind.CHAR_LENGTH
                | NodeKind.OCTET_LENGTH
                | NodeKind.SIMPLE_STRING_OPERATOR
            ):
                return self._render_unary(cast("n.UnaryOperator", node))
            case NodeKind.EXTRACT:
                return self._render_extract(cast("n.Extract", node))

            # ── Other expressions ──
            case NodeKind.IS:
                return self._render_is(cast("n.Is", node))
            case NodeKind.LIKE:
                return self._render_like(cast("n.Like", node))
            case (
                NodeKind.LOCATE_FUNCTION | NodeKind.SUBSTRING | NodeKind.TIMESTAMP_ADD_FN | NodeKind.TIMESTAMP_DIFF_FN
            ):
                return self._render_ternary(cast("n.TernaryOperator", node))
            case NodeKind.TRIM:
                return self._render_trim(cast("n.Trim", node))
            case NodeKind.IN_LIST:
                return self._render_in_list(cast("n.InList", node))
            case NodeKind.ROW_CTOR:
                return self._render_row_constructor(cast("n.RowConstructor", node))
            case NodeKind.BETWEEN:
                return self._render_between(cast("n.Between", node))
            case NodeKind.CONDITIONAL:
                return self._render_conditional(cast("n.Conditional", node))
            case NodeKind.SIMPLE_CASE:
                return self._render_simple_case(cast("n.SimpleCase", node))
            case NodeKind.COALESCE_FUNCTION:
                return self._render_coalesce(cast("n.Coalesce", node))
            case NodeKind.AGGREGATE:
                return self._render_aggregate(cast("n.Aggregate", node))
            case NodeKind.GROUP_CONCAT:
                return self._render_group_concat(cast("n.GroupConcat", node))
            case NodeKind.AGGREGATE_WINDOW_FUNCTION:
                return self._render_aggregate_window(cast("n.AggregateWindowFunction", node))
            case NodeKind.ROW_NUMBER_FUNCTION:
                return self._render_row_number(cast("n.RowNumberFunction", node))
            case NodeKind.CAST:
                return self._render_cast(cast("n.Cast", node))
            case NodeKind.EXPLICIT_COLLATE:
                return self._render_collate(cast("n.ExplicitCollate", node))
            case NodeKind.NEXT_SEQUENCE | NodeKind.CURRENT_SEQUENCE:
                return self._render_sequence_value(cast("n.SequenceValue", node))
            case NodeKind.CURRENT_DATETIME:
                return self._render_current_datetime(cast("n.CurrentDatetime", node))
            case NodeKind.ROUTINE_CALL:
                return self._render_routine_call(cast("n.RoutineCall", node))
            case NodeKind.PARAMETER:
                return self._render_parameter(cast("n.Parameter", node))

            # ── Special values ──
            case (
                NodeKind.USER
                | NodeKind.CURRENT_USER
                | NodeKind.SESSION_USER
                | NodeKind.SYSTEM_USER
                | NodeKind.CURRENT_ISOLATION
                | NodeKind.IDENTITY_VAL
                | NodeKind.CURRENT_SCHEMA
                | NodeKind.CURRENT_ROLE
            ):
                return self._render_special_value(cast("n.SpecialValue", node))

            # ── Constants ──
            case (
                NodeKind.UNTYPED_NULL_CONSTANT
                | NodeKind.SQL_BOOLEAN_CONSTANT
                | NodeKind.BOOLEAN_CONSTANT
                | NodeKind.BIT_CONSTANT
                | NodeKind.VARBIT_CONSTANT
                | NodeKind.CHAR_CONSTANT
                | NodeKind.DECIMAL_CONSTANT
                | NodeKind.DOUBLE_CONSTANT
                | NodeKind.FLOAT_CONSTANT
                | NodeKind.INT_CONSTANT
                | NodeKind.LONGINT_CONSTANT
                | NodeKind.LONGVARBIT_CONSTANT
                | NodeKind.LONGVARCHAR_CONSTANT
                | NodeKind.SMALLINT_CONSTANT
                | NodeKind.TINYINT_CONSTANT
                | NodeKind.USERTYPE_CONSTANT
                | NodeKind.VARCHAR_CONSTANT
                | NodeKind.BLOB_CONSTANT
                | NodeKind.CLOB_CONSTANT
                | NodeKind.XML_CONSTANT
            ):
                return self._render_constant(cast("n.Constant", node))
            case _:
                assert_never(kind)


_UNPARSER = _Unparser()


def unparse(node: Node) -> str:
    """Render a typed AST node as SQL text.

    The output is canonical rather than a copy of the original source: keywords are uppercase, identifiers are
    quoted only when they would not survive re-parsing, and any non-constant operand containing whitespace is
    parenthesized.

    Args:
        node: The root of the tree to render, usually a statement node.

    Returns:
        The SQL text. Node kinds outside the catalog appear as ``**UNKNOWN(<tag>)**`` placeholders.

    Raises:
        UnparseError: If the tree violates a structural assumption (for example an ``UPDATE`` whose row source is
            not a single-table ``SELECT``).

    Example:
        >>> from sqlunparse.nodes import BinaryOperator, Constant, NodeKind
        >>> unparse(BinaryOperator(kind=NodeKind.BINARY_PLUS, left=Constant.of(1), right=Constant.of(2)))
        '1 + 2'
    """
    return _UNPARSER.visit(node)
