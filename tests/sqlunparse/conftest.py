from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from sqlunparse import UnparseError, from_struct, to_struct, unparse
from sqlunparse.nodes import (
    AllResultColumn,
    BinaryOperator,
    ColumnReference,
    Constant,
    Cursor,
    FromBaseTable,
    FromList,
    NodeKind,
    OrderByColumn,
    OrderByList,
    ResultColumn,
    ResultColumnList,
    Select,
    TableName,
)

if TYPE_CHECKING:
    from sqlunparse.nodes import ConstantValue, Node

# -- Node builders -------------------------------------------------------------


def table(name: str, schema: str | None = None) -> TableName:
    return TableName(table_name=name, schema_name=schema)


def col(name: str, table_name: str | None = None) -> ColumnReference:
    return ColumnReference(column_name=name, table_name=table(table_name) if table_name is not None else None)


def const(value: ConstantValue) -> Constant:
    return Constant.of(value)


def binop(kind: NodeKind, left: Node, right: Node) -> BinaryOperator:
    return BinaryOperator(kind=kind, left=left, right=right)


def columns(*names: str) -> ResultColumnList:
    """Plain column-name list, as used by INSERT, USING and CREATE VIEW."""
    return ResultColumnList(items=tuple(ResultColumn(name=name) for name in names))


def select(
    *exprs: Node,
    from_: tuple[str, ...] = (),
    where: Node | None = None,
    distinct: bool = False,
) -> Select:
    """Build ``SELECT exprs FROM tables WHERE where``; no expressions means ``*``."""
    result = tuple(ResultColumn(expression=expr) for expr in exprs) or (AllResultColumn(),)
    return Select(
        result_columns=ResultColumnList(items=result),
        from_list=FromList(items=tuple(FromBaseTable(table_name=table(name)) for name in from_)),
        where_clause=where,
        distinct=distinct,
    )


def order_by(*exprs: Node, ascending: bool = True) -> OrderByList:
    return OrderByList(items=tuple(OrderByColumn(expression=expr, ascending=ascending) for expr in exprs))


def cursor(result_set: Node, **kwargs: object) -> Cursor:
    return Cursor(result_set=result_set, **kwargs)  # type: ignore[arg-type]


# -- Fixtures ------------------------------------------------------------------


@pytest.fixture
def users_select() -> Select:
    """``SELECT * FROM users WHERE id = 1``."""
    return select(from_=("users",), where=binop(NodeKind.BINARY_EQUALS, col("id"), const(1)))


# -- Assertion helpers ---------------------------------------------------------


def assert_sql(node: Node, expected: str) -> None:
    """Assert the rendering and that it survives a ``Struct`` round trip unchanged."""
    sql = unparse(node)
    assert sql == expected
    again = unparse(from_struct(to_struct(node)))
    assert again == sql, f"Rendering changed after Struct round trip:\n  before: {sql}\n  after:  {again}"


def assert_malformed(node: Node, match: str) -> None:
    """Assert that rendering *node* raises UnparseError whose message matches *match*."""
    with pytest.raises(UnparseError, match=match) as exc_info:
        unparse(node)
    assert exc_info.value.message.startswith("malformed AST: ")
