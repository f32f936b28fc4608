"""Tests for EXPLAIN, transaction, SET / SHOW, cursor and prepared statement rendering."""

from __future__ import annotations

import pytest

from sqlunparse.nodes import (
    AccessMode,
    Close,
    Deallocate,
    Declare,
    Execute,
    Explain,
    ExplainDetail,
    Fetch,
    IsolationLevel,
    NodeKind,
    Parameter,
    Prepare,
    SetConfiguration,
    SetConstraints,
    SetTransactionAccess,
    SetTransactionIsolation,
    ShowConfiguration,
    TableNameList,
    TransactionCommand,
    TransactionControl,
    ValueNodeList,
)

from .conftest import assert_sql, binop, col, const, select, table


class TestExplain:
    @pytest.mark.parametrize(
        ("detail", "expected"),
        [
            (ExplainDetail.NORMAL, "EXPLAIN SELECT * FROM t"),
            (ExplainDetail.BRIEF, "EXPLAIN BRIEF SELECT * FROM t"),
            (ExplainDetail.VERBOSE, "EXPLAIN VERBOSE SELECT * FROM t"),
        ],
    )
    def test_detail(self, detail: ExplainDetail, expected: str) -> None:
        assert_sql(Explain(statement=select(from_=("t",)), detail=detail), expected)


class TestTransactions:
    @pytest.mark.parametrize("command", list(TransactionCommand))
    def test_control(self, command: TransactionCommand) -> None:
        assert_sql(TransactionControl(command=command), command.name)

    @pytest.mark.parametrize(
        ("level", "text"),
        [
            (IsolationLevel.READ_UNCOMMITTED, "READ UNCOMMITTED"),
            (IsolationLevel.READ_COMMITTED, "READ COMMITTED"),
            (IsolationLevel.REPEATABLE_READ, "REPEATABLE READ"),
            (IsolationLevel.SERIALIZABLE, "SERIALIZABLE"),
        ],
    )
    def test_isolation(self, level: IsolationLevel, text: str) -> None:
        assert_sql(SetTransactionIsolation(level=level), f"SET TRANSACTION ISOLATION LEVEL {text}")

    def test_session_isolation(self) -> None:
        node = SetTransactionIsolation(level=IsolationLevel.SERIALIZABLE, session=True)
        assert_sql(node, "SET SESSION CHARACTERISTICS AS TRANSACTION ISOLATION LEVEL SERIALIZABLE")

    def test_access(self) -> None:
        assert_sql(SetTransactionAccess(mode=AccessMode.READ_ONLY), "SET TRANSACTION READ ONLY")
        node = SetTransactionAccess(mode=AccessMode.READ_WRITE, session=True)
        assert_sql(node, "SET SESSION CHARACTERISTICS AS TRANSACTION READ WRITE")

    def test_all_constraints(self) -> None:
        assert_sql(SetConstraints(deferred=True), "SET CONSTRAINTS ALL DEFERRED")

    def test_named_constraints(self) -> None:
        names = TableNameList(items=(table("fk_a"), table("fk_b", "app")))
        assert_sql(SetConstraints(constraints=names), "SET CONSTRAINTS fk_a, app.fk_b IMMEDIATE")


class TestConfiguration:
    def test_set(self) -> None:
        assert_sql(SetConfiguration(variable="timezone", value="UTC"), "SET timezone = 'UTC'")

    def test_set_escapes_value(self) -> None:
        assert_sql(SetConfiguration(variable="app.note", value="it's"), "SET app.note = 'it''s'")

    def test_show(self) -> None:
        assert_sql(ShowConfiguration(variable="statement_timeout"), "SHOW statement_timeout")


class TestCursors:
    def test_declare(self) -> None:
        assert_sql(Declare(name="c", statement=select(from_=("t",))), "DECLARE c CURSOR FOR SELECT * FROM t")

    def test_declare_quotes_name(self) -> None:
        assert_sql(Declare(name="MyCursor", statement=select(const(1))), 'DECLARE "MyCursor" CURSOR FOR SELECT 1')

    @pytest.mark.parametrize(("count", "text"), [(-1, "ALL"), (0, "0"), (25, "25")])
    def test_fetch(self, count: int, text: str) -> None:
        assert_sql(Fetch(name="c", count=count), f"FETCH {text} FROM c")

    def test_fetch_defaults_to_all(self) -> None:
        assert_sql(Fetch(name="c"), "FETCH ALL FROM c")

    def test_close(self) -> None:
        assert_sql(Close(name="order"), 'CLOSE "order"')


class TestPreparedStatements:
    def test_prepare(self) -> None:
        where = binop(NodeKind.BINARY_EQUALS, col("id"), Parameter(number=0))
        node = Prepare(name="by_id", statement=select(from_=("t",), where=where))
        assert_sql(node, "PREPARE by_id AS SELECT * FROM t WHERE id = $1")

    def test_execute(self) -> None:
        parameters = ValueNodeList(items=(const(7), const("x"), binop(NodeKind.BINARY_PLUS, const(1), const(2))))
        assert_sql(Execute(name="by_id", parameters=parameters), "EXECUTE by_id(7, 'x', (1 + 2))")

    def test_execute_without_parameters(self) -> None:
        assert_sql(Execute(name="p"), "EXECUTE p()")

    def test_deallocate(self) -> None:
        assert_sql(Deallocate(name="by_id"), "DEALLOCATE by_id")
