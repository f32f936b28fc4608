"""Tests for the dispatcher: catalog coverage, unknown-kind placeholders and argument checking."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from sqlunparse import UnparseError, from_struct, unparse
from sqlunparse.nodes import (
    BinaryOperator,
    Node,
    NodeKind,
    UnknownNode,
    node_class,
    registered_classes,
)

from .conftest import const, select


@dataclasses.dataclass(frozen=True, kw_only=True)
class _AnyKind(Node):
    """Node with no fields that claims whatever kind it is given."""

    kind: NodeKind

    def __post_init__(self) -> None:
        pass


class TestCatalogCoverage:
    @pytest.mark.parametrize("kind", list(NodeKind), ids=lambda kind: kind.name)
    def test_every_kind_has_a_renderer(self, kind: NodeKind) -> None:
        # A fieldless node gets past dispatch and fails on its first field access, never on the placeholder.
        try:
            text = unparse(_AnyKind(kind=kind))
        except (AttributeError, TypeError, UnparseError):
            return
        assert "**UNKNOWN(" not in text

    @pytest.mark.parametrize("kind", list(NodeKind), ids=lambda kind: kind.name)
    def test_every_kind_is_registered(self, kind: NodeKind) -> None:
        cls = node_class(kind)
        assert kind in cls.KINDS

    def test_registered_classes_are_nodes(self) -> None:
        classes = registered_classes()
        assert classes
        assert all(issubclass(cls, Node) for cls in classes)
        assert all(dataclasses.is_dataclass(cls) for cls in classes)

    def test_kinds_are_bound_once(self) -> None:
        bound = [kind for cls in registered_classes() for kind in cls.KINDS]
        assert len(bound) == len(set(bound)) == len(NodeKind)


class TestUnknownKinds:
    def test_placeholder(self) -> None:
        assert unparse(UnknownNode(kind="MERGE_STATEMENT")) == "**UNKNOWN(MERGE_STATEMENT)**"

    def test_numeric_tag(self) -> None:
        assert unparse(UnknownNode(kind=9001)) == "**UNKNOWN(9001)**"

    def test_placeholder_inside_larger_tree(self) -> None:
        expr = BinaryOperator(kind=NodeKind.BINARY_PLUS, left=UnknownNode(kind="FANCY_NEW"), right=const(1))
        assert unparse(select(expr, from_=("t",))) == "SELECT (**UNKNOWN(FANCY_NEW)** + 1) FROM t"

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            ({"kind": "ROWS_RESULT_SET", "rows": [{"kind": "FUTURE_ROW"}]}, "VALUES**UNKNOWN(FUTURE_ROW)**"),
            (
                {
                    "kind": "ROUTINE_CALL",
                    "procedure_name": {"kind": "FUTURE_NAME"},
                    "parameters": [{"kind": "INT_CONSTANT", "value": 1}],
                },
                "**UNKNOWN(FUTURE_NAME)**(1)",
            ),
        ],
        ids=["values-row", "routine-name"],
    )
    def test_placeholder_in_typed_child_slot(self, data: dict[str, object], expected: str) -> None:
        assert unparse(from_struct(data)) == expected

    def test_cataloged_kind_is_rejected(self) -> None:
        with pytest.raises(UnparseError, match="UnknownNode cannot carry cataloged kind SELECT") as exc_info:
            UnknownNode(kind=NodeKind.SELECT)  # type: ignore[arg-type]
        assert exc_info.value.kind is NodeKind.SELECT

    def test_placeholder_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="sqlunparse"):
            unparse(UnknownNode(kind="FANCY_NEW"))
        assert any("FANCY_NEW" in record.getMessage() for record in caplog.records)
        assert all(record.name == "sqlunparse" for record in caplog.records)

    def test_known_kinds_are_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="sqlunparse"):
            unparse(select(from_=("t",)))
        assert not caplog.records


class TestArguments:
    @pytest.mark.parametrize("value", ["SELECT 1", None, 42, {"kind": "SELECT"}])
    def test_non_node_is_rejected(self, value: object) -> None:
        with pytest.raises(UnparseError, match="expected a node, found"):
            unparse(value)  # type: ignore[arg-type]

    def test_non_node_nested_in_tree(self) -> None:
        expr = BinaryOperator(kind=NodeKind.BINARY_PLUS, left=const(1), right="2")  # type: ignore[arg-type]
        with pytest.raises(UnparseError, match="expected a node, found str"):
            unparse(expr)

    def test_rendering_is_deterministic(self) -> None:
        node = select(const(1), const("a"), from_=("t",))
        assert unparse(node) == unparse(node)
