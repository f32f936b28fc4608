"""DML renderers: INSERT, UPDATE, DELETE, CALL and COPY."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlunparse.errors import malformed
from sqlunparse.nodes.kinds import CopyMode
from sqlunparse.nodes.query import ResultColumn, Select
from sqlunparse.render.base import _UnparserBase  # pyright: ignore[reportPrivateUsage]
from sqlunparse.render.utils import quote_string

if TYPE_CHECKING:
    from sqlunparse.nodes.base import Node
    from sqlunparse.nodes.kinds import NodeKind
    from sqlunparse.nodes.lists import ResultColumnList
    from sqlunparse.nodes.statements import CallStatement, CopyStatement, Delete, Insert, Update


class _DmlMixin(_UnparserBase):
    """Mixin providing DML statement renderers."""

    def _render_insert(self, node: Insert) -> str:
        parts = ["INSERT INTO", self.visit(node.target)]
        if node.columns is not None:
            parts[-1] += f"({self.visit(node.columns)})"
        parts.append(self.visit(node.result_set))
        if node.order_by:
            parts.append(self.visit(node.order_by))
        self._append_returning(parts, node.returning)
        return " ".join(parts)

    def _render_update(self, node: Update) -> str:
        select = self._row_source(node.result_set, node.kind)
        assignments: list[str] = []
        for column in select.result_columns:
            if not isinstance(column, ResultColumn) or column.reference is None or column.expression is None:
                malformed("UPDATE assignment must pair a column reference with an expression", kind=node.kind)
            assignments.append(f"{self.visit(column.reference)} = {self._maybe_parens(column.expression)}")
        parts = ["UPDATE", self.visit(select.from_list[0]), "SET", ", ".join(assignments)]
        if select.where_clause is not None:
            parts.append(f"WHERE {self.visit(select.where_clause)}")
        self._append_returning(parts, node.returning)
        return " ".join(parts)

    def _render_delete(self, node: Delete) -> str:
        select = self._row_source(node.result_set, node.kind)
        parts = ["DELETE FROM", self.visit(select.from_list[0])]
        if select.where_clause is not None:
            parts.append(f"WHERE {self.visit(select.where_clause)}")
        self._append_returning(parts, node.returning)
        return " ".join(parts)

    @staticmethod
    def _row_source(result_set: Node, kind: NodeKind) -> Select:
        """Return the SELECT the parser uses to carry an UPDATE / DELETE target and WHERE clause."""
        statement = kind.name
        if not isinstance(result_set, Select):
            malformed(f"{statement} row source must be a SELECT, found {type(result_set).__name__}", kind=kind)
        if len(result_set.from_list) != 1:
            malformed(
                f"{statement} row source must select from exactly one table, found {len(result_set.from_list)}",
                kind=kind,
            )
        return result_set

    def _append_returning(self, parts: list[str], returning: ResultColumnList | None) -> None:
        if returning is not None:
            parts.append(f"RETURNING {self.visit(returning)}")

    def _render_call(self, node: CallStatement) -> str:
        return f"CALL {self.visit(node.call)}"

    # ── COPY ──────────────────────────────────────────────────────

    def _render_copy(self, node: CopyStatement) -> str:
        if node.subquery is not None:
            source = f"({self.visit(node.subquery)})"
        elif node.table_name is not None:
            source = self.visit(node.table_name)
            if node.columns is not None:
                source += f"({self.visit(node.columns)})"
        else:
            malformed("COPY needs a table or a subquery", kind=node.kind)

        importing = node.mode is CopyMode.TO_TABLE
        if node.filename is not None:
            target = quote_string(node.filename)
        else:
            target = "STDIN" if importing else "STDOUT"
        text = f"COPY {source} {'FROM' if importing else 'TO'} {target}"

        options: list[str] = []
        if node.format is not None:
            options.append(f"FORMAT {node.format.name}")
        for keyword, value in (
            ("DELIMITER", node.delimiter),
            ("NULL", node.null_string),
        ):
            if value is not None:
                options.append(f"{keyword} {quote_string(value)}")
        if node.header:
            options.append("HEADER TRUE")
        for keyword, value in (
            ("QUOTE", node.quote),
            ("ESCAPE", node.escape),
            ("ENCODING", node.encoding),
        ):
            if value is not None:
                options.append(f"{keyword} {quote_string(value)}")
        if node.commit_frequency:
            options.append(f"COMMIT {node.commit_frequency} ROWS")
        if node.max_retries:
            options.append(f"RETRY {node.max_retries}")
        if options:
            text += f" WITH ({', '.join(options)})"
        return text
