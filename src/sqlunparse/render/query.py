"""Query renderers: SELECT, VALUES, FROM items, joins, ordering and windows."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlunparse.errors import malformed
from sqlunparse.nodes.kinds import JoinType, NodeKind
from sqlunparse.nodes.query import RowResultSet
from sqlunparse.render.base import _UnparserBase  # pyright: ignore[reportPrivateUsage]
from sqlunparse.render.constants import _JOIN_KEYWORD  # pyright: ignore[reportPrivateUsage]
from sqlunparse.render.utils import quote_ident

if TYPE_CHECKING:
    from sqlunparse.nodes.base import Node, NodeList
    from sqlunparse.nodes.query import (
        AllResultColumn,
        Cursor,
        FromBaseTable,
        FromSubquery,
        GroupByColumn,
        Join,
        OrderByColumn,
        PartitionByColumn,
        ResultColumn,
        RowsResultSet,
        Select,
        Union,
        WindowDefinition,
        WindowReference,
    )


class _QueryMixin(_UnparserBase):
    """Mixin providing query, clause and list renderers."""

    # ── Lists ─────────────────────────────────────────────────────

    def _render_list(self, node: NodeList[Node]) -> str:
        return self._join(node)

    def _render_prefixed_list(self, keyword: str, node: NodeList[Node]) -> str:
        """Render ``KEYWORD a, b``; an empty list renders nothing at all."""
        if not node:
            return ""
        return f"{keyword} {self._join(node)}"

    # ── Select list ───────────────────────────────────────────────

    def _render_result_column(self, node: ResultColumn) -> str:
        if node.reference is not None:
            return self.visit(node.reference)
        name = quote_ident(node.name) if node.name is not None else None
        if node.expression is None:
            if name is None:
                malformed("result column has neither a name nor an expression", kind=node.kind)
            return name
        expr = self._maybe_parens(node.expression)
        if name is None or name == expr:
            return expr
        return f"{expr} AS {name}"

    def _render_all_result_column(self, node: AllResultColumn) -> str:
        if node.table_name is None:
            return "*"
        return f"{self.visit(node.table_name)}.*"

    # ── FROM items ────────────────────────────────────────────────

    def _render_from_base_table(self, node: FromBaseTable) -> str:
        table = self.visit(node.table_name)
        if node.correlation_name is None:
            return table
        return f"{table} AS {quote_ident(node.correlation_name)}"

    def _render_from_subquery(self, node: FromSubquery) -> str:
        tail = self._order_fetch_offset(node.order_by, node.fetch_first, node.offset)
        text = f"({self.visit(node.subquery)}{tail}) AS {quote_ident(node.correlation_name)}"
        if node.result_columns is not None:
            text += f"({self.visit(node.result_columns)})"
        return text

    def _render_join(self, node: Join) -> str:
        if node.kind is NodeKind.HALF_OUTER_JOIN:
            join_type = JoinType.RIGHT_OUTER if node.right_outer else JoinType.LEFT_OUTER
        elif node.kind is NodeKind.FULL_OUTER_JOIN:
            join_type = JoinType.FULL_OUTER
        else:
            join_type = JoinType.INNER
        parts = [self.visit(node.left)]
        if node.natural:
            parts.append("NATURAL")
        parts.extend((_JOIN_KEYWORD[join_type], self.visit(node.right)))
        if node.join_clause is not None:
            parts.append(f"ON {self._maybe_parens(node.join_clause)}")
        if node.using_clause is not None:
            parts.append(f"USING ({self.visit(node.using_clause)})")
        return " ".join(parts)

    def _render_union(self, node: Union) -> str:
        keyword = "UNION ALL" if node.all else "UNION"
        return f"{self.visit(node.left)} {keyword} {self.visit(node.right)}"

    # ── Grouping, ordering and windows ────────────────────────────

    def _render_group_by_column(self, node: GroupByColumn) -> str:
        return self._maybe_parens(node.expression)

    def _render_order_by_column(self, node: OrderByColumn) -> str:
        text = self._maybe_parens(node.expression)
        if not node.ascending:
            text += " DESC"
        if node.nulls_first:
            text += " NULLS FIRST"
        return text

    def _render_partition_by_column(self, node: PartitionByColumn) -> str:
        return self.visit(node.expression)

    def _render_window_definition(self, node: WindowDefinition) -> str:
        clauses: list[str] = []
        if node.partition_by:
            clauses.append(self.visit(node.partition_by))
        if node.order_by:
            clauses.append(self.visit(node.order_by))
        spec = f"({' '.join(clauses)})"
        if node.name is None:
            return spec
        return f"{quote_ident(node.name)} AS {spec}"

    def _render_window_reference(self, node: WindowReference) -> str:
        return quote_ident(node.name)

    # ── Result sets ───────────────────────────────────────────────

    def _render_row_result_set(self, node: RowResultSet) -> str:
        return f"VALUES({self.visit(node.result_columns)})"

    def _render_rows_result_set(self, node: RowsResultSet) -> str:
        rows = ", ".join(self._render_row(row) for row in node.rows)
        return f"VALUES{rows}"

    def _render_row(self, row: Node) -> str:
        if isinstance(row, RowResultSet):
            return f"({self.visit(row.result_columns)})"
        return self.visit(row)

    def _render_select(self, node: Select) -> str:
        parts = ["SELECT"]
        if node.distinct:
            parts.append("DISTINCT")
        parts.append(self.visit(node.result_columns))
        if node.from_list:
            parts.append(f"FROM {self.visit(node.from_list)}")
        if node.where_clause is not None:
            parts.append(f"WHERE {self.visit(node.where_clause)}")
        if node.group_by:
            parts.append(self.visit(node.group_by))
        if node.having_clause is not None:
            parts.append(f"HAVING {self.visit(node.having_clause)}")
        if node.windows:
            parts.append(self.visit(node.windows))
        return " ".join(parts)

    def _render_cursor(self, node: Cursor) -> str:
        return self.visit(node.result_set) + self._order_fetch_offset(node.order_by, node.fetch_first, node.offset)
