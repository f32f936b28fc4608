"""Session, transaction, cursor and prepared-statement renderers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlunparse.render.base import _UnparserBase  # pyright: ignore[reportPrivateUsage]
from sqlunparse.render.constants import (
    _ACCESS_MODE,  # pyright: ignore[reportPrivateUsage]
    _EXPLAIN_DETAIL,  # pyright: ignore[reportPrivateUsage]
    _ISOLATION_LEVEL,  # pyright: ignore[reportPrivateUsage]
    _TRANSACTION_COMMAND,  # pyright: ignore[reportPrivateUsage]
)
from sqlunparse.render.utils import quote_ident, quote_string

if TYPE_CHECKING:
    from sqlunparse.nodes.statements import (
        Close,
        Deallocate,
        Declare,
        Execute,
        Explain,
        Fetch,
        Prepare,
        SetConfiguration,
        SetConstraints,
        SetTransactionAccess,
        SetTransactionIsolation,
        ShowConfiguration,
        TransactionControl,
    )


def _set_transaction(session: bool) -> str:
    return "SET SESSION CHARACTERISTICS AS TRANSACTION" if session else "SET TRANSACTION"


class _SessionMixin(_UnparserBase):
    """Mixin providing session and cursor statement renderers."""

    def _render_explain(self, node: Explain) -> str:
        return f"EXPLAIN {_EXPLAIN_DETAIL[node.detail]}{self.visit(node.statement)}"

    def _render_transaction_control(self, node: TransactionControl) -> str:
        return _TRANSACTION_COMMAND[node.command]

    def _render_set_isolation(self, node: SetTransactionIsolation) -> str:
        return f"{_set_transaction(node.session)} ISOLATION LEVEL {_ISOLATION_LEVEL[node.level]}"

    def _render_set_access(self, node: SetTransactionAccess) -> str:
        return f"{_set_transaction(node.session)} {_ACCESS_MODE[node.mode]}"

    def _render_set_constraints(self, node: SetConstraints) -> str:
        targets = "ALL" if node.constraints is None else self.visit(node.constraints)
        mode = "DEFERRED" if node.deferred else "IMMEDIATE"
        return f"SET CONSTRAINTS {targets} {mode}"

    def _render_set_configuration(self, node: SetConfiguration) -> str:
        return f"SET {node.variable} = {quote_string(node.value)}"

    def _render_show_configuration(self, node: ShowConfiguration) -> str:
        return f"SHOW {node.variable}"

    # ── Cursors and prepared statements ───────────────────────────

    def _render_declare(self, node: Declare) -> str:
        return f"DECLARE {quote_ident(node.name)} CURSOR FOR {self.visit(node.statement)}"

    def _render_fetch(self, node: Fetch) -> str:
        count = "ALL" if node.count < 0 else str(node.count)
        return f"FETCH {count} FROM {quote_ident(node.name)}"

    def _render_close(self, node: Close) -> str:
        return f"CLOSE {quote_ident(node.name)}"

    def _render_prepare(self, node: Prepare) -> str:
        return f"PREPARE {quote_ident(node.name)} AS {self.visit(node.statement)}"

    def _render_execute(self, node: Execute) -> str:
        return f"EXECUTE {quote_ident(node.name)}({self.visit(node.parameters)})"

    def _render_deallocate(self, node: Deallocate) -> str:
        return f"DEALLOCATE {quote_ident(node.name)}"
