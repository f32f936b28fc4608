"""Renderer base class with the shared parenthesization, list and clause helpers."""

from __future__ import annotations

import enum
import re
from typing import TYPE_CHECKING, Final

from sqlunparse.errors import UnparseError
from sqlunparse.nodes.expressions import Constant
from sqlunparse.render.constants import _DROP_BEHAVIOR, _EXISTENCE_CHECK  # pyright: ignore[reportPrivateUsage]

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sqlunparse.nodes.base import Node
    from sqlunparse.nodes.kinds import DropBehavior, ExistenceCheck
    from sqlunparse.nodes.lists import OrderByList

_WHITESPACE_RE: Final = re.compile(r"\s")


def _unknown(tag: object) -> str:
    """Placeholder emitted for a node kind (or option) the renderer has no text for."""
    if isinstance(tag, enum.Enum):
        tag = tag.name
    return f"**UNKNOWN({tag})**"


class _UnparserBase:
    """Renderer base providing the helpers every mixin shares.

    Renderers return finished strings; a subclass supplies :meth:`visit`, the dispatcher.
    """

    def visit(self, node: Node) -> str:
        raise NotImplementedError

    # ── Operands ──────────────────────────────────────────────────

    def _maybe_parens(self, node: Node) -> str:
        """Render *node*, parenthesized when it is not a constant and its text has inner whitespace."""
        text = self.visit(node)
        if isinstance(node, Constant) or not _WHITESPACE_RE.search(text):
            return text
        return f"({text})"

    def _join(self, nodes: Iterable[Node]) -> str:
        return ", ".join(self.visit(node) for node in nodes)

    def _join_operands(self, nodes: Iterable[Node]) -> str:
        return ", ".join(self._maybe_parens(node) for node in nodes)

    # ── Clause helpers ────────────────────────────────────────────

    def _order_fetch_offset(self, order_by: OrderByList | None, fetch_first: Node | None, offset: Node | None) -> str:
        """Render the ``ORDER BY`` / ``LIMIT`` / ``OFFSET`` tail of a query, each part with a leading space."""
        parts: list[str] = []
        if order_by:
            parts.append(self.visit(order_by))
        if fetch_first is not None:
            parts.append(f"LIMIT {self.visit(fetch_first)}")
        if offset is not None:
            parts.append(f"OFFSET {self.visit(offset)}")
        return "".join(f" {part}" for part in parts)

    # ── Option lookups ────────────────────────────────────────────

    @staticmethod
    def _existence_check(check: ExistenceCheck) -> str:
        """Return ``"IF EXISTS "`` / ``"IF NOT EXISTS "`` (with trailing space) or ``""``.

        Raises:
            UnparseError: If *check* is not an :class:`~sqlunparse.nodes.ExistenceCheck` member.
        """
        try:
            return _EXISTENCE_CHECK[check]
        except (KeyError, TypeError):
            msg = f"unrecognized existence check: {check!r}"
            raise UnparseError(msg, kind=check) from None

    @staticmethod
    def _drop_behavior(behavior: DropBehavior) -> str:
        """Return ``" CASCADE"`` / ``" RESTRICT"`` (with leading space) or ``""``.

        Raises:
            UnparseError: If *behavior* is not a :class:`~sqlunparse.nodes.DropBehavior` member.
        """
        try:
            return _DROP_BEHAVIOR[behavior]
        except (KeyError, TypeError):
            msg = f"unrecognized drop behavior: {behavior!r}"
            raise UnparseError(msg, kind=behavior) from None
