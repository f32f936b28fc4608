"""Error handling for sqlunparse.

Provides the public UnparseError exception and the internal helper used by renderers to reject tree shapes they
cannot render.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

if TYPE_CHECKING:
    from enum import Enum


class UnparseError(Exception):
    """Structured error raised when a tree cannot be turned back into SQL.

    Rendering never fails because a node kind is *unknown* (those render as a ``**UNKNOWN(...)**`` placeholder).
    It fails when the tree breaks a structural assumption the parser guarantees, for example an ``UPDATE`` whose
    row source is not a plain ``SELECT`` over exactly one table, or when an enumerated option carries a value the
    renderer has no text for. Both are programmer errors on the producing side, so the render is aborted rather than
    silently degraded.

    There is no error-code taxonomy: callers that need finer distinctions inspect :attr:`message` or :attr:`kind`.

    Attributes:
        message: Human-readable error description.
        kind: The node kind (or option value) being rendered when the error was detected, or ``None``.

    Examples:
        >>> from sqlunparse import UnparseError, unparse
        >>> from sqlunparse.nodes import Delete, Select, ResultColumnList, FromList
        >>> bogus = Delete(result_set=Select(result_columns=ResultColumnList(), from_list=FromList()))
        >>> try:
        ...     unparse(bogus)
        ... except UnparseError as e:
        ...     print(e.message)
        malformed AST: DELETE row source must select from exactly one table, found 0
    """

    def __init__(self, message: str, *, kind: Enum | str | int | None = None) -> None:
        """Create an UnparseError.

        Args:
            message: Human-readable error description.
            kind: Node kind or option value involved, if known.
        """
        super().__init__(message)
        self.message = message
        self.kind = kind


def malformed(message: str, *, kind: Enum | str | int | None = None) -> NoReturn:
    """Raise :class:`UnparseError` for a tree that violates the parser's structural contract."""
    raise UnparseError(f"malformed AST: {message}", kind=kind)
