"""Lexical policy: identifier quoting, reserved words and literal formatting."""

from __future__ import annotations

import datetime
import re
from typing import TYPE_CHECKING, Final

from sqlunparse.errors import UnparseError
from sqlunparse.render.constants import RESERVED_WORDS

if TYPE_CHECKING:
    from sqlunparse.nodes.expressions import ConstantValue

_SIMPLE_IDENT_RE: Final = re.compile(r"[a-z_][a-z0-9_$]*")


def is_reserved(word: str) -> bool:
    """Return whether *word* is a reserved word of the grammar, ignoring case.

    Example:
        >>> is_reserved("Select")
        True
    """
    return word.lower() in RESERVED_WORDS


def quote_ident(name: str) -> str:
    """Quote *name* as an identifier when it would not survive re-parsing bare.

    A name is left alone only when it is entirely lowercase letters, digits, underscores and dollar signs, does not
    start with a digit or dollar, and is not reserved. Anything else is wrapped in double quotes with embedded
    double quotes doubled.

    Examples:
        >>> quote_ident("orders")
        'orders'
        >>> quote_ident("Orders")
        '"Orders"'
        >>> quote_ident("select")
        '"select"'
    """
    if _SIMPLE_IDENT_RE.fullmatch(name) and not is_reserved(name):
        return name
    escaped = name.replace('"', '""')
    return f'"{escaped}"'


def quote_string(value: str) -> str:
    """Render *value* as a single-quoted SQL string literal."""
    escaped = value.replace("'", "''")
    return f"'{escaped}'"


def unquote_string(literal: str) -> str:
    """Invert :func:`quote_string`.

    Raises:
        UnparseError: If *literal* is not a single-quoted literal with every embedded quote doubled.
    """
    if len(literal) < 2 or literal[0] != "'" or literal[-1] != "'":
        msg = f"not a string literal: {literal!r}"
        raise UnparseError(msg)
    body = literal[1:-1]
    if body.replace("''", "").count("'"):
        msg = f"unescaped quote in string literal: {literal!r}"
        raise UnparseError(msg)
    return body.replace("''", "'")


def _hex_literal(value: bytes) -> str:
    return f"X'{value.hex().upper()}'"


def _format_literal(value: ConstantValue) -> str:
    """Render a constant's value as SQL literal text."""
    if value is None:
        return "NULL"
    if isinstance(value, str):
        return quote_string(value)
    if isinstance(value, bytes):
        return _hex_literal(value)
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float):
        return f"{value:e}"
    # datetime is a date subclass; check it first.
    if isinstance(value, datetime.datetime):
        return f"TIMESTAMP '{value.isoformat(sep=' ')}'"
    if isinstance(value, datetime.date):
        return f"DATE '{value.isoformat()}'"
    if isinstance(value, datetime.time):
        return f"TIME '{value.isoformat()}'"
    return str(value)
