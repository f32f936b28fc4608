"""Render typed SQL syntax trees back into SQL text."""

import logging

from sqlunparse import nodes
from sqlunparse.errors import UnparseError
from sqlunparse.render import unparse
from sqlunparse.render.constants import RESERVED_WORDS
from sqlunparse.render.utils import is_reserved, quote_ident, quote_string, unquote_string
from sqlunparse.serialize import from_json, from_struct, to_json, to_struct

logging.getLogger("sqlunparse").addHandler(logging.NullHandler())

__all__ = [
    "from_json",
    "from_struct",
    "is_reserved",
    "nodes",
    "quote_ident",
    "quote_string",
    "RESERVED_WORDS",
    "to_json",
    "to_struct",
    "unparse",
    "UnparseError",
    "unquote_string",
]
