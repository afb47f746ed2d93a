"""SQLite dialect.

Double-quoted identifiers. SQLite has no `LIKE BINARY`, so every pattern
lookup maps to `LIKE`, which is case-insensitive for ASCII text.
"""

from .base import BaseDialect

__all__ = ("SQLiteDialect",)


class SQLiteDialect(BaseDialect):
    name = "sqlite"
    quote_char = '"'

    _OP_MAP = {
        "exact": "=",
        "exclude": "!=",
        "iexact": "LIKE",
        "contains": "LIKE",
        "icontains": "LIKE",
        "gt": ">",
        "gte": ">=",
        "lt": "<",
        "lte": "<=",
        "startswith": "LIKE",
        "endswith": "LIKE",
        "istartswith": "LIKE",
        "iendswith": "LIKE",
        "in": "IN",
        "between": "BETWEEN",
    }
