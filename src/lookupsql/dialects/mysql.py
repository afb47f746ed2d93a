"""MySQL dialect.

Backtick-quoted identifiers and `?` placeholders. Case-sensitive pattern
lookups use `LIKE BINARY`; the `i*` variants rely on the column collation
being case-insensitive.
"""

from .base import BaseDialect

__all__ = ("MySQLDialect",)


class MySQLDialect(BaseDialect):
    name = "mysql"
    quote_char = "`"

    _OP_MAP = {
        "exact": "=",
        "exclude": "!=",
        "iexact": "LIKE",
        "contains": "LIKE BINARY",
        "icontains": "LIKE",
        "gt": ">",
        "gte": ">=",
        "lt": "<",
        "lte": "<=",
        "startswith": "LIKE BINARY",
        "endswith": "LIKE BINARY",
        "istartswith": "LIKE",
        "iendswith": "LIKE",
        "in": "IN",
        "between": "BETWEEN",
    }
