"""
This __init__.py file makes the lookupsql directory a Python package
and exposes the `QuerySet` facade, the dialects and the compiled-fragment
schemas for easy access.
"""

from .constants import Combinator, Direction, FilterKind
from .dialects import BaseDialect, MySQLDialect, SQLiteDialect, get_dialect, register_dialect
from .queryset import QuerySet
from .schema import FilterExpression, LimitSpec, OrderTerm

__version__ = "0.1.0"

__all__ = [
    "QuerySet",
    "BaseDialect",
    "MySQLDialect",
    "SQLiteDialect",
    "get_dialect",
    "register_dialect",
    "FilterExpression",
    "OrderTerm",
    "LimitSpec",
    "Combinator",
    "Direction",
    "FilterKind",
]
