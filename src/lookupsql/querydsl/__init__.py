"""Query DSL module.

Compiles `field__operator[__Q]` lookups into parameterized SQL fragments and
accumulates the WHERE, ORDER BY, LIMIT, SELECT and GROUP BY clauses of one
query. The `QuerySet` facade in `lookupsql.queryset` ties them together.
"""

from .clauses import GroupByClause, LimitClause, OrderByClause, SelectClause
from .compiler import FilterCompiler
from .conditions import ConditionSet
from .lookups import ParsedLookup, parse_lookup

__all__ = (
    "FilterCompiler",
    "ConditionSet",
    "OrderByClause",
    "LimitClause",
    "SelectClause",
    "GroupByClause",
    "ParsedLookup",
    "parse_lookup",
)
