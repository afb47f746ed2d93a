"""
Lookup DSL constants shared by the compiler, the accumulators and the dialects.
"""

from enum import Enum

# "age__gte__Q" -> ["age", "gte", "Q"]
LOOKUP_SEP = "__"
OR_MARKER = "Q"
DEFAULT_LOOKUP = "exact"


class Combinator(str, Enum):
    AND = "AND"
    OR = "OR"


class FilterKind(str, Enum):
    INCLUDE = "include"
    EXCLUDE = "exclude"


class Direction(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class Lookup:
    EXACT = "exact"
    EXCLUDE = "exclude"
    IEXACT = "iexact"
    CONTAINS = "contains"
    ICONTAINS = "icontains"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    STARTSWITH = "startswith"
    ENDSWITH = "endswith"
    ISTARTSWITH = "istartswith"
    IENDSWITH = "iendswith"
    IN = "in"
    BETWEEN = "between"


# Operators that only make sense with a list/tuple value
COLLECTION_LOOKUPS = frozenset({Lookup.IN, Lookup.BETWEEN})

# Operators that expand a list/tuple into one comparison per element
MULTI_MATCH_LOOKUPS = frozenset({Lookup.EXACT, Lookup.EXCLUDE, Lookup.CONTAINS, Lookup.ICONTAINS})
