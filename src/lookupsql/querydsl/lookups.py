"""Lookup key parsing.

A lookup key names a column, an optional operator keyword and an optional
`Q` marker that joins the term to its predecessor with OR instead of AND:

- `age`             -> age, exact, AND
- `age__gte`        -> age, gte,   AND
- `name__Q`         -> name, exact, OR
- `name__icontains__Q` -> name, icontains, OR
"""

from typing import NamedTuple

from lookupsql.constants import DEFAULT_LOOKUP, LOOKUP_SEP, OR_MARKER, Combinator
from lookupsql.exceptions import LookupSyntaxError

__all__ = ("ParsedLookup", "parse_lookup")


class ParsedLookup(NamedTuple):
    field: str
    lookup: str
    combinator: Combinator

    @property
    def is_or(self) -> bool:
        return self.combinator is Combinator.OR


def parse_lookup(key: str) -> ParsedLookup:
    """Split a `field[__operator][__Q]` key into its parts.

    Raises:
        LookupSyntaxError: If the key has more than three parts, three parts
            without a trailing `Q`, or an empty field name
    """
    parts = key.split(LOOKUP_SEP)
    if not parts[0].strip():
        raise LookupSyntaxError("Lookup key has an empty field name", lookup=key)

    if len(parts) == 1:
        return ParsedLookup(parts[0], DEFAULT_LOOKUP, Combinator.AND)
    if len(parts) == 2:
        if parts[1] == OR_MARKER:
            return ParsedLookup(parts[0], DEFAULT_LOOKUP, Combinator.OR)
        return ParsedLookup(parts[0], parts[1], Combinator.AND)
    if len(parts) == 3 and parts[2] == OR_MARKER:
        return ParsedLookup(parts[0], parts[1], Combinator.OR)

    raise LookupSyntaxError(
        f"Lookup key must look like field[{LOOKUP_SEP}operator][{LOOKUP_SEP}{OR_MARKER}]",
        lookup=key,
    )
