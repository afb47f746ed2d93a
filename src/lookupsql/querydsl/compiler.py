"""Filter compiler.

Transforms one batch of ordered `(lookup key, value)` pairs into a single
boolean SQL fragment with positional placeholders and its argument list.

Supported value shapes:
- Scalars (str, bytes, bool, int, float, Decimal, date/time): one comparison
- Lists/tuples of scalars, depending on the operator:
  - exact, exclude, contains, icontains: one comparison per element
  - in: `col IN (?,?,...)`
  - between: `col BETWEEN ? AND ?` (exactly two elements)

A `Q`-flagged term is OR-joined to its predecessor; for `in` and `between`
it also negates the membership test (`NOT IN`, `NOT BETWEEN`).

Any invalid pair aborts the whole batch; no partial fragment is produced.
"""

from typing import Any, Iterable, List

from lookupsql.constants import COLLECTION_LOOKUPS, MULTI_MATCH_LOOKUPS, FilterKind, Lookup
from lookupsql.dialects import BaseDialect
from lookupsql.exceptions import EmptyValueError, OperatorValueError, UnsupportedValueError
from lookupsql.logger import Logger
from lookupsql.schema import FilterExpression
from lookupsql.types import LookupPair
from lookupsql.utils import is_collection, is_scalar

from .lookups import ParsedLookup, parse_lookup

__all__ = ("FilterCompiler",)


class FilterCompiler:
    """Compile lookup pairs into a `FilterExpression` for one dialect."""

    def __init__(self, dialect: BaseDialect) -> None:
        self.dialect = dialect
        self.logger = Logger(self.__class__.__name__)

    def compile(self, pairs: Iterable[LookupPair], kind: FilterKind = FilterKind.INCLUDE) -> FilterExpression:
        """Compile pairs in order into one fragment.

        Args:
            pairs: Ordered (lookup key, value) pairs
            kind: Whether the batch includes or excludes matching rows

        Returns:
            FilterExpression; empty `sql` when no pairs were given

        Raises:
            LookupSyntaxError, UnknownOperatorError, OperatorValueError,
            UnsupportedValueError, EmptyValueError
        """
        sql = ""
        args: List[Any] = []
        for key, value in pairs:
            parsed = parse_lookup(key)
            term, term_args = self._compile_pair(key, parsed, value)
            if sql:
                sql += f" {parsed.combinator.value} {term}"
            else:
                # no boolean keyword before the first term
                sql = term
            args.extend(term_args)

        expr = FilterExpression(sql=sql, args=tuple(args), kind=kind)
        if sql:
            self.logger.fragment(f"{kind.value} filter", sql, args)
        return expr

    def _compile_pair(self, key: str, parsed: ParsedLookup, value: Any):
        op = self.dialect.translate(parsed.lookup)
        ident = self.dialect.quote_identifier(parsed.field)

        if is_scalar(value):
            if parsed.lookup in COLLECTION_LOOKUPS:
                raise OperatorValueError(
                    f"Operator {parsed.lookup!r} must be used with a list or tuple",
                    lookup=key,
                    operator=parsed.lookup,
                )
            return self._comparison(ident, op), [value]

        if not is_collection(value):
            raise UnsupportedValueError(
                "Unsupported value type",
                lookup=key,
                value_type=type(value).__name__,
            )

        if len(value) == 0:
            raise EmptyValueError("Empty list or tuple", lookup=key)

        for item in value:
            if not is_scalar(item):
                raise UnsupportedValueError(
                    "Unsupported element type in list or tuple",
                    lookup=key,
                    value_type=type(item).__name__,
                )

        return self._compile_collection(key, parsed, ident, op, value), list(value)

    def _compile_collection(self, key: str, parsed: ParsedLookup, ident: str, op: str, values) -> str:
        ph = self.dialect.placeholder
        negate = "NOT " if parsed.is_or else ""

        if parsed.lookup in MULTI_MATCH_LOOKUPS:
            joiner = f" {parsed.combinator.value} "
            return "(" + joiner.join(self._comparison(ident, op) for _ in values) + ")"
        if parsed.lookup == Lookup.IN:
            return f"{ident} {negate}{op} ({','.join(ph for _ in values)})"
        if parsed.lookup == Lookup.BETWEEN:
            if len(values) != 2:
                raise OperatorValueError(
                    "Operator 'between' requires exactly two values",
                    lookup=key,
                    operator=parsed.lookup,
                    count=len(values),
                )
            return f"{ident} {negate}{op} {ph} AND {ph}"

        raise OperatorValueError(
            f"Operator {parsed.lookup!r} cannot be used with a list or tuple",
            lookup=key,
            operator=parsed.lookup,
        )

    def _comparison(self, ident: str, op: str) -> str:
        # word operators (LIKE, LIKE BINARY) need spaces, symbols do not
        if op[:1].isalpha():
            return f"{ident} {op} {self.dialect.placeholder}"
        return f"{ident}{op}{self.dialect.placeholder}"
