"""
QuerySet facade.

This module provides `QuerySet`, a chaining builder over the condition set
and the clause builders. Every builder call mutates the instance and returns
it, so a query reads as one expression:

    qs = (
        QuerySet("mysql")
        .filter(age__gte=18)
        .exclude(deleted=True)
        .order_by("-created_at")
        .limit(10, 2)
    )
    where, args = qs.get_where_sql()

The composed fragments are handed to an execution layer (see
`lookupsql.statements`), which owns table names and the database connection.
"""

from typing import Any, Dict, Iterable, Mapping, Optional, Set, Union

from lookupsql.settings import settings

from .dialects import BaseDialect, get_dialect
from .exceptions import InvalidFieldError
from .logger import Logger
from .querydsl import ConditionSet, GroupByClause, LimitClause, OrderByClause, SelectClause
from .schema import OrderTerm
from .types import Columns, FilterInput, SQLWithArgs
from .utils import split_columns


class QuerySet:
    """Builder for the WHERE, ORDER BY, LIMIT, SELECT and GROUP BY parts of one query.

    A QuerySet is built once per logical query and read once. Call `reset()`
    to reuse the same instance for an unrelated query. Instances are not safe
    for concurrent mutation.

    Attributes:
        dialect: Dialect used for operators and identifier quoting
        fields: Known column names, or None to accept any column
        strict: Raise on unknown columns instead of logging and dropping them
    """

    def __init__(
        self,
        dialect: Union[str, BaseDialect, None] = None,
        fields: Optional[Iterable[str]] = None,
        strict: Optional[bool] = None,
    ) -> None:
        """Initialize an empty QuerySet.

        Args:
            dialect: Dialect name or instance (default from settings.SQL_DIALECT)
            fields: Optional set of known column names used to validate
                order_by/select/group_by columns and update/insert keys
            strict: Override settings.STRICT_FIELDS for this instance
        """
        self._dialect_spec = dialect if dialect is not None else settings.SQL_DIALECT
        self.fields: Optional[Set[str]] = set(fields) if fields is not None else None
        self.strict = settings.STRICT_FIELDS if strict is None else strict
        self.logger = Logger(self.__class__.__name__)
        self._init_state()

    def _init_state(self) -> None:
        self.dialect = get_dialect(self._dialect_spec)
        self.conditions = ConditionSet(self.dialect)
        self._order_by = OrderByClause(self.dialect)
        self._limit = LimitClause()
        self._select = SelectClause(self.dialect)
        self._group_by = GroupByClause(self.dialect)

    def reset(self) -> "QuerySet":
        """Discard all accumulated state and re-resolve the dialect."""
        self._init_state()
        return self

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------
    def filter(self, *filters: FilterInput, **lookups: Any) -> "QuerySet":
        """Add one include batch.

        Positional arguments are mappings or iterables of (key, value) pairs;
        keyword lookups are appended after them. Terms are AND-joined unless
        the key ends in `__Q`. A batch with no lookups changes nothing.

        Examples:
            qs.filter(age__gte=18)
            qs.filter([("name__Q", "x"), ("name__Q", "y")])
            qs.filter({"status__in": ["A", "B"]}, score__gt=10)
        """
        self.conditions.filter(*filters, **lookups)
        return self

    def exclude(self, *filters: FilterInput, **lookups: Any) -> "QuerySet":
        """Add one exclude batch, rendered as `NOT (...)`."""
        self.conditions.exclude(*filters, **lookups)
        return self

    def where(self, cond: str, *args: Any) -> "QuerySet":
        """Use a raw condition instead of every filter/exclude batch."""
        self.conditions.where(cond, *args)
        return self

    def order_by(self, *columns: Columns) -> "QuerySet":
        """Append ORDER BY terms; prefix a column with `-` for descending order."""
        terms = [OrderTerm.parse(s) for s in split_columns(*columns)]
        self._order_by.add([t for t in terms if t.column and self.check_column(t.column, "ORDER BY")])
        return self

    def limit(self, page_size: int, page_num: int) -> "QuerySet":
        """Select page `page_num` (1-based) of `page_size` rows."""
        self._limit.set(page_size, page_num)
        return self

    def select(self, *columns: Columns) -> "QuerySet":
        """Replace the select list. No columns means all columns.

        When every requested column is unknown the previous list is kept, so a
        typo never widens the query to `*`.
        """
        self._replace_columns(self._select, columns, "SELECT")
        return self

    def group_by(self, *columns: Columns) -> "QuerySet":
        """Replace the GROUP BY list. No columns removes the clause."""
        self._replace_columns(self._group_by, columns, "GROUP BY")
        return self

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------
    def get_where_sql(self) -> SQLWithArgs:
        return self.conditions.to_sql()

    def get_order_by_sql(self) -> str:
        return self._order_by.to_sql()

    def get_limit_sql(self) -> str:
        return self._limit.to_sql()

    def get_select_sql(self) -> str:
        return self._select.to_sql()

    def get_group_by_sql(self) -> str:
        return self._group_by.to_sql()

    # ------------------------------------------------------------------
    # Column checks
    # ------------------------------------------------------------------
    def _replace_columns(self, builder, columns, clause: str) -> None:
        requested = split_columns(*columns)
        checked = [c for c in requested if self.check_column(c, clause)]
        if requested and not checked:
            self.logger.warning("No known %s columns in %r; keeping %r.", clause, requested, builder.columns)
            return
        builder.set(checked)

    def check_column(self, column: str, clause: str) -> bool:
        """Return True if `column` may be used in `clause`.

        Unknown columns raise `InvalidFieldError` when strict; otherwise they
        are logged and False is returned so the caller drops them.
        """
        if self.fields is None or column in self.fields:
            return True
        if self.strict:
            raise InvalidFieldError("Unknown column", field=column, clause=clause)
        self.logger.unknown_column(clause, column)
        return False

    def known_data(self, data: Mapping[str, Any], clause: str) -> Dict[str, Any]:
        """Keep the entries of `data` whose keys pass `check_column`, in order."""
        return {k: v for k, v in data.items() if self.check_column(k, clause)}

    def __repr__(self) -> str:
        where, args = self.get_where_sql()
        return f"<QuerySet: {self.dialect.name} where={where.strip()!r} args={args!r}>"
