"""ORDER BY, LIMIT/OFFSET, SELECT and GROUP BY builders.

Each builder accumulates state through mutating calls and renders its clause
with `to_sql()`. Rendered clauses carry a leading space so they can be
appended directly to a statement; an empty builder renders `""` (or `*` for
the select list).
"""

from typing import Iterable, List, Optional, Union

from lookupsql.dialects import BaseDialect
from lookupsql.exceptions import InvalidLimitError
from lookupsql.schema import LimitSpec, OrderTerm

__all__ = ("OrderByClause", "LimitClause", "SelectClause", "GroupByClause")


class _ColumnClause:
    def __init__(self, dialect: BaseDialect) -> None:
        self.dialect = dialect
        self.columns: List[str] = []

    def set(self, columns: Iterable[str]) -> None:
        """Replace the column list. An empty iterable clears it."""
        self.columns = list(columns)

    def reset(self) -> None:
        self.columns = []

    def _quoted(self) -> str:
        return ",".join(self.dialect.quote_identifier(c) for c in self.columns)


class OrderByClause:
    def __init__(self, dialect: BaseDialect) -> None:
        self.dialect = dialect
        self.terms: List[OrderTerm] = []

    def add(self, specs: Iterable[Union[str, OrderTerm]]) -> None:
        """Append terms; "col" sorts ascending, "-col" descending. Parsed terms are taken as is."""
        for spec in specs:
            term = spec if isinstance(spec, OrderTerm) else OrderTerm.parse(spec)
            if term.column:
                self.terms.append(term)

    def reset(self) -> None:
        self.terms = []

    def to_sql(self) -> str:
        if not self.terms:
            return ""
        rendered = ", ".join(f"{self.dialect.quote_identifier(t.column)} {t.direction.value}" for t in self.terms)
        return " ORDER BY " + rendered


class LimitClause:
    def __init__(self) -> None:
        self.spec: Optional[LimitSpec] = None

    def set(self, page_size: int, page_num: int) -> None:
        """Page through results; ignored unless both values are positive.

        Raises:
            InvalidLimitError: If either value is not an integer
        """
        for name, value in (("page_size", page_size), ("page_num", page_num)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidLimitError(f"{name} must be an integer", **{name: value})
        if page_size > 0 and page_num > 0:
            self.spec = LimitSpec(page_size=page_size, page_num=page_num)

    def reset(self) -> None:
        self.spec = None

    def to_sql(self) -> str:
        if self.spec is None:
            return ""
        return f" LIMIT {self.spec.limit} OFFSET {self.spec.offset}"


class SelectClause(_ColumnClause):
    def to_sql(self) -> str:
        if not self.columns:
            return "*"
        return self._quoted()


class GroupByClause(_ColumnClause):
    def to_sql(self) -> str:
        if not self.columns:
            return ""
        return " GROUP BY " + self._quoted()
