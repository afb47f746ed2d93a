"""Condition set accumulator.

Collects compiled include and exclude batches, or a raw override, and
assembles the final WHERE clause:

- raw override set:   ` WHERE <override>` with the override arguments
- nothing collected:  empty clause and no arguments
- otherwise:          ` WHERE (i1) AND (i2) AND NOT (e1) AND NOT (e2)`

Arguments follow the same order: all include batches, then all exclude batches.
"""

from typing import Any, List, Optional, Tuple

from lookupsql.constants import FilterKind
from lookupsql.dialects import BaseDialect
from lookupsql.schema import FilterExpression
from lookupsql.types import FilterInput, SQLWithArgs
from lookupsql.utils import normalize_filter_input

from .compiler import FilterCompiler

__all__ = ("ConditionSet",)


class ConditionSet:
    def __init__(self, dialect: BaseDialect) -> None:
        self.compiler = FilterCompiler(dialect)
        self.expressions: List[FilterExpression] = []
        self.raw: Optional[Tuple[str, Tuple[Any, ...]]] = None

    @property
    def includes(self) -> List[FilterExpression]:
        return [e for e in self.expressions if e.kind is FilterKind.INCLUDE]

    @property
    def excludes(self) -> List[FilterExpression]:
        return [e for e in self.expressions if e.kind is FilterKind.EXCLUDE]

    def _add(self, kind: FilterKind, filters, lookups) -> "ConditionSet":
        pairs = normalize_filter_input(*filters, **lookups)
        expr = self.compiler.compile(pairs, kind)
        if not expr.is_empty:
            self.expressions.append(expr)
        return self

    def filter(self, *filters: FilterInput, **lookups: Any) -> "ConditionSet":
        """Compile one batch and keep the rows it matches."""
        return self._add(FilterKind.INCLUDE, filters, lookups)

    def exclude(self, *filters: FilterInput, **lookups: Any) -> "ConditionSet":
        """Compile one batch and drop the rows it matches."""
        return self._add(FilterKind.EXCLUDE, filters, lookups)

    def where(self, cond: str, *args: Any) -> "ConditionSet":
        """Set a raw condition that replaces every filter/exclude batch.

        An empty `cond` clears the override.
        """
        self.raw = (cond, tuple(args)) if cond else None
        return self

    def to_sql(self) -> SQLWithArgs:
        if self.raw is not None:
            cond, args = self.raw
            return " WHERE " + cond, list(args)

        ordered = self.includes + self.excludes
        if not ordered:
            return "", []

        args: List[Any] = []
        for expr in ordered:
            args.extend(expr.args)
        return " WHERE " + " AND ".join(expr.wrapped() for expr in ordered), args

    def reset(self) -> "ConditionSet":
        self.expressions = []
        self.raw = None
        return self

    def __len__(self) -> int:
        return len(self.expressions)

    def __repr__(self) -> str:
        sql, args = self.to_sql()
        return f"<ConditionSet: {sql.strip()!r} args={args!r}>"
