"""Pydantic schemas for compiled query fragments."""

from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .constants import Direction, FilterKind


class FilterExpression(BaseModel):
    """One compiled filter batch: SQL text, its arguments and whether it includes or excludes."""

    model_config = ConfigDict(frozen=True)

    sql: str = Field("", description="Boolean SQL fragment with positional placeholders.")
    args: Tuple[Any, ...] = Field((), description="Arguments in placeholder order.")
    kind: FilterKind = Field(FilterKind.INCLUDE, description="Include or exclude batch.")

    @property
    def is_empty(self) -> bool:
        return not self.sql

    def wrapped(self) -> str:
        """Return the fragment parenthesized, prefixed with NOT for exclude batches."""
        if self.kind is FilterKind.EXCLUDE:
            return f"NOT ({self.sql})"
        return f"({self.sql})"


class OrderTerm(BaseModel):
    model_config = ConfigDict(frozen=True)

    column: str
    direction: Direction = Direction.ASC

    @classmethod
    def parse(cls, spec: str) -> "OrderTerm":
        """Build a term from "col" (ascending) or "-col" (descending)."""
        spec = spec.strip()
        if spec.startswith("-"):
            return cls(column=spec[1:].strip(), direction=Direction.DESC)
        return cls(column=spec, direction=Direction.ASC)


class LimitSpec(BaseModel):
    """Page window derived from a page size and a 1-based page number."""

    model_config = ConfigDict(frozen=True)

    page_size: int = Field(..., gt=0)
    page_num: int = Field(..., gt=0)

    @computed_field
    @property
    def limit(self) -> int:
        return self.page_size

    @computed_field
    @property
    def offset(self) -> int:
        return (self.page_num - 1) * self.page_size
