"""Statement composition helpers.

Glue a QuerySet's fragments onto SELECT / COUNT / INSERT / UPDATE / DELETE
prefixes. Every helper is pure and returns `(sql, args)` for a DB-API
`cursor.execute(sql, args)` call; nothing here talks to a database.
"""

from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from .dialects import BaseDialect
from .exceptions import EmptyValueError
from .queryset import QuerySet
from .types import SQLWithArgs

__all__ = (
    "select_statement",
    "count_statement",
    "insert_statement",
    "update_statement",
    "delete_statement",
)


def select_statement(
    table: str,
    qs: QuerySet,
    columns: Optional[Sequence[str]] = None,
    one: bool = False,
) -> SQLWithArgs:
    """Build `SELECT ... FROM table` with WHERE, GROUP BY, ORDER BY and LIMIT.

    Args:
        table: Unquoted table name
        qs: QuerySet holding the clauses
        columns: Columns to read when the QuerySet selects `*`
        one: Replace the page window with `LIMIT 1`
    """
    dialect = qs.dialect
    selected = qs.get_select_sql()
    if selected == "*" and columns:
        selected = ",".join(dialect.quote_identifier(c) for c in columns)

    where, args = qs.get_where_sql()
    sql = f"SELECT {selected} FROM {dialect.quote_identifier(table)}"
    sql += where + qs.get_group_by_sql() + qs.get_order_by_sql()
    sql += " LIMIT 1" if one else qs.get_limit_sql()
    return sql, args


def count_statement(table: str, qs: QuerySet) -> SQLWithArgs:
    where, args = qs.get_where_sql()
    return f"SELECT count(1) FROM {qs.dialect.quote_identifier(table)}{where}", args


def insert_statement(
    table: str,
    data: Mapping[str, Any],
    dialect: Union[str, BaseDialect, None] = None,
    fields: Optional[Iterable[str]] = None,
) -> SQLWithArgs:
    """Build a single-row INSERT. `dialect` defaults to settings.SQL_DIALECT.

    When `fields` is given, keys outside it are dropped (or raise under
    STRICT_FIELDS), as the QuerySet does for its column lists.

    Raises:
        EmptyValueError: If no columns are left to insert
        InvalidFieldError: If a key is unknown and field checking is strict
    """
    qs = QuerySet(dialect, fields=fields)
    row = qs.known_data(data, "INSERT")
    if not row:
        raise EmptyValueError("No columns to insert", table=table)
    quote = qs.dialect.quote_identifier
    cols = ",".join(quote(k) for k in row)
    placeholders = ",".join(qs.dialect.placeholder for _ in row)
    return f"INSERT INTO {quote(table)} ({cols}) VALUES ({placeholders})", list(row.values())


def update_statement(table: str, qs: QuerySet, data: Mapping[str, Any]) -> SQLWithArgs:
    """Build `UPDATE table SET ...` restricted by the QuerySet's WHERE clause.

    Keys are checked against the QuerySet's known fields. Arguments are the
    new values followed by the WHERE arguments.

    Raises:
        EmptyValueError: If no columns are left to update
        InvalidFieldError: If a key is unknown and field checking is strict
    """
    row = qs.known_data(data, "UPDATE")
    if not row:
        raise EmptyValueError("No columns to update", table=table)
    dialect = qs.dialect
    assignments = ",".join(f"{dialect.quote_identifier(k)}={dialect.placeholder}" for k in row)
    where, where_args = qs.get_where_sql()
    args: List[Any] = list(row.values()) + where_args
    return f"UPDATE {dialect.quote_identifier(table)} SET {assignments}{where}", args


def delete_statement(table: str, qs: QuerySet) -> SQLWithArgs:
    where, args = qs.get_where_sql()
    return f"DELETE FROM {qs.dialect.quote_identifier(table)}{where}", args
