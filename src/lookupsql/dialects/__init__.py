"""SQL dialects.

A dialect owns the lookup keyword -> operator table and the identifier quoting
rules. Query sets hold a dialect instance chosen at construction time.
"""

from typing import Dict, Type, Union

from lookupsql.exceptions import InvalidConfigError

from .base import BaseDialect
from .mysql import MySQLDialect
from .sqlite import SQLiteDialect

__all__ = (
    "BaseDialect",
    "MySQLDialect",
    "SQLiteDialect",
    "get_dialect",
    "register_dialect",
)

_DIALECTS: Dict[str, Type[BaseDialect]] = {
    "mysql": MySQLDialect,
    "sqlite": SQLiteDialect,
}


def register_dialect(dialect_cls: Type[BaseDialect]) -> Type[BaseDialect]:
    """Register a dialect class under its `name`. Usable as a class decorator."""
    _DIALECTS[dialect_cls.name.lower()] = dialect_cls
    return dialect_cls


def get_dialect(dialect: Union[str, BaseDialect]) -> BaseDialect:
    """Resolve a dialect name or instance to a dialect instance.

    Raises:
        InvalidConfigError: If the name is not registered
    """
    if isinstance(dialect, BaseDialect):
        return dialect
    dialect_cls = _DIALECTS.get(str(dialect).lower())
    if dialect_cls is None:
        raise InvalidConfigError(
            f"Unknown SQL dialect. Supported: {', '.join(sorted(_DIALECTS))}",
            config_key="SQL_DIALECT",
            value=dialect,
        )
    return dialect_cls()
