"""Logging for lookupsql.

Components log under the ``lookupsql`` namespace (``lookupsql.QuerySet``,
``lookupsql.FilterCompiler``). The first ``Logger`` created sets the namespace
level from ``settings.LOG_LEVEL``; the root logger is left to the application.
"""

import logging
from typing import Any, Iterable

from lookupsql.settings import settings

NAMESPACE = "lookupsql"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """Configure the ``lookupsql`` logger once.

    Unknown level names fall back to INFO. A stream handler is attached only
    when the application has not configured the root logger itself.

    Args:
        level: Log level name (e.g., "DEBUG", "INFO")
    """
    global _configured
    if _configured:
        return
    lvl = logging.getLevelName((level or "INFO").upper())
    if not isinstance(lvl, int):
        lvl = logging.INFO

    package_logger = logging.getLogger(NAMESPACE)
    package_logger.setLevel(lvl)
    if not logging.getLogger().handlers and not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    _configured = True


class Logger:
    """Per-component logger named ``lookupsql.<component>``."""

    def __init__(self, component: str) -> None:
        if not _configured:
            setup_logging(settings.LOG_LEVEL)
        self._logger = logging.getLogger(f"{NAMESPACE}.{component}")

    @property
    def name(self) -> str:
        return self._logger.name

    def fragment(self, label: str, sql: str, args: Iterable[Any]) -> None:
        """Trace one rendered SQL fragment with its bound arguments."""
        self._logger.debug("%s: %s args=%r", label, sql, list(args))

    def unknown_column(self, clause: str, column: str) -> None:
        self._logger.error("%s column [%s] does not exist.", clause, column)

    def warning(self, msg: str, *args: Any) -> None:
        self._logger.warning(msg, *args)
