"""Base dialect interface.

Defines the contract every SQL dialect must follow: translating lookup
keywords to operator text, quoting identifiers and supplying the positional
placeholder used in compiled fragments.
"""

from abc import ABC
from typing import ClassVar, Dict

from lookupsql.exceptions import UnknownOperatorError

__all__ = ("BaseDialect",)


class BaseDialect(ABC):
    """Abstract base class for SQL dialects.

    Subclasses set `name`, `quote_char` and `_OP_MAP`. Override
    `quote_identifier` or `translate` when a backend needs more than a table
    lookup and a quote character.
    """

    name: ClassVar[str] = "base"
    quote_char: ClassVar[str] = '"'
    placeholder: ClassVar[str] = "?"

    # Lookup keyword -> SQL operator text
    _OP_MAP: ClassVar[Dict[str, str]] = {}

    @property
    def operators(self) -> Dict[str, str]:
        """Copy of the supported keyword -> operator mapping."""
        return dict(self._OP_MAP)

    def translate(self, keyword: str) -> str:
        """Return the SQL operator for a lookup keyword.

        Raises:
            UnknownOperatorError: If the keyword is not supported by this dialect
        """
        try:
            return self._OP_MAP[keyword]
        except KeyError:
            raise UnknownOperatorError(
                f"Operator {keyword!r} is not supported. Supported: {', '.join(sorted(self._OP_MAP))}",
                operator=keyword,
                dialect=self.name,
            ) from None

    def quote_identifier(self, name: str) -> str:
        """Quote a column or table identifier, doubling embedded quote characters."""
        q = self.quote_char
        return f"{q}{name.replace(q, q + q)}{q}"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self.name}>"
