"""Custom exceptions for the lookupsql library.

This module defines all custom exceptions used throughout the library for
consistent error handling and clear error messaging. Every failure while
building a query surfaces as one of these, before any SQL reaches a database.
"""

from typing import Any, Dict


# Base exception
class LookupSQLError(Exception):
    """Base exception for all lookupsql errors.

    Attributes:
        message: Error message
        details: Additional error context as key-value pairs
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        """Initialize exception with message and additional details.

        Args:
            message: Human-readable error message
            **kwargs: Additional context (e.g., lookup, operator, value)
        """
        self.message = message
        self.details: Dict[str, Any] = kwargs
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message with details."""
        if not self.details:
            return self.message

        details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        if self.message:
            return f"{self.message} ({details_str})"
        return details_str

    def __repr__(self) -> str:
        """Return detailed representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# Filter compilation exceptions
class FilterError(LookupSQLError):
    """Base exception for errors raised while compiling a filter batch.

    Example:
        >>> raise FilterError("Filter compilation failed", lookup="age__gte")
    """


class LookupSyntaxError(FilterError):
    """Raised when a lookup key is malformed.

    Example:
        >>> raise LookupSyntaxError("Lookup key is invalid", lookup="age__gte__x")
    """


class UnknownOperatorError(FilterError):
    """Raised when a lookup keyword is not known to the dialect.

    Example:
        >>> raise UnknownOperatorError("Unknown lookup operator", operator="regex", dialect="mysql")
    """


class OperatorValueError(FilterError):
    """Raised when an operator cannot be used with the shape of the supplied value.

    Example:
        >>> raise OperatorValueError("Operator requires a list or tuple", lookup="id__in", operator="in")
    """


class UnsupportedValueError(FilterError):
    """Raised when a value has a type that cannot be bound as a parameter.

    Example:
        >>> raise UnsupportedValueError("Unsupported value type", lookup="meta", value_type="dict")
    """


class EmptyValueError(FilterError):
    """Raised when an empty collection or empty data mapping is supplied.

    Example:
        >>> raise EmptyValueError("Empty list or tuple", lookup="id__in")
    """


# Column exceptions
class InvalidFieldError(LookupSQLError):
    """Raised when a column is not part of the known field set.

    Example:
        >>> raise InvalidFieldError("Unknown column", field="nickname", clause="ORDER BY")
    """


# Paging exceptions
class InvalidLimitError(LookupSQLError):
    """Raised when a page size or page number is not an integer.

    Example:
        >>> raise InvalidLimitError("page_size must be an integer", page_size=2.5)
    """


# Configuration exceptions
class ConfigurationError(LookupSQLError):
    """Raised when configuration is invalid or missing.

    Example:
        >>> raise ConfigurationError("Invalid configuration", setting="SQL_DIALECT", value="oracle")
    """


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid.

    Example:
        >>> raise InvalidConfigError("Unknown dialect", config_key="SQL_DIALECT", value="oracle")
    """
