"""Tests for the exception hierarchy and message formatting."""

import pytest

from lookupsql.exceptions import (
    ConfigurationError,
    EmptyValueError,
    FilterError,
    InvalidConfigError,
    InvalidFieldError,
    InvalidLimitError,
    LookupSQLError,
    LookupSyntaxError,
    OperatorValueError,
    UnknownOperatorError,
    UnsupportedValueError,
)


class TestFormatting:
    def test_message_only(self):
        err = LookupSQLError("boom")
        assert str(err) == "boom"
        assert err.details == {}

    def test_message_with_details(self):
        err = LookupSyntaxError("Lookup key is invalid", lookup="a__b__c")
        assert str(err) == "Lookup key is invalid (lookup='a__b__c')"

    def test_details_only(self):
        assert str(EmptyValueError(lookup="id__in")) == "lookup='id__in'"

    def test_repr(self):
        err = InvalidFieldError("Unknown column", field="x")
        assert repr(err) == "InvalidFieldError(message='Unknown column', details={'field': 'x'})"


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls",
        [LookupSyntaxError, UnknownOperatorError, OperatorValueError, UnsupportedValueError, EmptyValueError],
    )
    def test_filter_errors(self, cls):
        assert issubclass(cls, FilterError)
        assert issubclass(cls, LookupSQLError)

    def test_config_errors(self):
        assert issubclass(InvalidConfigError, ConfigurationError)
        assert not issubclass(InvalidFieldError, FilterError)

    def test_limit_error_is_not_a_filter_error(self):
        assert issubclass(InvalidLimitError, LookupSQLError)
        assert not issubclass(InvalidLimitError, FilterError)
