"""Unit tests for the bindql error hierarchy."""

from __future__ import annotations

import pytest

from bindql.errors import (
    BindQLError,
    DialectConfigError,
    DuplicatePlaceholderError,
    ExecutionError,
)


@pytest.mark.parametrize(
    "error",
    [
        DuplicatePlaceholderError(":id"),
        ExecutionError("HY000", 1, "boom"),
        DialectConfigError("no dialect"),
    ],
)
def test_errors_share_base_class(error):
    assert isinstance(error, BindQLError)


def test_duplicate_placeholder_message():
    err = DuplicatePlaceholderError(":name")
    assert str(err) == "Duplicate placeholder: :name"
    assert err.placeholder == ":name"


def test_execution_error_message_and_fields():
    err = ExecutionError("42P01", 7, 'relation "t" does not exist')
    assert str(err) == 'SQLSTATE: 42P01, Error Code: 7, Message: relation "t" does not exist'
    assert err.sqlstate == "42P01"
    assert err.code == 7
    assert err.driver_message == 'relation "t" does not exist'
    assert err.to_error_info() == ("42P01", 7, 'relation "t" does not exist')


def test_execution_error_is_distinct_from_duplicate():
    assert not issubclass(ExecutionError, DuplicatePlaceholderError)
    assert not issubclass(DuplicatePlaceholderError, ExecutionError)


def test_dialect_config_error_target():
    assert DialectConfigError("bad", target="oracle").target == "oracle"
    assert DialectConfigError("bad").target is None
