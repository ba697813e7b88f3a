"""Unit tests for PostgreSQLColumn."""

import pytest

from tablegen.core.exceptions import ColumnError
from tablegen.domain.services.columns import PostgreSQLColumn


@pytest.fixture
def column() -> PostgreSQLColumn:
    return PostgreSQLColumn("test_column")


@pytest.mark.parametrize(
    "method,expected",
    [
        ("tiny_int", "SMALLINT"),
        ("small_int", "SMALLINT"),
        ("medium_int", "INTEGER"),
        ("int", "INTEGER"),
        ("big_int", "BIGINT"),
        ("float", "REAL"),
        ("double", "DOUBLE PRECISION"),
        ("tiny_text", "VARCHAR(255)"),
        ("text", "VARCHAR(65535)"),
        ("medium_text", "VARCHAR(16777215)"),
        ("long_text", "TEXT"),
        ("boolean", "BOOLEAN"),
        ("date", "DATE"),
        ("time", "TIME WITHOUT TIME ZONE"),
        ("datetime", "TIMESTAMP WITHOUT TIME ZONE"),
        ("timestamp", "TIMESTAMP WITHOUT TIME ZONE"),
        ("year", "INTEGER"),
        ("json", "JSON"),
    ],
)
def test_simple_types(column, method, expected):
    assert getattr(column, method)() is column
    assert column.type == expected


def test_decimal(column):
    assert column.decimal(10, 2).type == "DECIMAL(10, 2)"


def test_decimal_invalid(column):
    with pytest.raises(ColumnError):
        column.decimal(2, 3)


def test_char_and_varchar(column):
    assert column.char(10).type == "CHAR(10)"
    assert column.varchar().type == "VARCHAR(200)"
    assert column.varchar(100).type == "VARCHAR(100)"


def test_length_bounds(column):
    with pytest.raises(ColumnError):
        column.char(256)
    with pytest.raises(ColumnError):
        column.varchar(-1)


def test_enum_becomes_checked_varchar(column):
    """Enums are emulated with a membership check, preserving order."""
    column.enum("b", "a", "c")
    assert column.type == "VARCHAR"
    assert column.constraints.checks == ("test_column IN ('b', 'a', 'c')",)


def test_enum_check_follows_existing_checks(column):
    column.check("test_column <> ''").enum("a")
    assert column.constraints.checks == ("test_column <> ''", "test_column IN ('a')")


def test_enum_invalid(column):
    with pytest.raises(ColumnError, match="Invalid enum values"):
        column.enum()
    assert column.constraints.checks is None
