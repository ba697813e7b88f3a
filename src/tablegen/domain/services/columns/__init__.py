"""Dialect specific column builders."""

from typing import Any

from tablegen.core.exceptions import ConfigurationError
from tablegen.domain.entities.dialect import Dialect
from tablegen.domain.services.columns.base import Column
from tablegen.domain.services.columns.mysql import MySQLColumn
from tablegen.domain.services.columns.postgresql import PostgreSQLColumn
from tablegen.domain.services.columns.sqlite import SQLiteColumn


def column_class_for(dialect: Any) -> type[Column]:
    """Return the column builder class for a dialect.

    Args:
        dialect: A ``Dialect`` member.

    Returns:
        The concrete builder class.

    Raises:
        ConfigurationError: If the value is not a supported dialect.
    """
    if dialect is Dialect.MYSQL:
        return MySQLColumn
    if dialect is Dialect.POSTGRESQL:
        return PostgreSQLColumn
    if dialect is Dialect.SQLITE:
        return SQLiteColumn

    raise ConfigurationError(f"Invalid dialect: {dialect!r}")


__all__ = [
    "Column",
    "MySQLColumn",
    "PostgreSQLColumn",
    "SQLiteColumn",
    "column_class_for",
]
