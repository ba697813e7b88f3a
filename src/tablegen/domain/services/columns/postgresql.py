"""PostgreSQL column builder."""

from __future__ import annotations

from tablegen.domain.entities.dialect import Dialect
from tablegen.domain.services.columns.base import (
    DEFAULT_VARCHAR_LENGTH,
    MAX_CHAR_LENGTH,
    MAX_VARCHAR_LENGTH,
    Column,
)


class PostgreSQLColumn(Column):
    """Column builder rendering PostgreSQL types.

    PostgreSQL has no TINYINT, MEDIUMINT or YEAR, so those map onto the next
    wider integer. MySQL's text sizes become bounded VARCHARs, and enums are
    stored as VARCHAR with a membership CHECK.
    """

    dialect = Dialect.POSTGRESQL

    def tiny_int(self) -> PostgreSQLColumn:
        self._type = "SMALLINT"
        return self

    def small_int(self) -> PostgreSQLColumn:
        self._type = "SMALLINT"
        return self

    def medium_int(self) -> PostgreSQLColumn:
        self._type = "INTEGER"
        return self

    def int(self) -> PostgreSQLColumn:
        self._type = "INTEGER"
        return self

    def big_int(self) -> PostgreSQLColumn:
        self._type = "BIGINT"
        return self

    def float(self) -> PostgreSQLColumn:
        self._type = "REAL"
        return self

    def double(self) -> PostgreSQLColumn:
        self._type = "DOUBLE PRECISION"
        return self

    def decimal(self, total: int, places: int) -> PostgreSQLColumn:
        self._validate_decimal(total, places)
        self._type = f"DECIMAL({total}, {places})"
        return self

    def char(self, length: int) -> PostgreSQLColumn:
        self._validate_length(length, MAX_CHAR_LENGTH)
        self._type = f"CHAR({length})"
        return self

    def varchar(self, length: int = DEFAULT_VARCHAR_LENGTH) -> PostgreSQLColumn:
        self._validate_length(length, MAX_VARCHAR_LENGTH)
        self._type = f"VARCHAR({length})"
        return self

    def tiny_text(self) -> PostgreSQLColumn:
        self._type = "VARCHAR(255)"
        return self

    def text(self) -> PostgreSQLColumn:
        self._type = "VARCHAR(65535)"
        return self

    def medium_text(self) -> PostgreSQLColumn:
        self._type = "VARCHAR(16777215)"
        return self

    def long_text(self) -> PostgreSQLColumn:
        self._type = "TEXT"
        return self

    def boolean(self) -> PostgreSQLColumn:
        self._type = "BOOLEAN"
        return self

    def date(self) -> PostgreSQLColumn:
        self._type = "DATE"
        return self

    def time(self) -> PostgreSQLColumn:
        self._type = "TIME WITHOUT TIME ZONE"
        return self

    def datetime(self) -> PostgreSQLColumn:
        self._type = "TIMESTAMP WITHOUT TIME ZONE"
        return self

    def timestamp(self) -> PostgreSQLColumn:
        self._type = "TIMESTAMP WITHOUT TIME ZONE"
        return self

    def year(self) -> PostgreSQLColumn:
        self._type = "INTEGER"
        return self

    def json(self) -> PostgreSQLColumn:
        self._type = "JSON"
        return self

    def enum(self, *values: str) -> PostgreSQLColumn:
        self._validate_enum(values)
        return self._emulate_enum("VARCHAR", values)
