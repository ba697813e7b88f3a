"""MySQL column builder."""

from __future__ import annotations

from tablegen.domain.entities.dialect import Dialect
from tablegen.domain.services.columns.base import (
    DEFAULT_VARCHAR_LENGTH,
    MAX_CHAR_LENGTH,
    MAX_VARCHAR_LENGTH,
    Column,
)


class MySQLColumn(Column):
    """Column builder rendering MySQL native types.

    MySQL supports every logical type natively, including ``ENUM``.
    """

    dialect = Dialect.MYSQL

    def tiny_int(self) -> MySQLColumn:
        self._type = "TINYINT"
        return self

    def small_int(self) -> MySQLColumn:
        self._type = "SMALLINT"
        return self

    def medium_int(self) -> MySQLColumn:
        self._type = "MEDIUMINT"
        return self

    def int(self) -> MySQLColumn:
        self._type = "INT"
        return self

    def big_int(self) -> MySQLColumn:
        self._type = "BIGINT"
        return self

    def float(self) -> MySQLColumn:
        # FLOAT(p) with p <= 24 is single precision
        self._type = "FLOAT(23)"
        return self

    def double(self) -> MySQLColumn:
        self._type = "FLOAT(53)"
        return self

    def decimal(self, total: int, places: int) -> MySQLColumn:
        self._validate_decimal(total, places)
        self._type = f"DECIMAL({total}, {places})"
        return self

    def char(self, length: int) -> MySQLColumn:
        self._validate_length(length, MAX_CHAR_LENGTH)
        self._type = f"CHAR({length})"
        return self

    def varchar(self, length: int = DEFAULT_VARCHAR_LENGTH) -> MySQLColumn:
        self._validate_length(length, MAX_VARCHAR_LENGTH)
        self._type = f"VARCHAR({length})"
        return self

    def tiny_text(self) -> MySQLColumn:
        self._type = "TINYTEXT"
        return self

    def text(self) -> MySQLColumn:
        self._type = "TEXT"
        return self

    def medium_text(self) -> MySQLColumn:
        self._type = "MEDIUMTEXT"
        return self

    def long_text(self) -> MySQLColumn:
        self._type = "LONGTEXT"
        return self

    def boolean(self) -> MySQLColumn:
        self._type = "BOOLEAN"
        return self

    def date(self) -> MySQLColumn:
        self._type = "DATE"
        return self

    def time(self) -> MySQLColumn:
        self._type = "TIME"
        return self

    def datetime(self) -> MySQLColumn:
        self._type = "DATETIME"
        return self

    def timestamp(self) -> MySQLColumn:
        self._type = "TIMESTAMP"
        return self

    def year(self) -> MySQLColumn:
        self._type = "YEAR"
        return self

    def json(self) -> MySQLColumn:
        self._type = "JSON"
        return self

    def enum(self, *values: str) -> MySQLColumn:
        self._validate_enum(values)
        self._type = f"ENUM({self._quote_values(values)})"
        return self
