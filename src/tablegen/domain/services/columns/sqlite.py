"""SQLite column builder."""

from __future__ import annotations

from tablegen.domain.entities.dialect import Dialect
from tablegen.domain.services.columns.base import (
    DEFAULT_VARCHAR_LENGTH,
    MAX_CHAR_LENGTH,
    MAX_VARCHAR_LENGTH,
    Column,
)


class SQLiteColumn(Column):
    """Column builder rendering SQLite storage classes.

    SQLite only distinguishes INTEGER, REAL, NUMERIC and TEXT. Lengths are
    still validated so a schema stays portable, but they are not rendered.
    Booleans are 0/1 integers, dates and times are ISO-8601 text, and enums
    are TEXT with a membership CHECK.
    """

    dialect = Dialect.SQLITE

    def tiny_int(self) -> SQLiteColumn:
        self._type = "INTEGER"
        return self

    def small_int(self) -> SQLiteColumn:
        self._type = "INTEGER"
        return self

    def medium_int(self) -> SQLiteColumn:
        self._type = "INTEGER"
        return self

    def int(self) -> SQLiteColumn:
        self._type = "INTEGER"
        return self

    def big_int(self) -> SQLiteColumn:
        # INTEGER rather than BIGINT so an INTEGER PRIMARY KEY aliases the rowid
        self._type = "INTEGER"
        return self

    def float(self) -> SQLiteColumn:
        self._type = "REAL"
        return self

    def double(self) -> SQLiteColumn:
        self._type = "REAL"
        return self

    def decimal(self, total: int, places: int) -> SQLiteColumn:
        self._validate_decimal(total, places)
        self._type = "NUMERIC"
        return self

    def char(self, length: int) -> SQLiteColumn:
        self._validate_length(length, MAX_CHAR_LENGTH)
        self._type = "TEXT"
        return self

    def varchar(self, length: int = DEFAULT_VARCHAR_LENGTH) -> SQLiteColumn:
        self._validate_length(length, MAX_VARCHAR_LENGTH)
        self._type = "TEXT"
        return self

    def tiny_text(self) -> SQLiteColumn:
        self._type = "TEXT"
        return self

    def text(self) -> SQLiteColumn:
        self._type = "TEXT"
        return self

    def medium_text(self) -> SQLiteColumn:
        self._type = "TEXT"
        return self

    def long_text(self) -> SQLiteColumn:
        self._type = "TEXT"
        return self

    def boolean(self) -> SQLiteColumn:
        self._type = "INTEGER"
        return self

    def date(self) -> SQLiteColumn:
        self._type = "TEXT"
        return self

    def time(self) -> SQLiteColumn:
        self._type = "TEXT"
        return self

    def datetime(self) -> SQLiteColumn:
        self._type = "TEXT"
        return self

    def timestamp(self) -> SQLiteColumn:
        self._type = "TEXT"
        return self

    def year(self) -> SQLiteColumn:
        self._type = "INTEGER"
        return self

    def json(self) -> SQLiteColumn:
        self._type = "TEXT"
        return self

    def enum(self, *values: str) -> SQLiteColumn:
        self._validate_enum(values)
        return self._emulate_enum("TEXT", values)
