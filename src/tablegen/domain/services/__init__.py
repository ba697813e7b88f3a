"""Domain services for tablegen.

Column builders and the DDL resolver. Nothing here performs I/O.
"""

from tablegen.domain.services.columns import (
    Column,
    MySQLColumn,
    PostgreSQLColumn,
    SQLiteColumn,
    column_class_for,
)
from tablegen.domain.services.ddl_resolver import DialectRules, resolve, rules_for
from tablegen.domain.services.identifier_validator import is_snake_case

__all__ = [
    "Column",
    "DialectRules",
    "MySQLColumn",
    "PostgreSQLColumn",
    "SQLiteColumn",
    "column_class_for",
    "is_snake_case",
    "resolve",
    "rules_for",
]
