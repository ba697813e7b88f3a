"""DDL resolver.

Turns the columns of one table into the statements that create it on a given
dialect. The first statement is always the ``CREATE TABLE``; one
``CREATE INDEX`` follows for every indexed column, in column order, since
indexes can only be created once the table exists.

Usage:
    statements = resolve(columns, Dialect.POSTGRESQL, "users", "UsersTable")
    for statement in statements:
        await executor.execute(statement)
"""

from dataclasses import dataclass
from typing import Any, Iterable

from tablegen.core.exceptions import ConfigurationError, SchemaValidationError
from tablegen.domain.entities.constraints import ColumnSnapshot
from tablegen.domain.entities.dialect import Dialect
from tablegen.domain.services.columns.base import Column


@dataclass(frozen=True)
class DialectRules:
    """How a dialect expresses unsigned and auto-increment columns.

    Attributes:
        native_unsigned: Whether ``UNSIGNED`` can follow an integer type.
            Otherwise a ``CHECK (column >= 0)`` is generated.
        auto_increment_keyword: Keyword appended to auto-increment columns.
        serial_type: Type that replaces the declared type of an
            auto-increment column.
    """

    native_unsigned: bool
    auto_increment_keyword: str | None = None
    serial_type: str | None = None


MYSQL_RULES = DialectRules(native_unsigned=True, auto_increment_keyword="AUTO_INCREMENT")
POSTGRESQL_RULES = DialectRules(native_unsigned=False, serial_type="BIGSERIAL")
# SQLite aliases an INTEGER PRIMARY KEY to the rowid, which auto-increments
SQLITE_RULES = DialectRules(native_unsigned=False)


def rules_for(dialect: Any) -> DialectRules:
    """Return the DDL rules for a dialect.

    Raises:
        ConfigurationError: If the value is not a supported dialect.
    """
    if dialect is Dialect.MYSQL:
        return MYSQL_RULES
    if dialect is Dialect.POSTGRESQL:
        return POSTGRESQL_RULES
    if dialect is Dialect.SQLITE:
        return SQLITE_RULES

    raise ConfigurationError(f"Invalid dialect: {dialect!r}")


def _snapshot(column: Column | ColumnSnapshot) -> ColumnSnapshot:
    if isinstance(column, ColumnSnapshot):
        return column
    return column.snapshot()


def _is_full_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def resolve(
    columns: Iterable[Column | ColumnSnapshot],
    dialect: Dialect,
    table: str,
    constructor: str,
) -> list[str]:
    """Generate the DDL statements for a table.

    Args:
        columns: Columns in declaration order. Builders are snapshotted
            first and never modified.
        dialect: Target engine.
        table: Table name.
        constructor: Name of the generator class, used in error messages.

    Returns:
        ``[CREATE TABLE ..., CREATE INDEX ..., ...]``

    Raises:
        ConfigurationError: If the dialect is not supported.
        SchemaValidationError: If a column has no name or type, an
            auto-increment column is not a primary key, or a foreign key
            has no reference.
    """
    try:
        rules = rules_for(dialect)
    except ConfigurationError:
        raise ConfigurationError(
            f"Invalid dialect in: {constructor}", constructor=constructor, table=table
        ) from None

    declarations: list[str] = []
    constraints: list[str] = []
    indexes: list[str] = []

    for column in map(_snapshot, columns):
        name = column.name
        sql_type = column.type
        declared = column.constraints

        if not _is_full_string(name):
            raise SchemaValidationError(
                f"Undefined column name in: {constructor}",
                constructor=constructor,
                table=table,
            )

        if not _is_full_string(sql_type):
            raise SchemaValidationError(
                f"Undefined column type for '{name}' in: {constructor}",
                constructor=constructor,
                table=table,
                column=name,
            )

        auto_increment = bool(declared.auto_increment)
        if auto_increment and not declared.primary_key:
            raise SchemaValidationError(
                f"Your auto-increment column '{name}' must be a primary key in: {constructor}",
                constructor=constructor,
                table=table,
                column=name,
            )

        if auto_increment and rules.serial_type:
            sql_type = rules.serial_type

        parts = [name, sql_type]
        checks = list(declared.checks or ())

        if declared.unsigned:
            if rules.native_unsigned:
                parts.append("UNSIGNED")
            elif not auto_increment:
                # Sequences never produce negative values
                checks.append(f"{name} >= 0")

        if auto_increment and rules.auto_increment_keyword:
            parts.append(rules.auto_increment_keyword)

        if declared.not_null:
            parts.append("NOT NULL")

        if declared.default is not None:
            parts.append(f"DEFAULT {declared.default}")

        declarations.append(" ".join(parts))

        if declared.primary_key:
            constraints.append(f"CONSTRAINT pk_{table}_{name} PRIMARY KEY ({name})")

        if declared.foreign_key is not None:
            fk = declared.foreign_key
            if fk.references is None:
                raise SchemaValidationError(
                    f"Undefined foreign key reference for '{name}' in: {constructor}",
                    constructor=constructor,
                    table=table,
                    column=name,
                )

            clause = (
                f"CONSTRAINT fk_{table}_{name} FOREIGN KEY ({name}) "
                f"REFERENCES {fk.references.table}({fk.references.column})"
            )
            if fk.on_delete is not None:
                clause += f" ON DELETE {fk.on_delete.sql}"
            if fk.on_update is not None:
                clause += f" ON UPDATE {fk.on_update.sql}"
            constraints.append(clause)

        for position, condition in enumerate(checks):
            constraints.append(
                f"CONSTRAINT check_{table}_{name}_{position} CHECK ({condition})"
            )

        if declared.unique:
            constraints.append(f"CONSTRAINT unique_{table}_{name} UNIQUE ({name})")

        if declared.index:
            indexes.append(f"CREATE INDEX index_{table}_{name} ON {table}({name});")

    body = ", ".join(declarations)
    if constraints:
        body += ", " + ", ".join(constraints)

    return [f"CREATE TABLE {table} ({body});", *indexes]
