"""Table generator for creating and dropping tables from column definitions.

Subclass ``TableGenerator`` once per table::

    class UsersTable(TableGenerator):
        table = "users"

        async def create(self) -> None:
            await self.schema(
                self.primary_key(),
                self.column("email").varchar(255).not_null().unique(),
                self.column("role").enum("admin", "member").default("member"),
                *self.timestamps(),
            )

    await UsersTable(executor=EngineExecutor(engine)).create()
"""

from typing import Any

from tablegen.core.exceptions import (
    ConfigurationError,
    GeneratorError,
    SchemaValidationError,
)
from tablegen.core.logging import LoggingContext, get_logger
from tablegen.domain.services.columns import Column, column_class_for
from tablegen.domain.services.ddl_resolver import resolve
from tablegen.domain.services.identifier_validator import is_snake_case
from tablegen.infrastructure.persistence.executor import SQLExecutor

logger = get_logger(__name__)


class TableGenerator:
    """Creates and drops a single table.

    The table name and executor are validated when they are read, so a
    generator can be configured in any order.

    Attributes:
        table: Table name in snake_case. Usually set on the subclass.
    """

    table: str | None = None

    def __init__(self, executor: SQLExecutor | None = None, table: str | None = None) -> None:
        """Initialize the generator.

        Args:
            executor: Executor used to run statements.
            table: Table name, overriding the class attribute.
        """
        if table is not None:
            self.table = table
        self._executor = executor

    @property
    def constructor(self) -> str:
        """Generator class name used in error messages."""
        return type(self).__name__

    @property
    def table_name(self) -> str:
        """Validated table name.

        Raises:
            ConfigurationError: If the table name is not snake_case.
        """
        if not is_snake_case(self.table):
            raise ConfigurationError(
                f"Invalid table name in: {self.constructor}",
                constructor=self.constructor,
            )
        return self.table

    @table_name.setter
    def table_name(self, table: str) -> None:
        self.table = table

    @property
    def executor(self) -> SQLExecutor:
        """Validated executor.

        Raises:
            ConfigurationError: If no executor is set or it lacks
                ``dialect``/``execute``.
        """
        if not isinstance(self._executor, SQLExecutor):
            raise ConfigurationError(
                f"Invalid executor in: {self.constructor}",
                constructor=self.constructor,
            )
        return self._executor

    @executor.setter
    def executor(self, executor: SQLExecutor) -> None:
        self._executor = executor

    def column(self, name: str) -> Column:
        """Create a column builder for the executor's dialect.

        Args:
            name: Column name in snake_case.

        Raises:
            ConfigurationError: If the executor is invalid or its dialect is
                not supported.
        """
        executor = self.executor
        try:
            column_class = column_class_for(executor.dialect)
        except ConfigurationError:
            raise ConfigurationError(
                f"Invalid dialect in: {self.constructor}",
                constructor=self.constructor,
            ) from None
        return column_class(name)

    def build_statements(self, *columns: Column) -> list[str]:
        """Validate the columns and generate the table's DDL without running it.

        Args:
            *columns: Columns built by ``column()``.

        Returns:
            The CREATE TABLE statement followed by any CREATE INDEX statements.

        Raises:
            SchemaValidationError: If no columns are given, any column was
                built for another dialect, or the columns cannot be resolved.
            ConfigurationError: If the table name or executor is invalid.
        """
        if not columns:
            raise SchemaValidationError(
                f"Undefined schema columns in: {self.constructor}",
                constructor=self.constructor,
            )

        dialect = self.executor.dialect

        try:
            column_class: Any = column_class_for(dialect)
        except ConfigurationError:
            column_class = None

        if column_class is None or not all(isinstance(col, column_class) for col in columns):
            raise SchemaValidationError(
                f"Invalid columns in: {self.constructor}",
                constructor=self.constructor,
            )

        return resolve(columns, dialect, self.table_name, self.constructor)

    async def schema(self, *columns: Column) -> None:
        """Create the table from the given columns.

        Statements run strictly in order, each awaited before the next is
        issued. The first failing statement stops the sequence and its error
        is raised unchanged.

        Args:
            *columns: Columns built by ``column()``.
        """
        statements = self.build_statements(*columns)
        executor = self.executor
        table_name = self.table_name

        with LoggingContext(table_name=table_name, dialect=executor.dialect.value):
            logger.info("Creating table", statement_count=len(statements))

            for statement in statements:
                try:
                    await executor.execute(statement)
                except Exception:
                    logger.error("Statement failed", sql=statement)
                    raise
                logger.debug("Statement applied", sql=statement)

            logger.info("Table created successfully")

    async def drop(self) -> None:
        """Drop the table."""
        table_name = self.table_name
        await self.executor.execute(f"DROP TABLE {table_name};")
        logger.info("Table dropped", table_name=table_name)

    async def create(self) -> None:
        """Create the table. Subclasses implement this by calling ``schema``.

        Raises:
            GeneratorError: Always, when not overridden.
        """
        raise GeneratorError(
            f"Table creation logic is missing in: {self.constructor}",
            constructor=self.constructor,
        )

    # =========================================================================
    # COMMON COLUMNS
    # =========================================================================

    def primary_key(self, name: str | None = None) -> Column:
        """Auto-incrementing primary key column, named ``id`` by default."""
        return self.column(name or "id").pk()

    def created_at(self) -> Column:
        """``created_at`` datetime column."""
        return self.column("created_at").datetime()

    def updated_at(self) -> Column:
        """``updated_at`` datetime column."""
        return self.column("updated_at").datetime()

    def timestamps(self) -> list[Column]:
        """``created_at`` and ``updated_at`` columns."""
        return [self.created_at(), self.updated_at()]
