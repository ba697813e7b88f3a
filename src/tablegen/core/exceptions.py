"""Exceptions raised while building columns and generating tables."""


class TableGenError(Exception):
    """Base class for all tablegen errors."""
    pass


class ColumnError(TableGenError):
    """Raised when a column builder receives an invalid argument."""
    pass


class GeneratorError(TableGenError):
    """Raised by table generators.

    Carries the generator class name and, where known, the table and column
    responsible for the failure.
    """

    def __init__(
        self,
        message: str,
        constructor: str | None = None,
        table: str | None = None,
        column: str | None = None,
    ):
        self.constructor = constructor
        self.table = table
        self.column = column
        super().__init__(message)


class ConfigurationError(GeneratorError):
    """Raised when a generator's table name, executor or dialect is invalid."""
    pass


class SchemaValidationError(GeneratorError):
    """Raised when a set of columns cannot be turned into DDL."""
    pass
