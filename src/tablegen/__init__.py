"""tablegen - dialect-aware CREATE TABLE generation.

Describe a table's columns once with a fluent builder and get the exact
CREATE TABLE and CREATE INDEX statements for MySQL, PostgreSQL or SQLite.
"""

__version__ = "0.1.0"

from tablegen.core.config import Settings, get_settings
from tablegen.core.exceptions import (
    ColumnError,
    ConfigurationError,
    GeneratorError,
    SchemaValidationError,
    TableGenError,
)
from tablegen.core.logging import LoggingContext, configure_logging, get_logger
from tablegen.domain.entities import (
    CA,
    CASCADE,
    NA,
    NO_ACTION,
    RE,
    RESTRICT,
    SD,
    SET_DEFAULT,
    SET_NULL,
    SN,
    Dialect,
    ReferentialAction,
)
from tablegen.domain.services import (
    Column,
    MySQLColumn,
    PostgreSQLColumn,
    SQLiteColumn,
    resolve,
)
from tablegen.infrastructure.persistence import (
    DatabaseManager,
    EngineExecutor,
    SQLExecutor,
    TableGenerator,
)

__all__ = [
    "__version__",
    "CA",
    "CASCADE",
    "Column",
    "ColumnError",
    "ConfigurationError",
    "DatabaseManager",
    "Dialect",
    "EngineExecutor",
    "LoggingContext",
    "GeneratorError",
    "MySQLColumn",
    "NA",
    "NO_ACTION",
    "PostgreSQLColumn",
    "RE",
    "RESTRICT",
    "ReferentialAction",
    "SD",
    "SET_DEFAULT",
    "SET_NULL",
    "SN",
    "SQLExecutor",
    "SQLiteColumn",
    "SchemaValidationError",
    "Settings",
    "TableGenError",
    "TableGenerator",
    "configure_logging",
    "get_logger",
    "get_settings",
    "resolve",
]
