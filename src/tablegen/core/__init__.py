"""Core tablegen utilities.

This module exports configuration, logging and the error taxonomy.
"""

from tablegen.core.config import Settings, get_settings
from tablegen.core.exceptions import (
    ColumnError,
    ConfigurationError,
    GeneratorError,
    SchemaValidationError,
    TableGenError,
)
from tablegen.core.logging import LoggingContext, configure_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "LoggingContext",
    "TableGenError",
    "ColumnError",
    "GeneratorError",
    "ConfigurationError",
    "SchemaValidationError",
]
