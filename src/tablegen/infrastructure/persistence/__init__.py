"""Persistence: executors, engine management and table generators."""

from tablegen.infrastructure.persistence.database import DatabaseManager
from tablegen.infrastructure.persistence.executor import EngineExecutor, SQLExecutor
from tablegen.infrastructure.persistence.table_generator import TableGenerator

__all__ = [
    "DatabaseManager",
    "EngineExecutor",
    "SQLExecutor",
    "TableGenerator",
]
