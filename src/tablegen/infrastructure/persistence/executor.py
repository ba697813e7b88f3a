"""Statement executors.

A generator hands its statements to an executor one at a time. Any object
with a ``dialect`` and an async ``execute(statement)`` method qualifies;
``EngineExecutor`` is the SQLAlchemy implementation.
"""

from typing import Protocol, runtime_checkable

from sqlalchemy.ext.asyncio import AsyncEngine

from tablegen.core.logging import get_logger
from tablegen.domain.entities.dialect import Dialect

logger = get_logger(__name__)


@runtime_checkable
class SQLExecutor(Protocol):
    """Runs raw SQL statements against one database."""

    dialect: Dialect

    async def execute(self, statement: str) -> None:
        """Execute a single statement, raising the driver's error on failure."""
        ...


class EngineExecutor:
    """Executes statements through a SQLAlchemy async engine.

    Every statement runs in its own transaction. Statements are passed to
    the driver verbatim, so colons in DDL are never read as bind parameters.
    """

    def __init__(self, engine: AsyncEngine, dialect: Dialect | None = None) -> None:
        """Initialize the executor.

        Args:
            engine: SQLAlchemy async engine.
            dialect: Target dialect. Defaults to the engine's own dialect.

        Raises:
            ConfigurationError: If the engine's dialect is not supported.
        """
        self.engine = engine
        self.dialect = dialect if dialect is not None else Dialect.from_name(engine.dialect.name)

    async def execute(self, statement: str) -> None:
        """Execute a single statement.

        Args:
            statement: Raw SQL text.
        """
        async with self.engine.begin() as conn:
            await conn.exec_driver_sql(statement)
        logger.debug("Statement executed", dialect=self.dialect.value, sql=statement)
