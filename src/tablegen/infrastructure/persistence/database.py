"""Database engine management using SQLAlchemy 2.0 async.

Supports SQLite (aiosqlite), PostgreSQL (asyncpg) and MySQL (aiomysql)
through the configured database URL.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from tablegen.core.config import Settings, get_settings
from tablegen.core.logging import get_logger
from tablegen.infrastructure.persistence.executor import EngineExecutor

logger = get_logger(__name__)


class DatabaseManager:
    """Owns the async engine that generated DDL runs against."""

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the database manager.

        Args:
            settings: Optional settings. Loaded from the environment if omitted.
        """
        self.settings = settings or get_settings()
        self._engine: AsyncEngine | None = None

    @property
    def engine(self) -> AsyncEngine:
        """Get or create the database engine.

        Returns:
            AsyncEngine: SQLAlchemy async engine instance.
        """
        if self._engine is None:
            self._engine = create_async_engine(
                self.settings.database_url,
                echo=self.settings.db_echo,
            )
            logger.info(
                "Database engine created",
                database_url=self._engine.url.render_as_string(hide_password=True),
            )
        return self._engine

    def executor(self) -> EngineExecutor:
        """Create an executor bound to the engine."""
        return EngineExecutor(self.engine)

    async def disconnect(self) -> None:
        """Close the database engine and all connections."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            logger.info("Database engine disposed")
