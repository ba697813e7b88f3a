"""Tests for DatabaseManager."""

import pytest

from tablegen.core.config import Settings
from tablegen.domain.entities.dialect import Dialect
from tablegen.infrastructure.persistence.database import DatabaseManager
from tablegen.infrastructure.persistence.executor import EngineExecutor


@pytest.fixture
def settings():
    return Settings(database_url="sqlite+aiosqlite:///:memory:", db_echo=False)


def test_engine_is_created_lazily(settings):
    """Test that the engine is only created on first access and then reused."""
    manager = DatabaseManager(settings)
    assert manager._engine is None

    engine = manager.engine
    assert engine is manager.engine
    assert engine.dialect.name == "sqlite"


def test_executor_uses_engine(settings):
    """Test that executors share the manager's engine."""
    manager = DatabaseManager(settings)
    executor = manager.executor()

    assert isinstance(executor, EngineExecutor)
    assert executor.engine is manager.engine
    assert executor.dialect is Dialect.SQLITE


@pytest.mark.asyncio
async def test_disconnect(settings):
    """Test that disconnect disposes the engine and allows reconnecting."""
    manager = DatabaseManager(settings)
    first = manager.engine

    await manager.disconnect()
    assert manager._engine is None

    assert manager.engine is not first
    await manager.disconnect()


@pytest.mark.asyncio
async def test_disconnect_without_engine(settings):
    """Test that disconnecting before connecting is a no-op."""
    manager = DatabaseManager(settings)
    await manager.disconnect()
    assert manager._engine is None


@pytest.mark.asyncio
async def test_executor_runs_statements(settings):
    """Test running a statement through a manager's executor."""
    manager = DatabaseManager(settings)
    try:
        await manager.executor().execute("CREATE TABLE things (id INTEGER);")
    finally:
        await manager.disconnect()
