"""Pytest configuration for all tests."""

from typing import AsyncGenerator, Callable
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from tablegen.domain.entities.dialect import Dialect
from tablegen.infrastructure.persistence.table_generator import TableGenerator


class FakeExecutor:
    """Executor double that records statements instead of running them."""

    def __init__(self, dialect: Dialect) -> None:
        self.dialect = dialect
        self.execute = AsyncMock(return_value=None)

    @property
    def statements(self) -> list[str]:
        return [call.args[0] for call in self.execute.await_args_list]


class TestGenerator(TableGenerator):
    """Generator for the ``test_table`` table."""

    __test__ = False

    table = "test_table"


@pytest.fixture
def make_executor() -> Callable[[Dialect], FakeExecutor]:
    """Factory for fake executors bound to a dialect."""
    return FakeExecutor


@pytest.fixture
def mysql_generator() -> TestGenerator:
    """Generator backed by a fake MySQL executor."""
    return TestGenerator(executor=FakeExecutor(Dialect.MYSQL))


@pytest.fixture
def postgresql_generator() -> TestGenerator:
    """Generator backed by a fake PostgreSQL executor."""
    return TestGenerator(executor=FakeExecutor(Dialect.POSTGRESQL))


@pytest.fixture
def sqlite_generator() -> TestGenerator:
    """Generator backed by a fake SQLite executor."""
    return TestGenerator(executor=FakeExecutor(Dialect.SQLITE))


@pytest_asyncio.fixture
async def sqlite_engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory SQLite engine shared across connections."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    yield engine
    await engine.dispose()


@pytest.fixture
def generator_class() -> type[TestGenerator]:
    """The ``test_table`` generator class, for tests that configure it themselves."""
    return TestGenerator
