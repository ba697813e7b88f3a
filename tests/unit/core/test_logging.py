"""Tests for structured logging configuration."""

import json

import pytest
import structlog
from structlog.testing import LogCapture

from tablegen.core.config import Settings
from tablegen.core.logging import (
    LoggingContext,
    add_logger_name,
    configure_logging,
    get_logger,
    rename_message_field,
)


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


def test_rename_message_field():
    """Test that 'event' is renamed to 'message'."""
    event_dict = rename_message_field(None, "info", {"event": "Table created", "table_name": "users"})
    assert event_dict == {"message": "Table created", "table_name": "users"}


def test_add_logger_name_default():
    """Test that loggers without a name are reported as tablegen."""
    assert add_logger_name(object(), "info", {})["logger"] == "tablegen"


def test_json_output(capsys):
    """Test that production logging renders JSON lines."""
    settings = Settings(environment="production", log_format="json", log_level="INFO", _env_file=None)
    configure_logging(settings)

    get_logger("tablegen.test").info("Table created", table_name="users")

    line = capsys.readouterr().out.strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["message"] == "Table created"
    assert payload["table_name"] == "users"
    assert payload["level"] == "info"
    assert "timestamp" in payload


def test_level_filtering(capsys):
    """Test that records below the configured level are dropped."""
    settings = Settings(environment="production", log_format="json", log_level="WARNING", _env_file=None)
    configure_logging(settings)

    get_logger().info("hidden")
    get_logger().warning("shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out


def test_logging_context_binds_and_unbinds():
    """Test that LoggingContext adds keys only inside the block."""
    capture = LogCapture()
    structlog.configure(processors=[structlog.contextvars.merge_contextvars, capture])

    logger = get_logger()
    with LoggingContext(table="users"):
        logger.info("inside")
    logger.info("outside")

    assert capture.entries[0]["table"] == "users"
    assert "table" not in capture.entries[1]


@pytest.fixture
def captured():
    """Capture log entries with context variables merged in."""
    capture = LogCapture()
    structlog.configure(processors=[structlog.contextvars.merge_contextvars, capture])
    return capture


@pytest.mark.asyncio
async def test_schema_logs_progress(sqlite_generator, captured):
    """Test that table creation is logged with the table bound to every entry."""
    await sqlite_generator.schema(sqlite_generator.primary_key())

    events = [entry["event"] for entry in captured.entries]
    assert events[0] == "Creating table"
    assert events[-1] == "Table created successfully"
    assert all(entry["table_name"] == "test_table" for entry in captured.entries)
    assert all(entry["dialect"] == "sqlite" for entry in captured.entries)


@pytest.mark.asyncio
async def test_schema_logs_failed_statement(sqlite_generator, captured):
    """Test that a failing statement is logged before the error propagates."""
    sqlite_generator.executor.execute.side_effect = RuntimeError("boom")

    with pytest.raises(RuntimeError):
        await sqlite_generator.schema(sqlite_generator.primary_key())

    failed = [entry for entry in captured.entries if entry["event"] == "Statement failed"]
    assert len(failed) == 1
    assert failed[0]["log_level"] == "error"
    assert failed[0]["table_name"] == "test_table"
    assert failed[0]["sql"].startswith("CREATE TABLE test_table")

    get_logger().info("after")
    assert "table_name" not in captured.entries[-1]


def test_logging_is_exported_from_the_package():
    """Test that callers can configure logging from the top-level package."""
    import tablegen

    assert tablegen.configure_logging is configure_logging
    assert tablegen.LoggingContext is LoggingContext
