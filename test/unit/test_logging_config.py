"""Unit tests for logging configuration."""

import pytest
from loguru import logger

from autoeyes.logging_config import add_logger_sink, configure_logging


@pytest.fixture
def messages():
    collected = []
    yield collected
    logger.remove()


def test_info_format_uses_short_name(messages):
    logger.remove()
    add_logger_sink(debug=False, sink=messages.append)

    logger.debug("hidden")
    logger.info("shown")

    assert len(messages) == 1
    assert "test_logging_config.test_info_format_uses_short_name" in messages[0]
    assert "shown" in messages[0]


def test_debug_format_includes_debug_records(messages):
    logger.remove()
    handler_id = add_logger_sink(debug=True, sink=messages.append)

    logger.debug("detail")

    assert len(messages) == 1
    assert "DEBUG" in messages[0]
    assert "detail" in messages[0]

    logger.remove(handler_id)
    logger.debug("after removal")
    assert len(messages) == 1


def test_configure_logging_adds_console_and_file(messages, tmp_path):
    log_file = tmp_path / "autoeyes.log"

    handler_ids = configure_logging(True, messages.append, log_file)
    logger.info("to both sinks")

    assert len(handler_ids) == 2
    assert any("to both sinks" in message for message in messages)
    logger.remove()
    assert "to both sinks" in log_file.read_text()


def test_configure_logging_console_only(messages):
    handler_ids = configure_logging(False, messages.append)
    logger.debug("filtered")
    logger.warning("kept")

    assert len(handler_ids) == 1
    assert len(messages) == 1
    assert "kept" in messages[0]
