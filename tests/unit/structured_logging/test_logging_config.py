"""Unit tests for structlog configuration."""

import json
import logging

import pytest
import structlog

from notifications.logging import setup_logging


@pytest.fixture
def restore_logging():
    """Restore root handlers and structlog config after the test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_configures_file_and_console_handlers(self, tmp_path, restore_logging):
        """Test a rotating file handler and a console handler are installed."""
        log_file = tmp_path / "logs" / "service.log"

        setup_logging(log_file_path=str(log_file), log_level="debug")

        root_logger = logging.getLogger()
        handler_types = {type(h).__name__ for h in root_logger.handlers}
        assert handler_types == {"RotatingFileHandler", "StreamHandler"}
        assert root_logger.level == logging.DEBUG
        assert log_file.parent.is_dir()

    def test_file_output_is_json(self, tmp_path, restore_logging):
        """Test events are written to the file as JSON lines."""
        log_file = tmp_path / "service.log"
        setup_logging(log_file_path=str(log_file), log_level="INFO")

        structlog.get_logger("tests").info("notification_created", channel="push")
        for handler in logging.getLogger().handlers:
            handler.flush()

        records = [json.loads(line) for line in log_file.read_text().splitlines()]
        created = [r for r in records if r["event"] == "notification_created"]
        assert created
        assert created[0]["channel"] == "push"
        assert created[0]["level"] == "info"
        assert "service_name" in created[0]

    def test_unknown_level_falls_back_to_info(self, tmp_path, restore_logging):
        """Test an unknown level name falls back to INFO."""
        setup_logging(log_file_path=str(tmp_path / "x.log"), log_level="chatty")

        assert logging.getLogger().level == logging.INFO
