"""Tests for centralized logging configuration."""

import json
import logging
import os
from unittest.mock import patch

import pytest

from src.config.logging_config import (
    JSONFormatter,
    LoggingConfig,
    configure_logging,
    reset_logging,
)


def _flush():
    for handler in logging.getLogger().handlers:
        handler.flush()


class TestLoggingConfig:
    """Test LoggingConfig class."""

    def test_default_configuration(self):
        """Test default logging configuration."""
        config = LoggingConfig()

        assert config.log_level == "INFO"
        assert config.log_format == "standard"
        assert config.log_file is None
        assert config.enable_console is True
        assert config.max_file_size == 5 * 1024 * 1024
        assert config.backup_count == 3

    def test_level_is_upper_cased(self):
        assert LoggingConfig(log_level="debug").log_level == "DEBUG"

    def test_environment_variable_override(self):
        """Test configuration from environment variables."""
        with patch.dict(
            os.environ,
            {
                "LOG_LEVEL": "DEBUG",
                "LOG_FORMAT": "json",
                "LOG_FILE": "/tmp/clockify-reports.log",
                "LOG_CONSOLE": "false",
            },
        ):
            config = LoggingConfig.from_env()

        assert config.log_level == "DEBUG"
        assert config.log_format == "json"
        assert config.log_file == "/tmp/clockify-reports.log"
        assert config.enable_console is False

    def test_from_env_default_level(self):
        with patch.dict(os.environ, {}, clear=True):
            config = LoggingConfig.from_env(default_level="WARNING")

        assert config.log_level == "WARNING"
        assert config.log_file is None
        assert config.enable_console is True

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            LoggingConfig(log_level="INVALID")

    def test_invalid_log_format(self):
        with pytest.raises(ValueError, match="Invalid log format"):
            LoggingConfig(log_format="invalid")


class TestConfigureLogging:
    """Test configure_logging function."""

    def teardown_method(self):
        """Reset logging after each test."""
        reset_logging()

    def test_console_handler_configuration(self):
        configure_logging(LoggingConfig(log_level="DEBUG", enable_console=True))

        root_logger = logging.getLogger()
        stream_handlers = [
            h for h in root_logger.handlers if isinstance(h, logging.StreamHandler)
        ]
        assert len(stream_handlers) == 1
        assert root_logger.level == logging.DEBUG

    def test_log_level_filtering(self):
        configure_logging(LoggingConfig(log_level="WARNING"))

        root_logger = logging.getLogger()
        assert root_logger.level == logging.WARNING
        for handler in root_logger.handlers:
            assert handler.level == logging.WARNING

    def test_file_handler_configuration(self, tmp_path):
        log_file = tmp_path / "logs" / "run.log"
        configure_logging(
            LoggingConfig(
                log_level="INFO", enable_console=False, log_file=str(log_file)
            )
        )

        logging.getLogger("test_module").info("Test file message")
        _flush()

        assert "Test file message" in log_file.read_text()

    def test_standard_format(self):
        configure_logging(LoggingConfig(log_level="INFO", log_format="standard"))

        for handler in logging.getLogger().handlers:
            assert handler.formatter is not None
            assert not isinstance(handler.formatter, JSONFormatter)

    def test_json_format_structure(self, tmp_path):
        log_file = tmp_path / "run.log"
        configure_logging(
            LoggingConfig(
                log_level="INFO",
                log_format="json",
                enable_console=False,
                log_file=str(log_file),
            )
        )

        logging.getLogger("test_module").info(
            "JSON format test", extra={"custom_field": "value"}
        )
        _flush()

        log_entry = json.loads(log_file.read_text().strip())
        assert log_entry["level"] == "INFO"
        assert log_entry["logger"] == "test_module"
        assert log_entry["message"] == "JSON format test"
        assert log_entry["custom_field"] == "value"
        assert "args" not in log_entry

    def test_json_includes_exception(self, tmp_path):
        log_file = tmp_path / "run.log"
        configure_logging(
            LoggingConfig(log_format="json", enable_console=False, log_file=str(log_file))
        )

        try:
            raise RuntimeError("boom")
        except RuntimeError:
            logging.getLogger("test_module").exception("Failed")
        _flush()

        log_entry = json.loads(log_file.read_text().strip())
        assert "RuntimeError: boom" in log_entry["exception"]

    def test_rotating_file_handler(self, tmp_path):
        log_file = tmp_path / "run.log"
        configure_logging(
            LoggingConfig(
                log_level="INFO",
                enable_console=False,
                log_file=str(log_file),
                max_file_size=100,  # Very small for testing
                backup_count=2,
            )
        )

        logger = logging.getLogger("test_module")
        for i in range(50):
            logger.info(f"Log message {i} with some padding to increase size")
        _flush()

        assert len(list(tmp_path.glob("run.log.*"))) > 0

    def test_quiets_http_client_loggers(self):
        configure_logging(LoggingConfig(log_level="DEBUG"))

        assert logging.getLogger("urllib3").level == logging.WARNING
        assert logging.getLogger("googleapiclient.discovery_cache").level == (
            logging.ERROR
        )

    def test_reconfiguration(self):
        """Test reconfiguration replaces handlers."""
        configure_logging(LoggingConfig(log_level="INFO"))
        root_logger = logging.getLogger()
        initial_handler_count = len(root_logger.handlers)

        configure_logging(LoggingConfig(log_level="DEBUG"))

        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == initial_handler_count


class TestResetLogging:
    """Test reset_logging function."""

    def test_reset_removes_handlers(self):
        configure_logging(LoggingConfig(log_level="INFO"))
        root_logger = logging.getLogger()
        assert len(root_logger.handlers) > 0

        reset_logging()

        assert len(root_logger.handlers) == 0

    def test_reset_sets_default_level(self):
        configure_logging(LoggingConfig(log_level="DEBUG"))

        reset_logging()

        assert logging.getLogger().level == logging.WARNING
