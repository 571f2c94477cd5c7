"""Tests for structured logging setup."""

import logging

import pytest
import structlog
from structlog.testing import capture_logs

from monty_hall import logging_config


class TestConfigureLogging:
    """Test configure_logging."""

    def test_json_processors(self):
        """Test that JSON output ends with the JSON renderer."""
        processors = logging_config._get_processors("json", enable_colors=False)
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_processors(self):
        """Test that console output ends with the console renderer."""
        processors = logging_config._get_processors("console", enable_colors=False)
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_sets_root_level(self, restore_logging):
        """Test that the stdlib root logger follows the configured level."""
        logging_config.configure_logging(log_level="warning", log_format="json")
        assert logging.getLogger().level == logging.WARNING

    def test_log_file(self, tmp_path, restore_logging):
        """Test that a log file handler is added and its directory created."""
        log_file = tmp_path / "logs" / "run.log"
        logging_config.configure_logging(log_level="INFO", log_file=str(log_file))

        assert log_file.parent.exists()
        assert any(
            isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers
        )

    def test_log_file_receives_events(self, tmp_path, restore_logging):
        """Test that structlog events are written to the log file."""
        log_file = tmp_path / "run.log"
        logging_config.configure_logging(log_format="json", log_file=str(log_file))

        logging_config.get_logger("monty_hall.tests").info("file_event", games=3)
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text()
        assert "file_event" in content
        assert '"games": 3' in content

    def test_level_filters_file_output(self, tmp_path, restore_logging):
        """Test that events below the configured level are dropped."""
        log_file = tmp_path / "run.log"
        logging_config.configure_logging(
            log_level="WARNING", log_format="json", log_file=str(log_file)
        )

        logger = logging_config.get_logger("monty_hall.tests")
        logger.info("quiet_event")
        logger.warning("loud_event")
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text()
        assert "quiet_event" not in content
        assert "loud_event" in content

    def test_process_info(self):
        """Test that process info is added to events."""
        event = logging_config._add_process_info(None, "info", {"event": "x"})
        assert "process_id" in event


class TestLogPerformance:
    """Test the log_performance decorator."""

    def test_logs_duration(self):
        """Test that successful calls are logged with timing."""

        @logging_config.log_performance()
        def add(a, b):
            return a + b

        with capture_logs() as logs:
            assert add(1, b=2) == 3

        assert logs[0]["event"] == "function_executed"
        assert logs[0]["function"] == "add"
        assert logs[0]["args"] == {"args_count": 1, "kwargs_count": 1}
        assert logs[0]["duration_ms"] >= 0

    def test_logs_failure_and_reraises(self):
        """Test that failures are logged and propagated."""

        @logging_config.log_performance()
        def explode():
            raise RuntimeError("boom")

        with capture_logs() as logs:
            with pytest.raises(RuntimeError, match="boom"):
                explode()

        assert logs[0]["event"] == "function_failed"
        assert logs[0]["error_type"] == "RuntimeError"
        assert logs[0]["log_level"] == "error"

    def test_get_logger_binds_context(self):
        """Test binding context on a new logger."""
        with capture_logs() as logs:
            logging_config.get_logger(__name__, run="abc").info("hello")

        assert logs == [{"event": "hello", "run": "abc", "log_level": "info"}]
