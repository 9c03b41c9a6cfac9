"""Unit tests for logging configuration."""
from __future__ import annotations

import json
import logging
import sys

import pytest

from user_directory.core.settings import LoggingSettings
from user_directory.infra.logging import config as logging_config
from user_directory.infra.logging import configure_logging, setup_logging
from user_directory.infra.logging.formatters import JSONFormatter


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after the test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    logging_config._LOGGING_INITIALIZED = False
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.captureWarnings(False)
    logging_config._LOGGING_INITIALIZED = False


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="user_directory.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Invalid cursor: %s",
        args=("not base64",),
        exc_info=None,
    )
    record.__dict__.update(extra)
    return record


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_single_line_json(self):
        output = JSONFormatter(static={"service": "user-directory"}).format(
            make_record(cursor="abc")
        )

        data = json.loads(output)
        assert "\n" not in output
        assert data["level"] == "WARNING"
        assert data["logger"] == "user_directory.test"
        assert data["message"] == "Invalid cursor: not base64"
        assert data["service"] == "user-directory"
        assert data["cursor"] == "abc"
        assert data["timestamp"].endswith("Z")

    def test_exception_is_flattened(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record()
            record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(record))

        assert "ValueError: boom" in data["exception"]


class TestConfigureLogging:
    """Tests for configure_logging and setup_logging."""

    def test_json_console_handler(self, restore_root_logger):
        applied = configure_logging(log_level="debug", json_logs=True, service_name="svc")

        assert applied["root"]["level"] == "DEBUG"
        assert applied["formatters"]["json"]["static"] == {"service": "svc"}
        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)

    def test_text_formatter(self, restore_root_logger):
        applied = configure_logging(json_logs=False)

        assert "text" in applied["formatters"]
        assert not isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)

    def test_console_disabled(self, restore_root_logger):
        configure_logging(console_enabled=False)

        assert restore_root_logger.handlers == []

    def test_setup_logging_runs_once(self, restore_root_logger, monkeypatch):
        calls = []
        monkeypatch.setattr(logging_config, "configure_logging", lambda **kw: calls.append(kw))

        setup_logging(LoggingSettings(level="ERROR"))
        setup_logging(LoggingSettings(level="DEBUG"))
        setup_logging(LoggingSettings(level="DEBUG"), force=True, json_logs=False)

        assert [call["log_level"] for call in calls] == ["ERROR", "DEBUG"]
        assert calls[1]["json_logs"] is False
