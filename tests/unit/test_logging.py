"""
Unit tests for logging helpers.
"""

import json
import logging

import pytest

from darkroom_pro.core.logging import (
    ColoredFormatter,
    JSONFormatter,
    LogContext,
    get_log_context,
    get_logger,
    log_operation,
)


def _record(message="hello", level=logging.INFO, **extra):
    record = logging.LogRecord(
        name="darkroom_pro.test",
        level=level,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestGetLogger:
    def test_names_normalized_under_package(self):
        assert get_logger("tests.something").name == "darkroom_pro.tests.something"

    def test_package_names_kept(self):
        assert get_logger("darkroom_pro.chemistry").name == "darkroom_pro.chemistry"


class TestLogContext:
    def test_context_scoped(self):
        assert get_log_context() == {}
        with LogContext(film_key="tri-x-400"):
            with LogContext(developer_key="d76"):
                assert get_log_context() == {"film_key": "tri-x-400", "developer_key": "d76"}
            assert get_log_context() == {"film_key": "tri-x-400"}
        assert get_log_context() == {}


class TestJSONFormatter:
    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(_record()))
        assert data["message"] == "hello"
        assert data["level"] == "INFO"
        assert "context" not in data

    def test_includes_context_and_extras(self):
        with LogContext(film_key="portra-400"):
            data = json.loads(JSONFormatter().format(_record(operation="calculate")))
        assert data["context"] == {"film_key": "portra-400"}
        assert data["operation"] == "calculate"


class TestColoredFormatter:
    def test_shared_record_left_untouched(self):
        record = _record(level=logging.WARNING)
        colored = ColoredFormatter("%(levelname)s %(message)s").format(record)

        assert "\033[33m" in colored
        assert record.levelname == "WARNING"
        assert json.loads(JSONFormatter().format(record))["level"] == "WARNING"


class TestLogOperation:
    @pytest.fixture
    def logger(self):
        logger = get_logger("tests.log_operation")
        logger.setLevel(logging.DEBUG)
        return logger

    def test_logs_start_and_completion(self, logger, caplog):
        with caplog.at_level(logging.DEBUG, logger=logger.name):
            with log_operation(logger, "mixing", level=logging.DEBUG):
                pass
        messages = [r.getMessage() for r in caplog.records]
        assert "Starting: mixing" in messages
        assert "Completed: mixing" in messages

    def test_failure_logged_and_reraised(self, logger, caplog):
        with caplog.at_level(logging.DEBUG, logger=logger.name):
            with pytest.raises(ValueError):
                with log_operation(logger, "mixing"):
                    raise ValueError("spilled")
        failures = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert failures
        assert failures[0].error_type == "ValueError"
