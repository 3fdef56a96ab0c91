"""Tests for structured logging."""

import json
import logging
import sys

from tvspot.infrastructure.observability import (
    configure_logging,
    get_correlation_id,
    set_correlation_id,
)
from tvspot.infrastructure.observability.logging import (
    CompactExceptionFormatter,
    CorrelationIdFilter,
    CustomJsonFormatter,
)


def _record(msg: str = "hello", exc_info=None) -> logging.LogRecord:
    return logging.LogRecord(
        name="tvspot.test",
        level=logging.ERROR,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestCorrelationId:
    """Test correlation ID functionality."""

    def test_set_and_get_correlation_id(self):
        """Test setting and getting correlation ID."""
        test_id = "refresh-123-abc"
        result = set_correlation_id(test_id)
        assert result == test_id
        assert get_correlation_id() == test_id

    def test_set_correlation_id_generates_uuid_when_none(self):
        """Test that setting None generates a UUID."""
        result = set_correlation_id(None)
        assert result is not None
        assert len(result) == 36
        assert get_correlation_id() == result

    def test_filter_adds_correlation_id(self):
        set_correlation_id("refresh-456")
        record = _record()

        assert CorrelationIdFilter().filter(record) is True
        assert record.correlation_id == "refresh-456"


class TestLoggingConfiguration:
    """Test logging configuration."""

    def test_configure_logging_debug_level(self):
        """Test configuring logging with DEBUG level."""
        configure_logging(log_level="DEBUG", json_format=False, app_name="test-app")
        logger = logging.getLogger("test")
        assert logger.getEffectiveLevel() <= logging.DEBUG

    def test_configure_logging_info_level(self):
        """Test configuring logging with INFO level."""
        configure_logging(log_level="INFO", json_format=False, app_name="test-app")
        logger = logging.getLogger("test")
        assert logger.getEffectiveLevel() == logging.INFO

    def test_configure_logging_json_format(self):
        """Test configuring logging with JSON format."""
        configure_logging(log_level="INFO", json_format=True, app_name="test-app")
        root_logger = logging.getLogger()
        assert any(
            isinstance(handler.formatter, CustomJsonFormatter)
            for handler in root_logger.handlers
        )

    def test_configure_logging_text_format(self):
        """Test configuring logging with text format."""
        configure_logging(log_level="INFO", json_format=False, app_name="test-app")
        root_logger = logging.getLogger()
        assert any(
            isinstance(handler.formatter, CompactExceptionFormatter)
            for handler in root_logger.handlers
        )

    def test_reconfigure_replaces_handlers(self):
        configure_logging(log_level="INFO")
        configure_logging(log_level="WARNING")

        root_logger = logging.getLogger()
        assert len(root_logger.handlers) == 1
        assert root_logger.level == logging.WARNING

    def test_http_libraries_turned_down(self):
        configure_logging(log_level="DEBUG")

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING


class TestFormatters:
    """Formatter output."""

    def test_json_formatter_includes_correlation_id(self):
        formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
        record = _record("Downloaded image")
        record.correlation_id = "refresh-789"

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "Downloaded image"
        assert payload["level"] == "ERROR"
        assert payload["logger"] == "tvspot.test"
        assert payload["correlation_id"] == "refresh-789"

    def test_json_formatter_omits_empty_correlation_id(self):
        formatter = CustomJsonFormatter("%(message)s")
        record = _record()
        record.correlation_id = ""

        payload = json.loads(formatter.format(record))

        assert "correlation_id" not in payload

    def test_compact_formatter_shows_chain_root_cause_first(self):
        try:
            try:
                raise ConnectionError("connection refused")
            except ConnectionError as e:
                raise RuntimeError("image request failed") from e
        except RuntimeError:
            exc_info = sys.exc_info()

        text = CompactExceptionFormatter().formatException(exc_info)
        lines = text.splitlines()

        assert lines[0] == "╰─► ConnectionError: connection refused"
        assert "╰─► RuntimeError: image request failed" in lines
        assert "direct cause" not in text

    def test_compact_formatter_without_exception(self):
        assert CompactExceptionFormatter().formatException((None, None, None)) == ""
