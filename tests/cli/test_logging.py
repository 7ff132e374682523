"""
Tests for structured logging functionality.
"""

import json
import logging
import sys

import pytest

from outline_cli.cli.logging import (
    JSONFormatter,
    RedactingFilter,
    TextFormatter,
    setup_logging,
)


def make_record(msg="Test message", args=(), exc_info=None, level=logging.INFO):
    return logging.LogRecord(
        name="TestLogger",
        level=level,
        pathname="test.py",
        lineno=42,
        msg=msg,
        args=args,
        exc_info=exc_info,
    )


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestJSONFormatter:
    """Tests for the JSON log formatter."""

    def test_basic_format(self):
        parsed = json.loads(JSONFormatter().format(make_record()))

        assert parsed["level"] == "INFO"
        assert parsed["logger"] == "TestLogger"
        assert parsed["message"] == "Test message"
        assert parsed["timestamp"].endswith("Z")
        assert len(parsed["timestamp"]) == 24

    def test_message_args(self):
        parsed = json.loads(JSONFormatter().format(make_record("Processing %s items", (5,))))
        assert parsed["message"] == "Processing 5 items"

    def test_exception(self):
        try:
            raise ValueError("Test error")
        except ValueError:
            record = make_record(exc_info=sys.exc_info(), level=logging.ERROR)

        parsed = json.loads(JSONFormatter().format(record))

        assert parsed["exception"]["type"] == "ValueError"
        assert parsed["exception"]["message"] == "Test error"
        assert "traceback" in parsed["exception"]

    def test_extra_fields(self):
        record = make_record()
        record.document_id = "abc123"

        parsed = json.loads(JSONFormatter().format(record))

        assert parsed["context"] == {"document_id": "abc123"}

    def test_static_fields_and_location(self):
        formatter = JSONFormatter(include_location=True, static_fields={"service": "outline-cli"})
        parsed = json.loads(formatter.format(make_record()))

        assert parsed["service"] == "outline-cli"
        assert parsed["location"]["line"] == 42

    def test_optional_fields_excluded(self):
        formatter = JSONFormatter(
            include_timestamp=False, include_level=False, include_logger=False
        )
        assert json.loads(formatter.format(make_record())) == {"message": "Test message"}


class TestTextFormatter:
    """Tests for the text log formatter."""

    def test_basic_format(self):
        output = TextFormatter(use_colors=False).format(make_record())

        assert "TestLogger" in output
        assert "INFO" in output
        assert "Test message" in output

    def test_context(self):
        record = make_record()
        record.document_id = "abc123"

        output = TextFormatter(use_colors=False, include_context=True).format(record)

        assert "document_id=abc123" in output


class TestRedactingFilter:
    """Tests for keeping secrets out of logs."""

    def test_redacts_message_and_args(self):
        redacting_filter = RedactingFilter(["secret-key"])
        record = make_record("Bearer %s sent", ("secret-key",))

        assert redacting_filter.filter(record) is True
        assert record.getMessage() == "Bearer *** sent"

    def test_empty_secret_ignored(self):
        record = make_record("Processing %s items", (5,))
        RedactingFilter([""]).filter(record)
        assert record.args == (5,)
        assert record.getMessage() == "Processing 5 items"

    def test_secret_registered_later(self):
        redacting_filter = RedactingFilter()
        redacting_filter.register_secret("late-key")
        record = make_record("using late-key")

        redacting_filter.filter(record)

        assert record.getMessage() == "using ***"

    def test_no_secrets_leaves_record(self):
        record = make_record("Processing %s items", (5,))
        RedactingFilter().filter(record)
        assert record.args == (5,)


@pytest.mark.usefixtures("restore_root_logger")
class TestSetupLogging:
    """Tests for setup_logging."""

    def test_text_logging(self):
        setup_logging(level=logging.INFO, log_format="text")

        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, TextFormatter)

    def test_json_logging(self):
        setup_logging(level=logging.DEBUG, log_format="json", static_fields={"service": "t"})

        formatter = logging.getLogger().handlers[0].formatter
        assert isinstance(formatter, JSONFormatter)
        assert formatter.static_fields == {"service": "t"}

    def test_replaces_existing_handlers(self):
        root = logging.getLogger()
        root.addHandler(logging.NullHandler())
        root.addHandler(logging.NullHandler())

        setup_logging()

        assert len(root.handlers) == 1

    def test_suppresses_noisy_loggers(self):
        setup_logging()
        assert logging.getLogger("urllib3").level == logging.WARNING

    def test_returns_filter_for_later_secrets(self):
        redacting_filter = setup_logging(secrets=["a-secret"])
        assert redacting_filter.redact("token a-secret sent") == "token *** sent"
        assert redacting_filter in logging.getLogger().handlers[0].filters
