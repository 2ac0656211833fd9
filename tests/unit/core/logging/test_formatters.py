"""
Tests for log formatters.
"""

import json
import logging

import pytest

from http_client_telemetry.core.logging.formatters import (
    JSONFormatter,
    TextFormatter,
    extra_fields,
    get_formatter,
)


def _record(msg="Test message", **extra):
    record = logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="test.py",
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_basic_format(self):
        data = json.loads(JSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "test"
        assert data["message"] == "Test message"
        assert "timestamp" in data

    def test_extra_fields(self):
        data = json.loads(JSONFormatter().format(
            _record("Request completed", method="GET", status_code=200)
        ))

        assert data["method"] == "GET"
        assert data["status_code"] == 200

    def test_non_serializable_extra(self):
        data = json.loads(JSONFormatter().format(_record(obj=object())))
        assert data["obj"].startswith("<object object")

    def test_exception_info(self):
        try:
            raise ValueError("boom")
        except ValueError:
            import sys
            record = _record()
            record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in data["exception"]


class TestTextFormatter:
    """Tests for TextFormatter."""

    def test_format(self):
        output = TextFormatter().format(_record("Request started", method="GET"))

        assert "[INFO] [test] Request started" in output
        assert output.endswith("method=GET")

    def test_private_fields_skipped(self):
        output = TextFormatter().format(_record(_internal="x"))
        assert "_internal" not in output


def test_extra_fields_only_custom():
    assert extra_fields(_record(host="api.example.com")) == {"host": "api.example.com"}


@pytest.mark.parametrize("name,cls", [("json", JSONFormatter), ("TEXT", TextFormatter)])
def test_get_formatter(name, cls):
    assert isinstance(get_formatter(name), cls)


def test_get_formatter_unknown():
    with pytest.raises(ValueError, match="Unknown format type"):
        get_formatter("xml")
