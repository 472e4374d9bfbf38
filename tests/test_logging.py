"""Tests for JSON log formatting."""

import json
import logging
import sys

from crc_ccitt.logging_conf import JsonFormatter


def _record(msg, **extra):
    record = logging.LogRecord("crc_ccitt.test", logging.WARNING, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_basic_fields():
    line = JsonFormatter().format(_record("service error"))
    payload = json.loads(line)
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "crc_ccitt.test"
    assert payload["message"] == "service error"


def test_json_formatter_includes_extra():
    line = JsonFormatter().format(_record("service error", code="ERR_MISSING_PAYLOAD", path="/crc"))
    payload = json.loads(line)
    assert payload["code"] == "ERR_MISSING_PAYLOAD"
    assert payload["path"] == "/crc"
    assert "pathname" not in payload


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord("crc_ccitt.test", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())
    payload = json.loads(JsonFormatter().format(record))
    assert "RuntimeError: boom" in payload["exc_info"]
