from __future__ import annotations

import logging
import sys

import orjson

from screenshotone.logging_conf import JsonFormatter


def test_json_formatter_merges_extra_fields():
    record = logging.LogRecord("screenshotone.client", logging.DEBUG, __file__, 1, "api_response", None, None)
    record.path = "/take"
    record.status_code = 200

    payload = orjson.loads(JsonFormatter().format(record))

    assert payload == {
        "level": "DEBUG",
        "message": "api_response",
        "logger": "screenshotone.client",
        "path": "/take",
        "status_code": 200,
    }


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad")
    except ValueError:
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())

    payload = orjson.loads(JsonFormatter().format(record))

    assert "ValueError: bad" in payload["exc_info"]
