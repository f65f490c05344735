"""
Logging configuration for the ScreenshotOne command line tools.

Library code only asks for named loggers; handlers are installed by the CLI
(or the embedding application), never at import time.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, Dict

import orjson

_RESERVED_ATTRS = frozenset(
    {
        "name", "msg", "args", "levelno", "levelname", "pathname", "filename",
        "module", "exc_info", "exc_text", "stack_info", "lineno", "funcName",
        "created", "msecs", "relativeCreated", "thread", "threadName",
        "processName", "process", "taskName", "message",
    }
)


def _json_dumps(payload: Dict[str, Any]) -> str:
    return orjson.dumps(payload, default=str).decode("utf-8")


class JsonFormatter(logging.Formatter):
    """Turn log records into structured JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }
        # Merge context provided via `extra`
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in _RESERVED_ATTRS:
                continue
            payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return _json_dumps(payload)


def configure_logging(default_level: int = logging.INFO) -> None:
    """
    Configure a JSON logger that writes to stderr (stdout may carry a signed URL).
    """

    if getattr(configure_logging, "_configured", False):
        logging.getLogger().setLevel(default_level)
        return

    root_logger = logging.getLogger()
    root_logger.setLevel(default_level)
    # Remove any pre-existing handlers installed by the host environment.
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter())
    root_logger.addHandler(handler)

    configure_logging._configured = True  # type: ignore[attr-defined]


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["JsonFormatter", "configure_logging", "get_logger"]
