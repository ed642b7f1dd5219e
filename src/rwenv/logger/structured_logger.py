"""
Structured logger on top of the stdlib logging module.

Output goes to stderr so that stdout stays reserved for the environment
listing. Supports a human-readable text format (default) and JSON lines,
plus an optional log file.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .interface import Logger

# LogRecord attributes that are not user-supplied extras
_RECORD_KEYS = frozenset(
    {
        "args", "asctime", "created", "exc_info", "exc_text", "filename",
        "funcName", "levelname", "levelno", "lineno", "module",
        "msecs", "message", "msg", "name", "pathname", "process",
        "processName", "relativeCreated", "stack_info", "thread",
        "threadName", "taskName",
    }
)


def _extras(record: logging.LogRecord) -> Dict[str, Any]:
    return {k: v for k, v in record.__dict__.items() if k not in _RECORD_KEYS}


class JsonFormatter(logging.Formatter):
    """Format each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }
        log_data.update(_extras(record))
        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Text formatter that appends extra fields as ``key='value'`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        s = super().format(record)
        extra_args = _extras(record)
        if extra_args:
            s += " " + " ".join(f"{k}={v!r}" for k, v in extra_args.items())
        return s


class StructuredLogger(Logger):
    """Logger backed by ``logging.getLogger(name)``.

    Example:
        logger = StructuredLogger(name="rwenv", level=logging.DEBUG)
        logger.debug("set env", name="FOO", value="bar")
    """

    def __init__(
        self,
        name: str = "rwenv",
        level: int = logging.WARNING,
        log_file: Optional[str] = None,
        json_format: bool = False,
    ):
        """Initialize the structured logger.

        Args:
            name: Logger name
            level: Logging level (logging.DEBUG, logging.INFO, etc.)
            log_file: Optional file path receiving a copy of every record
            json_format: If True, output logs as JSON; otherwise use text format
        """
        self._name = name
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)

        # Re-initialising must not stack handlers
        if self._logger.hasHandlers():
            self._logger.handlers.clear()

        self._logger.propagate = False

        if json_format:
            formatter: logging.Formatter = JsonFormatter()
        else:
            formatter = TextFormatter("%(name)s: [%(levelname)s] %(message)s")

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        self._logger.addHandler(console_handler)

        if log_file:
            try:
                file_handler = logging.FileHandler(log_file)
            except OSError as e:
                print(f"Failed to setup log file {log_file}: {e}", file=sys.stderr)
            else:
                file_handler.setFormatter(formatter)
                self._logger.addHandler(file_handler)

    def is_verbose(self) -> bool:
        return self._logger.isEnabledFor(logging.DEBUG)

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        extra: Dict[str, Any] = {}
        for k, v in kwargs.items():
            # Reserved LogRecord names would raise inside logging
            extra[f"_{k}" if k in _RECORD_KEYS else k] = v
        self._logger.log(level, message, extra=extra)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, **kwargs)
