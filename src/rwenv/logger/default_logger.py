"""
Minimal stream logger.

Writes one line per message to a text stream (stderr by default) without
going through the stdlib logging machinery. Handy when a caller needs the
diagnostics of a single assembly in a buffer.
"""

import sys
from datetime import datetime, timezone
from typing import Any, List, Optional, TextIO

from .interface import Logger

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40, "CRITICAL": 50}


class DefaultLogger(Logger):
    """Logger that prints formatted lines to a stream.

    Example:
        buf = io.StringIO()
        logger = DefaultLogger(output=buf, level="DEBUG")
        assemble(config, logger=logger)
        print(buf.getvalue())
    """

    def __init__(
        self,
        name: str = "rwenv",
        output: Optional[TextIO] = None,
        level: str = "WARNING",
        include_timestamp: bool = False,
    ):
        """Initialize the stream logger.

        Args:
            name: Logger name (included in output for identification)
            output: Output stream (default: stderr at call time)
            level: Minimum level name to emit
            include_timestamp: Whether to prefix messages with a UTC timestamp
        """
        self._name = name
        self._output = output
        self._threshold = _LEVELS.get(level.upper(), _LEVELS["WARNING"])
        self._include_timestamp = include_timestamp

    def is_verbose(self) -> bool:
        return self._threshold <= _LEVELS["DEBUG"]

    def _format_message(self, level: str, message: str, **kwargs: Any) -> str:
        parts: List[str] = []

        if self._include_timestamp:
            parts.append(datetime.now(timezone.utc).isoformat())

        parts.append(f"[{level}]")
        parts.append(f"[{self._name}]")
        parts.append(message)

        if kwargs:
            parts.append(" ".join(f"{k}={v!r}" for k, v in kwargs.items()))

        return " ".join(parts)

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        if _LEVELS[level] < self._threshold:
            return
        output = self._output if self._output is not None else sys.stderr
        print(self._format_message(level, message, **kwargs), file=output, flush=True)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log("CRITICAL", message, **kwargs)
