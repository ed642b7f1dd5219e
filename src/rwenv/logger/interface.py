"""
Logger interface for rwenv.

Every component that reports diagnostics (the assembler, the CLI) talks
to this interface, never to a concrete logger.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract base class for logging interface.

    Extra keyword arguments are structured fields attached to the
    message (e.g. ``path=".env"``, ``line="FOO"``).
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message.

        Verbose diagnostics (which vars were set, which lines were
        ignored) are emitted at this level.
        """

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical message."""

    @abstractmethod
    def is_verbose(self) -> bool:
        """Return True if debug messages will be emitted."""
